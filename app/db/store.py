from typing import Any, Iterable, Protocol
from sqlalchemy import Table, select, insert, update, desc
from sqlalchemy.ext.asyncio import AsyncSession
from app.db.models import Message


class MessageStore(Protocol):
    async def insert(self, fields: dict[str, Any]) -> int: ...

    async def query(
        self,
        columns: Iterable[str] | None,
        filters: dict[str, Any],
        order_by: str | None = None,
        descending: bool = False,
        limit: int | None = None,
    ) -> list[dict[str, Any]]: ...

    async def update(self, fields: dict[str, Any], filters: dict[str, Any]) -> bool: ...


class SqlMessageStore:
    """Message table access over an async SQLAlchemy session.

    Writes commit immediately, so a failed insert or update never leaves a
    partial row behind. Database errors are not caught here.
    """

    def __init__(self, session: AsyncSession, table: Table = Message.__table__):
        self.session = session
        self.table = table

    def _where(self, filters: dict[str, Any]):
        return [self.table.c[name] == value for name, value in filters.items()]

    async def insert(self, fields: dict[str, Any]) -> int:
        res = await self.session.execute(insert(self.table).values(**fields))
        await self.session.commit()
        return res.inserted_primary_key[0]

    async def query(self, columns, filters, order_by=None, descending=False, limit=None):
        cols = [self.table.c[name] for name in columns] if columns else [self.table]
        stmt = select(*cols).where(*self._where(filters))
        if order_by is not None:
            col = self.table.c[order_by]
            stmt = stmt.order_by(desc(col) if descending else col)
        if limit is not None:
            stmt = stmt.limit(limit)

        q = await self.session.execute(stmt)
        return [dict(r._mapping) for r in q.all()]

    async def update(self, fields: dict[str, Any], filters: dict[str, Any]) -> bool:
        res = await self.session.execute(
            update(self.table).where(*self._where(filters)).values(**fields)
        )
        await self.session.commit()
        return res.rowcount > 0
