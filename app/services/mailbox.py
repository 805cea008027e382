from datetime import datetime, timezone
from enum import Enum
from loguru import logger

from app.db.schemas import MessageOut
from app.db.store import MessageStore

LISTED_COLUMNS = ("id", "sender_id", "recipient_id", "subject", "body", "sent_at")


class Folder(Enum):
    SENT = ("sent", "sender_id", "deleted_by_sender")
    RECEIVED = ("received", "recipient_id", "deleted_by_recipient")

    def __init__(self, label: str, owner_column: str, deleted_column: str):
        self.label = label
        self.owner_column = owner_column
        self.deleted_column = deleted_column

    @classmethod
    def parse(cls, value) -> "Folder | None":
        if isinstance(value, cls):
            return value
        for folder in cls:
            if folder.label == value:
                return folder
        return None


class Party(Enum):
    SENDER = "sender"
    RECIPIENT = "recipient"
    NONE = "none"

    @property
    def folder(self) -> Folder | None:
        return {Party.SENDER: Folder.SENT, Party.RECIPIENT: Folder.RECEIVED}.get(self)


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class Mailbox:
    """Private messages as seen by one user.

    Sender and recipient each keep their own copy of a message: deleting
    hides it from the caller's folder only, the other side is untouched.
    """

    def __init__(self, store: MessageStore, user_id: int):
        self.store = store
        self.user_id = int(user_id)

    async def send(
        self,
        recipient_id: int,
        subject: str,
        body: str,
        sent_at: datetime | str | None = None,
        sender_id: int | None = None,
    ) -> int:
        if not sent_at:
            sent_at = utc_now()
        elif isinstance(sent_at, str):
            sent_at = datetime.fromisoformat(sent_at)

        # stored as UTC; naive input is taken to be UTC already
        if sent_at.tzinfo is None:
            sent_at = sent_at.replace(tzinfo=timezone.utc)
        else:
            sent_at = sent_at.astimezone(timezone.utc)

        data = {
            "sender_id": self.user_id if sender_id is None else int(sender_id),
            "recipient_id": int(recipient_id),
            "subject": subject or "",
            "body": body or "",
            "sent_at": sent_at,
            "deleted_by_sender": False,
            "deleted_by_recipient": False,
        }
        message_id = await self.store.insert(data)
        logger.debug(f"message {message_id}: {data['sender_id']} -> {data['recipient_id']}")
        return message_id

    async def list_messages(self, folder: Folder | str) -> list[MessageOut]:
        folder = Folder.parse(folder)
        if folder is None:
            return []

        rows = await self.store.query(
            LISTED_COLUMNS,
            {folder.owner_column: self.user_id, folder.deleted_column: False},
            order_by="sent_at",
            descending=True,
        )
        return [MessageOut(**row) for row in rows]

    async def classify(self, message_id: int) -> Party:
        rows = await self.store.query(
            ("sender_id", "recipient_id"), {"id": int(message_id)}, limit=1
        )
        if not rows:
            return Party.NONE

        # recipient wins for messages a user sent to themselves
        if int(rows[0]["recipient_id"]) == self.user_id:
            return Party.RECIPIENT
        if int(rows[0]["sender_id"]) == self.user_id:
            return Party.SENDER
        return Party.NONE

    async def delete(self, message_id: int) -> bool:
        party = await self.classify(message_id)
        if party is Party.NONE:
            logger.info(f"user {self.user_id} may not delete message {message_id}")
            return False

        column = party.folder.deleted_column
        ok = await self.store.update({column: True}, {"id": int(message_id)})
        logger.debug(f"message {message_id}: {column} set by {self.user_id}")
        return ok
