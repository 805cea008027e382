from alembic import context
from app.db.models import Base
from app.db.session import sync_engine

target_metadata = Base.metadata


def run_migrations_offline() -> None:
    context.configure(url=str(sync_engine.url), target_metadata=target_metadata, literal_binds=True)
    with context.begin_transaction():
        context.run_migrations()


def run_migrations_online() -> None:
    with sync_engine.connect() as connection:
        context.configure(connection=connection, target_metadata=target_metadata)
        with context.begin_transaction():
            context.run_migrations()


if context.is_offline_mode():
    run_migrations_offline()
else:
    run_migrations_online()
