import asyncio
from loguru import logger
from app.celery_app import app
from app.db.session import TaskSessionLocal
from app.db.store import SqlMessageStore
from app.services.mailbox import Mailbox


async def _send(user_id, recipient_id, subject, body, sent_at, sender_id) -> int:
    async with TaskSessionLocal() as session:
        mailbox = Mailbox(SqlMessageStore(session), user_id)
        return await mailbox.send(recipient_id, subject, body, sent_at=sent_at, sender_id=sender_id)


@app.task(name="send_message_task")
def send_message_task(
    user_id: int,
    recipient_id: int,
    subject: str,
    body: str,
    sent_at: str | None = None,
    sender_id: int | None = None,
) -> int:
    msg_id = asyncio.run(_send(user_id, recipient_id, subject, body, sent_at, sender_id))
    logger.info(f"send_message_task stored message {msg_id}")
    return msg_id
