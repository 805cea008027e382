from fastapi import APIRouter, Depends, Header, Request
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession
from app.core import server
from app.db.session import get_async_session
from app.db.schemas import MessageIn, MessageOut, MessageCreated, DeleteOut, ServerInfo
from app.db.store import SqlMessageStore
from app.services.mailbox import Mailbox

router = APIRouter()


async def get_mailbox(
    x_user_id: int = Header(...),
    session: AsyncSession = Depends(get_async_session),
) -> Mailbox:
    return Mailbox(SqlMessageStore(session), x_user_id)


@router.get("/health")
async def health():
    return "ok"


@router.post("/messages", response_model=MessageCreated, status_code=201)
async def create_message(body: MessageIn, mailbox: Mailbox = Depends(get_mailbox)):
    message_id = await mailbox.send(
        body.recipient_id, body.subject, body.body, sent_at=body.sent_at, sender_id=body.sender_id
    )
    return {"id": message_id}


@router.get("/messages", response_model=list[MessageOut])
async def list_messages(folder: str, mailbox: Mailbox = Depends(get_mailbox)):
    return await mailbox.list_messages(folder)


@router.delete("/messages/{message_id}", response_model=DeleteOut)
async def remove_message(message_id: int, mailbox: Mailbox = Depends(get_mailbox)):
    ok = await mailbox.delete(message_id)
    if not ok:
        return JSONResponse(status_code=404, content={"ok": False})
    return {"ok": True}


@router.get("/server", response_model=ServerInfo)
async def server_info(request: Request):
    host = request.headers.get("host")
    return {
        "game_type": server.get_game_type(),
        "game_name": server.get_game_name(),
        "domain": server.get_domain(host),
        "sub_domain": server.get_sub_domain(),
        "is_game_server": server.is_game_server(),
        "servers": server.get_servers(),
        "static_url": server.get_static_url(host),
    }
