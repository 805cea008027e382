from pydantic import BaseModel, field_validator
from datetime import datetime

class MessageOut(BaseModel):
    id: int
    sender_id: int
    recipient_id: int
    subject: str
    body: str
    sent_at: datetime

class MessageIn(BaseModel):
    recipient_id: int
    subject: str = ""
    body: str = ""
    sent_at: datetime | None = None
    sender_id: int | None = None

    @field_validator("sent_at", mode="before")
    @classmethod
    def empty_sent_at(cls, value):
        # "" means "now", same as leaving it out
        return value or None

class MessageCreated(BaseModel):
    id: int

class DeleteOut(BaseModel):
    ok: bool

class ServerInfo(BaseModel):
    game_type: str | None
    game_name: str
    domain: str
    sub_domain: str | None
    is_game_server: bool
    servers: dict[str, str]
    static_url: str
