# helpdesk/comment/schemas.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CommentCreate(BaseModel):
    # ticketId comes from the URL path; blank bodies are rejected by the repository
    body: str | None = None
    author: str | None = None


class CommentOut(BaseModel):
    id: str
    ticket_id: str
    body: str
    author: str | None = None
    created_at: datetime

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )
