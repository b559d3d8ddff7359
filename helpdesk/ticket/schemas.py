# helpdesk/ticket/schemas.py
from datetime import datetime

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from helpdesk.comment.schemas import CommentOut

camel_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class TicketCreate(BaseModel):
    # required fields are checked by the repository, not here
    title: str | None = None
    description: str | None = None
    priority: str | None = None
    created_at: datetime | None = None

    model_config = camel_config


class TicketUpdate(BaseModel):
    title: str | None = None
    description: str | None = None
    priority: str | None = None
    created_at: datetime | None = None

    model_config = camel_config


class TicketOut(BaseModel):
    id: str
    title: str
    description: str
    priority: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True, **camel_config)


class TicketDetail(BaseModel):
    ticket: TicketOut
    comments: list[CommentOut]
