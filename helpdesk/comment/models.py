# helpdesk/comment/models.py
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from helpdesk.core.documents import as_utc, missing_fields

REQUIRED_FIELDS = ("ticketId", "body")


def validate_comment_fields(fields: dict[str, Any]) -> list[str]:
    return missing_fields(fields, REQUIRED_FIELDS)


@dataclass
class Comment:
    id: str
    ticket_id: str
    body: str
    author: str | None
    created_at: datetime

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Comment":
        return cls(
            id=str(doc["_id"]),
            ticket_id=str(doc["ticketId"]),
            body=doc["body"],
            author=doc.get("author"),
            created_at=as_utc(doc["createdAt"]),
        )
