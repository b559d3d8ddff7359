# helpdesk/ticket/models.py
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from helpdesk.core.documents import as_utc, missing_fields

REQUIRED_FIELDS = ("title", "description", "priority")
MUTABLE_FIELDS = ("title", "description", "priority", "createdAt")


def validate_ticket_fields(fields: dict[str, Any]) -> list[str]:
    return missing_fields(fields, REQUIRED_FIELDS)


@dataclass
class Ticket:
    id: str
    title: str
    description: str
    priority: str
    created_at: datetime

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> "Ticket":
        return cls(
            id=str(doc["_id"]),
            title=doc["title"],
            description=doc["description"],
            priority=doc["priority"],
            created_at=as_utc(doc["createdAt"]),
        )
