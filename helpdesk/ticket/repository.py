# helpdesk/ticket/repository.py
from typing import Any

from fastapi import Depends
from pymongo import DESCENDING, ReturnDocument
from pymongo.errors import PyMongoError

from helpdesk.core.database import Storage, get_storage, parse_object_id
from helpdesk.core.documents import to_stored, utcnow
from helpdesk.core.errors import StorageFailure, ValidationError
from helpdesk.ticket.models import MUTABLE_FIELDS, Ticket, validate_ticket_fields


class TicketRepository:
    def __init__(self, storage: Storage):
        self.storage = storage

    @property
    def collection(self):
        return self.storage.tickets

    def create(self, fields: dict[str, Any]) -> Ticket:
        missing = validate_ticket_fields(fields)
        if missing:
            raise ValidationError(missing)

        doc = {name: fields[name] for name in MUTABLE_FIELDS if fields.get(name) is not None}
        doc["createdAt"] = to_stored(doc["createdAt"]) if "createdAt" in doc else utcnow()
        try:
            result = self.collection.insert_one(doc)
        except PyMongoError as e:
            raise StorageFailure(e) from e
        doc["_id"] = result.inserted_id
        return Ticket.from_document(doc)

    def list_all(self) -> list[Ticket]:
        try:
            cursor = self.collection.find().sort([("createdAt", DESCENDING), ("_id", DESCENDING)])
            return [Ticket.from_document(doc) for doc in cursor]
        except PyMongoError as e:
            raise StorageFailure(e) from e

    def get_by_id(self, ticket_id: str) -> Ticket | None:
        oid = parse_object_id(ticket_id)
        try:
            doc = self.collection.find_one({"_id": oid})
        except PyMongoError as e:
            raise StorageFailure(e) from e
        return Ticket.from_document(doc) if doc else None

    def update_by_id(self, ticket_id: str, fields: dict[str, Any]) -> Ticket | None:
        oid = parse_object_id(ticket_id)
        changes = {name: value for name, value in fields.items() if name in MUTABLE_FIELDS}
        if "createdAt" in changes:
            changes["createdAt"] = to_stored(changes["createdAt"])
        try:
            if not changes:
                doc = self.collection.find_one({"_id": oid})
            else:
                doc = self.collection.find_one_and_update(
                    {"_id": oid},
                    {"$set": changes},
                    return_document=ReturnDocument.AFTER,
                )
        except PyMongoError as e:
            raise StorageFailure(e) from e
        return Ticket.from_document(doc) if doc else None


def get_ticket_repository(storage: Storage = Depends(get_storage)) -> TicketRepository:
    return TicketRepository(storage)


__all__ = ["TicketRepository", "get_ticket_repository"]
