# helpdesk/comment/repository.py
from fastapi import Depends
from pymongo import ASCENDING
from pymongo.errors import PyMongoError

from helpdesk.comment.models import Comment, validate_comment_fields
from helpdesk.core.database import Storage, get_storage, parse_object_id
from helpdesk.core.documents import utcnow
from helpdesk.core.errors import StorageFailure, ValidationError


class CommentRepository:
    # no referential check here; callers confirm the ticket exists
    def __init__(self, storage: Storage):
        self.storage = storage

    @property
    def collection(self):
        return self.storage.comments

    def create(self, ticket_id: str, body: str | None, author: str | None = None) -> Comment:
        oid = parse_object_id(ticket_id)
        missing = validate_comment_fields({"ticketId": oid, "body": body})
        if missing:
            raise ValidationError(missing)

        doc = {"ticketId": oid, "body": body, "createdAt": utcnow()}
        if author is not None:
            doc["author"] = author
        try:
            result = self.collection.insert_one(doc)
        except PyMongoError as e:
            raise StorageFailure(e) from e
        doc["_id"] = result.inserted_id
        return Comment.from_document(doc)

    def list_by_ticket(self, ticket_id: str) -> list[Comment]:
        oid = parse_object_id(ticket_id)
        try:
            cursor = self.collection.find({"ticketId": oid}).sort(
                [("createdAt", ASCENDING), ("_id", ASCENDING)]
            )
            return [Comment.from_document(doc) for doc in cursor]
        except PyMongoError as e:
            raise StorageFailure(e) from e


def get_comment_repository(storage: Storage = Depends(get_storage)) -> CommentRepository:
    return CommentRepository(storage)
