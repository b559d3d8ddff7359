# helpdesk/core/database.py
from typing import Any

import structlog
from bson import ObjectId
from fastapi import Request
from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.collection import Collection
from pymongo.errors import ConfigurationError, PyMongoError

from helpdesk.core.config import Settings
from helpdesk.core.errors import InvalidIdentifier, StorageFailure

logger = structlog.get_logger()

TICKETS = "tickets"
COMMENTS = "comments"


def parse_object_id(value: Any) -> ObjectId:
    if isinstance(value, ObjectId):
        return value
    if not isinstance(value, str) or not ObjectId.is_valid(value):
        raise InvalidIdentifier(value)
    return ObjectId(value)


class Storage:
    # client is None when it could not even be built; collections then raise StorageFailure
    def __init__(self, client: MongoClient | None, database: str, error: Exception | None = None):
        self.client = client
        self.database = database
        self.error = error
        self._tickets: Collection | None = None
        self._comments: Collection | None = None
        if client is not None:
            db = client[database]
            self._tickets = db[TICKETS]
            self._comments = db[COMMENTS]

    @classmethod
    def from_settings(cls, settings: Settings) -> "Storage":
        try:
            # mongodb+srv URIs resolve DNS here
            client: MongoClient = MongoClient(
                settings.MONGODB_URI,
                serverSelectionTimeoutMS=settings.MONGODB_TIMEOUT_MS,
                tz_aware=True,
            )
        except PyMongoError as e:
            return cls(None, settings.MONGODB_DB, error=e)
        try:
            database = client.get_default_database().name
        except ConfigurationError:  # URI names no database
            database = settings.MONGODB_DB
        return cls(client, database)

    @property
    def available(self) -> bool:
        return self.client is not None

    @property
    def tickets(self) -> Collection:
        return self._collection(self._tickets)

    @property
    def comments(self) -> Collection:
        return self._collection(self._comments)

    def _collection(self, collection: Collection | None) -> Collection:
        if collection is None:
            raise StorageFailure(self.error)
        return collection

    def connect(self) -> bool:
        if not self.available:
            logger.error("Failed to connect to MongoDB", database=self.database, error=str(self.error))
            return False
        try:
            self.client.admin.command("ping")
        except PyMongoError as e:
            logger.error("Failed to connect to MongoDB", database=self.database, error=str(e))
            return False
        logger.info("MongoDB connected", database=self.database)
        return True

    def ensure_indexes(self) -> None:
        try:
            self.tickets.create_index([("createdAt", DESCENDING)])
            self.comments.create_index([("ticketId", ASCENDING), ("createdAt", ASCENDING)])
        except (PyMongoError, StorageFailure) as e:
            logger.warning("Failed to create indexes", error=str(e))

    def ping(self) -> bool:
        if not self.available:
            return False
        try:
            self.client.admin.command("ping")
            return True
        except PyMongoError:
            return False

    def close(self) -> None:
        if self.available:
            self.client.close()


# Common storage dependency
def get_storage(request: Request) -> Storage:
    return request.app.state.storage
