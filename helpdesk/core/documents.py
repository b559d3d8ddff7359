# helpdesk/core/documents.py
from datetime import datetime, timezone
from typing import Any


def as_utc(value: datetime) -> datetime:
    # the driver hands back naive UTC unless the client is tz_aware
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def to_millis(value: datetime) -> datetime:
    # BSON dates keep millisecond precision
    return value.replace(microsecond=value.microsecond // 1000 * 1000)


def to_stored(value: datetime) -> datetime:
    # what a datetime reads back as once it has been through the store
    return to_millis(as_utc(value))


def utcnow() -> datetime:
    return to_stored(datetime.now(timezone.utc))


def missing_fields(fields: dict[str, Any], required: tuple[str, ...]) -> list[str]:
    missing = []
    for name in required:
        value = fields.get(name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing
