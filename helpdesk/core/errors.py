# helpdesk/core/errors.py
from typing import Any


class HelpdeskError(Exception):
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> dict[str, Any]:
        return {"type": type(self).__name__, "message": self.message}


class InvalidIdentifier(HelpdeskError):
    status_code = 400

    def __init__(self, value: Any):
        super().__init__(f"{value!r} is not a valid identifier")
        self.value = value


class NotFound(HelpdeskError):
    status_code = 404


class ValidationError(HelpdeskError):
    # reported as a server error, same as any other storage failure
    status_code = 500

    def __init__(self, missing: list[str]):
        super().__init__("Missing required fields: " + ", ".join(missing))
        self.missing = missing

    def to_dict(self) -> dict[str, Any]:
        data = super().to_dict()
        data["fields"] = self.missing
        return data


class StorageFailure(HelpdeskError):
    def __init__(self, cause: Exception):
        super().__init__(str(cause))
        self.cause = cause

    def to_dict(self) -> dict[str, Any]:
        return {"type": type(self.cause).__name__, "message": self.message}


class ApiError(Exception):
    def __init__(self, status_code: int, message: str, error: HelpdeskError | None = None):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.error = error

    @classmethod
    def from_error(cls, error: HelpdeskError, message: str) -> "ApiError":
        return cls(error.status_code, message, error)

    def to_dict(self) -> dict[str, Any]:
        body: dict[str, Any] = {"message": self.message}
        if self.status_code >= 500 and self.error is not None:
            body["error"] = self.error.to_dict()
        return body


__all__ = [
    "ApiError",
    "HelpdeskError",
    "InvalidIdentifier",
    "NotFound",
    "StorageFailure",
    "ValidationError",
]
