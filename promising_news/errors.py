from __future__ import annotations

from typing import Dict


class NewsServiceError(Exception):
    """Base class for errors reported to API callers."""

    status_code = 500
    kind = "internal"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, str]:
        return {"message": self.message, "kind": self.kind}


class NotFoundError(NewsServiceError):
    status_code = 404
    kind = "not_found"


class ReadFailureError(NotFoundError):
    """A store read failed; reported to callers as not found."""

    kind = "read_failure"


class ValidationError(NewsServiceError):
    status_code = 400
    kind = "validation_failure"


class InvalidIdentifierError(ValidationError):
    status_code = 404

    def __init__(self, entry_id: str) -> None:
        super().__init__(f"No news entry with id: {entry_id}")
        self.entry_id = entry_id


class ConflictError(NewsServiceError):
    status_code = 400
    kind = "conflict"


class StoreError(NewsServiceError):
    """Raised when the record store rejects or cannot complete an operation."""

    status_code = 400
    kind = "store_failure"


class HeadlineFetchError(NewsServiceError):
    status_code = 502
    kind = "upstream_failure"
