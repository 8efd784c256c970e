"""Error taxonomy shared by the models, the store and the HTTP layer."""

from __future__ import annotations

from typing import Optional


class EventHubError(Exception):
    """Base class for errors the API maps to a response."""

    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class ValidationError(EventHubError):
    """A required field is missing/empty or has the wrong shape."""

    status_code = 400

    def __init__(self, field: str, message: str) -> None:
        super().__init__(message)
        self.field = field

    def to_dict(self) -> dict:
        return {"field": self.field, "error": self.message}


class DuplicateSlugError(EventHubError):
    status_code = 409

    def __init__(self, slug: str) -> None:
        super().__init__(f"An event with slug '{slug}' already exists")
        self.slug = slug


class BookingReferenceError(EventHubError):
    """The event a booking points at is not in the store."""

    status_code = 404

    def __init__(self, event_id: Optional[str] = None) -> None:
        super().__init__("referenced event does not exist")
        self.event_id = event_id


class StoreConfigurationError(EventHubError):
    pass


class StoreConnectionError(EventHubError):
    pass


class UploadError(EventHubError):
    pass
