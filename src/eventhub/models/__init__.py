from eventhub.models.bookings import create_booking, serialize_booking, validate_booking
from eventhub.errors import (
    BookingReferenceError,
    DuplicateSlugError,
    EventHubError,
    StoreConfigurationError,
    StoreConnectionError,
    UploadError,
    ValidationError,
)
from eventhub.models.events import (
    create_event,
    find_event_by_slug,
    get_event,
    list_events,
    normalize_event,
    serialize_event,
    update_event,
    validate_event,
)

__all__ = [
    "create_booking",
    "serialize_booking",
    "validate_booking",
    "create_event",
    "find_event_by_slug",
    "get_event",
    "list_events",
    "normalize_event",
    "serialize_event",
    "update_event",
    "validate_event",
    "EventHubError",
    "ValidationError",
    "DuplicateSlugError",
    "BookingReferenceError",
    "StoreConfigurationError",
    "StoreConnectionError",
    "UploadError",
]
