from __future__ import annotations

import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, Mapping, Optional

from bson import ObjectId
from pymongo.database import Database

from eventhub.db.mongo import BOOKINGS, EVENTS
from eventhub.errors import BookingReferenceError, ValidationError

logger = logging.getLogger(__name__)

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def validate_booking(data: Mapping[str, Any]) -> Dict[str, Any]:
    event_id = data.get("eventId")
    if event_id is None or (isinstance(event_id, str) and not event_id.strip()):
        raise ValidationError("eventId", "Event ID is required")
    if isinstance(event_id, str):
        event_id = event_id.strip()
        if not ObjectId.is_valid(event_id):
            raise ValidationError("eventId", "Event ID is not a valid identifier")
        event_id = ObjectId(event_id)
    elif not isinstance(event_id, ObjectId):
        raise ValidationError("eventId", "Event ID is not a valid identifier")

    email = data.get("email")
    if email is None or not isinstance(email, str) or not email.strip():
        raise ValidationError("email", "Email is required")
    email = email.strip().lower()
    if not EMAIL_RE.match(email):
        raise ValidationError("email", "Please provide a valid email address")

    return {"eventId": event_id, "email": email}


def create_booking(db: Database, data: Mapping[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    """
    Validate, then make sure the event exists before inserting.
    The lookup and the insert are two separate round trips (not atomic).
    """
    doc = validate_booking(data)
    if db[EVENTS].find_one({"_id": doc["eventId"]}, {"_id": 1}) is None:
        logger.warning("booking rejected: event %s does not exist", doc["eventId"])
        raise BookingReferenceError(str(doc["eventId"]))

    ts = now or datetime.now(timezone.utc)
    doc["createdAt"] = ts
    doc["updatedAt"] = ts
    res = db[BOOKINGS].insert_one(doc)
    doc["_id"] = res.inserted_id
    return doc


def serialize_booking(doc: Mapping[str, Any]) -> Dict[str, Any]:
    out: Dict[str, Any] = {
        "_id": str(doc["_id"]),
        "eventId": str(doc["eventId"]),
        "email": doc["email"],
    }
    for ts_field in ("createdAt", "updatedAt"):
        ts = doc.get(ts_field)
        out[ts_field] = ts.isoformat() if isinstance(ts, datetime) else ts
    return out
