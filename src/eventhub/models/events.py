from __future__ import annotations

import logging
from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Mapping, Optional

from bson import ObjectId
from pymongo import DESCENDING, ReturnDocument
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from eventhub import config
from eventhub.db.mongo import EVENTS
from eventhub.errors import DuplicateSlugError, ValidationError
from eventhub.utils.dates import normalize_date, normalize_time
from eventhub.utils.slug import generate_slug

logger = logging.getLogger(__name__)

# Checked in this order; the first failure is the one reported.
TEXT_FIELDS = (
    "title",
    "description",
    "overview",
    "image",
    "venue",
    "location",
    "date",
    "time",
)
TRAILING_TEXT_FIELDS = ("audience", "organizer")
LIST_FIELDS = ("agenda", "tags")
EVENT_FIELDS = TEXT_FIELDS + ("mode",) + TRAILING_TEXT_FIELDS + LIST_FIELDS


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _clean_text(data: Mapping[str, Any], field: str) -> str:
    value = data.get(field)
    if value is None:
        raise ValidationError(field, f"Event {field} is required")
    if not isinstance(value, str):
        raise ValidationError(field, f"Event {field} must be a string")
    value = value.strip()
    if not value:
        raise ValidationError(field, f"Event {field} cannot be empty")
    return value


def _clean_list(data: Mapping[str, Any], field: str) -> List[str]:
    value = data.get(field)
    if value is None:
        raise ValidationError(field, f"Event {field} is required")
    if not isinstance(value, (list, tuple)) or not value:
        raise ValidationError(field, f"Event {field} must be a non-empty array")
    if not all(isinstance(item, str) for item in value):
        raise ValidationError(field, f"Event {field} must only contain strings")
    return list(value)


def _clean_mode(data: Mapping[str, Any]) -> str:
    mode = data.get("mode")
    if mode is None or (isinstance(mode, str) and not mode.strip()):
        raise ValidationError("mode", "Event mode is required")
    if mode not in config.EVENT_MODES:
        allowed = ", ".join(config.EVENT_MODES)
        raise ValidationError("mode", f"Event mode must be one of: {allowed}")
    return mode


def validate_event(data: Mapping[str, Any]) -> Dict[str, Any]:
    """
    Check every required field and return the cleaned values.
    Raises ValidationError naming the first field that fails.
    """
    cleaned: Dict[str, Any] = {}
    for field in TEXT_FIELDS:
        cleaned[field] = _clean_text(data, field)
    cleaned["mode"] = _clean_mode(data)
    for field in TRAILING_TEXT_FIELDS:
        cleaned[field] = _clean_text(data, field)
    for field in LIST_FIELDS:
        cleaned[field] = _clean_list(data, field)
    return cleaned


def normalize_event(fields: Dict[str, Any], changed: Optional[Iterable[str]] = None) -> Dict[str, Any]:
    """
    Derive/refresh slug, date and time. `changed=None` treats every field as new.
    """
    out = dict(fields)
    changed_set = set(EVENT_FIELDS) if changed is None else set(changed)

    if "title" in changed_set or not out.get("slug"):
        slug = generate_slug(out["title"])
        if not slug:
            raise ValidationError("title", "Event title must contain at least one letter or digit")
        out["slug"] = slug
    if "date" in changed_set:
        out["date"] = normalize_date(out["date"])
    if "time" in changed_set:
        out["time"] = normalize_time(out["time"])
    return out


def create_event(db: Database, data: Mapping[str, Any], now: Optional[datetime] = None) -> Dict[str, Any]:
    doc = normalize_event(validate_event(data))
    ts = now or _utcnow()
    doc["createdAt"] = ts
    doc["updatedAt"] = ts
    try:
        res = db[EVENTS].insert_one(doc)
    except DuplicateKeyError as e:
        raise DuplicateSlugError(doc["slug"]) from e
    doc["_id"] = res.inserted_id
    logger.info("created event %s (slug=%s)", res.inserted_id, doc["slug"])
    return doc


def update_event(
    db: Database,
    event_id: Any,
    changes: Mapping[str, Any],
    now: Optional[datetime] = None,
) -> Optional[Dict[str, Any]]:
    """
    Apply `changes` to a stored event. Slug/date/time are only re-derived when
    the field they depend on actually changed. Returns None if the event is gone.
    """
    oid = _as_object_id(event_id)
    if oid is None:
        return None
    current = db[EVENTS].find_one({"_id": oid})
    if current is None:
        return None

    unknown = set(changes) - set(EVENT_FIELDS)
    if unknown:
        field = sorted(unknown)[0]
        raise ValidationError(field, f"Event has no updatable field '{field}'")

    merged = {f: current.get(f) for f in EVENT_FIELDS}
    merged.update(changes)
    cleaned = validate_event(merged)
    changed = [f for f in EVENT_FIELDS if cleaned[f] != current.get(f)]

    cleaned["slug"] = current.get("slug")
    updated = normalize_event(cleaned, changed)
    updated["updatedAt"] = now or _utcnow()
    try:
        doc = db[EVENTS].find_one_and_update(
            {"_id": oid},
            {"$set": updated},
            return_document=ReturnDocument.AFTER,
        )
    except DuplicateKeyError as e:
        raise DuplicateSlugError(updated["slug"]) from e
    return doc


def list_events(db: Database) -> List[Dict[str, Any]]:
    cur = db[EVENTS].find().sort([("createdAt", DESCENDING), ("_id", DESCENDING)])
    return list(cur)


def get_event(db: Database, event_id: Any) -> Optional[Dict[str, Any]]:
    oid = _as_object_id(event_id)
    if oid is None:
        return None
    return db[EVENTS].find_one({"_id": oid})


def find_event_by_slug(db: Database, slug: str) -> Optional[Dict[str, Any]]:
    return db[EVENTS].find_one({"slug": slug.strip().lower()})


def serialize_event(doc: Mapping[str, Any]) -> Dict[str, Any]:
    out = {"_id": str(doc["_id"])} if "_id" in doc else {}
    for field in EVENT_FIELDS + ("slug",):
        if field in doc:
            out[field] = doc[field]
    for ts_field in ("createdAt", "updatedAt"):
        ts = doc.get(ts_field)
        out[ts_field] = ts.isoformat() if isinstance(ts, datetime) else ts
    return out


def _as_object_id(value: Any) -> Optional[ObjectId]:
    if isinstance(value, ObjectId):
        return value
    if isinstance(value, str) and ObjectId.is_valid(value):
        return ObjectId(value)
    return None
