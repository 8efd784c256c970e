from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional

from flask import Blueprint, jsonify, request

from eventhub.api import get_store, get_uploader
from eventhub.errors import (
    DuplicateSlugError,
    EventHubError,
    StoreConfigurationError,
    ValidationError,
)
from eventhub.models.events import (
    create_event,
    find_event_by_slug,
    list_events,
    serialize_event,
    validate_event,
)

bp = Blueprint("api_events", __name__)

logger = logging.getLogger(__name__)


def _json_list(name: str) -> Optional[List[Any]]:
    raw = request.form.get(name)
    if raw is None:
        return None
    return json.loads(raw)


@bp.post("/events")
def post_event():
    """
    POST /api/events  (multipart/form-data)
    Event fields as form values, `tags` and `agenda` as JSON string arrays,
    and the cover picture as the `image` file.
    """
    file = request.files.get("image")
    if file is None or not file.filename:
        return jsonify({"ok": False, "message": "Image file is required"}), 400

    try:
        tags = _json_list("tags")
        agenda = _json_list("agenda")
    except json.JSONDecodeError:
        return jsonify({"ok": False, "message": "Invalid JSON data format"}), 400

    payload: Dict[str, Any] = request.form.to_dict()
    payload.update({"tags": tags, "agenda": agenda})

    try:
        # reject bad input before anything is uploaded
        validate_event({**payload, "image": file.filename})
        db = get_store().db
        payload["image"] = get_uploader().upload(file.read(), filename=file.filename)
        created = create_event(db, payload)
    except ValidationError as e:
        return jsonify({"ok": False, "message": "Event Creation Failed", **e.to_dict()}), 400
    except DuplicateSlugError as e:
        return jsonify({"ok": False, "message": "Event Creation Failed", "error": e.message}), 409
    except Exception as e:
        logger.exception("event creation failed")
        return jsonify({"ok": False, "message": "Event Creation Failed", "error": str(e)}), 500

    return jsonify({"ok": True, "message": "Event Created Successfully", "event": serialize_event(created)}), 201


@bp.get("/events")
def get_events():
    """
    GET /api/events
    All events, newest first.
    """
    try:
        events = list_events(get_store().db)
    except Exception as e:
        logger.exception("listing events failed")
        return jsonify({"ok": False, "message": "Event fetching failed.", "error": str(e)}), 500
    return jsonify({
        "ok": True,
        "message": "Events fetched successfully",
        "events": [serialize_event(ev) for ev in events],
    })


@bp.get("/events/<path:slug>")
def get_event_by_slug(slug: str):
    """
    GET /api/events/react-conf-2024
    Slug is trimmed and lowercased before the lookup.
    """
    if not slug or not slug.strip():
        return jsonify({"ok": False, "message": "Invalid or missing slug parameter"}), 400

    sanitized = slug.strip().lower()
    try:
        event = find_event_by_slug(get_store().db, sanitized)
    except StoreConfigurationError:
        logger.error("MONGODB_URI is not configured")
        return jsonify({"ok": False, "message": "Database configuration error"}), 500
    except EventHubError as e:
        logger.error("fetching event %s failed: %s", sanitized, e)
        return jsonify({"ok": False, "message": "Failed to fetch event", "error": e.message}), 500
    except Exception as e:
        logger.exception("fetching event %s failed", sanitized)
        return jsonify({"ok": False, "message": "Failed to fetch event", "error": str(e)}), 500

    if event is None:
        return jsonify({"ok": False, "message": f"Event with slug: {sanitized} not found"}), 404

    return jsonify({"ok": True, "message": "Event fetched successfully", "event": serialize_event(event)})
