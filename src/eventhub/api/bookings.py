from __future__ import annotations

import logging

from flask import Blueprint, jsonify, request

from eventhub.api import get_store
from eventhub.errors import BookingReferenceError, ValidationError
from eventhub.models.bookings import create_booking, serialize_booking

bp = Blueprint("api_bookings", __name__)

logger = logging.getLogger(__name__)


@bp.post("/bookings")
def post_booking():
    """
    POST /api/bookings  {"eventId": "<24-hex id>", "email": "user@example.com"}
    Form-encoded bodies are accepted as well.
    """
    payload = request.get_json(silent=True)
    if not isinstance(payload, dict):
        payload = request.form.to_dict()

    try:
        booking = create_booking(get_store().db, payload)
    except ValidationError as e:
        return jsonify({"ok": False, "message": "Booking Failed", **e.to_dict()}), 400
    except BookingReferenceError as e:
        return jsonify({"ok": False, "message": "Booking Failed", "error": e.message}), 404
    except Exception as e:
        logger.exception("booking creation failed")
        return jsonify({"ok": False, "message": "Booking Failed", "error": str(e)}), 500

    return jsonify({"ok": True, "message": "Booking Created Successfully", "booking": serialize_booking(booking)}), 201
