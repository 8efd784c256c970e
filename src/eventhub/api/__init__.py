from __future__ import annotations

import importlib

from flask import Blueprint, current_app

from eventhub.db.mongo import MongoStore
from eventhub.media.cloudinary import CloudinaryUploader

API_MODULES = [
    "health",
    "events",
    "bookings",
]


def get_store() -> MongoStore:
    return current_app.extensions["mongo_store"]


def get_uploader() -> CloudinaryUploader:
    return current_app.extensions["image_uploader"]


def register_api(app):
    api_bp = Blueprint("api", __name__, url_prefix="/api")

    for name in API_MODULES:
        mod = importlib.import_module(f"{__name__}.{name}")
        api_bp.register_blueprint(mod.bp)

    app.register_blueprint(api_bp)
