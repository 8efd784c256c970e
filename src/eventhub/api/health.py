from __future__ import annotations

from datetime import datetime, timezone

from flask import Blueprint, jsonify

from eventhub import config
from eventhub.api import get_store

bp = Blueprint("api_health", __name__)


@bp.get("/health")
def health():
    store = get_store()
    db_ok = store.ping()
    now = datetime.now(timezone.utc).isoformat()

    return jsonify({
        "ok": True,
        "time_utc": now,
        "env": {
            "flask_env": config.FLASK_ENV,
            "cors_origins": config.CORS_ORIGINS,
        },
        "config": {
            "mongo_db": store.db_name,
            "cloudinary_set": bool(config.CLOUDINARY_CLOUD_NAME and config.CLOUDINARY_API_KEY),
        },
        "db": {
            "ping": db_ok,
        }
    })
