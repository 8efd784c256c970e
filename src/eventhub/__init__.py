from flask import Flask
from flask_cors import CORS


def create_app(store=None, uploader=None) -> Flask:
    from eventhub import config
    from eventhub.api import register_api
    from eventhub.db.mongo import MongoStore
    from eventhub.errors import EventHubError
    from eventhub.media.cloudinary import CloudinaryUploader
    from pymongo.errors import PyMongoError

    app = Flask(__name__)
    app.config["SECRET_KEY"] = config.SECRET_KEY
    CORS(app, origins=config.CORS_ORIGINS)

    # One store per app; handlers reach it through current_app
    app.extensions["mongo_store"] = store or MongoStore.from_config()
    app.extensions["image_uploader"] = uploader or CloudinaryUploader.from_config()

    # Ensure DB indexes early (safe to run multiple times)
    try:
        app.extensions["mongo_store"].ensure_indexes()
    except (EventHubError, PyMongoError) as e:
        app.logger.warning(f"[create_app] ensure_indexes skipped: {e}")

    register_api(app)
    return app
