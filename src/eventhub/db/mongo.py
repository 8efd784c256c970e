from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

from pymongo import ASCENDING, DESCENDING, MongoClient
from pymongo.database import Database
from pymongo.errors import PyMongoError
from pymongo.server_api import ServerApi

from eventhub import config
from eventhub.errors import StoreConfigurationError, StoreConnectionError

logger = logging.getLogger(__name__)

EVENTS = "events"
BOOKINGS = "bookings"

ClientFactory = Callable[..., Any]


class MongoStore:
    """
    Lazily connected MongoDB handle owned by the Flask app.

    The first caller builds the client; callers racing it wait on the lock and
    reuse the result. A failed attempt caches nothing, so the next call retries.
    """

    def __init__(
        self,
        uri: Optional[str] = None,
        db_name: Optional[str] = None,
        client_factory: ClientFactory = MongoClient,
    ) -> None:
        self._uri = uri
        self._db_name = db_name or "eventhub"
        self._client_factory = client_factory
        self._client: Optional[Any] = None
        self._lock = threading.Lock()

    @classmethod
    def from_config(cls) -> "MongoStore":
        return cls(uri=config.MONGODB_URI, db_name=config.MONGO_DB)

    @property
    def db_name(self) -> str:
        return self._db_name

    @property
    def client(self) -> MongoClient:
        if self._client is not None:
            return self._client
        with self._lock:
            if self._client is None:
                self._client = self._connect()
        return self._client

    @property
    def db(self) -> Database:
        return self.client[self._db_name]

    def collection(self, name: str):
        return self.db[name]

    def _connect(self):
        if not self._uri:
            raise StoreConfigurationError(
                "Please define the MONGODB_URI environment variable inside .env"
            )
        kwargs = {
            "serverSelectionTimeoutMS": 5000,
            "server_api": ServerApi("1"),
            "tz_aware": True,
        }
        try:
            client = self._client_factory(self._uri, **kwargs)
        except PyMongoError as e:
            logger.error("MongoDB connection error: %s", e)
            raise StoreConnectionError(f"MongoDB connection failed: {e}") from e
        logger.info("MongoDB client ready (db=%s)", self._db_name)
        return client

    def ping(self) -> bool:
        try:
            self.client.admin.command("ping")
            return True
        except (PyMongoError, StoreConfigurationError, StoreConnectionError) as e:
            logger.error("Mongo ping failed: %s", e)
            return False

    def ensure_indexes(self) -> None:
        """
        Safe to call on startup; creates the indexes if they don't exist.
        The unique slug index is what rejects a second event with the same slug.
        """
        db = self.db
        db[EVENTS].create_index([("slug", ASCENDING)], unique=True, name="slug_unique")
        db[EVENTS].create_index([("createdAt", DESCENDING)], name="created_at_desc")
        db[BOOKINGS].create_index([("eventId", ASCENDING)], name="event_id")

    def close(self) -> None:
        with self._lock:
            if self._client is not None:
                self._client.close()
            self._client = None
