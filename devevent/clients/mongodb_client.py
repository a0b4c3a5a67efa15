"""Single-flight, memoized access to the MongoDB client."""

from __future__ import annotations

import logging
import threading
from concurrent.futures import Future
from typing import Any, Callable, Optional

from pymongo import MongoClient
from pymongo.database import Database
from pymongo.errors import ConfigurationError, OperationFailure, PyMongoError

from .. import config
from ..errors import ConfigError, ConflictError, DatabaseConnectionError
from ..services.storage import ensure_indexes

logger = logging.getLogger(__name__)


class ConnectionCache:
    """Hold one live :class:`pymongo.MongoClient` for the life of the process.

    The first caller of :meth:`get_connection` connects; callers arriving
    while that attempt is in flight wait for the same result. A failed
    attempt is forgotten so the next call starts a new one.
    """

    def __init__(
        self,
        uri: Optional[str] = None,
        *,
        db_name: Optional[str] = None,
        client_factory: Callable[..., Any] = MongoClient,
        server_selection_timeout_ms: Optional[int] = None,
    ) -> None:
        self._uri = config.require_mongodb_uri(uri)
        self._db_name = db_name or config.MONGODB_DB_NAME
        self._client_factory = client_factory
        self._timeout_ms = (
            server_selection_timeout_ms
            if server_selection_timeout_ms is not None
            else config.MONGODB_SERVER_SELECTION_TIMEOUT_MS
        )
        self._lock = threading.Lock()
        self._client: Optional[MongoClient] = None
        self._pending: Optional[Future] = None

    @property
    def connected(self) -> bool:
        return self._client is not None

    def get_connection(self) -> MongoClient:
        """Return the cached client, connecting on first use."""
        with self._lock:
            if self._client is not None:
                return self._client
            pending = self._pending
            if pending is not None:
                owner = False
            else:
                pending = self._pending = Future()
                owner = True

        if not owner:
            return pending.result()

        try:
            client = self._connect()
        except BaseException as exc:
            with self._lock:
                self._pending = None
            pending.set_exception(exc)
            raise

        with self._lock:
            self._client = client
            self._pending = None
        pending.set_result(client)
        return client

    def get_database(self) -> Database:
        return self.get_connection()[self._db_name]

    def close(self) -> None:
        """Close the cached client; the next call reconnects."""
        with self._lock:
            client, self._client = self._client, None
        if client is not None:
            client.close()
            logger.info("Closed MongoDB connection")

    def _connect(self) -> MongoClient:
        logger.info("Connecting to MongoDB database '%s'", self._db_name)
        try:
            client = self._client_factory(
                self._uri, serverSelectionTimeoutMS=self._timeout_ms
            )
        except ConfigurationError as exc:
            raise ConfigError(f"Invalid MongoDB configuration: {exc}") from exc

        try:
            client.admin.command("ping")
        except PyMongoError as exc:
            client.close()
            logger.error("MongoDB connection failed: %s", exc)
            raise DatabaseConnectionError(f"Could not connect to MongoDB: {exc}") from exc

        try:
            ensure_indexes(client[self._db_name])
        except OperationFailure as exc:
            # Server is reachable; the index build itself was refused
            client.close()
            logger.error("MongoDB index setup failed: %s", exc)
            if exc.code == 11000:
                raise ConflictError(
                    "slug", f"Existing events share a slug; cannot build unique index: {exc}"
                ) from exc
            raise ConfigError(f"Could not create MongoDB indexes: {exc}") from exc
        except PyMongoError as exc:
            client.close()
            logger.error("MongoDB connection lost during index setup: %s", exc)
            raise DatabaseConnectionError(f"Could not connect to MongoDB: {exc}") from exc

        logger.info("Connected to MongoDB")
        return client


_cache: ConnectionCache | None = None
_cache_lock = threading.Lock()


def get_connection_cache() -> ConnectionCache:
    """Return the process-wide :class:`ConnectionCache`, built from config."""
    global _cache
    with _cache_lock:
        if _cache is None:
            _cache = ConnectionCache()
        return _cache


def connect_to_database() -> Database:
    """Return the configured database on the process-wide connection."""
    return get_connection_cache().get_database()

__all__ = ["ConnectionCache", "get_connection_cache", "connect_to_database"]
