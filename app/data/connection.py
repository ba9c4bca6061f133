from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Callable, Optional

from bson import ObjectId
from pymongo import MongoClient
from pymongo.errors import PyMongoError

from config import AppConfig
from log import get_logger


logger = get_logger(__name__)

USER_SAFE_MESSAGE = "Unable to connect to database"


class FetchError(RuntimeError):
    """Full-set retrieval failed (store unreachable, auth, timeout...)."""

    def __init__(self, message: str = USER_SAFE_MESSAGE) -> None:
        super().__init__(message)


class StoreConfigError(FetchError):
    pass


def plain_document(value: Any) -> Any:
    """
    BSON -> JSON-ready values. ObjectIds become strings; dates become
    ISO-8601 UTC with milliseconds ("2024-01-01T12:00:00.000Z"). BSON dates
    come back naive and are UTC.
    """
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value.isoformat(timespec="milliseconds") + "Z"
    if isinstance(value, dict):
        return {k: plain_document(v) for k, v in value.items()}
    if isinstance(value, list):
        return [plain_document(v) for v in value]
    return value


@dataclass(frozen=True)
class MongoStore:
    cfg: AppConfig
    client_factory: Callable[..., Any] = MongoClient

    def find_all(self, collection: str, query: Optional[dict[str, Any]] = None) -> list[dict[str, Any]]:
        """
        Returns every document in `collection` matching `query` as plain dicts.
        One client per call: opened here, always closed before returning.
        """
        if not self.cfg.has_store_credentials:
            raise StoreConfigError(
                "Missing MongoDB credentials. Set USERNAME, PASSWORD and CLUSTER_NAME "
                "(or MONGODB_URI), or enable mock data."
            )

        client = None
        try:
            client = self.client_factory(
                self.cfg.connection_uri,
                serverSelectionTimeoutMS=self.cfg.mongo_timeout_ms,
            )
            docs = list(client[self.cfg.mongo_database][collection].find(query or {}))
        except PyMongoError as e:
            logger.error("Query on %s.%s failed: %s", self.cfg.mongo_database, collection, e)
            raise FetchError() from e
        finally:
            if client is not None:
                client.close()

        logger.info("Fetched %d documents from %s", len(docs), collection)
        return [plain_document(d) for d in docs]


def get_store(cfg: AppConfig) -> MongoStore:
    return MongoStore(cfg=cfg)
