"""Process-wide MongoDB client for the word book."""

import os
import logging
from pymongo import MongoClient
from pymongo.errors import PyMongoError

logger = logging.getLogger(__name__)

# Driver-level heartbeat and pool logs are too chatty at INFO
logging.getLogger('pymongo').setLevel(logging.WARNING)

MONGO_URL = os.getenv('MONGO_URL')
DATABASE_NAME = os.getenv('MONGODB_DATABASE', 'wordbook')
VOCABULARY_COLLECTION_NAME = 'vocabularies'

_client = None
_missing_url_reported = False


def reset_client():
    global _client, _missing_url_reported
    _client = None
    _missing_url_reported = False


def get_mongodb_client() -> MongoClient | None:
    """Return a live client, connecting or reconnecting as needed.

    The cached client is pinged on every call. An unreachable server gives
    None and the next call tries again.
    """
    global _client, _missing_url_reported

    if _client is not None:
        try:
            _client.admin.command('ping')
            return _client
        except PyMongoError as e:
            logger.warning("MongoDB connection lost, reconnecting", extra={"error": str(e)[:200]})
            _client = None

    if not MONGO_URL:
        if not _missing_url_reported:
            logger.error("MONGO_URL not configured")
            _missing_url_reported = True
        return None

    try:
        client = MongoClient(
            MONGO_URL,
            serverSelectionTimeoutMS=5000,
            connectTimeoutMS=5000,
            socketTimeoutMS=30000,
            retryWrites=True,
            retryReads=True,
        )
        client.admin.command('ping')
    except PyMongoError as e:
        logger.error("MongoDB connection failed", extra={"error": str(e)[:200]})
        return None

    _client = client
    logger.info("Connected to MongoDB", extra={"database": DATABASE_NAME})
    return client
