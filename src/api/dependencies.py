import logging

from fastapi import Depends, HTTPException

from adapter.external.deepl import DeepLTranslator
from adapter.external.litellm import LiteLLMTranslator
from adapter.file.ignore_log import FileIgnoreLog
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.vocabulary_repository import MongoVocabularyRepository
from adapter.random_source import SystemRandomSource
from port.ignore_log import IgnoreLog
from port.random_source import RandomSource
from port.translator import TranslatorPort
from port.vocabulary_repository import VocabularyRepository
from services.vocabulary_service import VocabularyService
from utils import config

logger = logging.getLogger(__name__)

_random_source = SystemRandomSource()


def _get_db():
    """Get MongoDB database, raising 503 if unavailable."""
    client = get_mongodb_client()
    if client is None:
        raise HTTPException(status_code=503, detail="Database unavailable")
    return client[DATABASE_NAME]


def get_vocab_repo() -> VocabularyRepository:
    return MongoVocabularyRepository(_get_db())


def get_translator() -> TranslatorPort:
    if config.TRANSLATOR_BACKEND == "deepl":
        if not config.DEEPL_API_KEY:
            logger.error("DEEPL_API_KEY not configured")
            raise HTTPException(status_code=503, detail="Translator unavailable")
        return DeepLTranslator(api_key=config.DEEPL_API_KEY, api_url=config.DEEPL_API_URL)
    return LiteLLMTranslator(model=config.TRANSLATION_MODEL)


def get_ignore_log() -> IgnoreLog:
    return FileIgnoreLog(config.IGNORE_FILE_PATH)


def get_random_source() -> RandomSource:
    return _random_source


def get_vocabulary_service(
    repo: VocabularyRepository = Depends(get_vocab_repo),
    translator: TranslatorPort = Depends(get_translator),
    ignore_log: IgnoreLog = Depends(get_ignore_log),
    random_source: RandomSource = Depends(get_random_source),
) -> VocabularyService:
    return VocabularyService(
        repo=repo,
        translator=translator,
        ignore_log=ignore_log,
        random_source=random_source,
        filter_ignored=config.FILTER_IGNORED_WORDS,
    )
