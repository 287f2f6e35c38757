"""Import a plain-text book into the word book.

Usage:
    python -m scripts.import_book path/to/book.txt
    python src/scripts/import_book.py path/to/book.txt --encoding latin-1

Every unseen headword becomes an untranslated entry; translations are
fetched lazily when entries are studied.
"""

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

load_dotenv()

sys.path.insert(0, str(Path(__file__).parent.parent))

from adapter.external.litellm import LiteLLMTranslator
from adapter.file.ignore_log import FileIgnoreLog
from adapter.mongodb.connection import get_mongodb_client, DATABASE_NAME
from adapter.mongodb.vocabulary_repository import MongoVocabularyRepository
from domain.model.vocabulary import Book
from services.vocabulary_service import VocabularyService
from utils import config
from utils.logging import setup_structured_logging

logger = logging.getLogger(__name__)


def import_book(path: Path, service: VocabularyService, encoding: str = "utf-8") -> int:
    """Ingest the file at ``path``. Returns the number of new entries."""
    content = path.read_text(encoding=encoding)
    added = service.add_new_words(Book(content=content))
    logger.info("Book imported", extra={"path": str(path), "added": len(added)})
    return len(added)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Add the words of a text file to the word book")
    parser.add_argument("path", type=Path, help="Text file to ingest")
    parser.add_argument("--encoding", type=str, default="utf-8", help="File encoding")
    args = parser.parse_args(argv)

    setup_structured_logging(config.LOG_LEVEL)

    client = get_mongodb_client()
    if client is None:
        print("MongoDB unavailable, check MONGO_URL", file=sys.stderr)
        return 1

    service = VocabularyService(
        repo=MongoVocabularyRepository(client[DATABASE_NAME]),
        translator=LiteLLMTranslator(model=config.TRANSLATION_MODEL),
        ignore_log=FileIgnoreLog(config.IGNORE_FILE_PATH),
        filter_ignored=config.FILTER_IGNORED_WORDS,
    )

    try:
        added = import_book(args.path, service, encoding=args.encoding)
    except (OSError, UnicodeDecodeError) as e:
        print(f"Cannot read {args.path}: {e}", file=sys.stderr)
        return 1

    print(f"{added} new words added")
    return 0


if __name__ == "__main__":
    sys.exit(main())
