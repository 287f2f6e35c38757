"""MongoDB implementation of VocabularyRepository.

Documents are keyed by headword (``_id``), so the primary key enforces
headword uniqueness.
"""

from datetime import datetime, timezone
from logging import getLogger

from pymongo import UpdateOne
from pymongo.database import Database
from pymongo.errors import PyMongoError

from adapter.mongodb.connection import VOCABULARY_COLLECTION_NAME
from domain.model.vocabulary import Vocabulary

logger = getLogger(__name__)


class MongoVocabularyRepository:
    def __init__(self, db: Database):
        self.collection = db[VOCABULARY_COLLECTION_NAME]

    # ── indexes ────────────────────────────────────────────────

    def ensure_indexes(self) -> bool:
        """Create indexes for vocabularies collection."""
        from adapter.mongodb.indexes import create_index_safe

        try:
            create_index_safe(self.collection, [('created_at', 1), ('_id', 1)], 'idx_vocab_created_at')
            create_index_safe(self.collection, [('known', 1)], 'idx_vocab_known')
            return True
        except PyMongoError as e:
            logger.error("Failed to create vocabularies indexes", extra={"error": str(e)})
            return False

    # ── mapping ───────────────────────────────────────────────

    def _to_domain(self, doc: dict) -> Vocabulary:
        return Vocabulary(
            headword=doc['_id'],
            translation=doc.get('translation') or '',
            known=bool(doc.get('known', False)),
        )

    # ── CRUD ──────────────────────────────────────────────────

    def find_all(self) -> list[Vocabulary]:
        try:
            cursor = self.collection.find({}).sort([('created_at', 1), ('_id', 1)])
            return [self._to_domain(doc) for doc in cursor]
        except PyMongoError as e:
            logger.error("Failed to list vocabularies", extra={"error": str(e)})
            raise

    def get(self, headword: str) -> Vocabulary | None:
        try:
            doc = self.collection.find_one({'_id': headword})
            return self._to_domain(doc) if doc else None
        except PyMongoError as e:
            logger.error("Failed to get vocabulary", extra={"headword": headword, "error": str(e)})
            raise

    def save(self, vocab: Vocabulary) -> Vocabulary:
        """Upsert by headword. created_at is only set on first insert."""
        now = datetime.now(timezone.utc)
        try:
            self.collection.update_one(
                {'_id': vocab.headword},
                {
                    '$set': {
                        'translation': vocab.translation,
                        'known': vocab.known,
                        'updated_at': now,
                    },
                    '$setOnInsert': {'created_at': now},
                },
                upsert=True,
            )
            logger.info("Vocabulary saved", extra={"headword": vocab.headword, "known": vocab.known})
            return vocab
        except PyMongoError as e:
            logger.error("Failed to save vocabulary", extra={"headword": vocab.headword, "error": str(e)})
            raise

    def save_all(self, vocabs: list[Vocabulary]) -> None:
        """Insert a batch of new entries with conditional upserts.

        An entry that already exists (e.g. inserted by a concurrent ingest)
        is left untouched.
        """
        if not vocabs:
            return

        now = datetime.now(timezone.utc)
        operations = [
            UpdateOne(
                {'_id': vocab.headword},
                {'$setOnInsert': {
                    'translation': vocab.translation,
                    'known': vocab.known,
                    'created_at': now,
                    'updated_at': now,
                }},
                upsert=True,
            )
            for vocab in vocabs
        ]
        try:
            result = self.collection.bulk_write(operations, ordered=False)
            logger.info("Vocabularies saved", extra={"requested": len(vocabs), "inserted": result.upserted_count})
        except PyMongoError as e:
            logger.error("Failed to save vocabularies", extra={"count": len(vocabs), "error": str(e)})
            raise

    def delete(self, vocab: Vocabulary) -> None:
        try:
            result = self.collection.delete_one({'_id': vocab.headword})
        except PyMongoError as e:
            logger.error("Failed to delete vocabulary", extra={"headword": vocab.headword, "error": str(e)})
            raise
        if result.deleted_count == 0:
            logger.warning("Vocabulary not found for deletion", extra={"headword": vocab.headword})
            return
        logger.info("Vocabulary deleted", extra={"headword": vocab.headword})
