"""Vocabulary service — business logic for the word book.

Orchestrates ingestion of books, random study draws with lazy translation,
updates, and drop-and-ignore. Holds no state between calls; everything
durable lives behind the ports it is constructed with.
"""

import logging

from domain.model.errors import NotFoundError
from domain.model.vocabulary import Book, Vocabulary
from port.ignore_log import IgnoreLog
from port.random_source import RandomSource
from port.translator import TranslatorPort
from port.vocabulary_repository import VocabularyRepository
from services.word_extraction import extract_book_words

logger = logging.getLogger(__name__)


class VocabularyService:
    """Vocabulary use cases over a repository, a translator and an ignore log."""

    def __init__(
        self,
        repo: VocabularyRepository,
        translator: TranslatorPort,
        ignore_log: IgnoreLog,
        random_source: RandomSource | None = None,
        filter_ignored: bool = True,
    ):
        if random_source is None:
            from adapter.random_source import SystemRandomSource
            random_source = SystemRandomSource()
        self.repo = repo
        self.translator = translator
        self.ignore_log = ignore_log
        self.random_source = random_source
        self.filter_ignored = filter_ignored

    # ── ingestion ─────────────────────────────────────────────

    def add_new_words(self, book: Book) -> list[Vocabulary]:
        """Create entries for every headword in the book not yet in the dictionary.

        New entries start untranslated and unknown, and are saved in one batch.
        Re-ingesting the same book adds nothing.

        Returns:
            The newly created entries (in no particular order).
        """
        candidates = extract_book_words(book)
        if self.filter_ignored:
            candidates -= self._ignored_headwords()

        for vocab in self.repo.find_all():
            candidates.discard(vocab.headword)

        new_entries = [Vocabulary.create(headword) for headword in candidates]
        self.repo.save_all(new_entries)

        logger.info("Book ingested", extra={"added": len(new_entries)})
        return new_entries

    def _ignored_headwords(self) -> set[str]:
        try:
            return self.ignore_log.read_all()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning("Could not read ignore list, ingesting unfiltered", extra={"error": str(e)})
            return set()

    # ── random draws ──────────────────────────────────────────

    def get_random_vocabulary(self) -> Vocabulary | None:
        """Draw one entry uniformly at random. None when the dictionary is empty."""
        vocabularies = self.repo.find_all()
        if not vocabularies:
            return None
        return vocabularies[self.random_source.next_int(len(vocabularies))]

    def get_random_translated(self, max_attempts: int | None = None) -> Vocabulary | None:
        """Draw a random entry that has a translation, translating lazily.

        Untranslated draws are handed to the translator; on a miss a fresh
        entry is drawn. Retries are unbounded unless ``max_attempts`` is set,
        in which case None is returned after that many draws.
        """
        attempts = 0
        while max_attempts is None or attempts < max_attempts:
            attempts += 1
            vocab = self.get_random_vocabulary()
            if vocab is None:
                return None
            if vocab.is_translated:
                return vocab

            translated = self.translator.translate(vocab)
            if translated is not None:
                return translated
            logger.debug("Translation miss, drawing again", extra={"headword": vocab.headword, "attempt": attempts})

        logger.warning("No translated vocabulary found", extra={"attempts": attempts})
        return None

    # ── single-entry operations ───────────────────────────────

    def get_vocabulary(self, headword: str) -> Vocabulary | None:
        return self.repo.get(headword)

    def require_vocabulary(self, headword: str) -> Vocabulary:
        """Like get_vocabulary, but raises NotFoundError for a missing headword."""
        vocab = self.repo.get(headword)
        if vocab is None:
            raise NotFoundError(f"Vocabulary not found: {headword}")
        return vocab

    def update_vocabulary(self, vocab: Vocabulary) -> Vocabulary:
        """Persist an entry, translating it first unless it is marked known.

        Translation is best-effort: a miss still saves the entry as given.
        """
        if not vocab.known:
            self.translator.translate(vocab)
        return self.repo.save(vocab)

    def drop_and_ignore(self, vocab: Vocabulary) -> None:
        """Append the headword to the ignore list, then delete the entry.

        The two steps are not atomic. A failed append is logged and the
        delete still happens.
        """
        try:
            logger.info("Vocabulary will be added to ignore list", extra={"headword": vocab.headword})
            self.ignore_log.append(vocab.headword)
        except OSError:
            logger.error(
                "Error occurred while updating ignore file",
                extra={"headword": vocab.headword},
                exc_info=True,
            )
        self.repo.delete(vocab)

    def get_all(self) -> list[Vocabulary]:
        """Every entry, in repository enumeration order."""
        return self.repo.find_all()
