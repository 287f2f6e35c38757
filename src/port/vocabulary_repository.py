"""Port for vocabulary data access."""

from typing import Protocol

from domain.model.vocabulary import Vocabulary


class VocabularyRepository(Protocol):
    """Protocol for the durable headword -> entry mapping.

    Headword uniqueness is the repository's responsibility.
    Failures propagate to the caller; services do not retry.
    """

    def find_all(self) -> list[Vocabulary]:
        """Enumerate every entry. Order is stable within one call."""
        ...

    def get(self, headword: str) -> Vocabulary | None:
        """Get a single entry by headword."""
        ...

    def save(self, vocab: Vocabulary) -> Vocabulary:
        """Insert or replace an entry keyed by headword. Returns the stored entry."""
        ...

    def save_all(self, vocabs: list[Vocabulary]) -> None:
        """Persist a batch of new entries in one call."""
        ...

    def delete(self, vocab: Vocabulary) -> None:
        """Delete an entry. Deleting a missing entry is not an error."""
        ...
