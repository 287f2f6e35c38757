"""Vocabulary domain models."""

from dataclasses import dataclass

from domain.model.errors import ValidationError


@dataclass(frozen=True)
class Book:
    """A blob of English prose handed in for word extraction. Never persisted."""
    content: str


@dataclass
class Vocabulary:
    """A single dictionary entry: English headword, German gloss, known flag.

    State follows the entry lifecycle:
        Untranslated  translation == "" and known is False
        Translated    translation != ""
        Known         known is True (translation may still be empty)

    headword is the identity of the entry and is never changed after creation.
    """

    headword: str
    translation: str = ""
    known: bool = False

    @staticmethod
    def create(headword: str) -> 'Vocabulary':
        """Factory for a freshly discovered, untranslated entry.

        Raises ValidationError unless the headword is non-empty lowercase.
        """
        if not headword or headword != headword.lower():
            raise ValidationError(f"Invalid headword: {headword!r}")
        return Vocabulary(headword=headword)

    @property
    def is_translated(self) -> bool:
        return bool(self.translation)
