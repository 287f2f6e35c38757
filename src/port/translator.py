"""Translator port — outbound interface for English → German glosses."""

from typing import Protocol

from domain.model.vocabulary import Vocabulary


class TranslatorPort(Protocol):
    """Best-effort translation of one entry.

    On success the translator writes the gloss onto ``vocab.translation``
    and returns the same object. Any miss (unknown word, backend failure)
    returns None and leaves the entry untouched.
    """

    def translate(self, vocab: Vocabulary) -> Vocabulary | None: ...
