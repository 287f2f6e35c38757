"""In-memory implementation of TranslatorPort for testing."""

from domain.model.vocabulary import Vocabulary


class FakeTranslator:
    """Fake translator that looks glosses up in a preconfigured mapping."""

    def __init__(self, translations: dict[str, str] | None = None):
        self.translations = translations or {}
        self.calls: list[str] = []

    def translate(self, vocab: Vocabulary) -> Vocabulary | None:
        self.calls.append(vocab.headword)
        gloss = self.translations.get(vocab.headword)
        if not gloss:
            return None
        vocab.translation = gloss
        return vocab
