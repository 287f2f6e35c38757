"""In-memory implementation of VocabularyRepository for testing."""

from domain.model.vocabulary import Vocabulary


class FakeVocabularyRepository:
    def __init__(self, entries: list[Vocabulary] | None = None):
        # dict keeps insertion order, which stands in for enumeration order
        self.store: dict[str, Vocabulary] = {}
        self.save_all_calls: list[list[Vocabulary]] = []
        for vocab in entries or []:
            self.store[vocab.headword] = vocab

    def find_all(self) -> list[Vocabulary]:
        return list(self.store.values())

    def get(self, headword: str) -> Vocabulary | None:
        return self.store.get(headword)

    def save(self, vocab: Vocabulary) -> Vocabulary:
        self.store[vocab.headword] = vocab
        return vocab

    def save_all(self, vocabs: list[Vocabulary]) -> None:
        self.save_all_calls.append(list(vocabs))
        for vocab in vocabs:
            self.store.setdefault(vocab.headword, vocab)

    def delete(self, vocab: Vocabulary) -> None:
        self.store.pop(vocab.headword, None)
