"""Unit tests for vocabulary and book routes."""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fastapi.testclient import TestClient
from pymongo.errors import PyMongoError

from api.main import app
from api.dependencies import get_ignore_log, get_random_source, get_translator, get_vocab_repo
from adapter.fake.ignore_log import FakeIgnoreLog
from adapter.fake.random_source import SequenceRandomSource
from adapter.fake.translator import FakeTranslator
from adapter.fake.vocabulary_repository import FakeVocabularyRepository
from domain.model.vocabulary import Vocabulary


class UnavailableRepository(FakeVocabularyRepository):
    def find_all(self):
        raise PyMongoError("no primary")


class RouteTestCase(unittest.TestCase):

    def setUp(self):
        self.client = TestClient(app)
        self.repo = FakeVocabularyRepository()
        self.translator = FakeTranslator()
        self.ignore_log = FakeIgnoreLog()
        self.random_source = SequenceRandomSource([0])
        app.dependency_overrides[get_vocab_repo] = lambda: self.repo
        app.dependency_overrides[get_translator] = lambda: self.translator
        app.dependency_overrides[get_ignore_log] = lambda: self.ignore_log
        app.dependency_overrides[get_random_source] = lambda: self.random_source

    def tearDown(self):
        """Clean up dependency overrides."""
        app.dependency_overrides.clear()


class TestBookRoutes(RouteTestCase):
    """Test cases for POST /books."""

    def test_ingest_book(self):
        response = self.client.post("/books", json={"content": "The quick brown fox, 42 a token;"})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"added": 4, "headwords": ["brown", "fox", "quick", "the"]})
        self.assertEqual(len(self.repo.find_all()), 4)

    def test_ingest_twice_adds_nothing(self):
        self.client.post("/books", json={"content": "The quick brown fox"})
        response = self.client.post("/books", json={"content": "The quick brown fox"})

        self.assertEqual(response.json(), {"added": 0, "headwords": []})

    def test_missing_content(self):
        response = self.client.post("/books", json={})
        self.assertEqual(response.status_code, 422)

    def test_storage_error_returns_503(self):
        app.dependency_overrides[get_vocab_repo] = lambda: UnavailableRepository()

        response = self.client.post("/books", json={"content": "The quick brown fox"})

        self.assertEqual(response.status_code, 503)


class TestListAndGet(RouteTestCase):
    """Test cases for GET /vocabularies and GET /vocabularies/{headword}."""

    def test_list_in_repository_order(self):
        self.repo.save(Vocabulary("zeta", "Zeta", False))
        self.repo.save(Vocabulary("alpha", "", True))

        response = self.client.get("/vocabularies")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), [
            {"headword": "zeta", "translation": "Zeta", "known": False},
            {"headword": "alpha", "translation": "", "known": True},
        ])

    def test_get_single(self):
        self.repo.save(Vocabulary("house", "Haus", False))

        response = self.client.get("/vocabularies/House")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["translation"], "Haus")

    def test_get_missing(self):
        self.assertEqual(self.client.get("/vocabularies/nothing").status_code, 404)


class TestRandomRoutes(RouteTestCase):
    """Test cases for random draws."""

    def test_random_empty_returns_404(self):
        self.assertEqual(self.client.get("/vocabularies/random").status_code, 404)

    def test_random_returns_entry(self):
        self.repo.save(Vocabulary.create("house"))
        self.repo.save(Vocabulary.create("tree"))
        self.random_source.values = [1]

        response = self.client.get("/vocabularies/random")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["headword"], "tree")

    def test_random_translated_translates_lazily(self):
        self.repo.save(Vocabulary.create("zzz"))
        self.repo.save(Vocabulary.create("house"))
        self.translator.translations = {"house": "Haus"}
        self.random_source.values = [0, 1]

        response = self.client.get("/vocabularies/random/translated")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"headword": "house", "translation": "Haus", "known": False})
        self.assertEqual(self.translator.calls, ["zzz", "house"])

    def test_random_translated_gives_up_after_max_attempts(self):
        self.repo.save(Vocabulary.create("zzz"))

        response = self.client.get("/vocabularies/random/translated?max_attempts=3")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.translator.calls, ["zzz"] * 3)


class TestUpdateRoute(RouteTestCase):
    """Test cases for PUT /vocabularies/{headword}."""

    def test_update_unknown_entry_translates(self):
        self.repo.save(Vocabulary.create("house"))
        self.translator.translations = {"house": "Haus"}

        response = self.client.put("/vocabularies/house", json={"translation": "", "known": False})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["translation"], "Haus")
        self.assertEqual(self.repo.get("house").translation, "Haus")

    def test_mark_known_skips_translation(self):
        self.repo.save(Vocabulary.create("house"))
        self.translator.translations = {"house": "Haus"}

        response = self.client.put("/vocabularies/house", json={"translation": " Gebäude ", "known": True})

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"headword": "house", "translation": "Gebäude", "known": True})
        self.assertEqual(self.translator.calls, [])

    def test_update_missing(self):
        response = self.client.put("/vocabularies/house", json={"known": True})
        self.assertEqual(response.status_code, 404)


class TestDropRoute(RouteTestCase):
    """Test cases for DELETE /vocabularies/{headword}."""

    def test_drop_and_ignore(self):
        self.repo.save(Vocabulary.create("foo"))

        response = self.client.delete("/vocabularies/foo")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["headword"], "foo")
        self.assertEqual(self.ignore_log.lines, ["foo"])
        self.assertIsNone(self.repo.get("foo"))

    def test_drop_missing(self):
        response = self.client.delete("/vocabularies/foo")

        self.assertEqual(response.status_code, 404)
        self.assertEqual(self.ignore_log.lines, [])

    def test_headword_random_reachable_by_put_and_delete(self):
        self.repo.save(Vocabulary.create("random"))

        put = self.client.put("/vocabularies/random", json={"translation": "zufällig", "known": True})
        delete = self.client.delete("/vocabularies/random")

        self.assertEqual(put.status_code, 200)
        self.assertEqual(put.json()["translation"], "zufällig")
        self.assertEqual(delete.status_code, 200)
        self.assertEqual(self.ignore_log.lines, ["random"])
        self.assertIsNone(self.repo.get("random"))

    def test_dropped_word_not_reingested(self):
        self.client.post("/books", json={"content": "foo bar baz"})
        self.client.delete("/vocabularies/foo")

        response = self.client.post("/books", json={"content": "foo bar baz"})

        self.assertEqual(response.json()["added"], 0)


if __name__ == "__main__":
    unittest.main()
