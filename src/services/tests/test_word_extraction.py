"""Unit tests for word extraction from book text."""

import sys
import unittest
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from domain.model.vocabulary import Book
from services.word_extraction import extract_book_words, extract_words, is_candidate, normalize

SAMPLE = 'The quick brown fox, jumps over 42 dogs! a "bad" token; fine.'


class TestExtractWords(unittest.TestCase):
    """Test cases for extract_words."""

    def test_sample_sentence(self):
        """Punctuation is trimmed and rejected tokens are dropped."""
        self.assertEqual(
            extract_words(SAMPLE),
            {"the", "quick", "brown", "fox", "jumps", "over", "dogs", "fine"},
        )

    def test_rejected_tokens_from_sample(self):
        for token in ("42", "a", '"bad"', "token;"):
            with self.subTest(token=token):
                self.assertFalse(is_candidate(token))

    def test_same_content_same_result(self):
        self.assertEqual(extract_words(SAMPLE), extract_words(SAMPLE))

    def test_results_are_lowercase(self):
        words = extract_words("HELLO World MiXeD")
        self.assertEqual(words, {"hello", "world", "mixed"})
        for word in words:
            self.assertEqual(word, word.lower())

    def test_minimum_token_length_is_three(self):
        """Two leading characters plus a final one are required."""
        self.assertEqual(extract_words("an to be"), set())
        self.assertEqual(extract_words("cat"), {"cat"})

    def test_headwords_have_at_least_two_characters(self):
        words = extract_words("ox, be! cat. it? dog")
        self.assertEqual(words, {"ox", "be", "cat", "it", "dog"})
        self.assertTrue(all(len(w) >= 2 for w in words))

    def test_forbidden_character_anywhere_before_last_rejects(self):
        for token in ("don't", "e-mail", "(hello)", "wow!!", "“quoted", "a.b.c", "#tag"):
            with self.subTest(token=token):
                self.assertFalse(is_candidate(token))

    def test_leading_digit_rejected(self):
        self.assertEqual(extract_words("1st 2nd 3rd"), set())

    def test_final_character_outside_class_rejected(self):
        for token in ("quoted”", "word;", "word:", "word)"):
            with self.subTest(token=token):
                self.assertFalse(is_candidate(token))

    def test_final_character_class_quirks(self):
        """A-z spans [ \\ ] ^ _ ` and the class also holds a literal '1'."""
        self.assertTrue(is_candidate("abc_"))
        self.assertTrue(is_candidate("abc`"))
        self.assertTrue(is_candidate("ab1"))
        self.assertEqual(normalize("abc_"), "abc_")
        self.assertEqual(normalize("ab1"), "ab")

    def test_only_one_trailing_character_trimmed(self):
        self.assertEqual(normalize("fox,"), "fox")
        self.assertEqual(normalize("Über,"), "über")
        self.assertEqual(normalize("well,known"), "well,known")

    def test_splits_on_any_whitespace(self):
        self.assertEqual(
            extract_words("  alpha\tbeta\n\ngamma\r\ndelta  "),
            {"alpha", "beta", "gamma", "delta"},
        )

    def test_empty_content(self):
        self.assertEqual(extract_words(""), set())
        self.assertEqual(extract_words("   \n\t"), set())

    def test_duplicates_collapse(self):
        self.assertEqual(extract_words("Dog dog, DOG. dog!"), {"dog"})

    def test_extract_book_words(self):
        self.assertEqual(extract_book_words(Book(content="Hello world.")), {"hello", "world"})


if __name__ == "__main__":
    unittest.main()
