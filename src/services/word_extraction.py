"""Turns book prose into candidate headwords.

Pure and deterministic: the same content always yields the same set.

Acceptance rules for a whitespace-separated token:
    - at least two leading characters, none of them a digit or one of
      $ & + ; = @ # | “ " ' < > ^ * . [ ] ? ! : ( ) % -
    - a final character from ? ! , . or the range A-z, or one of { 1 }

Note that ``A-z`` spans the ASCII symbols [ \\ ] ^ _ ` between 'Z' and 'a'.
That quirk is kept so extraction stays compatible with existing dictionaries.
"""

import re

from domain.model.vocabulary import Book

_WHITESPACE = re.compile(r'\s+', re.ASCII)
_TRUE_WORD = re.compile(r'''([^0-9$&+;=@#|“"'<>^*.\[\]?!:()%-]){2,}([?!,.A-z{1}])''')
_TRAILING_NON_LETTER = re.compile(r'[^A-z]$')


def is_candidate(token: str) -> bool:
    """True if the whole token passes the acceptance pattern."""
    return _TRUE_WORD.fullmatch(token) is not None


def normalize(token: str) -> str:
    """Strip one trailing non-letter and lowercase."""
    return _TRAILING_NON_LETTER.sub('', token).lower()


def extract_words(content: str) -> set[str]:
    """Extract the set of candidate headwords from raw text.

    Example:
        extract_words('The quick fox, jumps over 42 dogs!')
        → {'the', 'quick', 'fox', 'jumps', 'over', 'dogs'}
    """
    return {
        normalize(token)
        for token in _WHITESPACE.split(content)
        if is_candidate(token)
    }


def extract_book_words(book: Book) -> set[str]:
    return extract_words(book.content)
