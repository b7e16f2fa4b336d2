"""Shared text preprocessing for the index builder and the mutator.

Every indexing path must tokenize identically, otherwise a term looked
up at scoring time would miss the shingles stored at index time.
"""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator

MIN_SHINGLE_LENGTH = 3

STOP_WORDS = frozenset(
    "a an the and or but is are was were this that it its in on at to for "
    "with as by of from".split()
)

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")


def words(text: str) -> list[str]:
    """Lowercase → drop punctuation → split on whitespace → remove stop words."""
    cleaned = _NON_ALNUM.sub("", text.lower())
    return prune_stop_words(cleaned.split())


def prune_stop_words(tokens: Iterable[str]) -> list[str]:
    return [t for t in tokens if t not in STOP_WORDS]


def shingles(word: str) -> Iterator[str]:
    """Every substring of ``word`` at least three characters long.

    Ordered by start offset, then by length:
    ``"hello"`` → hel, hell, hello, ell, ello, llo.
    """
    for i in range(len(word)):
        for j in range(i + MIN_SHINGLE_LENGTH, len(word) + 1):
            yield word[i:j]


def tokenize(text: str) -> Iterator[str]:
    for word in words(text):
        yield from shingles(word)


def normalize_term(term: str) -> str:
    """Clean a query term the way words are cleaned at index time."""
    return "".join(_NON_ALNUM.sub("", term.lower()).split())
