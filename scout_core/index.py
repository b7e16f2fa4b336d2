"""Indexer: turns documents into a shingle inverted index.

Two entry points share one tokenizer:

- ``create_inverted_index`` builds a fresh index from an ordered corpus,
  numbering documents from 1 and positions per source word.
- ``push_into_index`` appends a single record's string fields into an
  index the caller owns, stamping every reference with position 1.

``index_collection`` loads a collection file and picks one of the two.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from scout_core.loader import DEFAULT_TIMEOUT, load_collection, load_documents
from scout_core.text import shingles, tokenize, words

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Reference:
    document: int
    position: int

    def to_dict(self) -> dict:
        return {"document": self.document, "position": self.position}


InvertedIndex = dict[str, list[Reference]]


def _append(index: InvertedIndex, token: str, reference: Reference) -> None:
    index.setdefault(token, []).append(reference)


# ── Full-corpus builder ─────────────────────────────────────────────


def create_inverted_index(documents: Iterable[str]) -> InvertedIndex:
    """Build an index over ``documents``.

    Document ids are 1-based in input order.  Positions restart at 1 for
    each document and advance once per word, so every shingle cut from
    the same word shares its position.
    """
    index: InvertedIndex = {}
    doc_count = 0

    for document_id, text in enumerate(documents, 1):
        doc_count += 1
        for position, word in enumerate(words(text), 1):
            reference = Reference(document=document_id, position=position)
            for token in shingles(word):
                _append(index, token, reference)

    logger.debug("Indexed %d documents into %d unique tokens", doc_count, len(index))
    return index


# ── Incremental mutator ─────────────────────────────────────────────


def _field_value(record: Any, field: str) -> Any:
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def _record_id(record: Any) -> Any:
    if isinstance(record, Mapping):
        return record["id"]
    try:
        return record.id
    except AttributeError:
        raise KeyError("id") from None


def push_into_index(index: InvertedIndex, record: Any, field_names: Iterable[str]) -> None:
    """Append references for each string field of ``record`` into ``index``.

    Fields that are missing or not strings are skipped.  Every reference
    uses the record's ``id`` as its document and position 1.
    """
    for field in field_names:
        value = _field_value(record, field)
        if not isinstance(value, str):
            continue
        reference = None
        for token in tokenize(value):
            if reference is None:
                reference = Reference(document=_record_id(record), position=1)
            _append(index, token, reference)


class SharedIndex:
    """A growing index fed one record at a time.

    Callers construct and own it; nothing is shared between instances.
    There is no locking, so concurrent writers must be serialized.
    """

    def __init__(self) -> None:
        self.entries: InvertedIndex = {}
        self.record_count = 0

    def push(self, record: Any, field_names: Iterable[str]) -> None:
        push_into_index(self.entries, record, field_names)
        self.record_count += 1

    def __len__(self) -> int:
        return len(self.entries)

    def __contains__(self, token: object) -> bool:
        return token in self.entries

    def __getitem__(self, token: str) -> list[Reference]:
        return self.entries[token]


# ── Collection entry point ──────────────────────────────────────────


def index_documents(documents: list, field_names: Iterable[str] = ()) -> InvertedIndex:
    """Index a loaded corpus.

    Plain strings go through the full-corpus builder; records are pushed
    one at a time on their ``field_names``.  Records without an ``id`` are
    skipped with a warning.
    """
    if all(isinstance(d, str) for d in documents):
        return create_inverted_index(documents)

    fields = list(field_names)
    shared = SharedIndex()
    for position, record in enumerate(documents, 1):
        try:
            _record_id(record)
        except KeyError:
            logger.warning("Skipping record %d: no 'id' field", position)
            continue
        shared.push(record, fields)
    logger.debug("Pushed %d records into %d unique tokens", shared.record_count, len(shared))
    return shared.entries


def index_collection(collection_path: str) -> tuple[InvertedIndex, dict]:
    """Load a collection and index it.

    Returns (index, summary) where summary holds document, token and
    reference counts.
    """
    collection = load_collection(collection_path)
    documents = load_documents(
        collection["source"], collection.get("timeout", DEFAULT_TIMEOUT)
    )
    index = index_documents(documents, collection.get("fields") or [])

    return index, {
        "documents": len(documents),
        "tokens": len(index),
        "references": sum(len(refs) for refs in index.values()),
    }
