"""Scoring engine: term frequency, inverse document frequency, TF-IDF.

All functions are read-only over an ``InvertedIndex``.  A term missing
from the index scores 0 rather than raising.
"""

from __future__ import annotations

import math
from collections import Counter

from scout_core.index import InvertedIndex


def count_documents(index: InvertedIndex) -> int:
    """Number of distinct documents referenced anywhere in ``index``."""
    return len({ref.document for refs in index.values() for ref in refs})


def calculate_term_frequency(term: str, index: InvertedIndex) -> dict[int, int] | int:
    """Occurrences of ``term`` per document, or the scalar 0 if absent."""
    references = index.get(term)
    if not references:
        return 0
    return dict(Counter(ref.document for ref in references))


def calculate_inverse_document_frequency(term: str, index: InvertedIndex) -> float:
    """ln(total documents / documents containing ``term``)."""
    references = index.get(term)
    if not references:
        return 0

    total_documents = count_documents(index)
    document_frequency = len({ref.document for ref in references})
    if document_frequency == 0:
        return 0

    return math.log(total_documents / document_frequency)


def calculate_tfidf(term: str, index: InvertedIndex, total_documents: int) -> float:
    """Sum of count × idf over every document holding ``term``, divided
    by ``total_documents``.

    An absent term scores 0 whatever the total.  Otherwise
    ``total_documents`` must be positive; ``count_documents(index)`` gives
    the value consistent with the idf.
    """
    term_frequency = calculate_term_frequency(term, index)
    if not term_frequency:
        return 0.0
    if total_documents <= 0:
        raise ValueError(f"total_documents must be positive, got {total_documents}")

    idf = calculate_inverse_document_frequency(term, index)
    tfidf = sum(count * idf for count in term_frequency.values())

    return tfidf / total_documents
