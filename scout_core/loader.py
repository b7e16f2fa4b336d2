"""Corpus loading: collection files and the JSON document lists they point at.

A failed fetch is never fatal.  The error is logged and an empty corpus
is returned so the caller can still render an (empty) result.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


def is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


def load_collection(collection_path: str) -> dict:
    """Parse a collection file.  Relative file sources resolve against it."""
    path = Path(collection_path)
    collection = json.loads(path.read_text(encoding="utf-8"))
    source = collection.get("source") if isinstance(collection, dict) else None
    if isinstance(source, str) and source and not is_url(source):
        source_path = Path(source)
        if not source_path.is_absolute():
            collection["source"] = str(path.parent / source_path)
    return collection


def _fetch(url: str, timeout: float, transport: httpx.BaseTransport | None) -> Any:
    logger.info("Fetching documents from %s", url)
    with httpx.Client(timeout=timeout, follow_redirects=True, transport=transport) as client:
        resp = client.get(url)
        resp.raise_for_status()
        return resp.json()


def load_documents(
    source: str,
    timeout: float = DEFAULT_TIMEOUT,
    transport: httpx.BaseTransport | None = None,
) -> list:
    """Load a JSON list of documents (strings or records) from a URL or file.

    Returns [] when the source cannot be read, is not JSON, or does not
    hold a list.
    """
    try:
        if is_url(source):
            payload = _fetch(source, timeout, transport)
        else:
            logger.info("Reading documents from %s", source)
            payload = json.loads(Path(source).read_text(encoding="utf-8"))
    except (httpx.HTTPError, httpx.InvalidURL) as e:
        logger.error("Error fetching documents from %s: %s", source, e)
        return []
    except OSError as e:
        logger.error("Error reading documents from %s: %s", source, e)
        return []
    except ValueError as e:
        logger.error("Invalid JSON in %s: %s", source, e)
        return []

    if not isinstance(payload, list):
        logger.error("Expected a JSON list in %s, got %s", source, type(payload).__name__)
        return []

    logger.debug("Loaded %d documents from %s", len(payload), source)
    return payload
