"""Two-level collection validation: syntactic and semantic.

Syntactic = structure and types of the collection file.
Semantic  = consistency between the collection and the corpus it loads.
"""

from __future__ import annotations

import json

from scout_core.loader import DEFAULT_TIMEOUT, load_collection, load_documents

DEFAULT_FIELDS: list[str] = []


# ── Syntactic Validation ────────────────────────────────────────────

def validate_syntactic(collection: dict) -> list[str]:
    """Check required fields and types.  Returns list of error strings."""
    errors: list[str] = []

    if not isinstance(collection, dict):
        return ["Collection must be a JSON object."]

    if not isinstance(collection.get("name"), str) or not collection["name"]:
        errors.append("'name' is required and must be a non-empty string.")
    if not isinstance(collection.get("source"), str) or not collection["source"]:
        errors.append("'source' is required and must be a non-empty string (URL or path).")

    fields = collection.get("fields")
    if fields is not None:
        if not isinstance(fields, list) or not all(isinstance(f, str) and f for f in fields):
            errors.append("'fields' must be a list of non-empty strings.")

    timeout = collection.get("timeout")
    if timeout is not None and (
        isinstance(timeout, bool) or not isinstance(timeout, (int, float)) or timeout <= 0
    ):
        errors.append("'timeout' must be a positive number of seconds.")

    return errors


# ── Semantic Validation ─────────────────────────────────────────────

def validate_semantic(collection: dict, documents: list) -> list[str]:
    """Check the collection against the documents it produced."""
    errors: list[str] = []

    if not documents:
        errors.append(f"Source '{collection['source']}' produced no documents.")
        return errors

    records = [d for d in documents if isinstance(d, dict)]
    texts = [d for d in documents if isinstance(d, str)]
    if len(records) + len(texts) != len(documents):
        errors.append("Documents must be strings or JSON objects.")
    if records and texts:
        errors.append("Documents mix plain strings and records; use one kind.")

    fields = collection.get("fields") or DEFAULT_FIELDS
    if records and not fields:
        errors.append(
            "Source holds records but 'fields' is empty. "
            "List the record fields to index, e.g. [\"title\"]."
        )

    missing_ids = sum(1 for r in records if "id" not in r)
    if missing_ids:
        errors.append(f"{missing_ids} record(s) have no 'id' field.")

    if fields and records:
        unknown = [f for f in fields if not any(f in r for r in records)]
        if unknown:
            available = sorted({k for r in records for k in r})
            errors.append(
                f"Unknown fields: {unknown}. Available fields: {available}."
            )

    return errors


# ── Top-level validate ──────────────────────────────────────────────

def validate_collection(collection_path: str) -> tuple[bool, list[str]]:
    """Run syntactic + semantic validation on a collection file.

    Returns (passed, errors).
    """
    try:
        collection = load_collection(collection_path)
    except json.JSONDecodeError as e:
        return False, [f"Invalid JSON: {e}"]
    except FileNotFoundError:
        return False, [f"Collection file not found: {collection_path}"]

    syn_errors = validate_syntactic(collection)
    if syn_errors:
        return False, syn_errors

    documents = load_documents(collection["source"], collection.get("timeout", DEFAULT_TIMEOUT))
    sem_errors = validate_semantic(collection, documents)
    if sem_errors:
        return False, sem_errors

    return True, []
