"""Generic create / update / delete over any record collection.

Every entity kind goes through the same functions; the collection carries
the record type used to build and merge records.
"""
import logging
from typing import Any, Optional

from planner.models.base import parse_id
from planner.services.exceptions import NotFoundError
from planner.store import Collection, R

logger = logging.getLogger(__name__)


def _index_of(collection: Collection[R], record_id: Any) -> Optional[int]:
    key = parse_id(record_id)
    if key is None:
        return None
    for index, record in enumerate(collection.records):
        if record.id == key:
            return index
    return None


def _require_index(collection: Collection[R], record_id: Any) -> int:
    index = _index_of(collection, record_id)
    if index is None:
        raise NotFoundError(f"{collection.name} not found")
    return index


def find_by_id(collection: Collection[R], record_id: Any) -> Optional[R]:
    """First record whose id equals the numeric value of ``record_id``."""
    index = _index_of(collection, record_id)
    return None if index is None else collection.records[index]


def get_by_id(collection: Collection[R], record_id: Any) -> R:
    return collection.records[_require_index(collection, record_id)]


def create(collection: Collection[R], data: dict[str, Any]) -> R:
    """Append a new record built from ``data`` with the next free id."""
    record = collection.record_type.model_validate({**data, "id": collection.next_id()})
    collection.records.append(record)
    logger.info("Created %s %d", collection.name, record.id)
    return record


def update(collection: Collection[R], record_id: Any, data: dict[str, Any]) -> R:
    """Shallow-merge ``data`` over an existing record (partial update).

    Keys absent from ``data`` keep their stored value; the merged record
    takes the original's place in the collection.
    """
    index = _require_index(collection, record_id)
    current = collection.records[index]
    updated = collection.record_type.model_validate({**current.model_dump(), **data})
    collection.records[index] = updated
    logger.info("Updated %s %d (%s)", collection.name, current.id, ", ".join(sorted(data)) or "no fields")
    return updated


def delete(collection: Collection[R], record_id: Any) -> R:
    """Remove one record and return it as it was stored."""
    index = _require_index(collection, record_id)
    removed = collection.records.pop(index)
    logger.info("Deleted %s %d", collection.name, removed.id)
    return removed


def delete_all(collection: Collection[R]) -> int:
    """Empty the collection; returns how many records were removed."""
    count = len(collection.records)
    collection.records.clear()
    logger.info("Deleted %d %s records", count, collection.name)
    return count
