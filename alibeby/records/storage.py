# -*- coding: utf-8 -*-
"""Records — key-value storage for the growth and feeding collections.

Each collection is persisted as one JSON array under its storage key
(``userRecords`` / ``feedingRecords``). Records are immutable; the only
mutations are ``append`` and ``delete``.

The store keeps no in-memory cache. Every call reads the medium again, and
``append``/``delete`` are plain read-modify-write cycles: callers must not
issue two writes to the same collection concurrently.
"""

from __future__ import annotations

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Iterable, List, Optional

from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from .models import Collection, Record

from ..config import settings
from ..errors import StorageError

logger = logging.getLogger(__name__)


class KeyValueMedium(ABC):
    """Flat string-to-string namespace the store persists into."""

    @abstractmethod
    def read(self, key: str) -> Optional[str]:
        """Return the stored value, or ``None`` when the key is absent."""

    @abstractmethod
    def write(self, key: str, value: str) -> None:
        ...


class JsonFileMedium(KeyValueMedium):
    """One UTF-8 ``<key>.json`` file per key under ``root``."""

    def __init__(self, root: Path | None = None) -> None:
        self.root = root or settings.data_root

    def _path(self, key: str) -> Path:
        return self.root / f"{key}.json"

    def read(self, key: str) -> Optional[str]:
        fp = self._path(key)
        if not fp.exists():
            return None
        return fp.read_text(encoding="utf-8")

    def write(self, key: str, value: str) -> None:
        self.root.mkdir(parents=True, exist_ok=True)
        self._path(key).write_text(value, encoding="utf-8")


class MemoryMedium(KeyValueMedium):
    def __init__(self, initial: Dict[str, str] | None = None) -> None:
        self._values: Dict[str, str] = dict(initial or {})

    def read(self, key: str) -> Optional[str]:
        return self._values.get(key)

    def write(self, key: str, value: str) -> None:
        self._values[key] = value


def latest_record(records: Iterable[Record]) -> Optional[Record]:
    """Record with the greatest timestamp; on ties the last one seen wins."""
    best: Optional[Record] = None
    for record in records:
        if best is None or record.timestamp >= best.timestamp:
            best = record
    return best


class RecordStore:
    def __init__(self, medium: KeyValueMedium | None = None) -> None:
        self.medium = medium or JsonFileMedium()

    def _adapter(self, collection: Collection) -> TypeAdapter:
        return TypeAdapter(List[collection.model])

    def get(self, collection: Collection | str) -> List[Record]:
        collection = Collection(collection)
        key = collection.value
        try:
            raw = self.medium.read(key)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Failed to read collection %s: %s", key, exc)
            raise StorageError(f"Cannot read {key}: {exc}", key=key) from exc
        if raw is None:
            return []

        try:
            payload = json.loads(raw)
            return list(self._adapter(collection).validate_python(payload))
        except (json.JSONDecodeError, PydanticValidationError) as exc:
            logger.error("Failed to deserialize collection %s: %s", key, exc)
            raise StorageError(f"Corrupt payload for {key}: {exc}", key=key) from exc

    def _put(self, collection: Collection, records: List[Record]) -> None:
        key = collection.value
        payload = json.dumps(
            [record.model_dump(mode="json") for record in records],
            ensure_ascii=False,
            indent=2,
        )
        try:
            self.medium.write(key, payload)
        except OSError as exc:
            logger.error("Failed to write collection %s: %s", key, exc)
            raise StorageError(f"Cannot write {key}: {exc}", key=key) from exc

    def append(self, collection: Collection | str, record: Record) -> None:
        collection = Collection(collection)
        if not isinstance(record, collection.model):
            raise TypeError(
                f"{collection.value} holds {collection.model.__name__}, got {type(record).__name__}"
            )
        records = self.get(collection)
        records.append(record)
        self._put(collection, records)
        logger.info("Appended record %s to %s (%d total)", record.id, collection.value, len(records))

    def delete(self, collection: Collection | str, record_id: str) -> None:
        collection = Collection(collection)
        records = self.get(collection)
        remaining = [r for r in records if r.id != record_id]
        if len(remaining) == len(records):
            logger.warning("Delete of %s in %s matched nothing", record_id, collection.value)
            return
        self._put(collection, remaining)
        logger.info("Deleted record %s from %s", record_id, collection.value)

    def latest(self, collection: Collection | str) -> Optional[Record]:
        return latest_record(self.get(collection))

    def history(self, collection: Collection | str) -> List[Record]:
        """Collection sorted newest first, for history listings."""
        return sorted(self.get(collection), key=lambda r: r.timestamp, reverse=True)
