# -*- coding: utf-8 -*-
"""Alibeby — baby growth and feeding records with derived statistics."""

from .errors import AlibebyError, StorageError, ValidationError
from .records.models import Collection, FeedingEvent, FeedingType, GrowthRecord
from .records.storage import JsonFileMedium, MemoryMedium, RecordStore
from .stats.models import Period

__all__ = [
    "AlibebyError",
    "Collection",
    "FeedingEvent",
    "FeedingType",
    "GrowthRecord",
    "JsonFileMedium",
    "MemoryMedium",
    "Period",
    "RecordStore",
    "StorageError",
    "ValidationError",
]
