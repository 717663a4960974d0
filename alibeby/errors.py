# -*- coding: utf-8 -*-
"""Error taxonomy shared by the record store and its collaborators."""

from __future__ import annotations


class AlibebyError(Exception):
    """Base class for every error raised by this package."""


class StorageError(AlibebyError):
    """The persistence medium could not be read, written or deserialized."""

    def __init__(self, message: str, *, key: str | None = None) -> None:
        super().__init__(message)
        self.key = key


class ValidationError(AlibebyError):
    """Field values rejected before a record reaches the store."""

    def __init__(self, message: str, *, errors: list | None = None) -> None:
        super().__init__(message)
        self.errors = errors or []
