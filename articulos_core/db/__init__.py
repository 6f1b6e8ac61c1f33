"""
Capa de persistencia de articulos.

Expone el Record Store sobre archivo JSON (`JsonRecordStore`) y su
equivalente en memoria (`MemoryRecordStore`).
"""

from .base import DocumentStore, dump_document
from .json_store import (
    DEFAULT_DOCUMENT,
    JsonRecordStore,
    RecordNotFoundError,
    StoreError,
)
from .memory_store import MemoryRecordStore

__all__ = [
    "DEFAULT_DOCUMENT",
    "DocumentStore",
    "dump_document",
    "JsonRecordStore",
    "MemoryRecordStore",
    "RecordNotFoundError",
    "StoreError",
]
