# articulos_core/db/base.py
from __future__ import annotations

import copy
import json
import logging
from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional

from ..core.abstractions import Document, Record

"""
articulos_core.db.base
======================

Operaciones de colección compartidas por todos los Record Stores.

Un store concreto solo implementa `read()` (devolver el documento completo) y
`write(document)` (persistirlo). Sobre eso, esta clase resuelve:

- `get`: la lista de registros de una colección.
- `find`: primer registro que coincide con todos los campos de `match`.
- `push`: agregar al final.
- `assign`: merge superficial sobre el primer registro que coincide.
- `remove`: quitar todos los registros que coinciden.

Cada operación hace su propio ciclo leer -> modificar -> escribir. No hay
locks: dos escrituras concurrentes pueden pisarse.
"""

logger = logging.getLogger(__name__)

DEFAULT_DOCUMENT: Document = {"articulos": []}


class StoreError(Exception):
    """Falla del Record Store (lectura, escritura o documento inválido)."""


class RecordNotFoundError(StoreError):
    """Se intentó modificar un registro que no existe."""


def _matches(record: Record, match: Dict[str, Any]) -> bool:
    return all(record.get(key) == value for key, value in match.items())


def dump_document(document: Document) -> str:
    """
    Serializa el documento como lo guarda el store en disco.

    NaN e Infinity no son JSON estándar: un documento que los contiene no se
    podría devolver en una respuesta, así que se rechaza antes de persistirlo.

    Raises:
        StoreError: si el documento no es serializable.
    """
    try:
        return json.dumps(document, ensure_ascii=False, indent=2, allow_nan=False)
    except (TypeError, ValueError) as e:
        raise StoreError(f"El documento no se puede guardar como JSON: {e}") from e


class DocumentStore(ABC):
    """Base de los Record Stores respaldados por un único documento."""

    def __init__(self, defaults: Optional[Document] = None) -> None:
        self.defaults: Document = copy.deepcopy(defaults if defaults is not None else DEFAULT_DOCUMENT)

    # -------------------------- persistencia --------------------------
    @abstractmethod
    def read(self) -> Document:
        ...

    @abstractmethod
    def write(self, document: Document) -> None:
        ...

    def _collection(self, document: Document, collection: str) -> List[Record]:
        items = document.setdefault(collection, [])
        if not isinstance(items, list):
            raise StoreError(f"La colección '{collection}' no es una lista")
        return items

    # -------------------------- lectura --------------------------
    def get(self, collection: str) -> List[Record]:
        return list(self._collection(self.read(), collection))

    def find(self, collection: str, **match: Any) -> Optional[Record]:
        for record in self._collection(self.read(), collection):
            if isinstance(record, dict) and _matches(record, match):
                return record
        return None

    # -------------------------- escritura --------------------------
    def push(self, collection: str, record: Record) -> Record:
        document = self.read()
        self._collection(document, collection).append(record)
        self.write(document)
        return record

    def assign(self, collection: str, fields: Record, **match: Any) -> Record:
        document = self.read()
        for record in self._collection(document, collection):
            if isinstance(record, dict) and _matches(record, match):
                record.update(fields)
                self.write(document)
                return record
        raise RecordNotFoundError(f"No existe un registro en '{collection}' que coincida con {match}")

    def remove(self, collection: str, **match: Any) -> List[Record]:
        document = self.read()
        items = self._collection(document, collection)
        removed = [r for r in items if isinstance(r, dict) and _matches(r, match)]
        document[collection] = [r for r in items if not (isinstance(r, dict) and _matches(r, match))]
        self.write(document)
        if removed:
            logger.debug(f"Eliminados {len(removed)} registros de '{collection}'")
        return removed
