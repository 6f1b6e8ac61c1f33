"""
Record Store sobre un archivo JSON.

Layout del documento:

    {
      "articulos": [
        {"id": "Gis123", "nombre": "Leche", ...}
      ]
    }

El archivo se lee completo en cada operación y se reescribe completo después
de cada modificación. Si no existe, se usa el documento por defecto y se crea
en la primera escritura.
"""

from __future__ import annotations

import copy
import json
import logging
from pathlib import Path
from typing import Optional, Union

from ..core.abstractions import Document
from .base import DEFAULT_DOCUMENT, DocumentStore, RecordNotFoundError, StoreError, dump_document

logger = logging.getLogger(__name__)

__all__ = [
    "DEFAULT_DOCUMENT",
    "JsonRecordStore",
    "RecordNotFoundError",
    "StoreError",
]


def _reject_constant(name: str):
    raise ValueError(f"{name} no es un valor JSON válido")


class JsonRecordStore(DocumentStore):
    """Record Store persistido en `path`."""

    def __init__(self, path: Union[str, Path], defaults: Optional[Document] = None) -> None:
        super().__init__(defaults)
        self.path = Path(path)

    def __repr__(self) -> str:
        return f"JsonRecordStore(path={str(self.path)!r})"

    def exists(self) -> bool:
        return self.path.exists()

    def read(self) -> Document:
        if not self.path.exists():
            return copy.deepcopy(self.defaults)
        try:
            with self.path.open("r", encoding="utf-8") as f:
                document = json.load(f, parse_constant=_reject_constant)
        except ValueError as e:
            raise StoreError(f"El archivo {self.path} no contiene JSON válido: {e}") from e
        except OSError as e:
            raise StoreError(f"No se pudo leer {self.path}: {e}") from e

        if not isinstance(document, dict):
            raise StoreError(f"El archivo {self.path} debe contener un objeto JSON")
        for key, value in self.defaults.items():
            document.setdefault(key, copy.deepcopy(value))
        return document

    def write(self, document: Document) -> None:
        content = dump_document(document)
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(content, encoding="utf-8")
        except OSError as e:
            raise StoreError(f"No se pudo escribir {self.path}: {e}") from e

    def init(self) -> bool:
        """
        Crea el archivo con el documento por defecto si todavía no existe.

        Returns:
            True si el archivo fue creado, False si ya existía.
        """
        if self.path.exists():
            return False
        self.write(copy.deepcopy(self.defaults))
        logger.info(f"Documento JSON creado en {self.path}")
        return True
