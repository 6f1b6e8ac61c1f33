"""Record Store en memoria, para tests y herramientas."""

from __future__ import annotations

import copy
from typing import Optional

from ..core.abstractions import Document
from .base import DocumentStore, dump_document


class MemoryRecordStore(DocumentStore):
    """
    Mismo contrato que `JsonRecordStore`, guardando el documento en un dict.

    `read()` devuelve una copia profunda: modificar un registro devuelto no
    altera el store hasta que se llame `write()`.
    """

    def __init__(self, document: Optional[Document] = None, defaults: Optional[Document] = None) -> None:
        super().__init__(defaults)
        self._document: Document = copy.deepcopy(document if document is not None else self.defaults)
        self.writes = 0

    def read(self) -> Document:
        document = copy.deepcopy(self._document)
        for key, value in self.defaults.items():
            document.setdefault(key, copy.deepcopy(value))
        return document

    def write(self, document: Document) -> None:
        dump_document(document)
        self._document = copy.deepcopy(document)
        self.writes += 1
