"""
Abstracciones (Protocols) del Record Store.

El servicio de articulos trabaja contra esta interfaz y no contra un archivo
concreto, así se puede inyectar un store en memoria en tests o herramientas.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Protocol

Record = Dict[str, Any]
Document = Dict[str, Any]


class RecordStore(Protocol):
    """
    Interfaz de una colección de registros persistida como documento.

    Cada operación lee el estado actual del store (no hay cache entre
    llamadas). Las operaciones que modifican la colección la persisten
    completa antes de retornar.
    """

    def get(self, collection: str) -> List[Record]:
        """
        Devuelve todos los registros de `collection` en orden de almacenamiento.

        Una colección inexistente se trata como vacía.
        """
        ...

    def find(self, collection: str, **match: Any) -> Optional[Record]:
        """Devuelve el primer registro cuyos campos coinciden con `match`, o None."""
        ...

    def push(self, collection: str, record: Record) -> Record:
        """Agrega `record` al final de `collection` y persiste."""
        ...

    def assign(self, collection: str, fields: Record, **match: Any) -> Record:
        """
        Mezcla `fields` sobre el primer registro que coincide con `match` y persiste.

        Raises:
            RecordNotFoundError: si ningún registro coincide.
        """
        ...

    def remove(self, collection: str, **match: Any) -> List[Record]:
        """Elimina los registros que coinciden con `match`, persiste y los devuelve."""
        ...

    def read(self) -> Document:
        """Devuelve el documento completo (todas las colecciones)."""
        ...

    def write(self, document: Document) -> None:
        """Persiste el documento completo."""
        ...
