"""
Casos de uso sobre la colección de articulos.

`ArticuloService` orquesta el Record Store y el generador de ids. No conoce
HTTP: comunica cada resultado con un valor de retorno o con una excepción de
un tipo concreto, y el router decide el status code.

Errores
-------
- `ArticuloValidationError`: el payload no es un objeto o le falta `nombre`.
- `ArticuloNotFoundError`: no existe un articulo con ese id (solo `obtener`).
- `StoreError` (de `articulos_core.db`): falla del store. Incluye
  `RecordNotFoundError` cuando `actualizar` apunta a un id inexistente.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List

from .core.abstractions import Record, RecordStore
from .ids import IdGenerator, make_id_generator

logger = logging.getLogger(__name__)

COLLECTION = "articulos"
REQUIRED_FIELD = "nombre"


class ArticuloError(Exception):
    """Base de los errores del servicio de articulos."""


class ArticuloValidationError(ArticuloError):
    """El articulo recibido no cumple los campos obligatorios."""


class ArticuloNotFoundError(ArticuloError):
    """No existe un articulo con el id pedido."""

    def __init__(self, articulo_id: str) -> None:
        super().__init__(f"No se encontró el articulo {articulo_id}")
        self.articulo_id = articulo_id


def _as_fields(datos: Any) -> Dict[str, Any]:
    if not isinstance(datos, dict):
        raise ArticuloValidationError("El articulo debe ser un objeto JSON")
    # El id lo asigna el servidor y no cambia después de creado
    return {key: value for key, value in datos.items() if key != "id"}


class ArticuloService:
    """Listado, consulta, alta, modificación y baja de articulos."""

    def __init__(self, store: RecordStore, generate_id: IdGenerator | None = None) -> None:
        self.store = store
        self.generate_id = generate_id or make_id_generator()

    def listar(self) -> List[Record]:
        return self.store.get(COLLECTION)

    def obtener(self, articulo_id: str) -> Record:
        articulo = self.store.find(COLLECTION, id=articulo_id)
        if articulo is None:
            raise ArticuloNotFoundError(articulo_id)
        return articulo

    def crear(self, datos: Any) -> Record:
        """
        Registra un articulo nuevo.

        Args:
            datos: Campos enviados por el cliente. `nombre` es obligatorio;
                cualquier otro campo se guarda tal cual. Un `id` enviado por
                el cliente se descarta.

        Returns:
            El articulo creado, con `id` como primer campo.

        Raises:
            ArticuloValidationError: si `datos` no es un objeto o `nombre`
                falta o es falsy.
            StoreError: si el store no pudo persistir.
        """
        fields = _as_fields(datos)
        if not fields.get(REQUIRED_FIELD):
            raise ArticuloValidationError("No se ingreso Nombre")

        articulo = {"id": self.generate_id(), **fields}
        self.store.push(COLLECTION, articulo)
        logger.info(f"Articulo {articulo['id']} creado")
        return articulo

    def actualizar(self, articulo_id: str, datos: Any) -> Record:
        """
        Mezcla `datos` sobre el articulo `articulo_id` (merge superficial).

        Los campos no enviados quedan intactos; no se eliminan campos. La
        respuesta es el articulo tal como queda en el store.

        Raises:
            ArticuloValidationError: si `datos` no es un objeto.
            StoreError: falla del store, o `RecordNotFoundError` si el id no existe.
        """
        fields = _as_fields(datos)
        self.store.assign(COLLECTION, fields, id=articulo_id)
        logger.info(f"Articulo {articulo_id} actualizado ({', '.join(sorted(fields)) or 'sin cambios'})")
        return self.store.find(COLLECTION, id=articulo_id)

    def eliminar(self, articulo_id: str) -> bool:
        """Elimina el articulo; devuelve False si no existía (no es un error)."""
        removed = self.store.remove(COLLECTION, id=articulo_id)
        if removed:
            logger.info(f"Articulo {articulo_id} eliminado")
        return bool(removed)
