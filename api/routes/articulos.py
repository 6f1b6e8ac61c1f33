"""
Endpoints para gestionar articulos.

Este router maneja:
- GET /articulos: Listar articulos
- GET /articulos/{articulo_id}: Obtener un articulo
- POST /articulos: Registrar un articulo
- PUT /articulos/{articulo_id}: Actualizar campos de un articulo
- DELETE /articulos/{articulo_id}: Eliminar un articulo
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, Response
from fastapi.responses import JSONResponse

from articulos_core.config import Settings
from articulos_core.db import StoreError
from articulos_core.service import (
    ArticuloNotFoundError,
    ArticuloService,
    ArticuloValidationError,
)

from ..dependencies import get_app_settings, get_articulo_service
from ..models.articulos import (
    Articulo,
    ArticuloCreateRequest,
    ArticuloUpdateRequest,
    ErrorResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/articulos", tags=["Articulos"])

_ERROR_500 = {500: {"model": ErrorResponse, "description": "Error interno del servidor"}}


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse({"error": message}, status_code=status_code)


def _store_error(e: StoreError, accion: str) -> JSONResponse:
    logger.error(f"Error del store al {accion}: {e}", exc_info=True)
    return _error(500, str(e))


def _internal_error(e: Exception, accion: str) -> JSONResponse:
    logger.exception(f"Error inesperado al {accion}: {e}")
    return _error(500, str(e) or e.__class__.__name__)


@router.get(
    "",
    summary="Devuelve la lista de articulos",
    responses={200: {"model": list[Articulo], "description": "Lista de los articulos"}, **_ERROR_500},
)
@router.get("/", include_in_schema=False)
async def list_articulos(service: ArticuloService = Depends(get_articulo_service)):
    """
    Lista todos los articulos en el orden en que están guardados.

    Returns:
        Lista de articulos (sin filtros ni paginación)
    """
    try:
        return service.listar()
    except StoreError as e:
        return _store_error(e, "listar articulos")
    except Exception as e:
        return _internal_error(e, "listar articulos")


@router.get(
    "/{articulo_id}",
    summary="Devuelve un articulo",
    responses={
        200: {"model": Articulo, "description": "Exito al obtener un articulo"},
        404: {"description": "No se encontro el articulo"},
        **_ERROR_500,
    },
)
async def get_articulo(articulo_id: str, service: ArticuloService = Depends(get_articulo_service)):
    """
    Obtiene un articulo por su ID.

    Raises:
        404: Si el articulo no existe (body vacío)
    """
    try:
        return service.obtener(articulo_id)
    except ArticuloNotFoundError:
        return Response(status_code=404)
    except StoreError as e:
        return _store_error(e, f"obtener el articulo {articulo_id}")
    except Exception as e:
        return _internal_error(e, f"obtener el articulo {articulo_id}")


@router.post(
    "",
    summary="Registra un articulo",
    responses={200: {"model": Articulo, "description": "Articulo registrado"}, **_ERROR_500},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ArticuloCreateRequest.model_json_schema()}},
        }
    },
)
@router.post("/", include_in_schema=False)
async def create_articulo(
    datos: Any = Body(default=None),
    service: ArticuloService = Depends(get_articulo_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    Registra un nuevo articulo con un ID generado por el servidor.

    Args:
        datos: Campos del articulo. `nombre` es obligatorio.

    Returns:
        El articulo creado, incluyendo su `id`

    Raises:
        500: Si falta `nombre` (status configurable) o falla el store
        400: Si el body no es JSON válido (ver `api.main.request_validation_error`)
    """
    try:
        return service.crear(datos)
    except ArticuloValidationError as e:
        logger.warning(f"Articulo rechazado: {e}")
        return _error(settings.validation_error_status, str(e))
    except StoreError as e:
        return _store_error(e, "registrar el articulo")
    except Exception as e:
        return _internal_error(e, "registrar el articulo")


@router.put(
    "/{articulo_id}",
    summary="Actualiza un articulo",
    responses={200: {"model": Articulo, "description": "Articulo actualizado"}, **_ERROR_500},
    openapi_extra={
        "requestBody": {
            "content": {"application/json": {"schema": ArticuloUpdateRequest.model_json_schema()}},
        }
    },
)
async def update_articulo(
    articulo_id: str,
    datos: Any = Body(default=None),
    service: ArticuloService = Depends(get_articulo_service),
    settings: Settings = Depends(get_app_settings),
):
    """
    Mezcla los campos enviados sobre el articulo existente.

    Los campos no enviados no cambian. Un ID inexistente es una falla del
    store y se responde con 500.
    Un body que no es JSON válido se responde con 400.
    """
    try:
        return service.actualizar(articulo_id, datos)
    except ArticuloValidationError as e:
        logger.warning(f"Actualización rechazada para {articulo_id}: {e}")
        return _error(settings.validation_error_status, str(e))
    except StoreError as e:
        return _store_error(e, f"actualizar el articulo {articulo_id}")
    except Exception as e:
        return _internal_error(e, f"actualizar el articulo {articulo_id}")


@router.delete(
    "/{articulo_id}",
    summary="Elimina un articulo",
    responses={200: {"description": "Articulo eliminado (o inexistente)"}, **_ERROR_500},
)
async def delete_articulo(articulo_id: str, service: ArticuloService = Depends(get_articulo_service)):
    """
    Elimina un articulo. Eliminar un ID que no existe también responde 200.
    """
    try:
        service.eliminar(articulo_id)
    except StoreError as e:
        return _store_error(e, f"eliminar el articulo {articulo_id}")
    except Exception as e:
        return _internal_error(e, f"eliminar el articulo {articulo_id}")
    return Response(status_code=200)
