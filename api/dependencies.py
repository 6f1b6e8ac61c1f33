"""
Dependencias de FastAPI para los endpoints de articulos.

El servicio y la configuración se crean en `create_app()` y se guardan en
`app.state`; estas funciones los exponen a los endpoints vía `Depends`.
"""

import logging

from fastapi import Request

from articulos_core.config import Settings, get_settings
from articulos_core.service import ArticuloService

logger = logging.getLogger(__name__)


def get_articulo_service(request: Request) -> ArticuloService:
    """
    Devuelve el `ArticuloService` configurado para la aplicación.

    Raises:
        RuntimeError: si la app no fue creada con `create_app()`.
    """
    service = getattr(request.app.state, "articulo_service", None)
    if service is None:
        logger.error("La app no tiene articulo_service en app.state; usar create_app()")
        raise RuntimeError("ArticuloService no configurado")
    return service


def get_app_settings(request: Request) -> Settings:
    """Settings de la app; si no hay ninguno en `app.state`, los del entorno."""
    settings = getattr(request.app.state, "settings", None)
    return settings or get_settings()
