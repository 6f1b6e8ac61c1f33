"""
API HTTP principal para articulos.

Esta aplicación FastAPI expone un CRUD REST sobre la colección `articulos`
guardada en un documento JSON (ver articulos_core.db).

Uso:
    uvicorn api.main:app --reload --port 8000
"""

import logging
from pathlib import Path
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from articulos_core.config import Settings, get_settings
from articulos_core.core.abstractions import RecordStore
from articulos_core.db import JsonRecordStore
from articulos_core.ids import IdGenerator, make_id_generator
from articulos_core.service import ArticuloService

from .routes import articulos

API_VERSION = "1.0.0"

settings = get_settings()

# Configurar logging según ambiente
log_level = getattr(logging, settings.log_level, logging.INFO)
logging.basicConfig(
    level=log_level,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


async def request_validation_error(request: Request, exc: RequestValidationError) -> JSONResponse:
    """
    Responde 400 con el mismo formato de error que los endpoints de articulos.

    FastAPI rechaza un body que no es JSON válido antes de llegar al endpoint.
    """
    errors = exc.errors()
    detail = errors[0].get("msg", "") if errors else ""
    logger.warning(f"Request inválido en {request.method} {request.url.path}: {errors}")
    message = f"Request inválido: {detail}" if detail else "Request inválido"
    return JSONResponse({"error": message}, status_code=400)


def create_app(
    settings: Optional[Settings] = None,
    store: Optional[RecordStore] = None,
    id_generator: Optional[IdGenerator] = None,
) -> FastAPI:
    """
    Construye la aplicación FastAPI.

    Args:
        settings: Configuración a usar (por defecto, la del entorno)
        store: Record Store a inyectar (por defecto, `JsonRecordStore(settings.db_path)`)
        id_generator: Generador de ids (por defecto, ids aleatorios de `settings.id_length`)

    Returns:
        FastAPI lista para servir
    """
    settings = settings or get_settings()
    if store is None:
        store = JsonRecordStore(Path(settings.db_path))
    if id_generator is None:
        id_generator = make_id_generator(settings.id_length)

    logger.info(f"Iniciando API de articulos en ambiente: {settings.environment}")
    logger.info(f"Record store: {store!r}")

    app = FastAPI(
        title="Articulos API",
        description="API REST para gestionar articulos (productos)",
        version=API_VERSION,
    )

    # CORS: configurar según ambiente
    if settings.cors_origins:
        logger.info(f"CORS origins configurados: {settings.cors_origins}")
        app.add_middleware(
            CORSMiddleware,
            allow_origins=settings.cors_origins,
            allow_credentials=True,
            allow_methods=["*"],
            allow_headers=["*"],
        )

    app.add_exception_handler(RequestValidationError, request_validation_error)

    app.state.settings = settings
    app.state.articulo_service = ArticuloService(store, id_generator)

    # Registrar rutas
    app.include_router(articulos.router)

    @app.get("/")
    async def root():
        """Health check endpoint."""
        return {"status": "ok", "service": "articulos-api"}

    @app.get("/health")
    async def health():
        """Health check detallado."""
        return {
            "status": "ok",
            "service": "articulos-api",
            "version": API_VERSION,
            "environment": settings.environment,
        }

    return app


app = create_app(settings)
