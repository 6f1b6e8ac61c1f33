# articulos_core/config.py
from dataclasses import dataclass, field
from functools import lru_cache
import os

from dotenv import load_dotenv

"""
articulos_core.config
=====================

Gestión centralizada de configuración de la aplicación.

Este módulo define:
- La estructura de configuración (`Settings`)
- El mecanismo para cargar variables desde entorno (.env)
- Un acceso único y cacheado a la configuración (`get_settings`)

Convenciones
------------
- Las variables de entorno se cargan desde un archivo `.env` si existe.
- Los defaults están pensados para desarrollo local.
- Un entero mal formado en el entorno no rompe el arranque: se usa el default.
"""

# Cargar variables de entorno desde .env (si existe)
load_dotenv()


@dataclass
class Settings:
    """
    Contenedor tipado de configuración global de la aplicación.

    Attributes
    ----------
    environment:
        Nombre del ambiente (local, dev, prod). Solo informativo.
    log_level:
        Nivel de logging para `logging.basicConfig`.
    db_path:
        Ruta del documento JSON que guarda la colección `articulos`.
    id_length:
        Largo de los ids generados para articulos nuevos.
    validation_error_status:
        Status HTTP con el que se responde un articulo inválido
        (por ejemplo, sin `nombre`). 500 por compatibilidad; 400 es la
        alternativa que separa errores del cliente de fallas del servidor.
    cors_origins:
        Orígenes permitidos por el middleware de CORS.
    api_host / api_port:
        Dirección donde escucha uvicorn cuando se usa `run_api.py`.
    """

    environment: str = "local"
    log_level: str = "INFO"
    db_path: str = "data/db.json"
    id_length: int = 6
    validation_error_status: int = 500
    cors_origins: list[str] = field(
        default_factory=lambda: ["http://localhost:3000", "http://localhost:3001"]
    )
    api_host: str = "0.0.0.0"
    api_port: int = 8000


def _int(value: str | None, default: int) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        return default


def _origins(value: str | None) -> list[str]:
    if value is None:
        return ["http://localhost:3000", "http://localhost:3001"]
    return [origin.strip() for origin in value.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    """
    Devuelve una instancia única y cacheada de `Settings`.

    Variables de entorno utilizadas
    -------------------------------
    - ENVIRONMENT (default: "local")
    - LOG_LEVEL (default: "INFO")
    - DB_PATH (default: "data/db.json")
    - ID_LENGTH (default: 6)
    - VALIDATION_ERROR_STATUS (default: 500)
    - CORS_ORIGINS (default: "http://localhost:3000,http://localhost:3001")
    - API_HOST / API_PORT (default: "0.0.0.0" / 8000)

    Notas
    -----
    En tests, llamar `get_settings.cache_clear()` después de cambiar el entorno.
    """
    id_length = _int(os.getenv("ID_LENGTH"), 6)
    if id_length <= 0:
        id_length = 6

    return Settings(
        environment=os.getenv("ENVIRONMENT", "local"),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
        db_path=os.getenv("DB_PATH", "data/db.json"),
        id_length=id_length,
        validation_error_status=_int(os.getenv("VALIDATION_ERROR_STATUS"), 500),
        cors_origins=_origins(os.getenv("CORS_ORIGINS")),
        api_host=os.getenv("API_HOST", "0.0.0.0"),
        api_port=_int(os.getenv("API_PORT"), 8000),
    )
