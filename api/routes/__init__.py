"""Rutas de la API."""

from . import articulos

__all__ = ["articulos"]
