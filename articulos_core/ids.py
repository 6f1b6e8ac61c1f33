"""
Generación de identificadores cortos para articulos.

Los ids son strings aleatorios de largo fijo sobre un alfabeto URL-safe
(`A-Za-z0-9_-`). No se verifica colisión contra la colección: con 64 símbolos
y 6 caracteres el espacio es de ~6.9e10 valores, suficiente para el volumen
esperado.
"""

from __future__ import annotations

import secrets
import string
from typing import Callable

URL_SAFE_ALPHABET = string.ascii_letters + string.digits + "_-"
DEFAULT_ID_LENGTH = 6

IdGenerator = Callable[[], str]


def generate_id(length: int = DEFAULT_ID_LENGTH, alphabet: str = URL_SAFE_ALPHABET) -> str:
    """Devuelve un id aleatorio de `length` caracteres tomados de `alphabet`."""
    if length <= 0:
        raise ValueError("length debe ser mayor a 0")
    if not alphabet:
        raise ValueError("alphabet no puede estar vacío")
    return "".join(secrets.choice(alphabet) for _ in range(length))


def make_id_generator(
    length: int = DEFAULT_ID_LENGTH,
    alphabet: str = URL_SAFE_ALPHABET,
) -> IdGenerator:
    """
    Construye un generador sin argumentos con largo y alfabeto fijos.

    Es el formato que espera `ArticuloService`, de modo que se puede
    reemplazar por una variante determinística (tests) o con chequeo de
    colisiones sin tocar el servicio.
    """
    if length <= 0:
        raise ValueError("length debe ser mayor a 0")
    if not alphabet:
        raise ValueError("alphabet no puede estar vacío")

    def _generate() -> str:
        return generate_id(length, alphabet)

    return _generate
