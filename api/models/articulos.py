"""
Modelos de la API de articulos.

Se usan para documentar el contrato en OpenAPI (`/docs`). Los endpoints no
validan el body con estos modelos: un articulo acepta cualquier campo extra y
solo `nombre` es obligatorio al crear.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

EJEMPLO_ARTICULO = {
    "id": "Gis123",
    "nombre": "Leche",
    "marca": "Gloria",
    "precio": 1,
    "tamanio": 8,
    "color": "Celeste",
    "peso": 30,
    "disponibilidad": "Si",
}


class ArticuloBase(BaseModel):
    """Campos conocidos de un articulo. Se admiten campos adicionales."""

    model_config = ConfigDict(extra="allow")

    nombre: Optional[str] = Field(default=None, description="Nombre")
    marca: Optional[str] = Field(default=None, description="Marca")
    precio: Optional[float] = Field(default=None, description="Precio")
    tamanio: Optional[int] = Field(default=None, description="Tamaño")
    color: Optional[str] = Field(default=None, description="Color")
    peso: Optional[float] = Field(default=None, description="Peso")
    disponibilidad: Optional[str] = Field(default=None, description="Disponibilidad")


class ArticuloCreateRequest(ArticuloBase):
    """Request para registrar un articulo. El `id` lo genera el servidor."""

    model_config = ConfigDict(
        extra="allow",
        json_schema_extra={"example": {k: v for k, v in EJEMPLO_ARTICULO.items() if k != "id"}},
    )

    nombre: str = Field(..., description="Nombre (obligatorio)")


class ArticuloUpdateRequest(ArticuloBase):
    """Request de actualización parcial: solo se modifican los campos enviados."""

    model_config = ConfigDict(extra="allow", json_schema_extra={"example": {"marca": "Laive"}})


class Articulo(ArticuloBase):
    """Articulo tal como queda guardado."""

    model_config = ConfigDict(extra="allow", json_schema_extra={"example": EJEMPLO_ARTICULO})

    id: str = Field(..., description="ID autogenerado")


class ErrorResponse(BaseModel):
    """Cuerpo de error devuelto por los endpoints de articulos."""

    model_config = ConfigDict(json_schema_extra={"example": {"error": "No se ingreso Nombre"}})

    error: str = Field(..., description="Descripción del error")
