import pytest

from articulos_core.db import MemoryRecordStore, RecordNotFoundError, StoreError
from articulos_core.service import (
    ArticuloNotFoundError,
    ArticuloService,
    ArticuloValidationError,
)

LECHE = {"nombre": "Leche", "marca": "Gloria", "precio": 1, "disponibilidad": "Si"}


def test_crear_assigns_id_first_and_keeps_all_fields(service):
    articulo = service.crear({**LECHE, "lote": "A-12"})

    assert articulo == {"id": "id0001", **LECHE, "lote": "A-12"}
    assert list(articulo)[0] == "id"
    assert service.obtener("id0001") == articulo


def test_crear_ignores_client_supplied_id(service):
    articulo = service.crear({"id": "hack", **LECHE})
    assert articulo["id"] == "id0001"
    with pytest.raises(ArticuloNotFoundError):
        service.obtener("hack")


@pytest.mark.parametrize(
    "datos",
    [
        {"marca": "Gloria"},
        {"nombre": ""},
        {"nombre": None},
        {"nombre": 0},
        {"nombre": False},
        None,
        ["Leche"],
        "Leche",
    ],
)
def test_crear_rejects_missing_or_falsy_nombre(service, datos):
    with pytest.raises(ArticuloValidationError):
        service.crear(datos)
    assert service.listar() == []


def test_listar_returns_storage_order(service):
    for nombre in ("A", "B", "C"):
        service.crear({"nombre": nombre})
    assert [a["nombre"] for a in service.listar()] == ["A", "B", "C"]


def test_obtener_missing_raises_not_found(service):
    with pytest.raises(ArticuloNotFoundError) as exc:
        service.obtener("nope")
    assert exc.value.articulo_id == "nope"


def test_actualizar_merges_without_touching_other_fields(service):
    creado = service.crear(LECHE)

    actualizado = service.actualizar(creado["id"], {"marca": "X", "peso": 30})

    assert actualizado == {**creado, "marca": "X", "peso": 30}
    assert service.obtener(creado["id"]) == actualizado


def test_actualizar_never_changes_id(service):
    creado = service.crear(LECHE)
    actualizado = service.actualizar(creado["id"], {"id": "otro", "precio": 2})
    assert actualizado["id"] == creado["id"]
    assert actualizado["precio"] == 2


def test_actualizar_missing_id_is_a_store_error(service):
    with pytest.raises(RecordNotFoundError):
        service.actualizar("nope", {"marca": "X"})


def test_actualizar_rejects_non_object(service):
    creado = service.crear(LECHE)
    with pytest.raises(ArticuloValidationError):
        service.actualizar(creado["id"], ["marca"])


def test_eliminar_reports_whether_something_was_removed(service):
    creado = service.crear(LECHE)
    assert service.eliminar(creado["id"]) is True
    assert service.eliminar(creado["id"]) is False
    with pytest.raises(ArticuloNotFoundError):
        service.obtener(creado["id"])


def test_default_generator_produces_six_char_ids():
    service = ArticuloService(MemoryRecordStore())
    assert len(service.crear(LECHE)["id"]) == 6


class _BrokenStore(MemoryRecordStore):
    def write(self, document):
        raise StoreError("disco lleno")


def test_store_faults_propagate_from_crear():
    service = ArticuloService(_BrokenStore(), lambda: "abc123")
    with pytest.raises(StoreError):
        service.crear(LECHE)
