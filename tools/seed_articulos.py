from __future__ import annotations

import argparse

from articulos_core.config import get_settings
from articulos_core.db import JsonRecordStore
from articulos_core.ids import make_id_generator
from articulos_core.service import COLLECTION, ArticuloService


SEED = [
    dict(nombre="Leche", marca="Gloria", precio=1, tamanio=8, color="Celeste", peso=30, disponibilidad="Si"),
    dict(nombre="Yogurt", marca="Laive", precio=2.5, tamanio=1, color="Rosado", peso=1, disponibilidad="Si"),
    dict(nombre="Mantequilla", marca="Gloria", precio=4.2, peso=0.2, disponibilidad="No"),
    dict(nombre="Queso fresco", marca="Bonle", precio=9.9, color="Blanco", peso=0.5, disponibilidad="Si"),
]


def seed(service: ArticuloService, replace: bool = False) -> int:
    """
    Carga los articulos de SEED.

    Sin `replace`, un articulo cuyo `nombre` y `marca` ya existen se saltea.
    Con `replace`, la colección se vacía antes de cargar.

    Returns:
        Cantidad de articulos creados.
    """
    if replace:
        document = service.store.read()
        document[COLLECTION] = []
        service.store.write(document)

    existentes = {(a.get("nombre"), a.get("marca")) for a in service.listar()}
    creados = 0
    for item in SEED:
        if (item["nombre"], item.get("marca")) in existentes:
            continue
        service.crear(item)
        creados += 1
    return creados


def main() -> None:
    parser = argparse.ArgumentParser(description="Carga articulos de ejemplo en DB_PATH")
    parser.add_argument("--replace", action="store_true", help="Vacía la colección antes de cargar")
    args = parser.parse_args()

    settings = get_settings()
    store = JsonRecordStore(settings.db_path)
    service = ArticuloService(store, make_id_generator(settings.id_length))
    creados = seed(service, replace=args.replace)
    print(f"✅ Seed OK. Articulos creados: {creados} (archivo: {store.path})")


if __name__ == "__main__":
    main()
