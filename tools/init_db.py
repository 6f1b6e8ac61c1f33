"""Crea el documento JSON vacío (`{"articulos": []}`) en DB_PATH si no existe."""

from articulos_core.config import get_settings
from articulos_core.db import JsonRecordStore


def main():
    settings = get_settings()
    store = JsonRecordStore(settings.db_path)
    if store.init():
        print(f"✅ Documento creado en {store.path}")
    else:
        print(f"ℹ️  {store.path} ya existe, no se modificó.")


if __name__ == "__main__":
    main()
