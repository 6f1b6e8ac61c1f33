"""
Core de la API de articulos.

Contiene la lógica que no depende de HTTP:
- Configuración (config)
- Generación de identificadores (ids)
- Record Store sobre un documento JSON (db)
- Casos de uso sobre la colección de articulos (service)
"""
