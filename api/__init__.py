"""
API HTTP para articulos.

Esta capa expone endpoints REST que usan el core interno (articulos_core)
para listar, consultar, registrar, actualizar y eliminar articulos.
"""
