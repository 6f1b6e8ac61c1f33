"""Interfaces (Protocols) compartidas por el core."""
