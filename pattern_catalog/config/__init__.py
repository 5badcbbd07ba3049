"""Paquete de configuracion del catalogo de patrones."""
