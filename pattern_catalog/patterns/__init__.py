"""
Catalogo de patrones de diseno.

Importar este paquete registra los escenarios de las tres familias en
el registro global, en orden de catalogo.
"""

from . import creational, structural, behavioral

__all__ = ['creational', 'structural', 'behavioral']
