"""
Catalogo de patrones de diseno clasicos.

Cada patron se presenta con una explicacion breve y un escenario
ejecutable que produce una lista ordenada y determinista de lineas.
"""

__version__ = '1.0.0'
