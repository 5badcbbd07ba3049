"""
Patrones estructurales.

Este paquete contiene:
- Adapter
- Bridge
- Composite
- Decorator
- Facade
- Flyweight
- Proxy
"""

from . import adapter, bridge, composite, decorator, facade, flyweight, proxy

__all__ = [
    'adapter',
    'bridge',
    'composite',
    'decorator',
    'facade',
    'flyweight',
    'proxy'
]
