"""
Patrones de comportamiento.

Este paquete contiene:
- Chain of Responsibility
- Command
- Iterator
- Mediator
- Memento
- Observer
- State
- Strategy
- Template Method
- Visitor
"""

from . import (
    chain_of_responsibility,
    command,
    iterator,
    mediator,
    memento,
    observer,
    state,
    strategy,
    template_method,
    visitor
)

__all__ = [
    'chain_of_responsibility',
    'command',
    'iterator',
    'mediator',
    'memento',
    'observer',
    'state',
    'strategy',
    'template_method',
    'visitor'
]
