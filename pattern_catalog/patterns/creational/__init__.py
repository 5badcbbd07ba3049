"""
Patrones creacionales.

Este paquete contiene:
- Factory Method
- Abstract Factory
- Builder
- Prototype
- Singleton
"""

from . import factory_method, abstract_factory, builder, prototype, singleton

__all__ = [
    'factory_method',
    'abstract_factory',
    'builder',
    'prototype',
    'singleton'
]
