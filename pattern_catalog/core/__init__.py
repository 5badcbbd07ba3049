"""
Paquete core del arnes de demostracion.

Este paquete contiene:
- Registry de escenarios por nombre y alias
- Runner para ejecutar uno o todos los escenarios
"""

from .registry import (
    CatalogError,
    ScenarioNotFoundError,
    ScenarioAlreadyRegisteredError,
    ScenarioRegistry,
    registry,
    scenario
)

from .runner import (
    ScenarioRunner,
    load_builtin_scenarios,
    run_scenario
)

__all__ = [
    # Registry
    'CatalogError',
    'ScenarioNotFoundError',
    'ScenarioAlreadyRegisteredError',
    'ScenarioRegistry',
    'registry',
    'scenario',

    # Runner
    'ScenarioRunner',
    'load_builtin_scenarios',
    'run_scenario'
]
