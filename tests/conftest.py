"""
Fixtures compartidos para los tests del catalogo.
"""

import pytest

from pattern_catalog.core.registry import registry
from pattern_catalog.core.runner import ScenarioRunner, load_builtin_scenarios
from pattern_catalog.models import PatternGroup, ScenarioInfo
from pattern_catalog.patterns.creational.singleton import AppConfiguration


# Registrar los escenarios antes de cualquier test
load_builtin_scenarios()


@pytest.fixture(autouse=True)
def reset_singleton():
    """Cada test parte de un AppConfiguration sin inicializar."""
    AppConfiguration.reset()
    yield
    AppConfiguration.reset()


@pytest.fixture
def runner():
    """Runner sobre el registro global."""
    return ScenarioRunner()


@pytest.fixture
def temporary_scenario():
    """
    Registra escenarios temporales y los elimina al terminar.

    Usage:
        def test_x(temporary_scenario):
            info = temporary_scenario("demo", lambda out: out.write("hola"))
    """
    registered = []

    def _register(name, run, group=PatternGroup.BEHAVIORAL, aliases=()):
        info = ScenarioInfo(
            name=name,
            group=group,
            summary=f"Escenario temporal {name}",
            run=run,
            aliases=tuple(aliases)
        )
        registry.register(info)
        registered.append(name)
        return info

    yield _register

    for name in registered:
        registry.unregister(name)
