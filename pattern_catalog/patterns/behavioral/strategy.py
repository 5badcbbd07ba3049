"""
Strategy.

El navegador delega el calculo de rutas en una estrategia
intercambiable en tiempo de ejecucion. Todas las estrategias cumplen el
mismo contrato build_route(origin, destination).
"""

from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class RouteStrategy(ABC):
    @abstractmethod
    def build_route(self, origin: str, destination: str) -> str:
        """
        Calcula una ruta.

        Args:
            origin: Punto de partida
            destination: Punto de llegada

        Returns:
            Descripcion de la ruta
        """


class DrivingRoute(RouteStrategy):
    def build_route(self, origin: str, destination: str) -> str:
        return f"En coche de {origin} a {destination} por la autovia"


class WalkingRoute(RouteStrategy):
    def build_route(self, origin: str, destination: str) -> str:
        return f"A pie de {origin} a {destination} por el casco antiguo"


class CyclingRoute(RouteStrategy):
    def build_route(self, origin: str, destination: str) -> str:
        return f"En bici de {origin} a {destination} por el carril bici"


class Navigator:
    """Contexto: no conoce las estrategias concretas."""

    def __init__(self, strategy: Optional[RouteStrategy] = None):
        self._strategy = strategy

    def set_strategy(self, strategy: RouteStrategy) -> None:
        self._strategy = strategy

    def route(self, origin: str, destination: str) -> str:
        """
        Calcula la ruta con la estrategia actual.

        Raises:
            ValueError: Si todavia no hay estrategia
        """
        if self._strategy is None:
            raise ValueError("Navegador sin estrategia de ruta")
        return self._strategy.build_route(origin, destination)


@scenario(
    "strategy",
    PatternGroup.BEHAVIORAL,
    "Intercambia algoritmos de una misma familia en tiempo de ejecucion",
    aliases=("policy",)
)
def run(out: ScenarioOutput) -> None:
    navigator = Navigator()

    for strategy in (DrivingRoute(), WalkingRoute(), CyclingRoute()):
        navigator.set_strategy(strategy)
        out.write(navigator.route("Estacion", "Museo"))
