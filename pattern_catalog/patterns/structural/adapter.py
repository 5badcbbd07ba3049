"""
Adapter.

El cliente espera un velocimetro metrico (km/h). El velocimetro
disponible es imperial (mph) y tiene otra interfaz. El adaptador
implementa el contrato metrico, traduce argumentos y resultados y delega
en el objeto envuelto. La traduccion es pura: no hay mas efectos que la
propia delegacion.
"""

from abc import ABC, abstractmethod

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


KM_PER_MILE = 1.609344


class MetricSpeedometer(ABC):
    """Contrato objetivo que usa el cliente."""

    @abstractmethod
    def speed_kmh(self) -> float:
        """Velocidad actual en km/h."""

    @abstractmethod
    def set_limit_kmh(self, kmh: float) -> None:
        """Fija el limite de velocidad en km/h."""

    @abstractmethod
    def limit_kmh(self) -> float:
        """Limite de velocidad actual en km/h."""


class ImperialSpeedometer:
    """Clase existente con una interfaz incompatible."""

    def __init__(self, mph: float):
        self._mph = mph
        self._limit_mph = 0.0

    def speed_mph(self) -> float:
        return self._mph

    def set_limit_mph(self, mph: float) -> None:
        self._limit_mph = mph

    def get_limit_mph(self) -> float:
        return self._limit_mph


class ImperialToMetricAdapter(MetricSpeedometer):
    """Expone un ImperialSpeedometer a traves del contrato metrico."""

    def __init__(self, adaptee: ImperialSpeedometer):
        self._adaptee = adaptee

    def speed_kmh(self) -> float:
        return self._adaptee.speed_mph() * KM_PER_MILE

    def set_limit_kmh(self, kmh: float) -> None:
        self._adaptee.set_limit_mph(kmh / KM_PER_MILE)

    def limit_kmh(self) -> float:
        return self._adaptee.get_limit_mph() * KM_PER_MILE


def dashboard_report(speedometer: MetricSpeedometer) -> str:
    """Codigo cliente: solo conoce MetricSpeedometer."""
    speed = speedometer.speed_kmh()
    limit = speedometer.limit_kmh()
    status = "exceso de velocidad" if speed > limit else "dentro del limite"
    return f"{speed:.1f} km/h (limite {limit:.1f} km/h): {status}"


@scenario(
    "adapter",
    PatternGroup.STRUCTURAL,
    "Traduce una interfaz incompatible al contrato que espera el cliente",
    aliases=("wrapper",)
)
def run(out: ScenarioOutput) -> None:
    imperial = ImperialSpeedometer(mph=62.0)
    adapter = ImperialToMetricAdapter(imperial)

    adapter.set_limit_kmh(120)
    out.write(f"Velocimetro original: {imperial.speed_mph():.1f} mph")
    out.write(f"Limite guardado en el original: {imperial.get_limit_mph():.1f} mph")
    out.write(f"Cuadro de mandos: {dashboard_report(adapter)}")

    adapter.set_limit_kmh(90)
    out.write(f"Cuadro de mandos: {dashboard_report(adapter)}")
