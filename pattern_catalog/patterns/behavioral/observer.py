"""
Observer.

La estacion meteorologica mantiene una lista de observadores y los
notifica, en orden de suscripcion, cada vez que cambia la temperatura.
Los observadores consultan el estado a traves del sujeto que reciben.
"""

from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput
from pattern_catalog.utils import get_logger


class WeatherObserver(ABC):
    @abstractmethod
    def update(self, station: 'WeatherStation') -> None:
        """Reacciona a un cambio del sujeto."""


class WeatherStation:
    """Sujeto observable."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)
        self._observers: List[WeatherObserver] = []
        self._temperature = 0.0

    @property
    def temperature(self) -> float:
        return self._temperature

    @property
    def observer_count(self) -> int:
        return len(self._observers)

    def attach(self, observer: WeatherObserver) -> None:
        """
        Suscribe un observador.

        Suscribir dos veces el mismo observador no tiene efecto.
        """
        if observer in self._observers:
            self.logger.debug(f"Observer already attached: {observer.__class__.__name__}")
            return
        self._observers.append(observer)

    def detach(self, observer: WeatherObserver) -> None:
        if observer in self._observers:
            self._observers.remove(observer)

    def set_temperature(self, value: float) -> None:
        self._temperature = value
        self._notify()

    def _notify(self) -> None:
        # Copia: un observador puede desuscribirse durante la notificacion
        for observer in list(self._observers):
            observer.update(self)


class PhoneDisplay(WeatherObserver):
    def __init__(self):
        self.received: List[str] = []

    def update(self, station: WeatherStation) -> None:
        self.received.append(f"Movil: {station.temperature:.1f} C")


class WindowDisplay(WeatherObserver):
    def __init__(self):
        self.received: List[str] = []

    def update(self, station: WeatherStation) -> None:
        self.received.append(f"Ventana: {station.temperature:.1f} C")


@scenario(
    "observer",
    PatternGroup.BEHAVIORAL,
    "Notifica a los suscriptores cada vez que cambia el estado del sujeto",
    aliases=("pubsub",)
)
def run(out: ScenarioOutput) -> None:
    station = WeatherStation()
    phone = PhoneDisplay()
    window = WindowDisplay()

    station.attach(phone)
    station.attach(window)
    station.attach(phone)
    out.write(f"Suscriptores: {station.observer_count}")

    station.set_temperature(21.5)
    station.detach(window)
    station.set_temperature(23.0)

    out.extend(phone.received)
    out.extend(window.received)
