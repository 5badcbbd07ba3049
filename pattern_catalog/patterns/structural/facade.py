"""
Facade.

La fachada ofrece pocas operaciones de alto nivel (arrancar y parar el
coche) y, por dentro, llama a varios subsistemas independientes en un
orden fijo. No contiene logica de negocio: solo el orden de la
orquestacion.
"""

from typing import List

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class Battery:
    def __init__(self):
        self.powered = False

    def power_on(self) -> str:
        self.powered = True
        return "Bateria: circuito electrico activado"

    def power_off(self) -> str:
        self.powered = False
        return "Bateria: circuito electrico desactivado"


class FuelPump:
    def __init__(self):
        self.primed = False

    def prime(self) -> str:
        self.primed = True
        return "Bomba: combustible presurizado"

    def shut_off(self) -> str:
        self.primed = False
        return "Bomba: detenida"


class Ignition:
    def __init__(self):
        self.running = False

    def ignite(self) -> str:
        self.running = True
        return "Encendido: motor en marcha"

    def cut(self) -> str:
        self.running = False
        return "Encendido: motor detenido"


class Dashboard:
    def show(self, message: str) -> str:
        return f"Cuadro: {message}"


class CarStarterFacade:
    """Punto de entrada simple sobre los subsistemas de arranque."""

    def __init__(
        self,
        battery: Battery,
        fuel_pump: FuelPump,
        ignition: Ignition,
        dashboard: Dashboard
    ):
        self._battery = battery
        self._fuel_pump = fuel_pump
        self._ignition = ignition
        self._dashboard = dashboard

    def start(self) -> List[str]:
        return [
            self._battery.power_on(),
            self._fuel_pump.prime(),
            self._ignition.ignite(),
            self._dashboard.show("listo para conducir"),
        ]

    def stop(self) -> List[str]:
        return [
            self._ignition.cut(),
            self._fuel_pump.shut_off(),
            self._battery.power_off(),
            self._dashboard.show("vehiculo apagado"),
        ]


@scenario(
    "facade",
    PatternGroup.STRUCTURAL,
    "Una interfaz simple que orquesta varios subsistemas"
)
def run(out: ScenarioOutput) -> None:
    car = CarStarterFacade(Battery(), FuelPump(), Ignition(), Dashboard())

    out.write("-- Arrancar --")
    out.extend(car.start())
    out.write("-- Parar --")
    out.extend(car.stop())
