"""
Builder para construccion paso a paso de vehiculos.

Este modulo implementa el patron Builder: cada paso configura una parte
del producto y devuelve el propio builder para poder encadenar llamadas.
get_result() entrega el producto y deja el builder reiniciado, listo
para construir otro.

Un Director opcional encapsula secuencias fijas de pasos; llamar a los
pasos directamente, sin Director, sigue siendo valido.

Patterns:
- Builder: Construccion paso a paso de objetos complejos
- Fluent Interface: Encadenamiento de metodos
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class Color(Enum):
    """Colores de pintura disponibles."""
    RED = "rojo"
    BLUE = "azul"
    BLACK = "negro"


@dataclass
class Vehicle:
    """
    Producto construido.

    Un Vehicle() sin argumentos es el estado por defecto que deja
    reset().
    """
    kind: str = ""
    wheels: int = 0
    color: Optional[Color] = None
    seats: int = 0

    def describe(self) -> str:
        color = self.color.value if self.color else "sin pintar"
        return (
            f"{self.kind or 'Vehiculo'}: {self.wheels} ruedas, "
            f"{self.seats} asientos, {color}"
        )


class VehicleBuilder(ABC):
    """
    Builder abstracto con interfaz fluida.

    Example:
        >>> vehicle = (
        ...     CarBuilder()
        ...     .set_wheels()
        ...     .set_color(Color.RED)
        ...     .get_result()
        ... )
    """

    def __init__(self):
        """Inicializa el builder con un producto vacio."""
        self.reset()

    def reset(self) -> 'VehicleBuilder':
        """
        Descarta el producto en curso.

        Returns:
            Self para encadenamiento
        """
        self._vehicle = Vehicle()
        return self

    @abstractmethod
    def set_wheels(self) -> 'VehicleBuilder':
        """
        Monta las ruedas segun el tipo de vehiculo.

        Returns:
            Self para encadenamiento
        """

    @abstractmethod
    def set_seats(self, seats: Optional[int] = None) -> 'VehicleBuilder':
        """
        Monta los asientos.

        Args:
            seats: Numero de asientos (default segun el tipo)

        Returns:
            Self para encadenamiento
        """

    def set_color(self, color: Color) -> 'VehicleBuilder':
        """
        Pinta el vehiculo.

        Args:
            color: Color de pintura

        Returns:
            Self para encadenamiento
        """
        self._vehicle.color = color
        return self

    def get_result(self) -> Vehicle:
        """
        Entrega el producto construido y reinicia el builder.

        Una segunda llamada sin pasos intermedios devuelve un
        Vehicle() por defecto.

        Returns:
            Vehiculo construido
        """
        result = self._vehicle
        self.reset()
        return result


class CarBuilder(VehicleBuilder):
    def set_wheels(self) -> VehicleBuilder:
        self._vehicle.kind = "Coche"
        self._vehicle.wheels = 4
        return self

    def set_seats(self, seats: Optional[int] = None) -> VehicleBuilder:
        self._vehicle.seats = 5 if seats is None else seats
        return self


class MotorbikeBuilder(VehicleBuilder):
    def set_wheels(self) -> VehicleBuilder:
        self._vehicle.kind = "Moto"
        self._vehicle.wheels = 2
        return self

    def set_seats(self, seats: Optional[int] = None) -> VehicleBuilder:
        self._vehicle.seats = 2 if seats is None else seats
        return self


class VehicleDirector:
    """
    Director opcional.

    Conoce secuencias fijas de pasos, pero no el tipo concreto de
    vehiculo: eso lo decide el builder que recibe.
    """

    def construct_standard(self, builder: VehicleBuilder) -> None:
        """Vehiculo de serie: ruedas, asientos por defecto y color negro."""
        builder.set_wheels().set_seats().set_color(Color.BLACK)

    def construct_minimal(self, builder: VehicleBuilder) -> None:
        """Solo el chasis con ruedas."""
        builder.set_wheels()


@scenario(
    "builder",
    PatternGroup.CREATIONAL,
    "Construccion paso a paso con interfaz fluida y director opcional"
)
def run(out: ScenarioOutput) -> None:
    car_builder = CarBuilder()
    car = car_builder.set_wheels().set_color(Color.RED).get_result()
    out.write(f"Sin director -> {car.describe()}")

    # El builder quedo reiniciado tras get_result()
    leftover = car_builder.get_result()
    out.write(f"Tras reinicio -> {leftover.describe()}")

    director = VehicleDirector()
    for builder in (CarBuilder(), MotorbikeBuilder()):
        director.construct_standard(builder)
        out.write(f"Director (serie) -> {builder.get_result().describe()}")

    motorbike_builder = MotorbikeBuilder()
    director.construct_minimal(motorbike_builder)
    motorbike = motorbike_builder.set_color(Color.BLUE).get_result()
    out.write(f"Director (minimo) + color -> {motorbike.describe()}")
