"""
Factory Method.

Un creador abstracto declara el metodo de fabricacion create(); cada
creador concreto decide que producto instanciar. El codigo cliente
trabaja con el creador y con el contrato del producto, nunca con la
clase concreta del producto.

Participantes:
- Vehicle: Producto
- Car, Motorbike: Productos concretos
- VehicleFactory: Creador (declara create y lo usa en deliver)
- CarFactory, MotorbikeFactory: Creadores concretos
"""

from abc import ABC, abstractmethod

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class Vehicle(ABC):
    """Contrato del producto."""

    def __init__(self, color: str):
        self.color = color

    @property
    @abstractmethod
    def wheels(self) -> int:
        """Numero de ruedas del vehiculo."""

    @property
    @abstractmethod
    def kind(self) -> str:
        """Nombre del tipo de vehiculo."""

    def describe(self) -> str:
        return f"{self.kind} de color {self.color} con {self.wheels} ruedas"


class Car(Vehicle):
    @property
    def wheels(self) -> int:
        return 4

    @property
    def kind(self) -> str:
        return "Coche"


class Motorbike(Vehicle):
    @property
    def wheels(self) -> int:
        return 2

    @property
    def kind(self) -> str:
        return "Moto"


class VehicleFactory(ABC):
    """
    Creador abstracto.

    deliver() contiene la logica comun y delega la instanciacion en
    create(), que cada subclase implementa.
    """

    @abstractmethod
    def create(self, color: str) -> Vehicle:
        """
        Metodo de fabricacion.

        Args:
            color: Color del vehiculo

        Returns:
            Vehiculo nuevo
        """

    def deliver(self, color: str) -> str:
        """
        Fabrica un vehiculo y devuelve el texto de entrega.

        Args:
            color: Color pedido por el cliente

        Returns:
            Texto de entrega
        """
        vehicle = self.create(color)
        return f"Entregado: {vehicle.describe()}"


class CarFactory(VehicleFactory):
    def create(self, color: str) -> Vehicle:
        return Car(color)


class MotorbikeFactory(VehicleFactory):
    def create(self, color: str) -> Vehicle:
        return Motorbike(color)


@scenario(
    "factory_method",
    PatternGroup.CREATIONAL,
    "Un creador abstracto delega en subclases que producto fabricar",
    aliases=("factory",)
)
def run(out: ScenarioOutput) -> None:
    factories = [CarFactory(), MotorbikeFactory()]

    for factory in factories:
        out.write(factory.deliver("rojo"))
        out.write(factory.deliver("azul"))
