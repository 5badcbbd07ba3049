"""
Abstract Factory.

Una fabrica abstracta declara un metodo de creacion por cada miembro de
una familia de productos. Cada fabrica concreta produce una familia
completa y consistente: cambiar de fabrica cambia la variante de todos
los productos a la vez.

Participantes:
- Car, Motorbike: Productos abstractos
- SportCar, SportMotorbike, OffRoadCar, OffRoadMotorbike: Productos concretos
- VehicleFamilyFactory: Fabrica abstracta
- SportVehicleFactory, OffRoadVehicleFactory: Fabricas concretas
"""

from abc import ABC, abstractmethod

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class Car(ABC):
    @property
    @abstractmethod
    def family(self) -> str:
        """Descripcion de la familia a la que pertenece."""

    def drive(self) -> str:
        return f"Conduciendo un coche {self.family}"


class Motorbike(ABC):
    @property
    @abstractmethod
    def family(self) -> str:
        """Descripcion de la familia a la que pertenece."""

    def ride(self) -> str:
        return f"Montando una moto {self.family}"


SPORT_FAMILY = "deportivo de carretera"
OFF_ROAD_FAMILY = "todoterreno de montaña"


class SportCar(Car):
    @property
    def family(self) -> str:
        return SPORT_FAMILY


class SportMotorbike(Motorbike):
    @property
    def family(self) -> str:
        return SPORT_FAMILY


class OffRoadCar(Car):
    @property
    def family(self) -> str:
        return OFF_ROAD_FAMILY


class OffRoadMotorbike(Motorbike):
    @property
    def family(self) -> str:
        return OFF_ROAD_FAMILY


class VehicleFamilyFactory(ABC):
    """Fabrica abstracta: un metodo por producto de la familia."""

    @abstractmethod
    def create_car(self) -> Car:
        """Crea el coche de la familia."""

    @abstractmethod
    def create_motorbike(self) -> Motorbike:
        """Crea la moto de la familia."""


class SportVehicleFactory(VehicleFamilyFactory):
    def create_car(self) -> Car:
        return SportCar()

    def create_motorbike(self) -> Motorbike:
        return SportMotorbike()


class OffRoadVehicleFactory(VehicleFamilyFactory):
    def create_car(self) -> Car:
        return OffRoadCar()

    def create_motorbike(self) -> Motorbike:
        return OffRoadMotorbike()


def equip_garage(factory: VehicleFamilyFactory) -> list:
    """
    Codigo cliente: solo conoce la fabrica abstracta.

    Args:
        factory: Fabrica de la familia elegida

    Returns:
        Lineas describiendo el garaje
    """
    car = factory.create_car()
    motorbike = factory.create_motorbike()
    return [car.drive(), motorbike.ride()]


@scenario(
    "abstract_factory",
    PatternGroup.CREATIONAL,
    "Una fabrica crea familias completas de productos relacionados",
    aliases=("kit",)
)
def run(out: ScenarioOutput) -> None:
    for factory in (SportVehicleFactory(), OffRoadVehicleFactory()):
        out.write(f"Fabrica: {factory.__class__.__name__}")
        out.extend(equip_garage(factory))
