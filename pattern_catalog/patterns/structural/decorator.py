"""
Decorator.

Cada decorador implementa el mismo contrato que la bebida que envuelve,
guarda una referencia explicita a ella y agrega su comportamiento antes
o despues de delegar. Los decoradores se combinan en cualquier orden y
cada capa llama exactamente a un delegado interior.
"""

from abc import ABC, abstractmethod
from decimal import Decimal

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class Beverage(ABC):
    """Contrato del componente."""

    @abstractmethod
    def description(self) -> str:
        """Descripcion de la bebida."""

    @abstractmethod
    def cost(self) -> Decimal:
        """Precio total."""


class Espresso(Beverage):
    def description(self) -> str:
        return "Espresso"

    def cost(self) -> Decimal:
        return Decimal("1.99")


class HouseBlend(Beverage):
    def description(self) -> str:
        return "Cafe de la casa"

    def cost(self) -> Decimal:
        return Decimal("0.89")


class Milk(Beverage):
    def __init__(self, beverage: Beverage):
        self._beverage = beverage

    def description(self) -> str:
        return f"{self._beverage.description()} + leche"

    def cost(self) -> Decimal:
        return self._beverage.cost() + Decimal("0.10")


class Mocha(Beverage):
    def __init__(self, beverage: Beverage):
        self._beverage = beverage

    def description(self) -> str:
        return f"{self._beverage.description()} + moca"

    def cost(self) -> Decimal:
        return self._beverage.cost() + Decimal("0.20")


class Whip(Beverage):
    def __init__(self, beverage: Beverage):
        self._beverage = beverage

    def description(self) -> str:
        return f"{self._beverage.description()} + nata"

    def cost(self) -> Decimal:
        return self._beverage.cost() + Decimal("0.15")


def receipt_line(beverage: Beverage) -> str:
    return f"{beverage.description()}: ${beverage.cost()}"


@scenario(
    "decorator",
    PatternGroup.STRUCTURAL,
    "Agrega comportamiento envolviendo un objeto con el mismo contrato"
)
def run(out: ScenarioOutput) -> None:
    out.write(receipt_line(Espresso()))
    out.write(receipt_line(Whip(Mocha(Mocha(HouseBlend())))))
    out.write(receipt_line(Mocha(Milk(Espresso()))))
    out.write(receipt_line(Milk(Mocha(Espresso()))))
