"""
Template Method.

prepare() fija el orden de los pasos de una bebida caliente. Las
subclases completan los pasos abstractos (brew, add_condiments) y
pueden cambiar el gancho wants_condiments, pero no el esqueleto: una
subclase que redefina prepare() o un paso fijo se rechaza al definirse.
"""

from abc import ABC, abstractmethod
from typing import List

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class CaffeineBeverage(ABC):
    _FINAL_STEPS = ('prepare', '_boil_water', '_pour_in_cup')

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        overridden = [step for step in cls._FINAL_STEPS if step in cls.__dict__]
        if overridden:
            raise TypeError(
                f"{cls.__name__} no puede redefinir pasos fijos: {', '.join(overridden)}"
            )

    def prepare(self) -> List[str]:
        """
        Ejecuta la receta completa.

        Returns:
            Pasos realizados, en orden
        """
        steps = [self._boil_water(), self.brew(), self._pour_in_cup()]
        if self.wants_condiments():
            steps.append(self.add_condiments())
        return steps

    def _boil_water(self) -> str:
        return "Hirviendo agua"

    def _pour_in_cup(self) -> str:
        return "Sirviendo en la taza"

    @abstractmethod
    def brew(self) -> str:
        pass

    @abstractmethod
    def add_condiments(self) -> str:
        pass

    def wants_condiments(self) -> bool:
        """Gancho: por defecto si se anaden complementos."""
        return True


class Tea(CaffeineBeverage):
    def brew(self) -> str:
        return "Infusionando el te"

    def add_condiments(self) -> str:
        return "Anadiendo limon"


class Coffee(CaffeineBeverage):
    def __init__(self, with_milk: bool = True):
        self.with_milk = with_milk

    def brew(self) -> str:
        return "Filtrando el cafe"

    def add_condiments(self) -> str:
        return "Anadiendo leche y azucar"

    def wants_condiments(self) -> bool:
        return self.with_milk


@scenario(
    "template_method",
    PatternGroup.BEHAVIORAL,
    "Define el esqueleto de un algoritmo y delega pasos en subclases",
    aliases=("template",)
)
def run(out: ScenarioOutput) -> None:
    recipes = (
        ("Te", Tea()),
        ("Cafe con leche", Coffee()),
        ("Cafe solo", Coffee(with_milk=False)),
    )

    for label, beverage in recipes:
        out.write(f"-- {label} --")
        out.extend(beverage.prepare())
