"""
Visitor.

Los elementos de un coche (ruedas, motor, carroceria y el propio coche)
aceptan visitantes mediante doble despacho: accept() llama al metodo
visit_* que corresponde a su tipo. Anadir una operacion nueva es anadir
un visitante, sin tocar los elementos.

Un visitante debe implementar un metodo por cada tipo de elemento; si
falta alguno, no se puede instanciar.

Patterns:
- Visitor: Doble despacho sobre una estructura fija de elementos
"""

from abc import ABC, abstractmethod
from typing import List, Sequence

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class CarElementVisitor(ABC):
    @abstractmethod
    def visit_wheel(self, wheel: 'Wheel') -> None:
        pass

    @abstractmethod
    def visit_engine(self, engine: 'Engine') -> None:
        pass

    @abstractmethod
    def visit_body(self, body: 'Body') -> None:
        pass

    @abstractmethod
    def visit_car(self, car: 'Car') -> None:
        pass


class CarElement(ABC):
    @abstractmethod
    def accept(self, visitor: CarElementVisitor) -> None:
        pass


class Wheel(CarElement):
    def __init__(self, position: str, pressure: float = 2.2):
        self.position = position
        self.pressure = pressure

    def accept(self, visitor: CarElementVisitor) -> None:
        visitor.visit_wheel(self)


class Engine(CarElement):
    def __init__(self, horsepower: int):
        self.horsepower = horsepower

    def accept(self, visitor: CarElementVisitor) -> None:
        visitor.visit_engine(self)


class Body(CarElement):
    def accept(self, visitor: CarElementVisitor) -> None:
        visitor.visit_body(self)


class Car(CarElement):
    """Elemento compuesto: visita sus piezas y despues a si mismo."""

    def __init__(self, elements: Sequence[CarElement]):
        self.elements = list(elements)

    def accept(self, visitor: CarElementVisitor) -> None:
        for element in self.elements:
            element.accept(visitor)
        visitor.visit_car(self)


class PrintVisitor(CarElementVisitor):
    def __init__(self):
        self.lines: List[str] = []

    def visit_wheel(self, wheel: Wheel) -> None:
        self.lines.append(f"Visitando rueda {wheel.position}")

    def visit_engine(self, engine: Engine) -> None:
        self.lines.append(f"Visitando motor de {engine.horsepower} CV")

    def visit_body(self, body: Body) -> None:
        self.lines.append("Visitando carroceria")

    def visit_car(self, car: Car) -> None:
        self.lines.append("Visitando coche")


class InspectionVisitor(CarElementVisitor):
    """Revision tecnica: acumula incidencias por pieza."""

    MIN_PRESSURE = 2.0

    def __init__(self):
        self.issues: List[str] = []
        self.inspected = 0

    def visit_wheel(self, wheel: Wheel) -> None:
        self.inspected += 1
        if wheel.pressure < self.MIN_PRESSURE:
            self.issues.append(
                f"Rueda {wheel.position}: presion baja ({wheel.pressure:.1f} bar)"
            )

    def visit_engine(self, engine: Engine) -> None:
        self.inspected += 1

    def visit_body(self, body: Body) -> None:
        self.inspected += 1

    def visit_car(self, car: Car) -> None:
        pass

    def report(self) -> List[str]:
        lines = [f"Piezas revisadas: {self.inspected}"]
        lines.extend(self.issues or ["Sin incidencias"])
        return lines


def build_car() -> Car:
    return Car([
        Wheel("delantera izquierda"),
        Wheel("delantera derecha"),
        Wheel("trasera izquierda", pressure=1.6),
        Wheel("trasera derecha"),
        Engine(120),
        Body(),
    ])


@scenario(
    "visitor",
    PatternGroup.BEHAVIORAL,
    "Anade operaciones a una estructura de objetos sin modificar sus clases"
)
def run(out: ScenarioOutput) -> None:
    car = build_car()

    printer = PrintVisitor()
    car.accept(printer)
    out.extend(printer.lines)

    inspector = InspectionVisitor()
    car.accept(inspector)
    out.extend(inspector.report())
