"""
Composite.

Hojas y ramas comparten el mismo contrato (GardenComponent). Una rama
guarda una secuencia ordenada de hijos y reparte cada operacion entre
ellos de forma recursiva, en profundidad y en orden de insercion. Una
hoja no admite hijos: add() y remove() lanzan UnsupportedOperationError.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class UnsupportedOperationError(NotImplementedError):
    """Operacion no soportada por este tipo de componente."""


class GardenComponent(ABC):
    """Contrato comun de hojas y ramas."""

    def __init__(self, name: str):
        self.name = name

    @abstractmethod
    def render(self, depth: int = 0) -> List[str]:
        """
        Dibuja el componente y sus descendientes.

        Args:
            depth: Nivel de sangria

        Returns:
            Lineas en recorrido en profundidad
        """

    @abstractmethod
    def count_leaves(self) -> int:
        """Numero de hojas bajo este componente (incluido)."""

    @property
    def children(self) -> Tuple['GardenComponent', ...]:
        return ()

    def add(self, component: 'GardenComponent') -> None:
        raise UnsupportedOperationError(
            f"{self.name} no admite hijos (add)"
        )

    def remove(self, component: 'GardenComponent') -> None:
        raise UnsupportedOperationError(
            f"{self.name} no admite hijos (remove)"
        )


class Leaf(GardenComponent):
    def render(self, depth: int = 0) -> List[str]:
        return [f"{'  ' * depth}- {self.name}"]

    def count_leaves(self) -> int:
        return 1


class Branch(GardenComponent):
    def __init__(self, name: str):
        super().__init__(name)
        self._children: List[GardenComponent] = []

    @property
    def children(self) -> Tuple[GardenComponent, ...]:
        return tuple(self._children)

    def add(self, component: GardenComponent) -> None:
        self._children.append(component)

    def remove(self, component: GardenComponent) -> None:
        """
        Quita un hijo directo.

        Raises:
            ValueError: Si el componente no es hijo de esta rama
        """
        self._children.remove(component)

    def render(self, depth: int = 0) -> List[str]:
        lines = [f"{'  ' * depth}+ {self.name}"]
        for child in self._children:
            lines.extend(child.render(depth + 1))
        return lines

    def count_leaves(self) -> int:
        return sum(child.count_leaves() for child in self._children)


@scenario(
    "composite",
    PatternGroup.STRUCTURAL,
    "Trata hojas y contenedores de un arbol a traves del mismo contrato",
    aliases=("tree",)
)
def run(out: ScenarioOutput) -> None:
    trunk = Branch("Tronco")
    left = Branch("Rama izquierda")
    left.add(Leaf("Hoja 1"))
    left.add(Leaf("Hoja 2"))
    right = Branch("Rama derecha")
    right.add(Leaf("Hoja 3"))
    trunk.add(left)
    trunk.add(right)
    trunk.add(Leaf("Hoja 4"))

    out.extend(trunk.render())
    out.write(f"Total de hojas: {trunk.count_leaves()}")

    trunk.remove(right)
    out.write(f"Tras podar la rama derecha: {trunk.count_leaves()} hojas")

    try:
        Leaf("Hoja suelta").add(Leaf("Hoja 5"))
    except UnsupportedOperationError as e:
        out.write(f"Operacion no soportada: {e}")
