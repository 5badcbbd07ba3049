"""
Flyweight.

Miles de arboles comparten unos pocos TreeType. El estado intrinseco
(especie, color, textura) vive en el flyweight compartido e inmutable;
el estado extrinseco (la posicion) se pasa en cada llamada y nunca se
guarda en el flyweight.

La fabrica identifica cada flyweight por el valor completo de su estado
intrinseco, no por identidad: pedir dos veces la misma combinacion
devuelve la misma instancia.
"""

from dataclasses import dataclass
from typing import Dict, List, Tuple

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput
from pattern_catalog.utils import get_logger


@dataclass(frozen=True)
class TreeType:
    """Flyweight: estado intrinseco compartido."""
    name: str
    color: str
    texture: str

    def draw(self, x: int, y: int) -> str:
        return f"{self.name} ({self.color}, {self.texture}) en ({x}, {y})"


class TreeTypeFactory:
    """Entrega flyweights compartidos, creandolos solo la primera vez."""

    def __init__(self):
        self.logger = get_logger(self.__class__.__name__)
        self._types: Dict[Tuple[str, str, str], TreeType] = {}

    def get_tree_type(self, name: str, color: str, texture: str) -> TreeType:
        key = (name, color, texture)
        tree_type = self._types.get(key)
        if tree_type is None:
            tree_type = TreeType(name, color, texture)
            self._types[key] = tree_type
            self.logger.debug(f"New tree type: {key}")
        return tree_type

    @property
    def type_count(self) -> int:
        return len(self._types)


@dataclass
class Tree:
    """Contexto: posicion propia mas una referencia al flyweight."""
    x: int
    y: int
    tree_type: TreeType

    def draw(self) -> str:
        return self.tree_type.draw(self.x, self.y)


class Forest:
    def __init__(self, factory: TreeTypeFactory):
        self._factory = factory
        self._trees: List[Tree] = []

    def plant(self, x: int, y: int, name: str, color: str, texture: str) -> Tree:
        tree = Tree(x, y, self._factory.get_tree_type(name, color, texture))
        self._trees.append(tree)
        return tree

    def draw(self) -> List[str]:
        return [tree.draw() for tree in self._trees]

    def __len__(self) -> int:
        return len(self._trees)


@scenario(
    "flyweight",
    PatternGroup.STRUCTURAL,
    "Comparte el estado intrinseco entre muchos objetos pequeños"
)
def run(out: ScenarioOutput) -> None:
    factory = TreeTypeFactory()
    forest = Forest(factory)

    species = [
        ("Roble", "verde oscuro", "rugosa"),
        ("Pino", "verde", "escamosa"),
        ("Abedul", "blanco", "lisa"),
    ]
    for i in range(9):
        name, color, texture = species[i % len(species)]
        forest.plant(i * 10, i * 5, name, color, texture)

    out.extend(forest.draw()[:3])
    out.write(f"Arboles plantados: {len(forest)}")
    out.write(f"Tipos de arbol compartidos: {factory.type_count}")

    first = factory.get_tree_type("Roble", "verde oscuro", "rugosa")
    again = factory.get_tree_type("Roble", "verde oscuro", "rugosa")
    out.write(f"Misma instancia para el mismo estado: {first is again}")
