"""
Modelos de datos del arnes de demostracion de patrones.

Este modulo define las estructuras compartidas por el registro, el runner
y el CLI usando dataclasses. Los participantes de cada patron NO viven
aqui: cada patron define sus propios roles en su modulo.
"""

import inspect
import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, Dict, Iterable, Iterator, List, Tuple


class PatternGroup(Enum):
    """Familias clasicas de patrones."""
    CREATIONAL = "creational"
    STRUCTURAL = "structural"
    BEHAVIORAL = "behavioral"

    @classmethod
    def from_string(cls, value: str) -> 'PatternGroup':
        """
        Convierte string a PatternGroup.

        Args:
            value: Nombre del grupo (acepta variantes en español)

        Returns:
            PatternGroup correspondiente

        Raises:
            ValueError: Si el grupo no existe
        """
        normalized = value.strip().lower()
        mapping = {
            'creational': cls.CREATIONAL,
            'creacional': cls.CREATIONAL,
            'structural': cls.STRUCTURAL,
            'estructural': cls.STRUCTURAL,
            'behavioral': cls.BEHAVIORAL,
            'behavioural': cls.BEHAVIORAL,
            'comportamiento': cls.BEHAVIORAL
        }
        if normalized not in mapping:
            raise ValueError(f"Grupo de patrones desconocido: {value}")
        return mapping[normalized]


@dataclass
class ScenarioOutput:
    """
    Salida ordenada de un escenario.

    Es el unico artefacto con contrato externo: el CLI la retransmite
    sin modificar y los tests la comparan linea a linea.

    Attributes:
        pattern: Nombre del patron que produjo la salida
        lines: Lineas en orden de emision
    """
    pattern: str
    lines: List[str] = field(default_factory=list)

    def write(self, line: Any = "") -> None:
        """Agrega una linea a la salida."""
        self.lines.append(str(line))

    def extend(self, lines: Iterable[Any]) -> None:
        """Agrega varias lineas en orden."""
        for line in lines:
            self.write(line)

    def text(self) -> str:
        """Salida completa como un solo texto."""
        return "\n".join(self.lines)

    def __len__(self) -> int:
        return len(self.lines)

    def __iter__(self) -> Iterator[str]:
        return iter(self.lines)


ScenarioFunc = Callable[[ScenarioOutput], None]


@dataclass(frozen=True)
class ScenarioInfo:
    """
    Entrada del registro de escenarios.

    Attributes:
        name: Nombre canonico del patron (ej: "factory_method")
        group: Familia del patron
        summary: Resumen de una linea
        run: Procedimiento que escribe el escenario en un ScenarioOutput
        aliases: Nombres alternativos aceptados por el registro
    """
    name: str
    group: PatternGroup
    summary: str
    run: ScenarioFunc
    aliases: Tuple[str, ...] = ()

    @property
    def explanation(self) -> str:
        """
        Explicacion del patron.

        Se toma del docstring del modulo que define el escenario; si no
        existe, se usa el resumen.
        """
        module = sys.modules.get(self.run.__module__)
        doc = inspect.getdoc(module) if module else None
        return doc or self.summary

    @property
    def title(self) -> str:
        """Nombre legible (ej: "Factory Method")."""
        return self.name.replace('_', ' ').title()

    def to_dict(self) -> Dict[str, Any]:
        """
        Convierte a diccionario para listados.

        Returns:
            Dict con valores serializables
        """
        return {
            'name': self.name,
            'title': self.title,
            'group': self.group.value,
            'summary': self.summary,
            'aliases': list(self.aliases)
        }
