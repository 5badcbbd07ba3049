"""
Patron Prototype para clonacion de objetos.

Este modulo implementa el patron Prototype para crear copias de
vehiculos ya configurados, permitiendo reutilizar plantillas sin
modificar los originales.

- clone(): copia superficial. Los campos de primer nivel se copian,
  pero los objetos anidados (el motor) se comparten con el original.
- deep_clone(): copia profunda. Los objetos anidados tambien se
  duplican.

Patterns:
- Prototype: Clonacion de objetos por copia
- Registry: Catalogo de prototipos con nombre
"""

from copy import copy, deepcopy
from dataclasses import dataclass, field
from typing import Dict, List, Optional

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


@dataclass
class Engine:
    """Objeto anidado propiedad del vehiculo."""
    horsepower: int
    fuel: str = "gasolina"


@dataclass
class VehiclePrototype:
    """
    Vehiculo que puede clonarse.

    Attributes:
        model: Nombre del modelo
        color: Color de carroceria
        engine: Motor (objeto anidado mutable)
        extras: Equipamiento opcional (lista anidada mutable)
    """
    model: str
    color: str
    engine: Engine
    extras: List[str] = field(default_factory=list)

    def clone(self) -> 'VehiclePrototype':
        """
        Crea una copia superficial.

        Returns:
            Nuevo vehiculo que comparte motor y extras con el original
        """
        return copy(self)

    def deep_clone(self) -> 'VehiclePrototype':
        """
        Crea una copia profunda.

        Returns:
            Nuevo vehiculo independiente del original
        """
        return deepcopy(self)

    def clone_with_overrides(self, **kwargs) -> 'VehiclePrototype':
        """
        Clona en profundidad y sobrescribe campos especificos.

        Args:
            **kwargs: Campos a sobrescribir (model, color, ...)

        Returns:
            Vehiculo clonado con modificaciones
        """
        cloned = self.deep_clone()

        # Sobrescribir campos proporcionados
        for key, value in kwargs.items():
            if hasattr(cloned, key):
                setattr(cloned, key, value)

        return cloned

    def describe(self) -> str:
        extras = ", ".join(self.extras) if self.extras else "sin extras"
        return (
            f"{self.model} {self.color} ({self.engine.horsepower} CV, "
            f"{self.engine.fuel}; {extras})"
        )


class PrototypeCatalog:
    """
    Catalogo de prototipos con nombre.

    Entrega siempre copias profundas: los prototipos registrados nunca
    se modifican desde fuera.
    """

    def __init__(self):
        """Inicializa el catalogo vacio."""
        self._prototypes: Dict[str, VehiclePrototype] = {}

    def register(self, name: str, prototype: VehiclePrototype):
        """
        Registra un prototipo.

        Args:
            name: Nombre unico del prototipo
            prototype: Prototipo a registrar
        """
        self._prototypes[name] = prototype

    def get(self, name: str, **overrides) -> Optional[VehiclePrototype]:
        """
        Obtiene una copia del prototipo.

        Args:
            name: Nombre del prototipo
            **overrides: Campos a sobrescribir en la copia

        Returns:
            Copia del prototipo o None si no existe
        """
        prototype = self._prototypes.get(name)
        if prototype is None:
            return None
        return prototype.clone_with_overrides(**overrides)

    def list_names(self) -> List[str]:
        """Lista nombres de prototipos registrados."""
        return list(self._prototypes.keys())


@scenario(
    "prototype",
    PatternGroup.CREATIONAL,
    "Nuevos objetos por copia superficial o profunda de uno existente",
    aliases=("clone",)
)
def run(out: ScenarioOutput) -> None:
    original = VehiclePrototype("Roadster", "rojo", Engine(150), ["techo solar"])
    shallow = original.clone()
    deep = original.deep_clone()

    original.engine.horsepower = 300
    original.extras.append("spoiler")
    original.color = "negro"

    out.write(f"Original:   {original.describe()}")
    out.write(f"Superficial: {shallow.describe()}")
    out.write(f"Profunda:   {deep.describe()}")
    out.write(f"Motor compartido (superficial): {shallow.engine is original.engine}")
    out.write(f"Motor compartido (profunda): {deep.engine is original.engine}")

    catalog = PrototypeCatalog()
    catalog.register("urbano", VehiclePrototype("Compacto", "blanco", Engine(90, "electrico")))
    custom = catalog.get("urbano", color="verde")
    out.write(f"Desde catalogo: {custom.describe()}")
    out.write(f"Plantilla intacta: {catalog.get('urbano').describe()}")
