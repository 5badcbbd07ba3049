"""
Registro centralizado de escenarios.

Mapea el nombre de cada patron (y sus alias) al escenario que lo
demuestra. Los modulos de patrones se registran a si mismos con el
decorador @scenario al importarse.

Patterns:
- Registry: Registro de escenarios por nombre
- Singleton: Instancia unica del registro
"""

from typing import Dict, List, Optional, Sequence

from pattern_catalog.models import PatternGroup, ScenarioFunc, ScenarioInfo
from pattern_catalog.utils import get_logger, normalize_name


class CatalogError(Exception):
    """Excepcion base para errores del catalogo."""


class ScenarioNotFoundError(CatalogError, KeyError):
    """No existe un escenario con ese nombre o alias."""

    def __str__(self) -> str:
        # KeyError envuelve el mensaje entre comillas
        return str(self.args[0]) if self.args else ''


class ScenarioAlreadyRegisteredError(CatalogError, ValueError):
    """El nombre o alias ya pertenece a otro escenario."""


class ScenarioRegistry:
    """
    Registro de escenarios de patrones.

    Mantiene el orden de registro, que es el orden del catalogo
    (creacionales, estructurales, de comportamiento).
    Pattern: Registry + Singleton
    """

    _instance: Optional['ScenarioRegistry'] = None

    def __new__(cls):
        """Implementa Singleton."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialize()
        return cls._instance

    def _initialize(self):
        """Inicializa registros."""
        self.logger = get_logger(self.__class__.__name__)
        self._scenarios: Dict[str, ScenarioInfo] = {}
        self._aliases: Dict[str, str] = {}

    def register(self, info: ScenarioInfo) -> ScenarioInfo:
        """
        Registra un escenario.

        Args:
            info: Escenario a registrar

        Returns:
            El mismo ScenarioInfo

        Raises:
            ScenarioAlreadyRegisteredError: Si el nombre o un alias ya existe
        """
        name = normalize_name(info.name)
        if name in self._scenarios or name in self._aliases:
            raise ScenarioAlreadyRegisteredError(
                f"Escenario ya registrado: {name}"
            )

        aliases = [normalize_name(alias) for alias in info.aliases]
        for alias in aliases:
            if alias in self._scenarios or alias in self._aliases:
                raise ScenarioAlreadyRegisteredError(
                    f"Alias ya registrado: {alias}"
                )

        self._scenarios[name] = info
        for alias in aliases:
            self._aliases[alias] = name

        self.logger.debug(
            f"Registered scenario: {name}",
            extra={'group': info.group.value, 'aliases': aliases}
        )
        return info

    def unregister(self, name: str) -> bool:
        """
        Elimina un escenario y sus alias.

        Args:
            name: Nombre canonico o alias

        Returns:
            True si existia
        """
        key = normalize_name(name)
        key = self._aliases.get(key, key)
        if key not in self._scenarios:
            return False

        del self._scenarios[key]
        self._aliases = {
            alias: target
            for alias, target in self._aliases.items()
            if target != key
        }
        return True

    def get(self, name: str) -> Optional[ScenarioInfo]:
        """
        Busca un escenario por nombre o alias.

        Args:
            name: Nombre (se normaliza: mayusculas, espacios y guiones)

        Returns:
            ScenarioInfo o None si no existe
        """
        key = normalize_name(name)
        key = self._aliases.get(key, key)
        return self._scenarios.get(key)

    def resolve(self, name: str) -> ScenarioInfo:
        """
        Igual que get() pero falla si el escenario no existe.

        Raises:
            ScenarioNotFoundError: Con la lista de nombres disponibles
        """
        info = self.get(name)
        if info is None:
            raise ScenarioNotFoundError(
                f"Patron desconocido: {name}. "
                f"Disponibles: {', '.join(self.list_names())}"
            )
        return info

    def list_scenarios(
        self,
        group: Optional[PatternGroup] = None
    ) -> List[ScenarioInfo]:
        """
        Lista escenarios en orden de catalogo.

        Args:
            group: Filtrar por familia (opcional)

        Returns:
            Lista de ScenarioInfo
        """
        return [
            info for info in self._scenarios.values()
            if group is None or info.group is group
        ]

    def list_names(self, group: Optional[PatternGroup] = None) -> List[str]:
        """Lista nombres canonicos en orden de catalogo."""
        return [info.name for info in self.list_scenarios(group)]

    def __contains__(self, name: str) -> bool:
        return self.get(name) is not None

    def __len__(self) -> int:
        return len(self._scenarios)


# Instancia singleton del registro
registry = ScenarioRegistry()


def scenario(
    name: str,
    group: PatternGroup,
    summary: str,
    aliases: Sequence[str] = ()
):
    """
    Decorador que registra una funcion de escenario.

    Usage:
        @scenario("builder", PatternGroup.CREATIONAL, "Construccion paso a paso")
        def run(out: ScenarioOutput) -> None:
            out.write("...")

    Args:
        name: Nombre canonico del patron
        group: Familia del patron
        summary: Resumen de una linea
        aliases: Nombres alternativos

    Returns:
        Decorador que devuelve la funcion sin modificar
    """
    def decorator(func: ScenarioFunc) -> ScenarioFunc:
        registry.register(
            ScenarioInfo(
                name=normalize_name(name),
                group=group,
                summary=summary,
                run=func,
                aliases=tuple(aliases)
            )
        )
        return func

    return decorator
