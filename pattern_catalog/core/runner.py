"""
Runner de escenarios.

Ejecuta un escenario por nombre o el catalogo completo, midiendo la
duracion y registrando cada ejecucion en el log.
"""

import importlib
import time
from typing import Callable, Dict, Optional

from pattern_catalog.config.settings import RUNNER_FAIL_FAST
from pattern_catalog.core.registry import ScenarioRegistry, registry
from pattern_catalog.models import PatternGroup, ScenarioInfo, ScenarioOutput
from pattern_catalog.utils import get_logger, get_logger_manager


BUILTIN_PATTERNS_PACKAGE = 'pattern_catalog.patterns'


def load_builtin_scenarios() -> None:
    """
    Importa los modulos de patrones para que se registren.

    La importacion es perezosa: los modulos de patrones dependen del
    registro, y el registro no depende de ellos.
    """
    importlib.import_module(BUILTIN_PATTERNS_PACKAGE)


class ScenarioRunner:
    """
    Ejecuta escenarios registrados y devuelve su salida.

    Example:
        >>> runner = ScenarioRunner()
        >>> output = runner.run("builder")
        >>> for line in output:
        ...     print(line)
    """

    def __init__(
        self,
        scenario_registry: Optional[ScenarioRegistry] = None,
        fail_fast: bool = RUNNER_FAIL_FAST
    ):
        """
        Inicializa el runner.

        Args:
            scenario_registry: Registro a usar (default: registro global)
            fail_fast: Si run_all debe detenerse en el primer fallo
        """
        self.logger = get_logger(self.__class__.__name__)
        self.registry = scenario_registry or registry
        self.fail_fast = fail_fast

        if scenario_registry is None:
            load_builtin_scenarios()

    def run(
        self,
        name: str,
        sink: Optional[Callable[[str], None]] = None
    ) -> ScenarioOutput:
        """
        Ejecuta un escenario por nombre.

        Args:
            name: Nombre o alias del patron
            sink: Funcion que recibe cada linea sin modificar (opcional)

        Returns:
            ScenarioOutput con las lineas producidas

        Raises:
            ScenarioNotFoundError: Si el patron no existe
        """
        info = self.registry.resolve(name)
        output = self.execute(info)

        if sink is not None:
            for line in output.lines:
                sink(line)

        return output

    def execute(self, info: ScenarioInfo) -> ScenarioOutput:
        """
        Ejecuta un ScenarioInfo ya resuelto.

        Args:
            info: Escenario a ejecutar

        Returns:
            ScenarioOutput con las lineas producidas
        """
        output = ScenarioOutput(pattern=info.name)
        self.logger.debug(f"Running scenario: {info.name}")

        start_time = time.perf_counter()
        try:
            info.run(output)
        except Exception as e:
            self.logger.error(
                f"Scenario {info.name} failed: {e}",
                exc_info=True
            )
            raise

        duration_ms = (time.perf_counter() - start_time) * 1000
        get_logger_manager().log_scenario(info.name, len(output), duration_ms)

        return output

    def run_all(
        self,
        group: Optional[PatternGroup] = None
    ) -> Dict[str, ScenarioOutput]:
        """
        Ejecuta todos los escenarios en orden de catalogo.

        Un escenario que falla se registra en el log y se omite del
        resultado, salvo que fail_fast este activo.

        Args:
            group: Filtrar por familia (opcional)

        Returns:
            Diccionario {nombre: ScenarioOutput}
        """
        outputs: Dict[str, ScenarioOutput] = {}

        for info in self.registry.list_scenarios(group):
            try:
                outputs[info.name] = self.execute(info)
            except Exception:
                if self.fail_fast:
                    raise
                self.logger.warning(f"Skipping failed scenario: {info.name}")

        self.logger.info(
            f"Catalog run finished: {len(outputs)} scenarios",
            extra={'group': group.value if group else 'all'}
        )
        return outputs


def run_scenario(name: str) -> ScenarioOutput:
    """
    Funcion de conveniencia para ejecutar un escenario.

    Args:
        name: Nombre o alias del patron

    Returns:
        ScenarioOutput del escenario
    """
    return ScenarioRunner().run(name)
