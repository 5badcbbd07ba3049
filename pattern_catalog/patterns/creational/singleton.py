"""
Singleton con inicializacion perezosa y segura entre hilos.

Solo existe una instancia de AppConfiguration por proceso. El primer
llamador a get_instance() fija el valor inicial; todas las llamadas
posteriores, con cualquier argumento, reciben la misma instancia sin
cambios.

Ciclo de creacion: sin inicializar -> inicializando -> inicializada.
El paso de comprobar-y-crear se ejecuta bajo un lock (doble
comprobacion), de modo que llamadores concurrentes nunca construyen dos
instancias.

El constructor no es publico: AppConfiguration(...) lanza TypeError.

El escenario crea la instancia en el hilo principal y despues la pide
desde varios hilos: muestra que todos reciben la misma instancia ya
creada. La creacion concurrente desde cero se comprueba en
tests/test_creational.py (TestSingleton.test_concurrent_first_callers).
"""

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Any, Optional

from pattern_catalog.config.settings import SINGLETON_DEMO_THREADS
from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput
from pattern_catalog.utils import get_logger


_CREATION_KEY = object()


class AppConfiguration:
    """
    Configuracion compartida por todo el proceso.

    Usage:
        config = AppConfiguration.get_instance("produccion")
        config.value  # "produccion"

    Reiniciar (solo para tests):
        AppConfiguration.reset()
    """

    _instance: Optional['AppConfiguration'] = None
    _lock: threading.Lock = threading.Lock()
    instances_created: int = 0

    def __init__(self, value: Any, _key: object = None):
        if _key is not _CREATION_KEY:
            raise TypeError(
                "AppConfiguration no se instancia directamente; "
                "usa AppConfiguration.get_instance()"
            )
        self._value = value
        type(self).instances_created += 1

    @property
    def value(self) -> Any:
        """Valor fijado por el primer llamador."""
        return self._value

    @classmethod
    def get_instance(cls, init_value: Any = None) -> 'AppConfiguration':
        """
        Obtiene la instancia unica, creandola si hace falta.

        Args:
            init_value: Valor inicial; solo cuenta en la primera llamada

        Returns:
            AppConfiguration: Instancia unica del proceso
        """
        if cls._instance is None:
            with cls._lock:
                # Doble comprobacion: otro hilo pudo crearla mientras esperabamos
                if cls._instance is None:
                    cls._instance = cls(init_value, _key=_CREATION_KEY)
                    get_logger(cls.__name__).debug(
                        "Shared instance created",
                        extra={'init_value': repr(init_value)}
                    )
        return cls._instance

    @classmethod
    def is_initialized(cls) -> bool:
        return cls._instance is not None

    @classmethod
    def reset(cls) -> None:
        """Descarta la instancia y el contador (solo para tests)."""
        with cls._lock:
            cls._instance = None
            cls.instances_created = 0


@scenario(
    "singleton",
    PatternGroup.CREATIONAL,
    "Una unica instancia por proceso, creada de forma segura entre hilos"
)
def run(out: ScenarioOutput) -> None:
    first = AppConfiguration.get_instance("produccion")
    second = AppConfiguration.get_instance("pruebas")
    out.write(f"Primera llamada: {first.value}")
    out.write(f"Segunda llamada (pide 'pruebas'): {second.value}")
    out.write(f"Misma instancia: {first is second}")

    with ThreadPoolExecutor(max_workers=SINGLETON_DEMO_THREADS) as executor:
        results = list(executor.map(
            AppConfiguration.get_instance,
            [f"hilo-{i}" for i in range(SINGLETON_DEMO_THREADS)]
        ))

    values = {config.value for config in results}
    identities = {id(config) for config in results}
    out.write(f"Hilos concurrentes (instancia ya creada): {len(results)}")
    out.write(f"Valores observados: {sorted(values)}")
    out.write(f"Instancias distintas observadas: {len(identities)}")
    out.write(f"Instancias construidas: {AppConfiguration.instances_created}")

    try:
        AppConfiguration("directo")
    except TypeError:
        out.write("Construccion directa rechazada")
