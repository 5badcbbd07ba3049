"""
Chain of Responsibility.

Cada manejador expone handle(request) y guarda una referencia opcional
al siguiente. Un manejador procesa la peticion por completo o la
reenvia sin modificarla. Si la peticion llega al final de la cadena sin
que nadie la procese, se descarta en silencio (handle devuelve None).

Patterns:
- Chain of Responsibility: Cadena de manejadores enlazados
"""

from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput
from pattern_catalog.utils import get_logger


class RequestHandler(ABC):
    """
    Manejador base de la cadena.

    Example:
        >>> auth = AuthHandler()
        >>> _ = auth.set_next(LogHandler()).set_next(DataHandler())
        >>> auth.handle("data")
        "DataHandler: peticion 'data' procesada"
    """

    def __init__(self):
        """Inicializa el manejador sin sucesor."""
        self.logger = get_logger(self.__class__.__name__)
        self._next: Optional['RequestHandler'] = None

    def set_next(self, handler: 'RequestHandler') -> 'RequestHandler':
        """
        Enlaza el siguiente manejador.

        Args:
            handler: Manejador sucesor

        Returns:
            El sucesor, para poder encadenar set_next()
        """
        self._next = handler
        return handler

    @abstractmethod
    def can_handle(self, request: str) -> bool:
        """
        Determina si este manejador procesa la peticion.

        Args:
            request: Peticion entrante

        Returns:
            True si la procesa aqui
        """

    def handle(self, request: str) -> Optional[str]:
        """
        Procesa la peticion o la reenvia.

        Args:
            request: Peticion entrante

        Returns:
            Resultado del manejador que la proceso, o None si nadie lo hizo
        """
        if self.can_handle(request):
            return f"{self.__class__.__name__}: peticion '{request}' procesada"

        if self._next is not None:
            return self._next.handle(request)

        self.logger.debug(f"End of chain, dropping request: {request}")
        return None


class AuthHandler(RequestHandler):
    def can_handle(self, request: str) -> bool:
        return request == "auth"


class LogHandler(RequestHandler):
    def can_handle(self, request: str) -> bool:
        return request == "log"


class DataHandler(RequestHandler):
    def can_handle(self, request: str) -> bool:
        return request == "data"


def build_default_chain() -> RequestHandler:
    """
    Crea la cadena Auth -> Log -> Data.

    Returns:
        Primer manejador de la cadena
    """
    head = AuthHandler()
    head.set_next(LogHandler()).set_next(DataHandler())
    return head


@scenario(
    "chain_of_responsibility",
    PatternGroup.BEHAVIORAL,
    "Pasa una peticion por una cadena de manejadores hasta que uno la procesa",
    aliases=("chain", "cor")
)
def run(out: ScenarioOutput) -> None:
    chain = build_default_chain()

    for request in ("data", "auth", "log", "video"):
        result = chain.handle(request)
        # Las peticiones sin manejador no producen salida
        if result is not None:
            out.write(result)
