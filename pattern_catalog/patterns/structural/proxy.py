"""
Proxy de proteccion con carga perezosa.

El proxy implementa el mismo contrato que el documento real. En cada
llamada aplica una politica de acceso por rol antes de delegar. El
documento real solo se crea la primera vez que un rol autorizado lo
lee; las llamadas denegadas no lo construyen ni lo tocan.

Acceso denegado no es una excepcion: es un resultado que se informa.
"""

from abc import ABC, abstractmethod
from typing import Iterable, Optional

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput
from pattern_catalog.utils import get_logger


class Document(ABC):
    """Contrato del sujeto."""

    @abstractmethod
    def read(self, role: str) -> str:
        """
        Lee el documento.

        Args:
            role: Rol de quien lee

        Returns:
            Contenido o mensaje de acceso denegado
        """


class RealDocument(Document):
    """Sujeto real: cargarlo es costoso."""

    def __init__(self, title: str):
        self.title = title
        self._content = f"Contenido confidencial de '{title}'"

    def read(self, role: str) -> str:
        return self._content


class ProtectedDocumentProxy(Document):
    def __init__(self, title: str, allowed_roles: Iterable[str]):
        self.logger = get_logger(self.__class__.__name__)
        self._title = title
        self._allowed_roles = frozenset(allowed_roles)
        self._real: Optional[RealDocument] = None
        self.load_count = 0

    @property
    def is_loaded(self) -> bool:
        return self._real is not None

    def read(self, role: str) -> str:
        if role not in self._allowed_roles:
            self.logger.info(
                "Access denied",
                extra={'role': role, 'document': self._title}
            )
            return f"Acceso denegado para el rol '{role}'"

        if self._real is None:
            self._real = RealDocument(self._title)
            self.load_count += 1
        return self._real.read(role)


@scenario(
    "proxy",
    PatternGroup.STRUCTURAL,
    "Controla el acceso a un objeto real y lo crea solo cuando hace falta"
)
def run(out: ScenarioOutput) -> None:
    proxy = ProtectedDocumentProxy("Plan de ventas", allowed_roles=("admin", "gerente"))

    out.write(proxy.read("invitado"))
    out.write(f"Documento cargado: {proxy.is_loaded}")
    out.write(proxy.read("admin"))
    out.write(f"Documento cargado: {proxy.is_loaded}")
    out.write(proxy.read("gerente"))
