"""
Memento.

El editor (originador) produce instantaneas opacas de su estado y sabe
restaurarlas. El historial (cuidador) guarda esas instantaneas en dos
pilas, deshacer y rehacer, sin mirar nunca su contenido.

Reglas del historial:
- Al crearse guarda el estado inicial del editor.
- backup() apila el estado actual y vacia la pila de rehacer.
- undo() necesita al menos dos instantaneas: mueve la ultima a rehacer
  y restaura la anterior.
- redo() mueve la ultima de rehacer a deshacer y la restaura.
- Si el editor se modifico sin backup() desde el ultimo undo(), la pila
  de rehacer ya no es valida: undo() y redo() la descartan antes de
  actuar.

Patterns:
- Memento: Instantaneas opacas del estado
"""

from dataclasses import dataclass
from typing import List

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput
from pattern_catalog.utils import get_logger


@dataclass(frozen=True)
class EditorSnapshot:
    """Instantanea inmutable. Solo TextEditor interpreta su contenido."""

    _content: str


class TextEditor:
    """
    Originador.

    Example:
        >>> editor = TextEditor()
        >>> editor.type("hola")
        >>> snapshot = editor.save()
        >>> editor.type(" mundo")
        >>> editor.restore(snapshot)
        >>> editor.content
        'hola'
    """

    def __init__(self):
        self._content = ""

    @property
    def content(self) -> str:
        return self._content

    def type(self, text: str) -> None:
        self._content += text

    def save(self) -> EditorSnapshot:
        return EditorSnapshot(self._content)

    def restore(self, snapshot: EditorSnapshot) -> None:
        self._content = snapshot._content


class EditorHistory:
    """Cuidador con pilas de deshacer y rehacer."""

    def __init__(self, editor: TextEditor):
        """
        Inicializa el historial guardando el estado inicial del editor.

        Args:
            editor: Originador cuyo estado se conserva
        """
        self.logger = get_logger(self.__class__.__name__)
        self._editor = editor
        self._undo_stack: List[EditorSnapshot] = [editor.save()]
        self._redo_stack: List[EditorSnapshot] = []
        self.messages: List[str] = []

    @property
    def can_undo(self) -> bool:
        return len(self._undo_stack) > 1

    @property
    def can_redo(self) -> bool:
        return bool(self._redo_stack)

    def backup(self) -> None:
        self._undo_stack.append(self._editor.save())
        self._redo_stack.clear()

    def _discard_stale_redo(self) -> None:
        """Vacia rehacer si el editor cambio sin backup() tras el ultimo undo()."""
        if self._redo_stack and self._editor.save() != self._undo_stack[-1]:
            self.logger.debug(
                "Editor changed after undo, discarding redo stack",
                extra={'discarded': len(self._redo_stack)}
            )
            self._redo_stack.clear()

    def undo(self) -> bool:
        """
        Restaura la instantanea anterior.

        Returns:
            False si no habia nada que deshacer
        """
        self._discard_stale_redo()

        if not self.can_undo:
            self.messages.append("Historial: nada que deshacer")
            return False

        self._redo_stack.append(self._undo_stack.pop())
        self._editor.restore(self._undo_stack[-1])
        return True

    def redo(self) -> bool:
        """
        Reaplica la ultima instantanea deshecha.

        Returns:
            False si no habia nada que rehacer
        """
        self._discard_stale_redo()

        if not self.can_redo:
            self.messages.append("Historial: nada que rehacer")
            return False

        snapshot = self._redo_stack.pop()
        self._undo_stack.append(snapshot)
        self._editor.restore(snapshot)
        return True


@scenario(
    "memento",
    PatternGroup.BEHAVIORAL,
    "Guarda y restaura el estado de un objeto sin romper su encapsulacion",
    aliases=("snapshot", "undo")
)
def run(out: ScenarioOutput) -> None:
    editor = TextEditor()
    history = EditorHistory(editor)

    editor.type("A")
    history.backup()
    editor.type("B")
    history.backup()
    out.write(f"Texto: '{editor.content}'")

    history.undo()
    out.write(f"Deshacer: '{editor.content}'")
    history.undo()
    out.write(f"Deshacer: '{editor.content}'")
    history.undo()
    out.extend(history.messages)

    history.redo()
    out.write(f"Rehacer: '{editor.content}'")

    editor.type("C")
    history.messages.clear()
    history.redo()
    out.write(f"Tras escribir sin guardar: '{editor.content}'")
    out.extend(history.messages)
