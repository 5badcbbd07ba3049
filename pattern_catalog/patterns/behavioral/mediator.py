"""
Mediator.

Los componentes de un formulario de inicio de sesion solo conocen al
mediador, nunca a los demas componentes. Cuando algo ocurre, avisan al
mediador con notify(sender, event); el mediador mira quien avisa y que
evento es, y decide a que otros componentes llamar.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class Mediator(ABC):
    @abstractmethod
    def notify(self, sender: 'DialogComponent', event: str) -> None:
        """
        Recibe un evento de un componente.

        Args:
            sender: Componente que emite el evento
            event: Tipo de evento ("check", "keypress", "click")
        """


class DialogComponent:
    """Componente base: solo guarda la referencia al mediador."""

    def __init__(self, mediator: Optional[Mediator] = None):
        self._mediator = mediator

    def set_mediator(self, mediator: Mediator) -> None:
        self._mediator = mediator

    def _emit(self, event: str) -> None:
        if self._mediator is not None:
            self._mediator.notify(self, event)


class RememberMeCheckbox(DialogComponent):
    def __init__(self, mediator: Optional[Mediator] = None):
        super().__init__(mediator)
        self.checked = False

    def toggle(self) -> None:
        self.checked = not self.checked
        self._emit("check")


class UsernameField(DialogComponent):
    def __init__(self, mediator: Optional[Mediator] = None):
        super().__init__(mediator)
        self.text = ""
        self.hint = ""

    def type_text(self, text: str) -> None:
        self.text += text
        self._emit("keypress")


class SubmitButton(DialogComponent):
    def __init__(self, mediator: Optional[Mediator] = None):
        super().__init__(mediator)
        self.enabled = False

    def click(self) -> None:
        self._emit("click")


class LoginDialog(Mediator):
    """Mediador concreto: contiene toda la coordinacion."""

    def __init__(self):
        self.checkbox = RememberMeCheckbox(self)
        self.username = UsernameField(self)
        self.submit = SubmitButton(self)
        self.log: List[str] = []

    def notify(self, sender: DialogComponent, event: str) -> None:
        if sender is self.checkbox and event == "check":
            self.username.hint = (
                "se recordara este usuario" if self.checkbox.checked else ""
            )
            self.log.append(
                f"Casilla {'marcada' if self.checkbox.checked else 'desmarcada'}"
                f" -> pista del usuario: '{self.username.hint}'"
            )
        elif sender is self.username and event == "keypress":
            self.submit.enabled = len(self.username.text) >= 3
            self.log.append(
                f"Usuario '{self.username.text}' -> boton "
                f"{'habilitado' if self.submit.enabled else 'deshabilitado'}"
            )
        elif sender is self.submit and event == "click":
            if self.submit.enabled:
                remember = " (recordado)" if self.checkbox.checked else ""
                self.log.append(
                    f"Enviando formulario de '{self.username.text}'{remember}"
                )
            else:
                self.log.append("Clic ignorado: boton deshabilitado")


@scenario(
    "mediator",
    PatternGroup.BEHAVIORAL,
    "Centraliza la comunicacion entre componentes que no se conocen"
)
def run(out: ScenarioOutput) -> None:
    dialog = LoginDialog()

    dialog.submit.click()
    dialog.username.type_text("an")
    dialog.username.type_text("a")
    dialog.checkbox.toggle()
    dialog.submit.click()

    out.extend(dialog.log)
