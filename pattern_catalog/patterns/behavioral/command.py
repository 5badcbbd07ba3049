"""
Command.

Cada comando concreto enlaza, al construirse, un receptor y una
operacion. El invocador (el boton del mando) guarda el comando actual,
permite sustituirlo y lo ejecuta sin conocer el tipo del receptor.
"""

from abc import ABC, abstractmethod
from typing import Optional

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class Command(ABC):
    @abstractmethod
    def execute(self) -> str:
        """Ejecuta la operacion y devuelve una descripcion."""


class Light:
    """Receptor."""

    def __init__(self, location: str):
        self.location = location
        self.is_on = False

    def on(self) -> str:
        self.is_on = True
        return f"Luz de {self.location} encendida"

    def off(self) -> str:
        self.is_on = False
        return f"Luz de {self.location} apagada"


class GarageDoor:
    """Receptor."""

    def __init__(self):
        self.is_open = False

    def open(self) -> str:
        self.is_open = True
        return "Puerta del garaje abierta"

    def close(self) -> str:
        self.is_open = False
        return "Puerta del garaje cerrada"


class LightOnCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> str:
        return self._light.on()


class LightOffCommand(Command):
    def __init__(self, light: Light):
        self._light = light

    def execute(self) -> str:
        return self._light.off()


class GarageDoorOpenCommand(Command):
    def __init__(self, door: GarageDoor):
        self._door = door

    def execute(self) -> str:
        return self._door.open()


class GarageDoorCloseCommand(Command):
    def __init__(self, door: GarageDoor):
        self._door = door

    def execute(self) -> str:
        return self._door.close()


class NoCommand(Command):
    """Objeto nulo: un boton sin asignar no hace nada."""

    def execute(self) -> str:
        return "Boton sin asignar"


class RemoteButton:
    """Invocador: solo conoce el contrato Command."""

    def __init__(self, command: Optional[Command] = None):
        self._command: Command = command or NoCommand()

    def set_command(self, command: Command) -> None:
        self._command = command

    def press(self) -> str:
        return self._command.execute()


@scenario(
    "command",
    PatternGroup.BEHAVIORAL,
    "Encapsula una peticion como objeto para desacoplar invocador y receptor"
)
def run(out: ScenarioOutput) -> None:
    living_room = Light("salon")
    garage = GarageDoor()
    button = RemoteButton()

    out.write(button.press())

    button.set_command(LightOnCommand(living_room))
    out.write(button.press())
    button.set_command(LightOffCommand(living_room))
    out.write(button.press())

    button.set_command(GarageDoorOpenCommand(garage))
    out.write(button.press())
    button.set_command(GarageDoorCloseCommand(garage))
    out.write(button.press())
