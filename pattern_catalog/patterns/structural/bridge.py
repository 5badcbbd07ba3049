"""
Bridge.

La abstraccion (mando a distancia) guarda una referencia al contrato del
implementador (dispositivo). Mandos y dispositivos evolucionan por
separado: cualquier mando funciona con cualquier dispositivo, y el mando
nunca consulta el tipo concreto del dispositivo.
"""

from abc import ABC, abstractmethod

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class Device(ABC):
    """Contrato del implementador."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Nombre del dispositivo."""

    @abstractmethod
    def is_enabled(self) -> bool:
        """Indica si esta encendido."""

    @abstractmethod
    def enable(self) -> None:
        """Enciende el dispositivo."""

    @abstractmethod
    def disable(self) -> None:
        """Apaga el dispositivo."""

    @abstractmethod
    def get_volume(self) -> int:
        """Volumen actual (0-100)."""

    @abstractmethod
    def set_volume(self, volume: int) -> None:
        """Fija el volumen (se recorta a 0-100)."""


class _BaseDevice(Device):
    def __init__(self):
        self._on = False
        self._volume = 30

    def is_enabled(self) -> bool:
        return self._on

    def enable(self) -> None:
        self._on = True

    def disable(self) -> None:
        self._on = False

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, volume: int) -> None:
        self._volume = max(0, min(100, volume))


class Television(_BaseDevice):
    @property
    def name(self) -> str:
        return "Television"


class Radio(_BaseDevice):
    @property
    def name(self) -> str:
        return "Radio"


class RemoteControl:
    """Abstraccion: delega todo en el Device que recibe por composicion."""

    def __init__(self, device: Device):
        self._device = device

    def toggle_power(self) -> str:
        if self._device.is_enabled():
            self._device.disable()
            return f"{self._device.name}: apagada"
        self._device.enable()
        return f"{self._device.name}: encendida"

    def volume_up(self) -> str:
        self._device.set_volume(self._device.get_volume() + 10)
        return f"{self._device.name}: volumen {self._device.get_volume()}"

    def volume_down(self) -> str:
        self._device.set_volume(self._device.get_volume() - 10)
        return f"{self._device.name}: volumen {self._device.get_volume()}"


class AdvancedRemoteControl(RemoteControl):
    """Abstraccion refinada: agrega operaciones sin tocar los dispositivos."""

    def mute(self) -> str:
        self._device.set_volume(0)
        return f"{self._device.name}: silenciada"


@scenario(
    "bridge",
    PatternGroup.STRUCTURAL,
    "Separa una abstraccion de su implementacion para variarlas por separado"
)
def run(out: ScenarioOutput) -> None:
    basic = RemoteControl(Television())
    out.write(basic.toggle_power())
    out.write(basic.volume_up())
    out.write(basic.toggle_power())

    advanced = AdvancedRemoteControl(Radio())
    out.write(advanced.toggle_power())
    out.write(advanced.volume_down())
    out.write(advanced.mute())
