"""
State.

El personaje delega act() en su estado actual. Cada estado describe la
accion y elige el estado siguiente; el ciclo es
Quieto -> Corriendo -> Saltando -> Atacando -> Quieto.

Los estados no guardan datos propios, asi que se comparten como
instancias unicas entre todos los personajes.
"""

from abc import ABC, abstractmethod

from pattern_catalog.core.registry import scenario
from pattern_catalog.models import PatternGroup, ScenarioOutput


class CharacterState(ABC):
    name = ""

    @abstractmethod
    def handle(self, character: 'Character') -> str:
        """Ejecuta la accion y fija el estado siguiente del personaje."""

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__}>"


class IdleState(CharacterState):
    name = "Quieto"

    def handle(self, character: 'Character') -> str:
        character.change_state(RUNNING)
        return f"{character.name} empieza a correr"


class RunningState(CharacterState):
    name = "Corriendo"

    def handle(self, character: 'Character') -> str:
        character.change_state(JUMPING)
        return f"{character.name} salta"


class JumpingState(CharacterState):
    name = "Saltando"

    def handle(self, character: 'Character') -> str:
        character.change_state(ATTACKING)
        return f"{character.name} ataca desde el aire"


class AttackingState(CharacterState):
    name = "Atacando"

    def handle(self, character: 'Character') -> str:
        character.change_state(IDLE)
        return f"{character.name} vuelve a estar quieto"


IDLE = IdleState()
RUNNING = RunningState()
JUMPING = JumpingState()
ATTACKING = AttackingState()


class Character:
    """Contexto."""

    def __init__(self, name: str):
        self.name = name
        self._state: CharacterState = IDLE

    @property
    def state(self) -> CharacterState:
        return self._state

    def change_state(self, state: CharacterState) -> None:
        self._state = state

    def act(self) -> str:
        return self._state.handle(self)


@scenario(
    "state",
    PatternGroup.BEHAVIORAL,
    "Cambia el comportamiento de un objeto segun su estado interno"
)
def run(out: ScenarioOutput) -> None:
    hero = Character("Heroe")
    villain = Character("Villano")

    for _ in range(4):
        before = hero.state.name
        action = hero.act()
        out.write(f"[{before}] {action}")

    out.write(f"Estado final: {hero.state.name}")

    villain.act()
    out.write(f"Estado compartido entre personajes: {villain.state is RUNNING}")
