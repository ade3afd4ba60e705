"""Pokémon and the interaction protocol shared by game elements."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, replace


class Interaction(ABC):
    """Something in the game the player can interact with."""

    @abstractmethod
    def interact(self) -> None:
        """Make the element react to the player."""


@dataclass(frozen=True)
class Pokemon(Interaction):
    """A Pokémon with one attack, its base HP and its types."""

    name: str
    hp: int
    move: str
    damage: int
    types: tuple[str, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "types", tuple(self.types))

    def attack_message(self, target: Pokemon) -> str:
        """Describe this Pokémon attacking ``target``."""
        return f"{self.name} attaque {target.name} avec {self.move} !"

    def attack(self, target: Pokemon) -> None:
        """Announce an attack on ``target``."""
        print(self.attack_message(target))

    def greeting(self) -> str:
        """The short cry the Pokémon gives when greeted."""
        prefix = self.name[:4]
        return f"{prefix}{prefix}, je suis {self.name}!"

    def interact(self) -> None:
        print(self.greeting())

    def info(self) -> str:
        """A readable summary: one line of stats, then one line per type."""
        head = (
            f"Nom: {self.name}, HP: {self.hp}, "
            f"Attaque: {self.move}, Degats: {self.damage}"
        )
        return "\n".join([head, *(f"Type: {kind}" for kind in self.types)])

    def boosted(self, factor: float) -> Pokemon:
        """A copy whose damage is scaled by ``factor`` and truncated to an integer."""
        return replace(self, damage=int(self.damage * factor))