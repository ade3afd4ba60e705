"""Trainers: the player, gym leaders and Pokémon masters."""

from __future__ import annotations

from dataclasses import dataclass, field

from pokeduel.pokemon import Interaction, Pokemon

MAX_TEAM_SIZE = 6
REQUIRED_BADGES = ("Feu", "Eau", "Roche", "Plante", "Électrik", "Psy")
TOTAL_BADGES = 6
MASTER_DAMAGE_BOOST = 1.25


class TeamFullError(ValueError):
    """Raised when a team would hold more Pokémon than allowed."""


@dataclass(eq=False)
class Trainer(Interaction):
    """A trainer with a name and a team of at most six Pokémon."""

    name: str
    team: list[Pokemon] = field(default_factory=list)
    defeated: bool = False

    def __post_init__(self) -> None:
        self.team = list(self.team)
        if len(self.team) > MAX_TEAM_SIZE:
            raise TeamFullError(
                f"Equipe deja complete ({MAX_TEAM_SIZE} Pokemon max)"
            )

    @property
    def selected(self) -> Pokemon | None:
        """The first Pokémon of the team, or None when the team is empty."""
        return self.team[0] if self.team else None

    def add_pokemon(self, pokemon: Pokemon) -> None:
        """Append ``pokemon`` to the team; raise TeamFullError when it is full."""
        if len(self.team) >= MAX_TEAM_SIZE:
            raise TeamFullError(
                f"Equipe deja complete ({MAX_TEAM_SIZE} Pokemon max)"
            )
        self.team.append(pokemon)

    def swap(self, first: int, second: int) -> None:
        """Exchange the Pokémon at two zero-based positions of the team."""
        size = len(self.team)
        if not (0 <= first < size and 0 <= second < size):
            raise IndexError("Positions invalides pour la permutation.")
        self.team[first], self.team[second] = self.team[second], self.team[first]

    def show_team(self) -> None:
        """Print every Pokémon of the team."""
        if not self.team:
            print("Aucun Pokemon dans l'equipe.")
            return
        print(f"\n--- Equipe de {self.name} ---")
        for pokemon in self.team:
            print(pokemon.info())
            print()

    def show_hp(self) -> None:
        """Print the HP of every Pokémon of the team."""
        if not self.team:
            print("Aucun Pokemon dans l'equipe.")
            return
        print(f"\n--- HP des Pokemon de {self.name} ---")
        for position, pokemon in enumerate(self.team, start=1):
            print(f"[{position}] {pokemon.name} - HP : {pokemon.hp}")

    def interact(self) -> None:
        if self.defeated:
            print(f"L'entraineur {self.name} dit : Tu m'as vaincu, bien joué !")
        else:
            print(
                f"Tu ne peux pas interagir avec {self.name} "
                "tant qu’il n’est pas vaincu."
            )


@dataclass(eq=False)
class Player(Trainer):
    """The trainer played by the user, with a record and badges."""

    wins: int = 0
    losses: int = 0
    badges: dict[str, bool] = field(default_factory=dict)

    def __post_init__(self) -> None:
        super().__post_init__()
        initial = {badge: False for badge in REQUIRED_BADGES}
        initial.update(self.badges)
        self.badges = initial

    @property
    def badge_count(self) -> int:
        """How many badges the player holds."""
        return sum(self.badges.values())

    def add_win(self) -> None:
        """Record a won fight."""
        self.wins += 1

    def add_loss(self) -> None:
        """Record a lost fight."""
        self.losses += 1

    def add_badge(self, badge_type: str) -> None:
        """Give the player the badge of ``badge_type``."""
        self.badges[badge_type] = True

    def has_badge(self, badge_type: str) -> bool:
        """Whether the player holds the badge of ``badge_type``."""
        return self.badges.get(badge_type, False)

    def ready_for_master(self) -> bool:
        """Whether every required badge has been won."""
        return all(self.has_badge(badge) for badge in REQUIRED_BADGES)

    def _owned_badges(self) -> str:
        owned = [badge for badge in sorted(self.badges) if self.badges[badge]]
        return " ".join(owned) if owned else "Aucun"

    def statistics(self) -> str:
        """The player's record and badges as text."""
        return "\n".join(
            [
                f"=== Statistiques de {self.name} ===",
                f" - Nombre de victoires : {self.wins}",
                f" - Nombre de defaites  : {self.losses}",
                f" - Badges obtenus ({self.badge_count}) : {self._owned_badges()}",
            ]
        )

    def show_statistics(self) -> None:
        """Print the player's record and badges."""
        print(f"\n=== Statistiques de {self.name} ===")
        print(f" - Nombre de victoires : {self.wins}")
        print(f" - Nombre de defaites  : {self.losses}")
        print(f" - Badges obtenus ({self.badge_count}) : {self._owned_badges()}")


@dataclass(eq=False)
class GymLeader(Trainer):
    """A gym leader who hands out a badge when beaten."""

    gym: str = ""
    badge: str = ""

    def interact(self, player: Player | None = None) -> None:
        prefix = f"{self.name} (Leader de {self.gym}) : "
        if player is None:
            print(prefix + "Reviens me voir quand tu auras progressé !")
            return
        remaining = TOTAL_BADGES - player.badge_count
        if remaining <= 0:
            print(prefix + "Tu as tous les badges. Bonne chance contre le Maitre !")
        else:
            print(
                prefix
                + f"Il te reste {remaining} badges avant de pouvoir affronter un Maitre."
            )


@dataclass(eq=False)
class Master(Trainer):
    """A Pokémon master whose team deals boosted damage."""

    def __post_init__(self) -> None:
        super().__post_init__()
        self.team = [pokemon.boosted(MASTER_DAMAGE_BOOST) for pokemon in self.team]

    def interact(self) -> None:
        print(f"{self.name} : Je suis le Maitre Pokemon !")