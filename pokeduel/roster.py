"""Reading and appending the CSV files of players, gym leaders and masters."""

from __future__ import annotations

from collections.abc import Iterator
from os import PathLike
from pathlib import Path

from pokeduel.pokedex import Pokedex, load_pokedex
from pokeduel.trainers import (
    MAX_TEAM_SIZE,
    REQUIRED_BADGES,
    GymLeader,
    Master,
    Player,
)

DEFAULT_PLAYERS_PATH = Path("entraineur/Ressources/joueur.csv")
DEFAULT_LEADERS_PATH = Path("entraineur/Ressources/leaders.csv")
DEFAULT_MASTERS_PATH = Path("entraineur/Ressources/maitres.csv")

_PathArg = "str | PathLike[str]"


class RosterError(RuntimeError):
    """Raised when a roster file cannot be read, written or parsed."""


def _rows(path: str | PathLike[str]) -> Iterator[list[str]]:
    """The comma-separated fields of every line after the header."""
    try:
        with Path(path).open(encoding="utf-8-sig") as handle:
            next(handle, None)
            for line in handle:
                yield line.rstrip("\r\n").split(",")
    except OSError as exc:
        raise RosterError(
            f"Erreur : impossible d'ouvrir '{Path(path).name}'"
        ) from exc


def _append(path: str | PathLike[str], fields: list[str]) -> None:
    try:
        with Path(path).open("a", encoding="utf-8") as handle:
            handle.write(",".join(fields) + "\n")
    except OSError as exc:
        raise RosterError(
            f"Erreur : impossible d'écrire dans '{Path(path).name}'"
        ) from exc


def _team(pokedex: Pokedex, names: list[str]):
    return pokedex.team(name for name in names if name)[:MAX_TEAM_SIZE]


def load_players(
    path: str | PathLike[str] = DEFAULT_PLAYERS_PATH,
    pokedex: Pokedex | None = None,
) -> list[Player]:
    """Read ``name,6 Pokémon fields,6 badge flags`` rows; blank lines are skipped."""
    pokedex = pokedex if pokedex is not None else load_pokedex()
    players = []
    for fields in _rows(path):
        if fields == [""]:
            continue
        name, rest = fields[0], fields[1:]
        pokemon_names, badge_flags = rest[:MAX_TEAM_SIZE], rest[MAX_TEAM_SIZE:]
        player = Player(name, _team(pokedex, pokemon_names))
        for badge, flag in zip(REQUIRED_BADGES, badge_flags):
            if flag == "1":
                player.add_badge(badge)
        players.append(player)
    return players


def save_player(player: Player, path: str | PathLike[str] = DEFAULT_PLAYERS_PATH) -> None:
    """Append ``player`` as one row, padding the team to six fields."""
    names = [pokemon.name for pokemon in player.team]
    names += [""] * (MAX_TEAM_SIZE - len(names))
    flags = ["1" if player.has_badge(badge) else "0" for badge in REQUIRED_BADGES]
    _append(path, [player.name, *names, *flags])


def load_leaders(
    path: str | PathLike[str] = DEFAULT_LEADERS_PATH,
    pokedex: Pokedex | None = None,
) -> list[GymLeader]:
    """Read ``name,gym,badge,Pokémon...`` rows."""
    pokedex = pokedex if pokedex is not None else load_pokedex()
    leaders = []
    for fields in _rows(path):
        if len(fields) < 3:
            raise RosterError("Erreur : ligne mal formée dans leaders.csv")
        name, gym, badge, *names = fields
        leaders.append(GymLeader(name, _team(pokedex, names), gym=gym, badge=badge))
    return leaders


def save_leader(leader: GymLeader, path: str | PathLike[str] = DEFAULT_LEADERS_PATH) -> None:
    """Append ``leader`` as one row."""
    _append(
        path,
        [leader.name, leader.gym, leader.badge, *(p.name for p in leader.team)],
    )


def load_masters(
    path: str | PathLike[str] = DEFAULT_MASTERS_PATH,
    pokedex: Pokedex | None = None,
) -> list[Master]:
    """Read ``name,Pokémon...`` rows; masters' Pokémon deal boosted damage."""
    pokedex = pokedex if pokedex is not None else load_pokedex()
    masters = []
    for fields in _rows(path):
        name, *names = fields
        if not name and not names:
            raise RosterError(
                "Erreur : nom du maître manquant ou ligne mal formée dans maitres.csv."
            )
        masters.append(Master(name, _team(pokedex, names)))
    return masters


def save_master(master: Master, path: str | PathLike[str] = DEFAULT_MASTERS_PATH) -> None:
    """Append ``master`` as one row."""
    _append(path, [master.name, *(p.name for p in master.team)])


class PlayerRoster:
    """The players read from a file; new players are appended to it."""

    def __init__(
        self,
        path: str | PathLike[str] = DEFAULT_PLAYERS_PATH,
        pokedex: Pokedex | None = None,
    ) -> None:
        self.path = Path(path)
        self.players: list[Player] = load_players(self.path, pokedex)

    def __iter__(self) -> Iterator[Player]:
        return iter(self.players)

    def __len__(self) -> int:
        return len(self.players)

    def add(self, player: Player) -> None:
        """Keep ``player`` and append it to the file."""
        self.players.append(player)
        save_player(player, self.path)