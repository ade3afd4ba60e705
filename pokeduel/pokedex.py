"""Loading the catalogue of every known Pokémon."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from os import PathLike
from pathlib import Path

from pokeduel.pokemon import Pokemon

DEFAULT_POKEDEX_PATH = Path("pokemon/Ressources/pokemon.csv")

_log = logging.getLogger(__name__)
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def _parse_int(text: str) -> int:
    """Read the integer at the start of ``text``, ignoring what follows it."""
    match = _LEADING_INT.match(text)
    if match is None:
        raise ValueError(f"not an integer: {text!r}")
    return int(match.group(1))


def _parse_row(line: str) -> Pokemon:
    name, type1, type2, hp, move, damage = (line.split(",") + [""] * 6)[:6]
    types = (type1, type2) if type2 else (type1,)
    return Pokemon(name, _parse_int(hp), move, _parse_int(damage), types)


@dataclass(frozen=True)
class Pokedex:
    """An ordered catalogue of Pokémon, looked up by name."""

    entries: tuple[Pokemon, ...] = ()

    def __iter__(self) -> Iterator[Pokemon]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def find(self, name: str) -> Pokemon | None:
        """The first Pokémon called ``name``, or None."""
        return next((p for p in self.entries if p.name == name), None)

    def team(self, names: Iterable[str]) -> list[Pokemon]:
        """The Pokémon for ``names`` in order, leaving out unknown names."""
        return [p for p in map(self.find, names) if p is not None]


def load_pokedex(path: str | PathLike[str] = DEFAULT_POKEDEX_PATH) -> Pokedex:
    """Read ``name,type1,type2,hp,move,damage`` rows after a header line.

    Rows that cannot be read are logged and skipped.
    """
    entries: list[Pokemon] = []
    with Path(path).open(encoding="utf-8-sig") as handle:
        next(handle, None)
        for line in handle:
            line = line.rstrip("\n")
            try:
                entries.append(_parse_row(line))
            except ValueError as exc:
                _log.warning("Erreur ligne : %s (%s)", line, exc)
    return Pokedex(tuple(entries))