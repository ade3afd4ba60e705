"""Type effectiveness chart used to scale attack damage."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path

from pokeduel.pokemon import Pokemon

DEFAULT_CHART_PATH = Path("pokemon/Ressources/tabfaiblesseresistance.csv")


@dataclass
class TypeChart:
    """Damage multipliers keyed by (attacking type, defending type)."""

    table: dict[tuple[str, str], float] = field(default_factory=dict)

    @classmethod
    def from_csv(cls, path: str | PathLike[str] = DEFAULT_CHART_PATH) -> TypeChart:
        """Read a chart whose rows are ``defender,attacker,multiplier`` after a header."""
        table: dict[tuple[str, str], float] = {}
        with Path(path).open(encoding="utf-8-sig") as handle:
            next(handle, None)
            for line in handle:
                line = line.rstrip("\n")
                if not line.strip():
                    continue
                defender, attacker, raw = (line.split(",") + ["", ""])[:3]
                try:
                    value = float(raw)
                except ValueError as exc:
                    raise ValueError(
                        f"invalid multiplier {raw!r} in {path}: {line!r}"
                    ) from exc
                table[(attacker, defender)] = value
        return cls(table)

    def single(self, attacking_type: str, defending_type: str) -> float:
        """Multiplier for one pair of types; 1.0 when the chart has no entry."""
        return self.table.get((attacking_type, defending_type), 1.0)

    def multiplier(self, attacker: Pokemon, defender: Pokemon) -> float:
        """Product of the multipliers over every attacker/defender type pair."""
        return float(
            math.prod(
                self.single(a, d) for a in attacker.types for d in defender.types
            )
        )

    def lines(self) -> list[str]:
        """The chart as text lines, sorted by attacking then defending type."""
        return [
            f"{attacker} -> {defender} : {value:g}"
            for (attacker, defender), value in sorted(self.table.items())
        ]

    def show(self) -> None:
        """Print the chart."""
        for line in self.lines():
            print(line)