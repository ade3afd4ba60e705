"""Turn-based fights between two trainers."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from pokeduel.pokemon import Pokemon
from pokeduel.trainers import Trainer
from pokeduel.typechart import TypeChart

_log = logging.getLogger(__name__)


def _default_chart() -> TypeChart:
    try:
        return TypeChart.from_csv()
    except OSError as exc:
        _log.error("Erreur : impossible d'ouvrir le fichier %s", exc.filename)
        return TypeChart()


@dataclass
class Combat:
    """A fight between ``player`` and ``opponent``; the player strikes first."""

    player: Trainer
    opponent: Trainer
    chart: TypeChart | None = None
    _player_team: list[Pokemon] = field(init=False, repr=False)
    _opponent_team: list[Pokemon] = field(init=False, repr=False)

    def __post_init__(self) -> None:
        if self.chart is None:
            self.chart = _default_chart()
        self._player_team = list(self.player.team)
        self._opponent_team = list(self.opponent.team)
        for trainer, team in (
            (self.player, self._player_team),
            (self.opponent, self._opponent_team),
        ):
            if not team:
                raise ValueError(f"{trainer.name} n'a aucun Pokemon pour combattre")

    def start(self) -> Trainer:
        """Run the fight to its end and return the winning trainer."""
        print(f"Debut du combat entre {self.player.name} et {self.opponent.name}")
        print("\n==============================")
        print("Composition des équipes :")
        print("==============================")
        self.player.show_team()
        self.opponent.show_team()

        winner = self._play()
        print(f"{winner.name} a gagne la partie !")
        return winner

    def _strike(self, attacker: Pokemon, defender: Pokemon, hp: float) -> float:
        """Apply one attack to ``hp`` and return what is left, never below zero."""
        assert self.chart is not None
        damage = attacker.damage * self.chart.multiplier(attacker, defender)
        hp -= damage
        print(f"Il inflige {damage:g} degats.")
        print(f"HP restants : {max(0.0, hp):g}")
        if hp <= 0:
            print(f"{defender.name} est K.O. !")
            return 0.0
        return hp

    def _play(self) -> Trainer:
        players, opponents = self._player_team, self._opponent_team
        player_index = opponent_index = 0
        player_hp = float(players[0].hp)
        opponent_hp = float(opponents[0].hp)
        player_turn = True
        round_number = 1

        while player_hp > 0 and opponent_hp > 0:
            print(f"\n===== TOUR {round_number} =====")
            own = players[player_index]
            foe = opponents[opponent_index]
            if player_turn:
                print(f"[{self.player.name}] ", end="")
                own.attack(foe)
                opponent_hp = self._strike(own, foe, opponent_hp)
                if opponent_hp <= 0 and opponent_index < len(opponents) - 1:
                    opponent_index += 1
                    opponent_hp = float(opponents[opponent_index].hp)
                    print(
                        f"-> Nouveau Pokemon de [{self.opponent.name}] : "
                        f"{opponents[opponent_index].name} entre en jeu !"
                    )
            else:
                print(f"[{self.opponent.name}] ", end="")
                foe.attack(own)
                player_hp = self._strike(foe, own, player_hp)
                # The player's reserve stops one Pokémon short of the opponent's.
                if player_hp <= 0 and player_index + 1 < len(players) - 1:
                    player_index += 1
                    player_hp = float(players[player_index].hp)
                    print(
                        f"-> Nouveau Pokemon de [{self.player.name}] : "
                        f"{players[player_index].name} entre en jeu !"
                    )
            player_turn = not player_turn
            round_number += 1

        winner = self.opponent if player_hp <= 0 else self.player
        print(f"\n [VICTOIRE] {winner.name} a gagné le combat !")
        return winner