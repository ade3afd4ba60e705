"""The interactive menu that drives a game session."""

from __future__ import annotations

import argparse
import os
import random
import subprocess
import sys
from collections.abc import Callable, Sequence

from pokeduel.combat import Combat
from pokeduel.pokedex import Pokedex, load_pokedex
from pokeduel.roster import RosterError, load_leaders, load_masters, load_players
from pokeduel.trainers import GymLeader, Master, Player, Trainer
from pokeduel.typechart import TypeChart

_MENU = (
    "\n========= MENU PRINCIPAL =========",
    "1. Voir l'equipe de Pokemon",
    "2. Afficher les HP des Pokemon",
    "3. Changer l'ordre des Pokemon dans l'equipe",
    "4. Afficher les statistiques du joueur",
    "5. Affronter un leader de gym",
    "6. Affronter un Maitre Pokemon",
    "7. Interagir avec les Pokemon ou entraineurs vaincus",
    "8. Quitter le jeu",
)
_QUIT = 8


def _clear_console() -> None:
    """Clear the terminal with the platform's own command."""
    command = "cls" if os.name == "nt" else "clear"
    try:
        subprocess.run(command, shell=True, check=False)
    except OSError:
        pass


class Game:
    """A session: pick a player, then fight leaders and masters from a menu."""

    def __init__(
        self,
        players: Sequence[Player] | None = None,
        leaders: Sequence[GymLeader] | None = None,
        masters: Sequence[Master] | None = None,
        *,
        chart: TypeChart | None = None,
        input_func: Callable[[str], str] = input,
        clear: Callable[[], None] = _clear_console,
        rng: random.Random | None = None,
    ) -> None:
        pokedex: Pokedex | None = None
        if players is None or leaders is None or masters is None:
            pokedex = load_pokedex()
        self.players: list[Player] = list(
            players if players is not None else load_players(pokedex=pokedex)
        )
        self.leaders: list[GymLeader] = list(
            leaders if leaders is not None else load_leaders(pokedex=pokedex)
        )
        self.masters: list[Master] = list(
            masters if masters is not None else load_masters(pokedex=pokedex)
        )
        self.chart = chart
        self.player: Player | None = None
        self._input = input_func
        self._clear = clear
        self._rng = rng if rng is not None else random.Random()

    def _ask_int(self, prompt: str) -> int | None:
        try:
            return int(self._input(prompt).strip())
        except ValueError:
            return None

    def _current_player(self) -> Player:
        if self.player is None:
            raise RuntimeError("Aucun joueur selectionne.")
        return self.player

    def show_players(self) -> bool:
        """List the players; return whether there is at least one."""
        if not self.players:
            print("\nAucun joueur enregistré.")
            return False
        print("\n=== Liste des joueurs disponibles ===")
        for position, player in enumerate(self.players, start=1):
            print(f"{position}. {player.name}")
        return True

    def start(self) -> None:
        """Show the title, let the user pick a player, then run the menu."""
        print("===================================")
        print("         POKEMON - THE GAME        ")
        print("===================================")
        self._input("\nAppuyez sur Entree pour commencer...")
        self._clear()
        print("\nChargement des joueurs...\n")

        if not self.show_players():
            print(
                "\nAucun joueur disponible. "
                "Veuillez en créer un manuellement via joueur.csv."
            )
            print("Fin du jeu.")
            return

        count = len(self.players)
        while True:
            choice = self._ask_int(f"\nSelectionnez un joueur (1 a {count}) : ")
            if choice is not None and 1 <= choice <= count:
                break
            print("Choix invalide. Veuillez reessayer.")

        self.player = self.players[choice - 1]
        self._clear()
        print(f"\nBienvenue, {self.player.name} !")
        self.main_menu()

    def _swap_team(self, player: Player) -> None:
        player.show_team()
        first = self._ask_int("\nEntrez le numero du 1er Pokemon a echanger : ")
        second = self._ask_int("Entrez le numero du 2e Pokemon a echanger : ")
        if first is None or second is None:
            print("Entree invalide.")
            return
        try:
            player.swap(first - 1, second - 1)
        except IndexError as exc:
            print(exc)

    def main_menu(self) -> None:
        """Show the main menu and carry out choices until the user quits."""
        player = self._current_player()
        while True:
            self._clear()
            for line in _MENU:
                print(line)
            choice = self._ask_int("Choix : ")

            if choice == 1:
                self._clear()
                player.show_team()
            elif choice == 2:
                self._clear()
                player.show_hp()
            elif choice == 3:
                self._clear()
                self._swap_team(player)
            elif choice == 4:
                self._clear()
                player.show_statistics()
            elif choice == 5:
                self.fight_leader()
            elif choice == 6:
                self.fight_master()
            elif choice == 7:
                self.interact_with_elements()
            elif choice == _QUIT:
                self._clear()
                print("\nFin du jeu. A bientot !")
                return
            else:
                print("Choix invalide. Reessayer.")

            self._input("\nAppuyez sur Entree pour revenir au menu...")

    def show_leaders(self) -> None:
        """List the gym leaders with their gym and badge."""
        print("=== Leaders de gym disponibles ===")
        for position, leader in enumerate(self.leaders, start=1):
            print(
                f"{position}. {leader.name} - Gym : {leader.gym} "
                f"- Badge : {leader.badge}"
            )

    def _fight(self, opponent: Trainer) -> Trainer | None:
        try:
            combat = Combat(self._current_player(), opponent, self.chart)
        except ValueError as exc:
            print(exc)
            return None
        return combat.start()

    def fight_leader(self) -> Trainer | None:
        """Let the player pick a gym leader and fight; return the winner."""
        player = self._current_player()
        self._clear()
        self.show_leaders()

        choice = self._ask_int(f"\nChoisissez un leader (1 a {len(self.leaders)}) : ")
        if choice is None or not 1 <= choice <= len(self.leaders):
            print("Choix invalide.")
            return None

        leader = self.leaders[choice - 1]
        print(f"\n--- Combat contre {leader.name} ---")
        winner = self._fight(leader)
        if winner is None:
            return None

        if winner is player:
            print(f"\nVictoire ! Vous remportez le badge : {leader.badge}")
            if not player.has_badge(leader.badge):
                player.add_badge(leader.badge)
            player.add_win()
            leader.defeated = True
        else:
            print(f"\nDefaite contre {leader.name}.")
            player.add_loss()
        return winner

    def fight_master(self) -> Trainer | None:
        """Fight a random master once every badge is won; return the winner."""
        player = self._current_player()
        if not player.ready_for_master():
            print(
                "\nVous devez posseder tous les badges avant d'affronter un Maitre."
            )
            return None
        if not self.masters:
            print("Aucun maitre disponible.")
            return None

        master = self._rng.choice(self.masters)
        self._clear()
        print(f"--- Combat final contre le Maitre {master.name} ---")
        winner = self._fight(master)
        if winner is None:
            return None

        if winner is player:
            print(f"\nFELICITATIONS ! Vous avez vaincu le Maitre {master.name} !")
            player.add_win()
        else:
            print("\nVous avez perdu contre le Maitre... Reessayez plus tard.")
            player.add_loss()
        return winner

    def interact_with_elements(self) -> None:
        """Greet the player's Pokémon and every gym leader already beaten."""
        player = self._current_player()
        self._clear()
        print("=== INTERACTIONS DISPONIBLES ===")

        print("\n[Pokémon dans l'équipe du joueur]")
        for pokemon in player.team:
            print("- ", end="")
            pokemon.interact()

        print("\n[Entraîneurs déjà battus]")
        beaten = [leader for leader in self.leaders if leader.defeated]
        for leader in beaten:
            print("- ", end="")
            leader.interact(player)
        if not beaten:
            print("Aucun entraîneur vaincu pour le moment.")


def main(argv: Sequence[str] | None = None) -> int:
    """Start a game from the CSV files in the working directory."""
    parser = argparse.ArgumentParser(
        prog="pokeduel", description="Jeu de combats Pokemon au tour par tour."
    )
    parser.parse_args(argv)

    try:
        game = Game()
    except (RosterError, OSError) as exc:
        print(f"Erreur : {exc}", file=sys.stderr)
        return 1

    try:
        game.start()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0