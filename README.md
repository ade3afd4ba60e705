# pokeduel

A small turn-based console game. You pick a player from a saved roster, manage
a team of up to six Pokémon, challenge gym leaders to collect their badges and,
once all six badges are yours, take on a Pokémon master. The game's own text is
in French.

## Installing

```
pip install .
```

To run the test suite as well:

```
pip install ".[test]"
pytest
```

## Playing

Run the game from a directory that holds the data files (see below):

```
pokeduel
```

The command takes no options besides `--help`. It exits with status 1 if a
data file cannot be read.

After the title screen you choose one of the saved players. The main menu then
lets you:

1. view your team;
2. show the HP of each Pokémon;
3. swap the positions of two Pokémon in your team;
4. show your statistics (wins, losses, badges);
5. fight a gym leader and win their badge;
6. fight a randomly chosen master, once you hold all six badges
   (Feu, Eau, Roche, Plante, Électrik, Psy);
7. talk to your Pokémon and to the leaders you have beaten;
8. quit.

The screen is cleared between menus with the system's `cls` or `clear`
command.

## How a fight works

The two trainers attack in turn, starting with the player. Each hit deals the
attacker's damage multiplied by the type chart: the multipliers for every pair
of attacking and defending types are multiplied together, and any pair not in
the chart counts as 1. If the type chart file cannot be opened, an error is
logged and every multiplier is 1.

When the opponent's active Pokémon is knocked out, the next one in their team
comes in, down to the last. On the player's side replacements stop one short:
the last Pokémon of the player's team never enters the fight. The fight ends as
soon as a knocked-out Pokémon has no replacement. A trainer with an empty team
cannot fight.

Masters' Pokémon hit 25 % harder than the same species in the Pokédex (the
boosted damage is truncated to a whole number).

## Data files

All game data lives in plain comma-separated files with a header line, which is
skipped. The game reads them from these paths, relative to the working
directory:

| File | Path | Columns |
| --- | --- | --- |
| Pokédex | `pokemon/Ressources/pokemon.csv` | name, type 1, type 2, HP, attack name, damage |
| Type chart | `pokemon/Ressources/tabfaiblesseresistance.csv` | defending type, attacking type, multiplier |
| Players | `entraineur/Ressources/joueur.csv` | name, six Pokémon fields (blank when unused), then six 0/1 badge flags (Feu, Eau, Roche, Plante, Électrik, Psy) |
| Gym leaders | `entraineur/Ressources/leaders.csv` | name, gym, badge, Pokémon names… |
| Masters | `entraineur/Ressources/maitres.csv` | name, Pokémon names… |

Pokémon named in a trainer's line are looked up in the Pokédex; names that are
not found are left out of the team, and only the first six are kept. Pokédex
rows that cannot be read are logged and skipped. A leaders row with fewer than
three fields raises `RosterError`.

## What the game does not do

- Players cannot be created from the menu; add them to the players file by
  hand, or with `PlayerRoster.add` / `save_player` from code.
- Progress made during a session (badges, wins, losses, team order) is kept in
  memory only and is not written back to the players file.

## Using the library

The building blocks can be used on their own:

```python
from pokeduel.pokedex import load_pokedex
from pokeduel.typechart import TypeChart

pokedex = load_pokedex("pokemon.csv")
chart = TypeChart.from_csv("tabfaiblesseresistance.csv")

pikachu = pokedex.find("Pikachu")      # None if the name is unknown
carapuce = pokedex.find("Carapuce")
if pikachu and carapuce:
    print(chart.multiplier(pikachu, carapuce))
```

- `pokeduel.pokemon`: `Pokemon` (a frozen dataclass with `attack`, `greeting`,
  `interact`, `info` and `boosted`) and the `Interaction` base class.
- `pokeduel.typechart`: `TypeChart`, with `from_csv`, `single`, `multiplier`,
  `lines` and `show`.
- `pokeduel.pokedex`: `load_pokedex` and `Pokedex`, with `find` and `team`.
- `pokeduel.trainers`: `Trainer`, `Player`, `GymLeader`, `Master` and
  `TeamFullError`, raised when a team would exceed six Pokémon.
- `pokeduel.combat`: `Combat(player, opponent, chart=None)`, whose `start()`
  runs the fight and returns the winning trainer.
- `pokeduel.roster`: `load_players`, `save_player`, `load_leaders`,
  `save_leader`, `load_masters`, `save_master`, `PlayerRoster` and
  `RosterError`. The `save_*` functions append one row to their file.
- `pokeduel.game`: `Game`, the interactive session, and `main`, the entry point
  of the `pokeduel` command. `Game` accepts ready-made players, leaders and
  masters, a type chart, an input function, a screen-clearing function and a
  `random.Random` instance, so a session can be driven without the data files.