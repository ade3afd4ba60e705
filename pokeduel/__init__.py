"""Turn-based Pokémon duels against gym leaders and masters, read from CSV files."""

__version__ = "1.0.0"