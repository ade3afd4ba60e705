import logging

import pytest

from pokeduel.pokedex import Pokedex, load_pokedex
from pokeduel.pokemon import Pokemon


DEX = (
    "Nom,Type1,Type2,HP,Attaque,Degats\n"
    "Pikachu,Electrik,,35,Eclair,55\n"
    "Bulbizarre,Plante,Poison,45,Fouet Lianes,60\n"
    "Onix,Roche,Sol,45,Jet-Pierres,70\n"
)


def write(tmp_path, text):
    path = tmp_path / "pokemon.csv"
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def dex(tmp_path):
    return load_pokedex(write(tmp_path, DEX))


def test_loads_all_rows_in_order(dex):
    assert [p.name for p in dex] == ["Pikachu", "Bulbizarre", "Onix"]
    assert len(dex) == 3


def test_fields_parsed(dex):
    assert dex.find("Bulbizarre") == Pokemon(
        "Bulbizarre", 45, "Fouet Lianes", 60, ("Plante", "Poison")
    )


def test_empty_second_type_dropped(dex):
    assert dex.find("Pikachu").types == ("Electrik",)


def test_find_missing_is_none(dex):
    assert dex.find("Mewtwo") is None


def test_team_keeps_order_and_skips_unknown(dex):
    team = dex.team(["Onix", "Mewtwo", "Pikachu"])
    assert [p.name for p in team] == ["Onix", "Pikachu"]


def test_team_uses_first_match():
    first = Pokemon("Abo", 38, "Morsure", 60, ("Poison",))
    second = Pokemon("Abo", 10, "Charge", 5, ("Normal",))
    assert Pokedex((first, second)).team(["Abo"]) == [first]


def test_bad_row_skipped_and_logged(tmp_path, caplog):
    text = DEX + "Rattata,Normal,,abc,Charge,40\n"
    with caplog.at_level(logging.WARNING):
        dex = load_pokedex(write(tmp_path, text))
    assert dex.find("Rattata") is None
    assert len(dex) == 3
    assert any("Rattata" in record.getMessage() for record in caplog.records)


def test_short_row_skipped(tmp_path):
    dex = load_pokedex(write(tmp_path, DEX + "Roucool,Vol\n"))
    assert dex.find("Roucool") is None


def test_integer_prefix_accepted(tmp_path):
    dex = load_pokedex(write(tmp_path, "h\nDraco,Dragon,,52xyz,Draco-Rage, 80\n"))
    draco = dex.find("Draco")
    assert (draco.hp, draco.damage) == (52, 80)


def test_header_only_gives_empty_dex(tmp_path):
    assert len(load_pokedex(write(tmp_path, "Nom,Type1\n"))) == 0


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_pokedex(tmp_path / "absent.csv")