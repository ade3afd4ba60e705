import pytest

from pokeduel.pokemon import Pokemon
from pokeduel.trainers import (
    MASTER_DAMAGE_BOOST,
    MAX_TEAM_SIZE,
    REQUIRED_BADGES,
    GymLeader,
    Master,
    Player,
    TeamFullError,
    Trainer,
)


def make_pokemon(name="Pikachu", hp=35, damage=55, types=("Electrik",)):
    return Pokemon(name, hp, "Eclair", damage, types)


def full_team():
    return [make_pokemon(name=f"P{i}") for i in range(MAX_TEAM_SIZE)]


def test_selected_is_first_pokemon():
    first = make_pokemon("Pikachu")
    trainer = Trainer("Chlo", [first, make_pokemon("Carapuce")])
    assert trainer.selected == first


def test_selected_empty_team_is_none():
    assert Trainer("Chlo").selected is None


def test_add_pokemon_appends():
    trainer = Trainer("Chlo")
    pikachu = make_pokemon()
    trainer.add_pokemon(pikachu)
    assert trainer.team == [pikachu]


def test_add_pokemon_full_team_raises():
    trainer = Trainer("Chlo", full_team())
    with pytest.raises(TeamFullError):
        trainer.add_pokemon(make_pokemon())
    assert len(trainer.team) == MAX_TEAM_SIZE


def test_constructor_rejects_oversized_team():
    with pytest.raises(TeamFullError):
        Trainer("Chlo", full_team() + [make_pokemon()])


def test_swap_exchanges_positions():
    a, b, c = make_pokemon("A"), make_pokemon("B"), make_pokemon("C")
    trainer = Trainer("Chlo", [a, b, c])
    trainer.swap(0, 2)
    assert trainer.team == [c, b, a]


@pytest.mark.parametrize("first,second", [(-1, 0), (0, 2), (5, 1)])
def test_swap_invalid_positions(first, second):
    a, b = make_pokemon("A"), make_pokemon("B")
    trainer = Trainer("Chlo", [a, b])
    with pytest.raises(IndexError):
        trainer.swap(first, second)
    assert trainer.team == [a, b]


def test_show_team_lists_pokemon(capsys):
    pikachu = make_pokemon()
    Trainer("Chlo", [pikachu]).show_team()
    out = capsys.readouterr().out
    assert "--- Equipe de Chlo ---" in out
    assert pikachu.info() in out


def test_show_team_empty(capsys):
    Trainer("Chlo").show_team()
    assert capsys.readouterr().out.strip() == "Aucun Pokemon dans l'equipe."


def test_show_hp(capsys):
    Trainer("Chlo", [make_pokemon("Pikachu", hp=35)]).show_hp()
    out = capsys.readouterr().out
    assert "--- HP des Pokemon de Chlo ---" in out
    assert "[1] Pikachu - HP : 35" in out


def test_interact_depends_on_defeat(capsys):
    trainer = Trainer("Chlo")
    trainer.interact()
    assert "tant qu’il n’est pas vaincu" in capsys.readouterr().out
    trainer.defeated = True
    trainer.interact()
    assert "Tu m'as vaincu, bien joué !" in capsys.readouterr().out


def test_player_starts_without_badges():
    player = Player("Sacha")
    assert set(player.badges) == set(REQUIRED_BADGES)
    assert not any(player.badges.values())
    assert player.badge_count == 0
    assert not player.ready_for_master()


def test_player_badges_count_once():
    player = Player("Sacha")
    player.add_badge("Feu")
    player.add_badge("Feu")
    assert player.has_badge("Feu")
    assert not player.has_badge("Eau")
    assert player.badge_count == 1


def test_player_unknown_badge_is_absent():
    assert not Player("Sacha").has_badge("Dragon")


def test_player_ready_with_all_badges():
    player = Player("Sacha")
    for badge in REQUIRED_BADGES:
        player.add_badge(badge)
    assert player.ready_for_master()
    assert player.badge_count == len(REQUIRED_BADGES)


def test_player_record():
    player = Player("Sacha")
    player.add_win()
    player.add_win()
    player.add_loss()
    assert (player.wins, player.losses) == (2, 1)


def test_statistics_without_badges():
    text = Player("Sacha").statistics()
    assert "=== Statistiques de Sacha ===" in text
    assert "Badges obtenus (0) : Aucun" in text


def test_statistics_lists_owned_badges(capsys):
    player = Player("Sacha")
    player.add_badge("Roche")
    player.show_statistics()
    out = capsys.readouterr().out
    assert "Badges obtenus (1) : Roche" in out
    assert "Aucun" not in out


def test_leader_without_player(capsys):
    GymLeader("Ondine", gym="Azuria", badge="Cascade").interact(None)
    assert capsys.readouterr().out.strip() == (
        "Ondine (Leader de Azuria) : Reviens me voir quand tu auras progressé !"
    )


def test_leader_counts_remaining_badges(capsys):
    player = Player("Sacha")
    player.add_badge("Eau")
    GymLeader("Ondine", gym="Azuria", badge="Cascade").interact(player)
    out = capsys.readouterr().out
    assert f"Il te reste {len(REQUIRED_BADGES) - 1} badges" in out


def test_leader_with_all_badges(capsys):
    player = Player("Sacha")
    for badge in REQUIRED_BADGES:
        player.add_badge(badge)
    GymLeader("Ondine", gym="Azuria").interact(player)
    assert "Tu as tous les badges" in capsys.readouterr().out


def test_master_boosts_team():
    base = make_pokemon("Draco", damage=80, types=("Dragon",))
    master = Master("Lance", [base])
    assert master.team == [base.boosted(MASTER_DAMAGE_BOOST)]
    assert master.team[0].damage >= base.damage


def test_master_interact(capsys):
    Master("Lance").interact()
    assert capsys.readouterr().out.strip() == "Lance : Je suis le Maitre Pokemon !"