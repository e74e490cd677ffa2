import pytest

from clubranking.controllers.player import Roster
from clubranking.exceptions import (
    DuplicatePlayerException,
    InvalidPlayerDataException,
    PlayerNotFoundException,
)
from clubranking.models.player import Player


def test_add_player_defaults():
    roster = Roster()
    player = roster.add("  Anna ")

    assert player.name == "Anna"
    assert player.rating == 1000
    assert player.active
    assert roster.find(player.id) is player


def test_add_rejects_empty_and_duplicate_names():
    roster = Roster()
    roster.add("Anna")

    assert roster.add("") is None
    assert roster.add("   ") is None
    assert roster.add("anna") is None
    assert len(roster) == 1


def test_strict_roster_raises():
    roster = Roster(strict=True)
    roster.add("Anna")
    with pytest.raises(DuplicatePlayerException):
        roster.add("ANNA")
    with pytest.raises(InvalidPlayerDataException):
        roster.add(" ")


def test_get_unknown_player_raises():
    with pytest.raises(PlayerNotFoundException):
        Roster().get("nobody")


def test_toggle_and_set_all():
    roster = Roster()
    anna = roster.add("Anna")
    ben = roster.add("Ben")

    assert roster.toggle_active(anna.id)
    assert not anna.active
    assert roster.active_players() == [ben]
    assert not roster.toggle_active("nobody")

    roster.set_all_active(False)
    assert roster.active_count == 0
    roster.set_all_active(True)
    assert roster.active_count == 2


def test_remove():
    roster = Roster()
    anna = roster.add("Anna")
    assert roster.remove(anna.id)
    assert not roster.remove(anna.id)
    assert len(roster) == 0


def test_sorted_players_is_locale_aware():
    roster = Roster()
    for name in ["Zoe", "Özil", "anton", "Otto"]:
        roster.add(name)
    names = [p.name for p in roster.sorted_players()]
    assert names == ["anton", "Otto", "Özil", "Zoe"]


def test_apply_rating_deltas():
    anna = Player("a", "Anna", 1000)
    ben = Player("b", "Ben", 1200)
    broken = Player("c", "Cleo", float("nan"))
    roster = Roster([anna, ben, broken])

    roster.apply_rating_deltas({"a": 12, "b": -12, "c": 5, "gone": 30})

    assert (anna.rating, ben.rating, broken.rating) == (1012, 1188, 1005)


def test_from_list_skips_bad_entries():
    roster = Roster.from_list(
        [
            {"id": "a", "name": "Anna", "rating": 1100, "active": False},
            {"id": "b", "name": "Ben", "ttr": "Infinity"},
            {"name": "No Id"},
            "garbage",
        ]
    )
    assert [p.id for p in roster] == ["a", "b"]
    assert roster.get("a").rating == 1100
    assert not roster.get("a").active
    assert roster.get("b").rating == 1000
