import pytest

from clubranking.models.tournament import Match, Participant, ScoreResult
from clubranking.rating import (
    accumulate_deltas,
    expected_score,
    match_delta,
    round_half_away_from_zero,
)


def test_expected_score_of_equal_ratings():
    assert expected_score(1000, 1000) == pytest.approx(0.5)


def test_expected_scores_are_complementary():
    e_a = expected_score(1200, 1050)
    e_b = expected_score(1050, 1200)
    assert e_a + e_b == pytest.approx(1.0)
    assert e_a == pytest.approx(10 / 11)


def test_expected_score_saturates_instead_of_overflowing():
    assert expected_score(0, 10**6) == 0.0


@pytest.mark.parametrize(
    "value, expected",
    [(2.5, 3), (-2.5, -3), (0.5, 1), (-0.5, -1), (2.4, 2), (-2.6, -3), (0.0, 0)],
)
def test_rounding_is_half_away_from_zero(value, expected):
    assert round_half_away_from_zero(value) == expected


def test_equal_ratings_move_eight_points():
    assert match_delta(1000, 1000, a_won=True) == (8, -8)
    assert match_delta(1000, 1000, a_won=False) == (-8, 8)


def test_upset_moves_more_than_expected_win():
    # 150 points apart: expected score of the weaker player is 1/11
    assert match_delta(1000, 1150, a_won=True) == (15, -15)
    assert match_delta(1000, 1150, a_won=False) == (-1, 1)


def test_accumulate_uses_start_ratings_and_is_zero_sum():
    a = Participant("a", "A", 1000)
    b = Participant("b", "B", 1000)
    c = Participant("c", "C", 1300)
    matches = [
        Match.paired(1, "a", "b").with_result(ScoreResult(3, 0)),
        Match.paired(2, "a", "b").with_result(ScoreResult(2, 1)),
        Match.paired(3, "c", "b").with_result(ScoreResult(0, 3)),
        Match.bye(3, "a"),
        Match.paired(4, "a", "c"),
    ]

    deltas = accumulate_deltas([a, b, c], matches)

    # second win counts the same as the first: ratings stay frozen
    assert deltas["a"] == 16
    assert deltas["b"] == -16 + match_delta(1000, 1300, a_won=True)[0]
    assert sum(deltas.values()) == 0


def test_accumulate_skips_unknown_players():
    a = Participant("a", "A", 1000)
    matches = [Match.paired(1, "a", "ghost").with_result(ScoreResult(3, 0))]
    assert accumulate_deltas([a], matches) == {"a": 0}


def test_player_without_decided_match_gets_zero():
    a = Participant("a", "A", 1000)
    b = Participant("b", "B", 1000)
    assert accumulate_deltas([a, b], [Match.bye(1, "a")]) == {"a": 0, "b": 0}
