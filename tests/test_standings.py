from clubranking.models.tournament import Match, Participant, ScoreResult
from clubranking.tournament import compute_standings


def _played(round_number, a, b, score_a, score_b):
    return Match.paired(round_number, a, b).with_result(ScoreResult(score_a, score_b))


def _by_id(rows):
    return {row.id: row for row in rows}


def test_every_participant_gets_a_row():
    people = [Participant("a", "Anna", 1000), Participant("b", "Ben", 1000)]
    rows = compute_standings(people, [])
    assert [r.id for r in rows] == ["a", "b"]
    assert all(r.points == 0 and r.played == 0 for r in rows)


def test_win_loss_and_bye_scoring():
    people = [
        Participant("a", "Anna", 1000),
        Participant("b", "Ben", 1000),
        Participant("c", "Cleo", 1000),
    ]
    matches = [_played(1, "a", "b", 3, 0), Match.bye(1, "c")]

    rows = compute_standings(people, matches)
    by_id = _by_id(rows)

    assert [r.id for r in rows] == ["a", "c", "b"]
    assert (by_id["a"].points, by_id["a"].sets_won, by_id["a"].sets_lost) == (2, 3, 0)
    assert (by_id["b"].points, by_id["b"].losses, by_id["b"].sets_won) == (0, 1, 0)
    # a bye is a played win without sets
    bye_row = by_id["c"]
    assert (bye_row.points, bye_row.wins, bye_row.played) == (2, 1, 1)
    assert (bye_row.sets_won, bye_row.sets_lost) == (0, 0)


def test_unplayed_matches_count_for_nothing():
    people = [Participant("a", "Anna", 1000), Participant("b", "Ben", 1000)]
    rows = compute_standings(people, [Match.paired(1, "a", "b")])
    assert all(r.played == 0 and r.points == 0 for r in rows)


def test_points_total_is_two_per_decided_match_and_bye():
    people = [Participant(pid, pid.upper(), 1000) for pid in "abcde"]
    matches = [
        _played(1, "a", "b", 2, 1),
        _played(1, "c", "d", 0, 3),
        Match.bye(1, "e"),
        _played(2, "a", "c", 1, 2),
        Match.paired(2, "b", "e"),
        Match.bye(2, "d"),
    ]
    rows = compute_standings(people, matches)
    assert sum(r.points for r in rows) == 2 * 3 + 2 * 2


def test_set_difference_breaks_points_tie():
    people = [Participant(pid, pid, 1000) for pid in ["a", "b", "x", "y"]]
    matches = [_played(1, "a", "x", 2, 1), _played(1, "b", "y", 3, 0)]
    rows = compute_standings(people, matches)
    assert [r.id for r in rows][:2] == ["b", "a"]


def test_sets_won_breaks_difference_tie():
    people = [
        Participant("c", "Aaron", 1000),
        Participant("d", "Dora", 1000),
        Participant("e", "Emil", 1000),
        Participant("f", "Fritz", 1000),
    ]
    matches = [
        Match.bye(1, "c"),
        _played(1, "d", "e", 2, 1),
        _played(2, "d", "f", 1, 2),
    ]
    rows = compute_standings(people, matches)
    order = [r.id for r in rows]
    # both on 2 points and +0, Dora won 3 sets and Aaron none
    assert order.index("d") < order.index("c")


def test_name_ordering_ignores_case_and_accents():
    people = [
        Participant("1", "Eva", 1000),
        Participant("2", "bert", 1000),
        Participant("3", "Émile", 1000),
        Participant("4", "Anna", 1000),
    ]
    rows = compute_standings(people, [])
    assert [r.name for r in rows] == ["Anna", "bert", "Émile", "Eva"]
