import random

import pytest

from clubranking.controllers.player import Roster
from clubranking.exceptions import MatchNotFoundException
from clubranking.models.player import Player
from clubranking.models.tournament import UNSET
from clubranking.tournament import (
    Archive,
    ClubDay,
    current_round_matches,
    draw_label,
    format_result,
    name_by_id,
)
from clubranking.tournament.club_day import (
    ALL_ROUNDS_DRAWN,
    BYE_HAS_NO_RESULT,
    NO_SESSION,
    NOT_ENOUGH_PLAYERS,
    NOT_FINISHABLE,
    SESSION_FINISHED,
    UNKNOWN_MATCH,
)

from conftest import FIXED_TIME


def _started(engine, players):
    result = engine.start(players)
    assert result
    return result.session


def _draw_all(engine, session):
    for _ in range(session.rounds):
        session = engine.draw_next_round(session).session
    return session


def _play_round(engine, session, winner_id=None):
    """Decide every paired match of the last drawn round, A winning 2-1."""
    for match in current_round_matches(session):
        if match.is_bye:
            continue
        raw = "2-1"
        if winner_id is not None and match.b_id == winner_id:
            raw = "0-3"
        elif winner_id is not None and match.a_id == winner_id:
            raw = "3-0"
        session = engine.record_result(session, match.id, raw).session
    return session


def test_start_needs_two_present_players(engine, alice, bob):
    bob.active = False
    result = engine.start([alice, bob])

    assert not result
    assert result.reason == NOT_ENOUGH_PLAYERS
    assert result.session is None


def test_start_snapshots_present_players(engine, alice, bob, five_players):
    five_players[0].active = False
    session = _started(engine, [alice, bob, *five_players])

    assert len(session.participants) == 6
    assert five_players[0].id not in session.participant_ids
    assert session.current_round == 0
    assert session.matches == ()
    assert session.started_at == FIXED_TIME
    assert not session.finished

    # later roster edits do not reach the session
    alice.rating = 1500
    alice.name = "Alicia"
    participant = session.participants[session.participant_ids.index(alice.id)]
    assert (participant.name, participant.rating) == ("Alice", 1000)


def test_draw_advances_round_and_keeps_history(engine, five_players):
    session = _started(engine, five_players)
    first = engine.draw_next_round(session).session

    assert first.current_round == 1
    assert len(first.matches) == 3
    second = engine.draw_next_round(first).session
    assert second.current_round == 2
    assert second.matches[:3] == first.matches


def test_every_participant_appears_once_per_round(engine, five_players):
    session = _draw_all(engine, _started(engine, five_players))
    for round_number in range(1, 7):
        seen = []
        byes = 0
        for match in session.matches_in_round(round_number):
            if match.is_bye:
                byes += 1
                seen.append(match.bye_id)
            else:
                assert match.a_id != match.b_id
                seen.extend([match.a_id, match.b_id])
        assert byes == 1
        assert sorted(seen) == sorted(session.participant_ids)


def test_no_rematch_while_one_is_avoidable(engine):
    players = [Player.create(name) for name in ["A", "B", "C", "D"]]
    session = _started(engine, players)
    for _ in range(3):
        session = engine.draw_next_round(session).session

    pairs = [frozenset({m.a_id, m.b_id}) for m in session.paired_matches]
    assert len(pairs) == 6
    assert len(set(pairs)) == 6


def test_seventh_round_is_rejected(engine, alice, bob):
    session = _draw_all(engine, _started(engine, [alice, bob]))
    assert not engine.can_draw(session)
    assert draw_label(session) == "All rounds drawn"

    result = engine.draw_next_round(session)
    assert not result
    assert result.reason == ALL_ROUNDS_DRAWN
    assert result.session is session
    assert session.current_round == 6


def test_operations_without_session_are_rejected(engine):
    assert engine.draw_next_round(None).reason == NO_SESSION
    assert engine.record_result(None, "x", "3-0").reason == NO_SESSION
    assert engine.finish(None).reason == NO_SESSION
    assert engine.reset_today(None).reason == NO_SESSION
    assert engine.standings_for(None) == []


def test_record_change_and_clear_result(engine, alice, bob):
    session = engine.draw_next_round(_started(engine, [alice, bob])).session
    match = current_round_matches(session)[0]

    session = engine.record_result(session, match.id, "3-0").session
    assert format_result(session.get_match(match.id)) == "3-0"

    session = engine.record_result(session, match.id, "1-2").session
    assert format_result(session.get_match(match.id)) == "1-2"

    session = engine.record_result(session, match.id, "").session
    assert session.get_match(match.id).result is UNSET

    session = engine.record_result(session, match.id, "2-1").session
    session = engine.record_result(session, match.id, "2-2").session
    assert not session.get_match(match.id).is_decided


def test_earlier_rounds_stay_editable(engine, alice, bob):
    session = engine.draw_next_round(_started(engine, [alice, bob])).session
    first = current_round_matches(session)[0]
    session = engine.draw_next_round(session).session

    session = engine.record_result(session, first.id, "0-3").session
    assert session.get_match(first.id).result.score_b == 3


def test_bye_and_unknown_match_are_rejected(engine, five_players):
    session = engine.draw_next_round(_started(engine, five_players)).session
    bye = session.byes[0]

    result = engine.record_result(session, bye.id, "3-0")
    assert result.reason == BYE_HAS_NO_RESULT
    assert result.session is session

    result = engine.record_result(session, "no-such-match", "3-0")
    assert result.reason == UNKNOWN_MATCH
    with pytest.raises(MatchNotFoundException):
        session.get_match("no-such-match")


def test_three_players_first_round_has_one_bye(engine, alice, bob, five_players):
    session = _started(engine, [alice, bob, five_players[0]])
    session = engine.draw_next_round(session).session

    assert len(session.byes) == 1
    assert len(session.paired_matches) == 1
    bye_id = session.byes[0].bye_id
    match = session.paired_matches[0]
    assert {match.a_id, match.b_id, bye_id} == set(session.participant_ids)

    rows = {row.id: row for row in engine.standings_for(session)}
    bye_row = rows[bye_id]
    assert (bye_row.wins, bye_row.losses, bye_row.points) == (1, 0, 2)
    assert (bye_row.sets_won, bye_row.sets_lost) == (0, 0)
    assert bye_row.played == 1
    assert engine.standings_for(session)[0].id == bye_id
    # the undecided match counts for neither player
    assert rows[match.a_id].played == rows[match.b_id].played == 0


def test_finishable_only_with_all_rounds_and_results(engine, five_players):
    session = _started(engine, five_players)
    assert not engine.is_finishable(session)

    for _ in range(5):
        session = _play_round(engine, engine.draw_next_round(session).session)
    assert not engine.is_finishable(session)

    session = engine.draw_next_round(session).session
    assert not engine.is_finishable(session)
    result = engine.finish(session)
    assert result.reason == NOT_FINISHABLE
    assert result.session is session

    session = _play_round(engine, session)
    assert engine.is_finishable(session)


def test_finished_session_refuses_changes(engine, alice, bob):
    session = _draw_all(engine, _started(engine, [alice, bob]))
    for match in session.paired_matches:
        session = engine.record_result(session, match.id, "2-1").session
    finished = engine.finish(session).session

    assert finished.finished
    assert finished.finished_at == FIXED_TIME
    assert engine.draw_next_round(finished).reason == SESSION_FINISHED
    assert engine.record_result(finished, finished.matches[0].id, "").reason == (
        SESSION_FINISHED
    )
    assert not engine.finish(finished)
    assert not engine.is_finishable(finished)


def test_full_day_two_players(engine, alice, bob):
    roster = Roster([alice, bob])
    archive = Archive()
    session = _started(engine, roster.active_players())
    assert name_by_id(session) == {alice.id: "Alice", bob.id: "Bob"}

    for _ in range(6):
        session = engine.draw_next_round(session).session
        session = _play_round(engine, session, winner_id=alice.id)

    result = engine.finish(session)
    assert result
    assert result.rating_deltas == {alice.id: 48, bob.id: -48}

    top = result.snapshot.standings[0]
    assert (top.name, top.points, top.wins, top.sets_won, top.sets_lost) == (
        "Alice",
        12,
        6,
        18,
        0,
    )
    assert result.snapshot.session_id == session.id
    assert result.snapshot.finished_at == FIXED_TIME

    roster.apply_rating_deltas(result.rating_deltas)
    archive.append(result.snapshot)
    assert (alice.rating, bob.rating) == (1048, 952)

    season = archive.standings()
    assert [(r.name, r.points, r.days_played) for r in season] == [
        ("Alice", 12, 1),
        ("Bob", 0, 1),
    ]


def test_reset_today_keeps_id_and_participants(engine, five_players):
    session = _started(engine, five_players)
    session = _play_round(engine, engine.draw_next_round(session).session)

    reset = engine.reset_today(session).session
    assert reset.id == session.id
    assert reset.participants == session.participants
    assert reset.matches == ()
    assert reset.current_round == 0
    assert draw_label(reset) == "Draw round 1"


def test_reset_today_reopens_finished_session(engine, alice, bob):
    session = _draw_all(engine, _started(engine, [alice, bob]))
    for match in session.paired_matches:
        session = engine.record_result(session, match.id, "3-0").session
    finished = engine.finish(session).session

    reset = engine.reset_today(finished)
    assert reset
    assert not reset.session.finished
    assert reset.session.finished_at is None
    assert reset.session.id == finished.id
    assert engine.can_draw(reset.session)


def test_end_discards_session(engine, alice, bob):
    session = engine.draw_next_round(_started(engine, [alice, bob])).session
    result = engine.end(session)
    assert result
    assert result.session is None
    assert engine.end(None).session is None


def test_rejection_leaves_input_unchanged(engine, alice, bob):
    session = engine.draw_next_round(_started(engine, [alice, bob])).session
    before = session.to_dict()

    engine.record_result(session, "unknown", "3-0")
    engine.finish(session)

    assert session.to_dict() == before


def test_same_seed_same_day(clock, five_players):
    first = ClubDay(rng=random.Random(5), clock=clock)
    second = ClubDay(rng=random.Random(5), clock=clock)
    s1 = _draw_all(first, _started(first, five_players))
    s2 = _draw_all(second, _started(second, five_players))
    assert [(m.a_id, m.b_id, m.bye_id) for m in s1.matches] == [
        (m.a_id, m.b_id, m.bye_id) for m in s2.matches
    ]
