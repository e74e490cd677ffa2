import pytest

from clubranking.cli import commands
from clubranking.cli.__main__ import (
    COMMANDS,
    create_completer,
    create_main_parser,
    global_options,
    handle_interactive_input,
    main,
)
from clubranking.cli.render import format_table, render_pairings
from clubranking.exceptions import FileSaveException
from clubranking.storage import JsonStore


@pytest.fixture
def run(tmp_path, monkeypatch):
    monkeypatch.delenv("CLUBRANKING_DATA_DIR", raising=False)

    def _run(*argv):
        return main(["--data-dir", str(tmp_path), "--seed", "3", *argv])

    return _run


@pytest.fixture
def store(tmp_path):
    return JsonStore(tmp_path)


def _play_day(run):
    for _ in range(6):
        assert run("draw") == 0
        assert run("result", "1", "3-0") == 0


def test_parser_result_command():
    args = create_main_parser().parse_args(["result", "2", "2-1", "--round", "1"])
    assert (args.command, args.match, args.result) == ("result", "2", "2-1")
    assert args.round == 1


def test_parser_result_defaults_to_clearing():
    args = create_main_parser().parse_args(["result", "abc"])
    assert args.result == ""
    assert args.round is None


def test_global_options_are_repeated():
    argv = ["--data-dir", "/tmp/x", "--seed", "4", "--verbose"]
    assert global_options(create_main_parser().parse_args(argv)) == argv


def test_completer_knows_both_command_forms():
    options = create_completer().options
    for cmd in COMMANDS:
        assert cmd in options
        assert f"/{cmd}" in options


def test_roster_commands(run, store, capsys):
    assert run("add", "Anna", "Lena") == 0
    assert run("add", "Ben") == 0
    assert run("add", "anna", "lena") == 1
    assert "already exists" in capsys.readouterr().out

    assert run("toggle", "Ben") == 0
    assert not store.load_roster().find_by_name("Ben").active
    capsys.readouterr()
    assert run("toggle", "Nobody") == 1
    assert "No player 'Nobody'" in capsys.readouterr().out
    assert run("remove", "Nobody") == 1

    assert run("all-present") == 0
    assert store.load_roster().active_count == 2
    assert run("all-absent") == 0
    assert store.load_roster().active_count == 0

    capsys.readouterr()
    assert run("players") == 0
    out = capsys.readouterr().out
    assert "Anna Lena" in out
    assert "0 of 2 present" in out

    assert run("remove", "Ben") == 0
    assert len(store.load_roster()) == 1


def test_start_requires_two_present_players(run, store):
    run("add", "Anna")
    assert run("start") == 1
    run("add", "Ben")
    assert run("start") == 0
    assert run("start") == 1
    assert store.load_session() is not None


def test_full_day(run, store, capsys):
    for name in ["Anna", "Ben", "Cleo"]:
        run("add", name)
    run("start")

    assert run("finish") == 1
    _play_day(run)
    assert run("draw") == 1

    capsys.readouterr()
    assert run("standings") == 0
    assert "Pos" in capsys.readouterr().out

    assert run("finish") == 0
    out = capsys.readouterr().out
    assert "Day finished" in out

    assert sum(p.rating for p in store.load_roster()) == 3000
    assert store.load_session().finished
    archive = store.load_archive()
    assert len(archive) == 1
    # six decided matches and six byes
    assert sum(row.points for row in archive.standings()) == 24

    assert run("season") == 0
    assert "1 finished days" in capsys.readouterr().out


def test_result_commands(run, store, capsys):
    run("add", "Anna")
    run("add", "Ben")
    run("start")
    assert run("result", "1", "3-0") == 1

    run("draw")
    assert run("result", "1", "2-1") == 0
    assert store.load_session().matches[0].is_decided
    assert run("result", "1") == 0
    assert not store.load_session().matches[0].is_decided
    assert run("result", "2", "3-0") == 1

    match_id = store.load_session().matches[0].id
    assert run("result", match_id, "0-3") == 0
    assert store.load_session().matches[0].result.score_b == 3


def test_reset_today_and_end(run, store):
    run("add", "Anna")
    run("add", "Ben")
    run("start")
    run("draw")
    session_id = store.load_session().id

    assert run("reset-today", "--yes") == 0
    session = store.load_session()
    assert session.id == session_id
    assert session.current_round == 0

    assert run("end") == 0
    assert store.load_session() is None
    assert run("end") == 1


def test_reset_season_asks_first(run, store, monkeypatch):
    run("add", "Anna")
    run("add", "Ben")
    run("start")
    _play_day(run)
    run("finish")

    monkeypatch.setattr(commands, "confirm", lambda question: False)
    assert run("reset-season") == 1
    assert len(store.load_archive()) == 1

    assert run("reset-season", "--yes") == 0
    assert len(store.load_archive()) == 0


def test_format_table_aligns_columns():
    table = format_table(("Name", "Pts"), [("Anna", 12), ("Benedikt", 4)])
    lines = table.splitlines()
    assert lines[0] == "Name      Pts"
    assert lines[2] == "Anna       12"
    assert lines[3] == "Benedikt    4"


def test_render_pairings_before_first_draw(run, store):
    run("add", "Anna")
    run("add", "Ben")
    run("start")
    assert render_pairings(store.load_session()) == "No round drawn yet."


def _play_day_won_by(run, store, winner_name):
    """Six rounds of Anna against Ben, all won 3-0 by ``winner_name``."""
    winner = store.load_roster().find_by_name(winner_name)
    for _ in range(6):
        assert run("draw") == 0
        match = store.load_session().paired_matches[-1]
        score = "3-0" if match.a_id == winner.id else "0-3"
        assert run("result", match.id, score) == 0


def _fail_first_call(monkeypatch, method_name):
    original = getattr(JsonStore, method_name)
    calls = []

    def failing(self, data):
        calls.append(data)
        if len(calls) == 1:
            raise FileSaveException("disk full")
        return original(self, data)

    monkeypatch.setattr(JsonStore, method_name, failing)


@pytest.mark.parametrize("method_name", ["save_archive", "save_roster"])
def test_failed_finish_can_be_retried_once(run, store, monkeypatch, method_name):
    run("add", "Anna")
    run("add", "Ben")
    run("start")
    _play_day_won_by(run, store, "Anna")

    _fail_first_call(monkeypatch, method_name)
    assert run("finish") == 1
    assert not store.load_session().finished
    assert len(store.load_archive()) == 0
    assert {p.rating for p in store.load_roster()} == {1000}

    assert run("finish") == 0
    assert run("finish") == 1

    roster = store.load_roster()
    assert roster.find_by_name("Anna").rating == 1048
    assert roster.find_by_name("Ben").rating == 952
    assert len(store.load_archive()) == 1
    assert store.load_session().finished


def test_interactive_help(capsys):
    parser = create_main_parser()

    for line in ["//help", "help", "/help"]:
        assert handle_interactive_input(parser, [], line)
        assert "Available Commands" in capsys.readouterr().out

    assert handle_interactive_input(parser, [], "help /draw")
    assert "Command: draw" in capsys.readouterr().out

    assert handle_interactive_input(parser, [], "")
    assert not handle_interactive_input(parser, [], "quit")


def test_interactive_runs_commands(tmp_path, capsys):
    parser = create_main_parser()
    options = ["--data-dir", str(tmp_path)]

    assert handle_interactive_input(parser, options, "/add Anna")
    assert handle_interactive_input(parser, options, "bogus")
    assert "Unknown command: bogus" in capsys.readouterr().out
    assert JsonStore(tmp_path).load_roster().find_by_name("Anna") is not None
