"""Command implementations for the Club Ranking console.

Every command loads what it needs from the JSON store, runs one engine or
roster operation and saves the changed data again. Commands return a
process exit code: 0 on success, 1 when the request was refused.
"""

# Club Ranking
# Copyright (C) 2025  Club Ranking developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import argparse
import random
from typing import Optional

from prompt_toolkit.shortcuts import confirm

from clubranking.cli.render import (
    Colors,
    render_pairings,
    render_rating_changes,
    render_roster,
    render_season,
    render_standings,
    render_status,
)
from clubranking.config import ClubConfig, load_config
from clubranking.controllers.player import Roster
from clubranking.exceptions import FileSaveException
from clubranking.models.player import Player
from clubranking.models.tournament import Match, Session
from clubranking.storage import JsonStore
from clubranking.tournament import Archive, ClubDay, TransitionResult
from clubranking.utils import setup_logger

logger = setup_logger(__name__)


def print_error(message: str) -> None:
    print(f"{Colors.FAIL}Error: {message}{Colors.ENDC}")


def print_ok(message: str) -> None:
    print(f"{Colors.OKGREEN}{message}{Colors.ENDC}")


def config_from_args(args: argparse.Namespace) -> ClubConfig:
    """Configuration file and environment, overridden by command line options."""
    config = load_config(getattr(args, "config", None))
    if getattr(args, "data_dir", None):
        config.data_dir = args.data_dir
    if getattr(args, "seed", None) is not None:
        config.seed = args.seed
    if getattr(args, "verbose", False):
        config.log_level = "DEBUG"
    return config


def open_store(args: argparse.Namespace) -> JsonStore:
    return JsonStore(config_from_args(args).data_path)


def create_engine(config: ClubConfig) -> ClubDay:
    """Engine drawing with the configured seed, if any."""
    rng = random.Random(config.seed) if config.seed is not None else None
    return ClubDay(rng=rng, pairing_attempts=config.pairing_attempts)


def confirmed(args: argparse.Namespace, question: str) -> bool:
    """Ask ``question`` unless ``--yes`` was given."""
    if getattr(args, "yes", False):
        return True
    return confirm(question)


def resolve_player(roster: Roster, ref: str) -> Player:
    """Find a player by name or, failing that, by id.

    Raises:
        PlayerNotFoundException: If neither matches
    """
    return roster.find_by_name(ref) or roster.get(ref)


def resolve_match(
    session: Session, ref: str, round_number: Optional[int] = None
) -> Optional[Match]:
    """Find a match by its number within a round or by its id.

    Numbers count the paired matches of ``round_number`` (default: the last
    drawn round) in draw order, starting at 1, as shown by the pairings.
    """
    if ref.isdigit():
        if round_number is None:
            round_number = session.current_round
        paired = [m for m in session.matches_in_round(round_number) if not m.is_bye]
        index = int(ref) - 1
        if 0 <= index < len(paired):
            return paired[index]
        return None
    return session.find_match(ref)


def _report(result: TransitionResult) -> int:
    if not result:
        print_error(result.reason)
        return 1
    return 0


# ========== Roster commands ==========


def run_players_command(args: argparse.Namespace) -> int:
    """List the roster."""
    roster = open_store(args).load_roster()
    print(render_roster(roster.sorted_players()))
    return 0


def run_add_command(args: argparse.Namespace) -> int:
    """Add a player to the roster."""
    store = open_store(args)
    roster = store.load_roster()
    roster.strict = True
    player = roster.add(" ".join(args.name))
    store.save_roster(roster)
    print_ok(f"Added {player.name} (TTR {player.rating})")
    return 0


def run_toggle_command(args: argparse.Namespace) -> int:
    """Flip a player's attendance."""
    store = open_store(args)
    roster = store.load_roster()
    player = resolve_player(roster, " ".join(args.player))
    roster.toggle_active(player.id)
    store.save_roster(roster)
    print_ok(f"{player.name} is now {'present' if player.active else 'absent'}")
    return 0


def run_remove_command(args: argparse.Namespace) -> int:
    """Remove a player from the roster."""
    store = open_store(args)
    roster = store.load_roster()
    player = resolve_player(roster, " ".join(args.player))
    roster.remove(player.id)
    store.save_roster(roster)
    print_ok(f"Removed {player.name}")
    return 0


def _set_all(args: argparse.Namespace, value: bool) -> int:
    store = open_store(args)
    roster = store.load_roster()
    roster.set_all_active(value)
    store.save_roster(roster)
    print_ok(f"{roster.active_count} of {len(roster)} present")
    return 0


def run_all_present_command(args: argparse.Namespace) -> int:
    """Mark every player present."""
    return _set_all(args, True)


def run_all_absent_command(args: argparse.Namespace) -> int:
    """Mark every player absent."""
    return _set_all(args, False)


# ========== Session commands ==========


def run_start_command(args: argparse.Namespace) -> int:
    """Start a session with the players present."""
    config = config_from_args(args)
    store = JsonStore(config.data_path)
    if store.load_session() is not None:
        print_error("A session is already running; end it first")
        return 1

    result = create_engine(config).start(store.load_roster())
    if not result:
        return _report(result)
    store.save_session(result.session)
    print_ok(render_status(result.session))
    return 0


def run_draw_command(args: argparse.Namespace) -> int:
    """Draw the next round."""
    config = config_from_args(args)
    store = JsonStore(config.data_path)
    result = create_engine(config).draw_next_round(store.load_session())
    if not result:
        return _report(result)
    store.save_session(result.session)
    print(render_pairings(result.session))
    return 0


def run_pairings_command(args: argparse.Namespace) -> int:
    """Show the pairings of a round."""
    session = open_store(args).load_session()
    print(render_status(session))
    if session is not None:
        print(render_pairings(session, args.round))
    return 0


def run_result_command(args: argparse.Namespace) -> int:
    """Enter, change or clear a match result."""
    config = config_from_args(args)
    store = JsonStore(config.data_path)
    session = store.load_session()
    if session is None:
        print_error("No session is running")
        return 1

    match = resolve_match(session, args.match, args.round)
    if match is None:
        print_error(f"No match {args.match!r}")
        return 1

    result = create_engine(config).record_result(session, match.id, args.result)
    if not result:
        return _report(result)
    store.save_session(result.session)
    print(render_pairings(result.session, match.round))
    return 0


def run_standings_command(args: argparse.Namespace) -> int:
    """Show the live standings of the session."""
    config = config_from_args(args)
    session = JsonStore(config.data_path).load_session()
    print(render_status(session))
    if session is not None:
        print(render_standings(create_engine(config).standings_for(session)))
    return 0


def run_finish_command(args: argparse.Namespace) -> int:
    """Finish the day: archive the standings and update the ratings.

    The finished session is written first so that a repeated ``finish`` is
    refused. If the archive or the roster cannot be written afterwards, the
    previous archive and the unfinished session are written back.
    """
    config = config_from_args(args)
    store = JsonStore(config.data_path)
    session = store.load_session()
    result = create_engine(config).finish(session)
    if not result:
        return _report(result)

    roster = store.load_roster()
    roster.apply_rating_deltas(result.rating_deltas)
    previous_archive = store.load_archive()
    archive = Archive(previous_archive)
    archive.append(result.snapshot)

    store.save_session(result.session)
    try:
        store.save_archive(archive)
        store.save_roster(roster)
    except FileSaveException:
        logger.warning("Finishing session %s failed, restoring it", session.id)
        store.save_archive(previous_archive)
        store.save_session(session)
        raise

    print(render_standings(list(result.snapshot.standings)))
    print()
    print(render_rating_changes(session, result.rating_deltas))
    print_ok("Day finished and archived")
    return 0


def run_reset_today_command(args: argparse.Namespace) -> int:
    """Discard every round of the session and start drawing again."""
    config = config_from_args(args)
    store = JsonStore(config.data_path)
    session = store.load_session()
    if session is not None and not confirmed(
        args, "Discard all rounds and results of today?"
    ):
        print("Cancelled")
        return 1

    result = create_engine(config).reset_today(session)
    if not result:
        return _report(result)
    store.save_session(result.session)
    print_ok(render_status(result.session))
    return 0


def run_end_command(args: argparse.Namespace) -> int:
    """End the session without archiving anything."""
    config = config_from_args(args)
    store = JsonStore(config.data_path)
    session = store.load_session()
    if session is None:
        print_error("No session is running")
        return 1
    if not session.finished:
        print(f"{Colors.WARNING}Results of this session are lost{Colors.ENDC}")
    result = create_engine(config).end(session)
    store.save_session(result.session)
    print_ok("Session ended")
    return 0


# ========== Season commands ==========


def run_season_command(args: argparse.Namespace) -> int:
    """Show the season standings."""
    archive = open_store(args).load_archive()
    print(f"{len(archive)} finished days")
    print(render_season(archive.standings()))
    return 0


def run_reset_season_command(args: argparse.Namespace) -> int:
    """Clear the archive of finished days."""
    store = open_store(args)
    archive = store.load_archive()
    if not confirmed(args, f"Delete all {len(archive)} finished days?"):
        print("Cancelled")
        return 1
    archive.clear()
    store.save_archive(archive)
    print_ok("Season reset")
    return 0
