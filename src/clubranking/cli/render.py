"""Plain-text rendering of Club Ranking data for the console."""

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

from typing import Iterable, List, Optional, Sequence, Union

from clubranking.constants import UNKNOWN_NAME
from clubranking.models.player import Player
from clubranking.models.tournament import SeasonRow, Session, StandingRow
from clubranking.tournament import draw_label, format_result, name_by_id
from clubranking.type_hints import RatingDeltas


# ANSI color codes for terminal output
class Colors:
    HEADER = "\033[95m"
    OKBLUE = "\033[94m"
    OKCYAN = "\033[96m"
    OKGREEN = "\033[92m"
    WARNING = "\033[93m"
    FAIL = "\033[91m"
    ENDC = "\033[0m"
    BOLD = "\033[1m"


def format_table(headers: Sequence[str], rows: Iterable[Sequence[object]]) -> str:
    """Lay out ``rows`` under ``headers`` in left-aligned columns.

    Numeric cells are right-aligned.
    """
    body = [[str(cell) for cell in row] for row in rows]
    numeric = [True] * len(headers)
    widths = [len(h) for h in headers]
    for row in body:
        for i, cell in enumerate(row):
            widths[i] = max(widths[i], len(cell))
            if not cell.lstrip("+-").isdigit():
                numeric[i] = False

    def _line(cells: Sequence[str], align_numbers: bool) -> str:
        parts = []
        for i, cell in enumerate(cells):
            if align_numbers and numeric[i]:
                parts.append(cell.rjust(widths[i]))
            else:
                parts.append(cell.ljust(widths[i]))
        return "  ".join(parts).rstrip()

    lines = [_line(headers, False), "  ".join("-" * w for w in widths)]
    lines.extend(_line(row, True) for row in body)
    return "\n".join(lines)


def _signed(value: int) -> str:
    return f"{value:+d}" if value else "0"


def render_roster(players: Sequence[Player]) -> str:
    """Roster table: name, rating and attendance."""
    if not players:
        return "No players yet."
    rows = [
        (i, p.name, p.rating, "yes" if p.active else "-", p.id)
        for i, p in enumerate(players, start=1)
    ]
    present = sum(1 for p in players if p.active)
    table = format_table(("#", "Name", "TTR", "Present", "Id"), rows)
    return f"{table}\n\n{present} of {len(players)} present"


def render_pairings(session: Session, round_number: Optional[int] = None) -> str:
    """Pairings of one round (default: the last drawn) with their results.

    Paired matches are numbered in draw order; these numbers address the
    matches in the ``result`` command.
    """
    if round_number is None:
        round_number = session.current_round
    if round_number == 0:
        return "No round drawn yet."

    names = name_by_id(session)
    lines = [f"Round {round_number} of {session.rounds}"]
    number = 0
    bye_name = None
    for match in session.matches_in_round(round_number):
        if match.is_bye:
            bye_name = names.get(match.bye_id, UNKNOWN_NAME)
            continue
        number += 1
        result = format_result(match) or "-"
        lines.append(
            f"  {number}. {names.get(match.a_id, UNKNOWN_NAME)}"
            f" vs {names.get(match.b_id, UNKNOWN_NAME)}  [{result}]"
        )
    if bye_name is not None:
        lines.append(f"  Bye: {bye_name}")
    return "\n".join(lines)


def _ranked(
    rows: Sequence[Union[StandingRow, SeasonRow]], with_days: bool
) -> List[List[object]]:
    table = []
    for position, row in enumerate(rows, start=1):
        cells: List[object] = [position, row.name]
        if with_days:
            cells.append(row.days_played)
        cells.extend(
            [
                row.points,
                row.wins,
                row.losses,
                f"{row.sets_won}:{row.sets_lost}",
                _signed(row.set_difference),
            ]
        )
        table.append(cells)
    return table


def render_standings(rows: Sequence[StandingRow]) -> str:
    """Day standings table."""
    if not rows:
        return "No standings."
    return format_table(
        ("Pos", "Name", "Pts", "W", "L", "Sets", "+/-"), _ranked(rows, False)
    )


def render_season(rows: Sequence[SeasonRow]) -> str:
    """Season standings table."""
    if not rows:
        return "No finished days this season."
    return format_table(
        ("Pos", "Name", "Days", "Pts", "W", "L", "Sets", "+/-"), _ranked(rows, True)
    )


def render_rating_changes(session: Session, deltas: RatingDeltas) -> str:
    """Rating change per participant, largest gain first."""
    changes = sorted(
        session.participants, key=lambda p: (-deltas.get(p.id, 0), p.name)
    )
    rows = [
        (p.name, p.rating, _signed(deltas.get(p.id, 0)), p.rating + deltas.get(p.id, 0))
        for p in changes
    ]
    return format_table(("Name", "Before", "Change", "After"), rows)


def render_status(session: Optional[Session]) -> str:
    """One-line summary of the running session."""
    if session is None:
        return "No session running."
    state = "finished" if session.finished else draw_label(session)
    return (
        f"Session {session.id[:8]}: {len(session.participants)} players,"
        f" round {session.current_round} of {session.rounds} ({state})"
    )
