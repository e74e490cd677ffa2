"""Standings calculation for a competition day.

This module folds the recorded matches of a session into a ranked table.
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

import functools
from typing import Dict, Iterable, List

from clubranking.constants import (
    BYE_POINTS,
    BYE_SETS_LOST,
    BYE_SETS_WON,
    LOSS_POINTS,
    WIN_POINTS,
)
from clubranking.models.tournament import Match, Participant, StandingRow
from clubranking.utils import name_sort_key, setup_logger

logger = setup_logger(__name__)


def compare_names(name1: str, name2: str) -> int:
    """Locale-aware comparison: negative if ``name1`` sorts first."""
    key1, key2 = name_sort_key(name1), name_sort_key(name2)
    if key1 == key2:
        return 0
    return -1 if key1 < key2 else 1


class StandingsCalculator:
    """Computes the live standings of a session.

    Scoring:
    - Win: 2 points, loss: 0 points
    - Bye: counts as a played win worth 2 points, no sets
    - Unplayed matches count for nothing

    Order:
    1. Points (descending)
    2. Set difference (descending)
    3. Sets won (descending)
    4. Name (ascending, locale-aware)
    """

    def calculate(
        self, participants: Iterable[Participant], matches: Iterable[Match]
    ) -> List[StandingRow]:
        """Calculate the ranked standings.

        Args:
            participants: Everyone in the session (one row each)
            matches: All matches and byes of the session

        Returns:
            Standings rows, best first
        """
        rows: Dict[str, StandingRow] = {
            p.id: StandingRow(id=p.id, name=p.name) for p in participants
        }

        for match in matches:
            if match.is_bye:
                self._record_bye(rows, match)
            elif match.is_decided:
                self._record_match(rows, match)

        return sorted(rows.values(), key=functools.cmp_to_key(self._compare_rows))

    def _record_bye(self, rows: Dict[str, StandingRow], match: Match) -> None:
        row = rows.get(match.bye_id)
        if row is None:
            logger.warning(
                "Bye %s references unknown player %s", match.id, match.bye_id
            )
            return
        row.played += 1
        row.wins += 1
        row.points += BYE_POINTS
        row.sets_won += BYE_SETS_WON
        row.sets_lost += BYE_SETS_LOST

    def _record_match(self, rows: Dict[str, StandingRow], match: Match) -> None:
        row_a = rows.get(match.a_id)
        row_b = rows.get(match.b_id)
        if row_a is None or row_b is None:
            logger.warning("Match %s references an unknown player", match.id)
            return

        row_a.played += 1
        row_b.played += 1

        row_a.sets_won += match.score_a
        row_a.sets_lost += match.score_b
        row_b.sets_won += match.score_b
        row_b.sets_lost += match.score_a

        # scores sum to 3, so there is always a strict winner
        winner, loser = (row_a, row_b) if match.result.a_won else (row_b, row_a)
        winner.wins += 1
        winner.points += WIN_POINTS
        loser.losses += 1
        loser.points += LOSS_POINTS

    @staticmethod
    def _compare_rows(r1: StandingRow, r2: StandingRow) -> int:
        """Compare two rows for standings order.

        Returns:
            -1 if r1 ranks higher, 1 if r2 ranks higher, 0 if equal
        """
        if r1.points != r2.points:
            return -1 if r1.points > r2.points else 1

        if r1.set_difference != r2.set_difference:
            return -1 if r1.set_difference > r2.set_difference else 1

        if r1.sets_won != r2.sets_won:
            return -1 if r1.sets_won > r2.sets_won else 1

        return compare_names(r1.name, r2.name)


def compute_standings(
    participants: Iterable[Participant], matches: Iterable[Match]
) -> List[StandingRow]:
    """Shortcut for ``StandingsCalculator().calculate(...)``."""
    return StandingsCalculator().calculate(participants, matches)
