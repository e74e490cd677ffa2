"""Season standings built from the archive of finished days."""

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
from typing import Any, Dict, Iterable, Iterator, List, Optional

from clubranking.constants import NAME_KEY_PREFIX
from clubranking.models.tournament import DaySnapshot, SeasonRow, StandingRow
from clubranking.tournament.standings_calculator import compare_names
from clubranking.utils import setup_logger

logger = setup_logger(__name__)


def season_key(row: StandingRow) -> str:
    """Aggregation key of an archived row.

    The player id, or ``name:<lower-cased name>`` for rows archived without
    one. Two different players who once shared a name collide under the
    fallback; that is accepted.
    """
    if row.id is not None:
        return row.id
    return f"{NAME_KEY_PREFIX}{row.name.lower()}"


def _compare_season_rows(r1: SeasonRow, r2: SeasonRow) -> int:
    """Season order: points, set difference, wins, then name.

    Unlike the day standings the third key is wins, not sets won.
    """
    if r1.points != r2.points:
        return -1 if r1.points > r2.points else 1

    if r1.set_difference != r2.set_difference:
        return -1 if r1.set_difference > r2.set_difference else 1

    if r1.wins != r2.wins:
        return -1 if r1.wins > r2.wins else 1

    return compare_names(r1.name, r2.name)


def aggregate(archive: Iterable[DaySnapshot]) -> List[SeasonRow]:
    """Sum all archived days into ranked season rows.

    Args:
        archive: Finished day snapshots, in any order

    Returns:
        Season rows, best first. ``days_played`` counts the snapshots a
        player appears in.
    """
    totals: Dict[str, SeasonRow] = {}

    for day in archive:
        for row in day.standings:
            key = season_key(row)
            season_row = totals.get(key)
            if season_row is None:
                season_row = SeasonRow(key=key, id=row.id, name=row.name)
                totals[key] = season_row
            season_row.add_day(row)

    return sorted(totals.values(), key=functools.cmp_to_key(_compare_season_rows))


class Archive:
    """Ordered collection of finished days.

    The archive only grows, one snapshot per finished session, or is
    cleared as a whole when a new season starts.
    """

    def __init__(self, snapshots: Optional[Iterable[DaySnapshot]] = None) -> None:
        self._snapshots: List[DaySnapshot] = list(snapshots or [])

    def __len__(self) -> int:
        return len(self._snapshots)

    def __iter__(self) -> Iterator[DaySnapshot]:
        return iter(self._snapshots)

    @property
    def snapshots(self) -> List[DaySnapshot]:
        return list(self._snapshots)

    def append(self, snapshot: DaySnapshot) -> None:
        """Archive a finished day."""
        self._snapshots.append(snapshot)
        logger.info(
            "Archived day %s (session %s, %d players)",
            snapshot.id,
            snapshot.session_id,
            len(snapshot.standings),
        )

    def clear(self) -> None:
        """Drop every archived day, starting a new season."""
        count = len(self._snapshots)
        self._snapshots.clear()
        logger.info("Cleared season archive (%d days removed)", count)

    def standings(self) -> List[SeasonRow]:
        """Season standings of everything archived so far."""
        return aggregate(self._snapshots)

    def to_list(self) -> List[Dict[str, Any]]:
        """Serialize archive to a list of dictionaries."""
        return [snapshot.to_dict() for snapshot in self._snapshots]

    @classmethod
    def from_list(cls, data: Iterable[Dict[str, Any]]) -> "Archive":
        """Deserialize archive from a list of dictionaries."""
        return cls(DaySnapshot.from_dict(entry) for entry in data)
