"""Archived record of a finished competition day."""

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

from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, Iterable, Optional, Tuple

from clubranking.constants import ROUNDS_PER_SESSION
from clubranking.models.tournament.standing_row import StandingRow
from clubranking.utils import format_timestamp, generate_id, parse_timestamp


@dataclass(frozen=True)
class DaySnapshot:
    """Frozen final standings of one finished session.

    Attributes
    ----------
    id : str
        Unique snapshot identifier.
    finished_at : datetime or None
        When the session was finished.
    session_id : str or None
        Id of the session the snapshot was taken from.
    rounds : int
        Number of rounds played that day.
    standings : tuple of StandingRow
        Copies of the final standings rows, in ranking order.
    """

    id: str
    finished_at: Optional[datetime]
    session_id: Optional[str]
    rounds: int
    standings: Tuple[StandingRow, ...]

    @classmethod
    def create(
        cls,
        session_id: str,
        rounds: int,
        standings: Iterable[StandingRow],
        finished_at: datetime,
    ) -> "DaySnapshot":
        """Build a snapshot holding private copies of ``standings``."""
        return cls(
            id=generate_id(),
            finished_at=finished_at,
            session_id=session_id,
            rounds=rounds,
            standings=tuple(replace(row) for row in standings),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize snapshot to dictionary."""
        return {
            "id": self.id,
            "finished_at": format_timestamp(self.finished_at),
            "session_id": self.session_id,
            "rounds": self.rounds,
            "standings": [row.to_dict() for row in self.standings],
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "DaySnapshot":
        """Deserialize snapshot from dictionary."""
        return cls(
            id=data.get("id") or generate_id(),
            finished_at=parse_timestamp(
                data.get("finished_at", data.get("finishedAt"))
            ),
            session_id=data.get("session_id", data.get("sessionId")),
            rounds=int(data.get("rounds", ROUNDS_PER_SESSION)),
            standings=tuple(
                StandingRow.from_dict(row) for row in data.get("standings") or []
            ),
        )
