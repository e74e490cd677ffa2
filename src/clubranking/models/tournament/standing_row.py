"""Standings rows for a single day and for the whole season."""

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

from dataclasses import dataclass
from typing import Any, Dict, Optional

from clubranking.constants import UNKNOWN_NAME


def _count(data: Dict[str, Any], *keys: str) -> int:
    """First integer found under ``keys``, 0 when absent or unusable."""
    for key in keys:
        value = data.get(key)
        if value is None or isinstance(value, bool):
            continue
        try:
            return int(value)
        except (TypeError, ValueError):
            return 0
    return 0


@dataclass
class StandingRow:
    """One participant's totals for a single session.

    Attributes
    ----------
    id : str or None
        Player id. Rows restored from very old archives may lack one.
    name : str
        Player name at the time of the session.
    points : int
        2 per win (byes included), 0 per loss.
    wins, losses, played : int
        Match counters; a bye counts as a played win.
    sets_won, sets_lost : int
        Sets summed over decided matches. Byes add none.
    """

    id: Optional[str]
    name: str
    points: int = 0
    wins: int = 0
    losses: int = 0
    sets_won: int = 0
    sets_lost: int = 0
    played: int = 0

    @property
    def set_difference(self) -> int:
        return self.sets_won - self.sets_lost

    def to_dict(self) -> Dict[str, Any]:
        """Serialize row to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "points": self.points,
            "wins": self.wins,
            "losses": self.losses,
            "sets_won": self.sets_won,
            "sets_lost": self.sets_lost,
            "played": self.played,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "StandingRow":
        """Deserialize row from dictionary, tolerating missing counters."""
        name = data.get("name")
        return cls(
            id=data.get("id"),
            name=str(name) if name is not None else UNKNOWN_NAME,
            points=_count(data, "points"),
            wins=_count(data, "wins"),
            losses=_count(data, "losses"),
            sets_won=_count(data, "sets_won", "setsWon"),
            sets_lost=_count(data, "sets_lost", "setsLost"),
            played=_count(data, "played"),
        )


@dataclass
class SeasonRow:
    """Season totals of one participant, summed over archived days.

    Never persisted; rebuilt from the archive whenever it is needed.
    """

    key: str
    id: Optional[str]
    name: str
    points: int = 0
    wins: int = 0
    losses: int = 0
    played: int = 0
    sets_won: int = 0
    sets_lost: int = 0
    days_played: int = 0

    @property
    def set_difference(self) -> int:
        return self.sets_won - self.sets_lost

    def add_day(self, row: StandingRow) -> None:
        """Fold one day's row into the season totals."""
        self.points += row.points
        self.wins += row.wins
        self.losses += row.losses
        self.played += row.played
        self.sets_won += row.sets_won
        self.sets_lost += row.sets_lost
        self.days_played += 1
