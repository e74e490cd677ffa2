"""Data model for a single match of a session round."""

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
from typing import Any, Dict, Optional

from clubranking.models.tournament.match_result import UNSET, ScoreResult
from clubranking.utils import generate_id


@dataclass(frozen=True)
class Match:
    """A paired match or a bye in one round.

    Attributes
    ----------
    id : str
        Unique match identifier.
    round : int
        Round number (1-indexed).
    a_id : str or None
        First player of a paired match, None for a bye.
    b_id : str or None
        Second player of a paired match, None for a bye.
    bye_id : str or None
        The unmatched player of an odd round, None for a paired match.
    result : ScoreResult
        Recorded result of a paired match. Always ``UNSET`` for a bye.
    """

    id: str
    round: int
    a_id: Optional[str] = None
    b_id: Optional[str] = None
    bye_id: Optional[str] = None
    result: ScoreResult = UNSET

    @classmethod
    def paired(cls, round_number: int, a_id: str, b_id: str) -> "Match":
        """Create an unplayed match between two players."""
        return cls(id=generate_id(), round=round_number, a_id=a_id, b_id=b_id)

    @classmethod
    def bye(cls, round_number: int, bye_id: str) -> "Match":
        """Create a bye for the unmatched player of a round."""
        return cls(id=generate_id(), round=round_number, bye_id=bye_id)

    @property
    def is_bye(self) -> bool:
        return self.bye_id is not None

    @property
    def is_decided(self) -> bool:
        """Whether this is a paired match with a recorded result."""
        return not self.is_bye and self.result.is_decided

    @property
    def score_a(self) -> Optional[int]:
        return self.result.score_a

    @property
    def score_b(self) -> Optional[int]:
        return self.result.score_b

    def with_result(self, result: ScoreResult) -> "Match":
        """Return a copy carrying ``result``. Byes are returned unchanged."""
        if self.is_bye:
            return self
        return replace(self, result=result)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        if self.is_bye:
            return {"id": self.id, "round": self.round, "bye_id": self.bye_id}
        return {
            "id": self.id,
            "round": self.round,
            "a_id": self.a_id,
            "b_id": self.b_id,
            "score_a": self.result.score_a,
            "score_b": self.result.score_b,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary.

        Accepts the camelCase keys (``aId``, ``scoreA``, ``byeId``) of older
        save files as well.
        """
        bye_id = data.get("bye_id", data.get("byeId"))
        if bye_id is not None:
            return cls(id=data["id"], round=int(data["round"]), bye_id=bye_id)
        return cls(
            id=data["id"],
            round=int(data["round"]),
            a_id=data.get("a_id", data.get("aId")),
            b_id=data.get("b_id", data.get("bId")),
            result=ScoreResult.from_scores(
                data.get("score_a", data.get("scoreA")),
                data.get("score_b", data.get("scoreB")),
            ),
        )
