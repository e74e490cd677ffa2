"""Data model for one competition day."""

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

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional, Tuple

from clubranking.constants import ROUNDS_PER_SESSION
from clubranking.exceptions import MatchNotFoundException
from clubranking.models.tournament.match import Match
from clubranking.utils import format_timestamp, parse_timestamp, utc_now
from clubranking.utils.validation import coerce_rating


@dataclass(frozen=True)
class Participant:
    """A player as they were when the session started.

    The rating is frozen at session start and is the only rating used for
    the end-of-day update, whatever happens to the roster meanwhile.
    """

    id: str
    name: str
    rating: int

    def to_dict(self) -> Dict[str, Any]:
        return {"id": self.id, "name": self.name, "rating": self.rating}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Participant":
        return cls(
            id=data["id"],
            name=data["name"],
            # older save files call it "ttr"
            rating=coerce_rating(data.get("rating", data.get("ttr"))),
        )


@dataclass(frozen=True)
class Session:
    """State of one competition day.

    Sessions are immutable values: every engine transition returns a new
    ``Session`` and leaves its input untouched.

    Attributes
    ----------
    id : str
        Unique session identifier, kept across a reset.
    started_at : datetime
        When the session was started.
    rounds : int
        Number of rounds to play (always 6).
    participants : tuple of Participant
        Snapshot of the players present at start, with frozen ratings.
    matches : tuple of Match
        All drawn matches and byes in draw order, grown round by round.
    current_round : int
        Last drawn round, 0 before the first draw.
    finished : bool
        Whether the day has been finished.
    finished_at : datetime or None
        When the day was finished.
    """

    id: str
    started_at: datetime = field(default_factory=utc_now)
    rounds: int = ROUNDS_PER_SESSION
    participants: Tuple[Participant, ...] = ()
    matches: Tuple[Match, ...] = ()
    current_round: int = 0
    finished: bool = False
    finished_at: Optional[datetime] = None

    @property
    def participant_ids(self) -> List[str]:
        return [p.id for p in self.participants]

    @property
    def paired_matches(self) -> List[Match]:
        return [m for m in self.matches if not m.is_bye]

    @property
    def byes(self) -> List[Match]:
        return [m for m in self.matches if m.is_bye]

    def matches_in_round(self, round_number: int) -> List[Match]:
        """All matches and byes drawn for ``round_number``."""
        return [m for m in self.matches if m.round == round_number]

    def find_match(self, match_id: str) -> Optional[Match]:
        for match in self.matches:
            if match.id == match_id:
                return match
        return None

    def get_match(self, match_id: str) -> Match:
        """Like :meth:`find_match` but raises when the match is unknown.

        Raises:
            MatchNotFoundException: If no match has this id
        """
        match = self.find_match(match_id)
        if match is None:
            raise MatchNotFoundException(f"No match with id {match_id!r}")
        return match

    def to_dict(self) -> Dict[str, Any]:
        """Serialize session to dictionary."""
        return {
            "id": self.id,
            "started_at": format_timestamp(self.started_at),
            "rounds": self.rounds,
            "participants": [p.to_dict() for p in self.participants],
            "matches": [m.to_dict() for m in self.matches],
            "current_round": self.current_round,
            "finished": self.finished,
            "finished_at": format_timestamp(self.finished_at),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Session":
        """Deserialize session from dictionary.

        Handles backward compatibility for the camelCase keys and the
        ``players`` participant list of older save files.
        """
        participants = data.get("participants", data.get("players")) or []
        started_at = parse_timestamp(data.get("started_at", data.get("startedAt")))
        return cls(
            id=data["id"],
            started_at=started_at or utc_now(),
            rounds=int(data.get("rounds", ROUNDS_PER_SESSION)),
            participants=tuple(Participant.from_dict(p) for p in participants),
            matches=tuple(Match.from_dict(m) for m in data.get("matches") or []),
            current_round=int(data.get("current_round", data.get("currentRound")) or 0),
            finished=bool(data.get("finished", False)),
            finished_at=parse_timestamp(
                data.get("finished_at", data.get("finishedAt"))
            ),
        )
