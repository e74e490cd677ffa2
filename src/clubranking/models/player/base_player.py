"""A club player on the roster."""

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
from typing import Any, Dict

from clubranking.constants import DEFAULT_RATING
from clubranking.exceptions import InvalidPlayerDataException
from clubranking.models.tournament.session import Participant
from clubranking.utils import generate_id, setup_logger
from clubranking.utils.validation import coerce_rating, is_finite_number

logger = setup_logger(__name__)


@dataclass
class Player:
    """
    Roster entry for a club player.

    The identifier is generated once and never changes; the name is unique
    on the roster (case-insensitively) and the rating is the persistent
    TTR-style skill number, only changed when a session is finished.

    Attributes
    ----------
    id : str
        Immutable unique identifier for the player.
    name : str
        Player's name.
    rating : int
        Current rating, ``DEFAULT_RATING`` for new players.
    active : bool
        Whether the player is present today and joins the next session.
    """

    id: str
    name: str
    rating: int = DEFAULT_RATING
    active: bool = True

    @classmethod
    def create(cls, name: str, rating: int = DEFAULT_RATING) -> "Player":
        """Create a new, active player with a fresh id."""
        return cls(id=generate_id(), name=name, rating=rating, active=True)

    def snapshot(self) -> Participant:
        """Copy of this player's id, name and rating for a session."""
        return Participant(id=self.id, name=self.name, rating=self.rating)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player data to dictionary format."""
        return {
            "id": self.id,
            "name": self.name,
            "rating": self.rating,
            "active": self.active,
        }

    @classmethod
    def from_dict(cls, player_data: Dict[str, Any]) -> "Player":
        """Create a Player instance from serialized dictionary data.

        A missing, non-numeric or non-finite rating is replaced by the
        default rating. Older save files store the rating as ``ttr``.

        Raises:
            InvalidPlayerDataException: If id or name is missing
        """
        player_id = player_data.get("id")
        name = player_data.get("name")
        if not player_id or not name:
            raise InvalidPlayerDataException(
                f"Player entry needs an id and a name: {player_data!r}"
            )

        raw_rating = player_data.get("rating", player_data.get("ttr"))
        rating = coerce_rating(raw_rating)
        if raw_rating is not None and not is_finite_number(raw_rating):
            logger.warning(
                "Rating %r of %s is unusable, reset to %d", raw_rating, name, rating
            )

        return cls(
            id=str(player_id),
            name=str(name),
            rating=rating,
            active=bool(player_data.get("active", True)),
        )

    def __str__(self) -> str:
        """Return human-readable string representation."""
        return f"{self.name} ({self.rating})"
