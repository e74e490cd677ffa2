"""Roster controller for managing the club's players.

This module handles adding and removing players, attendance and the
application of end-of-day rating changes.
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

from typing import Any, Dict, Iterable, List, Optional

from clubranking.exceptions import (
    DuplicatePlayerException,
    InvalidPlayerDataException,
    PlayerNotFoundException,
)
from clubranking.models.player import Player
from clubranking.type_hints import RatingDeltas
from clubranking.utils import name_sort_key, setup_logger
from clubranking.utils.validation import coerce_rating, validate_name

logger = setup_logger(__name__)


class Roster:
    """The club's list of players.

    This class is responsible for:
    - Keeping player names unique (case-insensitive)
    - Tracking who is present today
    - Applying the accumulated rating changes of a finished day
    """

    def __init__(
        self, players: Optional[Iterable[Player]] = None, strict: bool = False
    ):
        """Initialize the roster.

        Args:
            players: Initial players, e.g. loaded from storage
            strict: Whether rejected additions raise instead of returning None
        """
        self.players: List[Player] = list(players or [])
        self.strict = strict

    def __len__(self) -> int:
        return len(self.players)

    def __iter__(self):
        return iter(self.players)

    # ========== Queries ==========

    def find(self, player_id: str) -> Optional[Player]:
        for player in self.players:
            if player.id == player_id:
                return player
        return None

    def get(self, player_id: str) -> Player:
        """Get a player by id.

        Raises:
            PlayerNotFoundException: If no player has this id
        """
        player = self.find(player_id)
        if player is None:
            raise PlayerNotFoundException(f"No player {player_id!r}")
        return player

    def find_by_name(self, name: str) -> Optional[Player]:
        """Case-insensitive name lookup."""
        wanted = name.strip().casefold()
        for player in self.players:
            if player.name.casefold() == wanted:
                return player
        return None

    def sorted_players(self) -> List[Player]:
        """All players in locale-aware name order."""
        return sorted(self.players, key=lambda p: name_sort_key(p.name))

    def active_players(self) -> List[Player]:
        """Players marked present today, in roster order."""
        return [p for p in self.players if p.active]

    @property
    def active_count(self) -> int:
        return sum(1 for p in self.players if p.active)

    # ========== Changes ==========

    def add(self, name: Optional[str]) -> Optional[Player]:
        """Add a new player with the default rating.

        Args:
            name: Player name; surrounding whitespace is ignored

        Returns:
            The new player, or None if the name is empty or already taken

        Raises:
            InvalidPlayerDataException: If the name is empty and strict
            DuplicatePlayerException: If the name is taken and strict
        """
        result = validate_name(name)
        if not result:
            logger.warning("Cannot add player: %s", result.error_message)
            if self.strict:
                raise InvalidPlayerDataException(result.error_message)
            return None

        clean_name = result.sanitized_value
        if self.find_by_name(clean_name) is not None:
            message = f"A player named {clean_name!r} already exists"
            logger.warning("Cannot add player: %s", message)
            if self.strict:
                raise DuplicatePlayerException(message)
            return None

        player = Player.create(clean_name)
        self.players.append(player)
        logger.info("Added player: %s (%s)", player.name, player.id)
        return player

    def toggle_active(self, player_id: str) -> bool:
        """Flip a player's attendance.

        Returns:
            True if updated, False if player not found
        """
        player = self.find(player_id)
        if player is None:
            logger.warning("Cannot toggle attendance: unknown player %s", player_id)
            return False
        player.active = not player.active
        logger.info("Set %s active status to: %s", player.name, player.active)
        return True

    def remove(self, player_id: str) -> bool:
        """Remove a player from the roster.

        A running session keeps its own snapshot of the player.

        Returns:
            True if removed, False if not found
        """
        player = self.find(player_id)
        if player is None:
            return False
        self.players.remove(player)
        logger.info("Removed player: %s (%s)", player.name, player_id)
        return True

    def set_all_active(self, value: bool) -> None:
        """Mark every player present (True) or absent (False)."""
        for player in self.players:
            player.active = value
        logger.info(
            "Set all %d players active status to: %s", len(self.players), value
        )

    def apply_rating_deltas(self, deltas: RatingDeltas) -> None:
        """Add a finished day's rating changes to the current ratings.

        Players no longer on the roster are skipped; players without an
        entry keep their rating. A corrupted current rating is reset to the
        default before the change is added.
        """
        for player in self.players:
            delta = deltas.get(player.id, 0)
            old_rating = player.rating
            player.rating = coerce_rating(old_rating) + delta
            if delta:
                logger.info(
                    "Rating of %s: %s -> %d (%+d)",
                    player.name,
                    old_rating,
                    player.rating,
                    delta,
                )

    # ========== Serialization ==========

    def to_list(self) -> List[Dict[str, Any]]:
        """Serialize roster to a list of dictionaries."""
        return [p.to_dict() for p in self.players]

    @classmethod
    def from_list(cls, data: Iterable[Dict[str, Any]]) -> "Roster":
        """Deserialize roster, skipping entries that are not valid players."""
        players = []
        for entry in data:
            if not isinstance(entry, dict):
                logger.warning("Skipping malformed roster entry: %r", entry)
                continue
            try:
                players.append(Player.from_dict(entry))
            except InvalidPlayerDataException as e:
                logger.warning("Skipping roster entry: %s", e)
        return cls(players)
