"""Pairings already played in a session."""

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
from typing import Iterable, Optional

from clubranking.models.tournament.match import Match
from clubranking.type_hints import PlayedPairs, RoundPairings


@dataclass
class PairingHistory:
    """
    Tracks pairings already played so rematches can be avoided.

    Attributes
    ----------
    previous_matches : set of frozenset of str
        Frozensets of player id pairs that have already met. Byes are
        never recorded, so receiving a bye twice is not a rematch.
    """

    previous_matches: PlayedPairs = field(default_factory=set)

    def add_pairing(self, player1_id: str, player2_id: Optional[str]) -> None:
        """Record that two players have been paired. Byes are ignored."""
        if player2_id is None:
            return
        self.previous_matches.add(frozenset({player1_id, player2_id}))

    def have_played(self, player1_id: str, player2_id: Optional[str]) -> bool:
        """Check if two players have previously played each other."""
        if player2_id is None:
            return False
        return frozenset({player1_id, player2_id}) in self.previous_matches

    def count_repeats(self, pairings: RoundPairings) -> int:
        """Number of pairings in a round that would be rematches."""
        return sum(1 for a, b in pairings if self.have_played(a, b))

    @classmethod
    def from_matches(cls, matches: Iterable[Match]) -> "PairingHistory":
        """Build the history from every paired match drawn so far."""
        history = cls()
        for match in matches:
            if not match.is_bye:
                history.add_pairing(match.a_id, match.b_id)
        return history
