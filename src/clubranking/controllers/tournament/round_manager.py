"""Round management for club sessions.

This module turns drawn pairings into the matches of the next round.
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

import random
from typing import List, Optional

from clubranking.constants import PAIRING_ATTEMPTS
from clubranking.models.tournament import Match, PairingHistory, Session
from clubranking.pairing import generate_round
from clubranking.type_hints import Shuffler
from clubranking.utils import setup_logger

logger = setup_logger(__name__)


class RoundManager:
    """Creates the matches of the next round of a session.

    This class is responsible for:
    - Collecting the pairings already played (byes excluded)
    - Drawing new pairings through the pairing generator
    - Wrapping them into unplayed matches and byes
    """

    def __init__(
        self,
        rng: Optional[Shuffler] = None,
        pairing_attempts: int = PAIRING_ATTEMPTS,
    ):
        """Initialize the round manager.

        Args:
            rng: Source of randomness; a seeded ``random.Random`` gives
                reproducible draws
            pairing_attempts: Shuffles tried per round
        """
        self.rng = rng if rng is not None else random.Random()
        self.pairing_attempts = pairing_attempts

    @staticmethod
    def next_round_number(session: Session) -> int:
        return session.current_round + 1

    def create_next_round(self, session: Session) -> List[Match]:
        """Draw the matches of the round after ``session.current_round``.

        The caller checks that another round may be drawn.

        Args:
            session: The running session

        Returns:
            New matches tagged with the next round number, paired matches
            unplayed and at most one bye
        """
        round_number = self.next_round_number(session)
        history = PairingHistory.from_matches(session.matches)

        pairings = generate_round(
            session.participant_ids,
            history.previous_matches,
            rng=self.rng,
            max_attempts=self.pairing_attempts,
        )

        matches = []
        for a, b in pairings:
            if b is None:
                matches.append(Match.bye(round_number, a))
            else:
                matches.append(Match.paired(round_number, a, b))

        logger.info(
            "Created round %d: %d matches, bye: %s, rematches: %d",
            round_number,
            sum(1 for m in matches if not m.is_bye),
            next((m.bye_id for m in matches if m.is_bye), "None"),
            history.count_repeats(pairings),
        )
        return matches
