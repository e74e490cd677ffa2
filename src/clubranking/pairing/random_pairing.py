"""Randomized pairing generator that avoids rematches.

Each round is drawn by shuffling all participants and pairing neighbours.
The shuffle is repeated a bounded number of times and the draw with the
fewest rematches wins; the search stops at the first rematch-free draw.
This is a heuristic: with few players and many rounds rematches can be
unavoidable, and the best draw found is returned instead of failing.
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
from typing import Iterable, List, Optional

from clubranking.constants import PAIRING_ATTEMPTS
from clubranking.exceptions import InvalidPairingException
from clubranking.models.tournament import PairingHistory
from clubranking.type_hints import Pairing, PlayedPairs, RoundPairings, Shuffler
from clubranking.utils import setup_logger

logger = setup_logger(__name__)


def _pair_neighbours(slots: List[Optional[str]]) -> RoundPairings:
    """Pair slots 0-1, 2-3, ... with the real player first in a bye pair."""
    pairings: RoundPairings = []
    for i in range(0, len(slots), 2):
        a, b = slots[i], slots[i + 1]
        if a is None:
            a, b = b, a
        pairings.append((a, b))
    return pairings


def generate_round(
    participant_ids: Iterable[str],
    already_played: Optional[PlayedPairs] = None,
    rng: Optional[Shuffler] = None,
    max_attempts: int = PAIRING_ATTEMPTS,
) -> RoundPairings:
    """Draw one round of pairings.

    Args:
        participant_ids: Ids of everyone playing this round
        already_played: Unordered id pairs that already met this session
        rng: Source of randomness with a ``shuffle`` method. Pass a seeded
            ``random.Random`` for reproducible draws.
        max_attempts: Upper bound on the number of shuffles tried

    Returns:
        List of pairings; ``(player_id, None)`` marks the bye of an odd
        round. Empty when there are no participants.

    Raises:
        InvalidPairingException: If an id appears more than once
    """
    slots: List[Optional[str]] = list(participant_ids)
    if len(set(slots)) != len(slots):
        raise InvalidPairingException("Participant ids must be unique")
    if not slots:
        return []
    if len(slots) % 2 == 1:
        slots.append(None)

    rng = rng if rng is not None else random.Random()
    history = PairingHistory(set(already_played or ()))

    best: Optional[RoundPairings] = None
    best_repeats = 0
    attempts = 0

    for attempts in range(1, max(1, max_attempts) + 1):
        shuffled = list(slots)
        rng.shuffle(shuffled)
        pairings = _pair_neighbours(shuffled)
        repeats = history.count_repeats(pairings)

        if best is None or repeats < best_repeats:
            best, best_repeats = pairings, repeats
            if repeats == 0:
                break

    if best_repeats:
        logger.info(
            "No rematch-free draw found in %d attempts, using one with %d rematch(es)",
            attempts,
            best_repeats,
        )
    else:
        logger.debug("Rematch-free draw found after %d attempt(s)", attempts)

    return best or []


def bye_of(pairings: RoundPairings) -> Optional[str]:
    """The player sitting out this round, if any."""
    for a, b in pairings:
        if b is None:
            return a
    return None


def is_bye(pairing: Pairing) -> bool:
    return pairing[1] is None
