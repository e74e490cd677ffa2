"""TTR-style (Elo) rating changes for club matches.

Ratings are updated once per finished day. Every decided match of the day
is rated with the ratings the players had when the session started, the
per-match changes are summed per player and the sum is added to the
player's current rating.
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

import math
from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Tuple

from clubranking.constants import TTR_K, TTR_SCALE
from clubranking.models.tournament import Match, Participant
from clubranking.type_hints import RatingDeltas
from clubranking.utils import setup_logger

logger = setup_logger(__name__)


def expected_score(
    rating_a: float, rating_b: float, scale: float = TTR_SCALE
) -> float:
    """Probability that A beats B.

    E = 1 / (1 + 10 ** ((rating_b - rating_a) / scale))
    """
    try:
        return 1.0 / (1.0 + math.pow(10.0, (rating_b - rating_a) / scale))
    except OverflowError:
        # B is so far ahead that A has no chance
        return 0.0


def round_half_away_from_zero(value: float) -> int:
    """Round to the nearest integer, halves away from zero (2.5 -> 3, -2.5 -> -3)."""
    return int(Decimal(value).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def match_delta(
    rating_a: float, rating_b: float, a_won: bool, k: float = TTR_K
) -> Tuple[int, int]:
    """Rating changes for one decided match.

    Args:
        rating_a: Rating of player A
        rating_b: Rating of player B
        a_won: Whether A won the match
        k: Development coefficient

    Returns:
        ``(delta_a, delta_b)`` with ``delta_b == -delta_a``
    """
    outcome = 1.0 if a_won else 0.0
    expected = expected_score(rating_a, rating_b)
    delta_a = round_half_away_from_zero((outcome - expected) * k)
    # zero-sum: B loses exactly what A gains
    return delta_a, -delta_a


def accumulate_deltas(
    participants: Iterable[Participant], matches: Iterable[Match], k: float = TTR_K
) -> RatingDeltas:
    """Sum the rating changes of a day per participant.

    Byes and unplayed matches are skipped, as are matches involving ids
    that are not in ``participants``.

    Args:
        participants: Session participants with their start-of-day ratings
        matches: All matches of the session

    Returns:
        Mapping of participant id to total change (0 for players without
        a decided match)
    """
    start_rating = {p.id: p.rating for p in participants}
    deltas: RatingDeltas = {player_id: 0 for player_id in start_rating}

    for match in matches:
        if not match.is_decided:
            continue
        rating_a = start_rating.get(match.a_id)
        rating_b = start_rating.get(match.b_id)
        if rating_a is None or rating_b is None:
            logger.warning("Skipping match %s with unknown participant", match.id)
            continue

        delta_a, delta_b = match_delta(rating_a, rating_b, match.result.a_won, k)
        deltas[match.a_id] += delta_a
        deltas[match.b_id] += delta_b
        logger.debug(
            "Match %s (%s): %s %+d, %s %+d",
            match.id,
            match.result,
            match.a_id,
            delta_a,
            match.b_id,
            delta_b,
        )

    return deltas
