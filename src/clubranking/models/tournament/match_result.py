"""Match result data class."""

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
from typing import Any, Optional, Union

from clubranking.exceptions import InvalidResultException
from clubranking.utils.validation import is_valid_score_pair, split_result


@dataclass(frozen=True)
class ScoreResult:
    """Result of a paired match: either unset or decided.

    Attributes
    ----------
    score_a : int or None
        Sets won by player A, None while the match is unplayed.
    score_b : int or None
        Sets won by player B, None while the match is unplayed.

    A decided result always satisfies ``score_a + score_b == 3`` with each
    score in 0..3, so one side always wins outright.
    """

    score_a: Optional[int] = None
    score_b: Optional[int] = None

    def __post_init__(self) -> None:
        if self.score_a is None and self.score_b is None:
            return
        if not is_valid_score_pair(self.score_a, self.score_b):
            raise InvalidResultException(
                f"Invalid set scores: {self.score_a!r}-{self.score_b!r}"
            )

    @property
    def is_decided(self) -> bool:
        """Whether both scores have been recorded."""
        return self.score_a is not None

    @property
    def a_won(self) -> bool:
        """Whether player A won. Only meaningful for decided results."""
        return self.is_decided and self.score_a > self.score_b

    def __str__(self) -> str:
        if not self.is_decided:
            return ""
        return f"{self.score_a}-{self.score_b}"

    @classmethod
    def from_scores(cls, score_a: Any, score_b: Any) -> "ScoreResult":
        """Build a result from stored scores, falling back to unset.

        Anything other than a complete pair of valid set counts (including
        a half-filled pair) loads as unset.
        """
        if is_valid_score_pair(score_a, score_b):
            return cls(score_a, score_b)
        return UNSET


UNSET = ScoreResult()


def parse_result(raw: Union[str, ScoreResult, None]) -> ScoreResult:
    """Convert user input into a match result.

    Valid input is two integers in 0..3 summing to exactly 3
    ("3-0", "2-1", "1-2", "0-3"). Everything else, including an empty
    string, yields ``UNSET`` so that a user can always clear a result.

    Example:
        >>> parse_result("2-1").score_a
        2
        >>> parse_result("2-2").is_decided
        False
    """
    if isinstance(raw, ScoreResult):
        return raw
    scores = split_result(raw)
    if scores is None:
        return UNSET
    return ScoreResult(*scores)
