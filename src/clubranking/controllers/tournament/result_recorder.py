"""Result recording for club sessions.

This module applies entered results to the matches of a session.
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

from typing import Tuple, Union

from clubranking.models.tournament import Match, ScoreResult, Session, parse_result
from clubranking.utils import setup_logger

logger = setup_logger(__name__)


class ResultRecorder:
    """Handles recording match results.

    This class is responsible for:
    - Parsing entered results at the input edge
    - Clearing a result when the input is empty or invalid
    - Leaving byes untouched
    """

    def record(
        self,
        session: Session,
        match_id: str,
        raw: Union[str, ScoreResult, None],
    ) -> Tuple[Match, ...]:
        """Return the session's matches with one result replaced.

        Args:
            session: The running session
            match_id: Id of a paired match of the session
            raw: Entered result such as "2-1"; anything invalid clears it

        Returns:
            The full, updated match tuple. Unchanged when the match is a bye.
        """
        result = parse_result(raw)
        if raw not in (None, "") and not result.is_decided:
            logger.info(
                "Result %r for match %s is not valid, clearing it", raw, match_id
            )

        updated = []
        for match in session.matches:
            if match.id == match_id and not match.is_bye:
                match = match.with_result(result)
                logger.debug(
                    "Recorded round %d: %s vs %s %s",
                    match.round,
                    match.a_id,
                    match.b_id,
                    str(result) or "(cleared)",
                )
            updated.append(match)
        return tuple(updated)

    @staticmethod
    def all_results_in(session: Session) -> bool:
        """Whether every paired match of every round has a result.

        False for a session without any match.
        """
        if not session.matches:
            return False
        return all(m.is_decided for m in session.paired_matches)
