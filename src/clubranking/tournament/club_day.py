"""Club day engine - runs the lifecycle of one competition day.

This is the primary interface of the package. A :class:`ClubDay` holds no
session itself: every operation takes the current :class:`Session` (or the
roster players for :meth:`ClubDay.start`) and returns a
:class:`TransitionResult` carrying the new session. Illegal requests are
rejected with a reason instead of raising, and a rejected request never
changes anything.

Lifecycle::

    (no session) --start--> round 0 --draw--> round 1 .. round 6 --finish--> finished
                     ^                                                       |
                     +------------------------- reset_today <----------------+
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

from dataclasses import replace
from datetime import datetime
from typing import Callable, Dict, Iterable, List, Optional, Union

from clubranking.constants import (
    MIN_PARTICIPANTS,
    PAIRING_ATTEMPTS,
    ROUNDS_PER_SESSION,
)
from clubranking.controllers.tournament import ResultRecorder, RoundManager
from clubranking.models.player import Player
from clubranking.models.tournament import (
    DaySnapshot,
    Match,
    ScoreResult,
    Session,
    StandingRow,
)
from clubranking.rating import accumulate_deltas
from clubranking.tournament.standings_calculator import StandingsCalculator
from clubranking.type_hints import RatingDeltas, Shuffler
from clubranking.utils import generate_id, setup_logger, utc_now

logger = setup_logger(__name__)

# Rejection reasons
NO_SESSION = "No session is running"
SESSION_FINISHED = "The session is already finished"
NOT_ENOUGH_PLAYERS = f"At least {MIN_PARTICIPANTS} players must be present"
ALL_ROUNDS_DRAWN = "All rounds have been drawn"
UNKNOWN_MATCH = "No match with this id in the session"
BYE_HAS_NO_RESULT = "A bye cannot take a result"
NOT_FINISHABLE = "All results up to the last round are needed to finish"


class TransitionResult:
    """Outcome of an engine operation.

    Attributes:
        session: Session after the operation (the unchanged input session
            when rejected, None after :meth:`ClubDay.end`)
        reason: Why the operation was rejected, None on success
        snapshot: Day snapshot to archive, set by a successful finish
        rating_deltas: Rating change per player id, set by a successful finish
    """

    def __init__(
        self,
        session: Optional[Session],
        reason: Optional[str] = None,
        snapshot: Optional[DaySnapshot] = None,
        rating_deltas: Optional[RatingDeltas] = None,
    ):
        self.session = session
        self.reason = reason
        self.snapshot = snapshot
        self.rating_deltas = rating_deltas if rating_deltas is not None else {}

    @property
    def ok(self) -> bool:
        return self.reason is None

    def __bool__(self) -> bool:
        """Allow using result in boolean context: if result: ..."""
        return self.ok

    def __repr__(self) -> str:
        if self.ok:
            return "TransitionResult(OK)"
        return f"TransitionResult(REJECTED, {self.reason!r})"

    @classmethod
    def rejected(cls, session: Optional[Session], reason: str) -> "TransitionResult":
        logger.warning("Rejected: %s", reason)
        return cls(session, reason=reason)


class ClubDay:
    """Runs competition days.

    This class coordinates the session lifecycle through specialized helpers:
    - RoundManager: draws the pairings of the next round
    - ResultRecorder: applies entered results
    - StandingsCalculator: ranks the participants

    and computes the batch rating update when a day is finished.
    """

    def __init__(
        self,
        rng: Optional[Shuffler] = None,
        pairing_attempts: int = PAIRING_ATTEMPTS,
        clock: Callable[[], datetime] = utc_now,
    ) -> None:
        """Initialize the engine.

        Args:
            rng: Source of randomness for draws; pass a seeded
                ``random.Random`` for reproducible sessions
            pairing_attempts: Shuffles tried per round
            clock: Returns the current time, for start and finish stamps
        """
        self.round_manager = RoundManager(rng=rng, pairing_attempts=pairing_attempts)
        self.result_recorder = ResultRecorder()
        self.standings_calculator = StandingsCalculator()
        self.clock = clock

    # ========== Lifecycle ==========

    def start(self, players: Iterable[Player]) -> TransitionResult:
        """Start a session with the players marked present.

        The present players' ids, names and ratings are copied into the
        session; later roster changes do not affect it.

        Args:
            players: Roster players; only active ones take part

        Returns:
            Result with the new session, rejected with fewer than two
            present players
        """
        present = [p for p in players if p.active]
        if len(present) < MIN_PARTICIPANTS:
            return TransitionResult.rejected(None, NOT_ENOUGH_PLAYERS)

        session = Session(
            id=generate_id(),
            started_at=self.clock(),
            rounds=ROUNDS_PER_SESSION,
            participants=tuple(p.snapshot() for p in present),
        )
        logger.info(
            "Started session %s with %d players", session.id, len(present)
        )
        return TransitionResult(session)

    def draw_next_round(self, session: Optional[Session]) -> TransitionResult:
        """Draw the pairings of the next round.

        Rejected without a session, once finished, or when every round has
        already been drawn.
        """
        if session is None:
            return TransitionResult.rejected(None, NO_SESSION)
        if session.finished:
            return TransitionResult.rejected(session, SESSION_FINISHED)
        if not self.can_draw(session):
            return TransitionResult.rejected(session, ALL_ROUNDS_DRAWN)

        new_matches = self.round_manager.create_next_round(session)
        updated = replace(
            session,
            current_round=self.round_manager.next_round_number(session),
            matches=session.matches + tuple(new_matches),
        )
        return TransitionResult(updated)

    def record_result(
        self,
        session: Optional[Session],
        match_id: str,
        raw: Union[str, ScoreResult, None],
    ) -> TransitionResult:
        """Enter, change or clear the result of a paired match.

        Any input that is not a valid result ("3-0", "2-1", "1-2", "0-3"),
        including an empty string, clears the match back to unplayed.
        Results can be changed for any round until the day is finished.

        Args:
            session: The running session
            match_id: Id of a paired match in the session
            raw: Entered result

        Returns:
            Result with the updated session; rejected without a session,
            once finished, for an unknown match or for a bye
        """
        if session is None:
            return TransitionResult.rejected(None, NO_SESSION)
        if session.finished:
            return TransitionResult.rejected(session, SESSION_FINISHED)

        match = session.find_match(match_id)
        if match is None:
            return TransitionResult.rejected(session, UNKNOWN_MATCH)
        if match.is_bye:
            return TransitionResult.rejected(session, BYE_HAS_NO_RESULT)

        matches = self.result_recorder.record(session, match_id, raw)
        return TransitionResult(replace(session, matches=matches))

    def finish(self, session: Optional[Session]) -> TransitionResult:
        """Finish the day.

        Takes the final standings snapshot for the archive and computes the
        batch rating update from the ratings frozen at session start. Every
        decided match counts; byes never change ratings. The session is
        marked finished but keeps its matches.

        Returns:
            Result with the finished session, the day snapshot and the
            rating change per participant id; rejected unless
            :meth:`is_finishable`
        """
        if session is None:
            return TransitionResult.rejected(None, NO_SESSION)
        if not self.is_finishable(session):
            return TransitionResult.rejected(session, NOT_FINISHABLE)

        finished_at = self.clock()
        snapshot = DaySnapshot.create(
            session_id=session.id,
            rounds=session.rounds,
            standings=self.standings_for(session),
            finished_at=finished_at,
        )
        deltas = accumulate_deltas(session.participants, session.matches)

        finished = replace(session, finished=True, finished_at=finished_at)
        logger.info(
            "Finished session %s: %d matches, %d byes",
            session.id,
            len(session.paired_matches),
            len(session.byes),
        )
        return TransitionResult(finished, snapshot=snapshot, rating_deltas=deltas)

    def reset_today(self, session: Optional[Session]) -> TransitionResult:
        """Throw away all rounds and results and start drawing again.

        The session keeps its id and participant snapshot. This is allowed
        on a finished session too; it does not undo the archive entry or
        the rating update of that finish.
        """
        if session is None:
            return TransitionResult.rejected(None, NO_SESSION)
        if session.finished:
            logger.warning("Resetting finished session %s", session.id)

        reset = replace(
            session, matches=(), current_round=0, finished=False, finished_at=None
        )
        logger.info("Reset session %s", session.id)
        return TransitionResult(reset)

    def end(self, session: Optional[Session]) -> TransitionResult:
        """Discard the session. Unfinished results are lost."""
        if session is not None:
            logger.info(
                "Ended session %s (finished: %s)", session.id, session.finished
            )
        return TransitionResult(None)

    # ========== Queries ==========

    @staticmethod
    def can_draw(session: Optional[Session]) -> bool:
        """Whether another round may be drawn."""
        if session is None or session.finished:
            return False
        return session.current_round < session.rounds

    def is_finishable(self, session: Optional[Session]) -> bool:
        """Whether the day can be finished.

        True for an unfinished session whose last round has been drawn and
        whose paired matches, in all rounds, all have results.
        """
        if session is None or session.finished:
            return False
        if session.current_round != session.rounds:
            return False
        return self.result_recorder.all_results_in(session)

    def standings_for(self, session: Optional[Session]) -> List[StandingRow]:
        """Live standings of the session, best first."""
        if session is None:
            return []
        return self.standings_calculator.calculate(
            session.participants, session.matches
        )


# ========== Display helpers ==========


def current_round_matches(session: Optional[Session]) -> List[Match]:
    """Matches and bye of the most recently drawn round."""
    if session is None:
        return []
    return session.matches_in_round(session.current_round)


def name_by_id(session: Optional[Session]) -> Dict[str, str]:
    if session is None:
        return {}
    return {p.id: p.name for p in session.participants}


def draw_label(session: Optional[Session]) -> str:
    """Caption for the draw action, e.g. "Draw round 3"."""
    if session is None:
        return ""
    next_round = session.current_round + 1
    if next_round <= session.rounds:
        return f"Draw round {next_round}"
    return "All rounds drawn"


def format_result(match: Match) -> str:
    """Result text such as "2-1", empty for byes and unplayed matches."""
    if match.is_bye:
        return ""
    return str(match.result)
