"""Session, match and standings data models."""

from clubranking.models.tournament.match_result import UNSET, ScoreResult, parse_result
from clubranking.models.tournament.match import Match
from clubranking.models.tournament.standing_row import SeasonRow, StandingRow
from clubranking.models.tournament.session import Participant, Session
from clubranking.models.tournament.day_snapshot import DaySnapshot
from clubranking.models.tournament.pairing_history import PairingHistory

__all__ = [
    "UNSET",
    "ScoreResult",
    "parse_result",
    "Match",
    "StandingRow",
    "SeasonRow",
    "Participant",
    "Session",
    "DaySnapshot",
    "PairingHistory",
]
