from clubranking.controllers.tournament.result_recorder import ResultRecorder
from clubranking.controllers.tournament.round_manager import RoundManager

__all__ = [
    "ResultRecorder",
    "RoundManager",
]
