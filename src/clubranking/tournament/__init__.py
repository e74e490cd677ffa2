"""Competition day management for Club Ranking.

This package runs the lifecycle of a competition day, ranks its
participants and builds the season standings from finished days.
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

from clubranking.tournament.club_day import (
    ClubDay,
    TransitionResult,
    current_round_matches,
    draw_label,
    format_result,
    name_by_id,
)
from clubranking.tournament.season import Archive, aggregate, season_key
from clubranking.tournament.standings_calculator import (
    StandingsCalculator,
    compute_standings,
)

__all__ = [
    "ClubDay",
    "TransitionResult",
    "current_round_matches",
    "draw_label",
    "format_result",
    "name_by_id",
    "Archive",
    "aggregate",
    "season_key",
    "StandingsCalculator",
    "compute_standings",
]
