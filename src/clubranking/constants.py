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

# --- Constants ---
APP_NAME = "Club Ranking"
SAVE_FILE_EXTENSION = ".json"

# Storage file names inside the data directory
PLAYERS_FILE = "players" + SAVE_FILE_EXTENSION
SESSION_FILE = "session" + SAVE_FILE_EXTENSION
COMPLETED_FILE = "completed" + SAVE_FILE_EXTENSION

DATA_DIR_ENV = "CLUBRANKING_DATA_DIR"
DEFAULT_DATA_DIR = "~/.clubranking"

# Match outcome points
WIN_POINTS = 2
LOSS_POINTS = 0

# A bye counts as a win without sets
BYE_POINTS = 2
BYE_SETS_WON = 0
BYE_SETS_LOST = 0

# Sets per match: every match is decided 3-0, 2-1, 1-2 or 0-3
SETS_PER_MATCH = 3
VALID_SET_SCORES = (0, 1, 2, 3)

# Result values offered by the front-end ("" clears a result)
RESULT_OPTIONS = ["", "3-0", "2-1", "1-2", "0-3"]

# TTR / Elo parameters
DEFAULT_RATING = 1000
TTR_K = 16
TTR_SCALE = 150

# Session layout
ROUNDS_PER_SESSION = 6
MIN_PARTICIPANTS = 2

# Upper bound for shuffle attempts when searching for rematch-free pairings
PAIRING_ATTEMPTS = 200

# Season aggregation key prefix for rows archived without an id
NAME_KEY_PREFIX = "name:"
UNKNOWN_NAME = "—"
