"""JSON file storage for the roster, the running session and the archive.

Each is kept in its own file inside one data directory. Loading never
fails on bad content: unreadable or malformed files load as the empty
default and a warning is logged. Saving errors are raised.
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

import json
from pathlib import Path
from typing import Any, Optional, Union

from clubranking.constants import COMPLETED_FILE, PLAYERS_FILE, SESSION_FILE
from clubranking.controllers.player import Roster
from clubranking.exceptions import FileSaveException
from clubranking.models.tournament import DaySnapshot, Session
from clubranking.tournament.season import Archive
from clubranking.utils import setup_logger

logger = setup_logger(__name__)

_MISSING = object()


class JsonStore:
    """Loads and saves club data as JSON files in ``data_dir``."""

    def __init__(self, data_dir: Union[str, Path]):
        self.data_dir = Path(data_dir).expanduser()

    @property
    def players_path(self) -> Path:
        return self.data_dir / PLAYERS_FILE

    @property
    def session_path(self) -> Path:
        return self.data_dir / SESSION_FILE

    @property
    def completed_path(self) -> Path:
        return self.data_dir / COMPLETED_FILE

    # ========== Raw file access ==========

    def _read(self, path: Path) -> Any:
        """Parsed JSON content of ``path``, ``_MISSING`` when absent or unreadable."""
        if not path.exists():
            return _MISSING
        try:
            with open(path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, UnicodeDecodeError, json.JSONDecodeError):
            logger.exception("Error loading %s:", path)
            return _MISSING

    def _write(self, path: Path, data: Any) -> None:
        """Write ``data`` as JSON, replacing the file in one step.

        Raises:
            FileSaveException: If the file cannot be written
        """
        tmp_path = path.with_suffix(path.suffix + ".tmp")
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
            with open(tmp_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=4, ensure_ascii=False)
            tmp_path.replace(path)
        except OSError as e:
            logger.exception("Error saving %s:", path)
            raise FileSaveException(f"Could not save {path}: {e}") from e

    # ========== Roster ==========

    def load_roster(self) -> Roster:
        """Load the roster; anything but a JSON list loads as empty.

        Player ratings that are missing or not finite are reset to the
        default rating.
        """
        data = self._read(self.players_path)
        if data is _MISSING:
            return Roster()
        if not isinstance(data, list):
            logger.warning("%s does not hold a list, starting empty", self.players_path)
            return Roster()
        return Roster.from_list(data)

    def save_roster(self, roster: Roster) -> None:
        self._write(self.players_path, roster.to_list())

    # ========== Session ==========

    def load_session(self) -> Optional[Session]:
        """Load the running session, None when there is none or it is unreadable."""
        data = self._read(self.session_path)
        if data is _MISSING or data is None:
            return None
        if not isinstance(data, dict):
            logger.warning("%s does not hold a session, ignoring it", self.session_path)
            return None
        try:
            return Session.from_dict(data)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            logger.warning("Ignoring unreadable session %s: %s", self.session_path, e)
            return None

    def save_session(self, session: Optional[Session]) -> None:
        """Save the session; None removes the session file."""
        if session is None:
            try:
                self.session_path.unlink(missing_ok=True)
            except OSError as e:
                logger.exception("Error removing %s:", self.session_path)
                raise FileSaveException(
                    f"Could not remove {self.session_path}: {e}"
                ) from e
            return
        self._write(self.session_path, session.to_dict())

    # ========== Archive ==========

    def load_archive(self) -> Archive:
        """Load the archive of finished days; anything but a list loads as empty."""
        data = self._read(self.completed_path)
        if data is _MISSING:
            return Archive()
        if not isinstance(data, list):
            logger.warning(
                "%s does not hold a list, starting empty", self.completed_path
            )
            return Archive()

        snapshots = []
        for entry in data:
            if not isinstance(entry, dict):
                logger.warning("Skipping malformed archive entry: %r", entry)
                continue
            try:
                snapshots.append(DaySnapshot.from_dict(entry))
            except (AttributeError, TypeError, ValueError) as e:
                logger.warning("Skipping unreadable archive entry: %s", e)
        return Archive(snapshots)

    def save_archive(self, archive: Archive) -> None:
        self._write(self.completed_path, archive.to_list())

