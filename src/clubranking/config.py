"""Application configuration for Club Ranking."""

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
import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from clubranking.constants import DATA_DIR_ENV, DEFAULT_DATA_DIR, PAIRING_ATTEMPTS
from clubranking.exceptions import InvalidConfigurationException

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


@dataclass
class ClubConfig:
    """Club Ranking configuration settings.

    Attributes
    ----------
    data_dir : str
        Directory holding the roster, session and archive files.
    seed : int or None
        Seed for the pairing draw. None draws differently every time.
    log_level : str
        Root log level name.
    pairing_attempts : int
        Shuffles tried per round when looking for a rematch-free draw.
    """

    data_dir: str = DEFAULT_DATA_DIR
    seed: Optional[int] = None
    log_level: str = "WARNING"
    pairing_attempts: int = PAIRING_ATTEMPTS

    def __post_init__(self) -> None:
        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise InvalidConfigurationException(
                f"log_level must be one of {', '.join(LOG_LEVELS)}: {self.log_level}"
            )
        if int(self.pairing_attempts) < 1:
            raise InvalidConfigurationException(
                f"pairing_attempts must be positive: {self.pairing_attempts}"
            )

    @property
    def data_path(self) -> Path:
        return Path(self.data_dir).expanduser()

    @property
    def level(self) -> int:
        return getattr(logging, self.log_level)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "data_dir": self.data_dir,
            "seed": self.seed,
            "log_level": self.log_level,
            "pairing_attempts": self.pairing_attempts,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ClubConfig":
        """Deserialize configuration from dictionary."""
        seed = data.get("seed")
        return cls(
            data_dir=data.get("data_dir", DEFAULT_DATA_DIR),
            seed=int(seed) if seed is not None else None,
            log_level=data.get("log_level", "WARNING"),
            pairing_attempts=int(data.get("pairing_attempts", PAIRING_ATTEMPTS)),
        )


def load_config(path: Optional[Union[str, Path]] = None) -> ClubConfig:
    """Load configuration from a JSON file and the environment.

    The ``CLUBRANKING_DATA_DIR`` environment variable overrides the data
    directory of the file.

    Args:
        path: JSON configuration file; defaults apply when None

    Raises:
        InvalidConfigurationException: If the file is unreadable or invalid
    """
    data: Dict[str, Any] = {}
    if path is not None:
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidConfigurationException(
                f"Cannot read configuration {path}: {e}"
            ) from e
        if not isinstance(data, dict):
            raise InvalidConfigurationException(
                f"Configuration {path} must contain a JSON object"
            )

    env_dir = os.environ.get(DATA_DIR_ENV)
    if env_dir:
        data["data_dir"] = env_dir

    try:
        return ClubConfig.from_dict(data)
    except (TypeError, ValueError) as e:
        raise InvalidConfigurationException(f"Invalid configuration: {e}") from e
