"""Shared helpers for Club Ranking: logging, ids, timestamps and name ordering."""

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

import logging
import unicodedata
import uuid
from datetime import datetime, timezone
from typing import Any, Optional, Tuple

from dateutil.parser import isoparse

LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def setup_logger(name: str) -> logging.Logger:
    """Return the module logger for ``name``.

    Handlers are configured once by the application entry point
    (see :func:`configure_logging`); library modules only ask for a logger.
    """
    return logging.getLogger(name)


def configure_logging(level: int = logging.WARNING) -> None:
    """Configure the root logger for console use."""
    logging.basicConfig(level=level, format=LOG_FORMAT)
    logging.getLogger().setLevel(level)


logger = setup_logger(__name__)


def generate_id() -> str:
    """Generate an opaque unique identifier (UUID4 hex)."""
    return uuid.uuid4().hex


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(timezone.utc)


def format_timestamp(value: Optional[datetime]) -> Optional[str]:
    """Serialize a datetime to ISO-8601, keeping None as None."""
    return value.isoformat() if value is not None else None


def parse_timestamp(value: Any) -> Optional[datetime]:
    """Parse an ISO-8601 timestamp written by :func:`format_timestamp`.

    Returns None for missing or unreadable values instead of raising, since
    timestamps are informational only.
    """
    if value is None or value == "":
        return None
    if isinstance(value, datetime):
        return value
    try:
        return isoparse(str(value))
    except (ValueError, OverflowError):
        logger.warning("Ignoring unreadable timestamp: %r", value)
        return None


def name_sort_key(name: str) -> Tuple[str, str]:
    """Sort key approximating locale-aware (German) collation.

    Accents are folded onto their base letter and case is ignored, so
    "Özil" sorts with "O" and "anna" next to "Anna". The raw name is the
    final key so distinct names never compare equal.
    """
    decomposed = unicodedata.normalize("NFKD", name)
    base = "".join(ch for ch in decomposed if not unicodedata.combining(ch))
    return base.casefold(), name
