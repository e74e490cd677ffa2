"""Example script demonstrating a club day with the Club Ranking engine.

This script shows how to use the engine programmatically and how the same
day looks through the command-line interface.
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

import random
import sys
from pathlib import Path

# Add src to path for development
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from clubranking.cli.render import (
    render_pairings,
    render_rating_changes,
    render_season,
    render_standings,
)
from clubranking.controllers.player import Roster
from clubranking.tournament import Archive, ClubDay, current_round_matches


def example_programmatic_day():
    """Example: Running a whole day programmatically."""

    print("\n" + "=" * 70)
    print("EXAMPLE 1: Programmatic Club Day")
    print("=" * 70 + "\n")

    roster = Roster()
    for name in ["Anna", "Ben", "Cleo", "Dirk", "Eva"]:
        roster.add(name)
    archive = Archive()

    # A seeded random source makes the draw reproducible
    rng = random.Random(2025)
    engine = ClubDay(rng=rng)

    session = engine.start(roster.active_players()).session
    while engine.can_draw(session):
        session = engine.draw_next_round(session).session
        for match in current_round_matches(session):
            if match.is_bye:
                continue
            result = rng.choice(["3-0", "2-1", "1-2", "0-3"])
            session = engine.record_result(session, match.id, result).session
        print(render_pairings(session))
        print()

    finished = engine.finish(session)
    roster.apply_rating_deltas(finished.rating_deltas)
    archive.append(finished.snapshot)

    print(render_standings(list(finished.snapshot.standings)))
    print()
    print(render_rating_changes(session, finished.rating_deltas))
    print()
    print(render_season(archive.standings()))


def example_cli_usage():
    """Example: The same day through the CLI."""

    print("\n" + "=" * 70)
    print("EXAMPLE 2: Command-Line Usage")
    print("=" * 70 + "\n")

    print("1. Prepare the roster:")
    print("   clubranking add Anna")
    print("   clubranking add Ben")
    print("   clubranking toggle Ben        # absent today")
    print("   clubranking all-present")

    print("\n2. Run the day:")
    print("   clubranking start")
    print("   clubranking draw")
    print("   clubranking result 1 2-1")
    print("   clubranking standings")
    print("   clubranking finish")

    print("\n3. Season:")
    print("   clubranking season")
    print("   clubranking reset-season --yes")

    print("\n4. Interactive mode:")
    print("   clubranking")
    print("   clubranking --data-dir ~/club -i")

    print("\n" + "=" * 70 + "\n")


def main():
    """Run all examples."""
    example_programmatic_day()
    example_cli_usage()


if __name__ == "__main__":
    main()
