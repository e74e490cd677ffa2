"""Command-line interface for Club Ranking.

Runs single commands (``clubranking draw``) or, without arguments, an
interactive shell with autocomplete.
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

import argparse
import shlex
import sys
from typing import List, Optional, Sequence

from prompt_toolkit import PromptSession
from prompt_toolkit.completion import NestedCompleter, WordCompleter
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style

from clubranking.cli import commands
from clubranking.cli.render import Colors
from clubranking.constants import APP_NAME, RESULT_OPTIONS
from clubranking.exceptions import ClubRankingException
from clubranking.utils import configure_logging, setup_logger

logger = setup_logger(__name__)

# Command definitions with their options
COMMANDS = {
    "players": {"description": "List the roster", "options": {}},
    "add": {
        "description": "Add a player",
        "options": {"<name>": "Player name"},
    },
    "toggle": {
        "description": "Mark a player present or absent",
        "options": {"<player>": "Player name or id"},
    },
    "remove": {
        "description": "Remove a player from the roster",
        "options": {"<player>": "Player name or id"},
    },
    "all-present": {"description": "Mark every player present", "options": {}},
    "all-absent": {"description": "Mark every player absent", "options": {}},
    "start": {
        "description": "Start today's session with the players present",
        "options": {},
    },
    "draw": {"description": "Draw the next round", "options": {}},
    "pairings": {
        "description": "Show the pairings of a round",
        "options": {"--round": "Round number (default: last drawn)"},
    },
    "result": {
        "description": "Enter a result, e.g. 'result 2 3-0'; no result clears it",
        "options": {
            "<match>": "Match number shown by pairings, or match id",
            "<result>": "One of 3-0, 2-1, 1-2, 0-3",
            "--round": "Round of the match number (default: last drawn)",
        },
    },
    "standings": {"description": "Show today's standings", "options": {}},
    "finish": {
        "description": "Finish the day, archive it and update ratings",
        "options": {},
    },
    "reset-today": {
        "description": "Discard all rounds and results of today",
        "options": {"--yes": "Do not ask for confirmation"},
    },
    "end": {"description": "End the session without archiving", "options": {}},
    "season": {"description": "Show the season standings", "options": {}},
    "reset-season": {
        "description": "Delete all finished days of the season",
        "options": {"--yes": "Do not ask for confirmation"},
    },
    "help": {
        "description": "Show help for specific command",
        "options": {"<command>": "Command name to get help for"},
    },
    "exit": {"description": "Exit the interactive mode", "options": {}},
}


def print_banner():
    """Print the application banner."""
    banner = f"""
{Colors.OKBLUE}{APP_NAME} - table tennis club days{Colors.ENDC}

Type {Colors.BOLD}help{Colors.ENDC} to see all available commands
Type {Colors.BOLD}exit{Colors.ENDC} or {Colors.BOLD}quit{Colors.ENDC} to leave
"""
    print(banner)


def print_commands_list():
    """Print list of all available commands."""
    print(f"\n{Colors.BOLD}Available Commands:{Colors.ENDC}\n")
    for cmd, info in COMMANDS.items():
        print(f"  {Colors.OKGREEN}{cmd:15}{Colors.ENDC} - {info['description']}")
    print()


def print_command_help(command: str):
    """Print detailed help for a specific command."""
    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print_commands_list()
        return

    cmd_info = COMMANDS[command]
    print(f"\n{Colors.BOLD}{Colors.OKBLUE}Command: {command}{Colors.ENDC}")
    print(f"{Colors.BOLD}Description:{Colors.ENDC} {cmd_info['description']}\n")

    if cmd_info["options"]:
        print(f"{Colors.BOLD}Options:{Colors.ENDC}")
        for option, description in cmd_info["options"].items():
            print(f"  {Colors.OKCYAN}{option:20}{Colors.ENDC} {description}")
    print()


def create_completer() -> NestedCompleter:
    """Create autocomplete completer for interactive mode.

    Commands complete with and without a leading "/".
    """
    completions = {}
    for cmd, info in COMMANDS.items():
        if cmd == "result":
            options_completer = WordCompleter(
                [r for r in RESULT_OPTIONS if r] + ["--round"]
            )
        elif cmd == "help":
            options_completer = WordCompleter(list(COMMANDS.keys()))
        else:
            flags = [o for o in info["options"] if o.startswith("--")]
            options_completer = WordCompleter(flags) if flags else None
        completions[cmd] = options_completer
        completions[f"/{cmd}"] = options_completer

    completions["/help"] = WordCompleter(list(COMMANDS.keys()))
    completions["/list"] = None

    return NestedCompleter.from_nested_dict(completions)


def create_main_parser() -> argparse.ArgumentParser:
    """Create main argument parser."""
    parser = argparse.ArgumentParser(
        prog="clubranking",
        description="Run table tennis club days with random pairings and TTR ratings",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Interactive mode
  clubranking

  # Prepare the roster
  clubranking add Anna Lena
  clubranking all-present

  # Run a day
  clubranking start
  clubranking draw
  clubranking result 1 2-1
  clubranking finish
        """,
    )

    parser.add_argument(
        "--interactive", "-i", action="store_true", help="Start in interactive mode"
    )
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--data-dir", help="Directory holding the data files")
    parser.add_argument("--seed", type=int, help="Random seed for the draw")
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose (debug) logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Roster
    sub = subparsers.add_parser("players", help="List the roster")
    sub.set_defaults(func=commands.run_players_command)

    sub = subparsers.add_parser("add", help="Add a player")
    sub.add_argument("name", nargs="+")
    sub.set_defaults(func=commands.run_add_command)

    sub = subparsers.add_parser("toggle", help="Mark a player present or absent")
    sub.add_argument("player", nargs="+")
    sub.set_defaults(func=commands.run_toggle_command)

    sub = subparsers.add_parser("remove", help="Remove a player")
    sub.add_argument("player", nargs="+")
    sub.set_defaults(func=commands.run_remove_command)

    sub = subparsers.add_parser("all-present", help="Mark every player present")
    sub.set_defaults(func=commands.run_all_present_command)

    sub = subparsers.add_parser("all-absent", help="Mark every player absent")
    sub.set_defaults(func=commands.run_all_absent_command)

    # Session
    sub = subparsers.add_parser("start", help="Start today's session")
    sub.set_defaults(func=commands.run_start_command)

    sub = subparsers.add_parser("draw", help="Draw the next round")
    sub.set_defaults(func=commands.run_draw_command)

    sub = subparsers.add_parser("pairings", help="Show the pairings of a round")
    sub.add_argument("--round", type=int)
    sub.set_defaults(func=commands.run_pairings_command)

    sub = subparsers.add_parser("result", help="Enter, change or clear a result")
    sub.add_argument("match")
    sub.add_argument("result", nargs="?", default="")
    sub.add_argument("--round", type=int)
    sub.set_defaults(func=commands.run_result_command)

    sub = subparsers.add_parser("standings", help="Show today's standings")
    sub.set_defaults(func=commands.run_standings_command)

    sub = subparsers.add_parser("finish", help="Finish and archive the day")
    sub.set_defaults(func=commands.run_finish_command)

    sub = subparsers.add_parser("reset-today", help="Discard today's rounds")
    sub.add_argument("--yes", "-y", action="store_true")
    sub.set_defaults(func=commands.run_reset_today_command)

    sub = subparsers.add_parser("end", help="End the session without archiving")
    sub.set_defaults(func=commands.run_end_command)

    # Season
    sub = subparsers.add_parser("season", help="Show the season standings")
    sub.set_defaults(func=commands.run_season_command)

    sub = subparsers.add_parser("reset-season", help="Delete all finished days")
    sub.add_argument("--yes", "-y", action="store_true")
    sub.set_defaults(func=commands.run_reset_season_command)

    return parser


def global_options(args: argparse.Namespace) -> List[str]:
    """Command line options to repeat for every interactive command."""
    options = []
    if args.config:
        options += ["--config", args.config]
    if args.data_dir:
        options += ["--data-dir", args.data_dir]
    if args.seed is not None:
        options += ["--seed", str(args.seed)]
    if args.verbose:
        options.append("--verbose")
    return options


def run_command(args: argparse.Namespace) -> int:
    """Execute a parsed subcommand."""
    try:
        config = commands.config_from_args(args)
        configure_logging(config.level)
        return args.func(args)
    except ClubRankingException as e:
        commands.print_error(str(e))
        logger.debug("Command %s failed", args.command, exc_info=True)
        return 1


def handle_interactive_input(
    parser: argparse.ArgumentParser, options: Sequence[str], user_input: str
) -> bool:
    """Run one line typed in interactive mode.

    Returns False when the user asked to leave.
    """
    user_input = user_input.strip()
    if not user_input:
        return True

    if user_input in ["exit", "quit", "q", "/exit"]:
        print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
        return False

    if user_input in ["/help", "help", "?", "/list"]:
        print_commands_list()
        return True

    try:
        parts = shlex.split(user_input)
    except ValueError as e:
        print(f"{Colors.FAIL}Cannot parse input: {e}{Colors.ENDC}")
        return True

    # Strip leading "/" if present (support both "/command" and "command")
    command = parts[0].lstrip("/")

    if command == "help":
        if len(parts) == 1:
            print_commands_list()
        else:
            print_command_help(parts[1].lstrip("/"))
        return True

    if command not in COMMANDS:
        print(f"{Colors.FAIL}Unknown command: {command}{Colors.ENDC}")
        print(f"Type {Colors.BOLD}help{Colors.ENDC} to see available commands")
        return True

    try:
        args = parser.parse_args([*options, command, *parts[1:]])
    except SystemExit:
        # argparse calls sys.exit on error, catch it
        return True
    run_command(args)
    return True


def run_interactive_mode(options: Sequence[str] = ()) -> int:
    """Run in interactive mode with autocomplete."""
    print_banner()

    style = Style.from_dict(
        {
            "prompt": "#00aa00 bold",
        }
    )

    session = PromptSession(
        completer=create_completer(),
        history=InMemoryHistory(),
        style=style,
    )
    parser = create_main_parser()

    while True:
        try:
            user_input = session.prompt("clubranking> ")
            if not handle_interactive_input(parser, options, user_input):
                break
        except KeyboardInterrupt:
            print(f"\n{Colors.WARNING}Use 'exit' or 'quit' to leave{Colors.ENDC}")
        except EOFError:
            print(f"\n{Colors.OKGREEN}Goodbye!{Colors.ENDC}\n")
            break

    return 0


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for the clubranking CLI."""
    parser = create_main_parser()
    args = parser.parse_args(argv)

    if args.interactive or args.command is None:
        return run_interactive_mode(global_options(args))

    return run_command(args)


if __name__ == "__main__":
    sys.exit(main())
