"""
Command-line interface (text-based play)

    mastermind [-c COLORS] [-g GUESSES] [--holes HOLES] [--no-duplicate] [--seed SEED]

Colors are typed as digits, 1 being the first color of the legend, e.g. `1234`.
Type `q` to quit. Defaults come from MASTERMIND_* environment variables / .env.

Exit codes: 0 when the game finishes (won, lost or quit), 2 for bad parameters.
"""

import argparse
import logging
from typing import Callable, List, Optional, Sequence

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.text import Text

from .config import LOG_LEVELS, SettingsError, load_settings, validate_config
from .errors import ColorOutOfRange, ConfigError, GuessError
from .logger import setup_logging
from .random_source import make_random_source
from .schemas import GameView, build_game_view
from .session import GameSession
from .types import GameStatus

logger = logging.getLogger(__name__)

CIRCLE = "●"
DOT = "∙"

# Terminal palette; color i is typed as key i + 1
CODE_COLORS = ("blue", "red", "green", "yellow", "magenta", "white", "cyan")
EXACT_COLOR = "red"
PARTIAL_COLOR = "white"

QUIT_WORDS = {"q", "quit", "exit"}

InputFn = Callable[[str], str]


def build_parser(colors: int, holes: int, guesses: int, no_duplicate: bool, log_level: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="mastermind", description="Crack the hidden color code.")
    parser.add_argument("-c", "--colors", type=int, default=colors, help=f"Number of colors (default: {colors})")
    parser.add_argument("-g", "--guesses", type=int, default=guesses, help=f"Maximum number of guesses (default: {guesses})")
    parser.add_argument("--holes", type=int, default=holes, help=f"Number of holes per row (default: {holes})")
    parser.add_argument(
        "--no-duplicate",
        action="store_true",
        default=no_duplicate,
        help="Forbid colors to repeat in the secret",
    )
    parser.add_argument("--seed", type=int, default=None, help="Seed the secret for a reproducible game")
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=log_level,
        help=f"Log level for stderr (default: {log_level})",
    )
    return parser


def parse_guess(text: str) -> List[int]:
    """
    Turn typed keys into colors: '1' -> 0, '2' -> 1, ...
    Spaces and commas are ignored. Range against color_count is the engine's job.
    """
    colors = []
    for key in text:
        if key in " ,":
            continue
        if not key.isdigit() or key == "0":
            raise ColorOutOfRange(f"{key!r} is not a color key. Use the digits shown in the legend.")
        colors.append(int(key) - 1)
    return colors


def _peg_row(code: Optional[Sequence[int]], holes: int) -> Text:
    row = Text()
    for index in range(holes):
        if index > 0:
            row.append(" ")
        if code is not None and index < len(code):
            row.append(CIRCLE, style=CODE_COLORS[code[index]])
        else:
            row.append(DOT)
    return row


def _hint_row(exact: int, partial: int, holes: int) -> Text:
    hint = Text()
    hint.append(CIRCLE * exact, style=EXACT_COLOR)
    hint.append(CIRCLE * partial, style=PARTIAL_COLOR)
    hint.append(DOT * max(0, holes - exact - partial))
    return hint


def render_legend(console: Console, color_count: int) -> None:
    keys = Text(" ".join(str(i + 1) for i in range(color_count)))
    pegs = Text()
    for i in range(color_count):
        if i > 0:
            pegs.append(" ")
        pegs.append(CIRCLE, style=CODE_COLORS[i])
    console.print(keys)
    console.print(pegs)


def render_board(console: Console, view: GameView) -> None:
    holes = view.hole_count
    table = Table(box=box.SIMPLE, show_header=True)
    table.add_column("#", justify="right")
    table.add_column("Guess")
    table.add_column("Hint")
    table.add_column("Feedback")

    # view.secret is None until the game ends, so the solution row stays dotted
    table.add_row("", _peg_row(view.secret, holes), Text(""), Text(""))

    for number in range(view.max_guesses, 0, -1):
        if number <= len(view.history):
            entry = view.history[number - 1]
            table.add_row(
                str(number),
                _peg_row(entry.guess, holes),
                _hint_row(entry.exact_matches, entry.color_matches, holes),
                Text(entry.message),
            )
        else:
            table.add_row(str(number), _peg_row(None, holes), _hint_row(0, 0, holes), Text(""))

    console.print(table)


def play_game(session: GameSession, console: Console, input_fn: InputFn) -> Optional[GameStatus]:
    """Run one game to the end. Returns the final status, or None if the player quit."""
    state = session.start()

    console.print(Text.assemble((CIRCLE, EXACT_COLOR), " Correct color, correct position"))
    console.print(Text.assemble((CIRCLE, PARTIAL_COLOR), " Correct color, wrong position"))
    render_legend(console, state.config.color_count)
    render_board(console, build_game_view(state))

    while not session.status.is_over:
        console.print(f"\nAttempts left: {build_game_view(session.state).attempts_left}")
        try:
            user_input = input_fn(f"Enter {session.config.hole_count} color keys: ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            console.print("\nExiting game.")
            return None

        if user_input in QUIT_WORDS:
            console.print("Exiting game.")
            return None

        try:
            feedback = session.guess(parse_guess(user_input))
        except GuessError as err:
            console.print(f"[yellow]Invalid guess:[/] {escape(str(err))}")
            continue

        logger.debug("feedback %s", feedback)
        render_board(console, build_game_view(session.state))

    view = build_game_view(session.state)
    if view.status is GameStatus.WON:
        console.print("\n[bold green]You won![/]")
    else:
        console.print("\n[bold red]You lost[/]")
    console.print(Text.assemble("The secret code was: ", _peg_row(view.secret, view.hole_count)))
    return view.status


def _print_stats(console: Console, session: GameSession) -> None:
    stats = session.stats.to_out()
    console.print(
        f"Games: {stats.games_started}  Won: {stats.games_won}  Lost: {stats.games_lost}  "
        f"Best streak: {stats.best_streak}"
    )


def main(argv: Optional[Sequence[str]] = None, input_fn: Optional[InputFn] = None) -> int:
    console = Console()
    err_console = Console(stderr=True)

    try:
        settings = load_settings()
    except SettingsError as err:
        err_console.print(f"error: {escape(str(err))}", highlight=False, soft_wrap=True)
        return 2

    parser = build_parser(settings.colors, settings.holes, settings.guesses, settings.no_duplicate, settings.log_level)
    args = parser.parse_args(argv)

    if args.colors > len(CODE_COLORS):
        parser.error(f"--colors must be <= {len(CODE_COLORS)}")

    setup_logging(args.log_level)

    try:
        config = validate_config(args.colors, args.holes, args.guesses, not args.no_duplicate)
    except ConfigError as err:
        err_console.print(f"error: {err.kind}: {escape(str(err))}", highlight=False, soft_wrap=True)
        return 2

    if input_fn is None:
        input_fn = console.input

    session = GameSession(config, make_random_source(args.seed))
    console.print("=== Mastermind ===")

    while True:
        result = play_game(session, console, input_fn)
        if result is None:
            break
        try:
            again = input_fn("Play again? (y/N) ").strip().lower()
        except (EOFError, KeyboardInterrupt):
            break
        if again not in ("y", "yes"):
            break

    _print_stats(console, session)
    console.print("=== Game Over ===")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
