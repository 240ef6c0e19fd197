"""
Interactive menu driver.

Owns the session state explicitly (the bid store, the file to load and
the configuration) and runs the text menu over the given streams:

    1. Load Bids
    2. Display All Bids
    3. Selection Sort All Bids
    4. Quick Sort All Bids
    9. Exit

Each command blocks until it finishes before the next choice is read.

prompt_bid builds a single Bid from console input. No menu option calls it;
it is driver API for callers that add bids by hand.
"""

import sys
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, TextIO

import structlog

from .config.defaults import DefaultConfig, get_default_config
from .data.loader import load_bids
from .data.models import Bid, BidStore
from .data.parsers import str_to_double
from .logging.config import configure_logging, log_sort_run
from .sorting.quick import quick_sort
from .sorting.selection import selection_sort
from .utils.timing import ElapsedTime, Stopwatch

logger = structlog.get_logger(__name__)

MENU_TEXT = (
    "Menu:\n"
    "  1. Load Bids\n"
    "  2. Display All Bids\n"
    "  3. Selection Sort All Bids\n"
    "  4. Quick Sort All Bids\n"
    "  9. Exit\n"
    "Enter choice: "
)


class MenuChoice(Enum):
    """Menu options by the number the user types."""
    LOAD = 1
    DISPLAY = 2
    SELECTION_SORT = 3
    QUICK_SORT = 4
    EXIT = 9


class MenuAction(Enum):
    """What the loop does after a choice is handled."""
    CONTINUE = "continue"
    EXIT = "exit"


@dataclass
class MenuSession:
    """State carried between menu iterations."""
    csv_path: str
    config: DefaultConfig = field(default_factory=get_default_config)
    store: BidStore = field(default_factory=BidStore)


def print_elapsed(elapsed: ElapsedTime, out: TextIO) -> None:
    """Report elapsed time in clock ticks and seconds."""
    print(f"time: {elapsed.ticks} clock ticks", file=out)
    print(f"time: {elapsed.seconds:g} seconds", file=out)


def parse_choice(line: str) -> Optional[MenuChoice]:
    """Map a line of input to a menu choice, None if it is not one."""
    try:
        return MenuChoice(int(line.strip()))
    except ValueError:
        return None


def handle_choice(session: MenuSession, choice: Optional[MenuChoice], out: TextIO) -> MenuAction:
    """
    Run one menu command against the session.

    Args:
        session: Current session state, mutated in place
        choice: Parsed menu choice, None for anything unrecognized
        out: Stream for user-facing output

    Returns:
        Whether the menu loop should continue or exit
    """
    if choice is MenuChoice.LOAD:
        print(f"Loading CSV file {session.csv_path}", file=out)
        with Stopwatch() as watch:
            result = load_bids(
                session.csv_path,
                session.config.csv,
                session.config.columns,
                session.config.amount,
            )
            session.store.replace(result.bids)
        print(f"{len(session.store)} bids read", file=out)
        print_elapsed(watch.elapsed, out)

    elif choice is MenuChoice.DISPLAY:
        for bid in session.store:
            print(bid.display(), file=out)
        print(file=out)

    elif choice is MenuChoice.SELECTION_SORT:
        with Stopwatch() as watch:
            swaps = selection_sort(session.store)
        log_sort_run(logger, "selection", len(session.store), watch.elapsed, swaps=swaps)
        print(f"{len(session.store)} bids sorted", file=out)
        print_elapsed(watch.elapsed, out)

    elif choice is MenuChoice.QUICK_SORT:
        with Stopwatch() as watch:
            partitions = quick_sort(session.store)
        log_sort_run(logger, "quick", len(session.store), watch.elapsed, partitions=partitions)
        print(f"{len(session.store)} bids sorted", file=out)
        print_elapsed(watch.elapsed, out)

    elif choice is MenuChoice.EXIT:
        print("Good bye.", file=out)
        return MenuAction.EXIT

    else:
        print("Not a valid option. Please try again.", file=out)

    return MenuAction.CONTINUE


def run_menu(
    session: MenuSession,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None
) -> int:
    """
    Run the menu loop until the user exits or input ends.

    Returns:
        Process exit code (0 on exit or end of input)
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    # Keep log events off the menu stream when not started through main()
    if not structlog.is_configured():
        configure_logging()

    while True:
        stdout.write(MENU_TEXT)
        stdout.flush()

        line = stdin.readline()
        if not line:
            # End of input counts as a request to exit
            print(file=stdout)
            logger.info("Input stream closed, exiting menu")
            handle_choice(session, MenuChoice.EXIT, stdout)
            return 0

        action = handle_choice(session, parse_choice(line), stdout)
        if action is MenuAction.EXIT:
            return 0


def prompt_bid(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> Bid:
    """
    Prompt the user for a bid's fields.

    The fund is a single word; anything after the first word is dropped.
    The amount is parsed with the currency symbol removed.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout

    def ask(prompt: str) -> str:
        stdout.write(prompt)
        stdout.flush()
        return stdin.readline().rstrip("\r\n")

    bid_id = ask("Enter Id: ")
    title = ask("Enter title: ")
    fund_words = ask("Enter fund: ").split()
    amount = str_to_double(ask("Enter amount: "), "$")

    return Bid(
        bid_id=bid_id,
        title=title,
        fund=fund_words[0] if fund_words else "",
        amount=amount,
    )
