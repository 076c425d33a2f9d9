"""Console front end: hand check, game menu and the three games."""

import argparse
import sys
import time
from typing import Iterator, Optional, TextIO

from reflexgames.countdown import NO_WINNER_MESSAGE as COUNTDOWN_NO_WINNER
from reflexgames.countdown import countdown_lines, countdown_outcome, difficulty_for
from reflexgames.greed_island import GreedIsland, Layout
from reflexgames.reaction import (
    Winner,
    echo_to_distance_cm,
    format_result,
    hand_detected,
    random_between,
    reaction_outcome,
)
from reflexgames.utils import bin_to_ascii

__all__ = ["welcome_message", "menu_message", "main"]

GAME_REACTION = "1"
GAME_COUNTDOWN = "2"
GAME_GREED_ISLAND = "3"
RESET_KEY = "X"

_REACTION_MAX_WAIT_S = 5
_COUNTDOWN_MAX_BLANK = 3
_COUNTDOWN_PAUSES = 10

_DIFFICULTY_HELP = (
    "\r\n\rPlease choose the difficulty level \r\n\r"
    "You have 2 seconds to do so \r\n\r"
    "\t Easy (countdown 2s) \r\n\r"
    "Potentiometer value [0;1330]\r\n\r"
    "\t Normal (countdown 1s) \r\n\r"
    "Potentiometer value [1330;2600]\r\n\r"
    "\t Hard (countdown 0.5s) \r\n\r"
    "Potentiometer value [2600;4000]\r\n\r"
)


def welcome_message() -> str:
    """Greeting asking the player to bring a hand to the distance sensor."""
    return "\r\n\r Welcome, pass Your hand alongside the Ultrasonic module\r\n\r"


def menu_message() -> str:
    """Menu listing the three games."""
    return (
        "\n\r Welcome to the game of reflexes, select: game 1 REACTION TIME (press 1), "
        "game 2 COUNTDOWN (press 2), game 3 Greed-Island (press 3) \r\n\r"
    )


class _Reset(Exception):
    """The reset key was received."""


def _read_lines(stream: TextIO) -> Iterator[str]:
    for raw in stream:
        line = raw.strip()
        if line == RESET_KEY:
            raise _Reset()
        yield line


def _parse_int(text: str, what: str) -> int:
    try:
        return int(text)
    except ValueError:
        raise ValueError(f"{what} must be a whole number, got {text!r}") from None


def _read_captures(lines: Iterator[str]) -> Optional[tuple]:
    line = next(lines, None)
    if line is None:
        return None
    parts = line.split()
    if len(parts) != 2:
        raise ValueError(f"expected two capture times, got {line!r}")
    return _parse_int(parts[0], "capture time"), _parse_int(parts[1], "capture time")


def _reaction_game(lines: Iterator[str], out: TextIO, seed: int) -> bool:
    out.write("\r\n\r game 1 \r\n\r")
    wait_s = random_between(_REACTION_MAX_WAIT_S, seed)
    start_time = wait_s * 1000
    captures = _read_captures(lines)
    if captures is None:
        return False
    out.write(format_result(reaction_outcome(captures[0], captures[1], start_time)))
    return True


def _countdown_game(lines: Iterator[str], out: TextIO, seed: int) -> bool:
    out.write("\r\n\r game 2 \r\n\r")
    out.write(_DIFFICULTY_HELP)
    line = next(lines, None)
    if line is None:
        return False
    reading = _parse_int(line, "potentiometer value")
    difficulty = difficulty_for(reading)
    out.write("potentiometer value :" + bin_to_ascii(reading) + "\n\r\r")
    out.write(difficulty.message)

    blank_from = random_between(_COUNTDOWN_MAX_BLANK, seed)
    out.write("".join(countdown_lines(blank_from)))
    present_time = _COUNTDOWN_PAUSES * difficulty.delay_ms

    captures = _read_captures(lines)
    if captures is None:
        return False
    outcome = countdown_outcome(captures[0], captures[1], present_time)
    if outcome.winner is Winner.NOBODY:
        out.write(COUNTDOWN_NO_WINNER)
    else:
        out.write(format_result(outcome))
    return True


def _greed_island(lines: Iterator[str], out: TextIO) -> bool:
    out.write("\r\n\r game 3 \r\n\r")
    keys = (_parse_int(line, "key") for line in lines)
    for text in GreedIsland(Layout.BOARD).play(keys):
        out.write(text)
    return True


def _session(lines: Iterator[str], out: TextIO, seed: int) -> None:
    rounds = 0
    while True:
        out.write(welcome_message())
        line = next(lines, None)
        if line is None:
            return
        distance = echo_to_distance_cm(_parse_int(line, "echo duration"))
        out.write(f"\r\n\r Distance measured {distance:f} cm \r\n\r")
        if not hand_detected(distance):
            continue

        out.write(menu_message())
        choice = next(lines, None)
        if choice is None:
            return
        round_seed = seed + rounds
        rounds += 1
        if choice == GAME_REACTION:
            going = _reaction_game(lines, out, round_seed)
        elif choice == GAME_COUNTDOWN:
            going = _countdown_game(lines, out, round_seed)
        elif choice == GAME_GREED_ISLAND:
            going = _greed_island(lines, out)
        else:
            going = True
        if not going:
            return


def main(argv=None) -> int:
    """Run the games on standard input and output; returns the exit status.

    Each round reads the echo duration of the distance sensor, then, when a
    hand is close enough, the game number. The reaction and countdown games
    read the two players' capture times on one line; the countdown game
    first reads the potentiometer value. Greed Island reads one key per line.
    A line holding only ``X`` ends the session.
    """
    parser = argparse.ArgumentParser(prog="reflexgames", description="Two-player reflex games.")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random delays")
    args = parser.parse_args(argv)
    seed = args.seed if args.seed is not None else time.monotonic_ns() & 0xFFFF

    try:
        _session(_read_lines(sys.stdin), sys.stdout, seed)
    except _Reset:
        return 0
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    return 0