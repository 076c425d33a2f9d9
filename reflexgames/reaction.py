"""Reaction-time game: random start delay, ultrasonic hand check and verdict."""

import random
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from reflexgames.utils import bin_to_ascii

__all__ = [
    "Winner",
    "Outcome",
    "random_between",
    "echo_to_distance_cm",
    "hand_detected",
    "relative_time",
    "reaction_outcome",
    "format_result",
    "NO_WINNER_MESSAGE",
]

NO_WINNER_MESSAGE = "\r\n\rEND of the game no winner no loser\r\n\r"
_LINE_END = "\n\r\r"

# Echo ticks are counted in 2 us units; 5882 us of round trip is 100 cm.
_ECHO_SCALE = 2 * 100
_ECHO_DIVISOR = 5882

HAND_MIN_CM = 1
HAND_MAX_CM = 7


class Winner(Enum):
    """Who won a round."""

    NOBODY = "nobody"
    PLAYER1 = "1"
    PLAYER2 = "2"
    TIE = "tie"


@dataclass(frozen=True)
class Outcome:
    """Verdict of a round with both players' times relative to the reference.

    ``sign`` is ``'+'`` or ``'-'`` when the game reports whether a press came
    after or before the reference, and ``None`` when it does not.
    """

    winner: Winner
    time_player1: int = 0
    time_player2: int = 0
    sign: Optional[str] = None

    @property
    def winning_time(self) -> Optional[int]:
        """Relative time of the winner, or None when there is none."""
        if self.winner is Winner.PLAYER1:
            return self.time_player1
        if self.winner is Winner.PLAYER2:
            return self.time_player2
        return None


def random_between(upper_boundary: int, seed: int) -> int:
    """Return a number from 1 to ``upper_boundary`` drawn from a seeded generator."""
    if upper_boundary < 1:
        raise ValueError(f"upper boundary must be at least 1, got {upper_boundary}")
    return random.Random(seed).randrange(upper_boundary) + 1


def echo_to_distance_cm(echo_ticks: int) -> float:
    """Convert an echo pulse length in timer ticks to a distance in centimetres.

    The division is integral, so the result is always a whole number.
    """
    if echo_ticks < 0:
        raise ValueError(f"echo duration cannot be negative, got {echo_ticks}")
    return float((echo_ticks * _ECHO_SCALE) // _ECHO_DIVISOR)


def hand_detected(distance: float) -> bool:
    """True when a hand is close enough to the sensor to start the games."""
    return HAND_MIN_CM <= distance <= HAND_MAX_CM


def relative_time(pressed_at: int, reference: int) -> int:
    """Distance in time between a press and the reference moment."""
    if pressed_at > reference:
        return pressed_at - reference
    return reference - pressed_at


def reaction_outcome(time_player1: int, time_player2: int, start_time: int) -> Outcome:
    """Decide the reaction game from the captured press times.

    A capture of zero means the player did not press. The player whose press
    is closest to ``start_time`` wins; a lone presser wins outright.
    """
    pressed1 = bool(time_player1)
    pressed2 = bool(time_player2)
    if not (pressed1 or pressed2):
        return Outcome(Winner.NOBODY)

    t1 = relative_time(time_player1, start_time) if pressed1 else 0
    t2 = relative_time(time_player2, start_time) if pressed2 else 0

    if (t1 > t2 and pressed2) or (t2 > t1 and not pressed1):
        winner = Winner.PLAYER2
    elif (t2 > t1 and pressed1) or (t1 > t2 and not pressed2):
        winner = Winner.PLAYER1
    else:
        winner = Winner.TIE
    return Outcome(winner, t1, t2)


def format_result(outcome: Outcome) -> str:
    """Text sent over the serial line to announce an outcome."""
    if outcome.winner is Winner.NOBODY:
        return NO_WINNER_MESSAGE
    time = outcome.winning_time
    if time is None:
        return ""
    return f"{outcome.winner.value} {outcome.sign or ''}{bin_to_ascii(time)}{_LINE_END}"