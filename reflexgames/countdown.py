"""Countdown game: difficulty from the potentiometer, countdown text, verdict and melody."""

from enum import Enum
from typing import List, Optional, Tuple

from reflexgames.reaction import Outcome, Winner, relative_time

__all__ = [
    "Difficulty",
    "difficulty_for",
    "countdown_outcome",
    "countdown_lines",
    "melody_for",
    "MELODY_BEFORE",
    "MELODY_AFTER",
    "NOTE_DURATION_TICKS",
    "NO_WINNER_MESSAGE",
    "ADC_MAX",
]

NO_WINNER_MESSAGE = "END of the game no winner no loser\r\n\r"

ADC_MAX = 4095
_NORMAL_FROM = 1330
_HARD_FROM = 2600

_LINE_END = "\n\r\r"
_COUNTDOWN_START = 10

# Toggle periods of the tone timer, one per note.
MELODY_BEFORE: Tuple[int, ...] = (4000, 2000, 1000)
MELODY_AFTER: Tuple[int, ...] = (1000, 1000, 2000)
NOTE_DURATION_TICKS = 2000


class Difficulty(Enum):
    """Difficulty level; the value is the pause between countdown steps in ms."""

    EASY = 2000
    NORMAL = 1000
    HARD = 500

    @property
    def delay_ms(self) -> int:
        """Pause between two countdown steps, in milliseconds."""
        return self.value

    @property
    def message(self) -> str:
        """Text announcing the chosen level."""
        name = {"EASY": "easy", "NORMAL": "normal", "HARD": "Hard"}[self.name]
        return f"You have chosen the {name} level \r\n\r"


def difficulty_for(potentiometer_value: int) -> Difficulty:
    """Pick the difficulty from a 12-bit potentiometer reading."""
    if not 0 <= potentiometer_value <= ADC_MAX:
        raise ValueError(
            f"potentiometer reading must be between 0 and {ADC_MAX}, "
            f"got {potentiometer_value}"
        )
    if potentiometer_value < _NORMAL_FROM:
        return Difficulty.EASY
    if potentiometer_value < _HARD_FROM:
        return Difficulty.NORMAL
    return Difficulty.HARD


def _sign_of(pressed_at: int, reference: int) -> str:
    return "+" if pressed_at > reference else "-"


def countdown_outcome(time_player1: int, time_player2: int, present_time: int) -> Outcome:
    """Decide the countdown game from the captured press times.

    A capture of zero means the player did not press. The press closest to
    the moment the countdown reached zero wins. The sign tells whether the
    press came after (``'+'``) or before (``'-'``) that moment; when both
    players pressed it is the second player's.
    """
    if not (time_player1 or time_player2):
        return Outcome(Winner.NOBODY)

    sign: Optional[str] = None
    t1 = t2 = 0
    if time_player1:
        t1 = relative_time(time_player1, present_time)
        sign = _sign_of(time_player1, present_time)
    if time_player2:
        t2 = relative_time(time_player2, present_time)
        sign = _sign_of(time_player2, present_time)

    if (t1 > t2 and t2) or (t2 > t1 and not t1):
        winner = Winner.PLAYER2
    elif (t2 > t1 and t1) or (t1 > t2 and not t2):
        winner = Winner.PLAYER1
    else:
        winner = Winner.TIE
    return Outcome(winner, t1, t2, sign)


def countdown_lines(random_time: int) -> List[str]:
    """Lines shown during the countdown, one per pause.

    From ten down to one; the steps at or below ``random_time`` are shown
    blank so the players must keep the count themselves.
    """
    lines: List[str] = []
    digit = 9
    for step in range(_COUNTDOWN_START, 0, -1):
        if step == _COUNTDOWN_START:
            lines.append(f"{_COUNTDOWN_START}{_LINE_END}")
        if step <= random_time:
            lines.append(f" {_LINE_END}")
        elif step != _COUNTDOWN_START:
            lines.append(f"{digit}{_LINE_END}")
            digit -= 1
    return lines


def melody_for(sign: str) -> Tuple[int, ...]:
    """Melody played after a round: one for early presses, one for late ones."""
    if sign == "-":
        return MELODY_BEFORE
    if sign == "+":
        return MELODY_AFTER
    raise ValueError(f"sign must be '+' or '-', got {sign!r}")