"""Greed Island: a small grid adventure driven by a numeric keypad or remote."""

from enum import Enum, IntEnum
from typing import Dict, Iterable, Iterator, List, Optional, Sequence, Tuple

__all__ = [
    "Tile",
    "Direction",
    "Layout",
    "GameOver",
    "GreedIsland",
    "initial_map",
    "render_map",
    "MAP_SIZE",
    "HIT_POINTS",
    "GOLD_TARGET",
    "WELCOME_MESSAGE",
    "LOSS_MESSAGE",
    "WIN_MESSAGE",
]

MAP_SIZE = 20
HIT_POINTS = 10
GOLD_TARGET = 10

WELCOME_MESSAGE = (
    "Welcome to the greed island to move to the right direction tap 6, "
    "left 4, up 8 , down 2 , to exit 0"
)
LOSS_MESSAGE = "Your greed was not enough "
WIN_MESSAGE = "You are one of the seven deadly sins "


class Tile(IntEnum):
    """What lies on a square of the map."""

    GRASS = 0
    FLOWER = 1
    TREE = 2
    ROCK = 3
    KEY = 4
    GOLD_COIN = 5
    PADLOCK = 6
    TRAP = 7
    MONSTER = 8


class Direction(Enum):
    """A step on the map as (row change, column change)."""

    LEFT = (0, -1)
    UP = (-1, 0)
    RIGHT = (0, 1)
    DOWN = (1, 0)


_GOING: Dict[Direction, str] = {
    Direction.LEFT: " You are going to the left",
    Direction.UP: " You are going to the up",
    Direction.RIGHT: " You are going to the right ",
    Direction.DOWN: " You are going down ",
}

_FEATURES: Tuple[Tuple[int, int, Tile], ...] = (
    (2, 3, Tile.GOLD_COIN),
    (6, 5, Tile.ROCK),
    (4, 5, Tile.TREE),
    (7, 17, Tile.TREE),
    (12, 7, Tile.TREE),
    (9, 8, Tile.PADLOCK),
    (15, 4, Tile.MONSTER),
    (2, 18, Tile.MONSTER),
    (19, 13, Tile.MONSTER),
    (15, 6, Tile.TREE),
    (6, 11, Tile.ROCK),
    (9, 9, Tile.FLOWER),
    (19, 4, Tile.GOLD_COIN),
    (17, 3, Tile.GOLD_COIN),
    (2, 9, Tile.GOLD_COIN),
)


class Layout(Enum):
    """Variant of the game.

    BOARD is the remote-controlled version shown over the serial line;
    DESKTOP is the keyboard version with a column of coins along the left
    edge, the up and down keys swapped, and squares only emptied when
    walking down (and padlocks when walking right).
    """

    BOARD = "board"
    DESKTOP = "desktop"

    @property
    def controls(self) -> Dict[int, Direction]:
        """Keys mapped to the direction they move in."""
        if self is Layout.BOARD:
            return {4: Direction.LEFT, 2: Direction.UP, 6: Direction.RIGHT, 8: Direction.DOWN}
        return {4: Direction.LEFT, 8: Direction.UP, 6: Direction.RIGHT, 2: Direction.DOWN}

    @property
    def line_end(self) -> str:
        """Line terminator of the messages."""
        return "\n\r" if self is Layout.BOARD else "\n"

    @property
    def row_end(self) -> str:
        """Line terminator of the map rows."""
        return "\n\r\r" if self is Layout.BOARD else "\n"

    @property
    def idle_choice(self) -> Optional[int]:
        """Key value that means no key was pressed, if any."""
        return 5 if self is Layout.BOARD else None

    def clears(self, direction: Direction, tile: Tile) -> bool:
        """Whether a square is emptied after being dealt with on this move."""
        if self is Layout.BOARD:
            return True
        return direction is Direction.DOWN or (
            direction is Direction.RIGHT and tile is Tile.PADLOCK
        )


class GameOver(Exception):
    """Raised when a move is made after the game has ended."""


def initial_map(layout: Layout = Layout.BOARD) -> List[List[Tile]]:
    """Build the starting map of the given layout."""
    grid = [[Tile.GRASS] * MAP_SIZE for _ in range(MAP_SIZE)]
    if layout is Layout.DESKTOP:
        for row in grid:
            row[0] = Tile.GOLD_COIN
    for row, column, tile in _FEATURES:
        grid[row][column] = tile
    return grid


def render_map(
    grid: Sequence[Sequence[int]], position: Tuple[int, int], newline: str = "\n"
) -> str:
    """Draw the map with the player's square shown as ``X``."""
    x, y = position
    parts = [f"{newline} Your coordinate({x};{y}){newline}"]
    for i, row in enumerate(grid):
        cells = ("X " if (i, j) == (x, y) else f"{int(tile)} " for j, tile in enumerate(row))
        parts.append("".join(cells) + newline)
    parts.append(newline)
    return "".join(parts)


class GreedIsland:
    """State of one game: the map, the player's square, hit points and gold."""

    def __init__(self, layout: Layout = Layout.BOARD) -> None:
        self.layout = layout
        self.grid = initial_map(layout)
        self.position: Tuple[int, int] = (0, 0)
        self.hp = HIT_POINTS
        self.gold = 0
        self.keys = 0

    def render(self) -> str:
        """Draw the current map."""
        return render_map(self.grid, self.position, self.layout.row_end)

    def finished(self) -> bool:
        """True once the player has run out of hit points or gathered enough gold."""
        return self.hp <= 0 or self.gold >= GOLD_TARGET

    def result(self) -> Optional[str]:
        """Closing message of a finished game, or None while it goes on."""
        if self.hp == 0:
            return LOSS_MESSAGE
        if self.gold == GOLD_TARGET:
            return WIN_MESSAGE
        return None

    def _clear(self, direction: Direction, x: int, y: int) -> None:
        if self.layout.clears(direction, self.grid[x][y]):
            self.grid[x][y] = Tile.GRASS

    def move(self, choice: int) -> str:
        """Apply one key press and return the text it produces."""
        if self.finished():
            raise GameOver("the game is over")
        layout = self.layout
        end = layout.line_end
        if layout.idle_choice is not None and choice == layout.idle_choice:
            return ""
        direction = layout.controls.get(choice)
        if direction is None:
            prefix = "You will exit the game " if choice == 0 else ""
            return f"{prefix}Wrong number {end}"

        out = [_GOING[direction] + end]
        back = self.position
        dx, dy = direction.value
        x, y = back[0] + dx, back[1] + dy
        if not (0 <= x < MAP_SIZE and 0 <= y < MAP_SIZE):
            out.append("You shall not pass " + end)
            return "".join(out)

        if self.grid[x][y] in (Tile.MONSTER, Tile.TRAP):
            self.hp -= 1
            out.append(
                "You were beyond a threat thus You lost 1 HP, "
                f"Your current HP is {self.hp} {end}"
            )
            self._clear(direction, x, y)

        if self.grid[x][y] in (Tile.TREE, Tile.ROCK):
            out.append("You are beyond an obstacle take another path " + end)
            x, y = back
            if direction is Direction.RIGHT:
                out.append(f"{end} Your coordinate({x};{y}){end}")

        if self.grid[x][y] == Tile.GOLD_COIN:
            self.gold += 1
            out.append(
                "You found a gold coin keep it up You have currently "
                f"{self.gold} gold coin (s) {end}"
            )
            self._clear(direction, x, y)

        if self.grid[x][y] == Tile.PADLOCK:
            if self.keys >= 1:
                out.append("You have some keys so You will open this padlock " + end)
                self.keys -= 1
                self._clear(direction, x, y)
            else:
                out.append("You cannot pass beyond You don't have any keys " + end)
                if direction is not Direction.DOWN:
                    x, y = back

        self.position = (x, y)
        out.append(self.render())
        return "".join(out)

    def play(self, choices: Iterable[int]) -> Iterator[str]:
        """Run a game from a stream of key presses, yielding its text.

        Yields the starting map, the welcome line, the text of every move
        and, if the game ends, its closing message. Presses left over once
        the game has ended are not read.
        """
        end = self.layout.line_end
        yield self.render()
        yield WELCOME_MESSAGE + end
        for choice in choices:
            if self.finished():
                break
            text = self.move(choice)
            if text:
                yield text
        closing = self.result()
        if closing is not None:
            yield closing + end