# reflexgames

Two-player reflex games and the logic behind them:

- **Reaction time**: after a random wait of 1 to 5 seconds a light comes on.
  The player whose press is closest to that moment wins. A player who does
  not press cannot win unless the other one did not press either.
- **Countdown**: a countdown from 10 whose last one to three steps are shown
  blank. Players try to press exactly when it reaches zero. A potentiometer
  reading (0 to 4095) sets the pause between steps: below 1330 is easy
  (2 s), below 2600 is normal (1 s), and anything higher is hard (0.5 s). The result
  says whether the press came before (`-`) or after (`+`) zero.
- **Greed Island**: a 20×20 grid game. The player collects ten gold coins.
  Monsters and traps cost hit points, and trees and rocks block the way.

The package also has a decoder for NEC infrared remote-control frames. It
maps the remote's digit keys to the digits that steer the grid game.

## Installation

```
pip install .
```

## Running

```
reflexgames [--seed N]
```

The command reads one value per line from standard input and writes the
game text to standard output. Each round goes through these steps:

1. It reads the duration of a distance-sensor echo in timer ticks of 2 µs.
   The duration is converted to centimetres. The games are offered only
   when the distance is between 1 and 7 cm; otherwise the round starts
   again. For example, `100` is 3 cm.
2. It reads the game number: `1`, `2` or `3`.
3. The games read their input as follows:
   - Game 1 reads the two players' capture times in milliseconds on one
     line, for example `3100 3250`. A `0` means the player did not press.
   - Game 2 first reads the potentiometer value. It then reads the two
     capture times on one line.
   - Game 3 reads one key per line. `6` moves right, `4` left, `2` up and
     `8` down. `5` means no key was pressed.

A line holding only `X` ends the session. Input that is not a whole number
where one is expected ends the command with exit status 2. `--seed` fixes
the random waits; without it the seed is taken from the clock.

## Using the library

```python
from reflexgames.utils import bin_to_ascii
from reflexgames.greed_island import GreedIsland, Layout
from reflexgames.reaction import reaction_outcome, format_result

print(repr(bin_to_ascii(42)))   # ' 00042'

outcome = reaction_outcome(3100, 3250, 3000)
print(outcome.winner)           # Winner.PLAYER1
print(repr(format_result(outcome)))

game = GreedIsland(Layout.BOARD)
print(game.move(6))             # step right, returns the text and the map
for text in GreedIsland().play([6, 6, 8]):
    print(text, end="")
```

### Modules

- `reflexgames.utils`: `bin_to_ascii(value)` truncates the value to 16 bits.
  It returns a space followed by five digits.
- `reflexgames.nec`: `NecDecoder` takes edge-to-edge intervals in
  microseconds through `edge(elapsed)`. When a frame completes and passes
  its check, `edge` returns the digit of the remote key. `reset()` clears
  the decoder's state. `BUTTONS` maps frame codes to digits.
- `reflexgames.reaction`: this module holds the following names:
  - `Winner` and `Outcome`.
  - `reaction_outcome`, `relative_time` and `format_result`.
  - `random_between(upper_boundary, seed)` returns a number from 1 to the
    boundary.
  - `echo_to_distance_cm` and `hand_detected`.
- `reflexgames.countdown`: this module holds the following names:
  - `Difficulty`, with `delay_ms` and `message`.
  - `difficulty_for` and `countdown_outcome`.
  - `countdown_lines(random_time)`.
  - `melody_for(sign)`, which returns a tuple of tone periods.
- `reflexgames.greed_island`: this module holds the following names:
  - `GreedIsland`, with `move`, `render`, `finished`, `result` and `play`.
    A move after the game has ended raises `GameOver`.
  - `Tile`, `Direction` and `Layout`.
  - `initial_map` and `render_map`.

  `Layout.BOARD` is the remote-controlled variant. `Layout.DESKTOP` differs
  from it in four ways:
  - It adds a column of coins on the left edge.
  - It swaps the up and down keys.
  - It uses plain `\n` line ends.
  - It empties squares mostly when walking down.
- `reflexgames.app`: `welcome_message()`, `menu_message()` and the
  `main(argv=None)` entry point of the `reflexgames` command.

## What the package does not do

It does not talk to sensors, buttons, LEDs, a speaker or a serial port.
Echo durations, press times, potentiometer readings and remote keys are read
as text from standard input. The countdown's pauses are not waited out, and
melodies are not played: `melody_for` only returns the tone periods. The
command reads Greed Island keys as digits and does not decode infrared
signals. `NecDecoder` is available for callers that have edge timings.

## Tests

```
pip install .[test]
pytest
```