"""Decoder for NEC infra-red remote frames, fed one edge at a time."""

from typing import Dict, Optional

__all__ = ["NecDecoder", "BUTTONS"]

_WORD = 0xFFFFFFFF

# Frame codes of the remote's digit keys, mapped to the digit they stand for.
BUTTONS: Dict[int, int] = {
    (-2139114421) & _WORD: 0,
    (-2139121561) & _WORD: 1,
    (-2139124621) & _WORD: 2,
    (-2139112126) & _WORD: 3,
    (-2139125641) & _WORD: 4,
    (-2139120541) & _WORD: 5,
    (-2139116206) & _WORD: 6,
    (-2139119266) & _WORD: 7,
    (-2139118246) & _WORD: 8,
    (-2139117226) & _WORD: 9,
}


class NecDecoder:
    """Accumulates the 32 bits of an NEC frame from edge-to-edge intervals.

    Intervals are given in microseconds. An interval over 8000 marks the
    start of a frame, over 1700 a one bit, over 1000 a zero bit; shorter
    intervals are ignored.
    """

    START_THRESHOLD = 8000
    ONE_THRESHOLD = 1700
    ZERO_THRESHOLD = 1000
    FRAME_BITS = 32

    def __init__(self) -> None:
        self._bits = 0
        self._index = 0
        self.code: Optional[int] = None

    def reset(self) -> None:
        """Forget any partly received frame and the last decoded code."""
        self._bits = 0
        self._index = 0
        self.code = None

    @property
    def bit_index(self) -> int:
        """Number of bits received in the current frame."""
        return self._index

    def edge(self, elapsed: int) -> Optional[int]:
        """Feed the time since the previous edge.

        Returns the digit of the remote key when a frame completes, passes
        its check byte and is a known key; otherwise None.
        """
        if elapsed > self.START_THRESHOLD:
            self._bits = 0
            self._index = 0
        elif elapsed > self.ONE_THRESHOLD:
            self._bits |= 1 << (31 - self._index)
            self._index += 1
        elif elapsed > self.ZERO_THRESHOLD:
            self._bits &= ~(1 << (31 - self._index)) & _WORD
            self._index += 1

        if self._index != self.FRAME_BITS:
            return None

        self._index = 0
        frame = self._bits & _WORD
        command_inverse = ~frame & 0xFF
        command = (frame >> 8) & 0xFF
        if command_inverse != command:
            return None
        self.code = frame
        return BUTTONS.get(frame)