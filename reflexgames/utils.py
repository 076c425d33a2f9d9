"""Small formatting helpers shared by the games."""

__all__ = ["bin_to_ascii"]

_FIELD_DIGITS = 5
_WORD_MASK = 0xFFFF


def bin_to_ascii(value: int) -> str:
    """Render an unsigned 16-bit value as a space followed by five digits.

    The value is truncated to 16 bits first, as the serial display field
    only holds an unsigned short; the result is always six characters.
    """
    word = int(value) & _WORD_MASK
    return " " + str(word).zfill(_FIELD_DIGITS)