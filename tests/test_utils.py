import pytest

from reflexgames.utils import bin_to_ascii


def test_zero_is_padded():
    assert bin_to_ascii(0) == " 00000"


def test_largest_word():
    assert bin_to_ascii(65535) == " 65535"


def test_small_value_has_leading_zeros():
    assert bin_to_ascii(123) == " 00123"


@pytest.mark.parametrize("value", [1, 9, 10, 99, 1000, 4095, 10000, 54321, 65534])
def test_round_trip(value):
    text = bin_to_ascii(value)
    assert len(text) == 6
    assert text[0] == " "
    assert text[1:].isdigit()
    assert int(text) == value


def test_values_wrap_to_sixteen_bits():
    assert bin_to_ascii(65536) == bin_to_ascii(0)
    assert bin_to_ascii(65536 + 42) == bin_to_ascii(42)


def test_negative_values_wrap():
    assert bin_to_ascii(-1) == bin_to_ascii(65535)