"""Two-player reflex games, a grid exploration game and an NEC infrared decoder."""

__version__ = "0.1.0"
__all__ = ["utils", "nec", "reaction", "countdown", "greed_island", "app"]