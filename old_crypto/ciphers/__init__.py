"""Single-stage building blocks: checkerboard and transpositions."""

from .straddling    import StraddlingCheckerboard, ALPHABET_TXT, DEFAULT_FREQUENCY
from .transposition import Transposition, IrregularTransposition

__all__ = [
    "StraddlingCheckerboard",
    "Transposition",
    "IrregularTransposition",
    "ALPHABET_TXT",
    "DEFAULT_FREQUENCY",
]
