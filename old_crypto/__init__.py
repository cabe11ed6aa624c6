"""
old_crypto — classical field ciphers
====================================
Historical pencil-and-paper ciphers behind one transform contract
(`Block`: block_size / encrypt / decrypt).

Components:
    helpers                 — rank (numeric keys), condense, keyword shuffle
    StraddlingCheckerboard  — letters to 1- or 2-digit codes
    Transposition           — regular columnar transposition
    IrregularTransposition  — columnar transposition with triangular areas
    Nihilist                — checkerboard + transposition (1880s)
    VicCipher               — checkerboard + 2 transpositions, keyed by
                              the VIC key schedule (1950s)

None of these are secure. They are here for study.
"""

__version__  = "1.0.0"
__project__  = "old_crypto"

from .block                     import Block
from .exceptions                import (CipherError, KeyValidationError,
                                        UnmappableCharacter, TruncatedCode)
from .ciphers.straddling        import StraddlingCheckerboard
from .ciphers.transposition     import Transposition, IrregularTransposition
from .nihilist                  import Nihilist
from .vic                       import VicCipher, KeyMaterial, DerivedKeys, derive_keys

__all__ = [
    "Block",
    "CipherError",
    "KeyValidationError",
    "UnmappableCharacter",
    "TruncatedCode",
    "StraddlingCheckerboard",
    "Transposition",
    "IrregularTransposition",
    "Nihilist",
    "VicCipher",
    "KeyMaterial",
    "DerivedKeys",
    "derive_keys",
]
