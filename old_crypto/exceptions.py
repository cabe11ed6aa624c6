"""Error types raised by the ciphers.

Construction problems are `KeyValidationError`. The two data errors are
only raised by ciphers built with ``strict=True``; otherwise the
offending input is dropped, as the historical implementations do.
All of them are also `ValueError`s.
"""


class CipherError(Exception):
    """Root of the package's errors."""


class KeyValidationError(CipherError, ValueError):
    """Key material rejected at construction time."""


class UnmappableCharacter(CipherError, ValueError):
    """A plaintext byte has no code in the checkerboard."""

    def __init__(self, char: int, position: int):
        self.char = char
        self.position = position
        super().__init__(
            f"Character {chr(char)!r} at position {position} has no checkerboard code."
        )


class TruncatedCode(CipherError, ValueError):
    """Ciphertext ends in the middle of a two-digit code."""

    def __init__(self, position: int):
        self.position = position
        super().__init__(f"Incomplete two-digit code at position {position}.")
