"""
Straddling Checkerboard
=======================
Letters to digits with variable-length codes.

A keyword shuffles the alphabet. The eight most frequent letters get a
single digit; everything else gets two digits, the first of which is
one of the two "long" prefix digits. Because the prefix digits never
appear as single-digit codes, the digit stream decodes unambiguously.

    key ARABESQUE, prefix 89, frequent letters ESANTIRU:

          0 1 2 3 4 5 6 7 8 9
          A R E N S I U T        (single digits)
        8 C K V D L W B F M X    (80..89)
        9 G Y H O Z Q P / J -    (90..99)

Literal digits in the plaintext are escaped: marker, digit, digit,
marker, where the marker is the code of '/'.

Historical note: used by Soviet agents from the 1920s on, and the
first stage of the VIC cipher.
"""

import logging
from typing import Dict, List

from ..block import Block, BytesLike, as_bytes
from ..exceptions import KeyValidationError, TruncatedCode, UnmappableCharacter
from ..helpers import shuffle

logger = logging.getLogger(__name__)

ALPHABET_TXT = "ABCDEFGHIJKLMNOPQRSTUVWXYZ/-"
DEFAULT_FREQUENCY = "ESANTIRU"

DIGITS = "0123456789"
_ZERO = ord("0")


def _is_digit(b: int) -> bool:
    return _ZERO <= b <= _ZERO + 9


class StraddlingCheckerboard(Block):
    """Keyed straddling checkerboard, A-Z plus '/' (digit escape) and '-'."""

    ESCAPE = "/"
    # marker, digit, digit, marker: at most 2+2+2 digits per input byte
    EXPANSION = 3

    def __init__(self, key: str, prefix: str,
                 frequency: str = DEFAULT_FREQUENCY,
                 alphabet: str = ALPHABET_TXT,
                 strict: bool = False):
        """
        key       : keyword shuffling the alphabet (non-empty)
        prefix    : the two long-code prefix digits, e.g. "89"; extra
                    characters are ignored
        frequency : letters eligible for single-digit codes
        strict    : raise instead of silently dropping bad input
        """
        if not key:
            raise KeyValidationError("Checkerboard key can not be empty.")
        if len(prefix) < 2:
            raise KeyValidationError("Prefix must have at least 2 digits.")
        longc = prefix[:2]
        if not all(c in DIGITS for c in longc):
            raise KeyValidationError(f"Prefix {longc!r} must be two digits.")
        if longc[0] == longc[1]:
            raise KeyValidationError(f"Prefix digits must differ, got {longc!r}.")

        self._key = key
        self._longc = longc
        self._strict = strict
        # a numeric key leaves its digits in the shuffle, drop them
        self._full = "".join(c for c in shuffle(key, alphabet) if c in alphabet)

        self._enc: List[bytes] = [b""] * 256
        self._dec1: List[int] = [0] * 10
        self._dec2: List[List[int]] = [[0] * 10 for _ in range(10)]
        self._long_mask = [False] * 10
        for c in longc:
            self._long_mask[int(c)] = True

        self._build_tables(frequency)
        logger.info(f"StraddlingCheckerboard key_len={len(key)} "
                    f"alphabet={len(self._full)} strict={strict}")

    def _build_tables(self, frequency: str):
        shortc = [d for d in DIGITS if d not in self._longc]
        longc = [p + d for p in self._longc for d in DIGITS]

        i = j = 0
        for ch in self._full:
            code = ord(ch)
            if ch in frequency:
                if i < len(shortc):
                    digit = shortc[i]
                    self._enc[code] = digit.encode()
                    self._dec1[int(digit)] = code
                    i += 1
            elif j < len(longc):
                pair = longc[j]
                self._enc[code] = pair.encode()
                self._dec2[int(pair[0])][int(pair[1])] = code
                j += 1

    # ── introspection ────────────────────────────────────────────────────────

    @property
    def key(self) -> str:
        return self._key

    @property
    def prefix(self) -> str:
        return self._longc

    @property
    def full(self) -> str:
        """The shuffled alphabet the codes were assigned from."""
        return self._full

    @property
    def strict(self) -> bool:
        return self._strict

    @property
    def codes(self) -> Dict[str, str]:
        """Character -> digit code, in shuffled-alphabet order."""
        return {ch: self._enc[ord(ch)].decode()
                for ch in self._full if self._enc[ord(ch)]}

    def block_size(self) -> int:
        return len(self._key)

    # ── transform ────────────────────────────────────────────────────────────

    def encrypt(self, src: BytesLike) -> bytes:
        """
        Plaintext to digits. Literal digits are wrapped in the escape
        marker and doubled. Bytes with no code are skipped unless strict.
        """
        src = as_bytes(src)
        marker = self._enc[ord(self.ESCAPE)]
        out = bytearray()
        dropped = 0
        for pos, ch in enumerate(src):
            if _is_digit(ch):
                code = marker + bytes((ch, ch)) + marker if marker else b""
            else:
                code = self._enc[ch]
            if code:
                out += code
            elif self._strict:
                raise UnmappableCharacter(ch, pos)
            else:
                dropped += 1
        if dropped:
            logger.debug(f"Checkerboard encrypt dropped {dropped} unmapped byte(s)")
        return bytes(out)

    def decrypt(self, src: BytesLike) -> bytes:
        """
        Digits to plaintext. Non-digit bytes are ignored; a long prefix
        with nothing after it is dropped unless strict.
        """
        src = as_bytes(src)
        n = len(src)
        escape = ord(self.ESCAPE)
        out = bytearray()
        i = 0
        while i < n:
            ch = src[i]
            if not _is_digit(ch):
                i += 1
                continue

            d0 = ch - _ZERO
            width = 1
            if self._long_mask[d0]:
                if i + 1 >= n:
                    if self._strict:
                        raise TruncatedCode(i)
                    logger.debug(f"Checkerboard decrypt dropped trailing prefix at {i}")
                    break
                ch1 = src[i + 1]
                if not _is_digit(ch1):
                    i += 2
                    continue
                ptc = self._dec2[d0][ch1 - _ZERO]
                width = 2
            else:
                ptc = self._dec1[d0]
            i += width

            if ptc == escape and self._is_escaped_digit(src, i, width):
                out.append(src[i])
                i += 4
                continue
            if ptc:
                out.append(ptc)
        return bytes(out)

    def _is_escaped_digit(self, src: bytes, i: int, width: int) -> bool:
        """True if src[i:i+4] is 'dd' plus a closing marker."""
        if i + 4 > len(src) or src[i] != src[i + 1]:
            return False
        row0, row1 = src[i + 2], src[i + 3]
        if not (_is_digit(row0) and _is_digit(row1)):
            return False
        # closing marker equal to the opening one
        if width == 2 and row0 == src[i - 2] and row1 == src[i - 1]:
            return True
        return self._dec2[row0 - _ZERO][row1 - _ZERO] == ord(self.ESCAPE)

    def __repr__(self):
        return f"StraddlingCheckerboard(key_len={len(self._key)}, prefix={self._longc!r})"
