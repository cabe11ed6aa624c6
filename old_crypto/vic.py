"""
VIC CIPHER  |  old_crypto
=========================
Three-stage pencil-and-paper cipher carried by Soviet agent Reino
Häyhänen in the 1950s, never broken by the FBI until he defected.

    plaintext
      -> straddling checkerboard     (letters -> digits)
      -> regular transposition       (key A)
      -> irregular transposition     (key B, triangular areas)
      -> ciphertext digits

All three keys come from a modular-arithmetic schedule over four
pieces of key material:

    personal number   "89"                    -> checkerboard prefix
    indicator         "741776"                (first 5 digits used)
    passphrase        "IDREAMOFJEANNIEWITHT"  (first 20 chars, 2 x 10)
    message index     "77651"                 (first 5 digits used)

Schedule (all arithmetic mod 10):
    1. j  = index - indicator, digit by digit
    2. k  = j extended to 10 digits by chain addition
    3. l  = k + (rank(phrase[:10]) + 1)
    4. A  = (rank(phrase[10:20]) + 1) looked up at l - 1   -> key A
    5. B  = A after 5 rounds of circular chain addition     -> key B
    6. C  = rank(B as a digit string)                        -> checkerboard key

Full description & test vectors: http://www.quadibloc.com/crypto/pp1324.htm
"""

import logging
from dataclasses import dataclass
from typing import Sequence

from .block import Block, BytesLike, as_bytes
from .ciphers.straddling import ALPHABET_TXT, StraddlingCheckerboard
from .ciphers.transposition import IrregularTransposition, Transposition
from .exceptions import KeyValidationError
from .helpers import rank

logger = logging.getLogger(__name__)

PHRASE_LEN = 20
GROUP_LEN = 5


# ── key material ─────────────────────────────────────────────────────────────

def _require_digits(name: str, value: str, minimum: int):
    if len(value) < minimum:
        raise KeyValidationError(f"{name} needs at least {minimum} digits, got {len(value)}.")
    if not (value.isascii() and value.isdigit()):
        raise KeyValidationError(f"{name} must contain only digits: {value!r}.")


@dataclass(frozen=True)
class KeyMaterial:
    """The four inputs of the key schedule, validated on creation."""

    personal_number: str
    indicator: str
    passphrase: str
    message_index: str

    def __post_init__(self):
        _require_digits("Personal number", self.personal_number, 2)
        _require_digits("Indicator", self.indicator, GROUP_LEN)
        _require_digits("Message index", self.message_index, GROUP_LEN)
        if len(self.passphrase) < PHRASE_LEN:
            raise KeyValidationError(
                f"Passphrase must be at least {PHRASE_LEN} characters, "
                f"got {len(self.passphrase)}."
            )


@dataclass(frozen=True)
class DerivedKeys:
    """Digit sequences (values 0-9) produced by the key schedule."""

    transposition_key_a: bytes
    transposition_key_b: bytes
    checkerboard_key: bytes


def render(digits: Sequence[int]) -> str:
    """[1, 2, 0] -> "120" """
    return "".join(str(d) for d in digits)


def str2int(text: str) -> bytes:
    return bytes(ord(c) - ord("0") for c in text)


# ── digit arithmetic ─────────────────────────────────────────────────────────

def addmod10(a: Sequence[int], b: Sequence[int]) -> bytes:
    return bytes((x + y) % 10 for x, y in zip(a, b))


def submod10(a: Sequence[int], b: Sequence[int]) -> bytes:
    return bytes((x + 10 - y) % 10 for x, y in zip(a, b))


def chainadd_inplace(a: bytearray):
    """Each digit becomes itself plus its right neighbour, wrapping around."""
    n = len(a)
    for i in range(n):
        a[i] = (a[i] + a[(i + 1) % n]) % 10


def chainadd(a: Sequence[int]) -> bytes:
    b = bytearray(a)
    chainadd_inplace(b)
    return bytes(b)


def expand5to10(a: Sequence[int]) -> bytes:
    """The 5 digits followed by their chain addition."""
    return bytes(a) + chainadd(a)


def first_encode(a: Sequence[int], b: Sequence[int]) -> bytes:
    """Substitute each digit v of `a` by b[v - 1], with 0 standing for 10."""
    return bytes(b[(v + 9) % 10] for v in a)


def _phrase_digits(half: str) -> bytes:
    return bytes((r + 1) % 10 for r in rank(half))


def derive_keys(material: KeyMaterial, rounds: int = 5) -> DerivedKeys:
    """Run the VIC key schedule. Pure and deterministic."""
    imsg = str2int(material.message_index[:GROUP_LEN])
    ikey5 = str2int(material.indicator[:GROUP_LEN])
    phrase = material.passphrase[:PHRASE_LEN]
    ph1 = _phrase_digits(phrase[:10])
    ph2 = _phrase_digits(phrase[10:])

    first = expand5to10(submod10(imsg, ikey5))
    second = first_encode(addmod10(first, ph1), ph2)

    r = bytearray(second)
    for _ in range(rounds):
        chainadd_inplace(r)
    third = bytes(r)

    return DerivedKeys(
        transposition_key_a=second,
        transposition_key_b=third,
        checkerboard_key=bytes(rank(render(third))),
    )


# ── cipher ───────────────────────────────────────────────────────────────────

class VicCipher(Block):
    """Checkerboard + regular transposition + irregular transposition."""

    FREQUENCY = "ATONESIR"
    CHAIN_ROUNDS = 5
    EXPANSION = StraddlingCheckerboard.EXPANSION

    def __init__(self, personal_number: str, indicator: str,
                 passphrase: str, message_index: str,
                 strict: bool = False):
        self._material = KeyMaterial(personal_number, indicator,
                                     passphrase, message_index)
        self._keys = derive_keys(self._material, self.CHAIN_ROUNDS)

        self._first = Transposition(render(self._keys.transposition_key_a))
        self._second = IrregularTransposition(render(self._keys.transposition_key_b))
        self._sc = StraddlingCheckerboard(
            render(self._keys.checkerboard_key),
            personal_number,
            frequency=self.FREQUENCY,
            alphabet=ALPHABET_TXT,
            strict=strict,
        )
        logger.info(f"VicCipher ready | checkerboard prefix={self._sc.prefix} "
                    f"transpositions={self._first.block_size()}+{self._second.block_size()}")

    @property
    def keys(self) -> DerivedKeys:
        return self._keys

    @property
    def checkerboard(self) -> StraddlingCheckerboard:
        return self._sc

    @property
    def first_transposition(self) -> Transposition:
        return self._first

    @property
    def second_transposition(self) -> IrregularTransposition:
        return self._second

    def block_size(self) -> int:
        return 1

    def encrypt(self, src: BytesLike) -> bytes:
        src = as_bytes(src)
        # 1. Letters to digits, length depends on the text
        digits = self._sc.encrypt(src)
        # 2. Regular transposition
        mixed = self._first.encrypt(digits)
        # 3. Irregular transposition
        ct = self._second.encrypt(mixed)
        logger.debug(f"VIC encrypt: {len(src)}B -> {len(ct)} digits")
        return ct

    def decrypt(self, src: BytesLike) -> bytes:
        src = as_bytes(src)
        mixed = self._second.decrypt(src)
        digits = self._first.decrypt(mixed)
        pt = self._sc.decrypt(digits)
        logger.debug(f"VIC decrypt: {len(src)} digits -> {len(pt)}B")
        return pt

    def __repr__(self):
        return f"VicCipher(personal_number={self._material.personal_number!r})"
