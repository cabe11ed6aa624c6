"""
NIHILIST CIPHER  |  old_crypto
==============================
Straddling checkerboard followed by a columnar transposition of the
resulting digits (super-encipherment). Used by Russian Nihilist
revolutionaries in the 1880s and the direct ancestor of VIC.
"""

import logging

from .block import Block, BytesLike, as_bytes
from .ciphers.straddling import StraddlingCheckerboard
from .ciphers.transposition import Transposition

logger = logging.getLogger(__name__)


class Nihilist(Block):
    """Checkerboard on `key1`, transposition on `key2`."""

    EXPANSION = StraddlingCheckerboard.EXPANSION

    def __init__(self, key1: str, key2: str, prefix: str, strict: bool = False):
        self._sc = StraddlingCheckerboard(key1, prefix, strict=strict)
        self._transp = Transposition(key2)
        logger.info(f"Nihilist ready | transposition width={len(key2)}")

    def block_size(self) -> int:
        return self._transp.block_size()

    def encrypt(self, src: BytesLike) -> bytes:
        return self._transp.encrypt(self._sc.encrypt(as_bytes(src)))

    def decrypt(self, src: BytesLike) -> bytes:
        return self._sc.decrypt(self._transp.decrypt(as_bytes(src)))
