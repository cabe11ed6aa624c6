"""
Block — the transform contract shared by every cipher
======================================================
Each cipher reports an advisory block size and turns a whole byte
buffer into another one. There is no streaming: a call consumes the
entire input and produces the entire output.

Two calling styles are offered:

    ct = cipher.encrypt(b"ATTACK")              # returns bytes
    n  = cipher.encrypt_into(buf, b"ATTACK")    # caller-sized buffer

The second mirrors the historical (dst, src) -> written contract.
Size `buf` with `max_output_size(len(src))`.
"""

from abc import ABC, abstractmethod
from typing import Union

BytesLike = Union[bytes, bytearray, str]


def as_bytes(src: BytesLike) -> bytes:
    """Accept bytes, bytearray or an ASCII str."""
    if isinstance(src, str):
        return src.encode("ascii")
    return bytes(src)


class Block(ABC):
    """Base class for all ciphers in the package."""

    # worst-case output bytes per input byte
    EXPANSION = 1

    @abstractmethod
    def block_size(self) -> int:
        ...

    @abstractmethod
    def encrypt(self, src: BytesLike) -> bytes:
        ...

    @abstractmethod
    def decrypt(self, src: BytesLike) -> bytes:
        ...

    def max_output_size(self, n: int) -> int:
        return n * self.EXPANSION

    def encrypt_into(self, dst: bytearray, src: BytesLike) -> int:
        """Encrypt `src` into the start of `dst`, return bytes written."""
        return self._copy_into(dst, self.encrypt(src))

    def decrypt_into(self, dst: bytearray, src: BytesLike) -> int:
        """Decrypt `src` into the start of `dst`, return bytes written."""
        return self._copy_into(dst, self.decrypt(src))

    @staticmethod
    def _copy_into(dst: bytearray, out: bytes) -> int:
        if len(out) > len(dst):
            raise ValueError(
                f"Destination too small: {len(out)} bytes needed, "
                f"{len(dst)} available."
            )
        dst[:len(out)] = out
        return len(out)
