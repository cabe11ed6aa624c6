"""
Columnar Transposition — regular and irregular (triangular)
============================================================
Write the text in rows under the key, read it out column by column in
the alphabetical order of the key characters.

    key  Z E B R A S      rank  5 2 1 3 0 4
         W E A R E D
         I S C O V E
         R E D F L E
         E A T O N C
         E
    ->   EVLN ACDT ESEA ROFO DEEC WIREE

The irregular variant (second transposition of the VIC cipher) marks
two triangular areas of the grid, anchored on row 0 at the columns of
ranks 0 and 1 and widening by one column per row. Plain cells are
filled first, then the triangles, so the tail of the message ends up
scattered through the triangles instead of sitting in the last row.

Neither variant pads: the last row may be short.
"""

import logging
from typing import List, Tuple

from ..block import Block, BytesLike, as_bytes
from ..exceptions import KeyValidationError
from ..helpers import rank

logger = logging.getLogger(__name__)


class Transposition(Block):
    """Regular columnar transposition."""

    def __init__(self, key: str):
        if not key:
            raise KeyValidationError("Transposition key can not be empty.")
        self._key = key
        self._tkey = rank(key)
        # column position of each rank, rank 0 first
        self._order = sorted(range(len(self._tkey)), key=self._tkey.__getitem__)
        logger.debug(f"{type(self).__name__} key_len={len(key)}")

    @property
    def key(self) -> str:
        return self._key

    @property
    def tkey(self) -> List[int]:
        return list(self._tkey)

    def block_size(self) -> int:
        return len(self._tkey)

    def encrypt(self, src: BytesLike) -> bytes:
        src = as_bytes(src)
        klen = len(self._tkey)
        out = bytearray()
        for col in self._order:
            out += src[col::klen]
        return bytes(out)

    def decrypt(self, src: BytesLike) -> bytes:
        src = as_bytes(src)
        klen = len(self._tkey)
        if not src:
            return b""

        # the first `extra` columns hold one more cell than the others
        scol, extra = divmod(len(src), klen)
        dst = bytearray(len(src))
        current = 0
        for col in self._order:
            how_many = scol + 1 if col < extra else scol
            dst[col::klen] = src[current:current + how_many]
            current += how_many
        return bytes(dst)

    def __repr__(self):
        return f"{type(self).__name__}(key_len={len(self._key)})"


class IrregularTransposition(Transposition):
    """Columnar transposition with two triangular areas filled last."""

    def __init__(self, key: str):
        super().__init__(key)
        if len(self._tkey) < 2:
            raise KeyValidationError("Irregular transposition key needs at least 2 characters.")
        self._anchors = (self._order[0], self._order[1])

    @property
    def anchors(self) -> Tuple[int, int]:
        """Columns of ranks 0 and 1, where the two triangles start."""
        return self._anchors

    def is_triangular(self, row: int, col: int) -> bool:
        p0, p1 = self._anchors
        return (col >= p0 + row or col >= p1 + row) and col < len(self._tkey)

    def _fill_order(self, rows: int, length: int) -> List[int]:
        """
        Grid cells in the order they receive text: plain cells row by
        row, then triangular cells row by row, cut at `length`.
        """
        klen = len(self._tkey)
        plain, triangle = [], []
        for r in range(rows):
            for c in range(klen):
                (triangle if self.is_triangular(r, c) else plain).append(r * klen + c)
        return (plain + triangle)[:length]

    def _layout(self, length: int) -> Tuple[int, List[int], bytearray]:
        klen = len(self._tkey)
        rows = -(-length // klen)
        order = self._fill_order(rows, length)
        active = bytearray(rows * klen)
        for idx in order:
            active[idx] = 1
        return rows, order, active

    def encrypt(self, src: BytesLike) -> bytes:
        src = as_bytes(src)
        if not src:
            return b""
        klen = len(self._tkey)
        rows, order, active = self._layout(len(src))

        grid = bytearray(rows * klen)
        for idx, b in zip(order, src):
            grid[idx] = b

        out = bytearray()
        for col in self._order:
            for r in range(rows):
                idx = r * klen + col
                if active[idx]:
                    out.append(grid[idx])
        return bytes(out)

    def decrypt(self, src: BytesLike) -> bytes:
        src = as_bytes(src)
        if not src:
            return b""
        klen = len(self._tkey)
        rows, order, active = self._layout(len(src))

        grid = bytearray(rows * klen)
        pos = 0
        for col in self._order:
            for r in range(rows):
                idx = r * klen + col
                if active[idx]:
                    grid[idx] = src[pos]
                    pos += 1

        return bytes(grid[idx] for idx in order)
