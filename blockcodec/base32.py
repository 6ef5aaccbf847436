"""Base32 block layout: five bytes map onto eight 5-bit symbols."""

from __future__ import annotations

from collections.abc import Iterable

from blockcodec.stream import InvalidInputLength, Scheme

_INDEX = (
    lambda b: (b[0] >> 3) & 0x1F,
    lambda b: ((b[0] << 2) & 0x1C) | ((b[1] >> 6) & 0x3),
    lambda b: (b[1] >> 1) & 0x1F,
    lambda b: ((b[1] << 4) & 0x10) | ((b[2] >> 4) & 0xF),
    lambda b: ((b[2] << 1) & 0x1E) | ((b[3] >> 7) & 0x1),
    lambda b: (b[3] >> 2) & 0x1F,
    lambda b: ((b[3] << 3) & 0x18) | ((b[4] >> 5) & 0x7),
    lambda b: b[4] & 0x1F,
)

# Abbreviated final symbols of a tail: only the bits of the last present byte.
_INDEX_LAST = {
    1: lambda b: (b[0] << 2) & 0x1C,
    3: lambda b: (b[1] << 4) & 0x10,
    4: lambda b: (b[2] << 1) & 0x1E,
    6: lambda b: (b[3] << 3) & 0x18,
}

_TAIL_SYMBOLS = {1: 2, 2: 4, 3: 5, 4: 7}


class Base32Scheme(Scheme):
    """Bit layout of base32, independent of the alphabet in use."""

    def __init__(self) -> None:
        super().__init__(5, 8)

    def _block(self, block) -> bytes:
        block = bytes(block)
        if len(block) > self.binary_block_size:
            raise ValueError("block is longer than the binary block size")
        return block.ljust(self.binary_block_size, b"\0")

    def num_encoded_tail_symbols(self, num_bytes: int) -> int:
        """Symbols (without padding) that encode a tail of ``num_bytes`` bytes."""
        try:
            return _TAIL_SYMBOLS[num_bytes]
        except KeyError:
            raise ValueError("invalid number of bytes in a tail block") from None

    def index(self, block, position: int) -> int:
        if not 0 <= position < self.encoded_block_size:
            raise ValueError("invalid encoding symbol index in a block")
        return _INDEX[position](self._block(block))

    def index_last(self, block, position: int) -> int:
        compute = _INDEX_LAST.get(position)
        if compute is None:
            raise ValueError("invalid last encoding symbol index in a tail")
        return compute(self._block(block))

    def decode_block(self, indexes: Iterable[int]) -> bytes:
        idx = list(indexes)
        if len(idx) != self.encoded_block_size:
            raise ValueError("a full block needs exactly one index per symbol")
        return bytes((
            ((idx[0] << 3) & 0xF8) | ((idx[1] >> 2) & 0x7),
            ((idx[1] << 6) & 0xC0) | ((idx[2] << 1) & 0x3E) | ((idx[3] >> 4) & 0x1),
            ((idx[3] << 4) & 0xF0) | ((idx[4] >> 1) & 0xF),
            ((idx[4] << 7) & 0x80) | ((idx[5] << 2) & 0x7C) | ((idx[6] >> 3) & 0x3),
            ((idx[6] << 5) & 0xE0) | (idx[7] & 0x1F),
        ))

    def decode_tail(self, indexes: Iterable[int]) -> bytes:
        idx = list(indexes)
        count = len(idx)
        if count not in _TAIL_SYMBOLS.values():
            raise InvalidInputLength(
                f"invalid number of symbols in last base32 block: found {count}, "
                "expected 2, 4, 5 or 7"
            )
        out = bytearray([((idx[0] << 3) & 0xF8) | ((idx[1] >> 2) & 0x7)])
        if count >= 4:
            out.append(
                ((idx[1] << 6) & 0xC0) | ((idx[2] << 1) & 0x3E) | ((idx[3] >> 4) & 0x1)
            )
        if count >= 5:
            out.append(((idx[3] << 4) & 0xF0) | ((idx[4] >> 1) & 0xF))
        if count >= 7:
            out.append(
                ((idx[4] << 7) & 0x80) | ((idx[5] << 2) & 0x7C) | ((idx[6] >> 3) & 0x3)
            )
        return bytes(out)