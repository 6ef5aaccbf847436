"""Base64 block layout: three bytes map onto four 6-bit symbols."""

from __future__ import annotations

from collections.abc import Iterable

from blockcodec.stream import InvalidInputLength, Scheme

_INDEX = (
    lambda b: b[0] >> 2,
    lambda b: ((b[0] & 0x3) << 4) | (b[1] >> 4),
    lambda b: ((b[1] & 0xF) << 2) | (b[2] >> 6),
    lambda b: b[2] & 0x3F,
)

_INDEX_LAST = {
    1: lambda b: (b[0] & 0x3) << 4,
    2: lambda b: (b[1] & 0xF) << 2,
}

_TAIL_SYMBOLS = {1: 2, 2: 3}


class Base64Scheme(Scheme):
    """Bit layout of base64, independent of the alphabet in use."""

    def __init__(self) -> None:
        super().__init__(3, 4)

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
        value = (idx[0] << 18) | (idx[1] << 12) | (idx[2] << 6) | idx[3]
        return bytes(((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF))

    def decode_tail(self, indexes: Iterable[int]) -> bytes:
        idx = list(indexes)
        count = len(idx)
        if count not in _TAIL_SYMBOLS.values():
            raise InvalidInputLength(
                f"invalid number of symbols in last base64 block: found {count}, "
                "expected 2 or 3"
            )
        out = bytearray([((idx[0] << 2) + ((idx[1] & 0x30) >> 4)) & 0xFF])
        if count == 3:
            out.append((((idx[1] & 0xF) << 4) + ((idx[2] & 0x3C) >> 2)) & 0xFF)
        return bytes(out)