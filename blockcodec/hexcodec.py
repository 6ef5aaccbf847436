"""Hex block layout: one byte maps onto two 4-bit symbols."""

from __future__ import annotations

from collections.abc import Iterable

from blockcodec.stream import InvalidInputLength, Scheme


class HexScheme(Scheme):
    """Bit layout of hex encoding; whole bytes only, so there are no tails."""

    def __init__(self) -> None:
        super().__init__(1, 2)

    def num_encoded_tail_symbols(self, num_bytes: int) -> int:
        """Always zero: hex encodes whole bytes and never produces a tail."""
        return 0

    def index(self, block, position: int) -> int:
        if not 0 <= position < self.encoded_block_size:
            raise ValueError("invalid encoding symbol index in a block")
        block = bytes(block)
        if len(block) != 1:
            raise ValueError("a hex block holds exactly one byte")
        return block[0] >> 4 if position == 0 else block[0] & 0xF

    def index_last(self, block, position: int) -> int:
        if position != 0:
            raise ValueError("invalid last encoding symbol index in a tail")
        return 0

    def decode_block(self, indexes: Iterable[int]) -> bytes:
        idx = list(indexes)
        if len(idx) != self.encoded_block_size:
            raise ValueError("a full block needs exactly one index per symbol")
        return bytes([((idx[0] << 4) | idx[1]) & 0xFF])

    def decode_tail(self, indexes: Iterable[int]) -> bytes:
        raise InvalidInputLength(
            "odd-length hex input is not supported by the streaming octet decoder, "
            "use a place-based number decoder instead"
        )