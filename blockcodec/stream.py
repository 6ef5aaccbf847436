"""Block-oriented encoding and decoding shared by the base32, base64 and hex codecs.

A :class:`Codec` pairs a :class:`Scheme`, which describes how bytes are split
into symbol indexes and joined back, with a :class:`Variant`, which describes
the alphabet and the padding and whitespace rules for one flavour of a scheme.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import ClassVar

EOF_SYMBOL = "\0"


class ParseError(ValueError):
    """Raised when encoded input cannot be decoded."""


class SymbolError(ParseError):
    """Raised when the input holds a character outside the alphabet."""

    def __init__(self, symbol: str) -> None:
        self.symbol = symbol
        super().__init__(f"parse error: character {symbol!r} is not part of the alphabet")


class InvalidInputLength(ParseError):
    """Raised when the number of symbols cannot form a valid encoding."""


class PaddingError(InvalidInputLength):
    """Raised when padding is missing, misplaced or of the wrong length."""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(
            message
            or "parse error: codec expects padded input string but padding was invalid"
        )


@dataclass(frozen=True)
class Variant:
    """Alphabet and padding rules for one flavour of an encoding."""

    PADDING: ClassVar[int] = 1 << 8
    INVALID: ClassVar[int] = 1 << 9
    EOF: ClassVar[int] = 1 << 10

    alphabet: str
    padding: str | None = "="
    generates_padding: bool = True
    requires_padding: bool = True
    ignored: str = ""
    fold_case: bool = False
    aliases: Mapping[str, str] = field(default_factory=dict, hash=False)
    _indexes: dict = field(init=False, repr=False, compare=False, hash=False)
    _upper: bool = field(init=False, repr=False, compare=False, hash=False)

    def __post_init__(self) -> None:
        if len(set(self.alphabet)) != len(self.alphabet):
            raise ValueError("alphabet symbols must be distinct")
        if self.padding is not None and len(self.padding) != 1:
            raise ValueError("padding must be a single character")
        if self.padding is None and (self.generates_padding or self.requires_padding):
            raise ValueError("a variant without a padding symbol cannot use padding")
        letters = [c for c in self.alphabet if c.isascii() and c.isalpha()]
        upper = all(c.isupper() for c in letters)
        if self.fold_case and not (upper or all(c.islower() for c in letters)):
            raise ValueError("case folding needs an alphabet of a single letter case")
        object.__setattr__(self, "_indexes", {c: i for i, c in enumerate(self.alphabet)})
        object.__setattr__(self, "_upper", upper)

    def symbol(self, index: int) -> str:
        """Return the alphabet symbol at ``index``."""
        if not 0 <= index < len(self.alphabet):
            raise IndexError(f"symbol index {index} is outside the alphabet")
        return self.alphabet[index]

    def normalized_symbol(self, char: str) -> str:
        """Map an accepted spelling of a symbol onto its canonical form."""
        if self.fold_case and char.isascii() and char.isalpha():
            char = char.upper() if self._upper else char.lower()
        return self.aliases.get(char, char)

    def is_padding_symbol(self, char: str) -> bool:
        return self.padding is not None and char == self.padding

    def should_ignore(self, char: str) -> bool:
        return char in self.ignored

    def index_of(self, char: str) -> int:
        """Return the alphabet index of ``char``, or PADDING, EOF or INVALID."""
        char = self.normalized_symbol(char)
        found = self._indexes.get(char)
        if found is not None:
            return found
        if char == EOF_SYMBOL:
            return self.EOF
        if self.is_padding_symbol(char):
            return self.PADDING
        return self.INVALID

    @classmethod
    def _is_stop(cls, index: int) -> bool:
        return index >= cls.PADDING


class Scheme:
    """Bit layout of a block encoding: how many bytes map onto how many symbols.

    The generic implementation packs the bytes of a block big-endian into an
    integer and slices it into equally wide symbol indexes.
    """

    def __init__(self, binary_block_size: int, encoded_block_size: int) -> None:
        if binary_block_size < 1 or encoded_block_size < 1:
            raise ValueError("block sizes must be positive")
        if (binary_block_size * 8) % encoded_block_size:
            raise ValueError("a block's bits must split evenly into symbols")
        self.binary_block_size = binary_block_size
        self.encoded_block_size = encoded_block_size
        self.bits_per_symbol = binary_block_size * 8 // encoded_block_size
        self._tail_counts = tuple(
            -(-k * 8 // self.bits_per_symbol) for k in range(1, binary_block_size)
        )

    def num_encoded_tail_symbols(self, num_bytes: int) -> int:
        """Number of symbols (without padding) that encode a partial block."""
        if not 0 < num_bytes < self.binary_block_size:
            raise ValueError("invalid number of bytes in a tail block")
        return self._tail_counts[num_bytes - 1]

    def _value(self, block: bytes) -> int:
        if len(block) > self.binary_block_size:
            raise ValueError("block is longer than the binary block size")
        return int.from_bytes(bytes(block).ljust(self.binary_block_size, b"\0"), "big")

    def _slice(self, block: bytes, position: int) -> int:
        shift = self.bits_per_symbol * (self.encoded_block_size - 1 - position)
        return (self._value(block) >> shift) & ((1 << self.bits_per_symbol) - 1)

    def index(self, block: bytes, position: int) -> int:
        """Alphabet index of the symbol at ``position`` within an encoded block."""
        if not 0 <= position < self.encoded_block_size:
            raise ValueError("invalid encoding symbol index in a block")
        return self._slice(block, position)

    def index_last(self, block: bytes, position: int) -> int:
        """Index of the final symbol of a tail, with missing bits taken as zero."""
        if position + 1 not in self._tail_counts:
            raise ValueError("invalid last encoding symbol index in a tail")
        return self._slice(block, position)

    def decode_block(self, indexes: Iterable[int]) -> bytes:
        """Join a full block of symbol indexes into its bytes."""
        indexes = list(indexes)
        if len(indexes) != self.encoded_block_size:
            raise ValueError("a full block needs exactly one index per symbol")
        value = 0
        for idx in indexes:
            value = (value << self.bits_per_symbol) | idx
        return value.to_bytes(self.binary_block_size, "big")

    def decode_tail(self, indexes: Iterable[int]) -> bytes:
        """Join the symbol indexes of a partial block into its bytes."""
        indexes = list(indexes)
        count = len(indexes)
        if count not in self._tail_counts:
            expected = ", ".join(map(str, self._tail_counts)) or "none"
            raise InvalidInputLength(
                f"invalid number of symbols in last block: found {count}, expected {expected}"
            )
        value = 0
        for idx in indexes:
            value = (value << self.bits_per_symbol) | idx
        total_bits = count * self.bits_per_symbol
        num_bytes = total_bits // 8
        return (value >> (total_bits - num_bytes * 8)).to_bytes(num_bytes, "big")


@dataclass(frozen=True)
class Codec:
    """Encoder and decoder for one scheme with one alphabet variant."""

    scheme: Scheme
    variant: Variant

    def __post_init__(self) -> None:
        if len(self.variant.alphabet) != 1 << self.scheme.bits_per_symbol:
            raise ValueError(
                f"alphabet must have {1 << self.scheme.bits_per_symbol} symbols"
            )

    def encode(self, data) -> str:
        """Encode bytes-like ``data`` into text."""
        data = bytes(memoryview(data))
        scheme, variant = self.scheme, self.variant
        block_size = scheme.binary_block_size
        full = len(data) - len(data) % block_size
        parts: list[str] = []
        for start in range(0, full, block_size):
            block = data[start:start + block_size]
            parts.extend(
                variant.symbol(scheme.index(block, position))
                for position in range(scheme.encoded_block_size)
            )
        tail = data[full:]
        if tail:
            count = scheme.num_encoded_tail_symbols(len(tail))
            parts.extend(
                variant.symbol(scheme.index(tail, position)) for position in range(count - 1)
            )
            parts.append(variant.symbol(scheme.index_last(tail, count - 1)))
            if variant.generates_padding:
                parts.append(variant.padding * (scheme.encoded_block_size - count))
        return "".join(parts)

    def decode(self, text) -> bytes:
        """Decode ``text`` (a string or ASCII bytes) into bytes."""
        if not isinstance(text, str):
            text = bytes(memoryview(text)).decode("latin-1")
        scheme, variant = self.scheme, self.variant
        size = scheme.encoded_block_size
        block = [Variant.EOF] + [0] * (size - 1)
        filled = 0
        stop_char = ""
        out = bytearray()
        chars = iter(text)

        for char in chars:
            if variant.should_ignore(char):
                continue
            idx = variant.index_of(char)
            block[filled] = idx
            if Variant._is_stop(idx):
                stop_char = char
                break
            filled += 1
            if filled == size:
                out += scheme.decode_block(block)
                filled = 0

        if block[filled] == Variant.INVALID:
            raise SymbolError(stop_char)

        last = filled
        if block[filled] == Variant.PADDING:
            if filled == 0:
                # Padding may not start a block; the encoder would have left it out.
                raise PaddingError()
            last += 1
            for char in chars:
                idx = variant.index_of(char)
                block[filled] = idx
                if idx == Variant.EOF:
                    block[filled] = Variant.PADDING
                    break
                if idx != Variant.PADDING:
                    raise PaddingError()
                last += 1
                if last > size:
                    raise PaddingError()

        if last != 0:
            padded = block[filled] == Variant.PADDING
            if (variant.requires_padding or padded) and last != size:
                raise PaddingError()
            out += scheme.decode_tail(block[:filled])
        return bytes(out)

    def encoded_size(self, binary_size: int) -> int:
        """Exact length of the encoding of ``binary_size`` bytes."""
        bs, es = self.scheme.binary_block_size, self.scheme.encoded_block_size
        if self.variant.generates_padding:
            rounded = binary_size + (bs - 1)
            return (rounded - rounded % bs) * es // bs
        return binary_size * es // bs + (1 if (binary_size * es) % bs else 0)

    def decoded_max_size(self, encoded_size: int) -> int:
        """Upper bound on the bytes decoded from ``encoded_size`` symbols."""
        bs, es = self.scheme.binary_block_size, self.scheme.encoded_block_size
        full = encoded_size // es * bs
        if self.variant.requires_padding:
            return full
        return full + (encoded_size % es) * bs // es