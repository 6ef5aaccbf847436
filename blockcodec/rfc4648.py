"""The RFC 4648 base32 and base64 codecs.

Base32 uses the alphabet ``A-Z2-7`` and accepts lower-case letters when
decoding. Base64 uses ``A-Za-z0-9+/``. Both always write ``=`` padding up to a
full block and insist on it when decoding. Whitespace is not allowed in either.
"""

from __future__ import annotations

import string

from blockcodec.base32 import Base32Scheme
from blockcodec.base64 import Base64Scheme
from blockcodec.stream import Codec, Variant

__all__ = [
    "BASE32",
    "BASE32_RFC4648",
    "BASE64_RFC4648",
    "BASE32_RFC4648_ALPHABET",
    "BASE64_RFC4648_ALPHABET",
    "encode_base32",
    "decode_base32",
    "encode_base64",
    "decode_base64",
]

BASE32_RFC4648_ALPHABET = string.ascii_uppercase + "234567"
BASE64_RFC4648_ALPHABET = string.ascii_uppercase + string.ascii_lowercase + string.digits + "+/"

BASE32_RFC4648 = Codec(
    Base32Scheme(),
    Variant(BASE32_RFC4648_ALPHABET, fold_case=True),
)

BASE64_RFC4648 = Codec(
    Base64Scheme(),
    Variant(BASE64_RFC4648_ALPHABET),
)

# The default base32 flavour.
BASE32 = BASE32_RFC4648


def _as_bytes(data) -> bytes:
    if isinstance(data, str):
        return data.encode("utf-8")
    return bytes(memoryview(data))


def encode_base32(data) -> str:
    """Encode bytes (or a string, as UTF-8) as padded RFC 4648 base32."""
    return BASE32_RFC4648.encode(_as_bytes(data))


def decode_base32(text) -> bytes:
    """Decode padded RFC 4648 base32 text; lower-case letters are accepted."""
    return BASE32_RFC4648.decode(text)


def encode_base64(data) -> str:
    """Encode bytes (or a string, as UTF-8) as padded RFC 4648 base64."""
    return BASE64_RFC4648.encode(_as_bytes(data))


def decode_base64(text) -> bytes:
    """Decode padded RFC 4648 base64 text."""
    return BASE64_RFC4648.decode(text)