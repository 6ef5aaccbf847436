"""Block-based base32, base64 and hex codecs with strict decoding; RFC 4648 codecs in rfc4648."""

__version__ = "1.0.0"
__all__ = ["stream", "base32", "base64", "hexcodec", "rfc4648"]