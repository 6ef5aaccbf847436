import pytest

from blockcodec.base64 import Base64Scheme
from blockcodec.stream import (
    Codec,
    InvalidInputLength,
    PaddingError,
    SymbolError,
    Variant,
)

STD_ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
URL_ALPHABET = STD_ALPHABET[:62] + "-_"


@pytest.fixture
def scheme():
    return Base64Scheme()


@pytest.fixture
def std(scheme):
    return Codec(scheme, Variant(STD_ALPHABET))


@pytest.fixture
def url_unpadded(scheme):
    return Codec(
        scheme, Variant(URL_ALPHABET, generates_padding=False, requires_padding=False)
    )


SAMPLES = [b"", b"f", b"fo", b"foo", b"foob", b"fooba", b"foobar", b"\xff\xff\xff", bytes(range(40))]


@pytest.mark.parametrize(
    "plain, encoded",
    [
        (b"", ""),
        (b"f", "Zg=="),
        (b"fo", "Zm8="),
        (b"foo", "Zm9v"),
        (b"foob", "Zm9vYg=="),
        (b"fooba", "Zm9vYmE="),
        (b"foobar", "Zm9vYmFy"),
        (b"Man", "TWFu"),
        (b"pleasure.", "cGxlYXN1cmUu"),
        (b"leasure.", "bGVhc3VyZS4="),
        (b"easure.", "ZWFzdXJlLg=="),
        (bytes([0x14, 0xFB, 0xBF, 0x03, 0xD9, 0x7E]), "FPu/A9l+"),
        (bytes([0x14, 0xFB, 0xBF, 0x03]), "FPu/Aw=="),
        (b"\xff\xff\xff", "////"),
    ],
)
def test_standard_vectors(std, plain, encoded):
    assert std.encode(plain) == encoded
    assert std.decode(encoded) == plain


@pytest.mark.parametrize(
    "plain, encoded",
    [
        (bytes([0x14, 0xFB, 0xBF, 0x03, 0xD9, 0x7E]), "FPu_A9l-"),
        (bytes([0x14, 0xFB, 0xBF, 0x03, 0xD9]), "FPu_A9k"),
        (b"fooba", "Zm9vYmE"),
        (b"\xff\xff\xff", "____"),
    ],
)
def test_unpadded_url_vectors(url_unpadded, plain, encoded):
    assert url_unpadded.encode(plain) == encoded
    assert url_unpadded.decode(encoded) == plain


def test_unpadded_accepts_correct_padding(url_unpadded):
    assert url_unpadded.decode("Zg==") == b"f"
    assert url_unpadded.decode("Zm8=") == b"fo"


def test_unpadded_rejects_short_padding(url_unpadded):
    with pytest.raises(PaddingError):
        url_unpadded.decode("Zg=")


@pytest.mark.parametrize("data", SAMPLES)
def test_full_block_round_trip(scheme, data):
    for start in range(0, len(data) - len(data) % 3, 3):
        block = data[start:start + 3]
        indexes = [scheme.index(block, p) for p in range(4)]
        assert all(0 <= i < 64 for i in indexes)
        assert scheme.decode_block(indexes) == block


@pytest.mark.parametrize("tail", [b"\x00", b"\xff", b"\x14\xfb", b"\xff\xff"])
def test_tail_round_trip(scheme, tail):
    count = scheme.num_encoded_tail_symbols(len(tail))
    indexes = [scheme.index(tail, p) for p in range(count - 1)]
    indexes.append(scheme.index_last(tail, count - 1))
    assert scheme.decode_tail(indexes) == tail


def test_tail_symbol_counts(scheme):
    assert [scheme.num_encoded_tail_symbols(n) for n in (1, 2)] == [2, 3]


@pytest.mark.parametrize("size", [0, 3])
def test_bad_tail_size(scheme, size):
    with pytest.raises(ValueError):
        scheme.num_encoded_tail_symbols(size)


@pytest.mark.parametrize("position", [0, 3])
def test_index_last_rejects_positions(scheme, position):
    with pytest.raises(ValueError):
        scheme.index_last(b"\x01\x02", position)


def test_decode_tail_rejects_single_symbol(scheme):
    with pytest.raises(InvalidInputLength, match="found 1, expected 2 or 3"):
        scheme.decode_tail([0])


@pytest.mark.parametrize("data", SAMPLES)
def test_codec_round_trip_and_size(std, url_unpadded, data):
    for codec in (std, url_unpadded):
        encoded = codec.encode(data)
        assert len(encoded) == codec.encoded_size(len(data))
        assert codec.decode(encoded) == data


@pytest.mark.parametrize("text", ["A", "AA", "ABCDE"])
def test_padding_errors(std, text):
    with pytest.raises(PaddingError):
        std.decode(text)


@pytest.mark.parametrize("text", ["A", "AAAAA"])
def test_unpadded_length_errors(url_unpadded, text):
    with pytest.raises(InvalidInputLength) as info:
        url_unpadded.decode(text)
    assert not isinstance(info.value, PaddingError)


@pytest.mark.parametrize("text", ["A&B=", "--", "__"])
def test_standard_symbol_errors(std, text):
    with pytest.raises(SymbolError):
        std.decode(text)


@pytest.mark.parametrize("text", ["A&B", "++", "//"])
def test_url_symbol_errors(url_unpadded, text):
    with pytest.raises(SymbolError):
        url_unpadded.decode(text)