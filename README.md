# blockcodec

Base32, base64 and hexadecimal encoding built on one block engine.
Decoding is strict, and each kind of malformed input raises its own
exception. The package has no dependencies outside the standard library.

## Installation

```
pip install blockcodec
```

## RFC 4648 base32 and base64

`blockcodec.rfc4648` provides ready-made codecs and four functions:

```python
from blockcodec.rfc4648 import encode_base32, decode_base32, encode_base64, decode_base64

encode_base32(b"foobar")          # 'MZXW6YTBOI======'
decode_base32("MZXW6YTBOI======") # b'foobar'
decode_base32("mzxw6ytb")         # b'fooba'  (lower case is accepted)

encode_base64(b"any carnal pleasu")          # 'YW55IGNhcm5hbCBwbGVhc3U='
decode_base64("YW55IGNhcm5hbCBwbGVhc3U=")    # b'any carnal pleasu'
```

- The `encode_*` functions take bytes-like data. A `str` is encoded as UTF-8 first.
- The `decode_*` functions take a `str` or ASCII bytes and return `bytes`.
- Both encodings always write `=` padding up to a full block, and decoding requires that padding.
- Whitespace and dashes are not accepted anywhere in the input.
- A NUL character ends the input.

The module also exposes the codec objects `BASE32_RFC4648` (also available as `BASE32`) and `BASE64_RFC4648`. Their alphabets are `BASE32_RFC4648_ALPHABET` and `BASE64_RFC4648_ALPHABET`.

## Errors

Every decoding failure raises a subclass of `blockcodec.stream.ParseError`, which is itself a `ValueError`:

- `SymbolError`: a character is not in the alphabet. The offending character is kept in its `symbol` attribute.
- `InvalidInputLength`: the last block has a number of symbols that cannot occur, for example `"A======="` in base32.
- `PaddingError`, a subclass of `InvalidInputLength`: padding is missing, is too long, or starts a block.

```python
from blockcodec.rfc4648 import decode_base64
from blockcodec.stream import PaddingError, SymbolError

try:
    decode_base64("A&B=")
except SymbolError as exc:
    print(exc.symbol)   # '&'
```

## Sizes

`Codec.encoded_size(n)` returns the exact length of the encoding of `n` bytes. `Codec.decoded_max_size(n)` returns an upper bound on the number of bytes that `n` symbols decode to. Neither method encodes or decodes anything.

```python
from blockcodec.rfc4648 import BASE64_RFC4648

BASE64_RFC4648.encoded_size(4)       # 8
BASE64_RFC4648.decoded_max_size(16)  # 12
```

## Building other codecs

`blockcodec.stream.Codec` combines two parts:

- A `Scheme` sets the block layout and how bits are packed. Three schemes are provided:
  - `Base32Scheme` in `blockcodec.base32`: 5 bytes to 8 symbols.
  - `Base64Scheme` in `blockcodec.base64`: 3 bytes to 4 symbols.
  - `HexScheme` in `blockcodec.hexcodec`: 1 byte to 2 symbols.
- A `Variant` sets the alphabet and the rules for decoding:
  - the padding symbol, which may be `None`;
  - whether padding is generated when encoding and whether it is required when decoding;
  - characters to ignore;
  - case folding;
  - symbol aliases.

```python
from blockcodec.hexcodec import HexScheme
from blockcodec.base64 import Base64Scheme
from blockcodec.stream import Codec, Variant

hex_lower = Codec(
    HexScheme(),
    Variant("0123456789abcdef", padding=None,
            generates_padding=False, requires_padding=False, fold_case=True),
)
hex_lower.encode(b"\xff")   # 'ff'
hex_lower.decode("FF")      # b'\xff'

import string
base64_url_unpadded = Codec(
    Base64Scheme(),
    Variant(string.ascii_uppercase + string.ascii_lowercase + string.digits + "-_",
            generates_padding=False, requires_padding=False),
)
base64_url_unpadded.encode(b"f")   # 'Zg'
```

`Codec.encode` takes bytes-like data only. It does not accept `str`.

## What is not included

- Ready-made codec objects exist only for RFC 4648 base32 and base64. Hex, base32hex, Crockford base32 and URL-safe base64 have to be built from a `Scheme` and a `Variant`, as shown above.
- There is no command-line tool.