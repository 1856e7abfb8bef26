"""Decode, encode and guess legacy character encodings."""

from __future__ import annotations

from charsetutil._utils import GUESS_READ_SIZE
from charsetutil.decoder import (
    decode,
    decode_bytes,
    decode_reader,
    decode_string,
    must_decode,
    must_decode_bytes,
    must_decode_reader,
    must_decode_string,
)
from charsetutil.detector import (
    GuessResult,
    guess,
    guess_bytes,
    guess_reader,
    guess_string,
    must_guess,
    must_guess_bytes,
    must_guess_reader,
    must_guess_string,
)
from charsetutil.encoder import (
    encode,
    encode_bytes,
    encode_reader,
    encode_string,
    must_encode,
    must_encode_bytes,
    must_encode_reader,
    must_encode_string,
)
from charsetutil.errors import (
    CharsetError,
    DetectionFailedError,
    UnsupportedCharsetError,
)
from charsetutil.registry import CharsetInfo, lookup_charset

__version__ = "1.0.0"
__all__ = [
    "GUESS_READ_SIZE",
    "CharsetError",
    "CharsetInfo",
    "DetectionFailedError",
    "GuessResult",
    "UnsupportedCharsetError",
    "decode",
    "decode_bytes",
    "decode_reader",
    "decode_string",
    "encode",
    "encode_bytes",
    "encode_reader",
    "encode_string",
    "guess",
    "guess_bytes",
    "guess_reader",
    "guess_string",
    "lookup_charset",
    "must_decode",
    "must_decode_bytes",
    "must_decode_reader",
    "must_decode_string",
    "must_encode",
    "must_encode_bytes",
    "must_encode_reader",
    "must_encode_string",
    "must_guess",
    "must_guess_bytes",
    "must_guess_reader",
    "must_guess_string",
]
