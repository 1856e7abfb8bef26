"""Encode text into bytes of a named encoding."""

from __future__ import annotations

import codecs
import io
import logging
from collections.abc import Callable
from typing import IO, Any

from charsetutil._utils import iter_chunks, must
from charsetutil.registry import lookup_codec

logger = logging.getLogger(__name__)


def encode_reader(
    reader: IO[Any],
    encoding: str,
    *,
    errors: str = "strict",
    lookup: Callable[[str], codecs.CodecInfo] = lookup_codec,
) -> bytes:
    """Read *reader* to EOF and encode its text into *encoding*.

    :param reader: A readable stream.  Text streams are used as-is; binary
        streams must hold UTF-8.
    :param encoding: Encoding label, e.g. ``"Windows-31J"``.
    :param errors: Codec error handler for characters *encoding* cannot
        represent.  The default raises :exc:`UnicodeEncodeError`.
    :param lookup: Function resolving a label to a :class:`codecs.CodecInfo`.
    :returns: The encoded bytes.
    :raises UnsupportedCharsetError: If *encoding* is not a known label.
    :raises UnicodeDecodeError: If a binary stream is not valid UTF-8.
    """
    encoder = lookup(encoding).incrementalencoder(errors)
    utf8 = codecs.getincrementaldecoder("utf-8")("strict")
    buf = bytearray()
    for chunk in iter_chunks(reader):
        text = chunk if isinstance(chunk, str) else utf8.decode(chunk)
        buf.extend(encoder.encode(text))
    buf.extend(encoder.encode(utf8.decode(b"", final=True), final=True))
    logger.debug("encoded %d bytes as %s", len(buf), encoding)
    return bytes(buf)


def encode_bytes(
    data: bytes | bytearray | memoryview, encoding: str, **kwargs: Any
) -> bytes:
    """Encode the UTF-8 text in *data* into *encoding*."""
    return encode_reader(io.BytesIO(data), encoding, **kwargs)


def encode_string(text: str, encoding: str, **kwargs: Any) -> bytes:
    """Encode *text* into *encoding*.  See :func:`encode_reader`."""
    return encode_reader(io.StringIO(text), encoding, **kwargs)


def encode(
    data: str | bytes | bytearray | memoryview | IO[Any],
    encoding: str,
    **kwargs: Any,
) -> bytes:
    """Encode *data* into *encoding*, whatever its shape."""
    if isinstance(data, str):
        return encode_string(data, encoding, **kwargs)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return encode_bytes(data, encoding, **kwargs)
    return encode_reader(data, encoding, **kwargs)


must_encode_reader = must(encode_reader)
must_encode_bytes = must(encode_bytes)
must_encode_string = must(encode_string)
must_encode = must(encode)
