"""Decode bytes in a named encoding into text."""

from __future__ import annotations

import codecs
import io
import logging
from collections.abc import Callable
from typing import IO, Any

from charsetutil._utils import as_bytes, iter_chunks, must
from charsetutil.registry import lookup_codec

logger = logging.getLogger(__name__)


def decode_reader(
    reader: IO[Any],
    encoding: str,
    *,
    errors: str = "replace",
    lookup: Callable[[str], codecs.CodecInfo] = lookup_codec,
) -> str:
    """Read *reader* to EOF and decode its contents from *encoding*.

    :param reader: A readable stream.  Binary streams are preferred; text
        streams are converted back to bytes with ``surrogateescape``.
    :param encoding: Encoding label, e.g. ``"Windows-31J"``.
    :param errors: Codec error handler.  The default replaces malformed
        sequences with U+FFFD; ``"strict"`` raises instead.
    :param lookup: Function resolving a label to a :class:`codecs.CodecInfo`.
    :returns: The decoded text.
    :raises UnsupportedCharsetError: If *encoding* is not a known label.
    """
    decoder = lookup(encoding).incrementaldecoder(errors)
    parts = [decoder.decode(as_bytes(chunk)) for chunk in iter_chunks(reader)]
    parts.append(decoder.decode(b"", final=True))
    text = "".join(parts)
    logger.debug("decoded %d characters from %s", len(text), encoding)
    return text


def decode_bytes(
    data: bytes | bytearray | memoryview, encoding: str, **kwargs: Any
) -> str:
    """Decode *data* from *encoding*.  See :func:`decode_reader`."""
    return decode_reader(io.BytesIO(data), encoding, **kwargs)


def decode_string(text: str, encoding: str, **kwargs: Any) -> str:
    """Decode the raw bytes held by *text* from *encoding*.

    *text* is turned back into bytes with UTF-8 and ``surrogateescape``,
    which recovers bytes smuggled through ``os.fsdecode`` and friends.
    """
    return decode_reader(io.BytesIO(as_bytes(text)), encoding, **kwargs)


def decode(
    data: bytes | bytearray | memoryview | str | IO[Any],
    encoding: str,
    **kwargs: Any,
) -> str:
    """Decode *data* from *encoding*, whatever its shape.

    Dispatches to :func:`decode_string` for ``str``, :func:`decode_bytes` for
    bytes-like objects and :func:`decode_reader` for anything else.
    """
    if isinstance(data, str):
        return decode_string(data, encoding, **kwargs)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return decode_bytes(data, encoding, **kwargs)
    return decode_reader(data, encoding, **kwargs)


must_decode_reader = must(decode_reader)
must_decode_bytes = must(decode_bytes)
must_decode_string = must(decode_string)
must_decode = must(decode)
