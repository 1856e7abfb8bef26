"""Internal shared utilities for charsetutil."""

from __future__ import annotations

import functools
import logging
from collections.abc import Callable
from typing import IO, Any, TypeVar

logger = logging.getLogger(__name__)

#: Number of bytes read from a stream before guessing its encoding.
GUESS_READ_SIZE: int = 128

#: Chunk size used when reading a stream to EOF.
READ_CHUNK_SIZE: int = 65_536

_T = TypeVar("_T")


def _validate_read_size(read_size: int) -> None:
    """Raise ValueError if *read_size* is not a positive integer."""
    if isinstance(read_size, bool) or not isinstance(read_size, int) or read_size < 1:
        msg = "read_size must be a positive integer"
        raise ValueError(msg)


def as_bytes(chunk: bytes | bytearray | memoryview | str) -> bytes:
    """Materialize *chunk* as bytes.

    Text is encoded as UTF-8 with ``surrogateescape`` so that strings holding
    smuggled raw bytes come back byte-for-byte.
    """
    if isinstance(chunk, str):
        return chunk.encode("utf-8", "surrogateescape")
    return bytes(chunk)


def iter_chunks(reader: IO[Any], chunk_size: int = READ_CHUNK_SIZE):
    """Yield chunks from *reader* until EOF.

    Chunks are returned as the stream produces them, ``bytes`` or ``str``.
    """
    while True:
        chunk = reader.read(chunk_size)
        if not chunk:
            return
        yield chunk


def read_prefix(reader: IO[Any], size: int) -> bytes:
    """Read at most *size* bytes from *reader*.

    Short reads are retried until *size* bytes arrive or the stream hits
    EOF.  Text streams are read by character and encoded afterwards, so the
    result is truncated to *size* bytes.
    """
    buf = bytearray()
    while len(buf) < size:
        chunk = reader.read(size - len(buf))
        if not chunk:
            break
        buf.extend(as_bytes(chunk))
    return bytes(buf[:size])


def must(func: Callable[..., _T]) -> Callable[..., _T]:
    """Wrap *func* so that any failure terminates the process.

    The exception is logged and re-raised as :class:`SystemExit`, which
    ordinary ``except Exception`` handlers do not catch.  Meant for call
    sites with no recovery path.
    """

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> _T:
        try:
            return func(*args, **kwargs)
        except Exception as e:
            logger.critical("%s failed: %s", func.__name__, e)
            raise SystemExit(f"charsetutil: {e}") from e

    wrapper.__name__ = f"must_{func.__name__}"
    wrapper.__qualname__ = wrapper.__name__
    wrapper.__doc__ = (
        f"Like :func:`{func.__name__}`, but exit the process on failure."
    )
    return wrapper
