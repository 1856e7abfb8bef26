# tests/test_decoder.py
from __future__ import annotations

import codecs
import io

import pytest

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
from charsetutil.errors import UnsupportedCharsetError
from conftest import KONNICHIWA, KONNICHIWA_SJIS


def test_decode_bytes():
    assert decode_bytes(KONNICHIWA_SJIS, "Windows-31J") == KONNICHIWA


def test_decode_string_holding_raw_bytes():
    smuggled = KONNICHIWA_SJIS.decode("utf-8", "surrogateescape")
    assert decode_string(smuggled, "Windows-31J") == KONNICHIWA


def test_decode_string_utf8_passthrough():
    assert decode_string(KONNICHIWA, "UTF-8") == KONNICHIWA


def test_decode_reader():
    assert decode_reader(io.BytesIO(KONNICHIWA_SJIS), "Windows-31J") == KONNICHIWA


def test_decode_dispatches_on_shape():
    assert decode(KONNICHIWA_SJIS, "Windows-31J") == KONNICHIWA
    assert decode(bytearray(KONNICHIWA_SJIS), "Windows-31J") == KONNICHIWA
    assert decode(memoryview(KONNICHIWA_SJIS), "Windows-31J") == KONNICHIWA
    assert decode(io.BytesIO(KONNICHIWA_SJIS), "Windows-31J") == KONNICHIWA


def test_must_variants_succeed():
    smuggled = KONNICHIWA_SJIS.decode("utf-8", "surrogateescape")
    assert must_decode(KONNICHIWA_SJIS, "Windows-31J") == KONNICHIWA
    assert must_decode_bytes(KONNICHIWA_SJIS, "Windows-31J") == KONNICHIWA
    assert must_decode_string(smuggled, "Windows-31J") == KONNICHIWA
    assert (
        must_decode_reader(io.BytesIO(KONNICHIWA_SJIS), "Windows-31J") == KONNICHIWA
    )


def test_decode_unknown_label_all_shapes():
    for call in (
        lambda: decode_bytes(KONNICHIWA_SJIS, "unknown"),
        lambda: decode_string(KONNICHIWA, "unknown"),
        lambda: decode_reader(io.BytesIO(KONNICHIWA_SJIS), "unknown"),
        lambda: decode(KONNICHIWA_SJIS, "unknown"),
    ):
        with pytest.raises(UnsupportedCharsetError, match="unknown"):
            call()


def test_decode_unknown_label_does_not_read_stream():
    stream = io.BytesIO(KONNICHIWA_SJIS)
    with pytest.raises(UnsupportedCharsetError):
        decode_reader(stream, "unknown")
    assert stream.tell() == 0


def test_must_decode_unknown_label_exits():
    for call in (
        lambda: must_decode_bytes(KONNICHIWA_SJIS, "unknown"),
        lambda: must_decode_string(KONNICHIWA, "unknown"),
        lambda: must_decode_reader(io.BytesIO(KONNICHIWA_SJIS), "unknown"),
        lambda: must_decode(KONNICHIWA_SJIS, "unknown"),
    ):
        with pytest.raises(SystemExit) as excinfo:
            call()
        assert isinstance(excinfo.value.__cause__, UnsupportedCharsetError)


def test_decode_replaces_malformed_bytes_by_default():
    assert decode_bytes(b"abc\xff", "UTF-8") == "abc\ufffd"


def test_decode_strict_errors():
    with pytest.raises(UnicodeDecodeError):
        decode_bytes(b"abc\xff", "UTF-8", errors="strict")


def test_decode_empty_input():
    assert decode_bytes(b"", "EUC-JP") == ""


def test_decode_multibyte_sequence_split_across_chunks():
    class OneByteReader(io.RawIOBase):
        def __init__(self, data: bytes) -> None:
            super().__init__()
            self._data = io.BytesIO(data)

        def readable(self) -> bool:
            return True

        def read(self, size: int = -1) -> bytes:
            return self._data.read(1)

    assert decode_reader(OneByteReader(KONNICHIWA_SJIS), "Windows-31J") == KONNICHIWA


def test_decode_large_stream():
    text = "日本語のテキスト。" * 20_000
    data = text.encode("euc_jp")
    assert len(data) > 65_536
    assert decode_reader(io.BytesIO(data), "EUC-JP") == text


def test_decode_with_custom_lookup():
    seen: list[str] = []

    def lookup(label: str) -> codecs.CodecInfo:
        seen.append(label)
        return codecs.lookup("cp932")

    assert decode_bytes(KONNICHIWA_SJIS, "my-label", lookup=lookup) == KONNICHIWA
    assert seen == ["my-label"]


def test_decode_text_stream():
    smuggled = KONNICHIWA_SJIS.decode("utf-8", "surrogateescape")
    assert decode_reader(io.StringIO(smuggled), "Windows-31J") == KONNICHIWA


def test_decode_propagates_io_errors():
    class BrokenReader(io.RawIOBase):
        def readable(self) -> bool:
            return True

        def read(self, size: int = -1) -> bytes:
            raise OSError("disk on fire")

    with pytest.raises(OSError, match="disk on fire"):
        decode_reader(BrokenReader(), "UTF-8")
