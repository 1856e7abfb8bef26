"""Guess the encoding and language of a byte sequence."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Callable, Mapping
from typing import IO, Any

import chardet

from charsetutil._utils import (
    GUESS_READ_SIZE,
    _validate_read_size,
    as_bytes,
    must,
    read_prefix,
)
from charsetutil.errors import DetectionFailedError
from charsetutil.registry import charset_for_codec

logger = logging.getLogger(__name__)

#: A statistical detector: takes bytes, returns a mapping with
#: ``"encoding"``, ``"confidence"`` and ``"language"`` keys, the shape of
#: :func:`chardet.detect`'s result.
Detector = Callable[[bytes], Mapping[str, Any]]

# English language names reported by older detectors, mapped to ISO 639-1.
_LANGUAGE_CODES: dict[str, str] = {
    "arabic": "ar",
    "belarusian": "be",
    "breton": "br",
    "bulgarian": "bg",
    "chinese": "zh",
    "croatian": "hr",
    "czech": "cs",
    "danish": "da",
    "dutch": "nl",
    "english": "en",
    "esperanto": "eo",
    "estonian": "et",
    "finnish": "fi",
    "french": "fr",
    "german": "de",
    "greek": "el",
    "hebrew": "he",
    "hungarian": "hu",
    "icelandic": "is",
    "irish": "ga",
    "italian": "it",
    "japanese": "ja",
    "kazakh": "kk",
    "korean": "ko",
    "latvian": "lv",
    "lithuanian": "lt",
    "macedonian": "mk",
    "maltese": "mt",
    "norwegian": "no",
    "persian": "fa",
    "polish": "pl",
    "portuguese": "pt",
    "romanian": "ro",
    "russian": "ru",
    "serbian": "sr",
    "slovak": "sk",
    "slovene": "sl",
    "slovenian": "sl",
    "spanish": "es",
    "swedish": "sv",
    "tajik": "tg",
    "thai": "th",
    "turkish": "tr",
    "ukrainian": "uk",
    "urdu": "ur",
    "vietnamese": "vi",
    "welsh": "cy",
}


def detect_whole(data: bytes) -> Mapping[str, Any]:
    """Run :func:`chardet.detect` over every byte of *data*.

    chardet stops at 200 000 bytes unless told otherwise.
    """
    return chardet.detect(data, max_bytes=len(data))


@dataclasses.dataclass(frozen=True, slots=True)
class GuessResult:
    """The single best encoding guess for some input.

    ``charset`` is the canonical encoding name (``"EUC-JP"``, ``"UTF-8"``),
    ``language`` an ISO 639-1 code or ``""`` and ``confidence`` an integer
    from 0 to 100.
    """

    charset: str
    language: str
    confidence: int

    def to_dict(self) -> dict[str, str | int]:
        """Convert this result to a plain dict.

        :returns: A dict with ``'charset'``, ``'language'``, and
            ``'confidence'`` keys.
        """
        return {
            "charset": self.charset,
            "language": self.language,
            "confidence": self.confidence,
        }


def _normalize_language(language: object) -> str:
    if not isinstance(language, str) or not language:
        return ""
    lowered = language.strip().lower()
    if len(lowered) == 2:
        return lowered
    return _LANGUAGE_CODES.get(lowered, "")


def _scale_confidence(confidence: object) -> int:
    if not isinstance(confidence, (int, float)):
        return 0
    return max(0, min(100, round(confidence * 100)))


def _to_guess_result(raw: Mapping[str, Any]) -> GuessResult:
    encoding = raw.get("encoding")
    if not encoding:
        msg = "unable to determine charset"
        raise DetectionFailedError(msg, raw)
    language = _normalize_language(raw.get("language"))
    info = charset_for_codec(encoding)
    if info is None:
        charset = encoding
    else:
        charset = info.name
        if not info.languages:
            language = ""
        elif language not in info.languages:
            language = info.languages[0] if len(info.languages) == 1 else ""
    return GuessResult(
        charset=charset,
        language=language,
        confidence=_scale_confidence(raw.get("confidence")),
    )


def guess_bytes(
    data: bytes | bytearray | memoryview, *, detect: Detector = detect_whole
) -> GuessResult:
    """Guess the encoding of *data*.

    :param data: The bytes to examine, all of them.
    :param detect: Statistical detector to delegate to.
    :returns: The best guess.
    :raises DetectionFailedError: If *data* is empty or the detector names
        no encoding.
    """
    data = bytes(data)
    if not data:
        msg = "unable to determine charset of empty input"
        raise DetectionFailedError(msg)
    raw = detect(data)
    logger.debug("detector result for %d bytes: %r", len(data), raw)
    return _to_guess_result(raw)


def guess_string(text: str, **kwargs: Any) -> GuessResult:
    """Guess the encoding of the bytes behind *text*.

    Ordinary text is examined as UTF-8; raw bytes smuggled in with
    ``surrogateescape`` are examined as they were.
    """
    return guess_bytes(as_bytes(text), **kwargs)


def guess_reader(
    reader: IO[Any],
    *,
    read_size: int = GUESS_READ_SIZE,
    detect: Detector = detect_whole,
) -> GuessResult:
    """Guess the encoding of a stream from its first *read_size* bytes.

    Only the prefix is examined, so an encoding whose telltale bytes come
    later in the stream may be missed.  The stream is left positioned after
    the prefix.

    :param read_size: Maximum number of bytes to read.  Defaults to
        :data:`GUESS_READ_SIZE` (128).
    :raises ValueError: If *read_size* is not a positive integer.
    :raises DetectionFailedError: If the stream is empty or the detector
        names no encoding.
    """
    _validate_read_size(read_size)
    prefix = read_prefix(reader, read_size)
    logger.debug("read %d of at most %d bytes for detection", len(prefix), read_size)
    return guess_bytes(prefix, detect=detect)


def guess(
    data: bytes | bytearray | memoryview | str | IO[Any], **kwargs: Any
) -> GuessResult:
    """Guess the encoding of *data*, whatever its shape."""
    if isinstance(data, str):
        return guess_string(data, **kwargs)
    if isinstance(data, (bytes, bytearray, memoryview)):
        return guess_bytes(data, **kwargs)
    return guess_reader(data, **kwargs)


must_guess_reader = must(guess_reader)
must_guess_bytes = must(guess_bytes)
must_guess_string = must(guess_string)
must_guess = must(guess)
