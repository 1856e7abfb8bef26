"""Exceptions raised by charsetutil."""

from __future__ import annotations

from collections.abc import Mapping


class CharsetError(Exception):
    """Base class for all charsetutil errors."""


class UnsupportedCharsetError(CharsetError, LookupError):
    """The encoding label does not name a supported charset.

    :param label: The label exactly as the caller passed it.
    """

    def __init__(self, label: str) -> None:
        super().__init__(f"unsupported charset: {label!r}")
        self.label = label


class DetectionFailedError(CharsetError, ValueError):
    """The detector could not name an encoding for the input.

    ``result`` holds the raw detector result, or ``None`` when detection
    was never attempted (empty input).
    """

    def __init__(
        self, message: str, result: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        self.result = result
