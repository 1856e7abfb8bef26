# tests/conftest.py
"""Shared test fixtures."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import Any

import pytest

KONNICHIWA = "こんにちわ"
KONNICHIWA_SJIS = b"\x82\xb1\x82\xf1\x82\xc9\x82\xbf\x82\xed"

# Long enough for the statistical detector to settle on EUC-JP.
JAPANESE_TEXT = (
    "吾輩は猫である。名前はまだ無い。どこで生れたかとんと見当がつかぬ。"
    "何でも薄暗いじめじめした所でニャーニャー泣いていた事だけは記憶している。"
    "吾輩はここで始めて人間というものを見た。しかもあとで聞くとそれは書生という"
    "人間中で一番獰悪な種族であったそうだ。この書生というのは時々我々を捕えて"
    "煮て食うという話である。"
)


@pytest.fixture
def konnichiwa_sjis() -> bytes:
    return KONNICHIWA_SJIS


@pytest.fixture
def japanese_euc_jp() -> bytes:
    return JAPANESE_TEXT.encode("euc_jp")


class FakeDetector:
    """Records every call and answers with a fixed result."""

    def __init__(self, result: Mapping[str, Any]) -> None:
        self.result = result
        self.calls: list[bytes] = []

    def __call__(self, data: bytes) -> Mapping[str, Any]:
        self.calls.append(data)
        return self.result


@pytest.fixture
def fake_detector() -> Callable[..., FakeDetector]:
    """Build a :class:`FakeDetector` from result keyword arguments."""

    def factory(
        encoding: str | None = "utf-8",
        confidence: float = 0.99,
        language: str | None = "",
    ) -> FakeDetector:
        return FakeDetector(
            {"encoding": encoding, "confidence": confidence, "language": language}
        )

    return factory
