"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest


@pytest.fixture
def fragments() -> list[str]:
    """Mixed ASCII and multi-byte fragments (~100KB total)."""
    return [f"Zeile {i}: „Pelé hat alles verändert.“ " for i in range(3000)]


@pytest.fixture
def encoded_fragments(fragments: list[str]) -> list[bytes]:
    """The same fragments as whole-character UTF-8 slices."""
    return [f.encode("utf-8") for f in fragments]
