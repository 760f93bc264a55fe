"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import os
from pathlib import Path

import pytest

SRC_DIR = Path(__file__).resolve().parent.parent / "src"


class RecordingSink:
    """Binary sink that records every write() call separately."""

    def __init__(self) -> None:
        self.writes: list[bytes] = []

    def write(self, data: bytes) -> int:
        self.writes.append(bytes(data))
        return len(data)

    def getvalue(self) -> bytes:
        return b"".join(self.writes)


@pytest.fixture
def sink() -> RecordingSink:
    """Fresh recording sink."""
    return RecordingSink()


@pytest.fixture
def cli_env() -> dict[str, str]:
    """Environment for running the CLI in a subprocess from a source checkout."""
    env = dict(os.environ)
    env["PYTHONPATH"] = os.pathsep.join(filter(None, [str(SRC_DIR), env.get("PYTHONPATH")]))
    return env


@pytest.fixture
def overflow_bytes() -> bytes:
    """19 bytes that all have the continuation bit set."""
    return b"\x80" * 19
