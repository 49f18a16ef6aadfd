from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from tests.fixtures.commands import RecordingRunner  # noqa: E402
from ts_backend_starter.config import DEFAULT_TEMPLATE_DIR  # noqa: E402


@pytest.fixture()
def runner() -> RecordingRunner:
    """Command runner that records calls instead of spawning processes."""

    return RecordingRunner()


@pytest.fixture()
def template_dir() -> Path:
    return DEFAULT_TEMPLATE_DIR
