"""Shared pytest fixtures and test helpers for hitscore tests."""

from __future__ import annotations

import logging
import math
from collections.abc import Generator
from pathlib import Path

import pytest
from click.testing import CliRunner


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep HITSCORE_* variables from the developer's shell out of tests."""
    for name in (
        "HITSCORE_CONFIG",
        "HITSCORE_CODEC__NAN_POLICY",
        "HITSCORE_JSON_OUTPUT",
        "HITSCORE_QUIET",
        "HITSCORE_VERBOSE",
        "HITSCORE_LOG_JSON",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty temp directory so no stray hitscore.toml is discovered."""
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def _restore_logging() -> Generator[None]:
    """Restore root and hitscore logger state after a test that configures logging."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    hs = logging.getLogger("hitscore")
    hs_level = hs.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    hs.setLevel(hs_level)


# ---------------------------------------------------------------------------
# Shared values
# ---------------------------------------------------------------------------

POS_INF = math.inf
NEG_INF = -math.inf
