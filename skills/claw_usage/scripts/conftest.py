"""Shared pytest setup for claw_usage.

Holds the filesystem fixtures used across the suite, and reloads the module
under test once coverage tracing is active: under the PEP-723 entry point
(``uv run test_claw_usage.py``) claw_usage is imported before pytest-cov
starts, so its module-level configuration would otherwise go untraced.
"""

from __future__ import annotations

import importlib
import tempfile
from collections.abc import Iterator
from pathlib import Path

import claw_usage
import pytest

SKILL_DIRS = ("claw-lint", "claw-git", "claw-unused", "other-tool")


@pytest.fixture(autouse=True, scope="session")
def _reload_for_coverage() -> None:
    importlib.reload(claw_usage)


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Scratch directory removed after each test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def skills_dir(temp_dir: Path) -> Path:
    """Installed skills: three claw-* directories, one foreign dir, one stray file."""
    directory = temp_dir / "skills"
    directory.mkdir()
    for name in SKILL_DIRS:
        (directory / name).mkdir()
    (directory / "claw-notes.txt").write_text("not a skill", encoding="utf-8")
    return directory
