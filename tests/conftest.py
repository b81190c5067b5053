"""Pytest configuration.

This repo follows the `src/` layout. Some environments may invoke a `pytest`
entrypoint from a different Python install than the one used for
`python -m pip install -e ...`, which can cause `import csvtable` to fail, so
`src/` is put on `sys.path` during tests.
"""

from __future__ import annotations

import sys
from pathlib import Path

import pytest


def pytest_configure() -> None:
    repo_root = Path(__file__).resolve().parents[1]
    src_dir = repo_root / "src"
    sys.path.insert(0, str(src_dir))


# =============================================================================
# Shared test helpers
# =============================================================================


def write_bytes_exact(path: Path, text: str) -> Path:
    """Write `text` without newline translation and return `path`."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


@pytest.fixture
def abc_table():
    """The a,b,c table with two data rows."""
    from csvtable import Table

    t = Table()
    t.set_header(["a", "b", "c"])
    t.add_row(["1", "2", "3"])
    t.add_row(["4", "5", "6"])
    return t
