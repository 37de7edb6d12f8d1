"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest

TESTDATA_FILES: tuple[str, ...] = (
    "a/b/c/.gitkeep",
    "a/b/d/.gitkeep",
    "a/e/.gitkeep",
    "a/f",
)

TESTDATA_PREORDER: tuple[str, ...] = (
    "testdata",
    "testdata/a",
    "testdata/a/b",
    "testdata/a/b/c",
    "testdata/a/b/c/.gitkeep",
    "testdata/a/b/d",
    "testdata/a/b/d/.gitkeep",
    "testdata/a/e",
    "testdata/a/e/.gitkeep",
    "testdata/a/f",
)


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory for every test."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Undo CLI logging setup so records propagate to caplog again."""
    yield
    logger = logging.getLogger("pathtree")
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)
    logger.propagate = True


@pytest.fixture
def testdata(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[Path]:
    """Create the testdata/{a/{b/{c,d},e,f}} layout and chdir next to it.

    Yields the relative path ``testdata`` so tree paths match
    TESTDATA_PREORDER exactly.
    """
    root = tmp_path / "workspace" / "testdata"
    for relative in TESTDATA_FILES:
        file_path = root / relative
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text("")

    monkeypatch.chdir(root.parent)
    yield Path("testdata")


@pytest.fixture
def testdata_preorder() -> list[Path]:
    """Expected pre-order path sequence for the testdata layout."""
    return [Path(p) for p in TESTDATA_PREORDER]
