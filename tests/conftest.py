from __future__ import annotations

import pathlib
import sys
from typing import TYPE_CHECKING

import click.testing
import pytest

from dualgraph import config, metrics
from dualgraph.types import Storage

# Add tests directory to sys.path so helpers.py can be imported
_tests_dir = pathlib.Path(__file__).parent
if str(_tests_dir) not in sys.path:
    sys.path.insert(0, str(_tests_dir))

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(params=list(Storage), ids=[s.value for s in Storage])
def storage(request: pytest.FixtureRequest) -> Storage:
    """Run the test once per storage strategy."""
    return request.param


@pytest.fixture(autouse=True)
def isolated_environment(
    tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch
) -> Generator[pathlib.Path]:
    """Keep user config out of tests and reset module-level state.

    HOME points at an empty directory and the working directory is a fresh
    tmp_path, so neither global nor local config files leak in.
    """
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    monkeypatch.chdir(tmp_path)
    config.clear_config_cache()
    metrics.clear()
    original_enabled = metrics._enabled
    metrics._enabled = False
    yield tmp_path
    config.clear_config_cache()
    metrics.clear()
    metrics._enabled = original_enabled


@pytest.fixture
def runner() -> click.testing.CliRunner:
    """Create a CLI runner for testing."""
    return click.testing.CliRunner()
