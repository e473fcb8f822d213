from pathlib import Path

import pytest

from pathstar.logging import reset_logging


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def hill_file(tmp_path: Path) -> Path:
    path = tmp_path / "hill.txt"
    path.write_text("SbcdefghijklmnopqrstuvwxyE\n")
    return path
