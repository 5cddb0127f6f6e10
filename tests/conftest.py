from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run without an install.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))


@pytest.fixture(autouse=True)
def _fresh_cli_container() -> None:
    from ibanval.cli.deps import reset_container

    reset_container()
