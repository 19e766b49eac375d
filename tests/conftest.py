from __future__ import annotations

import sys
from pathlib import Path

import pytest

ROOT = Path(__file__).resolve().parents[1]
SRC_DIRS = (
    ROOT / "libs" / "core" / "src",
    ROOT / "libs" / "adapters" / "classic" / "src",
    ROOT / "libs" / "adapters" / "pq" / "src",
    ROOT / "libs" / "adapters" / "kex" / "src",
    ROOT / "apps" / "cli" / "src",
)

for candidate in SRC_DIRS:
    candidate_str = str(candidate)
    if candidate_str not in sys.path:
        sys.path.insert(0, candidate_str)

from unisig import DeterministicRandom, load_adapters  # noqa: E402


@pytest.fixture(scope="session", autouse=True)
def adapters() -> None:
    status = load_adapters()
    missing = [mod for mod, ok in status.items() if not ok]
    assert not missing, f"adapter packages failed to load: {missing}"


@pytest.fixture
def rng() -> DeterministicRandom:
    return DeterministicRandom(b"unisig-tests")