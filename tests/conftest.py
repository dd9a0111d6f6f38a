from __future__ import annotations

import pytest
from hypothesis import HealthCheck, settings

try:
    from envelope_coverage.common.constants import RNG_SEEDS, seed_everywhere
except ImportError:  # pragma: no cover - layout fallback
    import sys
    from pathlib import Path

    REPO_ROOT = Path(__file__).resolve().parents[1]
    if str(REPO_ROOT) not in sys.path:
        sys.path.append(str(REPO_ROOT))
    from envelope_coverage.common.constants import RNG_SEEDS, seed_everywhere


TEST_SEED = RNG_SEEDS.get("tests", 1337)
seed_everywhere(TEST_SEED)

settings.register_profile(
    "ci",
    max_examples=80,
    deadline=None,
    print_blob=True,
    suppress_health_check=(
        HealthCheck.filter_too_much,
        HealthCheck.too_slow,
    ),
)
settings.load_profile("ci")


def pytest_configure(config: pytest.Config) -> None:  # pragma: no cover
    config.addinivalue_line("markers", "slow: mark test as slow")


@pytest.fixture
def np_rng():
    import numpy as np

    return np.random.default_rng(TEST_SEED)


@pytest.fixture(scope="session")
def cameras():
    return [
        {"dMin": 0, "dMax": 10, "lMin": 0, "lMax": 5},
        {"dMin": 0, "dMax": 10, "lMin": 5, "lMax": 10},
        {"dMin": 10, "dMax": 20, "lMin": 0, "lMax": 10},
    ]
