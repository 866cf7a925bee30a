"""Global test configuration.

Seeds RNGs for more deterministic behavior and registers a hypothesis
profile so property tests are reproducible in CI.
"""

import os
import random
from pathlib import Path

import numpy as np
import pytest
from hypothesis import settings


settings.register_profile("ci", max_examples=500, derandomize=True, deadline=None)
settings.register_profile("dev", max_examples=100, deadline=None)
settings.load_profile(os.environ.get("FLOATMATCH_HYPOTHESIS_PROFILE", "dev"))


def pytest_sessionstart(session: pytest.Session) -> None:
    """Seed common RNGs to improve test determinism."""
    seed = int(os.environ.get("FLOATMATCH_TEST_SEED", "12345"))
    random.seed(seed)
    np.random.seed(seed)


def pytest_collection_modifyitems(session: pytest.Session, config: pytest.Config, items: list[pytest.Item]) -> None:
    """Auto-mark tests under tests/property with the 'property' marker.

    CI selects property tests via `-m property`.
    """
    for item in items:
        p = Path(str(item.fspath))
        if "property" in p.parts and "tests" in p.parts:
            item.add_marker(pytest.mark.property)
