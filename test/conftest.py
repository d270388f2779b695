"""
Shared fixtures for Dubins planner tests.
"""

import numpy as np
import pytest

from dubins_path import Pose


@pytest.fixture(scope="module")
def random_path_configs():
    """Seeded random (start, goal, radius) triples."""
    rng = np.random.default_rng(42)
    configs = []
    for _ in range(50):
        start = Pose(*(rng.random(2) * 20 - 10), rng.random() * 4 * np.pi - 2 * np.pi)
        goal = Pose(*(rng.random(2) * 20 - 10), rng.random() * 4 * np.pi - 2 * np.pi)
        radius = float(rng.uniform(0.2, 4.0))
        configs.append((start, goal, radius))
    return configs
