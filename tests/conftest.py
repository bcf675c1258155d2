import os
import numpy as np
import pytest

os.environ["NUMBA_DISABLE_JIT"] = "0"


@pytest.fixture
def rng():
    return np.random.default_rng(9948)


@pytest.fixture
def small_data():
    return np.array([1, 2, 3, 4, 5])
