import os
import sys

import pytest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from disksort.algorithm_api import _ALGORITHM_REGISTRY, _SORTERS, logger


@pytest.fixture(autouse=True)
def restore_registry():
    """Save and restore the algorithm registry and logger around each test."""
    saved_reg = dict(_ALGORITHM_REGISTRY)
    saved_sorters = dict(_SORTERS)
    saved_level = logger.level
    yield
    _ALGORITHM_REGISTRY.clear()
    _ALGORITHM_REGISTRY.update(saved_reg)
    _SORTERS.clear()
    _SORTERS.update(saved_sorters)
    logger._clear_context()
    logger.level = saved_level
