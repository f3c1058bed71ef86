# -*- coding: utf-8 -*-
"""Dynamic Time Warping cost evaluation.

This package contains:
- dtw_core.py: DTWEvaluator with a reusable, auto-growing cost matrix
- distances.py: Ready-made point distance functions
"""

from simple_dtw.distances import (
    DISTANCE_FUNCTIONS,
    euclidean_distance,
    get_distance_fn,
    manhattan_distance,
    squared_euclidean_distance,
)
from simple_dtw.dtw_core import (
    ArgumentError,
    ConfigurationError,
    DTWError,
    DTWEvaluator,
)

__all__ = [
    "DTWEvaluator",
    "DTWError",
    "ArgumentError",
    "ConfigurationError",
    "DISTANCE_FUNCTIONS",
    "get_distance_fn",
    "euclidean_distance",
    "squared_euclidean_distance",
    "manhattan_distance",
]
