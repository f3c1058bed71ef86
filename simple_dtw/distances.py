# -*- coding: utf-8 -*-
"""Point distance functions for DTWEvaluator.

Any pure callable taking two points of equal dimensionality and returning a
non-negative float can be bound to an evaluator; the functions here cover the
common metrics and back the ``--metric`` option of the evaluation script.
"""

from typing import Callable, Dict, Sequence

import numpy as np

Point = Sequence[float]


def euclidean_distance(p1: Point, p2: Point) -> float:
    """L2 distance between two points (``|a - b|`` for 1-D points)."""
    diff = np.asarray(p1, dtype=np.float64) - np.asarray(p2, dtype=np.float64)
    return float(np.sqrt(np.dot(diff, diff)))


def squared_euclidean_distance(p1: Point, p2: Point) -> float:
    diff = np.asarray(p1, dtype=np.float64) - np.asarray(p2, dtype=np.float64)
    return float(np.dot(diff, diff))


def manhattan_distance(p1: Point, p2: Point) -> float:
    diff = np.asarray(p1, dtype=np.float64) - np.asarray(p2, dtype=np.float64)
    return float(np.abs(diff).sum())


DISTANCE_FUNCTIONS: Dict[str, Callable[[Point, Point], float]] = {
    "euclidean": euclidean_distance,
    "sqeuclidean": squared_euclidean_distance,
    "manhattan": manhattan_distance,
}


def get_distance_fn(name: str) -> Callable[[Point, Point], float]:
    """Look up a distance function by name.

    Args:
        name: One of the keys of DISTANCE_FUNCTIONS.

    Returns:
        The matching distance callable.

    Raises:
        ValueError: If the name is unknown.
    """
    try:
        return DISTANCE_FUNCTIONS[name]
    except KeyError:
        raise ValueError(
            f"Unknown distance metric '{name}'. "
            f"Available: {sorted(DISTANCE_FUNCTIONS)}"
        ) from None
