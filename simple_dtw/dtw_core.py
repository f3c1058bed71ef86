# -*- coding: utf-8 -*-
"""DTW cost evaluation core.

This module implements Dynamic Time Warping (DTW) cost evaluation between two
sequences of multi-dimensional points under a caller-supplied point distance.
Only the total warping cost is computed; no alignment path is kept.

The evaluator owns a dense (m+1) x (n+1) cost matrix that is reused across
calls and grown (discarded and re-seeded) whenever a pair does not fit.
"""

import logging
import math
from typing import Callable, Optional, Sequence

import numpy as np

logger = logging.getLogger(__name__)

Point = Sequence[float]
DistanceFn = Callable[[Point, Point], float]


class DTWError(ValueError):
    """Base class for invalid-argument errors raised by the DTW evaluator."""


class ConfigurationError(DTWError):
    """Raised when the evaluator has no distance function bound."""


class ArgumentError(DTWError):
    """Raised when the two sequences have points of different dimensionality."""


class DTWEvaluator:
    """Evaluates the minimum cumulative warping cost between two sequences.

    The cost matrix keeps the border invariant at all times after
    initialization: cell (0, 0) is 0 and every other cell of row 0 and
    column 0 is +inf, so no alignment can start before either sequence.

    Not safe for concurrent use: the matrix is mutated in place on every
    call. Use one evaluator per thread or serialize access externally.

    Attributes:
        distance_fn: Point distance callable, or None when not configured.
        x_dim: Number of matrix rows (capacity of sequence 1, plus one).
        y_dim: Number of matrix columns (capacity of sequence 2, plus one).
        initialized: Whether the matrix has been allocated and seeded.

    Example:
        >>> from simple_dtw.distances import euclidean_distance
        >>> evaluator = DTWEvaluator(euclidean_distance)
        >>> evaluator.evaluate_warping_cost([[0], [1], [2]], [[0], [1], [1], [2]])
        0.0
    """

    def __init__(
        self,
        distance_fn: Optional[DistanceFn] = None,
        x_size: Optional[int] = None,
        y_size: Optional[int] = None,
    ) -> None:
        """Initialize DTWEvaluator.

        Args:
            distance_fn: Pure function mapping two points of equal
                dimensionality to a non-negative float. May be None, in
                which case every evaluation fails with ConfigurationError.
            x_size: Expected maximum length of sequence 1. When given
                together with y_size, the matrix is allocated immediately;
                otherwise allocation is deferred to the first evaluation.
            y_size: Expected maximum length of sequence 2.

        Raises:
            ValueError: If only one of x_size / y_size is given.
        """
        self.distance_fn = distance_fn
        self.x_dim = 0
        self.y_dim = 0
        self.initialized = False
        self._matrix: Optional[np.ndarray] = None

        if (x_size is None) != (y_size is None):
            raise ValueError(
                "x_size and y_size must be given together, "
                f"got x_size={x_size}, y_size={y_size}"
            )
        if x_size is not None:
            self.initialize(x_size, y_size)

    def initialize(self, x_size: int, y_size: int) -> None:
        """Allocate and border-seed a (x_size+1) x (y_size+1) cost matrix.

        Any previous matrix is discarded. This is a full reallocation, so it
        is only called automatically when the current capacity is too small.

        Args:
            x_size: Capacity for sequence 1.
            y_size: Capacity for sequence 2.

        Raises:
            ValueError: If either size is negative.
        """
        if x_size < 0 or y_size < 0:
            raise ValueError(
                f"Matrix capacities must be non-negative, got ({x_size}, {y_size})"
            )

        self.x_dim = x_size + 1
        self.y_dim = y_size + 1
        self._matrix = np.zeros((self.x_dim, self.y_dim), dtype=np.float64)

        self._set_cell(0, 0, 0.0)
        for i in range(1, self.x_dim):
            self._set_cell(i, 0, math.inf)
        for j in range(1, self.y_dim):
            self._set_cell(0, j, math.inf)

        self.initialized = True
        logger.debug(f"Initialized DTW matrix with shape ({self.x_dim}, {self.y_dim})")

    def get_cell(self, i: int, j: int) -> float:
        """Read cell (i, j) of the current cost matrix.

        Raises:
            ConfigurationError: If the matrix was never allocated.
            IndexError: If (i, j) lies outside the matrix.
        """
        if not self.initialized:
            raise ConfigurationError("DTW matrix has not been initialized")
        if not (0 <= i < self.x_dim and 0 <= j < self.y_dim):
            raise IndexError(
                f"Cell ({i}, {j}) outside DTW matrix of shape ({self.x_dim}, {self.y_dim})"
            )
        return float(self._matrix[i, j])

    def _set_cell(self, i: int, j: int, value: float) -> None:
        self._matrix[i, j] = value

    def evaluate_warping_cost(
        self,
        sequence_1: Sequence[Point],
        sequence_2: Sequence[Point],
    ) -> float:
        """Compute the DTW cost between two sequences.

        Args:
            sequence_1: Points of the first sequence. Shape: [M, D]
            sequence_2: Points of the second sequence. Shape: [N, D]

        Returns:
            The cost matrix value at (M, N), or +inf if either sequence
            is empty.

        Raises:
            ArgumentError: If the first points of the two sequences differ in
                dimensionality.
            ConfigurationError: If no distance function is bound.
        """
        len_1 = len(sequence_1)
        len_2 = len(sequence_2)

        # === Sanity checks ===
        if len_1 == 0 or len_2 == 0:
            return math.inf

        dim_1 = len(sequence_1[0])
        dim_2 = len(sequence_2[0])
        if dim_1 != dim_2:
            raise ArgumentError(
                "Sequences for evaluation have different element sizes: "
                f"{dim_1} vs {dim_2}"
            )

        if self.distance_fn is None:
            raise ConfigurationError(
                "DTW evaluator is not initialized with a cost function"
            )

        if not self.initialized or len_1 >= self.x_dim or len_2 >= self.y_dim:
            logger.info("Automatically resizing DTW matrix to fit arguments")
            self.initialize(len_1, len_2)

        # === Accumulate costs, row-major ===
        for i in range(1, len_1 + 1):
            for j in range(1, len_2 + 1):
                index_cost = self.distance_fn(sequence_1[i - 1], sequence_2[j - 1])

                up = self._matrix[i - 1, j]
                left = self._matrix[i, j - 1]
                diag = self._matrix[i - 1, j - 1]

                # Diagonal wins ties and any NaN comparison
                if up < diag and up < left:
                    prev_cost = up
                elif left < up and left < diag:
                    prev_cost = left
                else:
                    prev_cost = diag

                self._set_cell(i, j, index_cost + prev_cost)

        cost = float(self._matrix[len_1, len_2])
        logger.debug(f"DTW cost for {len_1}x{len_2} sequences: {cost}")
        return cost
