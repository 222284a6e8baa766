# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Elementwise helpers on 1d numpy arrays, as used by the annealer.
Comparisons of a vector with a vector or a scalar are reduced to a single
boolean (True only if the comparison holds for all elements).
"""

import numpy as np
import asanneal.common.typing as tp


def filled(value: float, dimension: int, dtype: tp.Any = np.float64) -> np.ndarray:
    """Vector of size dimension, all elements set to value"""
    return np.full(dimension, value, dtype=dtype)


def signum(vector: np.ndarray) -> np.ndarray:
    """-1, 0 or 1 for each element (0 for exact zeros)"""
    return np.sign(vector)


def floor_at(vector: np.ndarray, floor: float) -> np.ndarray:
    """Elementwise maximum with a scalar floor"""
    return np.maximum(vector, floor)


def cap_at(vector: np.ndarray, cap: float) -> np.ndarray:
    """Elementwise minimum with a scalar cap"""
    return np.minimum(vector, cap)


def within(vector: np.ndarray, lower: np.ndarray, upper: np.ndarray) -> bool:
    """Whether all elements lie in [lower, upper], bounds included"""
    return bool(np.all(vector >= lower) and np.all(vector <= upper))


def all_less(vector: np.ndarray, other: tp.Union[float, np.ndarray]) -> bool:
    return bool(np.all(vector < other))


def all_greater(vector: np.ndarray, other: tp.Union[float, np.ndarray]) -> bool:
    return bool(np.all(vector > other))


def has_nan_or_inf(vector: np.ndarray) -> bool:
    return not bool(np.all(np.isfinite(vector)))


def has_zero(vector: np.ndarray) -> bool:
    return bool(np.any(vector == 0))
