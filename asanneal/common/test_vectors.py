# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
import numpy as np
from . import testing
from . import vectors


def test_filled() -> None:
    out = vectors.filled(2.5, 3, dtype=np.float32)
    assert out.dtype == np.float32
    np.testing.assert_array_equal(out, [2.5, 2.5, 2.5])


def test_signum() -> None:
    np.testing.assert_array_equal(vectors.signum(np.array([-0.3, 0.0, 12.0])), [-1, 0, 1])


def test_floor_and_cap() -> None:
    vector = np.array([-1.0, 1e-20, 3.0])
    eps = np.finfo(float).eps
    np.testing.assert_array_equal(vectors.floor_at(vector, eps), [eps, eps, 3.0])
    np.testing.assert_array_equal(vectors.cap_at(vector, 1.0), [-1.0, 1e-20, 1.0])


@testing.parametrized(
    inside=([0.5, 1.0], True),
    lower_bound=([-1.0, 0.0], True),
    upper_bound=([1.0, 2.0], True),
    below=([-1.01, 1.0], False),
    above=([0.0, 2.5], False),
)
def test_within(vector: tp.List[float], expected: bool) -> None:
    assert vectors.within(np.array(vector), np.array([-1.0, 0.0]), np.array([1.0, 2.0])) is expected


def test_all_comparisons() -> None:
    vector = np.array([1.0, 2.0])
    assert vectors.all_less(vector, 3.0)
    assert not vectors.all_less(vector, np.array([3.0, 2.0]))
    assert vectors.all_greater(vector, 0.0)
    assert not vectors.all_greater(vector, 1.0)


@testing.parametrized(
    finite=([1.0, -2.0], False, False),
    nan=([np.nan, 1.0], True, False),
    inf=([1.0, -np.inf], True, False),
    zero=([0.0, 1.0], False, True),
)
def test_has_nan_or_inf_and_zero(vector: tp.List[float], nan_or_inf: bool, zero: bool) -> None:
    assert vectors.has_nan_or_inf(np.array(vector)) is nan_or_inf
    assert vectors.has_zero(np.array(vector)) is zero
