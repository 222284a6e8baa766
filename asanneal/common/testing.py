# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import inspect
import typing as tp
try:
    import pytest
except ImportError:
    pass  # makes most of this module usable without pytest
import numpy as np


def assert_within_bounds(x: tp.Any, lower: tp.Any, upper: tp.Any, err_msg: str = "") -> None:
    """Asserts that all elements of x lie within [lower, upper] (bounds included),
    listing the offending dimensions otherwise.
    This function should only be used in tests.
    """
    x, lower, upper = (np.asarray(v, dtype=float) for v in (x, lower, upper))
    outside = np.where(np.logical_or(x < lower, x > upper))[0]
    if outside.size:
        details = ", ".join(f"x[{i}]={x[i]} not in [{lower[i]}, {upper[i]}]" for i in outside)
        raise AssertionError("\n".join(([err_msg] if err_msg else []) + [f"Out of bounds: {details}"]))


class parametrized:
    """Simplified decorator API for specifying named parametrized test with pytests
    (like with old "genty" package)

    Parameters
    ----------
    **kwargs:
        name of the argument is converted as id of the experiments, and the provided tuple
        contains a value for each of the arguments of the underlying function (in the definition order).
    """

    def __init__(self, **kwargs: tp.Tuple[tp.Any, ...]):
        self.ids = sorted(kwargs)
        self.params = tuple(kwargs[name] for name in self.ids)
        assert self.params
        self.num_params = len(self.params[0])
        assert all(isinstance(p, (tuple, list)) for p in self.params)
        assert all(self.num_params == len(p) for p in self.params[1:])

    def __call__(self, func: tp.Callable[..., None]) -> tp.Any:  # type is lost here :(
        names = list(inspect.signature(func).parameters.keys())
        assert len(names) == self.num_params, f"Parameter names: {names}"
        return pytest.mark.parametrize(
            ",".join(names), self.params if self.num_params > 1 else [p[0] for p in self.params], ids=self.ids)(func)
