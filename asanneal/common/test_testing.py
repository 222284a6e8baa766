# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
from . import testing


@testing.parametrized(
    inside=([0.0, 1.0], ""),
    on_bounds=([-1.0, 2.0], ""),
    below=([-1.5, 1.0], "x[0]=-1.5 not in [-1.0, 1.0]"),
    both=([3.0, -4.0], "x[0]=3.0 not in [-1.0, 1.0], x[1]=-4.0 not in [0.0, 2.0]"),
)
def test_assert_within_bounds(x: tp.List[float], message: str) -> None:
    try:
        testing.assert_within_bounds(x, [-1.0, 0.0], [1.0, 2.0])
    except AssertionError as error:
        if not message:
            raise AssertionError("An error has been raised while it should not.")
        assert message in error.args[0]
    else:
        if message:
            raise AssertionError("An error should have been raised.")
