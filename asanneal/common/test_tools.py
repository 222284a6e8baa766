# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import enum
import json
import pytest
import numpy as np
from . import tools


class _Config:
    def __init__(self, downhill: bool = True, delta_param: float = 0.01, _hidden: int = 0) -> None:
        self.downhill = downhill
        self.delta_param = delta_param
        self._hidden = _hidden


class _Color(enum.Enum):
    red = 1


def test_different_from_defaults() -> None:
    config = _Config(delta_param=0.02, _hidden=3)
    assert tools.different_from_defaults(instance=config) == {"delta_param": 0.02}
    assert tools.different_from_defaults(instance=config, instance_dict={"downhill": False}) == {"downhill": False}


def test_different_from_defaults_mismatch() -> None:
    with pytest.raises(RuntimeError, match="Mismatch"):
        tools.different_from_defaults(instance=_Config(), instance_dict={"downhill": True}, check_mismatches=True)


def test_to_builtin() -> None:
    data = {
        "array": np.array([[1.0, 2.0]]),
        "scalar": np.float32(0.5),
        "count": np.int64(3),
        "nested": [(np.float64(1.0), _Color.red)],
        "inf": float("inf"),
    }
    out = tools.to_builtin(data)
    assert out == {"array": [[1.0, 2.0]], "scalar": 0.5, "count": 3, "nested": [[1.0, "red"]], "inf": float("inf")}
    assert isinstance(out["count"], int)
    json.dumps(out)  # must not raise
