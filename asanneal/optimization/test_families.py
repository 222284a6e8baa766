# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from pathlib import Path
import pytest
import numpy as np
import asanneal as asa
from asanneal.common import errors
from asanneal.common import testing
from . import base
from . import families
from .annealer import Annealer
from .randomsource import RandomStateSource
from .states import StopCondition


def test_registry() -> None:
    names = {"AdaptiveAnneal", "AdaptiveAnnealNoReanneal", "AdaptiveAnnealAscent", "AdaptiveAnnealExitAtTf"}
    assert names <= set(base.registry)
    assert asa.optimization.registry is base.registry
    assert repr(base.registry["AdaptiveAnnealAscent"]) == "AdaptiveAnnealAscent"


def test_configured_repr_and_eq() -> None:
    configured = families.ParametrizedAnneal(delta_param=0.05, downhill=False)
    assert repr(configured) == "ParametrizedAnneal(delta_param=0.05, downhill=False)"
    assert configured == families.ParametrizedAnneal(downhill=False, delta_param=0.05)
    assert configured != families.ParametrizedAnneal(downhill=False)
    assert configured.config()["reanneal_after_steps"] == 100


def test_configured_annealer_tunables() -> None:
    configured = families.ParametrizedAnneal(reanneal_after_steps=50, param_names=["a", "b"])
    annealer = configured([1.0, 2.0], [(-3.0, 3.0)] * 2)
    assert annealer.reanneal_after_steps == 50
    assert annealer.param_names == ["a", "b"]
    assert annealer.objective_repeat_precision == annealer.eps
    assert annealer._configured_annealer is configured  # type: ignore
    annealer = families.ParametrizedAnneal(objective_repeat_precision=1e-3)([1.0], [(-3.0, 3.0)])
    assert annealer.objective_repeat_precision == 1e-3


def test_unknown_tunable() -> None:
    class _WrongConfig(base.ConfiguredAnnealer):
        # pylint: disable=unused-argument
        def __init__(self, *, blublu: int = 12) -> None:
            super().__init__(Annealer, locals())

    with pytest.raises(errors.AnnealValueError):
        _WrongConfig()


@testing.parametrized(
    descent=("AdaptiveAnneal", 1.0),
    no_reanneal=("AdaptiveAnnealNoReanneal", 1.0),
    ascent=("AdaptiveAnnealAscent", -1.0),
)
def test_registered_annealers(name: str, sign: float) -> None:
    annealer = base.registry[name]([5.0], [(-10.0, 10.0)], random_source=RandomStateSource(12))
    x_best = annealer.optimize(lambda x: sign * float(x[0] ** 2), max_steps=2000)
    assert abs(x_best[0]) < 1e-2
    assert annealer._configured_annealer is base.registry[name]  # type: ignore


def test_exit_at_final_temperature_preset() -> None:
    annealer = base.registry["AdaptiveAnnealExitAtTf"]([5.0], [(-10.0, 10.0)], random_source=RandomStateSource(1))
    annealer.optimize(lambda x: float(np.abs(x[0])), max_steps=2000)
    assert annealer.reason_for_exit in (StopCondition.T_k_less_than_T_f, StopCondition.f_x_best_repeated)


def test_configured_load(tmp_path: Path) -> None:
    filepath = tmp_path / "annealer.pkl"
    configured = base.registry["AdaptiveAnneal"]
    annealer = configured([5.0], [(-10.0, 10.0)], random_source=RandomStateSource(12))
    annealer.optimize(lambda x: float(x[0] ** 2), max_steps=10)
    annealer.dump(filepath)
    loaded = configured.load(filepath)
    assert loaded.steps == 10
