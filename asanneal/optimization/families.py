# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import asanneal.common.typing as tp
from . import base
from . import randomsource as rs
from .annealer import Annealer


class ParametrizedAnneal(base.ConfiguredAnnealer):
    """Adaptive Simulated Annealing (also known as Very Fast Simulated Reannealing),
    with one temperature per dimension for generating candidates and a separate
    temperature for the acceptance test. Temperatures are periodically rescaled
    according to the sensitivity of the objective along each dimension (reannealing).

    Parameters
    ----------
    downhill: bool
        whether to minimize (True) or maximize (False) the objective
    temperature_ratio_scale: float
        ratio between the final and the initial temperature at the expected end of the schedule
    temperature_anneal_scale: float
        expected number of steps at which the final temperature is reached
    cost_parameter_scale_ratio: float
        ratio between the control parameters of the acceptance and generating temperatures
    acc_gen_reanneal_ratio: float
        reanneal when the recent acceptance measure falls below this threshold
    delta_param: float
        relative step used for estimating the tangents when reannealing
    objective_repeat_precision: float or None
        objective values closer than this are considered equal (machine epsilon if None)
    f_x_best_repeat_max: int
        stop after the best objective value is reached this number of times
    enable_reanneal: bool
        whether to reanneal at all
    reanneal_after_steps: int
        reanneal unconditionally after this number of steps since the last reanneal
    exit_at_T_f: bool
        stop once all the generating temperatures are below their final value
    limit_acceptances: int or None
        stop after this number of accepted candidates
    limit_generated: int or None
        stop after this number of generated candidates
    max_generation_attempts: int or None
        maximum number of draws for generating an in-range candidate (unbounded if None)
    param_names: sequence of str
        names of the parameters, exported along the diagnostics

    Notes
    -----
    Ingber, L. (1989). Very fast simulated re-annealing. Mathematical and Computer
    Modelling 12, 967-973.
    """

    # pylint: disable=unused-argument,too-many-arguments
    def __init__(
        self,
        *,
        downhill: bool = True,
        temperature_ratio_scale: float = 1e-5,
        temperature_anneal_scale: float = 100.0,
        cost_parameter_scale_ratio: float = 1.0,
        acc_gen_reanneal_ratio: float = 1e-6,
        delta_param: float = 0.01,
        objective_repeat_precision: tp.Optional[float] = None,
        f_x_best_repeat_max: int = 10,
        enable_reanneal: bool = True,
        reanneal_after_steps: int = 100,
        exit_at_T_f: bool = False,
        limit_acceptances: tp.Optional[int] = None,
        limit_generated: tp.Optional[int] = None,
        max_generation_attempts: tp.Optional[int] = None,
        param_names: tp.Sequence[str] = (),
    ) -> None:
        super().__init__(Annealer, locals())

    def __call__(
        self,
        initial_params: tp.ArrayLike,
        ranges: tp.Bounds,
        random_source: tp.Optional[rs.UniformSource] = None,
    ) -> Annealer:
        annealer = super().__call__(initial_params, ranges, random_source=random_source)
        if self._config["objective_repeat_precision"] is None:
            annealer.objective_repeat_precision = annealer.eps
        annealer.param_names = list(self._config["param_names"])
        return annealer


AdaptiveAnneal = ParametrizedAnneal().set_name("AdaptiveAnneal", register=True)
AdaptiveAnnealNoReanneal = ParametrizedAnneal(enable_reanneal=False).set_name(
    "AdaptiveAnnealNoReanneal", register=True
)
AdaptiveAnnealAscent = ParametrizedAnneal(downhill=False).set_name("AdaptiveAnnealAscent", register=True)
AdaptiveAnnealExitAtTf = ParametrizedAnneal(exit_at_T_f=True).set_name("AdaptiveAnnealExitAtTf", register=True)
