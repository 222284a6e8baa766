# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Adaptive Simulated Annealing, as described in:

Ingber, L. (1989). Very fast simulated re-annealing. Mathematical and Computer
Modelling 12, 967-973.
"""

import sys
import json
import pickle
import logging
import warnings
from pathlib import Path
from numbers import Real
import numpy as np
import asanneal.common.typing as tp
from asanneal.common import errors
from asanneal.common import tools
from asanneal.common import vectors
from .states import AnnealState
from .states import StopCondition
from . import randomsource as rs

# pylint: disable=invalid-name,too-many-instance-attributes

logger = logging.getLogger(__name__)

X = tp.TypeVar("X", bound="Annealer")
_StepCallBack = tp.Callable[["Annealer"], None]
_CALLBACK_NAMES = ("step", "reanneal")


def load(cls: tp.Type[X], filepath: tp.PathLike) -> X:
    """Loads a pickle file and checks that it contains an annealer of the given class"""
    filepath = Path(filepath)
    with filepath.open("rb") as f:
        annealer = pickle.load(f)
    assert isinstance(annealer, cls), f"You should only load {cls} with this method (found {type(annealer)})"
    return annealer


def load_diagnostics(filepath: tp.PathLike) -> tp.Dict[str, tp.Any]:
    """Loads diagnostics saved with :code:`Annealer.save`"""
    with Path(filepath).open("r") as f:
        return json.load(f)  # type: ignore


class Annealer:
    """Adaptive Simulated Annealing on a box-constrained parameter space.

    The annealer never calls the objective function. Client code checks :code:`state`
    to know what to compute next, stores the objective values, and calls :code:`step()`:

    - :code:`AnnealState.NeedToCompute`: compute the objective at :code:`x_cand`
      and store it into :code:`f_x_cand`.
    - :code:`AnnealState.NeedToComputeSet`: a reanneal is ongoing, compute the objective
      at :code:`x` (into :code:`f_x`) and at :code:`x_plusdelta` (into :code:`f_x_plusdelta`).
    - :code:`AnnealState.ReadyToStop`: the run is over, :code:`reason_for_exit` tells why.

    Parameters
    ----------
    initial_params: array-like
        initial point, of size D (the dimension of the search space)
    ranges: sequence of (min, max) pairs
        the inclusive bounds for each of the D dimensions
    random_source: UniformSource
        source of uniform numbers in [0, 1), used for generating candidates and
        for the acceptance test (defaults to a randomly seeded RandomStateSource)
    dtype: numpy floating type
        type of the parameter vectors and temperatures

    Example
    -------
    .. code-block:: python

        annealer = Annealer([5.0], [(-10.0, 10.0)], random_source=RandomStateSource(12))
        annealer.f_x_best_repeat_max = 20  # tunables must be set before init
        annealer.init()
        while annealer.state != AnnealState.ReadyToStop:
            if annealer.state == AnnealState.NeedToCompute:
                annealer.f_x_cand = objective(annealer.x_cand)
            elif annealer.state == AnnealState.NeedToComputeSet:
                annealer.f_x = objective(annealer.x)
                annealer.f_x_plusdelta = objective(annealer.x_plusdelta)
            annealer.step()

    Note
    ----
    An annealer instance is not thread-safe, and must be driven from one thread only.
    """

    # no reannealing within this number of steps of the previous reanneal
    min_steps_to_reanneal = 10

    def __init__(
        self,
        initial_params: tp.ArrayLike,
        ranges: tp.Bounds,
        random_source: tp.Optional[rs.UniformSource] = None,
        dtype: tp.Any = np.float64,
    ) -> None:
        self.dtype = np.dtype(dtype)
        if not np.issubdtype(self.dtype, np.floating):
            raise errors.AnnealTypeError(f"dtype must be a floating point type, got {self.dtype}")
        self.eps = float(np.finfo(self.dtype).eps)
        params = np.array(initial_params, dtype=self.dtype)
        bounds = np.array(ranges, dtype=self.dtype)
        if params.ndim != 1 or not params.size:
            raise errors.AnnealValueError(f"initial_params must be a non-empty 1d vector, got shape {params.shape}")
        if bounds.ndim != 2 or bounds.shape[1] != 2:
            raise errors.AnnealValueError(f"ranges must be a sequence of (min, max) pairs, got shape {bounds.shape}")
        if bounds.shape[0] != params.size:
            raise errors.DimensionMismatchError(
                f"Got {params.size} initial parameters but {bounds.shape[0]} parameter ranges"
            )
        self.D = params.size
        self.range_min = bounds[:, 0].copy()  # A
        self.range_max = bounds[:, 1].copy()  # B
        for bound in (self.range_min, self.range_max):
            bound.flags.writeable = False
        if np.any(self.range_min > self.range_max):
            raise errors.AnnealValueError(f"Range minima {self.range_min} must not exceed maxima {self.range_max}")
        if np.any(self.range_min == self.range_max):
            warnings.warn(
                "Zero-width parameter range: candidate generation may never succeed",
                errors.InefficientSettingsWarning,
            )
        if not vectors.within(params, self.range_min, self.range_max):
            raise errors.AnnealValueError(f"initial_params {params} are not within the parameter ranges")
        self.rdelta = self.range_max - self.range_min
        self.rmeans = (self.range_max + self.range_min) / 2
        self.random_source: rs.UniformSource = rs.RandomStateSource() if random_source is None else random_source

        # tunables, to be set before calling init()
        self.downhill = True
        self.temperature_ratio_scale = 1e-5  # m = -log(temperature_ratio_scale)
        self.temperature_anneal_scale = 100.0  # n = log(temperature_anneal_scale)
        self.cost_parameter_scale_ratio = 1.0
        self.acc_gen_reanneal_ratio = 1e-6
        self.delta_param = 0.01  # tangents are estimated at x * (1 +/- delta_param)
        self.objective_repeat_precision = self.eps
        self.f_x_best_repeat_max = 10
        self.enable_reanneal = True
        self.reanneal_after_steps = 100
        self.exit_at_T_f = False
        self.limit_acceptances: tp.Optional[int] = None
        self.limit_generated: tp.Optional[int] = None
        self.max_generation_attempts: tp.Optional[int] = None
        self.param_names: tp.List[str] = []

        # points and objective values
        self.x_cand = params.copy()
        self.x = params.copy()
        self.x_best = params.copy()
        self.x_plusdelta = params.copy()
        self._f_x_cand = 0.0
        self._f_x = 0.0
        self._f_x_plusdelta = 0.0
        self.f_x_best = 0.0
        self.f_x_best_repeats = 0

        # statistics
        self.steps = 0
        self.num_generated = 0
        self.num_generated_best = 0
        self.num_generated_recently = 0
        self.num_improved = 0
        self.num_worse = 0
        self.num_worse_accepted = 0
        self.num_accepted = 0
        self.num_accepted_best = 0
        self.num_accepted_recently = 0
        self.param_hist_accepted: tp.List[np.ndarray] = []
        self.f_param_hist_accepted: tp.List[float] = []
        self.param_hist_rejected: tp.List[np.ndarray] = []
        self.f_param_hist_rejected: tp.List[float] = []

        # schedule (computed by init)
        self.k = 1
        self.k_f = 0
        self.k_r = 0
        self.k_cost = 0
        ones = vectors.filled(1.0, self.D, self.dtype)
        self.T_0 = ones.copy()
        self.T_k = ones.copy()
        self.T_f = ones.copy()
        self.m = ones.copy()
        self.n = ones.copy()
        self.c = ones.copy()
        self.c_cost = ones.copy()
        self.T_cost_0 = ones.copy()
        self.T_cost = ones.copy()
        self.tangents = ones.copy()

        self._callbacks: tp.Dict[str, tp.List[_StepCallBack]] = {}
        self.reason_for_exit = StopCondition.Unknown
        self.state = AnnealState.NeedToInit

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(D={self.D}, state={self.state.name}, steps={self.steps}, "
            f"f_x_best={self.f_x_best})"
        )

    # # # # # objective values, provided by the client # # # # #

    @property
    def f_x_cand(self) -> float:
        """float: objective value at x_cand (to set when state is NeedToCompute)"""
        return self._f_x_cand

    @f_x_cand.setter
    def f_x_cand(self, value: tp.FloatLoss) -> None:
        self._f_x_cand = self._check_objective_value(value, "f_x_cand")

    @property
    def f_x(self) -> float:
        """float: objective value at x (to set when state is NeedToComputeSet)"""
        return self._f_x

    @f_x.setter
    def f_x(self, value: tp.FloatLoss) -> None:
        self._f_x = self._check_objective_value(value, "f_x")

    @property
    def f_x_plusdelta(self) -> float:
        """float: objective value at x_plusdelta (to set when state is NeedToComputeSet)"""
        return self._f_x_plusdelta

    @f_x_plusdelta.setter
    def f_x_plusdelta(self, value: tp.FloatLoss) -> None:
        self._f_x_plusdelta = self._check_objective_value(value, "f_x_plusdelta")

    @staticmethod
    def _check_objective_value(value: tp.Any, name: str) -> float:
        if isinstance(value, np.ndarray) and value.size == 1:
            value = value.item()
        if not isinstance(value, (Real, float)):
            raise errors.AnnealTypeError(f"{name} only supports float values but got {value} (type: {type(value)})")
        value = float(value)
        if not np.isfinite(value):
            warnings.warn(f"Setting {name} to {value}", errors.BadLossWarning)
        return value

    @property
    def num_rejected(self) -> int:
        """int: number of rejected candidates"""
        return len(self.param_hist_rejected)

    # # # # # protocol # # # # #

    def register_callback(self, name: str, callback: _StepCallBack) -> None:
        """Adds a callback called with the annealer as only argument, either at the end of
        each :code:`step` ("step") or each time a reanneal completes ("reanneal").
        """
        if name not in _CALLBACK_NAMES:
            raise errors.AnnealValueError(f"Callbacks can only be registered for {_CALLBACK_NAMES} (not {name})")
        self._callbacks.setdefault(name, []).append(callback)

    def remove_all_callbacks(self) -> None:
        """Removes all registered callables"""
        self._callbacks = {}

    def _call_callbacks(self, name: str) -> None:
        for callback in self._callbacks.get(name, []):
            callback(self)

    def init(self) -> None:
        """Computes the schedule constants from the tunables. Must be called exactly once,
        after construction and after any change of the tunables.
        """
        if self.state != AnnealState.NeedToInit:
            raise errors.ProtocolError(f"init() can only be called once (current state: {self.state.name})")
        if self.temperature_ratio_scale <= 0 or self.temperature_anneal_scale <= 0:
            raise errors.AnnealValueError("temperature_ratio_scale and temperature_anneal_scale must be positive")
        self.f_x_best = float("inf") if self.downhill else float("-inf")
        self._f_x = self.f_x_best
        self._f_x_cand = self.f_x_best
        D = self.D
        self.T_0 = vectors.filled(1.0, D, self.dtype)
        self.T_k = self.T_0.copy()
        self.m = vectors.filled(-np.log(self.temperature_ratio_scale), D, self.dtype)
        self.n = vectors.filled(np.log(self.temperature_anneal_scale), D, self.dtype)
        # control parameter
        self.c = self.m * np.exp(-self.n / D)
        self.T_f = self.T_0 * np.exp(-self.m)
        self.k_f = self._to_count(np.mean(np.exp(self.n)))
        self.tangents = vectors.filled(1.0, D, self.dtype)
        self.c_cost = self.c * self.cost_parameter_scale_ratio
        self.T_cost_0 = self.c_cost.copy()
        self.T_cost = self.c_cost.copy()
        logger.debug("Initialized annealer with D=%s, c=%s, T_f=%s, k_f=%s", D, self.c, self.T_f, self.k_f)
        self.state = AnnealState.NeedToCompute

    def step(self) -> None:
        """Advances the algorithm by one step, consuming the objective value(s) provided
        by the client since the previous step.
        """
        if self.state in (AnnealState.Unknown, AnnealState.NeedToInit):
            raise errors.ProtocolError("init() must be called before step()")
        if self.state == AnnealState.ReadyToStop:
            raise errors.ProtocolError(
                f"The annealer is ready to stop ({self.reason_for_exit.name}), step() must not be called anymore"
            )
        self.steps += 1
        if self._stop_check():
            self.state = AnnealState.ReadyToStop
            self._call_callbacks("step")
            return
        resolving_reanneal = self.state == AnnealState.NeedToComputeSet
        reannealed = False
        if resolving_reanneal:
            reannealed = self._complete_reanneal()
            self.state = AnnealState.NeedToStep
        self._cooling_schedule()
        # the candidate generated before a reanneal was never evaluated
        if not resolving_reanneal:
            self._acceptance_check()
        self._generate_next()
        self.k += 1
        self.k_r += 1
        if self.enable_reanneal and self._reanneal_test():
            self.state = AnnealState.NeedToComputeSet
        else:
            self.state = AnnealState.NeedToCompute
        if reannealed:
            self._call_callbacks("reanneal")
        self._call_callbacks("step")

    def accepted_vs_generated(self) -> float:
        """Heuristic measure of the recent acceptance rate, used to trigger reannealing.
        This is num_accepted_recently + 1 / (num_generated_recently + 1), which is not a
        normalized ratio and can exceed 1.
        """
        return self.num_accepted_recently + 1.0 / (self.num_generated_recently + 1.0)

    # # # # # algorithm internals # # # # #

    @staticmethod
    def _to_count(value: tp.Any) -> int:
        """Rounds a (possibly huge) float into a non-negative step count"""
        value = float(value)
        if np.isnan(value):
            raise errors.AnnealRuntimeError("Step count computation led to NaN")
        return int(round(min(max(0.0, value), float(sys.maxsize))))

    def _schedule(self, start: np.ndarray, control: np.ndarray, count: int) -> np.ndarray:
        temp = start * np.exp(-control * count ** (1.0 / self.D))
        return vectors.floor_at(temp, self.eps)

    def _cooling_schedule(self) -> None:
        # T_k (T_i(k) in the papers) drives parameter generation
        self.T_k = self._schedule(self.T_0, self.c, self.k)
        # T_cost is the acceptance temperature
        self.T_cost = self._schedule(self.T_cost_0, self.c_cost, self.k_cost)
        logger.debug(
            "T_i(k=%s[%s]) = %s [T_f=%s]; T_cost(k_cost=%s) = %s, f_x_best = %s",
            self.k,
            self.k_f,
            float(np.mean(self.T_k)),
            float(np.mean(self.T_f)),
            self.k_cost,
            float(np.mean(self.T_cost)),
            self.f_x_best,
        )

    def _is_better(self, value: float, reference: float, margin: float = 0.0) -> bool:
        if self.downhill:
            return value - reference + margin < 0
        return value - reference - margin > 0

    def _acceptance_probability(self, worsening: float) -> float:
        exponent = -worsening / (self.eps + float(np.mean(self.T_cost)))
        if np.isnan(exponent):
            return float("nan")  # never accepted
        return 1.0 if exponent >= 0 else float(np.exp(exponent))

    def _acceptance_check(self) -> bool:
        f_x_cand = self._f_x_cand
        candidate_is_better = self._is_better(f_x_cand, self._f_x)
        if candidate_is_better:
            self.num_improved += 1
        else:
            self.num_worse += 1
        worsening = f_x_cand - self._f_x if self.downhill else self._f_x - f_x_cand
        p = self._acceptance_probability(worsening)
        u = self.random_source.next()
        accepted = not np.isnan(p) and p >= u
        if accepted and not candidate_is_better:
            self.num_worse_accepted += 1
        if accepted:
            self.k_cost += 1
            self.num_accepted += 1
            self.num_accepted_recently += 1
            if abs(f_x_cand - self.f_x_best) <= self.objective_repeat_precision:
                self.f_x_best_repeats += 1
            if self._is_better(f_x_cand, self.f_x_best, margin=self.objective_repeat_precision):
                self.f_x_best_repeats = 0
                self.x_best = self.x_cand.copy()
                self.f_x_best = f_x_cand
                self.num_accepted_best = self.num_accepted
                self.num_generated_best = self.num_generated
                self.num_accepted_recently = 0
                self.num_generated_recently = 0
            self.x = self.x_cand.copy()
            self._f_x = f_x_cand
            self.param_hist_accepted.append(self.x.copy())
            self.f_param_hist_accepted.append(self._f_x)
        else:
            self.param_hist_rejected.append(self.x.copy())
            self.f_param_hist_rejected.append(self._f_x)
        logger.debug(
            "Candidate is %s, p = %s, accepted? %s, k_cost = %s",
            "better" if candidate_is_better else "worse/same",
            p,
            accepted,
            self.k_cost,
        )
        return accepted

    def _generate_parameter(self, x_start: np.ndarray) -> np.ndarray:
        """Draws a point around x_start, with steps scaled by T_k, until it falls
        within the parameter ranges
        """
        attempts = 0
        while True:
            attempts += 1
            u = np.asarray(self.random_source.vector(self.D), dtype=self.dtype)
            u2 = np.abs(u * 2 - 1)
            sign_u = vectors.signum(u - 0.5)
            y = sign_u * self.T_k * ((1 + 1 / self.T_k) ** u2 - 1)
            x_new = x_start + y
            if vectors.within(x_new, self.range_min, self.range_max):
                return x_new
            if self.max_generation_attempts is not None and attempts >= self.max_generation_attempts:
                raise errors.GenerationError(
                    f"Could not generate a candidate within the ranges in {attempts} attempts"
                )

    def _generate_next(self) -> None:
        self.x_cand = self._generate_parameter(self.x)
        self.num_generated += 1
        self.num_generated_recently += 1

    def _generate_delta_parameter(self, x_start: np.ndarray) -> np.ndarray:
        """Point at x_start * (1 + delta_param), flipping to x_start * (1 - delta_param)
        on the dimensions where the former is out of range, and clipped to the ranges
        """
        plusminus = vectors.filled(1.0, self.D, self.dtype)
        x_new = x_start * (1 + plusminus * self.delta_param)
        outside = np.logical_or(x_new > self.range_max, x_new < self.range_min)
        plusminus[outside] = -1.0
        x_new = x_start * (1 + plusminus * self.delta_param)
        return np.clip(x_new, self.range_min, self.range_max)

    def _reanneal_test(self) -> bool:
        if self.k_r < self.min_steps_to_reanneal:
            return False
        ratio = self.accepted_vs_generated()
        if self.k_r < self.reanneal_after_steps and ratio >= self.acc_gen_reanneal_ratio:
            return False
        if ratio < self.acc_gen_reanneal_ratio:
            self.num_accepted_recently = 0
            self.num_generated_recently = 0
        # reannealing restarts from the best point
        self.x = self.x_best.copy()
        self._f_x = self.f_x_best
        self.x_plusdelta = self._generate_delta_parameter(self.x)
        logger.info("Reannealing at step %s (k=%s, k_r=%s)", self.steps, self.k, self.k_r)
        return True

    def _terminate(self, reason: StopCondition) -> None:
        self.reason_for_exit = reason
        self.state = AnnealState.ReadyToStop

    def _complete_reanneal(self) -> bool:
        """Rescales the temperatures and step counts from the tangents of the objective
        at x, estimated with the client-provided f_x and f_x_plusdelta.
        Returns False if the rescaling was postponed because of a zero tangent.
        """
        eps = self.eps
        self.tangents = (self._f_x_plusdelta - self._f_x) / (self.x_plusdelta - self.x + eps)
        if vectors.has_nan_or_inf(self.tangents):
            self._terminate(StopCondition.invalid_tangent)
            raise errors.InvalidTangentError(f"NaN or inf in tangents: {self.tangents}")
        if vectors.has_zero(self.tangents):
            # delta_param was too small to change the objective: retry at the next reanneal
            logger.info(
                "Tangents had a zero, so doubling delta_param from %s to %s", self.delta_param, 2 * self.delta_param
            )
            self.delta_param *= 2
            return False
        abs_tangents = np.abs(self.tangents)
        max_tangent = float(np.max(abs_tangents))
        abs_tangents[abs_tangents < eps] = max_tangent  # no update for these dimensions
        T_re = np.abs(self.T_k * (max_tangent / abs_tangents))
        if not vectors.all_greater(T_re, 0):
            self._terminate(StopCondition.non_positive_temperature)
            raise errors.NonPositiveTemperatureError(f"Can't update k based on new temperatures {T_re}")
        k_re = self._to_count(np.mean((np.log(self.T_0 / T_re) / self.c) ** self.D))
        logger.info(
            "Reanneal done. T_i(k): %.5g --> %.5g and k: %s --> %s",
            float(np.mean(self.T_k)),
            float(np.mean(T_re)),
            self.k,
            k_re,
        )
        self.k = k_re
        self.T_k = T_re
        # cost temperature
        f_x, f_x_best = self._f_x, self.f_x_best
        cost_scale = max(abs(f_x), abs(f_x_best), abs(f_x_best - f_x), eps)
        self.T_cost_0 = vectors.cap_at(self.T_cost_0, cost_scale)
        reference = vectors.cap_at(self.T_cost_0, max(abs(f_x_best - f_x), float(np.max(self.T_cost)), eps))
        log_ratio = np.abs(np.log((self.T_cost_0 + eps) / reference))
        self.k_cost = self._to_count(eps + np.mean((log_ratio / self.c_cost) ** self.D))
        self.T_cost = self._schedule(self.T_cost_0, self.c_cost, self.k_cost)
        self.f_x_best_repeats = 0
        self.k_r = 0
        return True

    def _stop_check(self) -> bool:
        reason: tp.Optional[StopCondition] = None
        if self.exit_at_T_f and vectors.all_less(self.T_k, self.T_f):
            reason = StopCondition.T_k_less_than_T_f
        elif self.T_k[0] <= self.eps:
            reason = StopCondition.T_k_less_than_epsilon
        elif self.T_cost[0] <= self.eps:
            reason = StopCondition.T_cost_less_than_epsilon
        elif self.f_x_best_repeats >= self.f_x_best_repeat_max:
            reason = StopCondition.f_x_best_repeated
        elif self.limit_acceptances is not None and self.num_accepted >= self.limit_acceptances:
            reason = StopCondition.num_accepted_limit
        elif self.limit_generated is not None and self.num_generated >= self.limit_generated:
            reason = StopCondition.num_generated_limit
        if reason is None:
            return False
        self.reason_for_exit = reason
        logger.info("Stopping after %s steps (%s), f_x_best = %s", self.steps, reason.name, self.f_x_best)
        return True

    # # # # # driver and outputs # # # # #

    def optimize(
        self,
        objective_function: tp.Objective,
        max_steps: tp.Optional[int] = None,
        verbosity: int = 0,
    ) -> np.ndarray:
        """Runs the annealing protocol with the provided objective function, calling init
        if need be, until the annealer is ready to stop, max_steps calls to :code:`step`
        have been made, or an early stopping callback is triggered.

        Parameters
        ----------
        objective_function: callable
            function taking a 1d numpy array and returning a float
        max_steps: int or None
            maximum number of calls to :code:`step` (unbounded if None)
        verbosity: int
            print information about the run (0: None, 1: end of run, 2: every step)

        Returns
        -------
        np.ndarray
            the best parameters found (x_best)
        """
        if self.state == AnnealState.NeedToInit:
            self.init()
        num_steps = 0
        while self.state != AnnealState.ReadyToStop:
            if max_steps is not None and num_steps >= max_steps:
                break
            if self.state == AnnealState.NeedToComputeSet:
                self.f_x = objective_function(self.x.copy())
                self.f_x_plusdelta = objective_function(self.x_plusdelta.copy())
            else:
                self.f_x_cand = objective_function(self.x_cand.copy())
            try:
                self.step()
            except errors.AnnealEarlyStopping:
                logger.info("Early stopping after %s steps", self.steps)
                break
            num_steps += 1
            if verbosity > 1:
                print(f"Step {self.steps}: state {self.state.name}, f_x = {self.f_x}, f_x_best = {self.f_x_best}")
        if verbosity:
            print(f"Stopped in state {self.state.name} ({self.reason_for_exit.name}) after {self.steps} steps")
            print(f"Best point is {self.x_best} with objective {self.f_x_best}")
        return self.x_best.copy()

    def diagnostics(self) -> tp.Dict[str, tp.Any]:
        """Run history, best point and statistics, as json-serializable data"""
        data: tp.Dict[str, tp.Any] = {
            "param_hist_accepted": self.param_hist_accepted,
            "f_param_hist_accepted": self.f_param_hist_accepted,
            "param_hist_rejected": self.param_hist_rejected,
            "f_param_hist_rejected": self.f_param_hist_rejected,
            "x_best": self.x_best,
        }
        data.update({f"param_name_{i}": name for i, name in enumerate(self.param_names, 1)})
        data.update(
            f_x_best=self.f_x_best,
            num_generated=self.num_generated,
            num_worse=self.num_worse,
            num_worse_accepted=self.num_worse_accepted,
            num_improved=self.num_improved,
            num_generated_best=self.num_generated_best,
            num_accepted=self.num_accepted,
            num_accepted_best=self.num_accepted_best,
            steps=self.steps,
            reason_for_exit=self.reason_for_exit,
        )
        return tools.to_builtin(data)  # type: ignore

    def save(self, filepath: tp.PathLike) -> None:
        """Saves the diagnostics (see :code:`diagnostics`) to a json file"""
        filepath = Path(filepath)
        filepath.parent.mkdir(exist_ok=True, parents=True)
        with filepath.open("w") as f:
            json.dump(self.diagnostics(), f)

    def dump(self, filepath: tp.PathLike) -> None:
        """Pickles the annealer into a file, so that the run can be resumed"""
        filepath = Path(filepath)
        with filepath.open("wb") as f:
            pickle.dump(self, f)

    @classmethod
    def load(cls: tp.Type[X], filepath: tp.PathLike) -> X:
        """Loads a pickle and checks that the class is correct."""
        return load(cls, filepath)
