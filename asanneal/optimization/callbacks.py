# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import json
import time
import warnings
import datetime
import logging
from pathlib import Path
import numpy as np
import asanneal.common.typing as tp
from asanneal.common import errors
from asanneal.common import tools
from .annealer import Annealer
from .states import AnnealState
from . import base

global_logger = logging.getLogger(__name__)


class AnnealPrinter:
    """Printer to register as callback in an annealer, for printing
    the best point regularly.

    Parameters
    ----------
    print_interval_steps: int
        max number of steps before performing another print
    print_interval_seconds: float
        max number of seconds before performing another print
    """

    def __init__(self, print_interval_steps: int = 1, print_interval_seconds: float = 60.0) -> None:
        assert print_interval_steps > 0
        assert print_interval_seconds > 0
        self._print_interval_steps = int(print_interval_steps)
        self._print_interval_seconds = print_interval_seconds
        self._next_step = self._print_interval_steps
        self._next_time = time.time() + print_interval_seconds

    def __call__(self, annealer: Annealer) -> None:
        if time.time() >= self._next_time or annealer.steps >= self._next_step:
            self._next_time = time.time() + self._print_interval_seconds
            self._next_step = annealer.steps + self._print_interval_steps
            print(f"After {annealer.steps} steps, best point is {annealer.x_best} (f_x_best={annealer.f_x_best})")


class AnnealLogger:
    """Logger to register as callback in an annealer, for logging
    the best point regularly.

    Parameters
    ----------
    logger:
        given logger that callback will use to log
    log_level:
        log level that logger will write to
    log_interval_steps: int
        max number of steps before performing another log
    log_interval_seconds:
        max number of seconds before performing another log
    """

    def __init__(
        self,
        *,
        logger: logging.Logger = global_logger,
        log_level: int = logging.INFO,
        log_interval_steps: int = 1,
        log_interval_seconds: float = 60.0,
    ) -> None:
        assert log_interval_steps > 0
        assert log_interval_seconds > 0
        self._logger = logger
        self._log_level = log_level
        self._log_interval_steps = int(log_interval_steps)
        self._log_interval_seconds = log_interval_seconds
        self._next_step = self._log_interval_steps
        self._next_time = time.time() + log_interval_seconds

    def __call__(self, annealer: Annealer) -> None:
        if time.time() >= self._next_time or annealer.steps >= self._next_step:
            self._next_time = time.time() + self._log_interval_seconds
            self._next_step = annealer.steps + self._log_interval_steps
            self._logger.log(
                self._log_level,
                "After %s steps, best point is %s (f_x_best=%s)",
                annealer.steps,
                annealer.x_best,
                annealer.f_x_best,
            )


class ParametersLogger:
    """Logs the state of the annealer into a file (one json line per call)
    during annealing.

    Parameters
    ----------
    filepath: str or pathlib.Path
        the path to dump data to
    append: bool
        whether to append the file (otherwise it replaces it)

    Example
    -------

    .. code-block:: python

        logger = ParametersLogger(filepath)
        annealer.register_callback("step",  logger)
        annealer.optimize(objective)
        list_of_dict_of_data = logger.load()

    Note
    ----
    Arrays are converted to lists
    """

    def __init__(self, filepath: tp.PathLike, append: bool = True) -> None:
        self._session = datetime.datetime.now().strftime("%y-%m-%d %H:%M:%S")
        self._filepath = Path(filepath)
        if self._filepath.exists() and not append:
            self._filepath.unlink()
        self._filepath.parent.mkdir(exist_ok=True, parents=True)

    def __call__(self, annealer: Annealer) -> None:
        data = {
            "#session": self._session,
            "#steps": annealer.steps,
            "#state": annealer.state,
            "#k": annealer.k,
            "#k_cost": annealer.k_cost,
            "#num-generated": annealer.num_generated,
            "#num-accepted": annealer.num_accepted,
            "#f_x": annealer.f_x,
            "#f_x_best": annealer.f_x_best,
            "#T_k": annealer.T_k,
            "#T_cost": annealer.T_cost,
            "x": annealer.x,
            "x_best": annealer.x_best,
        }
        configured = getattr(annealer, "_configured_annealer", None)
        if isinstance(configured, base.ConfiguredAnnealer):
            data.update({"#annealer#" + x: str(y) for x, y in configured.config().items()})
        try:  # avoid bugging as much as possible
            with self._filepath.open("a") as f:
                f.write(json.dumps(tools.to_builtin(data)) + "\n")
        except Exception as e:  # pylint: disable=broad-except
            warnings.warn(f"Failing to json data: {e}")

    def load(self) -> tp.List[tp.Dict[str, tp.Any]]:
        """Loads data from the log file"""
        data: tp.List[tp.Dict[str, tp.Any]] = []
        if self._filepath.exists():
            with self._filepath.open("r") as f:
                for line in f.readlines():
                    data.append(json.loads(line))
        return data

    def load_flattened(self, max_list_elements: int = 24) -> tp.List[tp.Dict[str, tp.Any]]:
        """Loads data from the log file, and splits lists (arrays) into multiple arguments

        Parameters
        ----------
        max_list_elements: int
            Maximum number of elements displayed from the array, each element is given a
            unique id of type list_name#i0_i1_...
        """
        data = self.load()
        flat_data: tp.List[tp.Dict[str, tp.Any]] = []
        for element in data:
            list_keys = {key for key, val in element.items() if isinstance(val, list)}
            flat_data.append({key: val for key, val in element.items() if key not in list_keys})
            for key in list_keys:
                for k, (indices, value) in enumerate(np.ndenumerate(element[key])):
                    if k >= max_list_elements:
                        break
                    flat_data[-1][key + "#" + "_".join(str(i) for i in indices)] = value
        return flat_data


class AnnealerDump:
    """Dumps the annealer to a pickle file at every call.

    Parameters
    ----------
    filepath: str or Path
        path to the pickle file
    """

    def __init__(self, filepath: tp.PathLike) -> None:
        self._filepath = filepath

    def __call__(self, annealer: Annealer) -> None:
        annealer.dump(self._filepath)


class EarlyStopping:
    """Callback for stopping the :code:`optimize` method before the annealer
    is ready to stop.

    Parameters
    ----------
    stopping_criterion: func(annealer) -> bool
        function that takes the current annealer as input and returns True
        if the annealing must be stopped

    Note
    ----
    This callback can be registered on the "step" or the "reanneal" event; in both cases
    it is called once the annealer is back in a state expecting objective values.

    Example
    -------
    In the following code, the :code:`optimize` method will be stopped after the 4th step

    >>> early_stopping = asanneal.callbacks.EarlyStopping(lambda ann: ann.steps > 3)
    >>> annealer.register_callback("step", early_stopping)
    >>> annealer.optimize(objective, verbosity=2)
    """

    def __init__(self, stopping_criterion: tp.Callable[[Annealer], bool]) -> None:
        self.stopping_criterion = stopping_criterion

    def __call__(self, annealer: Annealer) -> None:
        if annealer.state == AnnealState.ReadyToStop:
            return  # already over
        if self.stopping_criterion(annealer):
            raise errors.AnnealEarlyStopping("Early stopping criterion is reached")

    @classmethod
    def timer(cls, max_duration: float) -> "EarlyStopping":
        """Early stop when max_duration seconds has been reached (from the first step)"""
        return cls(_DurationCriterion(max_duration))

    @classmethod
    def no_improvement_stopper(cls, tolerance_window: int) -> "EarlyStopping":
        """Early stop when f_x_best didn't improve during tolerance_window steps"""
        return cls(_ImprovementToleranceCriterion(tolerance_window))


class _DurationCriterion:
    def __init__(self, max_duration: float) -> None:
        self._start = float("inf")
        self._max_duration = max_duration

    def __call__(self, annealer: Annealer) -> bool:
        if np.isinf(self._start):
            self._start = time.time()
        return time.time() > self._start + self._max_duration


class _ImprovementToleranceCriterion:
    def __init__(self, tolerance_window: int) -> None:
        self._tolerance_window: int = tolerance_window
        self._best_value: tp.Optional[float] = None
        self._tolerance_count: int = 0

    def __call__(self, annealer: Annealer) -> bool:
        best = annealer.f_x_best if annealer.downhill else -annealer.f_x_best
        if not np.isfinite(best):
            return False
        if self._best_value is None:
            self._best_value = best
            return False
        if self._best_value <= best:
            self._tolerance_count += 1
        else:
            self._tolerance_count = 0
            self._best_value = best
        return self._tolerance_count > self._tolerance_window
