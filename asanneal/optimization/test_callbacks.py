# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import time
import logging
from pathlib import Path
import numpy as np
from . import callbacks
from . import families
from .annealer import Annealer
from .randomsource import RandomStateSource
from .states import AnnealState


def _square(x: np.ndarray) -> float:
    return float(np.sum(x ** 2))


def _make(**tunables: float) -> Annealer:
    configured = families.ParametrizedAnneal(**tunables)  # type: ignore
    return configured([5.0, 1.0], [(-10.0, 10.0), (-2.0, 2.0)], random_source=RandomStateSource(12))


def test_log_parameters(tmp_path: Path) -> None:
    filepath = tmp_path / "logs.txt"
    annealer = _make(delta_param=0.05)
    annealer.register_callback("step", callbacks.ParametersLogger(filepath, append=False))
    annealer.optimize(_square, max_steps=20)
    logger = callbacks.ParametersLogger(filepath)
    logs = logger.load()
    assert len(logs) == 20
    assert logs[-1]["#steps"] == 20
    assert logs[0]["#state"] == "NeedToCompute"
    assert logs[-1]["#annealer#delta_param"] == "0.05"
    assert len(logs[-1]["x_best"]) == 2
    flat = logger.load_flattened()
    assert isinstance(flat[-1]["x#1"], float)
    assert "x" not in flat[-1]
    flat = logger.load_flattened(max_list_elements=1)
    assert "x#0" in flat[-1]
    assert "x#1" not in flat[-1]
    # deletion
    logger = callbacks.ParametersLogger(filepath, append=False)
    assert not logger.load()


def test_dump_callback(tmp_path: Path) -> None:
    filepath = tmp_path / "annealer.pkl"
    annealer = _make()
    annealer.register_callback("step", callbacks.AnnealerDump(filepath))
    annealer.optimize(_square, max_steps=3)
    loaded = Annealer.load(filepath)
    assert loaded.steps == 3
    np.testing.assert_array_equal(loaded.x_best, annealer.x_best)


def test_early_stopping() -> None:
    annealer = _make()
    annealer.register_callback("step", callbacks.EarlyStopping(lambda ann: ann.steps >= 4))
    annealer.register_callback("step", callbacks.EarlyStopping.timer(100))  # should not get triggered
    annealer.optimize(_square, max_steps=100)
    assert annealer.steps == 4
    assert annealer.state != AnnealState.ReadyToStop


def test_no_improvement_stopper() -> None:
    annealer = _make(f_x_best_repeat_max=1000)
    annealer.register_callback("step", callbacks.EarlyStopping.no_improvement_stopper(3))
    annealer.optimize(lambda x: 1.0, max_steps=100)
    # the first step sets the best value, which then never improves
    assert annealer.steps == 5


def test_duration_criterion() -> None:
    annealer = _make()
    crit = callbacks._DurationCriterion(0.01)
    assert not crit(annealer)
    assert not crit(annealer)
    time.sleep(0.02)
    assert crit(annealer)


def test_anneal_logger(caplog) -> None:
    logger = logging.getLogger(__name__)
    annealer = _make()
    annealer.register_callback(
        "step", callbacks.AnnealLogger(logger=logger, log_level=logging.INFO, log_interval_steps=2)
    )
    with caplog.at_level(logging.INFO):
        annealer.optimize(_square, max_steps=3)
    assert "After 2 steps, best point is" in caplog.text
    assert "After 1 steps" not in caplog.text


def test_anneal_printer(capsys) -> None:
    annealer = _make()
    annealer.register_callback("step", callbacks.AnnealPrinter(print_interval_steps=2))
    annealer.optimize(_square, max_steps=4)
    out = capsys.readouterr().out
    assert "After 2 steps" in out
    assert "After 4 steps" in out
    assert "After 3 steps" not in out
