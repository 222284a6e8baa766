# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

"""Uniform random sources which can be injected into an annealer.

The annealer only needs uniform draws in [0, 1): a scalar one for the acceptance
test and a vector one for candidate generation. Seeding or replaying the source
makes a run fully deterministic.
"""

import numpy as np
import asanneal.common.typing as tp
from asanneal.common import errors


class UniformSource(tp.Protocol):
    """Protocol for sources of uniform random numbers in [0, 1)"""

    # pylint: disable=pointless-statement

    def next(self) -> float:
        ...

    def vector(self, size: int) -> np.ndarray:
        ...


class RandomStateSource:
    """Uniform source backed by a numpy RandomState

    Parameters
    ----------
    seed: int, RandomState or None
        either a seed, an existing random state (which is then shared), or None
        for a randomly seeded state
    """

    def __init__(self, seed: tp.Union[None, int, np.random.RandomState] = None) -> None:
        if isinstance(seed, np.random.RandomState):
            self.random_state = seed
        else:
            self.random_state = np.random.RandomState(seed)

    def next(self) -> float:
        return float(self.random_state.uniform())

    def vector(self, size: int) -> np.ndarray:
        return self.random_state.uniform(size=size)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"


class ReplaySource:
    """Uniform source replaying a predefined sequence of values, cycling
    through it when exhausted. Draws are taken in order, whether scalar or vector.
    This is mostly useful for testing.
    """

    def __init__(self, values: tp.Iterable[float]) -> None:
        self._values = [float(v) for v in values]
        if not self._values:
            raise errors.AnnealValueError("ReplaySource requires at least one value")
        bad = [v for v in self._values if not 0 <= v < 1]
        if bad:
            raise errors.AnnealValueError(f"Uniform values must lie in [0, 1), got {bad}")
        self._index = 0

    @property
    def num_draws(self) -> int:
        """int: number of values drawn so far"""
        return self._index

    def next(self) -> float:
        value = self._values[self._index % len(self._values)]
        self._index += 1
        return value

    def vector(self, size: int) -> np.ndarray:
        return np.array([self.next() for _ in range(size)])
