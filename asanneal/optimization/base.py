# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import asanneal.common.typing as tp
from asanneal.common import errors
from asanneal.common import tools
from asanneal.common.registry import Registry
from . import randomsource as rs
from .annealer import Annealer


registry: Registry["ConfiguredAnnealer"] = Registry()


class ConfiguredAnnealer:
    """Creates annealer-like instances with configuration.

    Parameters
    ----------
    AnnealerClass: type
        class of the annealer to configure
    config: dict
        dictionnary of all the tunables to set on the annealer before init

    Note
    ----
    This provides a default repr which can be bypassed through set_name
    """

    def __init__(self, AnnealerClass: tp.Type[Annealer], config: tp.Dict[str, tp.Any]) -> None:
        self._AnnealerClass = AnnealerClass
        config.pop("self", None)  # self comes from "locals()"
        config.pop("__class__", None)  # self comes from "locals()"
        self._config = config
        diff = tools.different_from_defaults(instance=self, instance_dict=config, check_mismatches=True)
        params = ", ".join(f"{x}={y!r}" for x, y in sorted(diff.items()))
        self.name = f"{self.__class__.__name__}({params})"
        # try instantiating for checking the tunable names
        self([0.0], [(-1.0, 1.0)])

    def config(self) -> tp.Dict[str, tp.Any]:
        return dict(self._config)

    def __call__(
        self,
        initial_params: tp.ArrayLike,
        ranges: tp.Bounds,
        random_source: tp.Optional[rs.UniformSource] = None,
    ) -> Annealer:
        """Creates an annealer with the configured tunables, ready for init

        Parameters
        ----------
        initial_params: array-like
            initial point, of size D
        ranges: sequence of (min, max) pairs
            the inclusive bounds for each of the D dimensions
        random_source: UniformSource
            source of uniform numbers in [0, 1)
        """
        annealer = self._AnnealerClass(initial_params, ranges, random_source=random_source)
        for name, value in self._config.items():
            if name.startswith("_") or not hasattr(annealer, name):
                raise errors.AnnealValueError(f"{name} is not a tunable of {self._AnnealerClass.__name__}")
            setattr(annealer, name, value)
        # hacky but convenient to have around:
        annealer._configured_annealer = self  # type: ignore
        return annealer

    def __repr__(self) -> str:
        return self.name

    def set_name(self, name: str, register: bool = False) -> "ConfiguredAnnealer":
        """Set a new representation for the instance"""
        self.name = name
        if register:
            registry.register_name(name, self)
        return self

    def load(self, filepath: tp.PathLike) -> Annealer:
        """Loads a pickle and checks that it is an Annealer."""
        return self._AnnealerClass.load(filepath)

    def __eq__(self, other: tp.Any) -> tp.Any:
        if self.__class__ == other.__class__:
            if self._config == other._config:
                return True
        return False
