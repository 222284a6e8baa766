# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import typing as tp
from unittest import TestCase
import numpy as np
from . import registry


class RegistryTests(TestCase):

    def test_register_name(self) -> None:
        configs: registry.Registry[tp.Dict[str, float]] = registry.Registry()
        other: registry.Registry[tp.Dict[str, float]] = registry.Registry()
        configs.register_name("slow", {"temperature_anneal_scale": 1000.0})
        configs.register_name("fast", {"temperature_anneal_scale": 10.0})
        np.testing.assert_array_equal(sorted(configs), ["fast", "slow"])
        np.testing.assert_array_equal(list(other.keys()), [])
        np.testing.assert_equal(configs["fast"], {"temperature_anneal_scale": 10.0})
        del configs["slow"]
        assert len(configs) == 1
        np.testing.assert_raises(KeyError, configs.__getitem__, "slow")

    def test_name_collision(self) -> None:
        configs: registry.Registry[int] = registry.Registry()
        configs.register_name("blublu", 12)
        np.testing.assert_raises(RuntimeError, configs.register_name, "blublu", 13)
        assert configs["blublu"] == 12
