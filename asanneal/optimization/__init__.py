# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .annealer import Annealer
from .annealer import load_diagnostics
from .states import AnnealState
from .states import StopCondition
from .randomsource import RandomStateSource
from .randomsource import ReplaySource
from . import families
from .base import registry
