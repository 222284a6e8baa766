# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

from .common import typing as typing
from .common import errors as errors
from .optimization import Annealer as Annealer
from .optimization import AnnealState as AnnealState
from .optimization import StopCondition as StopCondition
from .optimization import families as families
from .optimization import callbacks as callbacks
from .optimization import randomsource as randomsource


__all__ = ["Annealer", "AnnealState", "StopCondition", "families", "callbacks", "randomsource", "errors", "typing"]


__version__ = "0.1.0"
