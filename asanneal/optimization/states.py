# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.

import enum

# pylint: disable=invalid-name


class AnnealState(enum.Enum):
    """What the client code must do next with an annealer"""

    Unknown = "unknown"
    # init() must be called
    NeedToInit = "need_to_init"
    # transient value while step() is running
    NeedToStep = "need_to_step"
    # the objective must be computed at x_cand (into f_x_cand)
    NeedToCompute = "need_to_compute"
    # the objective must be computed at x (into f_x) and at x_plusdelta (into f_x_plusdelta)
    NeedToComputeSet = "need_to_compute_set"
    # terminal state, see reason_for_exit
    ReadyToStop = "ready_to_stop"


class StopCondition(enum.Enum):
    """Why the annealer reached AnnealState.ReadyToStop"""

    Unknown = "unknown"
    T_k_less_than_T_f = "T_k_less_than_T_f"
    T_k_less_than_epsilon = "T_k_less_than_epsilon"
    T_cost_less_than_epsilon = "T_cost_less_than_epsilon"
    f_x_best_repeated = "f_x_best_repeated"
    num_accepted_limit = "num_accepted_limit"
    num_generated_limit = "num_generated_limit"
    # fatal errors while reannealing
    invalid_tangent = "invalid_tangent"
    non_positive_temperature = "non_positive_temperature"
