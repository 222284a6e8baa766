# Copyright (c) Facebook, Inc. and its affiliates. All Rights Reserved.
#
# This source code is licensed under the MIT license found in the
# LICENSE file in the root directory of this source tree.


# base classes


class AnnealError(Exception):
    """Base class for error raised by asanneal"""


class AnnealWarning(Warning):
    pass


# errors
# pylint: disable=too-many-ancestors


class AnnealEarlyStopping(StopIteration, AnnealError):
    """Stops the optimization loop if raised"""


class AnnealRuntimeError(RuntimeError, AnnealError):
    """Runtime error raised by asanneal"""


class AnnealTypeError(TypeError, AnnealError):
    """Type error raised by asanneal"""


class AnnealValueError(ValueError, AnnealError):
    """Value error raised by asanneal"""


class DimensionMismatchError(AnnealValueError):
    """The initial parameters and the parameter ranges do not have the same length"""


class ProtocolError(AnnealRuntimeError):
    """A method of the annealer was called in a state which does not allow it
    (eg: step before init, or step after the annealer is ready to stop)
    """


class InvalidTangentError(AnnealRuntimeError):
    """NaN or infinite values in the tangents estimated while reannealing.
    This usually means that the objective function is ill-conditioned or non-finite.
    """


class NonPositiveTemperatureError(AnnealRuntimeError):
    """The reannealed parameter temperatures are not strictly positive"""


class GenerationError(AnnealRuntimeError):
    """No candidate within the parameter ranges could be generated in the allowed
    number of attempts
    """


# warnings


class AnnealRuntimeWarning(RuntimeWarning, AnnealWarning):
    """Runtime warning raised by asanneal"""


class InefficientSettingsWarning(AnnealRuntimeWarning):
    """Annealing settings are not optimal (or may not terminate)"""


class BadLossWarning(AnnealRuntimeWarning):
    """Provided objective value is unhelpful"""
