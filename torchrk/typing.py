import math
from typing import Union

import torch

# All data and time computations happen in double precision so that results match
# plain floating point arithmetic on the same formulas.
DTYPE = torch.float64


def scalar(value: Union[float, torch.Tensor]) -> "ScalarTensor":
    """Convert a Python number (or tensor) into a 0-d double precision tensor."""
    if isinstance(value, torch.Tensor):
        return value.to(dtype=DTYPE).reshape(())
    return torch.tensor(value, dtype=DTYPE)


def is_finite(*values: Union[float, torch.Tensor]) -> bool:
    for value in values:
        if isinstance(value, torch.Tensor):
            if not torch.isfinite(value).all().item():
                return False
        elif not math.isfinite(value):
            return False
    return True


################
# Tensor Types #
################


class ScalarTensor(torch.Tensor):
    """
    Scalar tensor.

    TensorType[(), torch.float64]
    """

    pass


class StageTensor(torch.Tensor):
    """
    Stage tensor holding the slopes of all stages of a Runge-Kutta step.

    TensorType["stages", torch.float64]
    """

    pass


class TrajectoryTensor(torch.Tensor):
    """
    Trajectory tensor with one entry per completed step.

    TensorType["steps", torch.float64]
    """

    pass
