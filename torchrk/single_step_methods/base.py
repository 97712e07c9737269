from typing import Any, Dict, NamedTuple, Optional

import torch.nn as nn

from ..terms import DifferentialEquation
from ..typing import *


class StepResult(NamedTuple):
    y: ScalarTensor
    # Slopes f(x_i, y_i) of all stages, not yet scaled by the step size
    k: Optional[StageTensor]


class SingleStepMethod(nn.Module):
    # Name under which the method is registered and reported
    name = "single-step"

    def step(
        self,
        equation: Optional[DifferentialEquation],
        x0: ScalarTensor,
        y0: ScalarTensor,
        h: ScalarTensor,
        *,
        stats: Dict[str, Any],
    ) -> StepResult:
        """Advance the solution from `x0` to `x0 + h`.

        Arguments
        ---------
        equation
            Right-hand side to integrate, or None to use the method's own equation
        x0
            Abscissa at the start of the step
        y0
            Solution value at `x0`
        h
            Step size of the step to make
        stats
            Tracked statistics for the current solve

        Returns
        -------
        result
            Solution value `y1` at `x1 = x0 + h` together with the stage slopes
        """
        raise NotImplementedError()

    def convergence_order(self) -> int:
        raise NotImplementedError()
