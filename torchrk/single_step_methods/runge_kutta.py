from typing import Any, Dict, List, Optional

import torch
from torchtyping import TensorType

from ..terms import DifferentialEquation
from ..typing import *
from .base import SingleStepMethod, StepResult


class CoefficientVector(TensorType["nodes"]):
    pass


class RungeKuttaMatrix(TensorType["nodes", "weights"]):
    pass


class WeightVector(TensorType["weights"]):
    pass


class ButcherTableau:
    def __init__(
        self,
        # Coefficients for the evaluation nodes, as fractions of the step size
        c: CoefficientVector,
        # Runge-Kutta matrix
        a: RungeKuttaMatrix,
        # Weights of the stages in the solution update
        b: WeightVector,
    ):
        self.c = c
        self.a = a
        self.b = b

    @staticmethod
    def from_lists(*, c: List[float], a: List[List[float]], b: List[float]):
        n_nodes = len(c)
        n_weights = len(b)
        assert n_nodes == n_weights
        assert len(a) == n_nodes
        assert all(len(row) <= i for i, row in enumerate(a)), (
            "Explicit methods only combine the slopes of earlier stages"
        )
        assert abs(sum(b) - 1.0) < 1e-12, "The weights of a consistent method sum to 1"

        # Fill a up into a full square matrix
        a_full = [row + [0.0] * (n_weights - len(row)) for row in a]

        return ButcherTableau(
            c=torch.tensor(c, dtype=DTYPE),
            a=torch.tensor(a_full, dtype=DTYPE),
            b=torch.tensor(b, dtype=DTYPE),
        )

    @property
    def n_stages(self):
        return self.c.shape[0]

    def is_explicit(self):
        return (torch.triu(self.a) == 0.0).all().item()

    def __repr__(self):
        return f"ButcherTableau(c={self.c}, a={self.a}, b={self.b})"


class ExplicitRungeKutta(SingleStepMethod):
    def __init__(
        self, equation: Optional[DifferentialEquation], tableau: ButcherTableau
    ):
        super().__init__()

        self.equation = equation
        self.tableau = tableau

    def step(
        self,
        equation: Optional[DifferentialEquation],
        x0: ScalarTensor,
        y0: ScalarTensor,
        h: ScalarTensor,
        *,
        stats: Dict[str, Any],
    ) -> StepResult:
        equation_ = equation
        if equation_ is None:
            equation_ = self.equation
        assert equation_ is not None, "No equation to integrate"
        tableau = self.tableau

        # Every stage starts from (x0, y0). The running point is only replaced by the
        # caller once all stages of this step have been evaluated.
        k = y0.new_empty(tableau.n_stages)
        k[0] = equation_.vf(x0, y0, stats)
        a = tableau.a
        x_nodes = x0 + tableau.c * h
        for i in range(1, tableau.n_stages):
            y_i = y0 + h * torch.dot(a[i, :i], k[:i])
            k[i] = equation_.vf(x_nodes[i], y_i, stats)

        y1 = y0 + h * torch.dot(tableau.b, k)

        return StepResult(y1, k)

    def convergence_order(self) -> int:
        raise NotImplementedError()

    def __repr__(self):
        return f"{type(self).__name__}(equation={self.equation})"
