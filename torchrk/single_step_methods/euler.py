from typing import Optional

from ..terms import DifferentialEquation
from .runge_kutta import ButcherTableau, ExplicitRungeKutta


class Euler(ExplicitRungeKutta):
    """The explicit Euler method, `y1 = y0 + h f(x0, y0)`."""

    name = "rk1"
    TABLEAU = ButcherTableau.from_lists(c=[0.0], a=[[]], b=[1.0])

    def __init__(self, equation: Optional[DifferentialEquation] = None):
        super().__init__(equation, Euler.TABLEAU)

    def convergence_order(self):
        return 1
