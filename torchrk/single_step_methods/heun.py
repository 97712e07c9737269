from typing import Optional

from ..terms import DifferentialEquation
from .runge_kutta import ButcherTableau, ExplicitRungeKutta


class Heun(ExplicitRungeKutta):
    name = "rk2"
    TABLEAU = ButcherTableau.from_lists(c=[0.0, 1.0], a=[[], [1.0]], b=[1 / 2, 1 / 2])

    def __init__(self, equation: Optional[DifferentialEquation] = None):
        super().__init__(equation, Heun.TABLEAU)

    def convergence_order(self):
        return 2
