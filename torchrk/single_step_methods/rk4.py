from typing import Optional

from ..terms import DifferentialEquation
from .runge_kutta import ButcherTableau, ExplicitRungeKutta


class RK4(ExplicitRungeKutta):
    """The classical fourth-order Runge-Kutta method

    ```
    F1 = h f(x, y)
    F2 = h f(x + h/2, y + F1/2)
    F3 = h f(x + h/2, y + F2/2)
    F4 = h f(x + h, y + F3)
    y1 = y + (F1 + 2 F2 + 2 F3 + F4) / 6
    ```
    """

    name = "rk4"
    TABLEAU = ButcherTableau.from_lists(
        c=[0.0, 1 / 2, 1 / 2, 1.0],
        a=[[], [1 / 2], [0.0, 1 / 2], [0.0, 0.0, 1.0]],
        b=[1 / 6, 2 / 6, 2 / 6, 1 / 6],
    )

    def __init__(self, equation: Optional[DifferentialEquation] = None):
        super().__init__(equation, RK4.TABLEAU)

    def convergence_order(self):
        return 4
