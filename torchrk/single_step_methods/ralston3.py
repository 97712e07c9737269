from typing import Optional

from ..terms import DifferentialEquation
from .runge_kutta import ButcherTableau, ExplicitRungeKutta


class Ralston3(ExplicitRungeKutta):
    """Ralston's third-order method

    The second stage is evaluated at the midpoint and the third one at three quarters
    of the step, each from the slope of the stage before it. The solution combines
    the stages with weights 2/9, 3/9 and 4/9.

    References
    ----------

    ```bibtex
    @article{ralston1962runge,
      title={Runge-Kutta methods with minimum error bounds},
      author={Ralston, Anthony},
      journal={Mathematics of Computation},
      volume={16},
      number={80},
      pages={431--437},
      year={1962}
    }
    ```
    """

    name = "rk3"
    TABLEAU = ButcherTableau.from_lists(
        c=[0.0, 1 / 2, 3 / 4],
        a=[[], [1 / 2], [0.0, 3 / 4]],
        b=[2 / 9, 3 / 9, 4 / 9],
    )

    def __init__(self, equation: Optional[DifferentialEquation] = None):
        super().__init__(equation, Ralston3.TABLEAU)

    def convergence_order(self):
        return 3
