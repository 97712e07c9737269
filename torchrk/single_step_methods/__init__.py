from enum import Enum

from .base import SingleStepMethod, StepResult
from .euler import Euler
from .heun import Heun
from .ralston3 import Ralston3
from .rk4 import RK4


class Order(Enum):
    """Selects a member of the Runge-Kutta family by its convergence order."""

    RK1 = 1
    RK2 = 2
    RK3 = 3
    RK4 = 4

    @property
    def method(self):
        return ORDER_METHODS[self]


ORDER_METHODS = {Order.RK1: Euler, Order.RK2: Heun, Order.RK3: Ralston3, Order.RK4: RK4}
