"""Fixed-step Runge-Kutta methods of order 1 to 4 for scalar ODEs on PyTorch"""

__version__ = "0.1.0"

from .config import RunConfig
from .errors import IntegrationError, InvalidStepSize, NonFiniteResult
from .integrator import FixedStepIntegrator
from .interface import (
    concatenate_trajectories,
    register_method,
    solve_all_orders,
    solve_ivp,
    step,
    step_trajectory,
)
from .metrics import absolute_error, solution_error
from .problems import InitialValueProblem, Point
from .single_step_methods import RK4, Euler, Heun, Order, Ralston3
from .solution import Solution
from .status_codes import Status
from .terms import DifferentialEquation, FirstOrderLinear, FunctionEquation, Separable

register_method("rk1", Euler)
register_method("rk2", Heun)
register_method("rk3", Ralston3)
register_method("rk4", RK4)
register_method("euler", Euler)
register_method("heun", Heun)
register_method("ralston3", Ralston3)
