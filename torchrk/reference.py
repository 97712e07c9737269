from typing import Callable

import sympy as sp

from .problems import Point
from .terms import DifferentialEquation, FirstOrderLinear, Separable


def symbolic_solution(equation: DifferentialEquation, initial: Point) -> sp.Expr:
    """Solve one of the built-in equations in closed form through `initial`.

    The coefficients are converted into exact rationals before solving, so that
    sympy can find the integration constant from the initial condition exactly.
    """

    x = sp.Symbol("x")
    y = sp.Function("y")
    if isinstance(equation, Separable):
        ode = sp.Eq(y(x).diff(x), x * y(x))
    elif isinstance(equation, FirstOrderLinear):
        if equation.a == 0.0:
            raise ValueError(f"{equation!r} has no solution for a = 0")
        a, b, c = (sp.nsimplify(v) for v in (equation.a, equation.b, equation.c))
        ode = sp.Eq(a * y(x).diff(x) + b * x * y(x), c * x)
    else:
        raise TypeError(f"No closed-form solution known for {equation!r}")

    x0, y0 = sp.nsimplify(initial.x), sp.nsimplify(initial.y)
    solution = sp.dsolve(ode, y(x), ics={y(x0): y0})
    return sp.simplify(solution.rhs)


def exact_solution(
    equation: DifferentialEquation, initial: Point
) -> Callable[[float], float]:
    x = sp.Symbol("x")
    f = sp.lambdify(x, symbolic_solution(equation, initial), modules="math")

    def solution(value: float) -> float:
        return float(f(value))

    return solution


def reference_point(equation: DifferentialEquation, initial: Point, x: float) -> Point:
    """The point of the exact solution through `initial` at abscissa `x`."""
    return Point(float(x), exact_solution(equation, initial)(x))
