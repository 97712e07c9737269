from typing import NamedTuple

from .errors import InvalidStepSize
from .typing import *


class Point(NamedTuple):
    """A point `(x, y)` on the trial solution."""

    x: float
    y: float

    @staticmethod
    def of(x, y) -> "Point":
        """Build a point from numbers or 0-d tensors, rejecting non-finite values."""
        x, y = float(x), float(y)
        if not is_finite(x, y):
            raise ValueError(f"Point coordinates must be finite, got ({x}, {y})")
        return Point(x, y)


class InitialValueProblem:
    """An initial value problem integrated with a fixed step size.

    The number of steps is `int((target - x0) / h)`, i.e. the quotient is truncated
    towards zero, so the final abscissa can fall short of `target` if `h` does not
    divide the interval. If `target` lies before `x0` while `h` is positive, the
    problem is degenerate but valid: no steps are taken and the solution is the
    initial point.
    """

    def __init__(self, initial: Point, target: float, h: float):
        initial = Point.of(*initial)
        target, h = float(target), float(h)
        if not is_finite(target):
            raise ValueError(f"Target must be finite, got {target}")
        x0 = initial.x
        if h == 0.0 or not is_finite(h) or (target > x0 and h < 0.0):
            raise InvalidStepSize(h, x0, target)
        # The step count must be representable as an int
        if not is_finite((target - x0) / h):
            raise InvalidStepSize(h, x0, target)

        self.initial = initial
        self.target = target
        self.h = h

    @property
    def x0(self):
        return self.initial.x

    @property
    def y0(self):
        return self.initial.y

    @property
    def n_steps(self) -> int:
        return max(int((self.target - self.x0) / self.h), 0)

    @property
    def is_degenerate(self):
        return self.n_steps == 0

    def __repr__(self):
        return (
            f"InitialValueProblem(initial={self.initial}, target={self.target}, "
            f"h={self.h})"
        )
