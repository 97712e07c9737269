import logging
from typing import Any, Callable, Dict, Optional

from .typing import *

logger = logging.getLogger(__name__)


class DifferentialEquation:
    """A scalar ODE of the form `dy/dx = f(x, y)`.

    Subclasses implement `diff`. The integrator calls `vf`, which evaluates `diff` on
    double precision 0-d tensors, so that a division by a zero coefficient produces
    `inf` or `nan` instead of raising, and counts the evaluations.
    """

    def __init__(self, *, with_stats: bool = True):
        self.with_stats = with_stats

    def diff(self, x, y):
        """Evaluate the right-hand side at `(x, y)`."""
        raise NotImplementedError()

    def init(self, stats: Dict[str, Any]):
        if not self.with_stats:
            return
        stats["n_f_evals"] = 0

    def vf(
        self, x: ScalarTensor, y: ScalarTensor, stats: Dict[str, Any]
    ) -> ScalarTensor:
        """Evaluate the vector field."""
        if self.with_stats:
            stats["n_f_evals"] = stats.get("n_f_evals", 0) + 1

        return scalar(self.diff(x, y))


class Separable(DifferentialEquation):
    """The separable equation `y' = x y`.

    Accepts a single coefficient `a` for compatibility with the coefficient source,
    but the right-hand side does not use it.
    """

    def __init__(self, a: Optional[float] = None, *, with_stats: bool = True):
        super().__init__(with_stats=with_stats)

        self.a = a

    def diff(self, x, y):
        return x * y

    def __repr__(self):
        return f"Separable(a={self.a})"


class FirstOrderLinear(DifferentialEquation):
    """The first-order linear equation `a y' + b x y = c x`.

    Solved for the derivative, this is `y' = (c x - b x y) / a`, which is undefined
    for `a = 0`. Such an equation can still be constructed, but every integration
    with it ends with a non-finite result.
    """

    def __init__(self, a: float, b: float, c: float, *, with_stats: bool = True):
        super().__init__(with_stats=with_stats)

        self.a = float(a)
        self.b = float(b)
        self.c = float(c)

        if self.a == 0.0:
            logger.warning(
                "Coefficient a of %r is zero, the derivative is undefined", self
            )

    def diff(self, x, y):
        return (self.c * x - self.b * x * y) / self.a

    def __repr__(self):
        return f"FirstOrderLinear(a={self.a}, b={self.b}, c={self.c})"


class FunctionEquation(DifferentialEquation):
    def __init__(self, f: Callable[[Any, Any], Any], *, with_stats: bool = True):
        """Wrap an arbitrary right-hand side `f(x, y)`.

        Arguments
        ---------
        f
            Right-hand side of the ODE. It is called with 0-d double precision tensors
            and may return a tensor or a Python number.
        with_stats
            If true, track the number of function evaluations.
        """

        super().__init__(with_stats=with_stats)

        self.f = f

    def diff(self, x, y):
        return self.f(x, y)

    def __repr__(self):
        return f"FunctionEquation(f={self.f!r})"
