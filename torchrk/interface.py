from concurrent.futures import ThreadPoolExecutor, as_completed
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple, Union

import torch

from .integrator import FixedStepIntegrator
from .problems import InitialValueProblem, Point
from .single_step_methods import Order, SingleStepMethod
from .solution import Solution
from .terms import DifferentialEquation, FunctionEquation
from .typing import *

METHODS = {}

MethodLike = Union[str, Order, SingleStepMethod]


def register_method(
    name: str, constructor: Callable[[DifferentialEquation], SingleStepMethod]
):
    METHODS[name] = constructor


def make_method(
    method: MethodLike, equation: DifferentialEquation
) -> SingleStepMethod:
    """Resolve a method name, an order or a method object into a method object"""
    if isinstance(method, SingleStepMethod):
        return method
    if isinstance(method, Order):
        return method.method(equation)
    if method not in METHODS:
        raise ValueError(
            f"Unknown method {method!r}, choose one of {sorted(METHODS.keys())}"
        )
    return METHODS[method](equation)


def solve_ivp(
    f: Union[DifferentialEquation, Callable[[Any, Any], Any]],
    initial: Union[Point, Tuple[float, float]],
    target: float,
    h: float,
    *,
    method: MethodLike = "rk4",
    record_trajectory: bool = False,
    on_step: Optional[Callable[[int, Point], Any]] = None,
) -> Solution:
    """Solve an initial value problem with a fixed step size

    Arguments
    =========
    f
        The right-hand side, either an equation object or a callable `f(x, y)`
    initial
        Initial point `(x0, y0)`
    target
        Abscissa to integrate towards. The solver takes `int((target - x0) / h)` steps.
    h
        Step size
    method
        Either the name of a registered stepping method, e.g. `"rk4"`, an `Order` or a
        stepping method object
    record_trajectory
        Record the point reached after every step
    on_step
        Called with the step index and the new point after every step
    """

    if isinstance(f, DifferentialEquation):
        equation = f
    else:
        equation = FunctionEquation(f)

    problem = InitialValueProblem(initial, target, h)
    step_method = make_method(method, equation)
    integrator = FixedStepIntegrator(
        step_method, record_trajectory=record_trajectory, on_step=on_step
    )
    return integrator.solve(problem, equation)


def step(
    equation: DifferentialEquation,
    h: float,
    initial: Union[Point, Tuple[float, float]],
    target: float,
    order: MethodLike = Order.RK4,
) -> Point:
    """Integrate with a member of the family and return the final point.

    Raises `NonFiniteResult` if a step produces an infinite or NaN value.
    """
    solution = solve_ivp(equation, initial, target, h, method=order)
    return solution.raise_for_status().final


def step_trajectory(
    equation: DifferentialEquation,
    h: float,
    initial: Union[Point, Tuple[float, float]],
    target: float,
    order: MethodLike = Order.RK4,
) -> Solution:
    """Like `step` but returns the solution including the point after every step."""
    solution = solve_ivp(
        equation, initial, target, h, method=order, record_trajectory=True
    )
    return solution.raise_for_status()


def method_name(method: MethodLike) -> str:
    if isinstance(method, Order):
        return method.method.name
    if isinstance(method, SingleStepMethod):
        return method.name
    return method


def solve_all_orders(
    equation: DifferentialEquation,
    problem: InitialValueProblem,
    *,
    methods: Optional[Sequence[MethodLike]] = None,
    record_trajectory: bool = False,
    parallel: bool = False,
    max_workers: Optional[int] = None,
) -> Dict[str, Solution]:
    """Solve the same problem independently with several methods.

    By default, all four orders of the family are used. With `parallel=True`, the
    runs are executed on a thread pool. Each run owns its running point, so the
    results are identical to sequential execution.

    Returns the solutions keyed by method name, in the order of `methods`. Passing
    the same name twice raises a `ValueError`.
    """

    if methods is None:
        methods = list(Order)

    def run(method: MethodLike) -> Solution:
        integrator = FixedStepIntegrator(
            make_method(method, equation), record_trajectory=record_trajectory
        )
        return integrator.solve(problem, equation)

    names = [method_name(method) for method in methods]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ValueError(f"Duplicate methods {duplicates}")
    if not parallel:
        return {name: run(method) for name, method in zip(names, methods)}

    results = {}
    with ThreadPoolExecutor(max_workers=max_workers) as pool:
        future_to_name = {}
        for name, method in zip(names, methods):
            future = pool.submit(run, method)
            future_to_name[future] = name

        for future in as_completed(future_to_name):
            results[future_to_name[future]] = future.result()

    return {name: results[name] for name in names}


def concatenate_trajectories(
    solutions: Iterable[Solution],
) -> Tuple[TrajectoryTensor, TrajectoryTensor]:
    """Concatenate the recorded x- and y-sequences of several solutions in order."""
    xs: List[torch.Tensor] = []
    ys: List[torch.Tensor] = []
    for solution in solutions:
        assert solution.xs is not None and solution.ys is not None, (
            f"No trajectory recorded for {solution.method}"
        )
        xs.append(solution.xs)
        ys.append(solution.ys)
    if len(xs) == 0:
        return torch.zeros(0, dtype=DTYPE), torch.zeros(0, dtype=DTYPE)
    return torch.cat(xs), torch.cat(ys)
