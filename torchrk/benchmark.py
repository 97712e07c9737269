"""Timing utilities for comparing the cost of the Runge-Kutta family.

Repeated invocation is safe because a solve is a pure function of its inputs.
"""

import time
from typing import Dict, Optional, Sequence

import torch

from .integrator import FixedStepIntegrator
from .interface import MethodLike, make_method, method_name
from .problems import InitialValueProblem
from .single_step_methods import Order
from .terms import DifferentialEquation


def time_method(
    method: MethodLike,
    equation: DifferentialEquation,
    problem: InitialValueProblem,
    n_warmup: int = 3,
    n_iter: int = 100,
) -> Dict[str, float]:
    """Time the solve of `problem` over n_iter calls, returning median and stats."""
    assert n_iter > 0, "Need at least one timed iteration"
    integrator = FixedStepIntegrator(make_method(method, equation))
    for _ in range(n_warmup):
        integrator.solve(problem, equation)
    times = []
    for _ in range(n_iter):
        t0 = time.perf_counter_ns()
        integrator.solve(problem, equation)
        t1 = time.perf_counter_ns()
        times.append((t1 - t0) * 1e-6)  # ms
    times = torch.tensor(times, dtype=torch.float64)
    return {
        "median_ms": torch.quantile(times, 0.5).item(),
        "mean_ms": times.mean().item(),
        "std_ms": torch.std(times, correction=0).item(),
        "min_ms": times.min().item(),
        "max_ms": times.max().item(),
        "n_iter": n_iter,
    }


def time_all_orders(
    equation: DifferentialEquation,
    problem: InitialValueProblem,
    methods: Optional[Sequence[MethodLike]] = None,
    n_warmup: int = 3,
    n_iter: int = 100,
) -> Dict[str, Dict[str, float]]:
    if methods is None:
        methods = list(Order)
    return {
        method_name(method): time_method(method, equation, problem, n_warmup, n_iter)
        for method in methods
    }
