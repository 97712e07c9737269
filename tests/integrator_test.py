import logging
from unittest.mock import Mock

import pytest
import torch
from problems import create_ivp, get_problem

from torchrk import (
    FirstOrderLinear,
    FixedStepIntegrator,
    FunctionEquation,
    Order,
    Point,
    Status,
)


@pytest.mark.parametrize("order", list(Order))
def test_step_count_truncates_the_interval(order):
    _, equation, problem = get_problem("linear", 3.5, 0.25)
    solution = FixedStepIntegrator(order.method(), record_trajectory=True).solve(
        problem, equation
    )

    assert problem.n_steps == 14
    assert solution.stats["n_steps"] == 14
    assert len(solution.xs) == 14
    assert len(solution.ys) == 14
    assert solution.final.x == pytest.approx(3.5)
    assert solution.stats["n_f_evals"] == 14 * order.value


@pytest.mark.parametrize("order", list(Order))
def test_final_abscissa_falls_short_when_h_does_not_divide(order):
    equation, problem = create_ivp(FirstOrderLinear(1, -1, 3), (0.0, 1.0), 1.0, 0.3)
    solution = FixedStepIntegrator(order.method()).solve(problem, equation)

    assert solution.stats["n_steps"] == 3
    assert solution.final.x == pytest.approx(0.9)


@pytest.mark.parametrize("order", list(Order))
@pytest.mark.parametrize("target", [0.0, -1.0, 0.4])
def test_degenerate_interval_returns_initial_point(order, target):
    f = Mock(side_effect=lambda x, y: y)
    equation, problem = create_ivp(FunctionEquation(f), (0.0, 2.5), target, 0.5)
    solution = FixedStepIntegrator(order.method(), record_trajectory=True).solve(
        problem, equation
    )

    assert solution.status == Status.SUCCESS
    assert solution.final == Point(0.0, 2.5)
    assert solution.xs.shape == (0,)
    assert solution.ys.shape == (0,)
    assert solution.stats["n_steps"] == 0
    assert f.call_count == 0


@pytest.mark.parametrize("order", list(Order))
def test_trajectory_ends_in_final_point(order):
    _, equation, problem = get_problem("separable", 1.0, 0.125)
    solution = FixedStepIntegrator(order.method(), record_trajectory=True).solve(
        problem, equation
    )

    assert solution.xs.tolist() == pytest.approx([0.125 * (i + 1) for i in range(8)])
    assert solution.points[-1] == solution.final
    assert solution.xs.dtype == torch.float64


def test_without_recording_there_is_no_trajectory():
    _, equation, problem = get_problem("separable", 1.0, 0.125)
    solution = FixedStepIntegrator(Order.RK2.method()).solve(problem, equation)

    assert solution.xs is None
    assert solution.ys is None


def test_on_step_receives_every_point():
    _, equation, problem = get_problem("linear", 1.0, 0.25)
    on_step = Mock()
    solution = FixedStepIntegrator(
        Order.RK3.method(), record_trajectory=True, on_step=on_step
    ).solve(problem, equation)

    assert on_step.call_count == 4
    assert [args[0][0] for args in on_step.call_args_list] == [0, 1, 2, 3]
    assert [args[0][1] for args in on_step.call_args_list] == solution.points


@pytest.mark.parametrize("order", list(Order))
def test_repeated_runs_are_identical(order):
    _, equation, problem = get_problem("linear", 2.0, 0.1)
    integrator = FixedStepIntegrator(order.method(), record_trajectory=True)
    first = integrator.solve(problem, equation)
    second = integrator.solve(problem, equation)

    assert first.final == second.final
    assert torch.equal(first.ys, second.ys)
    assert first.stats == second.stats


@pytest.mark.parametrize("order", list(Order))
def test_zero_coefficient_stops_with_non_finite_status(order):
    equation, problem = create_ivp(
        FirstOrderLinear(0.0, 1.0, 3.0), (0.0, 1.0), 1.0, 0.5
    )
    solution = FixedStepIntegrator(order.method(), record_trajectory=True).solve(
        problem, equation
    )

    assert solution.status == Status.NON_FINITE
    assert solution.stats["failed_step"] == 0
    assert solution.stats["n_steps"] == 0
    assert solution.final == Point(0.0, 1.0)
    assert solution.xs.shape == (0,)


def test_overflow_is_reported_at_the_failing_step():
    # y doubles its exponent every step and overflows after a few steps
    equation = FunctionEquation(lambda x, y: y**2 / 0.5)
    _, problem = create_ivp(equation, (0.0, 1e40), 10.0, 0.5)
    solution = FixedStepIntegrator(Order.RK1.method()).solve(problem, equation)

    assert solution.status == Status.NON_FINITE
    failed_step = solution.stats["failed_step"]
    assert 0 < failed_step < 20
    assert solution.stats["n_steps"] == failed_step
    assert solution.final.x == pytest.approx(0.5 * failed_step)
    assert torch.isfinite(torch.tensor(solution.final.y))


def test_logs_every_step(caplog):
    _, equation, problem = get_problem("linear", 1.0, 0.5)
    with caplog.at_level(logging.DEBUG, logger="torchrk"):
        FixedStepIntegrator(Order.RK4.method()).solve(problem, equation)

    step_lines = [
        r.getMessage()
        for r in caplog.records
        if r.name == "torchrk.integrator" and r.levelno == logging.DEBUG
    ]
    assert len(step_lines) == 2
    assert step_lines[0].startswith("rk4 step 0: x=0.5")


def test_failure_is_logged_as_warning(caplog):
    equation, problem = create_ivp(
        FirstOrderLinear(0.0, 1.0, 1.0), (0.0, 1.0), 1.0, 0.5
    )
    with caplog.at_level(logging.WARNING, logger="torchrk"):
        FixedStepIntegrator(Order.RK2.method()).solve(problem, equation)

    assert any("non-finite value in step 0" in r.getMessage() for r in caplog.records)
