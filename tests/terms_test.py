import logging

import pytest
import torch

from torchrk import FirstOrderLinear, FunctionEquation, Separable
from torchrk.typing import scalar


def test_separable_ignores_its_coefficient():
    assert Separable().diff(2.0, 3.0) == 6.0
    assert Separable(a=5.0).diff(2.0, 3.0) == 6.0


def test_first_order_linear_solves_for_the_derivative():
    equation = FirstOrderLinear(2.0, 1.0, 3.0)

    # 2 y' + x y = 3 x
    assert equation.diff(2.0, 1.0) == pytest.approx((3.0 * 2.0 - 2.0 * 1.0) / 2.0)


def test_zero_leading_coefficient_gives_non_finite_values(caplog):
    with caplog.at_level(logging.WARNING, logger="torchrk"):
        equation = FirstOrderLinear(0.0, 1.0, 3.0)

    assert any("zero" in r.getMessage() for r in caplog.records)
    stats = {}
    assert torch.isnan(equation.vf(scalar(0.0), scalar(1.0), stats))
    assert torch.isinf(equation.vf(scalar(1.0), scalar(1.0), stats))


def test_vf_counts_evaluations():
    equation = FunctionEquation(lambda x, y: x + y)
    stats = {}
    equation.init(stats)

    for _ in range(3):
        value = equation.vf(scalar(1.0), scalar(2.0), stats)

    assert stats["n_f_evals"] == 3
    assert value.dtype == torch.float64
    assert value.shape == ()


def test_vf_without_stats():
    equation = Separable(with_stats=False)
    stats = {}
    equation.init(stats)
    equation.vf(scalar(1.0), scalar(2.0), stats)

    assert stats == {}


def test_function_equation_accepts_python_numbers():
    equation = FunctionEquation(lambda x, y: 1.5)

    assert equation.vf(scalar(0.0), scalar(0.0), {}).item() == 1.5
