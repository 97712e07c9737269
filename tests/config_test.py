import pytest

from torchrk import FirstOrderLinear, InvalidStepSize, Point, RunConfig


def test_defaults_describe_the_reference_run():
    config = RunConfig()
    problem = config.problem()

    assert config.to_dict() == dict(
        a=1.0, b=-1.0, c=3.0, x0=0.0, y0=1.0, target=3.5, h=0.5
    )
    assert problem.initial == Point(0.0, 1.0)
    assert problem.n_steps == 7


def test_equation_from_coefficients():
    equation = RunConfig(a=2, b=1, c=4).equation()

    assert isinstance(equation, FirstOrderLinear)
    assert (equation.a, equation.b, equation.c) == (2.0, 1.0, 4.0)


def test_values_are_converted_to_floats():
    config = RunConfig.from_mapping({"h": "0.25", "target": 1})

    assert config.h == 0.25
    assert config.target == 1.0


def test_unknown_keys_are_rejected():
    with pytest.raises(ValueError, match="stepsize"):
        RunConfig.from_mapping({"stepsize": 0.1})


def test_zero_step_size_is_rejected_when_building_the_problem():
    with pytest.raises(InvalidStepSize):
        RunConfig(h=0.0).problem()


def test_config_is_immutable():
    with pytest.raises(AttributeError):
        RunConfig().h = 0.1
