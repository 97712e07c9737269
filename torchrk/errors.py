from typing import TYPE_CHECKING, Optional

from .status_codes import Status

if TYPE_CHECKING:
    from .problems import Point


class IntegrationError(ValueError):
    """Base class of all errors raised for an integration run."""

    status = Status.GENERAL_ERROR


class InvalidStepSize(IntegrationError):
    """The step size can never make progress towards the target."""

    status = Status.INVALID_STEP_SIZE

    def __init__(self, h: float, x0: float, target: float):
        self.h = h
        self.x0 = x0
        self.target = target
        super().__init__(
            f"Step size h={h} cannot integrate from x0={x0} to target={target}"
        )


class NonFiniteResult(IntegrationError):
    """A step produced an infinite or NaN value.

    `step` is the index of the failing step and `last_point` the last finite point
    before it.
    """

    status = Status.NON_FINITE

    def __init__(self, method: str, step: int, last_point: Optional["Point"] = None):
        self.method = method
        self.step = step
        self.last_point = last_point
        message = f"{method} produced a non-finite value in step {step}"
        if last_point is not None:
            message += f" (last finite point x={last_point.x}, y={last_point.y})"
        super().__init__(message)
