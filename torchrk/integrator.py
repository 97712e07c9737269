import logging
from typing import Any, Callable, Dict, List, Optional

import torch

from .problems import InitialValueProblem, Point
from .single_step_methods import SingleStepMethod
from .solution import Solution
from .status_codes import Status
from .terms import DifferentialEquation
from .typing import *

logger = logging.getLogger(__name__)


class FixedStepIntegrator:
    def __init__(
        self,
        step_method: SingleStepMethod,
        *,
        record_trajectory: bool = False,
        on_step: Optional[Callable[[int, Point], Any]] = None,
    ):
        """Iterate a single step method with a fixed step size.

        Arguments
        ---------
        step_method
            The Runge-Kutta method to advance the solution with
        record_trajectory
            If true, the solution holds the point reached after every step
        on_step
            Called with the step index and the new point after every completed step
        """

        self.step_method = step_method
        self.record_trajectory = record_trajectory
        self.on_step = on_step

    def solve(
        self,
        problem: InitialValueProblem,
        equation: Optional[DifferentialEquation] = None,
    ) -> Solution:
        step_method = self.step_method
        name = step_method.name

        equation_ = equation
        if equation_ is None:
            equation_ = step_method.equation
        assert equation_ is not None, "No equation to integrate"

        ###############################
        # Initialize the solver state #
        ###############################

        h = scalar(problem.h)
        x = scalar(problem.x0)
        y = scalar(problem.y0)
        stats: Dict[str, Any] = {}
        equation_.init(stats)

        xs: List[float] = []
        ys: List[float] = []
        status = Status.SUCCESS

        # The loop bound is fixed up front, so the run always terminates
        n_steps = problem.n_steps
        n_completed = 0

        for i in range(n_steps):
            step_result = step_method.step(equation_, x, y, h, stats=stats)
            x_next = x + h
            y_next = step_result.y

            # Stop at the first non-finite value and keep the last finite point as the
            # final state
            if not is_finite(x_next, y_next):
                status = Status.NON_FINITE
                stats["failed_step"] = i
                logger.warning(
                    f"{name}: non-finite value in step {i} starting from "
                    f"x={x.item()}, y={y.item()}"
                )
                break

            x, y = x_next, y_next
            n_completed += 1

            point = Point(x.item(), y.item())
            logger.debug(f"{name} step {i}: x={point.x}, y={point.y}")
            if self.record_trajectory:
                xs.append(point.x)
                ys.append(point.y)
            if self.on_step is not None:
                self.on_step(i, point)

        ##################################################
        # Finalize the solver and construct the solution #
        ##################################################

        stats["n_steps"] = n_completed

        if self.record_trajectory:
            traj_xs = torch.tensor(xs, dtype=DTYPE)
            traj_ys = torch.tensor(ys, dtype=DTYPE)
        else:
            traj_xs = traj_ys = None

        final = Point(x.item(), y.item())
        logger.info(
            f"{name}: {n_completed}/{n_steps} steps, final x={final.x}, y={final.y}, "
            f"status={status.name}"
        )

        return Solution(
            final=final,
            xs=traj_xs,
            ys=traj_ys,
            stats=stats,
            status=status,
            method=name,
        )

    def __repr__(self):
        return (
            f"FixedStepIntegrator(step_method={self.step_method}, "
            f"record_trajectory={self.record_trajectory})"
        )
