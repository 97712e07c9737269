"""Command-line interface comparing the Runge-Kutta family on a linear ODE."""

import argparse
import csv
import logging
import sys

from .benchmark import time_all_orders
from .config import RunConfig
from .errors import IntegrationError
from .interface import METHODS, solve_all_orders
from .log import env_log_level, init_log, parse_log_level
from .metrics import solution_error
from .problems import Point
from .reference import exact_solution

logger = logging.getLogger(__name__)

DEFAULT_METHODS = ["rk1", "rk2", "rk3", "rk4"]


def build_parser():
    defaults = RunConfig()
    parser = argparse.ArgumentParser(
        prog="torchrk",
        description=(
            "Approximate a y' + b x y = c x with the Runge-Kutta methods of "
            "order 1 to 4."
        ),
    )
    for name, help_text in [
        ("a", "coefficient of y'"),
        ("b", "coefficient of x y"),
        ("c", "coefficient of x on the right-hand side"),
        ("x0", "initial abscissa"),
        ("y0", "initial value"),
        ("target", "abscissa to integrate towards"),
        ("h", "step size"),
    ]:
        default = getattr(defaults, name)
        parser.add_argument(
            f"--{name}",
            type=float,
            default=default,
            help=f"{help_text} (default: {default})",
        )
    parser.add_argument(
        "--methods",
        nargs="+",
        default=DEFAULT_METHODS,
        help=f"Methods to run (default: {' '.join(DEFAULT_METHODS)})",
    )
    parser.add_argument(
        "--reference-y",
        type=float,
        default=None,
        help="Reference value at the final abscissa (default: exact solution)",
    )
    parser.add_argument(
        "--parallel",
        action="store_true",
        help="Run the methods on a thread pool",
    )
    parser.add_argument(
        "--time",
        type=int,
        default=0,
        metavar="N",
        help="Time every method over N repetitions",
    )
    parser.add_argument(
        "--trajectory-csv",
        type=str,
        default=None,
        help="Write the trajectories of all methods to this CSV file",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        help="Log level of the torchrk logger (default: $TORCHRK_LOG_LEVEL or WARNING)",
    )
    return parser


def write_trajectories(path, solutions):
    with open(path, "w", newline="") as f:
        writer = csv.writer(f)
        writer.writerow(["method", "step", "x", "y"])
        for name, solution in solutions.items():
            for i, point in enumerate(solution.points):
                writer.writerow([name, i, repr(point.x), repr(point.y)])


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        if args.log_level is not None:
            init_log(parse_log_level(args.log_level))
        else:
            init_log(env_log_level())
    except ValueError as e:
        parser.error(str(e))

    unknown = [m for m in args.methods if m not in METHODS]
    if unknown:
        parser.error(f"unknown methods {unknown}, choose from {sorted(METHODS)}")

    config = RunConfig(
        a=args.a,
        b=args.b,
        c=args.c,
        x0=args.x0,
        y0=args.y0,
        target=args.target,
        h=args.h,
    )
    try:
        problem = config.problem()
    except (IntegrationError, ValueError) as e:
        parser.error(str(e))
    equation = config.equation()

    solutions = solve_all_orders(
        equation,
        problem,
        methods=args.methods,
        record_trajectory=args.trajectory_csv is not None,
        parallel=args.parallel,
    )

    print(
        f"{equation!r}, initial {problem.initial}, target {problem.target}, "
        f"h {problem.h}"
    )
    print(f"{problem.n_steps} steps per method")

    exact = None
    if args.reference_y is None:
        try:
            exact = exact_solution(equation, problem.initial)
        except (ValueError, TypeError) as e:
            logger.warning(f"No reference solution available: {e}")

    failed = False
    for name, solution in solutions.items():
        final = solution.final
        if not solution.succeeded:
            failed = True
            print(
                f"{name}: FAILED ({solution.status.name}) in step "
                f"{solution.stats.get('failed_step')}, last point x={final.x:.6g}, "
                f"y={final.y:.6g}"
            )
            continue

        if args.reference_y is not None:
            reference = Point(final.x, args.reference_y)
        elif exact is not None:
            reference = Point(final.x, exact(final.x))
        else:
            reference = None

        line = f"{name}: x={final.x:.6g}, y={final.y:.6g}"
        if reference is not None:
            line += f", error={solution_error(solution, reference):.6g}"
        print(line)

    if args.time > 0:
        timings = time_all_orders(equation, problem, args.methods, n_iter=args.time)
        for name, timing in timings.items():
            print(
                f"{name}: median {timing['median_ms']:.4f} ms, "
                f"mean {timing['mean_ms']:.4f} ms over {timing['n_iter']} runs"
            )

    if args.trajectory_csv is not None:
        write_trajectories(
            args.trajectory_csv,
            {name: s for name, s in solutions.items() if s.xs is not None},
        )
        print(f"Trajectories written to {args.trajectory_csv}")

    return 1 if failed else 0


if __name__ == "__main__":
    sys.exit(main())
