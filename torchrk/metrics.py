from .problems import Point
from .solution import Solution


def absolute_error(observed: Point, expected: Point) -> float:
    """Absolute error `|expected.y - observed.y|` of an approximation.

    The abscissas are not compared. Callers have to make sure that both points refer
    to the same `x`.
    """
    return abs(expected.y - observed.y)


def solution_error(solution: Solution, expected: Point) -> float:
    return absolute_error(solution.final, expected)
