from typing import Any, Dict, List, Optional

from .errors import NonFiniteResult
from .problems import Point
from .status_codes import Status
from .typing import *


class Solution:
    def __init__(
        self,
        final: Point,
        xs: Optional[TrajectoryTensor],
        ys: Optional[TrajectoryTensor],
        stats: Dict[str, Any],
        status: Status,
        method: str,
    ):
        self.final = final
        self.xs = xs
        self.ys = ys
        self.stats = stats
        self.status = status
        self.method = method

    @property
    def succeeded(self):
        return self.status == Status.SUCCESS

    @property
    def points(self) -> List[Point]:
        """The recorded trajectory as points, one per completed step."""
        assert self.xs is not None and self.ys is not None, "No trajectory recorded"
        return [Point(x, y) for x, y in zip(self.xs.tolist(), self.ys.tolist())]

    def raise_for_status(self) -> "Solution":
        if self.status == Status.NON_FINITE:
            raise NonFiniteResult(self.method, self.stats["failed_step"], self.final)
        return self

    def __repr__(self):
        return (
            f"Solution(method={self.method}, final={self.final}, xs={self.xs}, "
            f"ys={self.ys}, stats={self.stats}, status={self.status})"
        )
