from dataclasses import asdict, dataclass, fields
from typing import Any, Mapping

from .problems import InitialValueProblem, Point
from .terms import FirstOrderLinear


@dataclass(frozen=True)
class RunConfig:
    """Parameters of an estimation run for `a y' + b x y = c x`.

    The defaults integrate `y' = 3x + xy` from `(0, 1)` to `x = 3.5` with `h = 0.5`.
    """

    a: float = 1.0
    b: float = -1.0
    c: float = 3.0
    x0: float = 0.0
    y0: float = 1.0
    target: float = 3.5
    h: float = 0.5

    def __post_init__(self):
        for field in fields(self):
            object.__setattr__(self, field.name, float(getattr(self, field.name)))

    @staticmethod
    def from_mapping(mapping: Mapping[str, Any]) -> "RunConfig":
        known = {field.name for field in fields(RunConfig)}
        unknown = set(mapping.keys()) - known
        if unknown:
            raise ValueError(
                f"Unknown configuration keys {sorted(unknown)}, expected a subset of "
                f"{sorted(known)}"
            )
        return RunConfig(**mapping)

    def to_dict(self):
        return asdict(self)

    def equation(self) -> FirstOrderLinear:
        return FirstOrderLinear(self.a, self.b, self.c)

    def initial_point(self) -> Point:
        return Point.of(self.x0, self.y0)

    def problem(self) -> InitialValueProblem:
        return InitialValueProblem(self.initial_point(), self.target, self.h)
