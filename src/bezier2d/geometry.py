from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence


@dataclass(frozen=True)
class Color:
    red: int
    green: int
    blue: int
    alpha: int = 255

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            value = getattr(self, name)
            if not 0 <= value <= 255:
                raise ValueError(f"Color channel {name} must be in [0, 255], got {value}.")

    @classmethod
    def from_sequence(cls, values: Sequence[int]) -> "Color":
        if len(values) != 4:
            raise ValueError(f"Color needs 4 channels (RGBA), got {len(values)}.")
        return cls(*(int(value) for value in values))

    def as_tuple(self) -> tuple[int, int, int, int]:
        return (self.red, self.green, self.blue, self.alpha)


@dataclass(frozen=True)
class IntPoint:
    x: int
    y: int


@dataclass(frozen=True)
class FloatPoint:
    x: float
    y: float

    def add(self, other: "FloatPoint") -> "FloatPoint":
        return FloatPoint(self.x + other.x, self.y + other.y)

    def truncate(self) -> IntPoint:
        return IntPoint(int(self.x), int(self.y))


@dataclass(frozen=True)
class LineSegment:
    start: IntPoint
    end: IntPoint
