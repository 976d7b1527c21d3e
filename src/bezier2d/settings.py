from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from src.bezier2d.buffer import BoundsPolicy
from src.bezier2d.constants import default_settings
from src.bezier2d.geometry import Color


def check_setting_keys(data: dict[str, Any], source: str = "render settings") -> None:
    unknown = set(data) - set(default_settings())
    if unknown:
        raise ValueError(f"Unknown keys in {source}: {', '.join(sorted(unknown))}")


@dataclass(frozen=True)
class RenderSettings:
    background: Color
    grid_line: Color
    curve: Color
    control_polyline: Color
    grid_spacing: int
    curve_samples: int
    bounds_policy: BoundsPolicy

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None = None) -> "RenderSettings":
        data = data or {}
        check_setting_keys(data)
        merged = {**default_settings(), **data}

        grid_spacing = int(merged["grid_spacing"])
        if grid_spacing <= 0:
            raise ValueError("grid_spacing must be positive.")
        curve_samples = int(merged["curve_samples"])
        if curve_samples < 2:
            raise ValueError("curve_samples must be at least 2.")
        try:
            bounds_policy = BoundsPolicy(merged["bounds_policy"])
        except ValueError as exc:
            raise ValueError(
                f"bounds_policy must be 'clip' or 'raise', got {merged['bounds_policy']!r}"
            ) from exc

        return cls(
            background=Color.from_sequence(merged["background"]),
            grid_line=Color.from_sequence(merged["grid_line"]),
            curve=Color.from_sequence(merged["curve"]),
            control_polyline=Color.from_sequence(merged["control_polyline"]),
            grid_spacing=grid_spacing,
            curve_samples=curve_samples,
            bounds_policy=bounds_policy,
        )

    def as_dict(self) -> dict[str, Any]:
        return {
            "background": list(self.background.as_tuple()),
            "grid_line": list(self.grid_line.as_tuple()),
            "curve": list(self.curve.as_tuple()),
            "control_polyline": list(self.control_polyline.as_tuple()),
            "grid_spacing": self.grid_spacing,
            "curve_samples": self.curve_samples,
            "bounds_policy": self.bounds_policy.value,
        }
