from src.bezier2d.buffer import BoundsPolicy, PixelBuffer
from src.bezier2d.combinatorics import binomial
from src.bezier2d.constants import HEIGHT, WIDTH
from src.bezier2d.curve import evaluate, sample_curve
from src.bezier2d.geometry import Color, FloatPoint, IntPoint, LineSegment
from src.bezier2d.rasterizer import draw_cell, draw_line
from src.bezier2d.scene import Scene, SceneState
from src.bezier2d.settings import RenderSettings

__all__ = [
    "BoundsPolicy",
    "Color",
    "FloatPoint",
    "HEIGHT",
    "IntPoint",
    "LineSegment",
    "PixelBuffer",
    "RenderSettings",
    "Scene",
    "SceneState",
    "WIDTH",
    "binomial",
    "draw_cell",
    "draw_line",
    "evaluate",
    "sample_curve",
]
