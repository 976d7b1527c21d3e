from copy import deepcopy

WIDTH = 800
HEIGHT = 600
CHANNELS = 4

GRID_SPACING = 16
CURVE_SAMPLES = 101

DEFAULT_SETTINGS = {
    "background": [71, 110, 252, 255],
    "grid_line": [100, 132, 250, 255],
    "curve": [255, 255, 255, 255],
    "control_polyline": [255, 255, 255, 100],
    "grid_spacing": GRID_SPACING,
    "curve_samples": CURVE_SAMPLES,
    "bounds_policy": "clip",
}


def default_settings() -> dict:
    return deepcopy(DEFAULT_SETTINGS)
