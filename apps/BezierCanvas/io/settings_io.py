from __future__ import annotations

from pathlib import Path

from loguru import logger

from apps.BezierCanvas.io.json_codec import load_settings_json
from src.bezier2d.settings import RenderSettings


def load_settings(path: str | Path | None = None) -> RenderSettings:
    if path is None:
        return RenderSettings.from_dict()
    logger.info("Loading render settings from {}.", path)
    return RenderSettings.from_dict(load_settings_json(path))
