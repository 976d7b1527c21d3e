from __future__ import annotations

import argparse
from pathlib import Path
from typing import Optional, Sequence

from loguru import logger

from apps.BezierCanvas.io.image_export import save_png
from apps.BezierCanvas.io.json_codec import dump_settings
from apps.BezierCanvas.io.settings_io import load_settings
from src.bezier2d.scene import Scene
from src.bezier2d.viewport import clamp_pixel_pos


DEFAULT_RENDER_OUT = Path("bezier.png")


def render_points(
    points: Sequence[tuple[int, int]],
    output_path: str | Path,
    settings_path: Optional[str | Path] = None,
) -> Path:
    scene = Scene(load_settings(settings_path))
    for x, y in points:
        scene.append_point(*clamp_pixel_pos((x, y)))
    buffer = scene.new_buffer()
    scene.render(buffer)
    return save_png(output_path, buffer)


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Bezier canvas CLI")
    subparsers = parser.add_subparsers(dest="command", required=True)

    gui_parser = subparsers.add_parser("gui", help="Open the interactive canvas")
    gui_parser.add_argument("--config", dest="settings_path")

    render_parser = subparsers.add_parser("render", help="Render control points to a PNG")
    render_parser.add_argument(
        "--point",
        dest="points",
        nargs=2,
        type=int,
        action="append",
        default=[],
        metavar=("X", "Y"),
    )
    render_parser.add_argument("--out", dest="output_path")
    render_parser.add_argument("--config", dest="settings_path")

    settings_parser = subparsers.add_parser("settings", help="Print the effective render settings")
    settings_parser.add_argument("--config", dest="settings_path")

    args = parser.parse_args(argv)

    if args.command == "gui":
        from apps.BezierCanvas.main import main as run_gui

        logger.info("Launching Bezier canvas window.")
        return run_gui(load_settings(args.settings_path))

    if args.command == "render":
        output_path = Path(args.output_path or DEFAULT_RENDER_OUT)
        render_points([tuple(point) for point in args.points], output_path, args.settings_path)
        return 0

    settings = load_settings(args.settings_path)
    print(dump_settings(settings))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
