import json
from pathlib import Path

from matplotlib import image

from apps.BezierCanvas.cli import main, render_points


def test_render_command_writes_png(tmp_path: Path) -> None:
    output = tmp_path / "frames" / "curve.png"
    code = main(
        [
            "render",
            "--point", "0", "0",
            "--point", "400", "0",
            "--point", "900", "700",
            "--out", str(output),
        ]
    )

    assert code == 0
    assert output.exists()
    frame = image.imread(output)
    assert frame.shape == (600, 800, 4)
    # (900, 700) is clamped to (799, 599); the curve midpoint is (399.75, 149.75)
    assert frame[149, 399].tolist() == [1.0, 1.0, 1.0, 1.0]
    assert frame[599, 799, 3] < 1.0


def test_render_points_clamps_and_uses_settings(tmp_path: Path) -> None:
    settings_path = tmp_path / "settings.json"
    settings_path.write_text(json.dumps({"background": [0, 0, 0, 255]}), encoding="utf-8")

    output = render_points([(-10, -10)], tmp_path / "single.png", settings_path)
    frame = image.imread(output)
    assert frame[8, 8].tolist() == [0.0, 0.0, 0.0, 1.0]


def test_settings_command_prints_effective_settings(capsys) -> None:
    assert main(["settings"]) == 0
    printed = json.loads(capsys.readouterr().out)
    assert printed["grid_spacing"] == 16
    assert printed["control_polyline"] == [255, 255, 255, 100]
