import json
from pathlib import Path
from typing import Any, Dict

from src.bezier2d.settings import RenderSettings, check_setting_keys

INCLUDE_KEY = "__include__"


def load_settings_json(path: str | Path) -> Dict[str, Any]:
    """Read a settings file, resolving ``__include__`` files first.

    Includes are applied in order and the including file wins. Every file is
    checked against the known setting names so a typo names its own file.
    """
    return _load_layer(Path(path), chain=())


def _load_layer(path: Path, chain: tuple[Path, ...]) -> Dict[str, Any]:
    path = path.resolve()
    if path in chain:
        cycle = " -> ".join(str(item) for item in (*chain, path))
        raise ValueError(f"Circular {INCLUDE_KEY} in settings: {cycle}")

    with open(path, "r", encoding="utf-8") as handle:
        layer = json.load(handle)
    if not isinstance(layer, dict):
        raise ValueError(f"Settings file {path} must contain a JSON object")

    includes = layer.pop(INCLUDE_KEY, [])
    if isinstance(includes, str):
        includes = [includes]
    check_setting_keys(layer, source=str(path))

    settings: Dict[str, Any] = {}
    for include in includes:
        include_path = Path(include)
        if not include_path.is_absolute():
            include_path = path.parent / include_path
        settings.update(_load_layer(include_path, (*chain, path)))
    settings.update(layer)
    return settings


def dump_settings(settings: RenderSettings) -> str:
    return json.dumps(settings.as_dict(), indent=2, sort_keys=True)
