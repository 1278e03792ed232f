# camcover/core/io.py
"""
Load and validate coverage scenarios from JSON.
Layout: {"required": {d_min, d_max, l_min, l_max}, "cameras": [{name?, d_min, ...} | [d_min, d_max, l_min, l_max], ...]}.
Bad ranges raise InvalidRangeError on construction; anything else malformed raises ValueError.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from camcover.core.types import Camera, Envelope, Scenario

_BOUND_KEYS: tuple[str, ...] = ("d_min", "d_max", "l_min", "l_max")


def _resolve_path(path: str | Path, repo_root: Path | None) -> Path:
    """Resolve path; if relative, against repo_root (or cwd if repo_root is None)."""
    p = Path(path)
    if not p.is_absolute() and repo_root is not None:
        p = repo_root / p
    return p.resolve()


def load_json(path: str | Path, repo_root: Path | None = None) -> Any:
    """Read and decode a JSON file. Raises FileNotFoundError / ValueError."""
    resolved = _resolve_path(path, repo_root)
    if not resolved.exists():
        raise FileNotFoundError(f"Scenario file not found: {resolved}")
    try:
        return json.loads(resolved.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise ValueError(f"Scenario file is not valid JSON: {resolved}: {e}") from e


def _bounds(obj: Any, what: str) -> tuple[float, float, float, float]:
    """Pull the four bounds out of a dict or a 4-element list."""
    if isinstance(obj, dict):
        missing = [k for k in _BOUND_KEYS if k not in obj]
        if missing:
            raise ValueError(f"{what} is missing bound(s): {', '.join(missing)}")
        values = [obj[k] for k in _BOUND_KEYS]
    elif isinstance(obj, (list, tuple)):
        if len(obj) != 4:
            raise ValueError(f"{what} needs 4 bounds [d_min, d_max, l_min, l_max], got {len(obj)}")
        values = list(obj)
    else:
        raise ValueError(f"{what} must be an object or a 4-element list")
    try:
        d_min, d_max, l_min, l_max = (float(v) for v in values)
    except (TypeError, ValueError) as e:
        raise ValueError(f"{what} has a non-numeric bound: {e}") from e
    return d_min, d_max, l_min, l_max


def parse_camera(obj: Any, index: int = 0) -> Camera:
    """One camera entry; default name is cam<index>."""
    name = f"cam{index}"
    if isinstance(obj, dict) and obj.get("name"):
        name = str(obj["name"])
    return Camera(*_bounds(obj, f"camera {index}"), name=name)


def parse_scenario(data: Any, source: str = "") -> Scenario:
    """Build a validated Scenario from a decoded JSON document."""
    if not isinstance(data, dict):
        raise ValueError("Scenario must be a JSON object")
    if "required" not in data:
        raise ValueError("Scenario has no 'required' envelope")
    required = Envelope(*_bounds(data["required"], "required"))
    raw_cams = data.get("cameras", [])
    if not isinstance(raw_cams, list):
        raise ValueError("'cameras' must be a list")
    cameras = [parse_camera(c, i) for i, c in enumerate(raw_cams)]
    return Scenario(required=required, cameras=cameras, source=source)


def load_scenario(path: str | Path, repo_root: Path | None = None) -> Scenario:
    """
    Load a scenario file and return a validated Scenario.
    Raises FileNotFoundError if missing, ValueError if malformed,
    InvalidRangeError (a ValueError) if any envelope has min > max.
    """
    data = load_json(path, repo_root)
    return parse_scenario(data, source=str(path))


def envelope_to_dict(env: Envelope) -> dict:
    out = {"d_min": env.d_min, "d_max": env.d_max, "l_min": env.l_min, "l_max": env.l_max}
    if isinstance(env, Camera) and env.name:
        out = {"name": env.name, **out}
    return out


def scenario_to_dict(scenario: Scenario) -> dict:
    """Inverse of parse_scenario (cameras always written as objects)."""
    return {
        "required": envelope_to_dict(scenario.required),
        "cameras": [envelope_to_dict(c) for c in scenario.cameras],
    }


def write_scenario_json(path: str | Path, scenario: Scenario) -> Path:
    """Write scenario JSON; creates parent dirs. Returns resolved path."""
    p = Path(path).resolve()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(scenario_to_dict(scenario), indent=2), encoding="utf-8")
    return p
