from __future__ import annotations

"""Build a Gerber design from a JSON board description."""

import json
import logging
from pathlib import Path

from .config import LayerForgeConfig
from .design import Gerber, LayerKind
from .geometry import Arc, Circle, Line, Polygon

logger = logging.getLogger(__name__)


def load_board(path: Path, config: LayerForgeConfig, filename_prefix: str | None = None) -> Gerber:
    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Board description not found: {path}")
    logger.info("Loading board description: %s", path.name)
    data = json.loads(path.read_text(encoding="utf-8"))
    return build_design(data, config, filename_prefix)


def build_design(data: dict, config: LayerForgeConfig, filename_prefix: str | None = None) -> Gerber:
    prefix = filename_prefix or data.get("filename_prefix") or config.filename_prefix
    design = Gerber(str(prefix))
    for entry in data.get("layers", []):
        kind = LayerKind.parse(_require(entry, "kind", "layer"))
        number = entry.get("number")
        layer = design.layer_for(kind, int(number) if number is not None else None)
        layer.add(*[_build_primitive(p, config) for p in entry.get("primitives", [])])
        logger.info("Layer %s: primitives=%s", layer.filename, len(layer.primitives))
    return design


def _build_primitive(data: dict, config: LayerForgeConfig):
    kind = str(_require(data, "type", "primitive")).lower()
    if kind == "circle":
        return Circle(
            _require(data, "x", kind),
            _require(data, "y", kind),
            _require(data, "diameter", kind),
        )
    if kind == "line":
        return Line(
            _require(data, "x1", kind),
            _require(data, "y1", kind),
            _require(data, "x2", kind),
            _require(data, "y2", kind),
            _require(data, "width", kind),
            shape=str(data.get("shape", config.line_shape)),
        )
    if kind == "polygon":
        offset = data.get("offset", (0.0, 0.0))
        return Polygon(_require(data, "points", kind), offset=(float(offset[0]), float(offset[1])))
    if kind == "arc":
        return Arc(
            _require(data, "x", kind),
            _require(data, "y", kind),
            _require(data, "radius", kind),
            _require(data, "start_angle", kind),
            _require(data, "end_angle", kind),
            _require(data, "width", kind),
            clockwise=bool(data.get("clockwise", False)),
            steps=config.arc_steps,
        )
    raise ValueError(f"Unsupported primitive type: {kind}")


def _require(data: dict, key: str, label: str):
    if key not in data:
        raise ValueError(f"{label} is missing required field: {key}")
    return data[key]
