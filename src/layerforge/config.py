from __future__ import annotations

import json
import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class LayerForgeConfig:
    filename_prefix: str
    output_dir: str
    line_shape: str
    arc_steps: int
    skip_empty_layers: bool
    verify_output: bool

    @staticmethod
    def default_path() -> Path:
        return _user_config_dir() / "layerforge.json"

    @staticmethod
    def load_default() -> "LayerForgeConfig":
        user_path = LayerForgeConfig.default_path()
        if user_path.exists():
            return LayerForgeConfig.from_json(user_path)
        return LayerForgeConfig.from_dict({})

    @staticmethod
    def from_json(path: Path) -> "LayerForgeConfig":
        data = json.loads(Path(path).read_text(encoding="utf-8"))
        return LayerForgeConfig.from_dict(data)

    @staticmethod
    def from_dict(data: dict) -> "LayerForgeConfig":
        filename_prefix = str(data.get("filename_prefix", "board"))
        output_dir = str(data.get("output_dir", "gerber"))
        line_shape = str(data.get("line_shape", "circle"))
        arc_steps = int(data.get("arc_steps", 64))
        skip_empty_layers = bool(data.get("skip_empty_layers", False))
        verify_output = bool(data.get("verify_output", False))
        return LayerForgeConfig(
            filename_prefix=filename_prefix,
            output_dir=output_dir,
            line_shape=line_shape,
            arc_steps=arc_steps,
            skip_empty_layers=skip_empty_layers,
            verify_output=verify_output,
        )

    def validate(self) -> None:
        if not self.filename_prefix.strip():
            raise ValueError("filename_prefix must not be empty")
        if not self.output_dir.strip():
            raise ValueError("output_dir must not be empty")
        if self.line_shape not in {"circle", "rect"}:
            raise ValueError("line_shape must be circle or rect")
        if self.arc_steps < 8:
            raise ValueError("arc_steps must be >= 8")


def _user_config_dir() -> Path:
    if os.name == "nt":
        base = os.environ.get("APPDATA") or os.environ.get("USERPROFILE")
        if base:
            return Path(base) / "LayerForge"
    base = os.environ.get("XDG_CONFIG_HOME")
    if base:
        return Path(base) / "layerforge"
    return Path.home() / ".config" / "layerforge"
