from __future__ import annotations

"""Design object: filename prefix, layer factory and on-disk export."""

from enum import Enum
import logging
from pathlib import Path

from .geometry import MBB
from .layer import Layer

logger = logging.getLogger(__name__)


class LayerKind(str, Enum):
    TOP_COPPER = "gtl"
    TOP_SOLDER_MASK = "gts"
    TOP_SILKSCREEN = "gto"
    BOTTOM_COPPER = "gbl"
    BOTTOM_SOLDER_MASK = "gbs"
    BOTTOM_SILKSCREEN = "gbo"
    INNER = "gl"
    DRILL = "drl"
    OUTLINE = "gko"

    @classmethod
    def parse(cls, name: str) -> "LayerKind":
        key = str(name).strip()
        try:
            return cls[key.upper()]
        except KeyError:
            pass
        try:
            return cls(key.lower())
        except ValueError:
            raise ValueError(f"Unsupported layer kind: {name}") from None


class Gerber:
    def __init__(self, filename_prefix: str) -> None:
        self.filename_prefix = filename_prefix
        self.layers: list[Layer] = []

    def _make_layer(self, extension: str) -> Layer:
        layer = Layer(f"{self.filename_prefix}.{extension}")
        self.layers.append(layer)
        return layer

    def top_copper(self) -> Layer:
        return self._make_layer(LayerKind.TOP_COPPER.value)

    def top_solder_mask(self) -> Layer:
        return self._make_layer(LayerKind.TOP_SOLDER_MASK.value)

    def top_silkscreen(self) -> Layer:
        return self._make_layer(LayerKind.TOP_SILKSCREEN.value)

    def bottom_copper(self) -> Layer:
        return self._make_layer(LayerKind.BOTTOM_COPPER.value)

    def bottom_solder_mask(self) -> Layer:
        return self._make_layer(LayerKind.BOTTOM_SOLDER_MASK.value)

    def bottom_silkscreen(self) -> Layer:
        return self._make_layer(LayerKind.BOTTOM_SILKSCREEN.value)

    def layer_n(self, n: int) -> Layer:
        """Internal copper layer ``n`` of a multi-layer board."""
        return self._make_layer(f"{LayerKind.INNER.value}{n}")

    def drill(self) -> Layer:
        return self._make_layer(LayerKind.DRILL.value)

    def outline(self) -> Layer:
        return self._make_layer(LayerKind.OUTLINE.value)

    def layer_for(self, kind: LayerKind, number: int | None = None) -> Layer:
        if kind is LayerKind.INNER:
            if number is None:
                raise ValueError("inner layers need a layer number")
            return self.layer_n(number)
        return self._make_layer(kind.value)

    def write_gerber(self, output_dir: Path) -> list[Path]:
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)
        written = []
        for layer in self.layers:
            path = output_dir / layer.filename
            with path.open("w", encoding="ascii", newline="\n") as fp:
                layer.write_gerber(fp)
            logger.info(
                "Wrote %s: primitives=%s apertures=%s",
                path.name,
                len(layer.primitives),
                len(layer.registry),
            )
            written.append(path)
        return written

    def mbb(self) -> MBB:
        result: MBB | None = None
        for layer in self.layers:
            if not layer.primitives:
                continue
            box = layer.mbb()
            if result is None:
                result = box
            else:
                result.join(box)
        if result is None:
            logger.warning("No primitives in design %s", self.filename_prefix)
            return MBB()
        return result
