from __future__ import annotations

from pathlib import Path

import pytest

from layerforge.design import Gerber
from layerforge.geometry import Arc, Circle, Line, Polygon
from layerforge.verify import verify_layer_file, verify_written


class _DummyCamSource:
    units = "metric"


class _DummyLayer:
    cam_source = _DummyCamSource()

    def __init__(self, primitives) -> None:
        self.primitives = primitives


def _written(tmp_path: Path):
    design = Gerber("demo")
    design.top_copper().add(Circle(0, 0, 1), Circle(2, 0, 1))
    design.outline()
    return design, design.write_gerber(tmp_path)


def test_verify_accepts_legacy_rU_mode(monkeypatch, tmp_path: Path) -> None:
    design, paths = _written(tmp_path)

    def fake_load_layer(path: str):
        with open(path, "rU", encoding="ascii") as fp:
            text = fp.read()
        return _DummyLayer([line for line in text.splitlines() if line.endswith("D03*")])

    monkeypatch.setattr("layerforge.verify.load_layer", fake_load_layer)

    assert verify_written(paths, design.layers) == {"demo.gtl": 2, "demo.gko": 0}


def test_verify_rejects_layer_that_reads_back_empty(monkeypatch, tmp_path: Path) -> None:
    design, paths = _written(tmp_path)
    monkeypatch.setattr("layerforge.verify.load_layer", lambda path: _DummyLayer([]))

    with pytest.raises(ValueError, match="demo.gtl has no primitives"):
        verify_layer_file(paths[0], design.layers[0])


def test_verify_parses_written_layer_with_pcb_tools(tmp_path: Path) -> None:
    design = Gerber("demo")
    copper = design.top_copper()
    copper.add(
        Circle(1, 2, 0.8),
        Line(0, 0, 5, 0, 0.25),
        Polygon([(0, 0), (1, 0), (1, 1)]),
        Arc(0, 0, 2, 0, 90, 0.2),
    )
    paths = design.write_gerber(tmp_path)

    assert verify_layer_file(paths[0], copper) == 4
