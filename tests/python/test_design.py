from __future__ import annotations

from pathlib import Path

import pytest

from layerforge.design import Gerber, LayerKind
from layerforge.geometry import MBB, Circle, Polygon


@pytest.mark.parametrize(
    ("method", "extension"),
    [
        ("top_copper", "gtl"),
        ("top_solder_mask", "gts"),
        ("top_silkscreen", "gto"),
        ("bottom_copper", "gbl"),
        ("bottom_solder_mask", "gbs"),
        ("bottom_silkscreen", "gbo"),
        ("drill", "drl"),
        ("outline", "gko"),
    ],
)
def test_factory_filenames(method: str, extension: str) -> None:
    design = Gerber("demo")
    layer = getattr(design, method)()
    assert layer.filename == f"demo.{extension}"
    assert design.layers == [layer]
    assert layer.registry.keys() == ["default"]


def test_inner_layer_is_numbered() -> None:
    design = Gerber("demo")
    assert design.layer_n(2).filename == "demo.gl2"
    assert design.layer_n(15).filename == "demo.gl15"


def test_layers_keep_creation_order_and_allow_duplicates() -> None:
    design = Gerber("demo")
    first = design.top_copper()
    outline = design.outline()
    again = design.top_copper()
    assert design.layers == [first, outline, again]
    assert first is not again
    assert first.filename == again.filename


@pytest.mark.parametrize(
    ("name", "kind"),
    [
        ("top_copper", LayerKind.TOP_COPPER),
        ("TOP_COPPER", LayerKind.TOP_COPPER),
        ("gbs", LayerKind.BOTTOM_SOLDER_MASK),
        ("inner", LayerKind.INNER),
        ("outline", LayerKind.OUTLINE),
    ],
)
def test_layer_kind_parse(name: str, kind: LayerKind) -> None:
    assert LayerKind.parse(name) is kind


def test_layer_kind_parse_rejects_unknown() -> None:
    with pytest.raises(ValueError, match="Unsupported layer kind: paste"):
        LayerKind.parse("paste")


def test_layer_for_dispatch() -> None:
    design = Gerber("demo")
    assert design.layer_for(LayerKind.DRILL).filename == "demo.drl"
    assert design.layer_for(LayerKind.INNER, 3).filename == "demo.gl3"
    with pytest.raises(ValueError, match="inner layers need a layer number"):
        design.layer_for(LayerKind.INNER)


def test_write_gerber_writes_one_file_per_layer(tmp_path: Path) -> None:
    design = Gerber("demo")
    design.top_copper().add(Circle(0, 0, 1))
    design.outline().add(Polygon([(0, 0), (10, 0), (10, 10), (0, 10)]))
    out_dir = tmp_path / "out"

    paths = design.write_gerber(out_dir)

    assert [p.name for p in paths] == ["demo.gtl", "demo.gko"]
    copper = (out_dir / "demo.gtl").read_text(encoding="ascii")
    assert copper.startswith("%FSLAX36Y36*%\n%MOMM*%\n%LPD*%\n%ADD11C,0.00100*%\n%ADD12C,1.00000*%\n")
    assert copper.endswith("M02*\n")
    assert "\r" not in copper


def test_write_gerber_propagates_filesystem_errors(tmp_path: Path) -> None:
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x", encoding="utf-8")
    design = Gerber("demo")
    design.top_copper()
    with pytest.raises(OSError):
        design.write_gerber(blocker)


def test_design_mbb_skips_empty_layers() -> None:
    design = Gerber("demo")
    design.top_copper().add(Circle(0, 0, 2))
    design.top_silkscreen()
    design.bottom_copper().add(Circle(5, 5, 2))
    assert design.mbb() == MBB(-1, -1, 6, 6)


def test_design_mbb_without_geometry(caplog) -> None:
    design = Gerber("demo")
    design.outline()
    with caplog.at_level("WARNING", logger="layerforge.design"):
        assert design.mbb() == MBB()
    assert "demo" in caplog.text
