from __future__ import annotations

"""Drawable primitives and their RS-274X draw commands."""

import math
from typing import Iterable, Protocol, TextIO

import numpy as np
from shapely.geometry import LineString, MultiPoint

from .apertures import Aperture, CircleAperture, RectangleAperture
from .bbox import MBB

# %FSLAX36Y36*%: six fractional digits
COORDINATE_SCALE = 1_000_000


def format_coordinate(value_mm: float) -> str:
    return str(int(round(value_mm * COORDINATE_SCALE)))


def _xy(x: float, y: float) -> str:
    return f"X{format_coordinate(x)}Y{format_coordinate(y)}"


class Primitive(Protocol):
    def aperture(self) -> Aperture | None:
        ...

    def write_gerber(self, fp: TextIO, aperture_code: int) -> None:
        ...

    def mbb(self) -> MBB:
        ...


class Circle:
    """Round pad flashed with a circular aperture of its own diameter."""

    def __init__(self, x: float, y: float, diameter: float) -> None:
        self.x = float(x)
        self.y = float(y)
        self.diameter = float(diameter)

    def aperture(self) -> Aperture | None:
        return CircleAperture(self.diameter)

    def write_gerber(self, fp: TextIO, aperture_code: int) -> None:
        fp.write(f"D{aperture_code}*\n")
        fp.write(f"{_xy(self.x, self.y)}D03*\n")

    def mbb(self) -> MBB:
        r = self.diameter / 2.0
        return MBB(self.x - r, self.y - r, self.x + r, self.y + r)


class Line:
    """Straight trace stroked with a round (circle) or square (rect) tool."""

    def __init__(
        self,
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        width: float,
        shape: str = "circle",
    ) -> None:
        if shape not in {"circle", "rect"}:
            raise ValueError("line shape must be circle or rect")
        self.x1 = float(x1)
        self.y1 = float(y1)
        self.x2 = float(x2)
        self.y2 = float(y2)
        self.width = float(width)
        self.shape = shape

    def aperture(self) -> Aperture | None:
        if self.shape == "rect":
            return RectangleAperture(self.width, self.width)
        return CircleAperture(self.width)

    def write_gerber(self, fp: TextIO, aperture_code: int) -> None:
        fp.write(f"D{aperture_code}*\n")
        fp.write(f"{_xy(self.x1, self.y1)}D02*\n")
        fp.write(f"{_xy(self.x2, self.y2)}D01*\n")

    def mbb(self) -> MBB:
        # Both tools are symmetric about the path, so the stroke adds half
        # the width on every side of the centreline box.
        half = self.width / 2.0
        center = MBB.from_bounds(LineString([(self.x1, self.y1), (self.x2, self.y2)]).bounds)
        return MBB(center.min_x - half, center.min_y - half, center.max_x + half, center.max_y + half)


class Polygon:
    """Filled region (G36/G37); drawn with the document default aperture."""

    def __init__(self, points: Iterable, offset: tuple[float, float] = (0.0, 0.0)) -> None:
        ox, oy = offset
        self.points = [(float(x) + ox, float(y) + oy) for (x, y) in points]
        if not self.points:
            raise ValueError("polygon needs at least one point")

    def aperture(self) -> Aperture | None:
        return None

    def write_gerber(self, fp: TextIO, aperture_code: int) -> None:
        fp.write(f"D{aperture_code}*\n")
        fp.write("G36*\n")
        first = self.points[0]
        fp.write(f"{_xy(*first)}D02*\n")
        for x, y in self.points[1:]:
            fp.write(f"{_xy(x, y)}D01*\n")
        fp.write(f"{_xy(*first)}D01*\n")
        fp.write("G37*\n")

    def mbb(self) -> MBB:
        return MBB.from_bounds(MultiPoint(self.points).bounds)


class Arc:
    """Circular arc stroked with a round tool; angles are in degrees."""

    def __init__(
        self,
        x: float,
        y: float,
        radius: float,
        start_angle: float,
        end_angle: float,
        width: float,
        clockwise: bool = False,
        steps: int = 64,
    ) -> None:
        self.x = float(x)
        self.y = float(y)
        self.radius = float(radius)
        self.start_angle = float(start_angle)
        self.end_angle = float(end_angle)
        self.width = float(width)
        self.clockwise = bool(clockwise)
        self.steps = max(8, int(steps))

    def _point(self, angle_deg: float) -> tuple[float, float]:
        a = math.radians(angle_deg)
        return (self.x + self.radius * math.cos(a), self.y + self.radius * math.sin(a))

    def aperture(self) -> Aperture | None:
        return CircleAperture(self.width)

    def write_gerber(self, fp: TextIO, aperture_code: int) -> None:
        sx, sy = self._point(self.start_angle)
        ex, ey = self._point(self.end_angle)
        mode = "G02" if self.clockwise else "G03"
        fp.write(f"D{aperture_code}*\n")
        fp.write("G75*\n")
        fp.write(f"{_xy(sx, sy)}D02*\n")
        fp.write(
            f"{mode}{_xy(ex, ey)}"
            f"I{format_coordinate(self.x - sx)}J{format_coordinate(self.y - sy)}D01*\n"
        )
        fp.write("G01*\n")

    def _sweep(self) -> tuple[float, float]:
        start = self.start_angle
        end = self.end_angle
        if self.clockwise:
            if end >= start:
                end -= 360.0
        elif end <= start:
            end += 360.0
        return start, end

    def points(self) -> list[tuple[float, float]]:
        start, end = self._sweep()
        angles = np.radians(np.linspace(start, end, self.steps))
        xs = self.x + self.radius * np.cos(angles)
        ys = self.y + self.radius * np.sin(angles)
        return [(float(px), float(py)) for px, py in zip(xs, ys)]

    def mbb(self) -> MBB:
        # Extremes of a circular arc are its endpoints plus any of the
        # 0/90/180/270 degree points inside the swept range.
        start, end = self._sweep()
        lo, hi = min(start, end), max(start, end)
        axis = np.arange(math.ceil(lo / 90.0) * 90.0, hi + 1e-9, 90.0)
        angles = np.radians(np.concatenate(([start, end], axis)))
        xs = self.x + self.radius * np.cos(angles)
        ys = self.y + self.radius * np.sin(angles)
        half = self.width / 2.0
        return MBB(
            float(xs.min()) - half,
            float(ys.min()) - half,
            float(xs.max()) + half,
            float(ys.max()) + half,
        )
