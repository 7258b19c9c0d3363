from __future__ import annotations

"""Aperture definitions: reusable stamp shapes referenced by D-codes."""

from typing import Protocol, TextIO


class Aperture(Protocol):
    def id(self) -> str:
        ...

    def write_gerber(self, fp: TextIO, aperture_code: int) -> None:
        ...


class CircleAperture:
    shape = "C"

    def __init__(self, diameter: float) -> None:
        self.diameter = float(diameter)

    def id(self) -> str:
        return f"{self.shape}{self.diameter:.5f}"

    def write_gerber(self, fp: TextIO, aperture_code: int) -> None:
        fp.write(f"%ADD{aperture_code}{self.shape},{self.diameter:.5f}*%\n")

    def __repr__(self) -> str:
        return f"CircleAperture({self.diameter!r})"


class RectangleAperture:
    shape = "R"

    def __init__(self, width: float, height: float) -> None:
        self.width = float(width)
        self.height = float(height)

    def id(self) -> str:
        return f"{self.shape}{self.width:.5f}X{self.height:.5f}"

    def write_gerber(self, fp: TextIO, aperture_code: int) -> None:
        fp.write(f"%ADD{aperture_code}{self.shape},{self.width:.5f}X{self.height:.5f}*%\n")

    def __repr__(self) -> str:
        return f"RectangleAperture({self.width!r}, {self.height!r})"
