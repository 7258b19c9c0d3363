"""Geometry exports: bounding boxes, apertures and drawable primitives."""

from .apertures import Aperture, CircleAperture, RectangleAperture
from .bbox import MBB
from .primitives import Arc, Circle, Line, Polygon, Primitive, format_coordinate

__all__ = [
    "Aperture",
    "Arc",
    "Circle",
    "CircleAperture",
    "Line",
    "MBB",
    "Polygon",
    "Primitive",
    "RectangleAperture",
    "format_coordinate",
]
