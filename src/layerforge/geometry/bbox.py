from __future__ import annotations

"""Axis-aligned bounding boxes in millimeters."""

from dataclasses import dataclass, replace

from shapely.geometry import box


@dataclass
class MBB:
    min_x: float = 0.0
    min_y: float = 0.0
    max_x: float = 0.0
    max_y: float = 0.0

    @classmethod
    def from_bounds(cls, bounds) -> "MBB":
        # shapely geometries report (min_x, min_y, max_x, max_y)
        min_x, min_y, max_x, max_y = bounds
        return cls(float(min_x), float(min_y), float(max_x), float(max_y))

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    def join(self, other: "MBB") -> None:
        self.min_x = min(self.min_x, other.min_x)
        self.min_y = min(self.min_y, other.min_y)
        self.max_x = max(self.max_x, other.max_x)
        self.max_y = max(self.max_y, other.max_y)

    def copy(self) -> "MBB":
        return replace(self)

    def to_box(self):
        return box(self.min_x, self.min_y, self.max_x, self.max_y)
