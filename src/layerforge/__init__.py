"""Assemble PCB primitives into layers and write RS-274X layer files."""

from .design import Gerber, LayerKind
from .layer import (
    DEFAULT_APERTURE,
    ApertureRegistry,
    Layer,
    RegisteredAperture,
    select_code,
)

__all__ = [
    "DEFAULT_APERTURE",
    "ApertureRegistry",
    "Gerber",
    "Layer",
    "LayerKind",
    "RegisteredAperture",
    "select_code",
]
