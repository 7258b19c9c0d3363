from __future__ import annotations

"""Layer: ordered primitives, deduplicated apertures and a cached MBB."""

from dataclasses import dataclass
import logging
from typing import TextIO

from .geometry import MBB, Aperture, Primitive

logger = logging.getLogger(__name__)

DEFAULT_APERTURE_KEY = "default"
DEFAULT_APERTURE_CODE = 11
FIRST_APERTURE_CODE = 12

HEADER = ("%FSLAX36Y36*%\n", "%MOMM*%\n", "%LPD*%\n")
DEFAULT_APERTURE_DEFINITION = f"%ADD{DEFAULT_APERTURE_CODE}C,0.00100*%\n"
TRAILER = "M02*\n"


class DefaultAperture:
    """The document default aperture (D11); also the -1 registry slot."""

    index = -1

    def __repr__(self) -> str:
        return "DEFAULT_APERTURE"


DEFAULT_APERTURE = DefaultAperture()


@dataclass(frozen=True)
class RegisteredAperture:
    index: int


def select_code(ref: DefaultAperture | RegisteredAperture) -> int:
    if isinstance(ref, RegisteredAperture):
        return FIRST_APERTURE_CODE + ref.index
    return DEFAULT_APERTURE_CODE


def aperture_key(aperture: Aperture | None) -> str:
    if aperture is None:
        return DEFAULT_APERTURE_KEY
    return aperture.id()


class ApertureRegistry:
    """Apertures in first-seen order, indexed by identity key."""

    def __init__(self) -> None:
        self._apertures: list[Aperture] = []
        self._index: dict[str, int] = {DEFAULT_APERTURE_KEY: DEFAULT_APERTURE.index}

    def register(self, aperture: Aperture | None) -> DefaultAperture | RegisteredAperture:
        key = aperture_key(aperture)
        if key not in self:
            self._index[key] = len(self._apertures)
            self._apertures.append(aperture)
        return self.resolve(key)

    def resolve(self, key: str) -> DefaultAperture | RegisteredAperture:
        index = self.index_of(key)
        if index == DEFAULT_APERTURE.index:
            return DEFAULT_APERTURE
        return RegisteredAperture(index)

    def index_of(self, key: str) -> int:
        return self._index[key]

    @property
    def apertures(self) -> list[Aperture]:
        return list(self._apertures)

    def keys(self) -> list[str]:
        return list(self._index)

    def __contains__(self, key: str) -> bool:
        return key in self._index

    def __len__(self) -> int:
        return len(self._apertures)

    def __iter__(self):
        return iter(self._apertures)


class Layer:
    def __init__(self, filename: str) -> None:
        self._filename = filename
        self.primitives: list[Primitive] = []
        self.registry = ApertureRegistry()
        self._mbb: MBB | None = None

    @property
    def filename(self) -> str:
        return self._filename

    @property
    def apertures(self) -> list[Aperture]:
        return self.registry.apertures

    def add(self, *primitives: Primitive) -> None:
        for prim in primitives:
            self.registry.register(prim.aperture())
        self.primitives.extend(primitives)

    def write_gerber(self, fp: TextIO) -> None:
        for line in HEADER:
            fp.write(line)

        fp.write(DEFAULT_APERTURE_DEFINITION)
        for index, aperture in enumerate(self.registry):
            aperture.write_gerber(fp, select_code(RegisteredAperture(index)))

        for prim in self.primitives:
            ref = self.registry.resolve(aperture_key(prim.aperture()))
            prim.write_gerber(fp, select_code(ref))

        fp.write(TRAILER)

    def mbb(self) -> MBB:
        # Cached on first use; add() leaves a stale value in place until
        # clear_mbb_cache() is called.
        if self._mbb is not None:
            return self._mbb.copy()
        for i, prim in enumerate(self.primitives):
            box = prim.mbb()
            if i == 0:
                self._mbb = box.copy()
                continue
            self._mbb.join(box)
        if self._mbb is None:
            logger.warning("No primitives on layer %s", self._filename)
            self._mbb = MBB()
        return self._mbb.copy()

    def clear_mbb_cache(self) -> None:
        self._mbb = None

    def __repr__(self) -> str:
        return f"Layer({self._filename!r}, primitives={len(self.primitives)}, apertures={len(self.registry)})"
