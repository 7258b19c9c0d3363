from __future__ import annotations

"""Read written layer files back through pcb-tools as a sanity check."""

import builtins
from contextlib import contextmanager
import logging
from pathlib import Path
from threading import RLock
from typing import Iterable

from gerber import load_layer

from .layer import Layer

logger = logging.getLogger(__name__)
_OPEN_PATCH_LOCK = RLock()


def verify_layer_file(path: Path, layer: Layer) -> int:
    logger.info("Checking layer file: %s", path.name)
    with _legacy_open_mode_compat():
        parsed = load_layer(str(path))
    count = len(parsed.primitives)
    logger.info("Units: %s, primitives: %s", parsed.cam_source.units, count)
    if layer.primitives and count == 0:
        raise ValueError(f"{path.name} has no primitives after re-reading; check layer output.")
    return count


def verify_written(paths: Iterable[Path], layers: Iterable[Layer]) -> dict[str, int]:
    return {path.name: verify_layer_file(path, layer) for path, layer in zip(paths, layers)}


@contextmanager
def _legacy_open_mode_compat():
    # pcb-tools still opens files with "rU"; Python 3.11 removed it.
    with _OPEN_PATCH_LOCK:
        original_open = builtins.open

        def compat_open(file, mode="r", *args, **kwargs):
            if isinstance(mode, str) and "U" in mode:
                mode = mode.replace("U", "") or "r"
            return original_open(file, mode, *args, **kwargs)

        builtins.open = compat_open
        try:
            yield
        finally:
            builtins.open = original_open
