from __future__ import annotations

import argparse
import logging
from pathlib import Path

from .config import LayerForgeConfig
from .loader import load_board
from .verify import verify_written

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Write Gerber layer files from a board description.")
    parser.add_argument("board_json", type=Path, help="Board description JSON")
    parser.add_argument("output_dir", type=Path, nargs="?", default=None, help="Output directory")
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to layerforge.json config",
    )
    parser.add_argument("--prefix", default=None, help="Override the output filename prefix")
    parser.add_argument("--verify", action="store_true", help="Re-read written files with pcb-tools")
    args = parser.parse_args(argv)

    if not logging.getLogger().handlers:
        logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")

    if args.config is not None:
        config = LayerForgeConfig.from_json(args.config)
    else:
        config = LayerForgeConfig.load_default()
    config.validate()

    design = load_board(args.board_json, config, filename_prefix=args.prefix)
    if config.skip_empty_layers:
        skipped = [layer.filename for layer in design.layers if not layer.primitives]
        design.layers = [layer for layer in design.layers if layer.primitives]
        if skipped:
            logger.info("Skipping empty layers: %s", ", ".join(skipped))

    output_dir = args.output_dir or Path(config.output_dir)
    logger.info("Writing %s layers to %s", len(design.layers), output_dir)
    paths = design.write_gerber(output_dir)

    box = design.mbb()
    logger.info(
        "Design bounds: (%.3f, %.3f) - (%.3f, %.3f) mm, %.3f x %.3f mm",
        box.min_x,
        box.min_y,
        box.max_x,
        box.max_y,
        box.width,
        box.height,
    )

    if args.verify or config.verify_output:
        verify_written(paths, design.layers)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
