"""
Identicon CLI — render one PNG per input string.

Usage:
  identicon "hello world!"                 # writes ./hello world!.png
  identicon alice bob -o avatars/          # batch, into a folder
  identicon alice --ascii --no-save        # preview the pattern only
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

from identicon.config import settings
from identicon.engine.pipeline import create_pipeline
from identicon.engine.context import Image
from identicon.storage import save_image
from identicon.utils.grid import grid_to_mask, mask_to_text

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Deterministic identicon generator")
    parser.add_argument("text", nargs="+", help="String(s) to render")
    parser.add_argument(
        "-o", "--output-dir",
        default=None,
        help="Folder for <text>.png files (default: $IDENTICON_OUTPUT_DIR or .)",
    )
    parser.add_argument("--ascii", action="store_true", help="Print the cell pattern")
    parser.add_argument("--no-save", action="store_true", help="Do not write PNG files")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    level = "debug" if args.verbose else settings.identicon_log_level
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    output_dir = Path(args.output_dir or settings.identicon_output_dir)
    pipeline = create_pipeline()
    status = 0

    for text in args.text:
        image = pipeline.run(Image(input=text))

        if args.ascii:
            print(f"{text}  rgb{image.color}")
            print(mask_to_text(grid_to_mask(image.grid)))

        if args.no_save:
            continue

        try:
            output_dir.mkdir(parents=True, exist_ok=True)
            path = save_image(image, output_dir)
        except OSError as e:  # includes PersistenceError
            print(f"Error: {e}", file=sys.stderr)
            status = 1
            continue
        print(path)

    return status


if __name__ == "__main__":
    sys.exit(main())
