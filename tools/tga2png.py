#!/usr/bin/env python
"""Convert TGA files to PNG (or another format Pillow can write)."""

import logging
import os.path
import sys
from argparse import ArgumentParser

from tgadecoder.high_level import decode_file
from tgadecoder.image import ImageWriter

logging.basicConfig()

log = logging.getLogger(__name__)


def convert_files(
    files: list[str],
    output_dir: str = ".",
    ext: str = ".png",
) -> list[str]:
    """Decode every file and write it to output_dir, returning the new names."""
    if not files:
        raise ValueError("Must provide files to work upon!")

    imagewriter = ImageWriter(output_dir)
    names = []
    for fname in files:
        image = decode_file(fname)
        for warning in image.warnings:
            log.warning("%s: %s", fname, warning)
        basename = os.path.splitext(os.path.basename(fname))[0]
        names.append(imagewriter.export_image(image, basename, ext))
    return names


def create_parser() -> ArgumentParser:
    parser = ArgumentParser(description=__doc__, add_help=True)
    parser.add_argument(
        "files",
        type=str,
        default=None,
        nargs="+",
        help="One or more paths to TGA files.",
    )
    parser.add_argument(
        "--debug",
        "-d",
        default=False,
        action="store_true",
        help="Use debug logging level.",
    )
    parser.add_argument(
        "--output-dir",
        "-O",
        type=str,
        default=".",
        help="Output directory for converted images.",
    )
    parser.add_argument(
        "--format",
        "-f",
        type=str,
        default="png",
        help="Output format, as a file extension: png|bmp|tiff|jpg "
        "(default is png).",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = create_parser()
    args = parser.parse_args(args=argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    for name in convert_files(args.files, args.output_dir, "." + args.format):
        print(name)
    return 0


if __name__ == "__main__":
    sys.exit(main())
