#!/usr/bin/env python
"""Print the header information of TGA files as a table."""

import logging
import sys
from argparse import ArgumentParser
from typing import TextIO

from tgadecoder.high_level import decode_file, image_information
from tgadecoder.utils import shorten_str

logging.basicConfig()


def dumpinfo(outfp: TextIO, fname: str) -> None:
    image = decode_file(fname)
    rows = image_information(image)
    width = max(len(key) for key in rows)
    outfp.write(f"{fname}\n")
    for key, value in rows.items():
        outfp.write(f"  {key:<{width}}  {shorten_str(str(value), 72)}\n")
    for warning in image.warnings:
        outfp.write(f"  warning: {warning}\n")


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
        "--strict",
        "-s",
        default=False,
        action="store_true",
        help="Fail on truncated pixel data instead of showing a partial image.",
    )
    parser.add_argument(
        "--outfile",
        "-o",
        type=str,
        default="-",
        help='Path to file where output is written. Or "-" (default) to '
        "write to stdout.",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    parser = create_parser()
    args = parser.parse_args(args=argv)

    if args.debug:
        logging.getLogger().setLevel(logging.DEBUG)

    if args.strict:
        import tgadecoder.settings

        tgadecoder.settings.STRICT = True

    if args.outfile == "-":
        outfp = sys.stdout
    else:
        outfp = open(args.outfile, "w")  # noqa: SIM115

    try:
        for fname in args.files:
            dumpinfo(outfp, fname)
    finally:
        if outfp is not sys.stdout:
            outfp.close()


if __name__ == "__main__":
    sys.exit(main())
