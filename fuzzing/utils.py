"""Utilities shared across the TGA fuzzing harnesses"""

import logging

import atheris

from tgadecoder import settings
from tgadecoder.tgaheader import HEADER_SIZE, ImageType

_IMAGE_TYPES = frozenset(t.value for t in ImageType)

# Tighter than the library default so a single input stays cheap to decode
MAX_PIXELS = 1 << 22


def prepare_tgadecoder_fuzzing() -> None:
    """Used to disable logging of the tgadecoder module and cap image size"""
    logging.getLogger("tgadecoder").setLevel(logging.CRITICAL)
    settings.MAX_PIXELS = MAX_PIXELS


@atheris.instrument_func  # type: ignore[misc]
def is_valid_byte_stream(data: bytes) -> bool:
    """Quick check to see if this is worth of passing to atheris
    :return: Whether the byte-stream passes the basic checks
    """
    if len(data) < HEADER_SIZE:
        return False
    return data[1] in (0, 1) and data[2] in _IMAGE_TYPES
