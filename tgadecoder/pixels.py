"""Expand TGA pixel data into an RGBA8 framebuffer.

Every encoding reads pixels in file storage order (first stored row
first, left to right) and hands them to a :class:`PixelWriter`, which is
the only place that knows about vertical orientation.
"""

import enum
import logging
from collections.abc import Callable

from tgadecoder.colormap import ColorMapResolver
from tgadecoder.runlength import RunLengthDecoder
from tgadecoder.tgacolor import OPAQUE_BLACK, to_rgba
from tgadecoder.tgaheader import ImageType, TGAHeader

log = logging.getLogger(__name__)


class Encoding(enum.Enum):
    UNCOMPRESSED_GRAY_SCALE = "uncompressed gray scale"
    UNCOMPRESSED_TRUE_COLOR = "uncompressed true color"
    UNCOMPRESSED_COLOR_MAPPED = "uncompressed color mapped"
    RLE_TRUE_COLOR = "run length encoded true color"
    RLE_COLOR_MAPPED = "run length encoded color mapped"

    @classmethod
    def for_header(cls, header: TGAHeader) -> "Encoding | None":
        """The encoding of the pixel data, None when there is none."""
        return _ENCODINGS.get(header.image_type)


_ENCODINGS = {
    ImageType.GRAY_SCALE: Encoding.UNCOMPRESSED_GRAY_SCALE,
    ImageType.TRUE_COLOR: Encoding.UNCOMPRESSED_TRUE_COLOR,
    ImageType.COLOR_MAPPED: Encoding.UNCOMPRESSED_COLOR_MAPPED,
    ImageType.RUN_LENGTH_ENCODED_TRUE_COLOR: Encoding.RLE_TRUE_COLOR,
    ImageType.RUN_LENGTH_ENCODED_GRAY_SCALE: Encoding.RLE_TRUE_COLOR,
    ImageType.RUN_LENGTH_ENCODED_COLOR_MAPPED: Encoding.RLE_COLOR_MAPPED,
}


class PixelWriter:
    """RGBA8 destination addressed by storage-order pixel index.

    The buffer starts out opaque black so pixels that are never written
    (truncated data) are still fully defined.
    """

    def __init__(self, width: int, height: int, top_to_bottom: bool) -> None:
        self.width = width
        self.height = height
        self.top_to_bottom = top_to_bottom
        self.buffer = bytearray(OPAQUE_BLACK) * (width * height)

    def offset(self, x: int, y: int) -> int:
        """Destination byte offset for the pixel stored at (x, y)."""
        row = y if self.top_to_bottom else self.height - 1 - y
        return (row * self.width + x) * 4

    def put(self, index: int, rgba: bytes, count: int = 1) -> None:
        """Write one RGBA value to ``count`` pixels starting at ``index``."""
        while count > 0:
            y, x = divmod(index, self.width)
            n = min(count, self.width - x)
            start = self.offset(x, y)
            self.buffer[start : start + 4 * n] = rgba * n
            index += n
            count -= n

    def put_pixels(self, index: int, rgba: bytes) -> None:
        """Write consecutive RGBA pixels starting at ``index``."""
        pos = 0
        while pos < len(rgba):
            y, x = divmod(index, self.width)
            n = min((len(rgba) - pos) // 4, self.width - x)
            start = self.offset(x, y)
            self.buffer[start : start + 4 * n] = rgba[pos : pos + 4 * n]
            index += n
            pos += 4 * n

    def release(self) -> memoryview:
        """Read-only view of the finished buffer, without copying it."""
        return memoryview(self.buffer).toreadonly()


def index_size(pixel_size: int) -> int:
    """Bytes a run-length packet spends on one palette index."""
    return 1 if pixel_size == 1 else 2


def read_index(data: bytes, offset: int, pixel_size: int) -> int:
    """Palette index stored at offset: one byte, or a little-endian word."""
    if pixel_size == 1:
        return data[offset]
    return data[offset] | (data[offset + 1] << 8)


Expander = Callable[[bytes, TGAHeader, PixelWriter, ColorMapResolver | None], int]


def _expand_direct(
    data: bytes,
    header: TGAHeader,
    writer: PixelWriter,
    grayscale: bool,
) -> int:
    size = header.pixel_size
    npixels = min(header.npixels, len(data) // size)
    if npixels == 0:
        return 0
    for start in range(0, npixels, header.width):
        n = min(header.width, npixels - start)
        src = data[start * size : (start + n) * size]
        writer.put_pixels(start, to_rgba(src, size, grayscale))
    return npixels


def expand_gray_scale(
    data: bytes,
    header: TGAHeader,
    writer: PixelWriter,
    resolver: ColorMapResolver | None = None,
) -> int:
    return _expand_direct(data, header, writer, grayscale=True)


def expand_true_color(
    data: bytes,
    header: TGAHeader,
    writer: PixelWriter,
    resolver: ColorMapResolver | None = None,
) -> int:
    return _expand_direct(data, header, writer, grayscale=False)


def expand_color_mapped(
    data: bytes,
    header: TGAHeader,
    writer: PixelWriter,
    resolver: ColorMapResolver | None = None,
) -> int:
    assert resolver is not None
    size = header.pixel_size
    npixels = min(header.npixels, len(data) // size)
    for index in range(npixels):
        writer.put(index, resolver.color(read_index(data, index * size, size)))
    return npixels


def expand_rle_true_color(
    data: bytes,
    header: TGAHeader,
    writer: PixelWriter,
    resolver: ColorMapResolver | None = None,
) -> int:
    size = header.pixel_size
    grayscale = header.is_grayscale
    decoder = RunLengthDecoder(data, size, header.npixels)
    index = 0
    for offset, count in decoder.run():
        writer.put(index, to_rgba(data[offset : offset + size], size, grayscale), count)
        index += count
    return decoder.emitted


def expand_rle_color_mapped(
    data: bytes,
    header: TGAHeader,
    writer: PixelWriter,
    resolver: ColorMapResolver | None = None,
) -> int:
    assert resolver is not None
    # Packets carry 1- or 2-byte indexes whatever the declared depth
    size = index_size(header.pixel_size)
    decoder = RunLengthDecoder(data, size, header.npixels)
    index = 0
    for offset, count in decoder.run():
        writer.put(index, resolver.color(read_index(data, offset, size)), count)
        index += count
    return decoder.emitted


EXPANDERS: dict[Encoding, Expander] = {
    Encoding.UNCOMPRESSED_GRAY_SCALE: expand_gray_scale,
    Encoding.UNCOMPRESSED_TRUE_COLOR: expand_true_color,
    Encoding.UNCOMPRESSED_COLOR_MAPPED: expand_color_mapped,
    Encoding.RLE_TRUE_COLOR: expand_rle_true_color,
    Encoding.RLE_COLOR_MAPPED: expand_rle_color_mapped,
}


def expand(
    encoding: Encoding,
    data: bytes,
    header: TGAHeader,
    writer: PixelWriter,
    resolver: ColorMapResolver | None = None,
) -> int:
    """Expand ``data`` (the pixel data region) into ``writer``.

    Returns the number of pixels taken from the data, which is less than
    ``header.npixels`` when the data is truncated.
    """
    log.debug("Expanding %s pixels as %s", header.npixels, encoding.value)
    return EXPANDERS[encoding](data, header, writer, resolver)
