"""TGA header and version-2 footer parsing.

The fixed 18-byte header describes everything needed to locate the
color map and the pixel data::

    offset  size  field
    0       1     ID length
    1       1     color map type (0 = none, 1 = present)
    2       1     image type
    3       2     color map origin
    5       2     color map length
    7       1     color map entry size (bits)
    8       2     x origin
    10      2     y origin
    12      2     width
    14      2     height
    16      1     pixel depth (bits)
    17      1     image descriptor

Version 2 files end with a 26-byte footer whose last 18 bytes are the
signature ``TRUEVISION-XFILE.\\0`` and whose first 4 bytes hold the
extension area offset.
"""

import enum
import logging

from tgadecoder import settings
from tgadecoder.tgaexceptions import (
    BufferOverrun,
    ImageTooLarge,
    InvalidColorMapEntrySize,
    InvalidPixelSize,
    MissingColorMap,
    TruncatedHeader,
    UnsupportedColorMapType,
    UnsupportedImageType,
)
from tgadecoder.utils import check_range, read_u16, read_u32, title_case

log = logging.getLogger(__name__)

HEADER_SIZE = 18
FOOTER_SIZE = 26
SIGNATURE = b"TRUEVISION-XFILE.\x00"

COLORMAP_NONE = 0
COLORMAP_PRESENT = 1

TOP_TO_BOTTOM = 0x10


class ImageType(enum.IntEnum):
    NO_IMAGE_DATA = 0
    COLOR_MAPPED = 1
    TRUE_COLOR = 2
    GRAY_SCALE = 3
    RUN_LENGTH_ENCODED_COLOR_MAPPED = 9
    RUN_LENGTH_ENCODED_TRUE_COLOR = 10
    RUN_LENGTH_ENCODED_GRAY_SCALE = 11

    @property
    def label(self) -> str:
        """Human readable name, e.g. "Run Length Encoded Gray Scale"."""
        return title_case(self.name.lower().replace("_", " "))


RLE_IMAGE_TYPES = frozenset(
    {
        ImageType.RUN_LENGTH_ENCODED_COLOR_MAPPED,
        ImageType.RUN_LENGTH_ENCODED_TRUE_COLOR,
        ImageType.RUN_LENGTH_ENCODED_GRAY_SCALE,
    },
)
COLOR_MAPPED_IMAGE_TYPES = frozenset(
    {ImageType.COLOR_MAPPED, ImageType.RUN_LENGTH_ENCODED_COLOR_MAPPED},
)
GRAY_SCALE_IMAGE_TYPES = frozenset(
    {ImageType.GRAY_SCALE, ImageType.RUN_LENGTH_ENCODED_GRAY_SCALE},
)


def depth_to_bytes(bits: int) -> int | None:
    """Bytes per pixel for a depth in bits, or None when unsupported.

    15-bit data is stored in 16-bit little-endian words.
    """
    if bits == 15:
        return 2
    if bits % 8 != 0 or bits // 8 not in (1, 2, 3, 4):
        return None
    return bits // 8


class TGAHeader:
    """Parsed TGA header plus the offsets derived from it.

    Instances are created with :meth:`parse` and are not modified
    afterwards.
    """

    def __init__(
        self,
        id_length: int,
        colormap_type: int,
        image_type: ImageType,
        colormap_origin: int,
        colormap_length: int,
        colormap_entry_size: int,
        x_origin: int,
        y_origin: int,
        width: int,
        height: int,
        pixel_size: int,
        descriptor: int,
        version: int = 1,
        extension_offset: int = 0,
        image_id: bytes = b"",
        file_size: int = 0,
    ) -> None:
        self.id_length = id_length
        self.colormap_type = colormap_type
        self.image_type = image_type
        self.colormap_origin = colormap_origin
        self.colormap_length = colormap_length
        self.colormap_entry_size = colormap_entry_size
        self.x_origin = x_origin
        self.y_origin = y_origin
        self.width = width
        self.height = height
        self.pixel_size = pixel_size
        self.descriptor = descriptor
        self.version = version
        self.extension_offset = extension_offset
        self.image_id = image_id
        self.file_size = file_size

    @classmethod
    def parse(cls, data: bytes) -> "TGAHeader":
        """Parse the header and footer of a complete TGA file.

        Raises a TGAParseError subclass for anything that prevents the
        pixel data from being located, ImageTooLarge when the image has more
        than ``settings.MAX_PIXELS`` pixels, and BufferOverrun when the
        declared structure does not fit in ``data``.
        """
        if len(data) < HEADER_SIZE:
            raise TruncatedHeader(
                f"TGA header needs {HEADER_SIZE} bytes, got {len(data)}",
            )

        id_length = data[0]
        colormap_type = data[1]
        image_type_value = data[2]
        colormap_origin = read_u16(data, 3)
        colormap_length = read_u16(data, 5)
        colormap_depth = data[7]
        x_origin = read_u16(data, 8)
        y_origin = read_u16(data, 10)
        width = read_u16(data, 12)
        height = read_u16(data, 14)
        pixel_depth = data[16]
        descriptor = data[17]

        if colormap_type not in (COLORMAP_NONE, COLORMAP_PRESENT):
            raise UnsupportedColorMapType(
                f'Color Map Type "{colormap_type}" is not supported!',
            )
        try:
            image_type = ImageType(image_type_value)
        except ValueError:
            raise UnsupportedImageType(
                f'Image Type "{image_type_value}" is not supported!',
            ) from None

        colormap_entry_size = 0
        if colormap_type == COLORMAP_PRESENT:
            entry_size = depth_to_bytes(colormap_depth)
            if entry_size is None:
                raise InvalidColorMapEntrySize(
                    f"Invalid color map entry size: {colormap_depth} bits",
                )
            colormap_entry_size = entry_size
        elif image_type in COLOR_MAPPED_IMAGE_TYPES:
            raise MissingColorMap(
                f"{image_type.label} image has no color map",
            )

        pixel_size = 0
        if image_type != ImageType.NO_IMAGE_DATA:
            size = depth_to_bytes(pixel_depth)
            if size is None:
                raise InvalidPixelSize(f"Invalid pixel size: {pixel_depth} bits")
            pixel_size = size

        if settings.MAX_PIXELS is not None and width * height > settings.MAX_PIXELS:
            raise ImageTooLarge(
                f"Image size ({width}x{height} = {width * height} pixels) exceeds "
                f"limit of {settings.MAX_PIXELS} pixels",
            )

        check_range(data, HEADER_SIZE, id_length)
        image_id = bytes(data[HEADER_SIZE : HEADER_SIZE + id_length])

        version = 2 if data[-len(SIGNATURE) :] == SIGNATURE else 1
        extension_offset = 0
        if version == 2:
            extension_offset = read_u32(data, len(data) - FOOTER_SIZE)

        header = cls(
            id_length=id_length,
            colormap_type=colormap_type,
            image_type=image_type,
            colormap_origin=colormap_origin,
            colormap_length=colormap_length,
            colormap_entry_size=colormap_entry_size,
            x_origin=x_origin,
            y_origin=y_origin,
            width=width,
            height=height,
            pixel_size=pixel_size,
            descriptor=descriptor,
            version=version,
            extension_offset=extension_offset,
            image_id=image_id,
            file_size=len(data),
        )
        if not (header.image_data_offset <= header.footer_offset <= len(data)):
            raise BufferOverrun(
                f"Pixel data region [{header.image_data_offset}, "
                f"{header.footer_offset}) does not fit in {len(data)} bytes",
            )
        log.debug("Parsed %r", header)
        return header

    @property
    def colormap_offset(self) -> int:
        """Start of the color map (and of the pixel data when there is none)."""
        return HEADER_SIZE + self.id_length

    @property
    def image_data_offset(self) -> int:
        if self.colormap_type == COLORMAP_PRESENT:
            return (
                self.colormap_offset
                + self.colormap_length * self.colormap_entry_size
            )
        return self.colormap_offset

    @property
    def footer_offset(self) -> int:
        """End of the pixel data."""
        if self.version == 2:
            if self.extension_offset != 0:
                return self.extension_offset
            return self.file_size - FOOTER_SIZE
        return self.file_size

    @property
    def rle(self) -> bool:
        return self.image_type in RLE_IMAGE_TYPES

    @property
    def top_to_bottom(self) -> bool:
        return (self.descriptor & TOP_TO_BOTTOM) == TOP_TO_BOTTOM

    @property
    def is_color_mapped(self) -> bool:
        return self.image_type in COLOR_MAPPED_IMAGE_TYPES

    @property
    def is_grayscale(self) -> bool:
        return self.image_type in GRAY_SCALE_IMAGE_TYPES

    @property
    def image_type_name(self) -> str:
        return self.image_type.label

    @property
    def npixels(self) -> int:
        return self.width * self.height

    def __repr__(self) -> str:
        return (
            f"<TGAHeader: v{self.version} {self.image_type.name} "
            f"{self.width}x{self.height} pixel_size={self.pixel_size} "
            f"colormap={self.colormap_length}x{self.colormap_entry_size} "
            f"data=[{self.image_data_offset}, {self.footer_offset})>"
        )
