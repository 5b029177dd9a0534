"""Build small synthetic TGA files in memory."""

import struct

SIGNATURE = b"TRUEVISION-XFILE.\x00"


def build_tga(
    pixels: bytes,
    width: int,
    height: int,
    image_type: int = 2,
    pixel_depth: int = 24,
    descriptor: int = 0x10,
    image_id: bytes = b"",
    colormap: bytes = b"",
    colormap_type: int | None = None,
    colormap_origin: int = 0,
    colormap_length: int = 0,
    colormap_depth: int = 0,
    x_origin: int = 0,
    y_origin: int = 0,
    version2: bool = False,
    extension: bytes = b"",
) -> bytes:
    """Assemble header, ID field, color map and pixel data.

    With ``version2`` a 26-byte footer is appended; a non-empty
    ``extension`` is placed between the pixel data and the footer and the
    footer points at it.
    """
    if colormap_type is None:
        colormap_type = 1 if colormap_length else 0
    header = struct.pack(
        "<BBBHHBHHHHBB",
        len(image_id),
        colormap_type,
        image_type,
        colormap_origin,
        colormap_length,
        colormap_depth,
        x_origin,
        y_origin,
        width,
        height,
        pixel_depth,
        descriptor,
    )
    data = header + image_id + colormap + pixels
    if version2:
        extension_offset = len(data) if extension else 0
        data += extension + struct.pack("<LL", extension_offset, 0) + SIGNATURE
    return data


def rle_encode(pixels: bytes, pixel_size: int) -> bytes:
    """Pack pixels into run packets (for repeats) and raw packets."""
    values = [
        pixels[i : i + pixel_size] for i in range(0, len(pixels), pixel_size)
    ]
    out = bytearray()
    i = 0
    while i < len(values):
        run = 1
        while i + run < len(values) and run < 128 and values[i + run] == values[i]:
            run += 1
        if run > 1:
            out.append(0x80 | (run - 1))
            out += values[i]
            i += run
            continue
        start = i
        while (
            i < len(values)
            and i - start < 128
            and (i + 1 >= len(values) or values[i + 1] != values[i])
        ):
            i += 1
        out.append(i - start - 1)
        out += b"".join(values[start:i])
    return bytes(out)


def flip_rows(pixels: bytes, width: int, height: int, pixel_size: int) -> bytes:
    """Reverse the row order of packed pixel data."""
    row = width * pixel_size
    rows = [pixels[y * row : (y + 1) * row] for y in range(height)]
    return b"".join(reversed(rows))
