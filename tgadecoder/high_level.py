"""Functions that can be used for the most common use-cases for tgadecoder"""

import logging
from typing import Any

from tgadecoder.tgaimage import DecodedImage, decode
from tgadecoder.utils import FileOrName, make_compat_str, open_filename

log = logging.getLogger(__name__)


def decode_file(tga_file: FileOrName, debug: bool = False) -> DecodedImage:
    """Read and decode a TGA file.

    :param tga_file: Path to the TGA file, or a binary file-like object
        such as a file handler (using the builtin `open()` function) or a
        `BytesIO`. The whole file is read before decoding starts.
    :param debug: Output more logging data
    :return: the DecodedImage
    """
    if debug:
        logging.getLogger().setLevel(logging.DEBUG)

    with open_filename(tga_file, "rb") as fp:
        data = fp.read()
    log.debug("Read %d bytes from %r", len(data), tga_file)
    return decode(data)


def image_information(image: DecodedImage) -> dict[str, Any]:
    """Summarize a decoded image as a label -> value table.

    Booleans are rendered as "Yes"/"No", the image descriptor as an
    8-digit binary string and the decode time in milliseconds.
    """
    header = image.header
    rows: dict[str, Any] = {
        "Version": header.version,
        "Image Type": header.image_type_name,
        "X Origin": header.x_origin,
        "Y Origin": header.y_origin,
        "Image Width": header.width,
        "Image Height": header.height,
        "Pixel Size": header.pixel_size,
        "Image Descriptor": f"{header.descriptor:08b}",
        "Image Identification Field Length": header.id_length,
        "Top To Bottom": header.top_to_bottom,
        "Color Map Origin": header.colormap_origin,
        "Color Map Length": header.colormap_length,
        "Color Map Pixel Size": header.colormap_entry_size,
        "Processing Took": f"{image.duration * 1000:.2f} ms",
    }
    if header.image_id:
        rows["Image Identification"] = make_compat_str(header.image_id)
    if header.version == 2:
        rows["Extension Offset"] = header.extension_offset
    if image.truncated:
        rows["Decoded Pixels"] = f"{image.decoded_pixels} of {header.npixels}"

    for key, value in rows.items():
        if isinstance(value, bool):
            rows[key] = "Yes" if value else "No"
    return rows
