import os
import os.path
from typing import Any

from tgadecoder.tgaimage import DecodedImage

PIL_ERROR_MESSAGE = (
    "Could not import Pillow. This dependency of tgadecoder is not "
    "installed by default. You need it to convert decoded images and save "
    "them to a file. Install it with `pip install 'tgadecoder[image]'`"
)


def to_pil_image(image: DecodedImage) -> Any:
    """Wrap the RGBA buffer of a decoded image in a PIL Image."""
    try:
        from PIL import Image  # type: ignore[import]
    except ImportError:
        raise ImportError(PIL_ERROR_MESSAGE)

    return Image.frombytes("RGBA", (image.width, image.height), image.pixels, "raw")


class ImageWriter:
    """Write decoded images to a directory

    Images are saved through Pillow; the format follows the extension,
    PNG by default.
    """

    def __init__(self, outdir: str) -> None:
        self.outdir = outdir
        if not os.path.exists(self.outdir):
            os.makedirs(self.outdir)

    def export_image(self, image: DecodedImage, name: str, ext: str = ".png") -> str:
        """Save a DecodedImage to disk and return the file name used"""
        name, path = self._create_unique_image_name(name, ext)
        img = to_pil_image(image)
        if ext.lower() in (".jpg", ".jpeg", ".bmp"):
            # No alpha channel in these formats
            img = img.convert("RGB")
        with open(path, "wb") as fp:
            img.save(fp, format=_FORMATS.get(ext.lower()))
        return name

    def _create_unique_image_name(self, name: str, ext: str) -> tuple[str, str]:
        basename = name
        name = basename + ext
        path = os.path.join(self.outdir, name)
        img_index = 0
        while os.path.exists(path):
            name = "%s.%d%s" % (basename, img_index, ext)
            path = os.path.join(self.outdir, name)
            img_index += 1
        return name, path


_FORMATS = {
    ".png": "PNG",
    ".bmp": "BMP",
    ".jpg": "JPEG",
    ".jpeg": "JPEG",
    ".tif": "TIFF",
    ".tiff": "TIFF",
}
