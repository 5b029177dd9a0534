import logging
import time

from tgadecoder import settings
from tgadecoder.colormap import ColorMapResolver
from tgadecoder.pixels import Encoding, PixelWriter, expand
from tgadecoder.tgaexceptions import TruncatedPixelStream
from tgadecoder.tgaheader import TGAHeader

log = logging.getLogger(__name__)


class DecodedImage:
    """A fully decoded TGA image.

    ``pixels`` is a read-only view of ``width * height`` RGBA8 pixels in
    display order (top row first). ``decoded_pixels`` counts the pixels actually taken from
    the file; the rest are opaque black when ``truncated`` is set.
    ``duration`` is the time spent expanding pixels, in seconds.
    """

    def __init__(
        self,
        header: TGAHeader,
        pixels: memoryview,
        decoded_pixels: int,
        truncated: bool = False,
        warnings: list[str] | None = None,
        duration: float = 0.0,
    ) -> None:
        self.header = header
        self.width = header.width
        self.height = header.height
        self.pixels = pixels
        self.decoded_pixels = decoded_pixels
        self.truncated = truncated
        self.warnings = warnings or []
        self.duration = duration

    def pixel(self, x: int, y: int) -> tuple[int, int, int, int]:
        """(r, g, b, a) of the pixel at display coordinates (x, y)."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"Pixel ({x}, {y}) outside {self.width}x{self.height}")
        i = (y * self.width + x) * 4
        r, g, b, a = self.pixels[i : i + 4]
        return r, g, b, a

    def __repr__(self) -> str:
        return (
            f"<DecodedImage: {self.width}x{self.height} "
            f"{self.header.image_type.name} truncated={self.truncated}>"
        )


class TGADecoder:
    """Decode a TGA file held in memory.

    The header is parsed on construction, so structural errors surface
    before any pixel work starts::

        decoder = TGADecoder(data)
        print(decoder.header.width, decoder.header.height)
        image = decoder.decode()
    """

    def __init__(self, data: bytes) -> None:
        self.data = bytes(data)
        self.header = TGAHeader.parse(self.data)
        self.encoding = Encoding.for_header(self.header)

    def decode(self) -> DecodedImage:
        header = self.header
        writer = PixelWriter(header.width, header.height, header.top_to_bottom)
        warnings: list[str] = []

        if self.encoding is None:
            msg = "File contains no image data"
            log.info(msg)
            return DecodedImage(header, writer.release(), 0, warnings=[msg])

        region = self.data[header.image_data_offset : header.footer_offset]
        resolver = None
        if header.is_color_mapped:
            resolver = ColorMapResolver(self.data, header)

        begin = time.perf_counter()
        decoded = expand(self.encoding, region, header, writer, resolver)
        duration = time.perf_counter() - begin

        truncated = decoded < header.npixels
        if truncated:
            msg = f"Pixel data ends after {decoded} of {header.npixels} pixels"
            if settings.STRICT:
                raise TruncatedPixelStream(msg)
            log.warning(msg)
            warnings.append(msg)
        if resolver is not None and resolver.bad_indexes:
            warnings.append(
                f"{len(resolver.bad_indexes)} palette indexes outside color map "
                f"of {header.colormap_length} entries",
            )

        return DecodedImage(
            header,
            writer.release(),
            decoded,
            truncated=truncated,
            warnings=warnings,
            duration=duration,
        )


def decode(data: bytes) -> DecodedImage:
    """Decode a complete TGA file into an RGBA8 image."""
    return TGADecoder(data).decode()
