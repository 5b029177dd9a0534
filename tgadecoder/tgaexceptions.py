__all__ = [
    "TGAException",
    "TGAParseError",
    "TGATypeError",
    "TruncatedHeader",
    "UnsupportedColorMapType",
    "MissingColorMap",
    "InvalidPixelSize",
    "InvalidColorMapEntrySize",
    "UnsupportedImageType",
    "ImageTooLarge",
    "BufferOverrun",
    "ColorMapIndexError",
    "TruncatedPixelStream",
]


class TGAException(Exception):
    """Base class for all errors raised while decoding a TGA file."""


class TGAParseError(TGAException, ValueError):
    """Raised when the header describes a structure that cannot be decoded."""


class TGATypeError(TGAException, TypeError):
    pass


class TruncatedHeader(TGAParseError, EOFError):
    """Raised when the buffer is shorter than the fixed 18-byte header."""


class UnsupportedColorMapType(TGAParseError):
    """Raised when the color map type is neither 0 (none) nor 1 (present)."""


class MissingColorMap(UnsupportedColorMapType):
    """Raised when a color-mapped image type comes without a color map."""


class InvalidPixelSize(TGAParseError):
    pass


class InvalidColorMapEntrySize(TGAParseError):
    pass


class UnsupportedImageType(TGAParseError, NotImplementedError):
    pass


class ImageTooLarge(TGAParseError):
    """Raised when the declared dimensions exceed settings.MAX_PIXELS."""


class BufferOverrun(TGAException, EOFError):
    """Raised when a computed read would go past the end of the buffer."""


class ColorMapIndexError(TGAException, IndexError):
    """Raised in strict mode for a palette index outside the color map."""


class TruncatedPixelStream(TGAException, EOFError):
    """Raised in strict mode when pixel data ends before the image is full."""
