import logging

from tgadecoder import settings
from tgadecoder.tgacolor import OPAQUE_BLACK, to_rgba
from tgadecoder.tgaexceptions import ColorMapIndexError
from tgadecoder.tgaheader import HEADER_SIZE, TGAHeader
from tgadecoder.utils import check_range

log = logging.getLogger(__name__)


class ColorMapResolver:
    """Look up palette entries directly in the file buffer.

    Entries are never copied out of ``data``; :meth:`resolve` only
    computes where an entry starts, :meth:`color` converts it to RGBA and
    remembers the result for the rest of the decode.
    """

    def __init__(self, data: bytes, header: TGAHeader) -> None:
        self.data = data
        self.header = header
        self.entry_size = header.colormap_entry_size
        self.base = HEADER_SIZE + header.id_length + header.colormap_origin
        self.bad_indexes: set[int] = set()
        self._cache: dict[int, bytes] = {}

    def resolve(self, index: int) -> int:
        """Byte offset of the color map entry for a palette index.

        The index is not validated; see :meth:`color`.
        """
        return self.base + self.entry_size * index

    def color(self, index: int) -> bytes:
        """RGBA bytes for a palette index.

        Indexes outside the color map raise ColorMapIndexError in strict
        mode and come out as opaque black otherwise.
        """
        try:
            return self._cache[index]
        except KeyError:
            pass

        if index >= self.header.colormap_length:
            if settings.STRICT:
                raise ColorMapIndexError(
                    f"Palette index {index} outside color map of "
                    f"{self.header.colormap_length} entries",
                )
            if not self.bad_indexes:
                log.warning(
                    "Palette index %d outside color map of %d entries",
                    index,
                    self.header.colormap_length,
                )
            self.bad_indexes.add(index)
            rgba = OPAQUE_BLACK
        else:
            offset = self.resolve(index)
            check_range(self.data, offset, self.entry_size)
            rgba = to_rgba(self.data[offset : offset + self.entry_size], self.entry_size)
        self._cache[index] = rgba
        return rgba
