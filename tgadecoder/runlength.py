#
# Run-length decoder for TGA image types 9, 10 and 11.
#
# Each packet starts with one header byte. When its high bit is set the
# packet is a run packet: one pixel value follows and is repeated
# (header & 0x7f) + 1 times. Otherwise it is a raw packet: (header & 0x7f) + 1
# pixel values follow, each used once. Packets may cross scanlines.
#

from collections.abc import Iterator

RUN_PACKET = 0x80
COUNT_MASK = 0x7F


class RunLengthDecoder:
    """Walk a TGA run-length stream pixel by pixel.

    :meth:`run` yields ``(offset, count)`` pairs: the pixel value stored at
    ``data[offset:offset + pixel_size]`` covers the next ``count`` pixels
    in storage order. A run packet produces one pair, a raw packet one
    pair per literal pixel.

    Decoding stops after ``npixels`` pixels or at the last complete pixel
    when the stream is cut short; ``truncated`` tells which happened.
    """

    def __init__(self, data: bytes, pixel_size: int, npixels: int) -> None:
        self.data = data
        self.pixel_size = pixel_size
        self.npixels = npixels
        self.pos = 0
        self.emitted = 0

    @property
    def truncated(self) -> bool:
        return self.emitted < self.npixels

    def run(self) -> Iterator[tuple[int, int]]:
        data = self.data
        size = self.pixel_size
        end = len(data)

        while self.emitted < self.npixels:
            if self.pos >= end:
                # Packet header missing
                break
            packet = data[self.pos]
            self.pos += 1
            count = min((packet & COUNT_MASK) + 1, self.npixels - self.emitted)

            # Repeated pixel run
            if packet & RUN_PACKET:
                if self.pos + size > end:
                    break
                offset = self.pos
                self.pos += size
                self.emitted += count
                yield offset, count

            # Literal run
            else:
                available = (end - self.pos) // size
                for _ in range(min(count, available)):
                    offset = self.pos
                    self.pos += size
                    self.emitted += 1
                    yield offset, 1
                if available < count:
                    break
