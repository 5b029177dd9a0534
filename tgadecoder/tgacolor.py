import struct

OPAQUE = 0xFF
OPAQUE_BLACK = b"\x00\x00\x00\xff"

# Source byte feeding each of R, G, B, A for a given pixel width.
# None means the channel is not stored and is forced opaque.
CHANNEL_ORDER: dict[int, tuple[int | None, ...]] = {
    1: (0, 0, 0, None),  # V -> V, V, V
    3: (2, 1, 0, None),  # B, G, R -> R, G, B
    4: (2, 1, 0, 3),  # B, G, R, A -> R, G, B, A
}

# 5-bit channel to 8 bits, replicating the high bits into the low ones
_EXPAND5 = bytes((c << 3) | (c >> 2) for c in range(32))


def to_rgba(src: bytes, pixel_size: int, grayscale: bool = False) -> bytes:
    """Convert packed TGA pixels to RGBA8.

    ``src`` holds ``len(src) // pixel_size`` consecutive pixels of
    ``pixel_size`` bytes. 2-byte pixels are A1R5G5B5 words, or a gray value
    followed by an attribute byte when ``grayscale`` is set. Alpha is only
    taken from the source for 4-byte pixels.
    """
    n = len(src) // pixel_size
    if pixel_size == 2:
        if grayscale:
            return to_rgba(src[0 : n * 2 : 2], 1)
        return _rgb555_to_rgba(src[: n * 2])

    order = CHANNEL_ORDER[pixel_size]
    out = bytearray(n * 4)
    for dest, channel in enumerate(order):
        if channel is None:
            out[dest::4] = b"\xff" * n
        else:
            out[dest::4] = src[channel : n * pixel_size : pixel_size]
    return bytes(out)


def _rgb555_to_rgba(src: bytes) -> bytes:
    out = bytearray()
    for (value,) in struct.iter_unpack("<H", src):
        out += bytes(
            (
                _EXPAND5[(value >> 10) & 0x1F],
                _EXPAND5[(value >> 5) & 0x1F],
                _EXPAND5[value & 0x1F],
                OPAQUE,
            ),
        )
    return bytes(out)
