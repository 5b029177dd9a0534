# When True, pixel-level damage (truncated pixel data, palette indices
# outside the color map) raises instead of producing a partial image.
STRICT = False

# Largest width * height accepted before any pixel buffer is allocated.
# Matches Pillow's Image.MAX_IMAGE_PIXELS; None disables the check.
MAX_PIXELS: int | None = int(1024 * 1024 * 1024 // 4 // 3)
