"""pytest-benchmark configuration for tgadecoder benchmarks."""

from pathlib import Path

import pytest

from tests.helpers import build_tga, rle_encode

WIDTH = 512
HEIGHT = 512


def gradient(pixel_size: int) -> bytes:
    """WIDTH x HEIGHT pixels with short runs, so RLE has both packet kinds."""
    row = bytearray()
    for x in range(WIDTH):
        row += bytes(((x // 4) & 0xFF,)) * pixel_size
    return bytes(row) * HEIGHT


@pytest.fixture(scope="session")
def true_color_tga() -> bytes:
    """Uncompressed 24-bit image, bottom-to-top."""
    return build_tga(gradient(3), WIDTH, HEIGHT, descriptor=0)


@pytest.fixture(scope="session")
def rle_true_color_tga() -> bytes:
    """Run-length encoded 32-bit image."""
    return build_tga(
        rle_encode(gradient(4), 4),
        WIDTH,
        HEIGHT,
        image_type=10,
        pixel_depth=32,
    )


@pytest.fixture(scope="session")
def color_mapped_tga() -> bytes:
    """Uncompressed 8-bit indexed image with a 256-entry 24-bit palette."""
    palette = b"".join(bytes((i, 255 - i, i // 2)) for i in range(256))
    return build_tga(
        gradient(1),
        WIDTH,
        HEIGHT,
        image_type=1,
        pixel_depth=8,
        colormap=palette,
        colormap_length=256,
        colormap_depth=24,
    )


def pytest_configure(config: pytest.Config) -> None:
    """Configure pytest-benchmark with custom settings."""
    # Set benchmark defaults
    config.option.benchmark_min_rounds = 5
    config.option.benchmark_warmup = True
    config.option.benchmark_warmup_iterations = 3

    # Create benchmarks directory for JSON exports
    benchmark_dir = Path(__file__).parent.parent / ".benchmarks"
    benchmark_dir.mkdir(exist_ok=True)
