"""Benchmarks for decoding whole TGA images."""

from typing import Any

from tgadecoder.runlength import RunLengthDecoder
from tgadecoder.tgaheader import TGAHeader
from tgadecoder.tgaimage import decode


class TestDecodeBenchmarks:
    """End-to-end decode of synthetic 512x512 images."""

    def test_decode_true_color(self, benchmark: Any, true_color_tga: bytes) -> None:
        """Row-at-a-time conversion with vertical flip."""
        image = benchmark(decode, true_color_tga)
        assert not image.truncated

    def test_decode_rle_true_color(self, benchmark: Any, rle_true_color_tga: bytes) -> None:
        """Packet walk plus per-span conversion."""
        image = benchmark(decode, rle_true_color_tga)
        assert not image.truncated

    def test_decode_color_mapped(self, benchmark: Any, color_mapped_tga: bytes) -> None:
        """Per-pixel palette lookups."""
        image = benchmark(decode, color_mapped_tga)
        assert not image.truncated


class TestRunLengthBenchmarks:
    def test_walk_packets(self, benchmark: Any, rle_true_color_tga: bytes) -> None:
        """Packet parsing alone, without pixel conversion."""
        header = TGAHeader.parse(rle_true_color_tga)
        region = rle_true_color_tga[header.image_data_offset : header.footer_offset]

        def walk() -> int:
            decoder = RunLengthDecoder(region, header.pixel_size, header.npixels)
            for _ in decoder.run():
                pass
            return decoder.emitted

        assert benchmark(walk) == header.npixels
