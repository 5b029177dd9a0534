import io
import pathlib

import pytest

from tgadecoder.tgaexceptions import BufferOverrun, TGATypeError
from tgadecoder.utils import (
    check_range,
    make_compat_str,
    open_filename,
    read_u16,
    read_u32,
    shorten_str,
    title_case,
)


class TestOpenFilename:
    def test_string_input(self, tmp_path):
        path = tmp_path / "a.tga"
        path.write_bytes(b"")
        opened = open_filename(str(path), "rb")
        assert opened.closing
        opened.file_handler.close()

    def test_pathlib_input(self, tmp_path):
        path = tmp_path / "a.tga"
        path.write_bytes(b"")
        opened = open_filename(pathlib.Path(path), "rb")
        assert opened.closing
        opened.file_handler.close()

    def test_file_input(self):
        in_file = io.BytesIO(b"abc")
        with open_filename(in_file) as fp:
            assert fp is in_file
        assert not in_file.closed

    def test_unsupported_input(self):
        with pytest.raises(TypeError):
            open_filename(0)

    def test_unsupported_input_is_tga_error(self):
        with pytest.raises(TGATypeError):
            open_filename(b"bytes are not a path")


class TestReads:
    def test_read_u16(self):
        assert read_u16(b"\x00\x34\x12", 1) == 0x1234

    def test_read_u32(self):
        assert read_u32(b"\x78\x56\x34\x12", 0) == 0x12345678

    def test_read_past_end(self):
        with pytest.raises(BufferOverrun):
            read_u16(b"\x00\x01", 1)

    def test_read_before_start(self):
        with pytest.raises(BufferOverrun):
            read_u32(b"\x00" * 8, -2)

    def test_check_range_exact_fit(self):
        check_range(b"\x00" * 4, 0, 4)
        check_range(b"\x00" * 4, 4, 0)


class TestStrings:
    def test_make_compat_str_ascii(self):
        assert make_compat_str(b"hello world") == "hello world"

    def test_make_compat_str_not_bytes(self):
        assert make_compat_str(12) == "12"

    def test_title_case(self):
        assert title_case("run length encoded gray scale") == "Run Length Encoded Gray Scale"

    @pytest.mark.parametrize(
        ("s", "size", "expected"),
        [
            ("abcdef", 3, "abc"),
            ("short", 10, "short"),
            ("a" * 20, 15, "aaaaa ... aaaaa"),
        ],
    )
    def test_shorten_str(self, s, size, expected):
        assert shorten_str(s, size) == expected
