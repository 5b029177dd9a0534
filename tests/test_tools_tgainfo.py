import pytest

from tests.helpers import build_tga
from tgadecoder.tgaexceptions import TruncatedPixelStream, UnsupportedImageType
from tools import tgainfo


def write_sample(tmp_path, data, name="sample.tga"):
    path = tmp_path / name
    path.write_bytes(data)
    return str(path)


class TestTgaInfo:
    def test_writes_table(self, tmp_path):
        sample = write_sample(tmp_path, build_tga(b"\x01\x02\x03" * 6, width=3, height=2))
        outfile = tmp_path / "out.txt"
        tgainfo.main(["-o", str(outfile), sample])
        output = outfile.read_text()
        assert output.startswith(sample)
        assert "Image Type" in output
        assert "True Color" in output
        assert "Top To Bottom" in output

    def test_multiple_files(self, tmp_path):
        first = write_sample(tmp_path, build_tga(b"\x00" * 3, width=1, height=1), "a.tga")
        second = write_sample(
            tmp_path,
            build_tga(b"\x00", width=1, height=1, image_type=3, pixel_depth=8),
            "b.tga",
        )
        outfile = tmp_path / "out.txt"
        tgainfo.main(["-o", str(outfile), first, second])
        output = outfile.read_text()
        assert first in output
        assert second in output
        assert "Gray Scale" in output

    def test_stdout(self, tmp_path, capsys):
        sample = write_sample(tmp_path, build_tga(b"\x00" * 3, width=1, height=1))
        tgainfo.main([sample])
        assert "Image Width" in capsys.readouterr().out

    def test_reports_truncation(self, tmp_path, capsys):
        sample = write_sample(tmp_path, build_tga(b"\x00" * 3, width=2, height=1))
        tgainfo.main([sample])
        assert "warning: Pixel data ends after 1 of 2 pixels" in capsys.readouterr().out

    def test_strict(self, tmp_path):
        sample = write_sample(tmp_path, build_tga(b"\x00" * 3, width=2, height=1))
        with pytest.raises(TruncatedPixelStream):
            tgainfo.main(["--strict", sample])

    def test_invalid_file(self, tmp_path):
        sample = write_sample(tmp_path, build_tga(b"", width=0, height=0, image_type=5))
        with pytest.raises(UnsupportedImageType):
            tgainfo.main([sample])
