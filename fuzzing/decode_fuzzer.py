import sys

import atheris

with atheris.instrument_imports():
    from tgadecoder import settings
    from tgadecoder.tgaimage import decode
    from utils import is_valid_byte_stream, prepare_tgadecoder_fuzzing

from tgadecoder.tgaexceptions import TGAException


def fuzz_one_input(data: bytes) -> None:
    if not is_valid_byte_stream(data):
        # Not worth continuing with this test case
        return

    fdp = atheris.FuzzedDataProvider(data)
    settings.STRICT = fdp.ConsumeBool()

    try:
        image = decode(data)
    except TGAException:
        return

    assert len(image.pixels) == image.width * image.height * 4
    assert image.decoded_pixels <= image.width * image.height


if __name__ == "__main__":
    prepare_tgadecoder_fuzzing()
    atheris.Setup(sys.argv, fuzz_one_input)
    atheris.Fuzz()
