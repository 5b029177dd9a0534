"""Miscellaneous Routines."""

import io
import pathlib
import struct
from typing import Any, BinaryIO, Union, cast

import charset_normalizer  # For str encoding detection

from tgadecoder.tgaexceptions import BufferOverrun, TGATypeError

FileOrName = Union[pathlib.PurePath, str, io.IOBase]


class open_filename:
    """Context manager that allows opening a filename
    (str or pathlib.PurePath type is supported) and closes it on exit,
    (just like `open`), but does nothing for file-like objects.
    """

    def __init__(self, filename: FileOrName, *args: Any, **kwargs: Any) -> None:
        if isinstance(filename, pathlib.PurePath):
            filename = str(filename)
        if isinstance(filename, str):
            self.file_handler: BinaryIO = open(filename, *args, **kwargs)  # noqa: SIM115
            self.closing = True
        elif isinstance(filename, io.IOBase):
            self.file_handler = cast(BinaryIO, filename)
            self.closing = False
        else:
            raise TGATypeError(f"Unsupported input type: {type(filename)}")

    def __enter__(self) -> BinaryIO:
        return self.file_handler

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        if self.closing:
            self.file_handler.close()


def check_range(data: bytes, offset: int, size: int) -> None:
    """Raise BufferOverrun unless data[offset:offset + size] is fully inside data."""
    if offset < 0 or size < 0 or offset + size > len(data):
        raise BufferOverrun(
            f"Read of {size} bytes at offset {offset} exceeds buffer of "
            f"{len(data)} bytes",
        )


def read_u16(data: bytes, offset: int) -> int:
    """Little-endian unsigned 16-bit integer at offset."""
    check_range(data, offset, 2)
    return cast(int, struct.unpack_from("<H", data, offset)[0])


def read_u32(data: bytes, offset: int) -> int:
    """Little-endian unsigned 32-bit integer at offset."""
    check_range(data, offset, 4)
    return cast(int, struct.unpack_from("<L", data, offset)[0])


def make_compat_str(o: object) -> str:
    """Converts everything to string, if bytes guessing the encoding."""
    if isinstance(o, bytes):
        enc = charset_normalizer.detect(o)
        if enc["encoding"] is None:
            return str(o)
        try:
            return o.decode(enc["encoding"])
        except UnicodeDecodeError:
            return str(o)
    else:
        return str(o)


def shorten_str(s: str, size: int) -> str:
    if size < 7:
        return s[:size]
    if len(s) > size:
        length = (size - 5) // 2
        return f"{s[:length]} ... {s[-length:]}"
    else:
        return s


def title_case(s: str) -> str:
    """Upper-case the first letter of every word: "true color" -> "True Color"."""
    return " ".join(word[:1].upper() + word[1:] for word in s.split(" "))

