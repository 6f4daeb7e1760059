"""List the files stored in a ZIP archive appended to a JPEG image."""

from __future__ import annotations

import os
import struct
import sys
from collections.abc import Iterator, Sequence
from typing import BinaryIO

JPEG_SOI = b"\xff\xd8"
JPEG_EOI = b"\xff\xd9"
ZIP_LFH_SIGNATURE = b"PK\x03\x04"
MAX_FILE_NAME_LEN = 512

# Local file header after its signature: 14 bytes we do not need, then
# compressed size, uncompressed size, file name length and extra field length.
_LFH_TAIL = struct.Struct("<14sIIHH")


class NotJpegError(ValueError):
    """The data does not start with a complete JPEG image."""


def _skip_prefix(stream: BinaryIO, pattern: bytes) -> bool:
    """Consume bytes while they match ``pattern``; one byte past it is consumed too."""
    matched = 0
    while (
        (byte := stream.read(1))
        and matched < len(pattern)
        and byte[0] == pattern[matched]
    ):
        matched += 1
    return matched == len(pattern)


def _find(stream: BinaryIO, pattern: bytes) -> bool:
    """Read until ``pattern`` has been seen; restart from scratch on a mismatch."""
    matched = 0
    while matched < len(pattern):
        byte = stream.read(1)
        if not byte:
            return False
        matched = matched + 1 if byte[0] == pattern[matched] else 0
    return True


def iter_zip_names(stream: BinaryIO) -> Iterator[str]:
    """Yield the names of the ZIP entries that follow the JPEG image in ``stream``.

    The stream must be binary and seekable. Raises NotJpegError when the data
    does not begin with a JPEG start marker followed by an end marker.
    """
    if not (_skip_prefix(stream, JPEG_SOI) and _find(stream, JPEG_EOI)):
        raise NotJpegError("data is not a JPEG or ZipJpeg archive")

    while _find(stream, ZIP_LFH_SIGNATURE):
        header = stream.read(_LFH_TAIL.size)
        if len(header) < _LFH_TAIL.size:
            return
        _, compressed_size, _, name_len, extra_len = _LFH_TAIL.unpack(header)
        raw_name = stream.read(min(MAX_FILE_NAME_LEN, name_len))
        if not raw_name:
            return
        stream.seek(compressed_size + extra_len, os.SEEK_CUR)
        yield raw_name.split(b"\0", 1)[0].decode("utf-8", "replace")


def list_archive(path: str | os.PathLike[str]) -> list[str]:
    """Return the names of the files zipped into the JPEG file at ``path``."""
    with open(path, "rb") as stream:
        return list(iter_zip_names(stream))


def main(argv: Sequence[str] | None = None) -> int:
    """Print the files of a ZipJpeg archive, one per line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print(
            "List zipped files in ZipJpeg archive. \n"
            "Usage: \t zipjpeg <path to archive> \n"
        )
        return 1

    archive_path = args[0]
    try:
        stream = open(archive_path, "rb")
    except OSError:
        print("Error opening file")
        return 1

    count = 0
    with stream:
        try:
            for name in iter_zip_names(stream):
                print(name)
                count += 1
        except NotJpegError:
            print(f"{archive_path} is not Jpeg or ZipJpeg archive")
            return 1
        except OSError as exc:
            print(f"Error reading file: {exc}", file=sys.stderr)
            return 1

    if count == 0:
        print(f"{archive_path} is jpeg file")
    return 0