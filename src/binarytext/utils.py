import logging
import os
from typing import Union

from .errors import OpenFileError, ReadFileError, WriteFileError

logger = logging.getLogger(__name__)

PathLike = Union[str, "os.PathLike[str]"]


def read_file(path: PathLike) -> bytes:
    """Return the exact bytes of ``path``; an empty file gives ``b""``."""
    try:
        fh = open(path, "rb")
    except OSError as exc:
        raise OpenFileError("Could not open file for reading", path) from exc
    with fh:
        try:
            content = fh.read()
        except OSError as exc:
            raise ReadFileError("Could not read from file", path) from exc
    logger.debug("read %d bytes from %s", len(content), os.fspath(path))
    return content


def write_file(data: bytes, path: PathLike) -> None:
    """
    Write ``data`` to ``path`` unchanged, replacing any existing content.

    Unlike ``ByteBuffer.write_to_file`` an empty payload is allowed and leaves
    an empty file.
    """
    try:
        fh = open(path, "wb")
    except OSError as exc:
        raise OpenFileError("Could not open file for writing", path) from exc
    try:
        with fh:
            fh.write(data)
    except OSError as exc:
        raise WriteFileError("Could not write to file", path) from exc
    logger.debug("wrote %d bytes to %s", len(data), os.fspath(path))


def read_encoded_file(path: PathLike) -> str:
    """
    Read encoded text from ``path``.

    Each byte maps to the character of the same code, so bytes outside an
    alphabet are reported by the codec as a ParseError at their position.
    """
    return read_file(path).decode("latin-1")
