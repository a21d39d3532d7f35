import inspect
import os
import sys
from typing import NoReturn, Optional


class BinaryTextError(Exception):
    """Base class for every recoverable error raised by binarytext."""


class AllocationError(BinaryTextError, MemoryError):
    """Raised when a buffer could not grow; the buffer is left empty."""


class ParseError(BinaryTextError, ValueError):
    """Raised when encoded text does not follow the codec's grammar."""

    def __init__(self, message: str, position: Optional[int] = None) -> None:
        if position is not None:
            message = f"{message} (at position {position})"
        super().__init__(message)
        self.position = position


class ConfigurationError(BinaryTextError, ValueError):
    """Raised when an option does not apply to the chosen algorithm or task."""


class InvalidArgumentsError(BinaryTextError, ValueError):
    pass


class FileIOError(BinaryTextError):
    def __init__(self, message: str, path: Optional[os.PathLike] = None) -> None:
        if path is not None:
            message = f"{message}: {os.fspath(path)}"
        super().__init__(message)
        self.path = path


class OpenFileError(FileIOError):
    pass


class ReadFileError(FileIOError):
    pass


class WriteFileError(FileIOError):
    pass


class EmptyBufferError(BinaryTextError):
    pass


class OutOfRangeError(BinaryTextError, IndexError):
    pass


class SizeLimitError(BinaryTextError, OverflowError):
    pass


def unreachable() -> NoReturn:
    """
    Print the calling location to stderr and abort the process.

    Only for states the code cannot reach unless it is itself broken.
    """
    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    if caller is not None:
        where = f'"{caller.f_code.co_filename}" at function "{caller.f_code.co_name}", line {caller.f_lineno}'
    else:
        where = "an unknown location"
    sys.stderr.write(f"Unreachable code was reached inside {where}; aborting.\n")
    sys.stderr.flush()
    os.abort()
