import logging
import os
import sys
from typing import Iterable, Iterator, List, Optional, Union

from .errors import (
    AllocationError,
    EmptyBufferError,
    InvalidArgumentsError,
    OpenFileError,
    OutOfRangeError,
    ReadFileError,
    SizeLimitError,
    WriteFileError,
)

logger = logging.getLogger(__name__)

CHUNK_SIZE = 8192

BytesLike = Union[bytes, bytearray, memoryview]
PathLike = Union[str, "os.PathLike[str]"]


def _check_byte(value: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= 0xFF:
        raise InvalidArgumentsError(f"Not a byte value: {value!r}")
    return value


class ByteBuffer:
    """
    Owned, resizable byte array.

    An empty buffer holds no storage at all (``_data is None``); any non-empty
    buffer owns exactly one bytearray. Copies are deep, ``move`` hands the
    storage over and leaves the source empty. Any MemoryError while mutating
    resets the buffer to empty and surfaces as AllocationError.
    """

    MAXIMUM_SIZE = sys.maxsize

    def __init__(self, source: Union[None, int, BytesLike, Iterable[int], PathLike] = None) -> None:
        self._data: Optional[bytearray] = None
        if source is None:
            return
        if isinstance(source, bool):
            raise InvalidArgumentsError("ByteBuffer size must be an integer, not a bool")
        if isinstance(source, int):
            self._allocate_zeroed(source)
        elif isinstance(source, (str, os.PathLike)):
            self.read_from_file(source)
        elif isinstance(source, (bytes, bytearray, memoryview)):
            self._assign(bytes(source))
        else:
            self._assign(bytes(_check_byte(value) for value in source))

    @classmethod
    def from_raw(cls, data: Optional[BytesLike], size: int) -> "ByteBuffer":
        """Copy ``size`` bytes of ``data``; the two must agree."""
        if size > cls.MAXIMUM_SIZE:
            raise SizeLimitError(f"Requested size {size} exceeds the maximum of {cls.MAXIMUM_SIZE}")
        if size < 0:
            raise InvalidArgumentsError("Size must not be negative")
        if data is None:
            if size > 0:
                raise InvalidArgumentsError("No data given for a non-zero size")
            return cls()
        if size < 1:
            raise InvalidArgumentsError("Data given with a size of zero")
        if len(data) != size:
            raise InvalidArgumentsError(f"Data holds {len(data)} bytes but size is {size}")
        buffer = cls()
        buffer._assign(bytes(data))
        return buffer

    def _allocate_zeroed(self, size: int) -> None:
        if size > self.MAXIMUM_SIZE:
            raise SizeLimitError(f"Requested size {size} exceeds the maximum of {self.MAXIMUM_SIZE}")
        if size < 0:
            raise InvalidArgumentsError("Size must not be negative")
        if size == 0:
            self._data = None
            return
        try:
            self._data = bytearray(size)
        except MemoryError as exc:
            self._data = None
            raise AllocationError(f"Failed to allocate {size} bytes") from exc

    def _assign(self, payload: bytes) -> None:
        if len(payload) > self.MAXIMUM_SIZE:
            raise SizeLimitError(f"Data of {len(payload)} bytes exceeds the maximum of {self.MAXIMUM_SIZE}")
        if not payload:
            self._data = None
            return
        try:
            self._data = bytearray(payload)
        except MemoryError as exc:
            self._data = None
            raise AllocationError(f"Failed to allocate {len(payload)} bytes") from exc

    # -- size ---------------------------------------------------------------

    @property
    def size(self) -> int:
        return 0 if self._data is None else len(self._data)

    def __len__(self) -> int:
        return self.size

    def is_empty(self) -> bool:
        return self._data is None

    def resize(self, size: int, fill: int = 0) -> None:
        """Truncate to ``size`` or grow to it, filling the new tail with ``fill``."""
        _check_byte(fill)
        if size > self.MAXIMUM_SIZE:
            raise SizeLimitError(f"Requested size {size} exceeds the maximum of {self.MAXIMUM_SIZE}")
        if size < 0:
            raise InvalidArgumentsError("Size must not be negative")
        current = self.size
        if size == current:
            return
        if size == 0:
            self._data = None
            return
        try:
            if self._data is None:
                self._data = bytearray([fill]) * size if fill else bytearray(size)
            elif size < current:
                del self._data[size:]
            else:
                self._data.extend(bytes([fill]) * (size - current))
        except MemoryError as exc:
            self._data = None
            raise AllocationError(f"Failed to resize buffer to {size} bytes") from exc

    def fill(self, byte: int) -> None:
        """Set every byte of the buffer to ``byte``."""
        _check_byte(byte)
        if self._data is None:
            return
        try:
            self._data[:] = bytes([byte]) * len(self._data)
        except MemoryError as exc:
            self._data = None
            raise AllocationError("Failed to fill buffer") from exc

    def clear(self) -> None:
        self._data = None

    def swap(self, other: "ByteBuffer") -> None:
        self._data, other._data = other._data, self._data

    def copy(self) -> "ByteBuffer":
        duplicate = type(self)()
        if self._data is not None:
            duplicate._assign(bytes(self._data))
        return duplicate

    __copy__ = copy

    def __deepcopy__(self, memo: dict) -> "ByteBuffer":
        return self.copy()

    def move(self) -> "ByteBuffer":
        """Transfer the contents into a new buffer, leaving this one empty."""
        target = type(self)()
        target._data, self._data = self._data, None
        return target

    # -- element access -----------------------------------------------------

    def _check_position(self, position: int) -> None:
        if self._data is None or not 0 <= position < len(self._data):
            raise OutOfRangeError(f"Position {position} is out of range for a buffer of {self.size} bytes")

    def __getitem__(self, position: int) -> int:
        if not isinstance(position, int):
            raise InvalidArgumentsError("ByteBuffer only supports integer positions")
        self._check_position(position)
        return self._data[position]  # type: ignore[index]

    def __setitem__(self, position: int, value: int) -> None:
        if not isinstance(position, int):
            raise InvalidArgumentsError("ByteBuffer only supports integer positions")
        self._check_position(position)
        self._data[position] = _check_byte(value)  # type: ignore[index]

    def get_unchecked(self, position: int) -> int:
        return self._data[position]  # type: ignore[index]

    def set_unchecked(self, position: int, value: int) -> None:
        self._data[position] = value  # type: ignore[index]

    def __iter__(self) -> Iterator[int]:
        return iter(self._data or b"")

    # -- conversions --------------------------------------------------------

    def to_bytes(self) -> bytes:
        return bytes(self._data or b"")

    __bytes__ = to_bytes

    def to_list(self) -> List[int]:
        return list(self._data or b"")

    def view(self) -> memoryview:
        """Read-only view of the contents without copying."""
        return memoryview(self._data or b"").toreadonly()

    def __repr__(self) -> str:
        preview = self.to_bytes()[:16].hex()
        suffix = "..." if self.size > 16 else ""
        return f"ByteBuffer(size={self.size}, data={preview}{suffix})"

    # -- comparison and concatenation ---------------------------------------

    def __eq__(self, other: object) -> bool:
        if isinstance(other, ByteBuffer):
            return self.size == other.size and self.to_bytes() == other.to_bytes()
        if isinstance(other, (bytes, bytearray, memoryview)):
            return self.to_bytes() == bytes(other)
        return NotImplemented

    def __ne__(self, other: object) -> bool:
        result = self.__eq__(other)
        if result is NotImplemented:
            return result
        return not result

    __hash__ = None  # type: ignore[assignment]

    def _combined_size(self, other: "ByteBuffer") -> int:
        combined = self.size + other.size
        if combined > self.MAXIMUM_SIZE:
            raise SizeLimitError(
                f"Concatenated size {combined} exceeds the maximum of {self.MAXIMUM_SIZE}"
            )
        return combined

    def __iadd__(self, other: "ByteBuffer") -> "ByteBuffer":
        if not isinstance(other, ByteBuffer):
            return NotImplemented
        combined = self._combined_size(other)
        if other._data is None:
            return self
        try:
            if self._data is None:
                self._data = bytearray(other._data)
            else:
                self._data.extend(other._data)
        except MemoryError as exc:
            self._data = None
            raise AllocationError(f"Failed to grow buffer to {combined} bytes") from exc
        return self

    def __add__(self, other: "ByteBuffer") -> "ByteBuffer":
        if not isinstance(other, ByteBuffer):
            return NotImplemented
        self._combined_size(other)
        result = self.copy()
        result += other
        return result

    # -- file I/O -----------------------------------------------------------

    def read_from_file(self, path: PathLike) -> None:
        """
        Replace the contents with the bytes of ``path``.

        The file is read CHUNK_SIZE bytes at a time, each chunk appended in
        turn. On any failure the buffer is left empty.
        """
        self._data = None
        try:
            fh = open(path, "rb")
        except OSError as exc:
            raise OpenFileError("Failed to open file", path) from exc
        with fh:
            try:
                while True:
                    chunk = fh.read(CHUNK_SIZE)
                    if not chunk:
                        break
                    self += ByteBuffer.from_raw(chunk, len(chunk))
            except OSError as exc:
                self._data = None
                raise ReadFileError("Failed to read from file", path) from exc
            except (AllocationError, SizeLimitError):
                self._data = None
                raise
        logger.debug("read %d bytes from %s", self.size, os.fspath(path))

    def write_to_file(self, path: PathLike) -> None:
        """Write the whole buffer to ``path`` in CHUNK_SIZE pieces, truncating the file."""
        if self._data is None:
            raise EmptyBufferError("Refusing to write an empty buffer")
        try:
            fh = open(path, "wb")
        except OSError as exc:
            raise OpenFileError("Failed to open file", path) from exc
        try:
            with fh:
                for start in range(0, len(self._data), CHUNK_SIZE):
                    fh.write(self._data[start:start + CHUNK_SIZE])
        except OSError as exc:
            raise WriteFileError("Failed to write to file", path) from exc
        logger.debug("wrote %d bytes to %s", self.size, os.fspath(path))
