from . import ascii85, base16, base32, base64
from .buffer import ByteBuffer
from .codecs import Codec, convert, get_codec, registry
from .config import ALGORITHMS, TASKS, CodecConfiguration, default_configuration
from .errors import (
    AllocationError,
    BinaryTextError,
    ConfigurationError,
    EmptyBufferError,
    FileIOError,
    InvalidArgumentsError,
    OpenFileError,
    OutOfRangeError,
    ParseError,
    ReadFileError,
    SizeLimitError,
    WriteFileError,
    unreachable,
)
from .utils import read_encoded_file, read_file, write_file

__version__ = "0.1.0"

__all__ = [
    "ALGORITHMS",
    "TASKS",
    "AllocationError",
    "BinaryTextError",
    "ByteBuffer",
    "Codec",
    "CodecConfiguration",
    "ConfigurationError",
    "EmptyBufferError",
    "FileIOError",
    "InvalidArgumentsError",
    "OpenFileError",
    "OutOfRangeError",
    "ParseError",
    "ReadFileError",
    "SizeLimitError",
    "WriteFileError",
    "ascii85",
    "base16",
    "base32",
    "base64",
    "convert",
    "default_configuration",
    "get_codec",
    "read_encoded_file",
    "read_file",
    "registry",
    "unreachable",
    "write_file",
]
