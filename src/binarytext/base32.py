"""Base32 (RFC 4648 section 6) and Base32Hex (RFC 4648 section 7)."""
from .alphabet import BASE32_HEX, BASE32_STANDARD, GroupCodec, Payload, bytes_to_text
from .buffer import ByteBuffer

BASE32 = GroupCodec("Base32", BASE32_STANDARD, group_size=5, symbol_bits=5)
BASE32HEX = GroupCodec("Base32Hex", BASE32_HEX, group_size=5, symbol_bits=5)


def encode(data: Payload, padding: bool = True) -> str:
    """Encode with the standard A-Z2-7 alphabet."""
    return BASE32.encode(data, padding)


def decode(encoded: str) -> bytes:
    """Decode standard Base32. Whitespace is not accepted."""
    return BASE32.decode(encoded)


def encode_text(text: str, padding: bool = True, encoding: str = "utf-8") -> str:
    return BASE32.encode(text.encode(encoding), padding)


def decode_text(encoded: str, encoding: str = "utf-8") -> str:
    return bytes_to_text(BASE32.decode(encoded), BASE32.name, encoding)


def encode_buffer(buffer: ByteBuffer, padding: bool = True) -> str:
    return BASE32.encode(buffer, padding)


def decode_buffer(encoded: str) -> ByteBuffer:
    return ByteBuffer(BASE32.decode(encoded))


def hex_encode(data: Payload, padding: bool = True) -> str:
    """Encode with the extended-hex 0-9A-V alphabet."""
    return BASE32HEX.encode(data, padding)


def hex_decode(encoded: str) -> bytes:
    return BASE32HEX.decode(encoded)


def hex_encode_text(text: str, padding: bool = True, encoding: str = "utf-8") -> str:
    return BASE32HEX.encode(text.encode(encoding), padding)


def hex_decode_text(encoded: str, encoding: str = "utf-8") -> str:
    return bytes_to_text(BASE32HEX.decode(encoded), BASE32HEX.name, encoding)


def hex_encode_buffer(buffer: ByteBuffer, padding: bool = True) -> str:
    return BASE32HEX.encode(buffer, padding)


def hex_decode_buffer(encoded: str) -> ByteBuffer:
    return ByteBuffer(BASE32HEX.decode(encoded))
