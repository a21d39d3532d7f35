"""Base64 (RFC 4648 section 4) and Base64Url (RFC 4648 section 5)."""
from .alphabet import BASE64_STANDARD, BASE64_URL, GroupCodec, Payload, bytes_to_text
from .buffer import ByteBuffer

BASE64 = GroupCodec("Base64", BASE64_STANDARD, group_size=3, symbol_bits=6)
BASE64URL = GroupCodec("Base64Url", BASE64_URL, group_size=3, symbol_bits=6)


def encode(data: Payload, padding: bool = True) -> str:
    """Encode with the standard A-Za-z0-9+/ alphabet."""
    return BASE64.encode(data, padding)


def decode(encoded: str) -> bytes:
    """Decode standard Base64. Whitespace is not accepted."""
    return BASE64.decode(encoded)


def encode_text(text: str, padding: bool = True, encoding: str = "utf-8") -> str:
    return BASE64.encode(text.encode(encoding), padding)


def decode_text(encoded: str, encoding: str = "utf-8") -> str:
    return bytes_to_text(BASE64.decode(encoded), BASE64.name, encoding)


def encode_buffer(buffer: ByteBuffer, padding: bool = True) -> str:
    return BASE64.encode(buffer, padding)


def decode_buffer(encoded: str) -> ByteBuffer:
    return ByteBuffer(BASE64.decode(encoded))


def url_encode(data: Payload, padding: bool = True) -> str:
    """Encode with the URL and filename safe alphabet (- and _ replace + and /)."""
    return BASE64URL.encode(data, padding)


def url_decode(encoded: str) -> bytes:
    return BASE64URL.decode(encoded)


def url_encode_text(text: str, padding: bool = True, encoding: str = "utf-8") -> str:
    return BASE64URL.encode(text.encode(encoding), padding)


def url_decode_text(encoded: str, encoding: str = "utf-8") -> str:
    return bytes_to_text(BASE64URL.decode(encoded), BASE64URL.name, encoding)


def url_encode_buffer(buffer: ByteBuffer, padding: bool = True) -> str:
    return BASE64URL.encode(buffer, padding)


def url_decode_buffer(encoded: str) -> ByteBuffer:
    return ByteBuffer(BASE64URL.decode(encoded))
