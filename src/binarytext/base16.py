"""Base16 (RFC 4648 section 8)."""
from typing import Dict, Literal, Tuple

from .alphabet import BASE16_LOWER, BASE16_UPPER, INVALID, Payload, as_bytes, build_decode_table, bytes_to_text
from .buffer import ByteBuffer
from .errors import ConfigurationError, ParseError

Case = Literal["lowercase", "mixed", "uppercase"]
CASES: Tuple[Case, ...] = ("lowercase", "mixed", "uppercase")

IGNORED = frozenset(" \n")

_ENCODE_TABLES: Dict[str, str] = {
    "lowercase": BASE16_LOWER,
    "uppercase": BASE16_UPPER,
}
_DECODE_TABLES = {
    "lowercase": build_decode_table(BASE16_LOWER),
    "mixed": build_decode_table(BASE16_LOWER, BASE16_UPPER),
    "uppercase": build_decode_table(BASE16_UPPER),
}


def encode(data: Payload, case: Case = "uppercase") -> str:
    """Encode bytes as two hex digits each, high nibble first."""
    if case == "mixed":
        raise ConfigurationError("Base16 cannot encode with mixed case; choose lowercase or uppercase")
    if case not in _ENCODE_TABLES:
        raise ConfigurationError(f"Invalid case: {case!r}")
    digits = _ENCODE_TABLES[case]
    return "".join(digits[byte >> 4] + digits[byte & 0x0F] for byte in as_bytes(data))


def decode(encoded: str, case: Case = "mixed") -> bytes:
    """
    Decode hex digit pairs, skipping spaces and newlines anywhere.

    A lone trailing digit becomes the high nibble of a final byte whose low
    nibble is zero.
    """
    if case not in _DECODE_TABLES:
        raise ConfigurationError(f"Invalid case: {case!r}")
    table = _DECODE_TABLES[case]
    out = bytearray()
    high = -1
    for position, symbol in enumerate(encoded):
        if symbol in IGNORED:
            continue
        code = ord(symbol)
        nibble = table[code] if code < 256 else INVALID
        if nibble == INVALID:
            raise ParseError(f"Invalid Base16 digit {symbol!r} for {case} case", position)
        if high < 0:
            high = nibble
        else:
            out.append((high << 4) | nibble)
            high = -1
    if high >= 0:
        out.append(high << 4)
    return bytes(out)


def encode_text(text: str, case: Case = "uppercase", encoding: str = "utf-8") -> str:
    return encode(text.encode(encoding), case)


def decode_text(encoded: str, case: Case = "mixed", encoding: str = "utf-8") -> str:
    return bytes_to_text(decode(encoded, case), "Base16", encoding)


def encode_buffer(buffer: ByteBuffer, case: Case = "uppercase") -> str:
    return encode(buffer, case)


def decode_buffer(encoded: str, case: Case = "mixed") -> ByteBuffer:
    return ByteBuffer(decode(encoded, case))
