"""
Ascii85 (btoa / PostScript flavour).

Every 4 input bytes become 5 base-85 digits offset by 33 into the printable
range ``!`` .. ``u``. ``z`` stands for a whole group of zero bytes and, with
space folding, ``y`` for a whole group of four spaces. Adobe mode brackets the
text with ``<~`` and ``~>``.
"""
from typing import List

from .alphabet import Payload, as_bytes, bytes_to_text
from .buffer import ByteBuffer
from .errors import ParseError, unreachable

OFFSET = 33
FIRST_SYMBOL = 33  # "!"
LAST_SYMBOL = 117  # "u"
MAX_DIGIT = 84
GROUP_SIZE = 4
SYMBOLS_PER_GROUP = 5

ZERO_GROUP = b"\x00\x00\x00\x00"
SPACE_GROUP = b"    "
ZERO_SYMBOL = "z"
SPACE_SYMBOL = "y"
ADOBE_PREFIX = "<~"
ADOBE_SUFFIX = "~>"
IGNORED = frozenset(" \n")


def _encode_group(value: int) -> str:
    digits = []
    for _ in range(SYMBOLS_PER_GROUP):
        value, digit = divmod(value, 85)
        digits.append(chr(digit + OFFSET))
    return "".join(reversed(digits))


def encode(data: Payload, fold_spaces: bool = False, adobe_mode: bool = False) -> str:
    """
    Encode bytes to Ascii85.

    A final group of n < 4 bytes is zero padded, encoded to five symbols and
    cut down to n + 1 of them; it is never abbreviated to ``z`` or ``y``.
    """
    raw = as_bytes(data)
    out: List[str] = []
    if adobe_mode:
        out.append(ADOBE_PREFIX)
    for start in range(0, len(raw), GROUP_SIZE):
        chunk = raw[start:start + GROUP_SIZE]
        count = len(chunk)
        if count == GROUP_SIZE:
            if chunk == ZERO_GROUP:
                out.append(ZERO_SYMBOL)
                continue
            if fold_spaces and chunk == SPACE_GROUP:
                out.append(SPACE_SYMBOL)
                continue
        value = int.from_bytes(chunk.ljust(GROUP_SIZE, b"\x00"), "big")
        out.append(_encode_group(value)[:count + 1])
    if adobe_mode:
        out.append(ADOBE_SUFFIX)
    return "".join(out)


def _strip_adobe_delimiters(encoded: str) -> str:
    stripped = encoded.strip(" \n")
    if not stripped.startswith(ADOBE_PREFIX):
        raise ParseError('Ascii85 text does not start with the "<~" delimiter')
    body = stripped[len(ADOBE_PREFIX):]
    if not body.endswith(ADOBE_SUFFIX):
        raise ParseError('Ascii85 text does not end with the "~>" delimiter')
    return body[:-len(ADOBE_SUFFIX)]


def _flush(out: bytearray, digits: List[int], position: int) -> None:
    count = len(digits)
    if count == 0:
        return
    if count == 1:
        raise ParseError("Ascii85 group of a single symbol cannot hold any bytes", position)
    value = 0
    for digit in digits + [MAX_DIGIT] * (SYMBOLS_PER_GROUP - count):
        value = value * 85 + digit
    if value > 0xFFFFFFFF:
        raise ParseError("Ascii85 group value does not fit in 4 bytes", position)
    out += value.to_bytes(GROUP_SIZE, "big")[:count - 1]


def decode(encoded: str, fold_spaces: bool = False, adobe_mode: bool = False) -> bytes:
    """
    Decode Ascii85 text. Spaces and newlines are skipped everywhere.

    ``z`` and ``y`` are only recognised between groups. A final short group
    is completed with the highest digit and truncated to one byte fewer than
    its symbol count.
    """
    body = _strip_adobe_delimiters(encoded) if adobe_mode else encoded
    out = bytearray()
    digits: List[int] = []
    group_start = 0
    for position, symbol in enumerate(body):
        if symbol in IGNORED:
            continue
        if not digits:
            group_start = position
            if symbol == ZERO_SYMBOL:
                out += ZERO_GROUP
                continue
            if symbol == SPACE_SYMBOL:
                if not fold_spaces:
                    raise ParseError('"y" is only valid when space folding is enabled', position)
                out += SPACE_GROUP
                continue
        code = ord(symbol)
        if not FIRST_SYMBOL <= code <= LAST_SYMBOL:
            raise ParseError(f"Invalid Ascii85 symbol {symbol!r}", position)
        digits.append(code - OFFSET)
        if len(digits) == SYMBOLS_PER_GROUP:
            _flush(out, digits, group_start)
            digits = []
        elif len(digits) > SYMBOLS_PER_GROUP:
            unreachable()
    _flush(out, digits, group_start)
    return bytes(out)


def encode_text(text: str, fold_spaces: bool = False, adobe_mode: bool = False, encoding: str = "utf-8") -> str:
    return encode(text.encode(encoding), fold_spaces, adobe_mode)


def decode_text(encoded: str, fold_spaces: bool = False, adobe_mode: bool = False, encoding: str = "utf-8") -> str:
    return bytes_to_text(decode(encoded, fold_spaces, adobe_mode), "Ascii85", encoding)


def encode_buffer(buffer: ByteBuffer, fold_spaces: bool = False, adobe_mode: bool = False) -> str:
    return encode(buffer, fold_spaces, adobe_mode)


def decode_buffer(encoded: str, fold_spaces: bool = False, adobe_mode: bool = False) -> ByteBuffer:
    return ByteBuffer(decode(encoded, fold_spaces, adobe_mode))
