"""
Alphabet tables and the RFC 4648 grouping/padding rules shared by the
Base32, Base32Hex, Base64 and Base64Url codecs.

Encoding looks a symbol up by its numeric value in a plain string; decoding
looks a value up by character code in a 256-entry table where INVALID marks
characters outside the alphabet.
"""
from typing import FrozenSet, Tuple, Union

from .buffer import ByteBuffer
from .errors import ParseError

INVALID = 0xFF
PAD = "="

BASE16_UPPER = "0123456789ABCDEF"
BASE16_LOWER = "0123456789abcdef"
BASE32_STANDARD = "ABCDEFGHIJKLMNOPQRSTUVWXYZ234567"
BASE32_HEX = "0123456789ABCDEFGHIJKLMNOPQRSTUV"
BASE64_STANDARD = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789+/"
BASE64_URL = "ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-_"

Payload = Union[bytes, bytearray, memoryview, ByteBuffer]


def build_decode_table(*alphabets: str) -> Tuple[int, ...]:
    """Inverse lookup table for one or more alphabets mapping to the same values."""
    table = [INVALID] * 256
    for symbols in alphabets:
        for value, symbol in enumerate(symbols):
            table[ord(symbol)] = value
    return tuple(table)


def lookup(table: Tuple[int, ...], symbol: str, position: int) -> int:
    code = ord(symbol)
    value = table[code] if code < 256 else INVALID
    if value == INVALID:
        raise ParseError(f"Invalid symbol {symbol!r}", position)
    return value


def as_bytes(data: Payload) -> bytes:
    if isinstance(data, ByteBuffer):
        return data.to_bytes()
    return bytes(data)


class GroupCodec:
    """
    Fixed-width group encoder/decoder.

    ``group_size`` input bytes map onto ``symbols_per_group`` symbols of
    ``symbol_bits`` bits each. A final partial group of n bytes yields
    ceil(8n / symbol_bits) meaningful symbols, optionally followed by ``=``
    up to the group boundary.
    """

    def __init__(self, name: str, alphabet: str, group_size: int, symbol_bits: int) -> None:
        self.name = name
        self.alphabet = alphabet
        self.group_size = group_size
        self.symbol_bits = symbol_bits
        self.symbols_per_group = group_size * 8 // symbol_bits
        self.mask = (1 << symbol_bits) - 1
        self.decode_table = build_decode_table(alphabet)
        self.valid_symbol_counts: FrozenSet[int] = frozenset(
            self.meaningful_symbols(n) for n in range(1, group_size + 1)
        )

    def meaningful_symbols(self, byte_count: int) -> int:
        return -(-byte_count * 8 // self.symbol_bits)

    def encoded_length(self, byte_count: int, padding: bool = True) -> int:
        full, rest = divmod(byte_count, self.group_size)
        if rest == 0:
            return full * self.symbols_per_group
        if padding:
            return (full + 1) * self.symbols_per_group
        return full * self.symbols_per_group + self.meaningful_symbols(rest)

    def encode(self, data: Payload, padding: bool = True) -> str:
        raw = as_bytes(data)
        out = []
        for start in range(0, len(raw), self.group_size):
            chunk = raw[start:start + self.group_size]
            count = len(chunk)
            value = int.from_bytes(chunk.ljust(self.group_size, b"\x00"), "big")
            meaningful = self.meaningful_symbols(count)
            for index in range(meaningful):
                shift = (self.symbols_per_group - 1 - index) * self.symbol_bits
                out.append(self.alphabet[(value >> shift) & self.mask])
            if padding:
                out.append(PAD * (self.symbols_per_group - meaningful))
        return "".join(out)

    def decode(self, encoded: str) -> bytes:
        """
        Decode ``encoded`` one group at a time.

        Padding may only close a group, and the number of real symbols in that
        group must match a valid partial group. Decoding stops after the first
        padded or short group; anything after it is not read.
        """
        out = bytearray()
        width = self.symbols_per_group
        start = 0
        while start < len(encoded):
            group = encoded[start:start + width]
            value = 0
            symbols = 0
            padding = 0
            for offset, symbol in enumerate(group):
                if symbol == PAD:
                    padding += 1
                    continue
                if padding:
                    raise ParseError(f"{self.name}: symbol {symbol!r} after padding", start + offset)
                value = (value << self.symbol_bits) | lookup(self.decode_table, symbol, start + offset)
                symbols += 1
            if symbols not in self.valid_symbol_counts:
                raise ParseError(
                    f"{self.name}: a group of {symbols} symbols and {padding} padding characters is not valid",
                    start,
                )
            value <<= (width - symbols) * self.symbol_bits
            byte_count = symbols * self.symbol_bits // 8
            out += value.to_bytes(self.group_size, "big")[:byte_count]
            if symbols < width:
                break
            start += width
        return bytes(out)


def bytes_to_text(raw: bytes, name: str, encoding: str) -> str:
    try:
        return raw.decode(encoding)
    except UnicodeDecodeError as exc:
        raise ParseError(f"Decoded {name} data is not valid {encoding} text") from exc
