from typing import Any, Callable, Dict, NamedTuple

from . import ascii85, base16, base32, base64
from .buffer import ByteBuffer
from .errors import ConfigurationError


class Codec(NamedTuple):
    """Entry points of one algorithm; options are passed through as keywords."""

    name: str
    encode_text: Callable[..., str]
    encode_buffer: Callable[..., str]
    decode_text: Callable[..., str]
    decode_buffer: Callable[..., ByteBuffer]
    encode: Callable[..., str]
    decode: Callable[..., bytes]


def registry() -> Dict[str, Codec]:
    return {
        "base16": Codec(
            "Base16",
            base16.encode_text,
            base16.encode_buffer,
            base16.decode_text,
            base16.decode_buffer,
            base16.encode,
            base16.decode,
        ),
        "base32": Codec(
            "Base32",
            base32.encode_text,
            base32.encode_buffer,
            base32.decode_text,
            base32.decode_buffer,
            base32.encode,
            base32.decode,
        ),
        "base32hex": Codec(
            "Base32Hex",
            base32.hex_encode_text,
            base32.hex_encode_buffer,
            base32.hex_decode_text,
            base32.hex_decode_buffer,
            base32.hex_encode,
            base32.hex_decode,
        ),
        "base64": Codec(
            "Base64",
            base64.encode_text,
            base64.encode_buffer,
            base64.decode_text,
            base64.decode_buffer,
            base64.encode,
            base64.decode,
        ),
        "base64url": Codec(
            "Base64Url",
            base64.url_encode_text,
            base64.url_encode_buffer,
            base64.url_decode_text,
            base64.url_decode_buffer,
            base64.url_encode,
            base64.url_decode,
        ),
        "ascii85": Codec(
            "Ascii85",
            ascii85.encode_text,
            ascii85.encode_buffer,
            ascii85.decode_text,
            ascii85.decode_buffer,
            ascii85.encode,
            ascii85.decode,
        ),
    }


def get_codec(algorithm: str) -> Codec:
    codecs = registry()
    if algorithm not in codecs:
        raise ConfigurationError(f"Invalid algorithm: {algorithm!r}")
    return codecs[algorithm]


def convert(task: str, algorithm: str, payload: Any, **options: Any) -> Any:
    """Run one task: text or ByteBuffer in, text or ByteBuffer out."""
    codec = get_codec(algorithm)
    if task == "encode-text":
        return codec.encode_text(payload, **options)
    if task == "encode-binary":
        return codec.encode_buffer(payload, **options)
    if task == "decode-text":
        return codec.decode_text(payload, **options)
    if task == "decode-binary":
        return codec.decode_buffer(payload, **options)
    raise ConfigurationError(f"Invalid task: {task!r}")
