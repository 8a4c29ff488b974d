"""Conversions on sequences of Unicode code points (UTF-32) and wide characters.

A wide character is either 4 bytes (UCS-4, a plain code point) or 2 bytes
(UCS-2, which cannot hold surrogates or code points above U+FFFF). The
default width follows the running platform: 2 on Windows, 4 elsewhere.
"""

from __future__ import annotations

import sys
from collections.abc import Iterable

from fswatchkit.utf8 import encode_utf8, utf8_to_utf32
from fswatchkit.utf16 import encode_utf16, utf16_to_utf32

DEFAULT_WIDE_SIZE = 2 if sys.platform == "win32" else 4


def _check_wide_size(wide_size: int | None) -> int:
    size = DEFAULT_WIDE_SIZE if wide_size is None else wide_size
    if size not in (2, 4):
        raise ValueError(f"wide character size must be 2 or 4, not {size}")
    return size


def _wide_values(chars: Iterable[int] | str) -> Iterable[int]:
    if isinstance(chars, str):
        return (ord(char) for char in chars)
    return chars


def count_utf32(codepoints: Iterable[int]) -> int:
    """Count the characters in a code point sequence: one per element."""
    return sum(1 for _ in codepoints)


def utf32_to_utf8(codepoints: Iterable[int]) -> bytes:
    """Encode code points as UTF-8; invalid ones are dropped."""
    return b"".join(encode_utf8(codepoint) for codepoint in codepoints)


def utf32_to_utf16(codepoints: Iterable[int]) -> list[int]:
    """Encode code points as UTF-16 code units; invalid ones are dropped."""
    return [unit for codepoint in codepoints for unit in encode_utf16(codepoint)]


def utf32_to_latin1(codepoints: Iterable[int], replacement: int = 0) -> bytes:
    """Convert code points to Latin-1; those above U+00FF become ``replacement``."""
    return bytes(
        codepoint if codepoint < 256 else replacement & 0xFF for codepoint in codepoints
    )


def latin1_to_utf32(data: bytes) -> list[int]:
    """Convert Latin-1 bytes to code points."""
    return list(bytes(data))


def encode_wide(
    codepoint: int, replacement: int = 0, wide_size: int | None = None
) -> list[int]:
    """Encode one code point as wide characters.

    With 4-byte wide characters the code point is copied unchanged. With
    2-byte ones, surrogates and code points above U+FFFF are replaced by
    ``replacement``, or dropped when ``replacement`` is 0. Raises ValueError
    for a width other than 2 or 4.
    """
    size = _check_wide_size(wide_size)
    if size == 4:
        return [codepoint]
    if codepoint <= 0xFFFF and not 0xD800 <= codepoint <= 0xDFFF:
        return [codepoint]
    return [replacement] if replacement else []


def utf32_to_wide(
    codepoints: Iterable[int], replacement: int = 0, wide_size: int | None = None
) -> list[int]:
    """Convert code points to wide characters."""
    size = _check_wide_size(wide_size)
    return [
        char
        for codepoint in codepoints
        for char in encode_wide(codepoint, replacement, size)
    ]


def utf8_to_wide(
    data: bytes, replacement: int = 0, wide_size: int | None = None
) -> list[int]:
    """Convert UTF-8 bytes to wide characters."""
    return utf32_to_wide(utf8_to_utf32(data), replacement, wide_size)


def utf16_to_wide(
    units: Iterable[int], replacement: int = 0, wide_size: int | None = None
) -> list[int]:
    """Convert UTF-16 code units to wide characters."""
    return utf32_to_wide(utf16_to_utf32(units), replacement, wide_size)


def wide_to_utf8(chars: Iterable[int] | str) -> bytes:
    """Convert wide characters (ints or a str) to UTF-8 bytes."""
    return utf32_to_utf8(_wide_values(chars))


def wide_to_utf16(chars: Iterable[int] | str) -> list[int]:
    """Convert wide characters (ints or a str) to UTF-16 code units."""
    return utf32_to_utf16(_wide_values(chars))