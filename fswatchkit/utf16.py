"""UTF-16 decoding and encoding on sequences of 16-bit code units.

Malformed input never raises. A broken surrogate pair decodes to a
replacement code point. Code points that cannot be encoded are either
dropped or replaced by a single unit.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence

from fswatchkit.utf8 import encode_utf8, utf8_to_utf32

_MASK32 = 0xFFFFFFFF


def _is_high_surrogate(unit: int) -> bool:
    return 0xD800 <= unit <= 0xDBFF


def _is_low_surrogate(unit: int) -> bool:
    return 0xDC00 <= unit <= 0xDFFF


def _decode(units: Sequence[int], start: int, replacement: int) -> tuple[int, int]:
    first = units[start] & 0xFFFF
    position = start + 1
    if not _is_high_surrogate(first):
        return first, position
    if position >= len(units):
        return replacement, len(units)
    second = units[position]
    position += 1
    if _is_low_surrogate(second):
        codepoint = ((first - 0xD800) << 10) + (second - 0xDC00) + 0x10000
        return codepoint & _MASK32, position
    return replacement, position


def _codepoints(units: Sequence[int], replacement: int = 0) -> Iterator[int]:
    position = 0
    while position < len(units):
        codepoint, position = _decode(units, position, replacement)
        yield codepoint


def decode_utf16(
    units: Sequence[int], start: int = 0, replacement: int = 0
) -> tuple[int, int]:
    """Decode the character starting at ``start``.

    Returns the code point and the index just past the units read. A high
    surrogate followed by anything but a low surrogate decodes to
    ``replacement`` (both units are consumed). A high surrogate at the end
    of ``units`` decodes to ``replacement`` and ``len(units)``. Raises
    IndexError if ``start`` is not inside ``units``.
    """
    units = tuple(units)
    if not 0 <= start < len(units):
        raise IndexError(f"start index {start} outside data of length {len(units)}")
    return _decode(units, start, replacement)


def encode_utf16(codepoint: int, replacement: int = 0) -> list[int]:
    """Encode one code point as a list of UTF-16 code units.

    Surrogate code points below U+FFFF and values above U+10FFFF are
    invalid: they encode to ``[replacement]``, or to nothing when
    ``replacement`` is 0.
    """
    if codepoint < 0xFFFF:
        if 0xD800 <= codepoint <= 0xDFFF:
            return [replacement & 0xFFFF] if replacement else []
        return [codepoint & 0xFFFF]
    if codepoint > 0x10FFFF:
        return [replacement & 0xFFFF] if replacement else []
    value = (codepoint - 0x10000) & _MASK32
    return [
        ((value >> 10) + 0xD800) & 0xFFFF,
        ((value & 0x3FF) + 0xDC00) & 0xFFFF,
    ]


def next_utf16(units: Sequence[int], start: int = 0) -> int:
    """Return the index just past the character starting at ``start``."""
    return decode_utf16(units, start)[1]


def count_utf16(units: Iterable[int]) -> int:
    """Count the characters in a sequence of UTF-16 code units."""
    return sum(1 for _ in _codepoints(tuple(units)))


def utf16_to_utf8(units: Iterable[int]) -> bytes:
    """Convert UTF-16 code units to UTF-8 bytes."""
    return b"".join(encode_utf8(codepoint) for codepoint in _codepoints(tuple(units)))


def utf8_to_utf16(data: bytes) -> list[int]:
    """Convert UTF-8 bytes to UTF-16 code units."""
    return [unit for codepoint in utf8_to_utf32(data) for unit in encode_utf16(codepoint)]


def utf16_to_utf32(units: Iterable[int]) -> list[int]:
    """Decode UTF-16 code units into a list of code points."""
    return list(_codepoints(tuple(units)))


def utf16_to_latin1(units: Iterable[int], replacement: int = 0) -> bytes:
    """Convert UTF-16 code units to Latin-1, one byte per unit.

    Every unit above 0xFF, including each half of a surrogate pair, becomes
    the byte ``replacement``.
    """
    return bytes(unit if unit < 256 else replacement & 0xFF for unit in units)


def latin1_to_utf16(data: bytes) -> list[int]:
    """Convert Latin-1 bytes to UTF-16 code units."""
    return list(bytes(data))