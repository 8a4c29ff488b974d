"""UTF-8 decoding and encoding with lenient, replacement-based error handling.

Malformed input never raises: an incomplete trailing sequence decodes to a
replacement code point, and code points that cannot be encoded are either
dropped or replaced by a single byte.
"""

from __future__ import annotations

from collections.abc import Iterator

_MASK = 0xFFFFFFFF

# Value subtracted from the accumulated bytes, indexed by the number of
# trailing bytes of the sequence.
_OFFSETS = (0x00000000, 0x00003080, 0x000E2080, 0x03C82080, 0xFA082080, 0x82082080)

# Leading byte of an encoded sequence, indexed by its total length.
_FIRST_BYTES = (0x00, 0x00, 0xC0, 0xE0, 0xF0, 0xF8, 0xFC)


def _trailing_count(lead: int) -> int:
    if lead < 0xC0:
        return 0
    if lead < 0xE0:
        return 1
    if lead < 0xF0:
        return 2
    if lead < 0xF8:
        return 3
    if lead < 0xFC:
        return 4
    return 5


_TRAILING = tuple(_trailing_count(byte) for byte in range(256))


def _decode(buf: bytes, start: int, replacement: int) -> tuple[int, int]:
    trailing = _TRAILING[buf[start]]
    end = start + trailing + 1
    if end > len(buf):
        # Incomplete sequence: consume the rest of the input.
        return replacement, len(buf)
    codepoint = 0
    for byte in buf[start:end]:
        codepoint = ((codepoint << 6) + byte) & _MASK
    return (codepoint - _OFFSETS[trailing]) & _MASK, end


def _codepoints(buf: bytes, replacement: int = 0) -> Iterator[int]:
    position = 0
    while position < len(buf):
        codepoint, position = _decode(buf, position, replacement)
        yield codepoint


def decode_utf8(data: bytes, start: int = 0, replacement: int = 0) -> tuple[int, int]:
    """Decode the character starting at ``start``.

    Returns the code point and the index just past the bytes read. If the
    sequence is cut short by the end of ``data``, returns ``replacement``
    and ``len(data)``. Raises IndexError if ``start`` is not inside ``data``.
    """
    buf = bytes(data)
    if not 0 <= start < len(buf):
        raise IndexError(f"start index {start} outside data of length {len(buf)}")
    return _decode(buf, start, replacement)


def encode_utf8(codepoint: int, replacement: int = 0) -> bytes:
    """Encode one code point as UTF-8.

    Code points above U+10FFFF and high surrogates (U+D800..U+DBFF) are
    invalid: they encode to the single byte ``replacement``, or to nothing
    when ``replacement`` is 0.
    """
    if codepoint > 0x10FFFF or 0xD800 <= codepoint <= 0xDBFF:
        return bytes([replacement]) if replacement else b""
    if codepoint < 0x80:
        length = 1
    elif codepoint < 0x800:
        length = 2
    elif codepoint < 0x10000:
        length = 3
    else:
        length = 4
    tail = []
    for _ in range(length - 1):
        tail.append((codepoint | 0x80) & 0xBF)
        codepoint >>= 6
    lead = (codepoint | _FIRST_BYTES[length]) & 0xFF
    return bytes([lead, *reversed(tail)])


def next_utf8(data: bytes, start: int = 0) -> int:
    """Return the index just past the character starting at ``start``."""
    return decode_utf8(data, start)[1]


def count_utf8(data: bytes) -> int:
    """Count the characters in a UTF-8 byte sequence."""
    return sum(1 for _ in _codepoints(bytes(data)))


def utf8_to_utf32(data: bytes) -> list[int]:
    """Decode a UTF-8 byte sequence into a list of code points."""
    return list(_codepoints(bytes(data)))


def utf8_to_latin1(data: bytes, replacement: int = 0) -> bytes:
    """Convert UTF-8 to Latin-1.

    Code points above U+00FF become the byte ``replacement``.
    """
    return bytes(
        codepoint if codepoint < 256 else replacement
        for codepoint in _codepoints(bytes(data))
    )


def latin1_to_utf8(data: bytes) -> bytes:
    """Convert Latin-1 bytes to UTF-8."""
    return b"".join(encode_utf8(byte) for byte in bytes(data))