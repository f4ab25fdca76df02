"""Lossy UTF-8 codec working on raw codepoint integers.

Decoding never fails:

- The leading byte decides the sequence length (1-4 bytes). Bytes with an
  unexpected high-bit pattern are read as single-byte codepoints.
- A sequence that would run past the end of the input is dropped one byte at
  a time, so the tail of the input is still decoded.
- Continuation bytes are not checked for the `10xxxxxx` marker. A malformed
  continuation byte contributes its low six bits like a valid one.

Encoding writes the standard 1-4 byte forms and silently drops values above
U+10FFFF.
"""

from __future__ import annotations

from typing import Final, Iterable

from QueryKit.utils.log import log


# Leading-byte (mask, pattern, payload mask) per sequence length
_LEAD_BYTE_FORMS: Final[tuple[tuple[int, int, int, int], ...]] = (
    (1, 0x80, 0x00, 0x7F),  # 0xxxxxxx
    (2, 0xE0, 0xC0, 0x1F),  # 110xxxxx
    (3, 0xF0, 0xE0, 0x0F),  # 1110xxxx
    (4, 0xF8, 0xF0, 0x07),  # 11110xxx
)
_PAYLOAD_MASK: Final[dict[int, int]] = {length: payload for length, _, _, payload in _LEAD_BYTE_FORMS}

_CONTINUATION_MASK: Final[int] = 0x3F
_CONTINUATION_PATTERN: Final[int] = 0x80

_MAX_ONE_BYTE: Final[int] = 0x7F
_MAX_TWO_BYTE: Final[int] = 0x7FF
_MAX_THREE_BYTE: Final[int] = 0xFFFF
MAX_CODEPOINT: Final[int] = 0x10FFFF


def as_utf8_bytes(text: str | bytes) -> bytes:
    """Return UTF-8 bytes for `text`, passing bytes through unchanged.

    Lone surrogates in `str` input are kept (encoded as 3-byte sequences) so a
    decode/encode cycle stays byte-identical.
    """
    if isinstance(text, (bytes, bytearray, memoryview)):
        return bytes(text)
    return text.encode("utf-8", errors="surrogatepass")


def utf8_char_length(first_byte: int) -> int:
    """Return the sequence length announced by a UTF-8 leading byte.

    Args:
        first_byte: Leading byte value (0-255).

    Returns:
        1, 2, 3 or 4. Unrecognized patterns (including continuation bytes)
        count as 1.
    """
    for length, mask, pattern, _ in _LEAD_BYTE_FORMS:
        if first_byte & mask == pattern:
            return length
    return 1


def decode_utf8(data: str | bytes) -> list[int]:
    """Decode UTF-8 input into a list of codepoints.

    Args:
        data: UTF-8 bytes, or a `str` that is encoded first.

    Returns:
        Codepoints in input order. Truncated trailing sequences are skipped.
    """
    raw = as_utf8_bytes(data)
    size = len(raw)
    codepoints: list[int] = []

    i = 0
    while i < size:
        first_byte = raw[i]
        length = utf8_char_length(first_byte)
        if i + length > size:
            log.debug("Skipping truncated UTF-8 sequence at byte %d (0x%02X)", i, first_byte)
            i += 1
            continue

        if length == 1:
            codepoint = first_byte
        else:
            codepoint = first_byte & _PAYLOAD_MASK[length]
            for offset in range(1, length):
                codepoint = (codepoint << 6) | (raw[i + offset] & _CONTINUATION_MASK)

        codepoints.append(codepoint)
        i += length

    return codepoints


def encode_codepoints(codepoints: Iterable[int]) -> bytes:
    """Encode codepoints into UTF-8 bytes.

    Args:
        codepoints: Codepoint values. Values outside 0..U+10FFFF are dropped.

    Returns:
        Encoded bytes.
    """
    out = bytearray()
    for codepoint in codepoints:
        if codepoint < 0:
            continue
        if codepoint <= _MAX_ONE_BYTE:
            out.append(codepoint)
        elif codepoint <= _MAX_TWO_BYTE:
            out.append(0xC0 | (codepoint >> 6))
            out.append(_CONTINUATION_PATTERN | (codepoint & _CONTINUATION_MASK))
        elif codepoint <= _MAX_THREE_BYTE:
            out.append(0xE0 | (codepoint >> 12))
            out.append(_CONTINUATION_PATTERN | ((codepoint >> 6) & _CONTINUATION_MASK))
            out.append(_CONTINUATION_PATTERN | (codepoint & _CONTINUATION_MASK))
        elif codepoint <= MAX_CODEPOINT:
            out.append(0xF0 | (codepoint >> 18))
            out.append(_CONTINUATION_PATTERN | ((codepoint >> 12) & _CONTINUATION_MASK))
            out.append(_CONTINUATION_PATTERN | ((codepoint >> 6) & _CONTINUATION_MASK))
            out.append(_CONTINUATION_PATTERN | (codepoint & _CONTINUATION_MASK))
    return bytes(out)


def codepoints_to_str(codepoints: Iterable[int]) -> str:
    """Encode codepoints and return them as a Python string."""
    return encode_codepoints(codepoints).decode("utf-8", errors="surrogatepass")
