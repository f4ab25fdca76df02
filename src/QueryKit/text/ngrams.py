"""Character n-gram generation.

Reproduces the engine-side tokenization so expected index terms can be
computed on the client:

- `generate_ngrams`: a uniform sliding window of `n` codepoints.
- `generate_hybrid_ngrams`: a window size per character class. CJK
  ideographs use `kanji_n`, everything else (including Hiragana and Katakana)
  uses `ascii_n`. A window is emitted only when every codepoint in it belongs
  to the class of its first codepoint. Windows start at every offset, so
  they overlap.
"""

from __future__ import annotations

from typing import Final, Sequence

from QueryKit.text.utf8 import codepoints_to_str, decode_utf8


# Inclusive CJK ideograph ranges; Hiragana (3040-309F) and Katakana (30A0-30FF) are not listed
CJK_IDEOGRAPH_RANGES: Final[tuple[tuple[int, int], ...]] = (
    (0x4E00, 0x9FFF),  # CJK Unified Ideographs
    (0x3400, 0x4DBF),  # Extension A
    (0x20000, 0x2A6DF),  # Extension B
    (0x2A700, 0x2B73F),  # Extension C
    (0x2B740, 0x2B81F),  # Extension D
    (0xF900, 0xFAFF),  # Compatibility Ideographs
)


def is_cjk_ideograph(codepoint: int) -> bool:
    """Return True if `codepoint` is a CJK ideograph (kanji)."""
    return any(start <= codepoint <= end for start, end in CJK_IDEOGRAPH_RANGES)


def generate_ngrams(text: str | bytes, n: int = 1) -> list[str]:
    """Generate uniform character n-grams.

    Args:
        text: Input text (UTF-8 bytes or str), ideally normalized first.
        n: Window size in codepoints.

    Returns:
        One string per window, in order. Empty when `n <= 0` or the text has
        fewer than `n` codepoints. Decoded values above U+10FFFF are dropped
        on re-encoding, so a window made only of them is an empty string.
    """
    codepoints = decode_utf8(text)
    if not codepoints or n <= 0:
        return []
    if n == 1:
        return [codepoints_to_str((cp,)) for cp in codepoints]
    if len(codepoints) < n:
        return []
    return [codepoints_to_str(codepoints[i : i + n]) for i in range(len(codepoints) - n + 1)]


def generate_hybrid_ngrams(text: str | bytes, ascii_n: int = 2, kanji_n: int = 1) -> list[str]:
    """Generate n-grams with separate window sizes for kanji and other text.

    Args:
        text: Input text (UTF-8 bytes or str), ideally normalized first.
        ascii_n: Window size for non-CJK codepoints.
        kanji_n: Window size for CJK ideographs.

    Returns:
        Class-homogeneous windows in start-offset order. Empty when the text is
        empty or either size is not positive.
    """
    codepoints = decode_utf8(text)
    if not codepoints or ascii_n <= 0 or kanji_n <= 0:
        return []

    classes = [is_cjk_ideograph(cp) for cp in codepoints]
    ngrams: list[str] = []
    for i, cjk in enumerate(classes):
        size = kanji_n if cjk else ascii_n
        window = _same_class_window(codepoints, classes, i, size)
        if window is not None:
            ngrams.append(codepoints_to_str(window))
    return ngrams


def _same_class_window(
    codepoints: Sequence[int], classes: Sequence[bool], start: int, size: int
) -> Sequence[int] | None:
    end = start + size
    if end > len(codepoints):
        return None
    expected = classes[start]
    if any(classes[j] != expected for j in range(start, end)):
        return None
    return codepoints[start:end]
