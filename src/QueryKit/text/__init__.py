"""Unicode text utilities: UTF-8 codec, n-grams, normalization."""

from __future__ import annotations

from QueryKit.text.format import format_bytes
from QueryKit.text.ngrams import generate_hybrid_ngrams, generate_ngrams, is_cjk_ideograph
from QueryKit.text.normalize import normalize_text
from QueryKit.text.utf8 import decode_utf8, encode_codepoints

__all__ = [
    "decode_utf8",
    "encode_codepoints",
    "format_bytes",
    "generate_hybrid_ngrams",
    "generate_ngrams",
    "is_cjk_ideograph",
    "normalize_text",
]
