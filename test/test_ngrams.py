"""Tests for uniform and hybrid n-gram generation."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from QueryKit.text.ngrams import generate_hybrid_ngrams, generate_ngrams, is_cjk_ideograph


class TestGenerateNgrams(unittest.TestCase):
    def test_bigrams(self) -> None:
        self.assertEqual(generate_ngrams("hello", 2), ["he", "el", "ll", "lo"])

    def test_unigrams(self) -> None:
        self.assertEqual(generate_ngrams("hello", 1), ["h", "e", "l", "l", "o"])
        self.assertEqual(generate_ngrams("日本語"), ["日", "本", "語"])

    def test_windows_count_codepoints_not_bytes(self) -> None:
        self.assertEqual(generate_ngrams("日本語", 2), ["日本", "本語"])
        self.assertEqual(generate_ngrams("日本語", 3), ["日本語"])

    def test_degenerate_inputs_are_empty(self) -> None:
        self.assertEqual(generate_ngrams("abc", 4), [])
        self.assertEqual(generate_ngrams("abc", 0), [])
        self.assertEqual(generate_ngrams("abc", -1), [])
        self.assertEqual(generate_ngrams("", 1), [])

    def test_bytes_input(self) -> None:
        self.assertEqual(generate_ngrams("ab".encode("utf-8"), 1), ["a", "b"])

    def test_out_of_range_codepoint_yields_empty_gram(self) -> None:
        # F7 BF BF BF decodes to 0x1FFFFF, which cannot be re-encoded
        self.assertEqual(generate_ngrams(b"\xf7\xbf\xbf\xbf a", 1), ["", " ", "a"])
        self.assertEqual(generate_ngrams(b"\xf7\xbf\xbf\xbfa", 2), ["a"])


class TestGenerateHybridNgrams(unittest.TestCase):
    def test_mixed_ascii_and_kanji(self) -> None:
        self.assertEqual(
            generate_hybrid_ngrams("AI漢字test", 2, 1),
            ["AI", "漢", "字", "te", "es", "st"],
        )

    def test_windows_never_mix_classes(self) -> None:
        ngrams = generate_hybrid_ngrams("AI漢字test東京", 2, 1)
        for gram in ngrams:
            classes = {is_cjk_ideograph(ord(ch)) for ch in gram}
            self.assertEqual(len(classes), 1, gram)
            expected_len = 1 if classes == {True} else 2
            self.assertEqual(len(gram), expected_len, gram)

    def test_kana_uses_ascii_window(self) -> None:
        self.assertEqual(generate_hybrid_ngrams("ひらがな", 2, 1), ["ひら", "らが", "がな"])
        self.assertEqual(generate_hybrid_ngrams("カタカナ", 2, 1), ["カタ", "タカ", "カナ"])

    def test_kanji_bigrams_next_to_katakana(self) -> None:
        self.assertEqual(generate_hybrid_ngrams("東京タワー", 2, 2), ["東京", "タワ", "ワー"])

    def test_extension_b_is_cjk(self) -> None:
        self.assertEqual(generate_hybrid_ngrams("\U00020000a", 2, 1), ["\U00020000"])

    def test_degenerate_inputs_are_empty(self) -> None:
        self.assertEqual(generate_hybrid_ngrams("", 2, 1), [])
        self.assertEqual(generate_hybrid_ngrams("abc", 0, 1), [])
        self.assertEqual(generate_hybrid_ngrams("漢字", 2, 0), [])


class TestIsCjkIdeograph(unittest.TestCase):
    def test_range_edges(self) -> None:
        for codepoint in (0x4E00, 0x9FFF, 0x3400, 0x4DBF, 0x20000, 0x2A6DF, 0x2A700, 0x2B81F, 0xF900, 0xFAFF):
            with self.subTest(codepoint=hex(codepoint)):
                self.assertTrue(is_cjk_ideograph(codepoint))

    def test_non_cjk(self) -> None:
        for codepoint in (0x41, 0x3042, 0x30A2, 0x3000, 0x2A6E0, 0x2B820, 0xFB00):
            with self.subTest(codepoint=hex(codepoint)):
                self.assertFalse(is_cjk_ideograph(codepoint))


if __name__ == "__main__":
    unittest.main()
