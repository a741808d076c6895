"""
Whitespace tokenizer used by the demo REPL.
"""
from __future__ import annotations

import unittest

from bm25_family.tokenizer import Tokenizer


class TestTokenizer(unittest.TestCase):

    def test_splits_on_whitespace_and_keeps_case(self) -> None:
        self.assertEqual(Tokenizer().tokenize("  How is\tthe  weather?\n"), ["How", "is", "the", "weather?"])

    def test_custom_delimiter_drops_empty_tokens(self) -> None:
        self.assertEqual(Tokenizer(",").tokenize("a,,b,"), ["a", "b"])

    def test_empty_text(self) -> None:
        self.assertEqual(Tokenizer().tokenize(""), [])


if __name__ == "__main__":
    unittest.main()
