"""Whitespace tokenizer used to turn raw query lines into terms."""


class Tokenizer:
    """Split on a delimiter, keeping case and punctuation.

    Terms are opaque to the scorers, so no normalization happens here.
    """

    def __init__(self, delimiter=None):
        self.delimiter = delimiter

    def tokenize(self, text):
        """Return the list of non-empty tokens in text."""
        return [t for t in text.split(self.delimiter) if t]
