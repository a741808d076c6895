"""Tokenized corpus with the per-document and corpus-wide BM25 statistics."""

import logging

logger = logging.getLogger("bm25_family.corpus")


class Corpus:
    """Stores tokenized documents and the statistics BM25 needs.

    Each document is a dict with keys:
        length, term_freq

    A document's id is its position in the input sequence. Statistics are
    computed once in the constructor and never updated.
    """

    def __init__(self, documents=None):
        self.documents = []
        self.n = 0
        self.avgdl = 0.0
        self.df = {}  # term -> document frequency
        for tokens in documents or ():
            self._add_document(tokens)
        self._build_index()

    def _add_document(self, tokens):
        """Count term frequencies and store the document dict."""
        term_freq = {}
        length = 0
        for token in tokens:
            term_freq[token] = term_freq.get(token, 0) + 1
            length += 1
        self.documents.append({
            "length": length,
            "term_freq": term_freq,
        })

    def _build_index(self):
        """Compute N, df(t) for each term, and avgdl."""
        self.n = len(self.documents)
        total_length = 0
        for doc in self.documents:
            total_length += doc["length"]
            for term in doc["term_freq"]:
                self.df[term] = self.df.get(term, 0) + 1
        # avgdl is 0.0 for an empty corpus; scorers never divide by it then
        self.avgdl = total_length / self.n if self.n > 0 else 0.0
        if self.n == 0:
            logger.debug("empty corpus, avgdl set to 0.0")

    def __len__(self):
        return self.n

    def get_document(self, index):
        """Look up a document by its position."""
        return self.documents[index]

    @property
    def doc_lengths(self):
        return [doc["length"] for doc in self.documents]
