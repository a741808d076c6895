"""BM25 scoring engine for the Okapi, BM25L and BM25+ variants."""

import heapq
import logging

from bm25_family.config import DEFAULT_TOP_N
from bm25_family.corpus import Corpus
from bm25_family.idf import bm25l_idf, bm25plus_idf, okapi_idf
from bm25_family.math_utils import length_norm
from bm25_family.variants import BM25L, BM25Plus, Okapi

logger = logging.getLogger("bm25_family.engine")


def okapi_term_score(idf, tf, doc_length, avgdl, variant):
    """Okapi BM25 term score.

    score(t, d) = IDF(t) * tf * (k1 + 1) / (tf + k1 * norm)

    Terms absent from the document contribute exactly 0.
    """
    if tf == 0:
        return 0.0
    k1 = variant.k1
    norm = length_norm(doc_length, avgdl, variant.b)
    return idf * (tf * (k1 + 1.0)) / (tf + k1 * norm)


def bm25l_term_score(idf, tf, doc_length, avgdl, variant):
    """BM25L term score (Lv and Zhai).

    ctd = tf / norm
    score(t, d) = IDF(t) * (k1 + 1) * (ctd + delta) / (k1 + ctd + delta)

    Computed for tf == 0 too, which leaves the delta-only baseline.
    """
    k1 = variant.k1
    delta = variant.delta
    norm = length_norm(doc_length, avgdl, variant.b)
    # norm is 0 only for an empty document under b == 1, where tf is 0 too
    ctd = tf / norm if norm else 0.0
    return idf * (k1 + 1.0) * (ctd + delta) / (k1 + ctd + delta)


def bm25plus_term_score(idf, tf, doc_length, avgdl, variant):
    """BM25+ term score.

    score(t, d) = IDF(t) * (delta + tf * (k1 + 1) / (k1 * norm + tf))
    """
    k1 = variant.k1
    norm = length_norm(doc_length, avgdl, variant.b)
    denom = k1 * norm + tf
    # denom is 0 only for an empty document under b == 1; delta alone remains
    tf_part = tf * (k1 + 1.0) / denom if denom else 0.0
    return idf * (variant.delta + tf_part)


# variant type -> (idf calculator, term score)
_SCHEMES = {
    Okapi: (
        lambda df, n, variant: okapi_idf(df, n, variant.epsilon),
        okapi_term_score,
    ),
    BM25L: (lambda df, n, variant: bm25l_idf(df, n), bm25l_term_score),
    BM25Plus: (lambda df, n, variant: bm25plus_idf(df, n), bm25plus_term_score),
}


def _scheme_for(variant):
    try:
        return _SCHEMES[type(variant)]
    except KeyError:
        raise TypeError(
            "unsupported BM25 variant: %s" % type(variant).__name__
        ) from None


def top_n_indices(scores, n=DEFAULT_TOP_N):
    """Indices of the n highest scores, highest first.

    n is clamped to len(scores); n <= 0 gives []. Equal scores keep
    ascending index order.
    """
    n = min(n, len(scores))
    if n <= 0:
        return []
    return heapq.nsmallest(n, range(len(scores)), key=lambda i: (-scores[i], i))


class BM25Engine:
    """Read-only BM25 index over a fixed corpus for one variant.

    The corpus statistics and the IDF table are computed once at
    construction. Every scoring call allocates its own result list, so one
    engine can serve any number of readers.
    """

    def __init__(self, corpus, variant=None):
        if not isinstance(corpus, Corpus):
            corpus = Corpus(corpus)
        self.corpus = corpus
        self.variant = variant if variant is not None else Okapi()
        calc_idf, self._term_score = _scheme_for(self.variant)
        self.idf = calc_idf(corpus.df, corpus.n, self.variant)
        logger.debug(
            "built %s index: documents=%d avgdl=%.3f vocabulary=%d",
            self.variant.name, corpus.n, corpus.avgdl, len(self.idf),
        )

    def __len__(self):
        return self.corpus.n

    def _weigh(self, idf_t, term, doc):
        return self._term_score(
            idf_t,
            doc["term_freq"].get(term, 0),
            doc["length"],
            self.corpus.avgdl,
            self.variant,
        )

    def score_term(self, term, doc):
        """Contribution of one query term to one document dict."""
        idf_t = self.idf.get(term)
        if idf_t is None:
            return 0.0
        return self._weigh(idf_t, term, doc)

    def get_scores(self, query):
        """Score every document against query, aligned by document index.

        Repeated query terms add their contribution once per occurrence;
        terms missing from the IDF table add nothing.
        """
        scores = [0.0] * self.corpus.n
        for term in query:
            idf_t = self.idf.get(term)
            if idf_t is None:
                continue
            for i, doc in enumerate(self.corpus.documents):
                scores[i] += self._weigh(idf_t, term, doc)
        return scores

    def get_top_n(self, query, n=DEFAULT_TOP_N):
        """Indices of the n best-scoring documents for query."""
        return top_n_indices(self.get_scores(query), n)


def build(corpus, variant=None):
    """Build an engine; corpus is a sequence of token sequences (or None)."""
    return BM25Engine(corpus, variant)


def score(engine, query):
    """Scores of every document for query; same as engine.get_scores."""
    return engine.get_scores(query)


def top_n(engine, query, n=DEFAULT_TOP_N):
    """Indices of the n best documents; same as engine.get_top_n."""
    return engine.get_top_n(query, n)
