"""IDF calculators for the three BM25 variants.

Each function maps a document-frequency table and the corpus size to a
term -> IDF table. They are pure: no I/O, no state.
"""

import math

from bm25_family.config import DEFAULT_EPSILON
from bm25_family.math_utils import mean


def okapi_raw_idf(n, df_t):
    """Robertson-Sparck Jones IDF without the +1 shift.

    IDF(t) = log(N - df(t) + 0.5) - log(df(t) + 0.5)

    Negative when the term occurs in more than half of the corpus.
    """
    return math.log(n - df_t + 0.5) - math.log(df_t + 0.5)


def okapi_idf(df, n, epsilon=DEFAULT_EPSILON):
    """Okapi IDF table with the epsilon floor for negative values.

    Every negative raw IDF is replaced by epsilon * average_idf, where
    average_idf is the mean of the raw values taken before replacement.
    """
    idf = {}
    negative_idfs = []
    for term, df_t in df.items():
        value = okapi_raw_idf(n, df_t)
        idf[term] = value
        if value < 0:
            negative_idfs.append(term)
    if not idf:
        return idf

    average_idf = mean(idf.values())
    eps = epsilon * average_idf
    for term in negative_idfs:
        idf[term] = eps
    return idf


def bm25l_idf(df, n):
    """BM25L IDF: log(N + 1) - log(df(t) + 0.5). Non-negative for df <= N."""
    return {
        term: math.log(n + 1) - math.log(df_t + 0.5)
        for term, df_t in df.items()
    }


def bm25plus_idf(df, n):
    """BM25+ IDF: log((N + 1) / df(t)). Positive for 1 <= df <= N."""
    return {term: math.log((n + 1) / df_t) for term, df_t in df.items()}
