"""bm25_family - Okapi BM25, BM25L and BM25+ scoring over a fixed tokenized corpus."""

from bm25_family.math_utils import (
    mean,
    length_ratio,
    length_norm,
)
from bm25_family.tokenizer import Tokenizer
from bm25_family.corpus import Corpus
from bm25_family.idf import okapi_raw_idf, okapi_idf, bm25l_idf, bm25plus_idf
from bm25_family.variants import Okapi, BM25L, BM25Plus
from bm25_family.bm25_scorer import (
    BM25Engine,
    build,
    score,
    top_n,
    top_n_indices,
    okapi_term_score,
    bm25l_term_score,
    bm25plus_term_score,
)
from bm25_family.experiments import ExperimentRunner

__all__ = [
    "mean",
    "length_ratio",
    "length_norm",
    "Tokenizer",
    "Corpus",
    "okapi_raw_idf",
    "okapi_idf",
    "bm25l_idf",
    "bm25plus_idf",
    "Okapi",
    "BM25L",
    "BM25Plus",
    "BM25Engine",
    "build",
    "score",
    "top_n",
    "top_n_indices",
    "okapi_term_score",
    "bm25l_term_score",
    "bm25plus_term_score",
    "ExperimentRunner",
]
