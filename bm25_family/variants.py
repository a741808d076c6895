"""Parameter records naming the BM25 variant an engine is built for.

The set is closed: Okapi, BM25L and BM25Plus. The engine looks the record's
type up in a table to find the matching IDF and term-weight functions.
"""
from __future__ import annotations

from dataclasses import dataclass

from bm25_family.config import (
    DEFAULT_B,
    DEFAULT_BM25L_DELTA,
    DEFAULT_BM25PLUS_DELTA,
    DEFAULT_EPSILON,
    DEFAULT_K1,
)


@dataclass(frozen=True)
class Okapi:
    """Classic Okapi BM25. Negative IDFs are floored to epsilon * mean IDF."""
    k1: float = DEFAULT_K1
    b: float = DEFAULT_B
    epsilon: float = DEFAULT_EPSILON

    name = "okapi"


@dataclass(frozen=True)
class BM25L:
    """BM25L: shifted length-normalized tf, every document gets the delta baseline."""
    k1: float = DEFAULT_K1
    b: float = DEFAULT_B
    delta: float = DEFAULT_BM25L_DELTA

    name = "bm25l"


@dataclass(frozen=True)
class BM25Plus:
    """BM25+: lower-bounds each term's tf component by delta."""
    k1: float = DEFAULT_K1
    b: float = DEFAULT_B
    delta: float = DEFAULT_BM25PLUS_DELTA

    name = "bm25plus"
