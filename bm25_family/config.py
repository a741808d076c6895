"""
bm25_family configuration: scoring defaults and demo corpus settings.
"""
from __future__ import annotations

# Shared BM25 parameters
DEFAULT_K1: float = 1.5
DEFAULT_B: float = 0.75

# Variant-specific floors
DEFAULT_EPSILON: float = 0.25
DEFAULT_BM25L_DELTA: float = 0.5
DEFAULT_BM25PLUS_DELTA: float = 1.0

# Top-N selection
DEFAULT_TOP_N: int = 5

# Demo random corpus (bm25-demo --repl)
DEMO_CORPUS_SIZE: int = 10000
DEMO_VOCABULARY_SIZE: int = 1000
DEMO_MIN_DOC_LENGTH: int = 3
DEMO_MAX_DOC_LENGTH: int = 10
DEMO_SEED: int = 42
