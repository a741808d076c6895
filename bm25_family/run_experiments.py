"""Entry point: reference corpus, property checks and an interactive REPL."""

import argparse
import logging
import random
import string
import sys
import time

from bm25_family.bm25_scorer import BM25Engine
from bm25_family.config import (
    DEMO_CORPUS_SIZE,
    DEMO_MAX_DOC_LENGTH,
    DEMO_MIN_DOC_LENGTH,
    DEMO_SEED,
    DEMO_VOCABULARY_SIZE,
)
from bm25_family.experiments import ExperimentRunner
from bm25_family.tokenizer import Tokenizer
from bm25_family.variants import BM25L, BM25Plus, Okapi


# --------------------------------------------------------------------------
# Reference corpus and queries
# --------------------------------------------------------------------------

DOCUMENTS = [
    ["Hello", "there", "good", "man!"],
    ["It", "is", "quite", "windy", "in", "London"],
    ["How", "is", "the", "weather", "today?"],
]

QUERIES = [
    {
        "terms": ["there", "is", "London"],
        "expected": {
            "okapi": [0.561347, 0.569072, 0.109463],
            "bm25l": [2.20092, 2.34413, 1.81354],
            "bm25plus": [4.98914, 5.37348, 4.15888],
        },
    },
    {
        "terms": ["the", "man"],
    },
    {
        "terms": ["is", "is", "weather"],
    },
]

TOP_N_QUERY = ["the", "man"]


def generate_random_corpus(
    num_docs=DEMO_CORPUS_SIZE,
    vocabulary_size=DEMO_VOCABULARY_SIZE,
    min_length=DEMO_MIN_DOC_LENGTH,
    max_length=DEMO_MAX_DOC_LENGTH,
    seed=DEMO_SEED,
):
    """Random documents drawn from a synthetic lowercase vocabulary."""
    rng = random.Random(seed)
    vocabulary = set()
    while len(vocabulary) < vocabulary_size:
        length = rng.randint(3, 7)
        vocabulary.add("".join(rng.choice(string.ascii_lowercase) for _ in range(length)))
    words = sorted(vocabulary)
    return [
        [rng.choice(words) for _ in range(rng.randint(min_length, max_length))]
        for _ in range(num_docs)
    ]


def print_reference_scores():
    """Print scores and top-N for every variant on the reference corpus."""
    query = QUERIES[0]["terms"]
    for variant in (Okapi(), BM25L(), BM25Plus()):
        engine = BM25Engine(DOCUMENTS, variant)
        scores = engine.get_scores(query)
        print("%-9s scores=[%s] top_n(%s)=%s" % (
            variant.name,
            ", ".join("%.6f" % s for s in scores),
            " ".join(TOP_N_QUERY),
            engine.get_top_n(TOP_N_QUERY),
        ))


def run_checks():
    """Run the property checks and print results. Returns True if all pass."""
    runner = ExperimentRunner(DOCUMENTS, QUERIES)
    results = runner.run_all()

    print("=" * 72)
    print("BM25 Property Checks")
    print("=" * 72)
    print()
    print("Corpus: %d documents, avgdl=%.1f, vocabulary=%d terms" % (
        runner.corpus.n, runner.corpus.avgdl, len(runner.corpus.df)
    ))
    print("Queries: %d" % len(QUERIES))
    print()

    all_passed = True
    for name, passed, details in results:
        status = "PASS" if passed else "FAIL"
        if not passed:
            all_passed = False
        print("-" * 72)
        print("[%s] %s" % (status, name))
        for line in details.split("\n"):
            print("       %s" % line)
        print()

    print("=" * 72)
    if all_passed:
        print("All %d checks PASSED." % len(results))
    else:
        failed = [name for name, passed, _ in results if not passed]
        print("FAILED checks: %s" % ", ".join(failed))
    print("=" * 72)
    return all_passed


def repl(num_docs=DEMO_CORPUS_SIZE, seed=DEMO_SEED, stdin=None):
    """Score lines read from stdin against a random corpus until 'exit'."""
    if stdin is None:
        stdin = sys.stdin
    corpus = generate_random_corpus(num_docs=num_docs, seed=seed)
    print("Corpus size: %d" % len(corpus))
    print("Document avg len: %.3f" % (
        sum(len(doc) for doc in corpus) / len(corpus) if corpus else 0.0
    ))
    start = time.perf_counter()
    engine = BM25Engine(corpus, Okapi())
    print("Index built in %.3f s" % (time.perf_counter() - start))

    tokenizer = Tokenizer()
    while True:
        print("Enter a string: ", end="", flush=True)
        line = stdin.readline()
        if not line:
            print()
            break
        line = line.rstrip("\n")
        if line == "exit":
            break
        start = time.perf_counter()
        engine.get_scores(tokenizer.tokenize(line))
        print("Time taken: %.6f s" % (time.perf_counter() - start))


def main(argv=None):
    parser = argparse.ArgumentParser(
        description="BM25 reference scores, property checks and query REPL."
    )
    parser.add_argument("--repl", action="store_true",
                        help="score queries interactively against a random corpus")
    parser.add_argument("--docs", type=int, default=DEMO_CORPUS_SIZE,
                        help="random corpus size for --repl")
    parser.add_argument("--seed", type=int, default=DEMO_SEED,
                        help="random corpus seed for --repl")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    args = parser.parse_args(argv)
    if args.docs < 0:
        parser.error("--docs must be >= 0")

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.repl:
        repl(num_docs=args.docs, seed=args.seed)
        return 0

    print_reference_scores()
    print()
    return 0 if run_checks() else 1


if __name__ == "__main__":
    sys.exit(main())
