"""Property checks run against the three BM25 variants on a corpus."""

from bm25_family.bm25_scorer import BM25Engine, top_n_indices
from bm25_family.corpus import Corpus
from bm25_family.idf import okapi_raw_idf
from bm25_family.math_utils import mean
from bm25_family.variants import BM25L, BM25Plus, Okapi

TOLERANCE = 1e-9


class ExperimentRunner:
    """Checks the scoring identities of Okapi, BM25L and BM25+.

    documents is a sequence of token lists; queries is a list of dicts with
    a "terms" key and, optionally, "expected" mapping variant name to the
    expected score vector.
    """

    def __init__(self, documents, queries, k1=1.5, b=0.75):
        self.corpus = Corpus(documents)
        self.queries = queries
        self.engines = {
            "okapi": BM25Engine(self.corpus, Okapi(k1=k1, b=b)),
            "bm25l": BM25Engine(self.corpus, BM25L(k1=k1, b=b)),
            "bm25plus": BM25Engine(self.corpus, BM25Plus(k1=k1, b=b)),
        }

    def run_all(self):
        """Run all checks and return (name, passed, details) triples."""
        experiments = [
            ("1. Average Document Length", self.exp1_avgdl),
            ("2. Document Frequency Bounds", self.exp2_document_frequency),
            ("3. Okapi IDF Floor", self.exp3_okapi_floor),
            ("4. BM25L/BM25+ IDF Non-negativity", self.exp4_idf_non_negative),
            ("5. Absent Term Contribution", self.exp5_absent_terms),
            ("6. Repeated Query Terms", self.exp6_repeated_terms),
            ("7. Top-N Ordering", self.exp7_top_n),
            ("8. Reference Scores", self.exp8_reference_scores),
        ]
        results = []
        for name, func in experiments:
            passed, details = func()
            results.append((name, passed, details))
        return results

    def exp1_avgdl(self):
        """avgdl equals total tokens over corpus size."""
        lengths = self.corpus.doc_lengths
        if not lengths:
            return self.corpus.avgdl == 0.0, "empty corpus, avgdl=%.1f" % (
                self.corpus.avgdl
            )
        expected = sum(lengths) / len(lengths)
        diff = abs(expected - self.corpus.avgdl)
        return diff < TOLERANCE, "avgdl=%.4f expected=%.4f" % (
            self.corpus.avgdl, expected
        )

    def exp2_document_frequency(self):
        """df(t) <= N and equals the number of documents containing t."""
        violations = []
        for term, df_t in sorted(self.corpus.df.items()):
            containing = sum(
                1 for doc in self.corpus.documents if term in doc["term_freq"]
            )
            if df_t > self.corpus.n or df_t != containing:
                violations.append("term=%s df=%d containing=%d" % (
                    term, df_t, containing
                ))
        detail = "terms=%d" % len(self.corpus.df)
        if violations:
            detail += ", violations: " + "; ".join(violations[:3])
        return not violations, detail

    def exp3_okapi_floor(self):
        """Negative raw IDFs are replaced by epsilon * mean raw IDF."""
        engine = self.engines["okapi"]
        raw = {
            t: okapi_raw_idf(self.corpus.n, df_t)
            for t, df_t in self.corpus.df.items()
        }
        floor = engine.variant.epsilon * mean(raw.values())
        floored = 0
        passed = True
        for term, value in raw.items():
            expected = floor if value < 0 else value
            if value < 0:
                floored += 1
            if abs(engine.idf[term] - expected) > TOLERANCE:
                passed = False
        return passed, "floored=%d, floor=%.4f" % (floored, floor)

    def exp4_idf_non_negative(self):
        """BM25L and BM25+ IDFs are >= 0 for 1 <= df <= N."""
        negatives = []
        for name in ("bm25l", "bm25plus"):
            for term, value in self.engines[name].idf.items():
                if value < 0:
                    negatives.append("%s:%s=%.4f" % (name, term, value))
        detail = "negatives=%d" % len(negatives)
        if negatives:
            detail += " (" + "; ".join(negatives[:3]) + ")"
        return not negatives, detail

    def exp5_absent_terms(self):
        """tf == 0 gives 0 for Okapi and a non-zero baseline for L and +."""
        violations = []
        tests = 0
        for term in sorted(self.corpus.df):
            for i, doc in enumerate(self.corpus.documents):
                if term in doc["term_freq"]:
                    continue
                tests += 1
                if self.engines["okapi"].score_term(term, doc) != 0.0:
                    violations.append("okapi term=%s doc=%d" % (term, i))
                for name in ("bm25l", "bm25plus"):
                    engine = self.engines[name]
                    if engine.idf[term] != 0 and engine.score_term(term, doc) == 0:
                        violations.append("%s term=%s doc=%d" % (name, term, i))
        detail = "tests=%d" % tests
        if violations:
            detail += ", violations: " + "; ".join(violations[:3])
        return not violations, detail

    def exp6_repeated_terms(self):
        """Scoring [t, t] gives exactly twice the score of [t]."""
        violations = []
        for term in sorted(self.corpus.df):
            for name, engine in self.engines.items():
                once = engine.get_scores([term])
                twice = engine.get_scores([term, term])
                for i, (s1, s2) in enumerate(zip(once, twice)):
                    if abs(2 * s1 - s2) > TOLERANCE:
                        violations.append("%s term=%s doc=%d" % (name, term, i))
        detail = "terms=%d" % len(self.corpus.df)
        if violations:
            detail += ", violations: " + "; ".join(violations[:3])
        return not violations, detail

    def exp7_top_n(self):
        """Top-N has min(n, N) in-range indices with non-increasing scores."""
        violations = []
        for query in self.queries:
            for name, engine in self.engines.items():
                scores = engine.get_scores(query["terms"])
                for n in (0, 1, 3, self.corpus.n + 2):
                    top = top_n_indices(scores, n)
                    expected_len = max(0, min(n, self.corpus.n))
                    ordered = all(
                        scores[a] >= scores[b] for a, b in zip(top, top[1:])
                    )
                    in_range = all(0 <= i < self.corpus.n for i in top)
                    if len(top) != expected_len or not ordered or not in_range:
                        violations.append("%s query=%s n=%d" % (
                            name, " ".join(query["terms"]), n
                        ))
        detail = "queries=%d" % len(self.queries)
        if violations:
            detail += ", violations: " + "; ".join(violations[:3])
        return not violations, detail

    def exp8_reference_scores(self, tolerance=1e-3):
        """Scores match the expected vectors supplied with the queries."""
        compared = 0
        max_diff = 0.0
        for query in self.queries:
            for name, expected in query.get("expected", {}).items():
                actual = self.engines[name].get_scores(query["terms"])
                if len(actual) != len(expected):
                    return False, "%s: length %d != %d" % (
                        name, len(actual), len(expected)
                    )
                for a, e in zip(actual, expected):
                    max_diff = max(max_diff, abs(a - e))
                    compared += 1
        passed = max_diff <= tolerance
        return passed, "max_diff=%.2e across %d scores" % (max_diff, compared)
