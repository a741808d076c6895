"""
IDF calculators: Okapi epsilon floor, BM25L and BM25+ non-negativity.
"""
from __future__ import annotations

import math
import unittest

from bm25_family.idf import bm25l_idf, bm25plus_idf, okapi_idf, okapi_raw_idf


class TestOkapiIdf(unittest.TestCase):

    def test_raw_idf_formula(self) -> None:
        self.assertAlmostEqual(okapi_raw_idf(3, 1), math.log(2.5) - math.log(1.5))
        self.assertLess(okapi_raw_idf(3, 2), 0.0)

    def test_positive_values_kept(self) -> None:
        idf = okapi_idf({"a": 1, "b": 1}, 3)
        self.assertAlmostEqual(idf["a"], math.log(2.5 / 1.5))
        self.assertEqual(idf["a"], idf["b"])

    def test_negative_values_replaced_by_epsilon_times_raw_mean(self) -> None:
        """The floor uses the mean of the raw values, taken before replacement."""
        df = {"rare": 1, "common": 2, "other": 1}
        raw = [okapi_raw_idf(3, v) for v in df.values()]
        expected_floor = 0.25 * (sum(raw) / len(raw))
        idf = okapi_idf(df, 3)
        self.assertAlmostEqual(idf["common"], expected_floor)
        self.assertGreater(idf["common"], 0.0)
        self.assertAlmostEqual(idf["rare"], okapi_raw_idf(3, 1))

    def test_epsilon_parameter(self) -> None:
        df = {"rare": 1, "common": 2}
        raw_mean = (okapi_raw_idf(3, 1) + okapi_raw_idf(3, 2)) / 2
        idf = okapi_idf(df, 3, epsilon=0.5)
        self.assertAlmostEqual(idf["common"], 0.5 * raw_mean)

    def test_zero_raw_idf_not_floored(self) -> None:
        """Only strictly negative values are replaced."""
        idf = okapi_idf({"half": 1, "rare": 1}, 2)
        self.assertEqual(idf["half"], 0.0)

    def test_empty_table(self) -> None:
        self.assertEqual(okapi_idf({}, 0), {})


class TestBm25lIdf(unittest.TestCase):

    def test_formula(self) -> None:
        idf = bm25l_idf({"a": 2}, 3)
        self.assertAlmostEqual(idf["a"], math.log(4) - math.log(2.5))

    def test_non_negative_for_all_document_frequencies(self) -> None:
        for n in (1, 2, 7, 100):
            idf = bm25l_idf({"t%d" % d: d for d in range(1, n + 1)}, n)
            for value in idf.values():
                self.assertGreaterEqual(value, 0.0)

    def test_empty_table(self) -> None:
        self.assertEqual(bm25l_idf({}, 0), {})


class TestBm25PlusIdf(unittest.TestCase):

    def test_formula(self) -> None:
        idf = bm25plus_idf({"a": 2}, 3)
        self.assertAlmostEqual(idf["a"], math.log(4 / 2))

    def test_positive_for_all_document_frequencies(self) -> None:
        for n in (1, 2, 7, 100):
            idf = bm25plus_idf({"t%d" % d: d for d in range(1, n + 1)}, n)
            for value in idf.values():
                self.assertGreater(value, 0.0)

    def test_empty_table(self) -> None:
        self.assertEqual(bm25plus_idf({}, 0), {})


if __name__ == "__main__":
    unittest.main()
