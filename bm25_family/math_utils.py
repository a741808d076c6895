"""Standalone math helpers shared by the IDF calculators and scorers."""


def mean(values):
    """Arithmetic mean. Returns 0.0 for an empty sequence."""
    values = list(values)
    if not values:
        return 0.0
    return sum(values) / len(values)


def length_ratio(doc_length, avgdl):
    """Document length relative to the corpus average.

    A corpus made only of empty documents has avgdl == 0; every document
    then has length 0 and the ratio is taken as 0.0.
    """
    if avgdl <= 0:
        return 0.0
    return doc_length / avgdl


def length_norm(doc_length, avgdl, b):
    """Length normalization factor: 1 - b + b * dl/avgdl."""
    return 1.0 - b + b * length_ratio(doc_length, avgdl)
