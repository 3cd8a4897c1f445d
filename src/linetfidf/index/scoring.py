from __future__ import annotations

import math

from ..errors import CorpusOpenError
from .stats import CorpusStatistics


def idf(stats: CorpusStatistics, term: str) -> float:
    """Natural-log inverse document frequency, ``ln(N / df)``.

    Raises KeyError for a term that was never ingested.
    """
    return math.log(stats.n_documents / stats.document_frequency[term])


def score(stats: CorpusStatistics) -> list[dict[str, float]]:
    """TF-IDF table for every document, in document order.

    Only terms present in a document appear in its table. A term found in every
    document scores 0. An empty corpus yields an empty list.
    """
    if not stats.closed:
        raise CorpusOpenError("corpus must be closed before scoring")
    if stats.n_documents == 0:
        return []

    idf_cache: dict[str, float] = {}
    tables: list[dict[str, float]] = []
    for term_freq in stats.term_frequencies:
        doc_scores: dict[str, float] = {}
        for term, freq in term_freq.items():
            term_idf = idf_cache.get(term)
            if term_idf is None:
                term_idf = idf(stats, term)
                idf_cache[term] = term_idf
            doc_scores[term] = float(freq) * term_idf
        tables.append(doc_scores)
    return tables
