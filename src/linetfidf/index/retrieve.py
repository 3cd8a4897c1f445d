from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping

import numpy as np


@dataclass
class TermScore:
    term: str
    score: float


def top_k(scores: Mapping[str, float], k: int = 10) -> list[TermScore]:
    """Return the k highest-scoring terms, best first.

    Equal scores are ordered by term so output is reproducible.
    """
    if k < 0:
        raise ValueError(f"k must be >= 0, got {k}")
    if k == 0 or not scores:
        return []

    terms = sorted(scores)
    values = np.fromiter((scores[t] for t in terms), dtype=np.float64, count=len(terms))
    # stable sort keeps the alphabetical order inside each run of equal scores
    order = np.argsort(-values, kind="stable")[:k]
    return [TermScore(term=terms[int(i)], score=float(values[int(i)])) for i in order]
