from __future__ import annotations

from dataclasses import dataclass, field

from ..clean import tokenize
from ..errors import CorpusClosedError, CorpusInvariantError


@dataclass
class CorpusStatistics:
    """Term counts for every ingested document plus corpus-wide document frequency.

    Grows append-only through :meth:`ingest`. Once :meth:`close` is called the
    tables are final and can be scored.
    """

    document_frequency: dict[str, int] = field(default_factory=dict)
    term_frequencies: list[dict[str, int]] = field(default_factory=list)
    n_documents: int = 0
    closed: bool = False

    @property
    def n_terms(self) -> int:
        return len(self.document_frequency)

    def ingest(self, text: str) -> None:
        if self.closed:
            raise CorpusClosedError("corpus is closed; no more documents can be ingested")

        term_freq: dict[str, int] = {}
        for token in tokenize(text):
            term_freq[token] = term_freq.get(token, 0) + 1

        # each distinct term counts once per document, however often it occurs
        for term in term_freq:
            self.document_frequency[term] = self.document_frequency.get(term, 0) + 1

        self.term_frequencies.append(term_freq)
        self.n_documents += 1

    def close(self) -> None:
        """Freeze the tables for scoring, failing fast if they disagree."""
        if self.closed:
            return
        self.check_invariants()
        self.closed = True

    def check_invariants(self) -> None:
        if len(self.term_frequencies) != self.n_documents:
            raise CorpusInvariantError(
                f"{len(self.term_frequencies)} term tables for {self.n_documents} documents"
            )

        expected: dict[str, int] = {}
        for term_freq in self.term_frequencies:
            for term, count in term_freq.items():
                if count < 1:
                    raise CorpusInvariantError(f"non-positive count {count} for term {term!r}")
                expected[term] = expected.get(term, 0) + 1

        if expected != self.document_frequency:
            raise CorpusInvariantError("document_frequency does not match per-document tables")


def ingest(stats: CorpusStatistics, text: str) -> None:
    """Add one document's text to ``stats``."""
    stats.ingest(text)
