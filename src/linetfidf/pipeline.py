from __future__ import annotations

import logging
from dataclasses import asdict, dataclass, field, replace
from typing import Iterable

from .chunkers.base import Document
from .chunkers.line_blocks import LineBlockChunker
from .config import RunConfig
from .index.retrieve import TermScore, top_k
from .index.scoring import score
from .index.stats import CorpusStatistics

logger = logging.getLogger(__name__)


@dataclass
class DocumentReport:
    index: int
    line_start: int
    line_end: int
    stated_start: int
    stated_end: int
    n_terms: int
    top_terms: list[TermScore] = field(default_factory=list)


@dataclass
class Report:
    documents: list[DocumentReport]
    n_documents: int
    n_unique_terms: int
    lines_per_document: int

    def to_dict(self) -> dict:
        return asdict(self)


def build_statistics(documents: Iterable[Document]) -> CorpusStatistics:
    """Ingest every document in order, then close the corpus for scoring."""
    stats = CorpusStatistics()
    for doc in documents:
        stats.ingest(doc.text)
        logger.debug(
            "Ingested document %d (lines %d-%d): %d distinct terms",
            doc.index,
            doc.line_start,
            doc.line_end,
            len(stats.term_frequencies[-1]),
        )
    stats.close()
    return stats


def run(lines: Iterable[str], cfg: RunConfig) -> Report:
    chunker = LineBlockChunker(lines_per_document=cfg.lines_per_document)

    documents: list[Document] = []

    def collect(docs: Iterable[Document]) -> Iterable[Document]:
        for doc in docs:
            # keep only positions; the text is released after ingestion
            documents.append(replace(doc, text=""))
            yield doc

    stats = build_statistics(collect(chunker.chunk(lines)))
    logger.info("Ingested %d documents with %d unique terms", stats.n_documents, stats.n_terms)

    if stats.n_documents == 0:
        logger.info("No documents to score")
        return Report(documents=[], n_documents=0, n_unique_terms=0, lines_per_document=cfg.lines_per_document)

    tables = score(stats)
    doc_reports: list[DocumentReport] = []
    for doc, doc_scores in zip(documents, tables):
        stated_start, stated_end = doc.stated_range(cfg.lines_per_document)
        doc_reports.append(
            DocumentReport(
                index=doc.index,
                line_start=doc.line_start,
                line_end=doc.line_end,
                stated_start=stated_start,
                stated_end=stated_end,
                n_terms=len(doc_scores),
                top_terms=top_k(doc_scores, cfg.top_k),
            )
        )

    return Report(
        documents=doc_reports,
        n_documents=stats.n_documents,
        n_unique_terms=stats.n_terms,
        lines_per_document=cfg.lines_per_document,
    )
