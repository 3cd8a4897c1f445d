from __future__ import annotations


class TfidfError(Exception):
    """Base class for contract violations inside the pipeline."""


class CorpusClosedError(TfidfError):
    """A document was ingested after the corpus was closed for scoring."""


class CorpusOpenError(TfidfError):
    """Scores were requested while the corpus could still change."""


class CorpusInvariantError(TfidfError):
    """Frequency tables disagree with each other."""
