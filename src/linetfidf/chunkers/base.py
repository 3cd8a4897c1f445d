from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol


@dataclass
class Document:
    index: int
    text: str
    line_start: int
    line_end: int

    @property
    def n_lines(self) -> int:
        return self.line_end - self.line_start + 1

    def stated_range(self, lines_per_document: int) -> tuple[int, int]:
        """Line window for the report header.

        Always the full configured window, even for a short final document.
        """
        first = (self.index - 1) * lines_per_document + 1
        return first, self.index * lines_per_document


class Chunker(Protocol):
    def chunk(self, lines: Iterable[str]) -> Iterable[Document]: ...
