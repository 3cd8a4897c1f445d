from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator

from .base import Document


DEFAULT_LINES_PER_DOCUMENT = 1000


def read_lines(path: Path) -> Iterator[str]:
    """Yield the lines of a UTF-8 text file without their terminators.

    Only ``\\n`` ends a line; a ``\\r`` directly before it is dropped too, and
    any other ``\\r`` stays part of the line. Open and decode errors are left
    to the caller.
    """
    with path.open("r", encoding="utf-8", newline="\n") as f:
        for line in f:
            if line.endswith("\n"):
                line = line[:-1]
                if line.endswith("\r"):
                    line = line[:-1]
            yield line


@dataclass
class LineBlockChunker:
    """Group consecutive lines into documents of ``lines_per_document`` lines.

    A trailing partial block still becomes a document; nothing is emitted for
    an empty remainder.
    """

    lines_per_document: int = DEFAULT_LINES_PER_DOCUMENT

    def __post_init__(self) -> None:
        if self.lines_per_document < 1:
            raise ValueError(f"lines_per_document must be >= 1, got {self.lines_per_document}")

    def chunk(self, lines: Iterable[str]) -> Iterator[Document]:
        buffer: list[str] = []
        index = 0
        line_start = 1

        for lineno, line in enumerate(lines, start=1):
            buffer.append(line + "\n")
            if len(buffer) == self.lines_per_document:
                index += 1
                yield Document(index=index, text="".join(buffer), line_start=line_start, line_end=lineno)
                buffer = []
                line_start = lineno + 1

        if buffer:
            index += 1
            yield Document(
                index=index,
                text="".join(buffer),
                line_start=line_start,
                line_end=line_start + len(buffer) - 1,
            )
