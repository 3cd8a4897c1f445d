from __future__ import annotations

import json
from pathlib import Path

from .pipeline import Report


def format_report(report: Report, precision: int = 4) -> str:
    """Render the plain-text report: per-document top terms, then a summary."""
    out: list[str] = ["", "TF-IDF Scores by Document:"]
    for doc in report.documents:
        out.append("")
        out.append(f"Document {doc.index} (Lines {doc.stated_start}-{doc.stated_end})")
        for ts in doc.top_terms:
            out.append(f"{ts.term:<20} {ts.score:.{precision}f}")

    out.append("")
    out.append("Processing Summary:")
    out.append(f"Total documents processed: {report.n_documents}")
    out.append(f"Total unique terms: {report.n_unique_terms}")
    out.append(f"Lines per document: {report.lines_per_document}")
    return "\n".join(out)


def write_json(report: Report, out_path: Path) -> None:
    out_path.parent.mkdir(parents=True, exist_ok=True)
    out_path.write_text(json.dumps(report.to_dict(), indent=2, ensure_ascii=False), encoding="utf-8")
