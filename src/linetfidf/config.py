from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import yaml

from .chunkers.line_blocks import DEFAULT_LINES_PER_DOCUMENT


@dataclass(frozen=True)
class RunConfig:
    """Settings fixed for the whole run."""

    lines_per_document: int = DEFAULT_LINES_PER_DOCUMENT
    top_k: int = 10
    precision: int = 4


def _int_setting(cfg: dict, key: str, default: int) -> int:
    value = cfg.get(key, default)
    # bool is an int subclass; YAML "true" must not become 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{key} must be an integer, got {value!r}")
    return value


def config_from_cfg(cfg: dict | None) -> RunConfig:
    # allow empty cfg
    cfg = cfg or {}
    run = RunConfig(
        lines_per_document=_int_setting(cfg, "lines_per_document", DEFAULT_LINES_PER_DOCUMENT),
        top_k=_int_setting(cfg, "top_k", 10),
        precision=_int_setting(cfg, "precision", 4),
    )
    if run.lines_per_document < 1:
        raise ValueError(f"lines_per_document must be >= 1, got {run.lines_per_document}")
    if run.top_k < 0:
        raise ValueError(f"top_k must be >= 0, got {run.top_k}")
    if run.precision < 0:
        raise ValueError(f"precision must be >= 0, got {run.precision}")
    return run


def load_config(path: Path | None) -> RunConfig:
    if path is None:
        return RunConfig()
    cfg = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(cfg, dict):
        raise ValueError(f"{path}: expected a mapping at the top level")
    return config_from_cfg(cfg)
