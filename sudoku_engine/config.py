from __future__ import annotations

import os
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from .errors import ConfigurationError


@dataclass
class SolverConfig:
    dimension: int = 9
    workers: Optional[int] = None  # None -> os.cpu_count()
    split_threshold: int = 16  # frontier size before handing subtrees to workers
    show_candidates: bool = False

    def __post_init__(self) -> None:
        if self.workers is not None and self.workers < 1:
            raise ConfigurationError(f"workers must be >= 1 (got {self.workers})")
        if self.split_threshold < 1:
            raise ConfigurationError(f"split_threshold must be >= 1 (got {self.split_threshold})")

    def worker_count(self) -> int:
        return self.workers or os.cpu_count() or 1


def load_yaml(path: str | Path) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a mapping at top level")
    return data


def merge_overrides(cfg: Dict[str, Any], **overrides) -> Dict[str, Any]:
    for k, v in overrides.items():
        if v is None:
            continue
        cfg[k] = v
    return cfg


def build_config(data: Dict[str, Any]) -> SolverConfig:
    known = {f.name for f in fields(SolverConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigurationError(f"unknown config keys: {', '.join(unknown)}")
    return SolverConfig(**data)


def load_config(path: str | Path | None = None, **overrides) -> SolverConfig:
    """Read an optional YAML file, then apply non-None overrides."""
    data = load_yaml(path) if path else {}
    return build_config(merge_overrides(data, **overrides))
