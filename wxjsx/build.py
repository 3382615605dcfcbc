"""
Batch compilation of a source tree according to a BuildConfig.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterable, List, Optional

import pathspec

from .config import BuildConfig
from .errors import CompileError, ConfigError
from .transform import transform

logger = logging.getLogger(__name__)


@dataclass
class BuildFailure:
    path: str
    error: str


@dataclass
class BuildReport:
    compiled: List[str] = field(default_factory=list)   # rel_posix of written outputs
    failed: List[BuildFailure] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.failed

    def to_dict(self) -> dict:
        return {
            "ok": self.ok,
            "compiled": list(self.compiled),
            "failed": [{"path": f.path, "error": f.error} for f in self.failed],
        }


def build_exclude_spec(patterns: List[str]) -> Optional[pathspec.PathSpec]:
    if not patterns:
        return None
    return pathspec.PathSpec.from_lines("gitwildmatch", patterns)


def iter_sources(cfg: BuildConfig) -> Iterable[Path]:
    """
    Source files under cfg.src with a configured extension, in sorted order.
    Excluded directories are pruned before descending; the output directory
    is never scanned.
    """
    root = cfg.src
    spec = build_exclude_spec(cfg.exclude)
    extensions = {e.lower() for e in cfg.extensions}

    for dirpath, dirnames, filenames in os.walk(root):
        keep: List[str] = []
        for d in sorted(dirnames):
            full = Path(dirpath, d)
            if full.resolve() == cfg.out:
                continue
            # symlinked directories are listed but never descended into
            rel_dir = full.relative_to(root).as_posix()
            if spec and spec.match_file(rel_dir + "/"):
                continue
            keep.append(d)
        dirnames[:] = keep

        for fn in sorted(filenames):
            p = Path(dirpath, fn)
            if p.suffix.lower() not in extensions:
                continue
            if spec and spec.match_file(p.relative_to(root).as_posix()):
                continue
            yield p


def output_path(cfg: BuildConfig, source: Path) -> Path:
    rel = source.relative_to(cfg.src)
    return (cfg.out / rel).with_suffix(cfg.suffix)


def build_project(cfg: BuildConfig) -> BuildReport:
    """
    Compiles every source file and writes the results under cfg.out.

    Raises:
        CompileError: On the first failing file when cfg.fail_fast is set
    """
    if not cfg.src.is_dir():
        raise ConfigError(f"Source directory not found: {cfg.src}")

    report = BuildReport()
    for source in iter_sources(cfg):
        rel = source.relative_to(cfg.src).as_posix()
        try:
            code = transform(source.read_text(encoding="utf-8"))
        except CompileError as e:
            if cfg.fail_fast:
                raise CompileError(f"{rel}: {e}") from e
            logger.warning("Failed to compile %s: %s", rel, e)
            report.failed.append(BuildFailure(path=rel, error=str(e)))
            continue

        target = output_path(cfg, source)
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(code + "\n", encoding="utf-8")
        report.compiled.append(target.relative_to(cfg.out).as_posix())
        logger.info("Compiled %s", rel)

    return report


__all__ = ["BuildReport", "BuildFailure", "iter_sources", "output_path", "build_project"]
