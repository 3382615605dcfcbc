from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from .errors import ConfigError

DEFAULT_CFG_FILE = "wxjsx.yaml"

# --------------------------------------------------------------------------- #
# DEFAULTS
# --------------------------------------------------------------------------- #
_DEFAULT_CFG: Dict[str, Any] = {
    "src": ".",
    "out": "dist",
    "extensions": [".wxml"],
    "suffix": ".jsx",
    "exclude": [
        "node_modules/",
        ".git/",
    ],
    "fail_fast": True,
}

_yaml = YAML(typ="safe")


@dataclass
class BuildConfig:
    """Batch build settings; paths are absolute after loading."""
    src: Path
    out: Path
    extensions: List[str] = field(default_factory=lambda: [".wxml"])
    suffix: str = ".jsx"
    exclude: List[str] = field(default_factory=list)
    fail_fast: bool = True

    @classmethod
    def from_dict(cls, raw: Dict[str, Any], base: Path) -> "BuildConfig":
        cfg = _merge_defaults(raw)
        base = base.resolve()

        for key in ("src", "out", "suffix"):
            if not isinstance(cfg[key], str) or not cfg[key]:
                raise ConfigError(f"'{key}' must be a non-empty string")
        for key in ("extensions", "exclude"):
            value = cfg[key]
            if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
                raise ConfigError(f"'{key}' must be a list of strings")
        if not isinstance(cfg["fail_fast"], bool):
            raise ConfigError("'fail_fast' must be a boolean")

        return cls(
            src=(base / cfg["src"]).resolve(),
            out=(base / cfg["out"]).resolve(),
            extensions=[e if e.startswith(".") else f".{e}" for e in cfg["extensions"]],
            suffix=cfg["suffix"],
            exclude=list(cfg["exclude"]),
            fail_fast=cfg["fail_fast"],
        )


# --------------------------------------------------------------------------- #
# HELPERS
# --------------------------------------------------------------------------- #
def _merge_defaults(raw: Dict[str, Any]) -> Dict[str, Any]:
    """User values on top of the defaults; unknown keys are rejected."""
    unknown = sorted(set(raw) - set(_DEFAULT_CFG))
    if unknown:
        raise ConfigError(f"Unknown config key(s): {', '.join(unknown)}")
    cfg = dict(_DEFAULT_CFG)
    cfg.update(raw)
    return cfg


# --------------------------------------------------------------------------- #
# PUBLIC API
# --------------------------------------------------------------------------- #
def load_config(path: Path) -> BuildConfig:
    """
    Load wxjsx.yaml.

    • Missing file: defaults, relative to the file's directory.
    • Paths in the file are relative to the file's directory.
    """
    base = path.parent
    if not path.exists():
        return BuildConfig.from_dict({}, base)

    try:
        with path.open(encoding="utf-8") as f:
            raw = _yaml.load(f) or {}
    except YAMLError as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e

    if not isinstance(raw, dict):
        raise ConfigError(f"YAML must be a mapping: {path}")

    return BuildConfig.from_dict(raw, base)


__all__ = ["BuildConfig", "load_config", "DEFAULT_CFG_FILE"]
