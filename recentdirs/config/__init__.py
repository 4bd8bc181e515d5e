"""
Load configuration from YAML.
Default: recentdirs/config/default.yaml. Override: --config <file> or RECENTDIRS_CONFIG.
"""
import os
from pathlib import Path
from typing import Any

import yaml

from recentdirs.core.config import (
    DEFAULT_SEARCH_VIEW_NAMES,
    ENV_CONFIG,
    ENV_HISTORY_FILE,
    default_history_file,
)
from recentdirs.core.exceptions import ConfigError

_CACHE: dict[str, Any] | None = None
_CONFIG_DIR = Path(__file__).resolve().parent


def _deep_merge(base: dict, override: dict) -> dict:
    """Merge override into base (recursive). base is not mutated."""
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _load_yaml(path: Path) -> dict:
    if not path.exists():
        return {}
    with open(path, "r", encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            raise ConfigError(f"Cannot parse config file {path}: {e}") from e
    return data if isinstance(data, dict) else {}


def _defaults() -> dict:
    """Built-in defaults (no file)."""
    return {
        "history_file_path": None,
        "ignored_prefixes": [],
        "max_entries": None,
        "search_view_names": list(DEFAULT_SEARCH_VIEW_NAMES),
    }


def _validate(cfg: dict) -> dict:
    prefixes = cfg.get("ignored_prefixes") or []
    if isinstance(prefixes, str) or not isinstance(prefixes, (list, tuple, set)):
        raise ConfigError("ignored_prefixes must be a list of strings")
    if not all(isinstance(p, str) for p in prefixes):
        raise ConfigError("ignored_prefixes must be a list of strings")
    cfg["ignored_prefixes"] = [p for p in prefixes if p]

    max_entries = cfg.get("max_entries")
    if max_entries is not None:
        if isinstance(max_entries, bool) or not isinstance(max_entries, int) or max_entries <= 0:
            raise ConfigError("max_entries must be a positive integer or null")

    names = cfg.get("search_view_names")
    if names is None:
        names = []
    if isinstance(names, str) or not isinstance(names, (list, tuple)):
        raise ConfigError("search_view_names must be a list of strings")
    cfg["search_view_names"] = [str(n) for n in names]

    history = cfg.get("history_file_path")
    cfg["history_file_path"] = Path(os.path.expanduser(str(history))) if history else default_history_file()
    return cfg


def load_config(override_path: str | Path | None = None, overrides: dict | None = None) -> dict:
    """
    Load config: defaults + default.yaml + env RECENTDIRS_CONFIG + env RECENTDIRS_HISTORY_FILE + optional override file
    + explicit overrides (CLI flags; None values are ignored).
    Returns merged dict. Cached after first call unless override_path or overrides is given.
    """
    global _CACHE
    if override_path is not None or overrides:
        _CACHE = None

    if _CACHE is not None:
        return _CACHE

    base = _defaults()
    default_file = _CONFIG_DIR / "default.yaml"
    if default_file.exists():
        base = _deep_merge(base, _load_yaml(default_file))

    env_path = os.environ.get(ENV_CONFIG)
    if env_path and Path(env_path).exists():
        base = _deep_merge(base, _load_yaml(Path(env_path)))

    env_history = os.environ.get(ENV_HISTORY_FILE, "").strip()
    if env_history:
        base["history_file_path"] = env_history

    if override_path is not None:
        p = Path(override_path)
        if not p.exists():
            raise ConfigError(f"Config file not found: {p}")
        base = _deep_merge(base, _load_yaml(p))

    if overrides:
        base = _deep_merge(base, {k: v for k, v in overrides.items() if v is not None})

    _CACHE = _validate(base)
    return _CACHE


def reset_config() -> None:
    """Clear cache (e.g. for tests)."""
    global _CACHE
    _CACHE = None
