# runtime/config.py — MethodSource v1
"""
Config: .methodsource/config.json  (optional; read on every call, never auto-created)

  encoding   : text encoding for source files; null = platform default
  log_level  : level for the stderr handler
  log_file   : optional path for a DEBUG-level log file
  suffixes   : extra {".suffix": "language"} mappings for the syntax registry
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Optional

_DEFAULT_CFG: dict = {
    "encoding":  None,
    "log_level": "WARNING",
    "log_file":  "",
    "suffixes":  {},
}

# Imported by runtime.logger, so log through the named logger directly.
_log = logging.getLogger("MethodSource")


def _cfg_path() -> Path:
    return Path(os.getcwd()) / ".methodsource" / "config.json"


def load_config(path: Optional[Path] = None) -> dict:
    p = path or _cfg_path()
    cfg = dict(_DEFAULT_CFG, suffixes={})
    if not p.exists():
        return cfg
    try:
        user = json.loads(p.read_text(encoding="utf-8"))
        if not isinstance(user, dict):
            raise ValueError("top level must be an object")
    except (OSError, ValueError) as e:
        _log.warning(f"Config read error ({e}); using defaults.")
        return cfg
    cfg.update({k: v for k, v in user.items() if k in _DEFAULT_CFG})
    if not isinstance(cfg.get("suffixes"), dict):
        _log.warning("Config 'suffixes' must be an object, ignoring it.")
        cfg["suffixes"] = {}
    return cfg


def save_config(cfg: dict, path: Optional[Path] = None) -> None:
    """Write config. Takes effect on the next extraction call."""
    p = path or _cfg_path()
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(cfg, indent=2), encoding="utf-8")
    _log.info(f"Config saved: {p}")
