"""Run configuration.

Defaults < YAML config file < CLI flags. The YAML layout mirrors RunConfig:

    input:   {encoding: utf-8}
    output:  {format: text, path: null, sort: none}
    logging: {level: WARNING, log_dir: null}
    run:     {run_id: null}
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, Dict, Optional
import logging
import yaml
from .errors import ConfigError
from .pipeline.context import SORT_ORDERS

OUTPUT_FORMATS = ("text", "jsonl", "parquet")

@dataclass
class RunConfig:
    encoding: str = "utf-8"
    output_format: str = "text"
    output_path: Optional[str] = None
    sort: str = "none"
    log_level: str = "WARNING"
    log_dir: Optional[str] = None
    run_id: Optional[str] = None

def load_yaml(path: str) -> Dict[str, Any]:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e.strerror or e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in config {path}: {e}") from e
    if not isinstance(data, dict):
        raise ConfigError(f"config {path} must be a mapping, got {type(data).__name__}")
    return data

def _section(cfg: Dict[str, Any], key: str) -> Dict[str, Any]:
    sec = cfg.get(key) or {}
    if not isinstance(sec, dict):
        raise ConfigError(f"config section '{key}' must be a mapping")
    return sec

def build_run_config(cfg: Optional[Dict[str, Any]] = None, **overrides: Any) -> RunConfig:
    """Merge a loaded config dict and CLI overrides (None means "not given")."""
    cfg = cfg or {}
    inp = _section(cfg, "input")
    out = _section(cfg, "output")
    lg = _section(cfg, "logging")
    run = _section(cfg, "run")

    rc = RunConfig(
        encoding=str(inp.get("encoding", "utf-8")),
        output_format=str(out.get("format", "text")).lower(),
        output_path=out.get("path"),
        sort=str(out.get("sort", "none")).lower(),
        log_level=str(lg.get("level", "WARNING")).upper(),
        log_dir=lg.get("log_dir"),
        run_id=run.get("run_id"),
    )
    for k, v in overrides.items():
        if v is None:
            continue
        if not hasattr(rc, k):
            raise ConfigError(f"unknown config override: {k}")
        setattr(rc, k, v)

    for key in ("output_path", "log_dir"):
        val = getattr(rc, key)
        if val is not None and not isinstance(val, str):
            raise ConfigError(f"{key} must be a string, got {type(val).__name__}")
    if rc.output_format not in OUTPUT_FORMATS:
        raise ConfigError(f"unknown output format: {rc.output_format}. Available: {list(OUTPUT_FORMATS)}")
    if rc.sort not in SORT_ORDERS:
        raise ConfigError(f"unknown sort order: {rc.sort}. Available: {list(SORT_ORDERS)}")
    if not isinstance(logging.getLevelName(rc.log_level.upper()), int):
        raise ConfigError(f"unknown log level: {rc.log_level}")
    if rc.output_format == "parquet" and not rc.output_path:
        raise ConfigError("parquet output needs an output path")
    return rc
