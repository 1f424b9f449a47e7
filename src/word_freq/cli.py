"""CLI entrypoint.

Usage:
- `word-freq notes.txt`                       -> `token: count` lines on stdout
- `cat notes.txt | word-freq -`               -> same, from stdin
- `word-freq notes.txt --format parquet --output freq.parquet`
- `word-freq notes.txt --config configs/word_freq.yaml --log-level INFO`

Exit status: 0 on success, 1 when the input (or output) cannot be
read/written, 2 on usage or configuration errors.
"""

from __future__ import annotations
import argparse
import logging
import sys
from typing import List, Optional
from . import __version__
from .analytics.summary import summarize
from .config import OUTPUT_FORMATS, build_run_config, load_yaml
from .errors import ConfigError, InputReadError
from .logging_ import setup_logging
from .pipeline.context import SORT_ORDERS
from .pipeline.count import count_source
from .run_id import resolve_run_id
from .sources.registry import make_source, source_spec_for_path
from .writers.base import describe
from .writers.registry import get_writer

log = logging.getLogger(__name__)

PROG = "word-freq"

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog=PROG, description="Count whitespace-delimited tokens in a text file.")
    p.add_argument("path", help="Input text file ('-' reads standard input)")
    p.add_argument("--config", "-c", default=None, help="YAML config file")
    p.add_argument("--format", "-f", dest="output_format", choices=OUTPUT_FORMATS, default=None, help="Output format (default: text)")
    p.add_argument("--output", "-o", dest="output_path", default=None, metavar="FILE", help="Write output to FILE instead of stdout")
    p.add_argument("--sort", choices=SORT_ORDERS, default=None, help="Output order (default: none, i.e. unspecified)")
    p.add_argument("--encoding", default=None, help="Input text encoding (default: utf-8)")
    p.add_argument("--log-level", default=None, metavar="LEVEL", help="Logging level (default: WARNING)")
    p.add_argument("--log-dir", default=None, metavar="DIR", help="Also write logs to DIR/<run_id>.log")
    p.add_argument("--run-id", default=None, help="Run identifier used to name the log file")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p

def main(argv: Optional[List[str]] = None) -> int:
    p = build_parser()
    args = p.parse_args(argv)

    try:
        cfg = load_yaml(args.config) if args.config else {}
        rc = build_run_config(
            cfg,
            encoding=args.encoding,
            output_format=args.output_format,
            output_path=args.output_path,
            sort=args.sort,
            log_level=args.log_level,
            log_dir=args.log_dir,
            run_id=args.run_id,
        )
    except ConfigError as e:
        p.error(str(e))

    run_id = resolve_run_id(rc.run_id, args.path)
    try:
        log_path = setup_logging(rc.log_level, log_dir=rc.log_dir, run_id=run_id)
    except OSError as e:
        p.error(f"cannot create log dir {rc.log_dir}: {e.strerror or e}")
    if log_path:
        log.info(f"Logging run {run_id} to {log_path}")

    source = make_source(source_spec_for_path(args.path, encoding=rc.encoding))
    try:
        table = count_source(source)
    except InputReadError as e:
        log.debug("Input read failed", exc_info=True)
        print(f"{PROG}: error: {e}", file=sys.stderr)
        return 1

    writer = get_writer(rc.output_format)
    try:
        dest = writer.write(table, out=rc.output_path, order=rc.sort)
    except OSError as e:
        print(f"{PROG}: error: cannot write {describe(rc.output_path)}: {e.strerror or e}", file=sys.stderr)
        return 1

    log.info(f"Wrote {table.distinct} tokens as {rc.output_format} to {dest}")
    log.info(f"Run summary: {summarize(table)}")
    return 0
