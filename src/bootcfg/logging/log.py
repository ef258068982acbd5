# Copyright 2026 Kezie Iwueke
# SPDX-License-Identifier: Apache-2.0

#src/bootcfg/logging/log.py

from __future__ import annotations

import logging
from pathlib import Path
from datetime import datetime, timezone
import uuid


class _RunIdFilter(logging.Filter):
    """Stamps every record with the assembly run id."""

    def __init__(self, run_id: str):
        super().__init__()
        self.run_id = run_id[:8]

    def filter(self, record: logging.LogRecord) -> bool:
        record.run_id = self.run_id
        return True


def init_logging(
    *,
    log_dir: Path | None = None,
    name: str = "bootcfg",
    verbose: bool = False,
) -> tuple[logging.Logger, str, Path | None]:
    """
    Configure the *name* logger for one assembly run.

    Console output is always on (INFO, DEBUG when verbose). A full DEBUG
    trace goes to ``<log_dir>/<name>-<ts>-<run_id>.log`` only when a
    log_dir is configured. Handlers from a previous run are closed and
    replaced, so calling this once per request does not stack output.
    """
    run_id = str(uuid.uuid4())
    run_filter = _RunIdFilter(run_id)

    logger = logging.getLogger(name)
    logger.setLevel(logging.DEBUG)
    for h in list(logger.handlers):
        h.close()
    logger.handlers.clear()
    logger.propagate = False

    formatter = logging.Formatter(
        "%(asctime)s | %(levelname)-7s | %(run_id)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    ch = logging.StreamHandler()
    ch.setLevel(logging.DEBUG if verbose else logging.INFO)
    ch.setFormatter(formatter)
    ch.addFilter(run_filter)
    logger.addHandler(ch)

    log_path = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        ts = datetime.now(timezone.utc).strftime("%Y%m%d-%H%M%S")
        log_path = log_dir / f"{name}-{ts}-{run_id}.log"

        fh = logging.FileHandler(log_path)
        fh.setLevel(logging.DEBUG)
        fh.setFormatter(formatter)
        fh.addFilter(run_filter)
        logger.addHandler(fh)

    logger.debug(f"run_id={run_id} log_file={log_path}")
    return logger, run_id, log_path
