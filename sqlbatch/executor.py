from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

from .splitter import split_batches
from .splitter_config import SplitterConfig

logger = logging.getLogger(__name__)


class BatchExecutor(Protocol):
    """Anything that can run one batch of SQL text, e.g. a DB-API cursor wrapper."""

    def execute(self, sql: str) -> None: ...


def execute_batches(
    executor: BatchExecutor, script: str | None, cfg: SplitterConfig | None = None
) -> int:
    """Submit each batch of ``script`` to ``executor`` in order.

    Repetition counts are already folded into ``Batch.sql``, so every batch
    is executed exactly once. A blank script is a no-op. Returns the number
    of batches executed.
    """
    if not script or not script.strip():
        return 0

    batches = split_batches(script, cfg)
    for batch in batches:
        logger.debug(
            "Executing batch %d (x%d, chars %d-%d)",
            batch.index,
            batch.repeat_count,
            batch.char_start,
            batch.char_end,
        )
        executor.execute(batch.sql)
    return len(batches)


def execute_file_batches(
    executor: BatchExecutor,
    path: str | Path,
    cfg: SplitterConfig | None = None,
    encoding: str = "utf-8",
) -> int:
    """Load a script file whole and run its batches with ``execute_batches``."""
    if not str(path).strip():
        raise ValueError("path must not be empty")
    p = Path(path)
    if not p.is_file():
        raise FileNotFoundError(f"Script file not found: {p}")
    logger.info(f"Executing batches from {p}")
    return execute_batches(executor, p.read_text(encoding=encoding), cfg)
