from __future__ import annotations

import logging
from dataclasses import replace
from typing import Any

from .matchers import (
    match_nested_block_comment,
    match_separator,
    match_single_line_comment,
    match_string_literal,
)
from .scanner import END_OF_INPUT, StringScanner, is_linear_whitespace
from .splitter_config import SplitterConfig
from .types import Batch, Trace

logger = logging.getLogger(__name__)


class BatchSplitter:
    """Split a script into batches at free-standing separator statements."""

    def __init__(self, config: SplitterConfig | None = None) -> None:
        self.config = config or SplitterConfig()

    def split(
        self, script: str | None, trace: Trace | None = None, **overrides: Any
    ) -> list[Batch]:
        cfg = replace(self.config, **overrides) if overrides else self.config
        if not script or not script.strip():
            return []

        scanner = StringScanner(script, case_sensitive=cfg.case_sensitive)
        pending: list[tuple[str, int, int, int]] = []
        buffer: list[str] = []
        batch_start = 0
        in_space_run = False

        logger.debug("Splitting script of %d characters", len(script))
        while scanner.peek() is not END_OF_INPUT:
            start = scanner.index

            if match_single_line_comment(
                scanner, cfg.single_line_comment
            ) or match_nested_block_comment(
                scanner, cfg.block_comment_open, cfg.block_comment_close
            ):
                if trace is not None:
                    trace.add("comment", start, scanner.index)
                in_space_run = False
                continue

            literal = match_string_literal(scanner, cfg.quote_chars)
            if literal:
                buffer.append(literal)
                if trace is not None:
                    trace.add("literal", start, scanner.index)
                in_space_run = False
                continue

            # The attempt at the start of a run of spaces covers the whole run.
            multiplier = 0 if in_space_run else match_separator(scanner, cfg)
            if multiplier > 0:
                body = "".join(buffer)
                if multiplier > 1 and not body.strip():
                    line, column = scanner.position
                    message = (
                        f"Separator with count {multiplier} closes an empty batch "
                        f"(ending at line {line}, column {column}); count ignored"
                    )
                    logger.warning(message)
                    if trace is not None:
                        trace.warnings.append(message)
                pending.append((body, multiplier, batch_start, start))
                buffer.clear()
                batch_start = scanner.index
                if trace is not None:
                    trace.add("separator", start, scanner.index, str(multiplier))
                in_space_run = False
                continue

            ch = scanner.read()
            buffer.append(ch)
            in_space_run = is_linear_whitespace(ch)
            if trace is not None:
                trace.add("text", start, scanner.index)

        if buffer:
            pending.append(("".join(buffer), 1, batch_start, len(script)))

        batches = [
            Batch(
                text=body,
                repeat_count=multiplier,
                index=idx,
                char_start=char_start,
                char_end=char_end,
                repeat_template=cfg.repeat_template,
            )
            for idx, (body, multiplier, char_start, char_end) in enumerate(
                item for item in pending if item[0].strip()
            )
        ]
        logger.debug(
            "Found %d batches (%d dropped as empty)",
            len(batches),
            len(pending) - len(batches),
        )
        return batches

    def __call__(self, script: str | None, **overrides: Any) -> list[Batch]:
        return self.split(script, **overrides)


def split_batches(
    script: str | None,
    cfg: SplitterConfig | None = None,
    trace: Trace | None = None,
) -> list[Batch]:
    """Split ``script`` into batches.

    Example:
        >>> [b.text for b in split_batches("select 1;\\ngo\\nselect 2;")]
        ['select 1;\\n', '\\nselect 2;']
    """
    return BatchSplitter(cfg).split(script, trace)


def split_with_trace(
    script: str | None, cfg: SplitterConfig | None = None
) -> tuple[list[Batch], Trace]:
    trace = Trace()
    return BatchSplitter(cfg).split(script, trace), trace


def get_batches(script: str | None, cfg: SplitterConfig | None = None) -> list[str]:
    """Return the executable text of each batch, repetition already applied."""
    return [batch.sql for batch in split_batches(script, cfg)]
