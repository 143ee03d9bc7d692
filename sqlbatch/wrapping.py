from __future__ import annotations

from .constants import REPEAT_TEMPLATE


def wrap_batch(batch: str, repeat_count: int, template: str = REPEAT_TEMPLATE) -> str:
    """Return ``batch`` as text that runs it ``repeat_count`` times.

    A count of 1 returns the batch unchanged. Larger counts wrap the batch in
    a counter loop rendered from ``template`` (placeholders ``{count}`` and
    ``{batch}``).

    Example:
        >>> print(wrap_batch("select 1;", 2))
        DECLARE @counter INT = 0;
        WHILE @counter < 2
        BEGIN
          select 1;
          SET @counter = @counter + 1;
        END;
    """
    if repeat_count < 1:
        raise ValueError(f"repeat_count must be positive, got {repeat_count}")
    if repeat_count == 1:
        return batch
    return template.format(count=repeat_count, batch=batch).strip()
