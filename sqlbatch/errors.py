from __future__ import annotations


class SqlBatchError(Exception):
    """Base class for every error raised by sqlbatch."""


class MalformedScriptError(SqlBatchError, ValueError):
    """The script cannot be split because a construct is never closed.

    ``line`` and ``column`` are one-based and point at the opening delimiter.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{message} (line {line}, column {column})")
        self.line = line
        self.column = column


class UnbalancedStringLiteralError(MalformedScriptError):
    pass


class UnbalancedBlockCommentError(MalformedScriptError):
    pass


class ScannerStateError(SqlBatchError, RuntimeError):
    """Raised on rollback/accept when no checkpoint has been saved."""
