"""sqlbatch - split T-SQL scripts into batches at GO separators."""

from .errors import (
    MalformedScriptError,
    ScannerStateError,
    SqlBatchError,
    UnbalancedBlockCommentError,
    UnbalancedStringLiteralError,
)
from .executor import BatchExecutor, execute_batches, execute_file_batches
from .scanner import END_OF_INPUT, StringScanner
from .splitter import BatchSplitter, get_batches, split_batches, split_with_trace
from .splitter_config import SplitterConfig
from .types import Batch, Region, Trace
from .wrapping import wrap_batch

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "Batch",
    "BatchExecutor",
    "BatchSplitter",
    "END_OF_INPUT",
    "MalformedScriptError",
    "Region",
    "ScannerStateError",
    "SplitterConfig",
    "SqlBatchError",
    "StringScanner",
    "Trace",
    "UnbalancedBlockCommentError",
    "UnbalancedStringLiteralError",
    "execute_batches",
    "execute_file_batches",
    "get_batches",
    "split_batches",
    "split_with_trace",
    "wrap_batch",
]
