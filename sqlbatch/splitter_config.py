from __future__ import annotations

from dataclasses import dataclass

from .constants import (
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    DEFAULT_LOOK_ALIKES,
    DEFAULT_SEPARATOR,
    QUOTE_CHARS,
    REPEAT_TEMPLATE,
    SINGLE_LINE_COMMENT,
)


@dataclass(frozen=True)
class SplitterConfig:
    """User-facing configuration for batch splitting.

    Keep this frozen+hashable so it can be shared between passes.
    """

    separator: str = DEFAULT_SEPARATOR
    look_alikes: tuple[str, ...] = DEFAULT_LOOK_ALIKES

    # Lexical rules of the dialect
    single_line_comment: str = SINGLE_LINE_COMMENT
    block_comment_open: str = BLOCK_COMMENT_OPEN
    block_comment_close: str = BLOCK_COMMENT_CLOSE
    quote_chars: tuple[str, ...] = QUOTE_CHARS
    case_sensitive: bool = False

    # Off reproduces plain prefix matching, e.g. "category" splits at "go".
    require_word_boundary: bool = True

    # Finalization
    repeat_template: str = REPEAT_TEMPLATE

    def __post_init__(self) -> None:
        if not self.separator:
            raise ValueError("separator must be a non-empty string")
        for keyword in self.look_alikes:
            if len(keyword) <= len(self.separator) or not self._starts_with(
                keyword, self.separator
            ):
                raise ValueError(
                    f"look-alike keyword {keyword!r} must be longer than "
                    f"and start with separator {self.separator!r}"
                )
        if not self.single_line_comment:
            raise ValueError("single_line_comment must be a non-empty string")
        if not self.block_comment_open or not self.block_comment_close:
            raise ValueError("block comment delimiters must be non-empty strings")
        if any(len(quote) != 1 for quote in self.quote_chars):
            raise ValueError(
                f"quote_chars must be single characters, got {self.quote_chars!r}"
            )
        if "{batch}" not in self.repeat_template or "{count}" not in self.repeat_template:
            raise ValueError("repeat_template must contain {batch} and {count}")
        try:
            self.repeat_template.format(count=2, batch="")
        except (KeyError, IndexError, ValueError) as exc:
            raise ValueError(
                f"repeat_template cannot be rendered: {exc!r}"
            ) from exc

    def _starts_with(self, text: str, prefix: str) -> bool:
        if self.case_sensitive:
            return text.startswith(prefix)
        return text.lower().startswith(prefix.lower())
