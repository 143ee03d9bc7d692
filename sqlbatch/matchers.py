"""Matchers for the lexical pieces of a batch script.

Every matcher takes a StringScanner positioned at the candidate construct and
either consumes the whole construct or leaves the cursor where it was.

The separator keyword (GO) is not part of T-SQL. sqlcmd, osql and SSMS
recognize it, and it may not share a line with a statement, though the line
may carry comments. Read liberally that admits lines like

    /* block
       comment */    go /* block comment */42/* another block
       comment */

so the separator matcher has to see through nested block comments between
the keyword and its optional count. Leading and trailing comments are left to
the splitter's main loop. Malformed lines such as ``go999`` or
``select 42; go`` are not diagnosed.
"""

from __future__ import annotations

from .constants import (
    BLOCK_COMMENT_CLOSE,
    BLOCK_COMMENT_OPEN,
    DEFAULT_MULTIPLIER,
    QUOTE_CHARS,
    SEPARATOR_NOT_FOUND,
    SINGLE_LINE_COMMENT,
)
from .errors import UnbalancedBlockCommentError, UnbalancedStringLiteralError
from .scanner import END_OF_INPUT, StringScanner, is_line_ending
from .splitter_config import SplitterConfig


def is_identifier_char(ch: str | None) -> bool:
    return ch is not END_OF_INPUT and (ch.isalnum() or ch in "_@#$")


def match_single_line_comment(
    scanner: StringScanner, opener: str = SINGLE_LINE_COMMENT
) -> bool:
    """Consume a comment running to the end of the line.

    The line ending itself is left in the input.
    """
    if not scanner.match_literal(opener):
        return False
    scanner.match_while(lambda ch: not is_line_ending(ch))
    return True


def match_nested_block_comment(
    scanner: StringScanner,
    opener: str = BLOCK_COMMENT_OPEN,
    closer: str = BLOCK_COMMENT_CLOSE,
) -> bool:
    """Consume a block comment, honoring nested openers."""
    line, column = scanner.position
    if not scanner.match_literal(opener):
        return False

    nesting_level = 1
    while nesting_level > 0 and scanner.peek() is not END_OF_INPUT:
        if scanner.match_literal(closer):
            nesting_level -= 1
        elif scanner.match_literal(opener):
            nesting_level += 1
        else:
            scanner.read()

    if nesting_level != 0:
        raise UnbalancedBlockCommentError(
            "Unbalanced nested block comment", line, column
        )
    return True


def match_string_literal(
    scanner: StringScanner, quote_chars: tuple[str, ...] = QUOTE_CHARS
) -> str:
    """Consume a quoted literal and return it verbatim, delimiters included.

    Inside a literal delimited by Q, ``QQ`` is an escaped Q. Returns "" when
    the cursor is not on a quote.

    Literals are matched so that comment delimiters inside them (``'--'``,
    ``'/*'``) are not mistaken for comments.
    """
    line, column = scanner.position
    for quote in quote_chars:
        if scanner.match_literal(quote):
            break
    else:
        return ""

    parts = [quote]
    nesting_level = 1
    while nesting_level > 0 and scanner.peek() is not END_OF_INPUT:
        if scanner.match_literal(quote):
            if scanner.match_literal(quote):
                parts.append(quote)
            else:
                nesting_level -= 1
            parts.append(quote)
        else:
            parts.append(scanner.read())

    if nesting_level != 0:
        raise UnbalancedStringLiteralError("Unbalanced string literal", line, column)
    return "".join(parts)


def match_number(scanner: StringScanner) -> str:
    return scanner.match_while(lambda ch: ch.isdecimal())


def skip_block_comments_and_linear_whitespace(
    scanner: StringScanner,
    opener: str = BLOCK_COMMENT_OPEN,
    closer: str = BLOCK_COMMENT_CLOSE,
) -> None:
    scanner.skip_linear_whitespace()
    while match_nested_block_comment(scanner, opener, closer):
        scanner.skip_linear_whitespace()


def _at_line_end(scanner: StringScanner, cfg: SplitterConfig) -> bool:
    scanner.save()
    skip_block_comments_and_linear_whitespace(
        scanner, cfg.block_comment_open, cfg.block_comment_close
    )
    at_end = scanner.is_eol or scanner.match_literal(cfg.single_line_comment)
    scanner.rollback()
    return at_end


def match_separator(scanner: StringScanner, cfg: SplitterConfig | None = None) -> int:
    """Match a separator statement and return its repeat count.

    Returns SEPARATOR_NOT_FOUND (0) and leaves the cursor unchanged when the
    input does not continue with a separator statement. A bare separator
    counts as DEFAULT_MULTIPLIER (1).
    """
    cfg = cfg or SplitterConfig()

    scanner.save()
    scanner.skip_linear_whitespace()

    # Look-alikes (GOTO) share the separator's prefix and are tried first.
    preceded_by_identifier = is_identifier_char(scanner.reverse_peek())
    look_alike = any(scanner.match_literal(keyword) for keyword in cfg.look_alikes)
    if look_alike or not scanner.match_literal(cfg.separator):
        scanner.rollback()
        return SEPARATOR_NOT_FOUND

    if cfg.require_word_boundary:
        following = scanner.peek()
        if preceded_by_identifier or (
            following is not END_OF_INPUT
            and is_identifier_char(following)
            and not following.isdecimal()
        ):
            scanner.rollback()
            return SEPARATOR_NOT_FOUND

    keyword_end = scanner.index
    skip_block_comments_and_linear_whitespace(
        scanner, cfg.block_comment_open, cfg.block_comment_close
    )

    if match_single_line_comment(scanner, cfg.single_line_comment):
        scanner.accept()
        return DEFAULT_MULTIPLIER

    count_start = scanner.index
    count = match_number(scanner)
    if cfg.require_word_boundary and count:
        glued = count_start == keyword_end
        # "go2020_data" and "select go1 from t" are identifiers, not separators.
        if is_identifier_char(scanner.peek()) or (
            glued and not _at_line_end(scanner, cfg)
        ):
            scanner.rollback()
            return SEPARATOR_NOT_FOUND
    if not count:
        scanner.accept()
        return DEFAULT_MULTIPLIER

    multiplier = int(count)
    if multiplier == 0:
        # "go 0" is not a separator; its text stays in the batch.
        scanner.rollback()
        return SEPARATOR_NOT_FOUND
    scanner.accept()
    return multiplier
