"""Tests for splitting whole scripts into batches."""

import logging

import pytest

from sqlbatch import (
    BatchSplitter,
    SplitterConfig,
    UnbalancedBlockCommentError,
    UnbalancedStringLiteralError,
    get_batches,
    split_batches,
    split_with_trace,
)


def texts(script, cfg=None):
    return [batch.text for batch in split_batches(script, cfg)]


@pytest.mark.parametrize("script", ["", "   ", "\r\n\t \n", None])
def test_blank_script_has_no_batches(script):
    assert split_batches(script) == []
    assert get_batches(script) == []


def test_script_without_separator_is_one_batch():
    script = "select 1;\nselect 2;\n"
    batches = split_batches(script)
    assert len(batches) == 1
    assert batches[0].text == script
    assert batches[0].repeat_count == 1
    assert batches[0].sql == script


def test_multiplier_belongs_to_preceding_batch():
    batches = split_batches("select 1;\ngo\nselect 2;\ngo 2\nselect 3;")

    assert [b.text for b in batches] == ["select 1;\n", "\nselect 2;\n", "\nselect 3;"]
    assert [b.repeat_count for b in batches] == [1, 2, 1]
    assert [b.index for b in batches] == [0, 1, 2]

    assert batches[0].sql == "select 1;\n"
    assert batches[1].sql.startswith("DECLARE @counter INT = 0;")
    assert "WHILE @counter < 2" in batches[1].sql
    assert "select 2;" in batches[1].sql
    assert batches[1].sql.endswith("END;")
    assert batches[2].sql == "\nselect 3;"


def test_batch_offsets_point_into_script():
    script = "select 1;\ngo\nselect 2;"
    first, second = split_batches(script)
    assert (first.char_start, first.char_end) == (0, 10)
    assert (second.char_start, second.char_end) == (12, 22)
    assert script[second.char_start : second.char_end] == second.text


def test_separator_is_case_insensitive():
    assert texts("select 1;\nGO\nselect 2;\nGo") == ["select 1;\n", "\nselect 2;\n"]


def test_separator_after_statement_on_same_line():
    assert texts("select 1; go\nselect 2;") == ["select 1;", "\nselect 2;"]


class TestLiteralsAndComments:
    """Separators inside literals and comments are ignored."""

    def test_literal_is_preserved_verbatim(self):
        batches = texts("select 'it''s a go';\ngo\nselect 2;")
        assert batches == ["select 'it''s a go';\n", "\nselect 2;"]

    def test_double_quoted_literal_is_preserved(self):
        assert texts('select "go\ngo";') == ['select "go\ngo";']

    def test_block_comment_does_not_end_batch(self):
        assert texts("select 1;\n/* go */\nselect 2;") == ["select 1;\n\nselect 2;"]

    def test_separator_after_closed_comment(self):
        batches = texts("select 1;\n/* go */ go\nselect 2;")
        assert batches == ["select 1;\n", "\nselect 2;"]

    def test_single_line_comment_is_dropped(self):
        assert texts("select 1; -- go\nselect 2;") == ["select 1; \nselect 2;"]

    def test_nested_comment_hides_separator(self):
        batches = texts("select 1; /* /* go */ go */\ngo\nselect 2;")
        assert batches == ["select 1; \n", "\nselect 2;"]

    def test_comment_markers_inside_literal(self):
        assert texts("select '/*', '--';\ngo") == ["select '/*', '--';\n"]

    def test_comment_only_script_has_no_batches(self):
        assert split_batches("-- nothing\n/* here */\n") == []


class TestMalformedScripts:
    def test_unbalanced_block_comment(self):
        with pytest.raises(UnbalancedBlockCommentError) as excinfo:
            split_batches("select 1;\n/* /* */\ngo")
        assert excinfo.value.line == 2
        assert excinfo.value.column == 1

    def test_unbalanced_string_literal(self):
        with pytest.raises(UnbalancedStringLiteralError) as excinfo:
            split_batches("select 1;\nselect 'abc")
        assert (excinfo.value.line, excinfo.value.column) == (2, 8)

    def test_errors_are_value_errors(self):
        with pytest.raises(ValueError):
            split_batches("select 'x")


class TestSeparatorStatement:
    def test_goto_is_not_a_separator(self):
        script = "goto done\ndone: select 1;"
        assert texts(script) == [script]

    def test_keyword_containing_separator_is_not_split(self):
        script = "select category, ago from t;\n"
        assert texts(script) == [script]

    def test_variable_named_like_separator(self):
        script = "declare @go int;\n"
        assert texts(script) == [script]

    def test_prefix_matching_without_word_boundary(self):
        # Known edge case of plain prefix matching.
        cfg = SplitterConfig(require_word_boundary=False)
        assert texts("select category;", cfg) == ["select cate", "ry;"]

    def test_count_with_interleaved_block_comment(self):
        (batch,) = split_batches("select 1;\ngo/*x*/3")
        assert batch.repeat_count == 3
        assert "WHILE @counter < 3" in batch.sql

    def test_count_followed_by_comment(self):
        (batch,) = split_batches("select 1;\ngo 4 -- four times\n")
        assert batch.repeat_count == 4

    @pytest.mark.parametrize(
        "script", ["select * from go2020_data;\n", "select go1 from t;\n"]
    )
    def test_identifier_starting_with_separator_and_digits(self, script):
        assert texts(script) == [script]

    def test_zero_count_keeps_text(self):
        script = "select 1;\ngo 0\n"
        assert texts(script) == [script]

    def test_empty_batches_are_dropped(self):
        batches = split_batches("go\n\ngo\nselect 1;\ngo\n  \ngo")
        assert [b.text for b in batches] == ["\nselect 1;\n"]
        assert batches[0].index == 0

    def test_custom_separator(self):
        cfg = SplitterConfig(separator="run", look_alikes=())
        assert texts("select 1;\nrun\nselect 2;", cfg) == ["select 1;\n", "\nselect 2;"]


def test_rerunning_a_batch_is_idempotent():
    script = "select 'a go';\n/* c */\ngo\nselect 2;\ngo 3\nselect 3;"
    for batch in split_batches(script):
        (again,) = split_batches(batch.text)
        assert again.text == batch.text
        assert again.repeat_count == 1


def test_overrides_apply_to_a_single_call():
    splitter = BatchSplitter()
    assert len(splitter.split("select category;", require_word_boundary=False)) == 2
    assert len(splitter("select category;")) == 1


def test_trace_records_regions():
    batches, trace = split_with_trace("select 'a' /* c */\ngo")
    assert [b.text for b in batches] == ["select 'a' \n"]
    assert trace.kinds() == ["text", "literal", "text", "comment", "text", "separator"]
    assert trace.regions[1].char_start == 7
    assert trace.regions[1].char_end == 10
    assert trace.regions[-1].detail == "1"
    assert trace.warnings == []


def test_count_on_empty_batch_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="sqlbatch.splitter"):
        batches, trace = split_with_trace("go 5\nselect 1;")
    assert [b.text for b in batches] == ["\nselect 1;"]
    assert len(trace.warnings) == 1
    assert "count ignored" in trace.warnings[0]
    assert "count ignored" in caplog.text


def test_whitespace_run_is_tried_once(monkeypatch):
    import sqlbatch.splitter as splitter_module

    calls: list[int] = []
    original = splitter_module.match_separator

    def counting_match_separator(scanner, cfg=None):
        calls.append(scanner.index)
        return original(scanner, cfg)

    monkeypatch.setattr(splitter_module, "match_separator", counting_match_separator)
    script = "select 1;" + " \t" * 500 + "\ngo\nselect 2;"

    batches = split_batches(script)

    assert [b.text.strip() for b in batches] == ["select 1;", "select 2;"]
    assert len(calls) < 40


def test_separator_right_after_separator_line_spaces():
    batches = split_batches("select 1;\ngo go\nselect 2;")
    assert [b.text for b in batches] == ["select 1;\n", "\nselect 2;"]
