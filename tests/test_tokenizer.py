import pytest

from common.tokenizer import split_line


def test_quoted_description_stays_one_word():
    tokens = split_line('add --description "lunch with Bob" --amount 12.50')
    assert tokens == ["add", "--description", "lunch with Bob", "--amount", "12.50"]


def test_escaped_quotes_are_literal():
    assert split_line('say \\"hi\\"') == ["say", '"hi"']


def test_runs_of_whitespace_do_not_produce_empty_words():
    assert split_line("list \t   --x\t\ty  ") == ["list", "--x", "y"]


def test_escaped_space_joins_words():
    assert split_line("lunch\\ with\\ Bob") == ["lunch with Bob"]


def test_escape_inside_quotes():
    assert split_line('"a \\" b"') == ['a " b']


def test_escaped_backslash():
    assert split_line("a\\\\b") == ["a\\b"]


def test_unterminated_quote_flushes_collected_text():
    assert split_line('add --description "open ended') == ["add", "--description", "open ended"]


def test_empty_quotes_produce_no_word():
    assert split_line('add --description "" --amount 5') == ["add", "--description", "--amount", "5"]


def test_quotes_glue_adjacent_text():
    assert split_line('pre"fix suf"fix') == ["prefix suffix"]


def test_trailing_backslash_is_dropped():
    assert split_line("abc\\") == ["abc"]


@pytest.mark.parametrize("line", ["", "   ", "\t", '""'])
def test_blank_input_yields_nothing(line):
    assert split_line(line) == []
