"""Tests for CSV line tokenizing."""

from finance_wrapped.utils.csv_tokenizer import parse_csv_line


def test_quoted_comma_stays_in_field():
    """Commas inside quotes do not split fields."""
    assert parse_csv_line('a,"b,c",d') == ["a", "b,c", "d"]


def test_fields_are_trimmed():
    assert parse_csv_line(" a ,  b,c  ") == ["a", "b", "c"]


def test_trailing_empty_field_emitted():
    """A trailing delimiter still yields a final empty field."""
    assert parse_csv_line("a,b,") == ["a", "b", ""]


def test_unterminated_quote_emits_final_field():
    """An unterminated quote swallows the rest of the line without raising."""
    assert parse_csv_line('a,"b,c') == ["a", "b,c"]


def test_empty_line_yields_single_empty_field():
    assert parse_csv_line("") == [""]


def test_quotes_are_removed_from_output():
    assert parse_csv_line('"2024-01-01","$1,200.00"') == ["2024-01-01", "$1,200.00"]
