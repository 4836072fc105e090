"""Unit tests for the record formatter."""

from csvout.models import OutputOptions
from csvout.stringify import Stringifier


def test_sequence_records():
    stringifier = Stringifier()
    assert stringifier.stringify([1, 2, 3]) == "1,2,3\n"
    assert stringifier.stringify(("a", None, "c")) == "a,,c\n"


def test_string_record_is_single_field():
    assert Stringifier().stringify("hello") == "hello\n"


def test_minimal_quoting():
    stringifier = Stringifier()
    assert stringifier.stringify(["a,b", 'say "hi"', "plain"]) == '"a,b","say ""hi""",plain\n'


def test_quoted_quotes_every_field():
    stringifier = Stringifier(OutputOptions(quoted=True))
    assert stringifier.stringify(["1", "x"]) == '"1","x"\n'


def test_custom_quote_and_delimiter():
    stringifier = Stringifier(OutputOptions(delimiter=";", quote="'"))
    assert stringifier.stringify(["a;b", "c"]) == "'a;b';c\n"


def test_escape_character():
    stringifier = Stringifier(OutputOptions(escape="\\", quoted=True))
    assert stringifier.stringify(['a"b']) == '"a\\"b"\n'


def test_symbolic_line_breaks_are_resolved():
    stringifier = Stringifier(OutputOptions(line_breaks="mac"))
    assert stringifier.line_break == "\r"
    assert stringifier.stringify(["a"]) == "a\r"


def test_auto_line_breaks_default_to_unix():
    assert Stringifier(OutputOptions(line_breaks="auto")).line_break == "\n"


def test_columns_from_first_mapping():
    stringifier = Stringifier(OutputOptions(header=True))
    assert stringifier.stringify({"a": 1, "b": 2}) == "a,b\n1,2\n"
    assert stringifier.stringify({"b": 4, "a": 3, "c": 5}) == "3,4\n"


def test_new_columns_appended():
    stringifier = Stringifier(OutputOptions(new_columns=True))
    assert stringifier.stringify({"a": 1}) == "1\n"
    assert stringifier.stringify({"a": 2, "b": 3}) == "2,3\n"
    assert stringifier.columns == ["a", "b"]


def test_header_only_on_flush():
    stringifier = Stringifier(OutputOptions(columns=["x", "y"], header=True))
    assert stringifier.flush() == "x,y\n"
    assert stringifier.flush() == ""


def test_no_header_without_columns():
    stringifier = Stringifier(OutputOptions(header=True))
    assert stringifier.flush() == ""
