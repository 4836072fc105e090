"""Tests for the output options record and line-break resolution."""

import pytest
from pydantic import ValidationError

from csvout.models import LINE_BREAKS, OutputOptions, resolve_line_breaks


def test_defaults():
    options = OutputOptions()
    assert options.delimiter == ","
    assert options.quote == '"'
    assert options.escape == '"'
    assert options.quoted is False
    assert options.columns is None
    assert options.header is False
    assert options.line_breaks == "auto"
    assert options.flags == "w"
    assert options.new_columns is False
    assert options.end is True


def test_merge_keeps_unrelated_keys():
    options = OutputOptions().merge({"delimiter": ";"}).merge({"quoted": True})
    assert options.delimiter == ";"
    assert options.quoted is True


def test_merge_keeps_unknown_keys_as_extras():
    options = OutputOptions().merge({"a": 1}).merge({"b": 2})
    assert options.model_extra == {"a": 1, "b": 2}


def test_merge_returns_new_record():
    original = OutputOptions()
    merged = original.merge({"delimiter": "|"})
    assert merged is not original
    assert original.delimiter == ","


def test_merge_accepts_camel_case_keys():
    options = OutputOptions().merge({"lineBreaks": "unix", "newColumns": True})
    assert options.line_breaks == "unix"
    assert options.new_columns is True
    assert options.model_extra == {}


def test_merge_accepts_options_instance():
    base = OutputOptions(delimiter=";", header=True)
    merged = base.merge(OutputOptions(quoted=True))
    assert merged.delimiter == ";"
    assert merged.header is True
    assert merged.quoted is True


def test_merge_none_is_noop():
    options = OutputOptions(delimiter="\t")
    assert options.merge(None) is options


@pytest.mark.parametrize("values", [{"delimiter": ";;"}, {"quote": ""}, {"flags": "x"}])
def test_invalid_values_rejected(values):
    with pytest.raises(ValidationError):
        OutputOptions().merge(values)


@pytest.mark.parametrize(
    "name, literal",
    [
        ("auto", None),
        ("unix", "\n"),
        ("mac", "\r"),
        ("windows", "\r\n"),
        ("unicode", "\u2028"),
    ],
)
def test_resolve_line_breaks_table(name, literal):
    assert resolve_line_breaks(name) == literal
    assert LINE_BREAKS[name] == literal


@pytest.mark.parametrize("literal", ["\n", "\r\n", "||", None])
def test_resolve_line_breaks_passes_literals_through(literal):
    assert resolve_line_breaks(literal) == literal
    assert resolve_line_breaks(resolve_line_breaks(literal)) == literal


def test_resolved_leaves_original_untouched():
    options = OutputOptions(line_breaks="windows")
    resolved = options.resolved()
    assert resolved.line_breaks == "\r\n"
    assert options.line_breaks == "windows"
    assert resolved.resolved().line_breaks == "\r\n"


def test_pipeline_options_accessor_merges(pipeline):
    assert pipeline.to.options({"a": 1}) is pipeline
    assert pipeline.to.options({"b": 2}) is pipeline

    options = pipeline.to.options()
    assert isinstance(options, OutputOptions)
    assert options.model_extra == {"a": 1, "b": 2}


def test_pipeline_initial_options():
    from csvout import Pipeline

    pipeline = Pipeline({"delimiter": ";", "lineBreaks": "mac"})
    options = pipeline.to.options()
    assert options.delimiter == ";"
    assert options.line_breaks == "mac"
