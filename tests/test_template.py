import pytest

from typesmith.internals.template import Literal, Placeholder, TemplateSyntaxError, parse_template


def test_splits_literals_and_placeholders():
    t = parse_template("Unknown value ${value} for option ${name}")
    assert t.segments == (
        Literal("Unknown value "),
        Placeholder("value"),
        Literal(" for option "),
        Placeholder("name"),
    )


def test_dollar_without_brace_is_text():
    t = parse_template("$ref must be a string")
    assert t.segments == (Literal("$ref must be a string"),)
    assert t.placeholders == ()


def test_placeholder_names_are_distinct_and_ordered():
    t = parse_template("${b} and ${a} and ${b} again")
    assert t.placeholders == ("b", "a")


def test_empty_template():
    t = parse_template("")
    assert t.segments == ()
    assert t.render({"x": "y"}, str) == ""


def test_leading_and_adjacent_placeholders():
    t = parse_template("${operation}${cases} cases")
    assert t.placeholders == ("operation", "cases")
    assert t.render({"operation": "oneOf", "cases": "!"}, str) == "oneOf! cases"


def test_render_replaces_every_occurrence():
    t = parse_template("${x}-${x}-${x}")
    assert t.render({"x": "7"}, str) == "7-7-7"


def test_render_keeps_unmatched_placeholders():
    t = parse_template("Input file ${filename} does not exist")
    assert t.render({}, str) == "Input file ${filename} does not exist"


def test_render_does_not_rescan_inserted_values():
    t = parse_template("${a} / ${b}")
    assert t.render({"a": "${b}", "b": "B"}, str) == "${b} / B"


@pytest.mark.parametrize("bad", ["${", "${name", "${ name}", "${1abc}", "x ${} y"])
def test_malformed_placeholders_are_rejected(bad):
    with pytest.raises(TemplateSyntaxError) as exc_info:
        parse_template(bad)
    assert exc_info.value.template == bad
    assert isinstance(exc_info.value, ValueError)
