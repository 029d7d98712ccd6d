import re

import pytest

from typesmith.internals.messages import Category, ErrorKind, kinds_in, lookup

PLACEHOLDER = re.compile(r"\$\{([A-Za-z_][A-Za-z0-9_]*)\}")


def test_every_kind_has_a_template_and_unique_code():
    codes = [k.code for k in ErrorKind]
    assert len(codes) == len(set(codes))
    for kind in ErrorKind:
        assert isinstance(kind.template, str) and kind.template
        assert re.fullmatch(r"TE\d{4}", kind.code)
        assert isinstance(kind.category, Category)
        assert kind.doc


def test_placeholders_match_template_text():
    for kind in ErrorKind:
        expected = tuple(dict.fromkeys(PLACEHOLDER.findall(kind.template)))
        assert kind.placeholders == expected, kind.name


@pytest.mark.parametrize("kind, names", [
    (ErrorKind.InternalError, ("message",)),
    (ErrorKind.JSONParseError, ("description", "address", "message")),
    (ErrorKind.RefMustBeString, ()),
    (ErrorKind.SetOperationCasesIsNotArray, ("operation", "cases")),
    (ErrorKind.UnknownRendererOptionValue, ("value", "name")),
    (ErrorKind.TypeAttributesNotPropagated, ("count",)),
])
def test_known_property_sets(kind, names):
    assert kind.placeholders == names


def test_scenario_templates():
    assert ErrorKind.InputFileDoesNotExist.template == "Input file ${filename} does not exist"
    assert ErrorKind.UnknownRendererOptionValue.template == "Unknown value ${value} for option ${name}"


def test_lookup_by_name_and_code():
    assert lookup("InputFileDoesNotExist") is ErrorKind.InputFileDoesNotExist
    assert lookup("TE0305") is ErrorKind.InputFileDoesNotExist
    assert lookup("te0305") is ErrorKind.InputFileDoesNotExist
    assert ErrorKind.by_code("TE0001") is ErrorKind.InternalError


def test_lookup_unknown_key():
    with pytest.raises(KeyError, match="NoSuchKind"):
        lookup("NoSuchKind")
    with pytest.raises(KeyError, match="TE9999"):
        ErrorKind.by_code("TE9999")


def test_kinds_in_category():
    driver = kinds_in(Category.DRIVER)
    assert ErrorKind.InputFileDoesNotExist in driver
    assert ErrorKind.RefMustBeString not in driver
    assert sum(len(kinds_in(c)) for c in Category) == len(ErrorKind)
