# internals/messages.py
"""Catalogue of every user-facing error the code generator can report.

Each :class:`ErrorKind` member declares its code, message template, category
and a short doc line together. Placeholders use ``${name}`` syntax; the
names in a template are exactly the properties a caller passes when raising
that kind.
"""
from __future__ import annotations

from enum import Enum, unique
from typing import Dict, List, Tuple

from typesmith.internals.template import parse_template


class Category(str, Enum):
    INTERNAL    = "internal"
    MISC        = "misc"
    JSON_SCHEMA = "json-schema"
    DRIVER      = "driver"
    IR          = "ir"
    RENDERING   = "rendering"
    TYPESCRIPT  = "typescript"


@unique
class ErrorKind(Enum):
    # Internal errors (bugs in typesmith itself) - TE00xx range
    InternalError = ("TE0001",
        "Internal error: ${message}",
        Category.INTERNAL, "An invariant inside typesmith was violated.")

    # Misc I/O and parsing - TE01xx range
    JSONParseError = ("TE0101",
        "Syntax error in ${description} JSON ${address}: ${message}",
        Category.MISC, "A JSON input could not be parsed.")

    ReadError = ("TE0102",
        "Cannot read from file or URL ${fileOrURL}: ${message}",
        Category.MISC, "An input file or URL could not be read.")

    # JSON Schema input - TE02xx range
    ArrayIsInvalidJSONSchema = ("TE0201",
        "An array is not a valid JSON Schema",
        Category.JSON_SCHEMA, "A schema position holds an array.")

    NullIsInvalidJSONSchema = ("TE0202",
        "null is not a valid JSON Schema",
        Category.JSON_SCHEMA, "A schema position holds null.")

    RefMustBeString = ("TE0203",
        "$ref must be a string",
        Category.JSON_SCHEMA, "The value of $ref is not a string.")

    AdditionalTypesForbidRequired = ("TE0204",
        "Can't have non-specified required properties but forbidden additionalTypes",
        Category.JSON_SCHEMA, "A required property is neither declared nor allowed as additional.")

    NoTypeSpecified = ("TE0205",
        "JSON Schema must specify at least one type",
        Category.JSON_SCHEMA, "The schema's type set is empty.")

    FalseSchemaNotSupported = ("TE0206",
        'Schema "false" is not supported',
        Category.JSON_SCHEMA, "The boolean schema false cannot be turned into a type.")

    RefWithFragmentNotAllowed = ("TE0207",
        "Ref URI with fragment is not allowed: ${ref}",
        Category.JSON_SCHEMA, "A top-level schema reference carries a fragment.")

    InvalidJSONSchemaType = ("TE0208",
        "Value of type ${type} is not valid JSON Schema",
        Category.JSON_SCHEMA, "A schema position holds a scalar that is not a schema.")

    RequiredMustBeStringOrStringArray = ("TE0209",
        "`required` must be string or array of strings, but is ${actual}",
        Category.JSON_SCHEMA, "`required` has the wrong shape.")

    RequiredElementMustBeString = ("TE0210",
        "`required` must contain only strings, but it has ${element}",
        Category.JSON_SCHEMA, "`required` contains a non-string element.")

    TypeMustBeStringOrStringArray = ("TE0211",
        "`type` must be string or array of strings, but is ${actual}",
        Category.JSON_SCHEMA, "`type` has the wrong shape.")

    TypeElementMustBeString = ("TE0212",
        "`type` must contain only strings, but it has ${element}",
        Category.JSON_SCHEMA, "`type` contains a non-string element.")

    ArrayItemsMustBeStringOrArray = ("TE0213",
        "Array items must be an array or an object, but is ${actual}",
        Category.JSON_SCHEMA, "`items` is neither a schema nor a list of schemas.")

    IDMustHaveAddress = ("TE0214",
        "$id doesn't have an address: ${id}",
        Category.JSON_SCHEMA, "An $id could not be resolved to an address.")

    WrongAccessorEntryArrayLength = ("TE0215",
        "Accessor entry array must have the same number of entries as the ${operation}",
        Category.JSON_SCHEMA, "Accessor names do not line up with the cases they name.")

    SetOperationCasesIsNotArray = ("TE0216",
        "${operation} cases must be an array, but is ${cases}",
        Category.JSON_SCHEMA, "oneOf/anyOf/allOf is not given a list.")

    CannotFetchSchema = ("TE0217",
        "Cannot fetch schema at address ${address}",
        Category.JSON_SCHEMA, "A referenced schema could not be retrieved.")

    # Driver / command line - TE03xx range
    UnknownSourceLanguage = ("TE0301",
        "Unknown source language ${lang}",
        Category.DRIVER, "The requested input language is not supported.")

    UnknownOutputLanguage = ("TE0302",
        "Unknown output language ${lang}",
        Category.DRIVER, "The requested target language is not supported.")

    NoGraphQLQueryGiven = ("TE0303",
        "Please specify at least one GraphQL query as input",
        Category.DRIVER, "GraphQL input needs a query besides the schema.")

    NoGraphQLSchemaInDir = ("TE0304",
        "No GraphQL schema in ${dir}",
        Category.DRIVER, "An input directory has GraphQL queries but no schema.")

    InputFileDoesNotExist = ("TE0305",
        "Input file ${filename} does not exist",
        Category.DRIVER, "A path given on the command line does not exist.")

    CannotMixJSONWithOtherSamples = ("TE0306",
        "Cannot mix JSON samples with JSON Schema, GraphQL, or TypeScript in input subdirectory ${dir}",
        Category.DRIVER, "An input subdirectory mixes samples with schema sources.")

    CannotMixNonJSONInputs = ("TE0307",
        "Cannot mix JSON Schema, GraphQL, and TypeScript in an input subdirectory ${dir}",
        Category.DRIVER, "An input subdirectory mixes several schema languages.")

    UnknownDebugOption = ("TE0308",
        "Unknown debug option ${option}",
        Category.DRIVER, "--debug was given an option it does not know.")

    # Intermediate representation - TE04xx range
    NoForwardDeclarableTypeInCycle = ("TE0401",
        "Cannot resolve cycle because it doesn't contain types that can be forward declared",
        Category.IR, "A type cycle has no member the target language can forward declare.")

    TypeAttributesNotPropagated = ("TE0402",
        "Type attributes for ${count} types were not carried over to the new graph",
        Category.IR, "A graph rewrite dropped type attributes.")

    # Rendering - TE05xx range
    UnknownRendererOptionValue = ("TE0501",
        "Unknown value ${value} for option ${name}",
        Category.RENDERING, "A renderer option was given a value outside its choices.")

    # TypeScript input - TE06xx range
    TypeScriptCompilerError = ("TE0601",
        "TypeScript error: ${message}",
        Category.TYPESCRIPT, "The TypeScript compiler rejected an input file.")

    def __init__(self, code: str, template: str, category: Category, doc: str) -> None:
        self.code = code
        self.template = template
        self.category = category
        self.doc = doc

    @property
    def placeholders(self) -> Tuple[str, ...]:
        """Property names this kind's template expects."""
        return parse_template(self.template).placeholders

    @classmethod
    def by_code(cls, code: str) -> ErrorKind:
        try:
            return _BY_CODE[code.upper()]
        except KeyError:
            raise KeyError(f"unknown error code: {code}") from None


def lookup(key: str) -> ErrorKind:
    """Find a kind by member name (``InputFileDoesNotExist``) or code (``TE0305``)."""
    try:
        return ErrorKind[key]
    except KeyError:
        pass
    try:
        return ErrorKind.by_code(key)
    except KeyError:
        raise KeyError(f"unknown error kind or code: {key}") from None


def kinds_in(category: Category) -> List[ErrorKind]:
    return [k for k in ErrorKind if k.category == category]


#
# --- Catalogue checks, run at import
#

def _index_codes() -> Dict[str, ErrorKind]:
    by_code: Dict[str, ErrorKind] = {}
    for kind in ErrorKind:
        if kind.code in by_code:
            raise ValueError(f"duplicate error code {kind.code} on {by_code[kind.code].name} and {kind.name}")
        by_code[kind.code] = kind
        # Fails the import on a malformed template.
        parse_template(kind.template)
    return by_code


_BY_CODE: Dict[str, ErrorKind] = _index_codes()
