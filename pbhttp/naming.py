"""Identifier casing and file naming for generated clients.

Casing runs in two phases:
  1. add_word_boundaries: split digit runs from the letters around them
  2. a two-state scan over the result (AT_BOUNDARY / IN_WORD)

Examples:
  normalize("foo_bar", True)       -> FooBar
  normalize("foo-bar2baz", True)   -> FooBar2Baz
  normalize("foo-bar2baz", False)  -> fooBar2Baz
  method_name("GetUser")           -> getUser
  output_file_name("user-api.proto", "dart") -> user_api.pb.http.dart
"""

from __future__ import annotations

import re

from .errors import InvalidInputError

# letter, digit run, optional trailing letter
_NUMBER_SEQUENCE = re.compile(r"([a-zA-Z])([0-9]+)([a-zA-Z]?)")

_SEPARATORS = "_ -"

AT_BOUNDARY = "at_boundary"
IN_WORD = "in_word"

METHOD_NAMING_STYLES = ("literal", "camel")


def add_word_boundaries(text: str) -> str:
    """Surround digit runs that touch letters with spaces."""
    return _NUMBER_SEQUENCE.sub(r"\1 \2 \3", text)


def _scan(text: str, capitalize_first: bool) -> str:
    state = AT_BOUNDARY if capitalize_first else IN_WORD
    out: list[str] = []
    for ch in text:
        if ch in _SEPARATORS:
            state = AT_BOUNDARY
            continue
        if "a" <= ch <= "z":
            out.append(ch.upper() if state == AT_BOUNDARY else ch)
        elif "A" <= ch <= "Z" or "0" <= ch <= "9":
            out.append(ch)
        state = IN_WORD
    return "".join(out)


def normalize(text: str, capitalize_first: bool) -> str:
    """Convert separator-delimited text to PascalCase or camelCase.

    Only ASCII letters and digits survive; any other character is dropped.
    """
    text = add_word_boundaries(text).strip(_SEPARATORS)
    return _scan(text, capitalize_first)


def to_camel(text: str) -> str:
    return normalize(text, True)


def to_lower_camel(text: str) -> str:
    return normalize(text, False)


def method_name(api_name: str, style: str = "literal") -> str:
    """Build a client method name from an RPC name.

    'literal' lowercases the first character and keeps the rest as is.
    'camel' additionally runs the result through the normalizer.
    """
    if style not in METHOD_NAMING_STYLES:
        raise InvalidInputError(f"unknown method naming style: {style!r}")
    if not api_name:
        raise InvalidInputError("api name must not be empty")
    name = api_name[0].lower() + api_name[1:]
    if style == "camel":
        return to_lower_camel(name)
    return name


def project_file_name(name: str) -> str:
    """Replace hyphens, which are not valid in Dart package and file names."""
    return name.replace("-", "_")


def output_file_name(name: str, extension: str) -> str:
    """Derive the generated file name from the service's defining file."""
    name = project_file_name(name)
    # the extension starts at the last dot of the final path element
    base = name.rsplit("/", 1)[-1]
    dot = base.rfind(".")
    prefix = name if dot < 0 else name[: len(name) - len(base) + dot]
    return f"{prefix}.pb.http.{extension}"
