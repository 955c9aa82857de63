"""Target-language descriptors.

Everything that depends on the client language lives here and in the
templates a target names; ordering, deduplication and naming do not.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable

from .errors import InvalidInputError


def dart_quote(value: str) -> str:
    """Escape a value for use inside a double-quoted Dart string literal."""
    return value.replace("\\", "\\\\").replace('"', '\\"').replace("$", "\\$")


@dataclass(frozen=True)
class TargetSyntax:
    """Keywords and templates for one client language."""

    name: str
    extension: str
    prelude: tuple[str, ...]
    imports_template: str
    class_template: str
    future: str
    await_keyword: str
    string_type: str
    success_status: int
    quote: Callable[[str], str]


DART = TargetSyntax(
    name="dart",
    extension="dart",
    prelude=(
        "import 'dart:convert';",
        "import 'package:http/http.dart' as http;",
    ),
    imports_template="dart/imports.dart.j2",
    class_template="dart/client.dart.j2",
    future="Future",
    await_keyword="await",
    string_type="String",
    success_status=200,
    quote=dart_quote,
)

TARGETS: dict[str, TargetSyntax] = {
    DART.name: DART,
}


def get_target(name: str) -> TargetSyntax:
    """Look up a registered target by name."""
    try:
        return TARGETS[name]
    except KeyError:
        raise InvalidInputError(
            f"unknown target {name!r} (available: {', '.join(sorted(TARGETS))})"
        ) from None
