"""Render templates and write generated client source.

Takes the contexts from context_builder and writes them, section by
section, to an already opened destination.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Sequence, TextIO

import jinja2

from .context_builder import build_class_context, build_import_context
from .errors import WriteError
from .models import EndpointDescriptor
from .targets import TargetSyntax

logger = logging.getLogger(__name__)

TEMPLATE_DIR = Path(__file__).parent / "templates"


def make_environment(target: TargetSyntax) -> jinja2.Environment:
    """Create the Jinja2 environment used to render a target's templates."""
    env = jinja2.Environment(
        loader=jinja2.FileSystemLoader(str(TEMPLATE_DIR)),
        keep_trailing_newline=True,
        trim_blocks=True,
        lstrip_blocks=True,
        undefined=jinja2.StrictUndefined,
    )
    env.filters["quote"] = target.quote
    return env


class SourceEmitter:
    """Writes the import header and client class for one target.

    The emitter does not own the lifetime of ``stream``; the caller opens
    and closes it.
    """

    def __init__(
        self,
        stream: TextIO,
        target: TargetSyntax,
        method_naming: str = "literal",
    ) -> None:
        self.stream = stream
        self.target = target
        self.method_naming = method_naming
        self.env = make_environment(target)

    def render(self, template_name: str, context: dict[str, Any]) -> str:
        return self.env.get_template(template_name).render(**context)

    def _write(self, section: str, text: str) -> None:
        try:
            self.stream.write(text)
        except OSError as exc:
            raise WriteError(f"failed to write {section} section: {exc}") from exc

    def write_imports(
        self,
        descriptors: Sequence[EndpointDescriptor],
        project: str,
        package_path: str,
    ) -> list[str]:
        """Write prelude and message imports; return the imported modules."""
        context = build_import_context(self.target, descriptors, project, package_path)
        self._write("imports", self.render(self.target.imports_template, context))
        return context["modules"]

    def write_class(self, descriptors: Sequence[EndpointDescriptor]) -> list[str]:
        """Write the client class; return the generated method names."""
        context = build_class_context(self.target, descriptors, self.method_naming)
        for method in context["methods"]:
            logger.debug(
                "Emitting %s.%s (%s %s)",
                context["class_name"], method["name"], method["verb"], method["path"],
            )
        self._write("class", self.render(self.target.class_template, context))
        return [m["name"] for m in context["methods"]]
