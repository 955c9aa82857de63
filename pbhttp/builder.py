"""Generate one client source file from a batch of endpoint descriptors."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Sequence

from .codegen import SourceEmitter
from .errors import InvalidInputError, ResourceError, WriteError
from .models import EndpointDescriptor, GeneratedFile
from .naming import method_name, output_file_name
from .targets import get_target

logger = logging.getLogger(__name__)


def _validate(descriptors: Sequence[EndpointDescriptor], method_naming: str) -> None:
    if not descriptors:
        raise InvalidInputError("invalid descriptors: at least one endpoint is required")
    for index, descriptor in enumerate(descriptors):
        try:
            method_name(descriptor.api_name, method_naming)
        except InvalidInputError as exc:
            raise InvalidInputError(f"descriptor {index}: {exc}") from exc


def build(
    descriptors: Sequence[EndpointDescriptor],
    project: str,
    package_path: str,
    *,
    target: str = "dart",
    output_dir: str | Path | None = None,
    method_naming: str = "literal",
) -> GeneratedFile:
    """Write the client for ``descriptors`` and return what was generated.

    The destination is named after the first descriptor's file and is
    truncated on open. On a write failure the partial file is left in place.
    """
    _validate(descriptors, method_naming)
    syntax = get_target(target)

    first = descriptors[0]
    path = Path(output_dir or ".") / output_file_name(first.file_name, syntax.extension)

    try:
        stream = open(path, "w", encoding="utf-8", newline="")
    except OSError as exc:
        raise ResourceError(f"failed to open {path}: {exc}") from exc

    try:
        with stream:
            emitter = SourceEmitter(stream, syntax, method_naming)
            imports = emitter.write_imports(descriptors, project, package_path)
            methods = emitter.write_class(descriptors)
    except OSError as exc:
        # buffered data is flushed on close
        raise WriteError(f"failed to write {path}: {exc}") from exc

    logger.info("Generated %s (%d methods)", path, len(methods))
    return GeneratedFile(
        path=path,
        target=syntax.name,
        service_name=first.service_name,
        imports=imports,
        methods=methods,
    )
