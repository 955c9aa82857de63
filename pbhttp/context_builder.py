"""Build Jinja2 template contexts from endpoint descriptors.

Resolves which generated message files must be imported and assembles the
context dicts for a target's import-header and class-body templates.
"""

from __future__ import annotations

import logging
from typing import Any, Sequence

from .models import EndpointDescriptor
from .naming import method_name, project_file_name
from .targets import TargetSyntax

logger = logging.getLogger(__name__)


def resolve_files(descriptors: Sequence[EndpointDescriptor]) -> list[str]:
    """Return every referenced file once, in first-seen order.

    Per descriptor the candidates are the service file, then the response
    file, then the request file.
    """
    seen: set[str] = set()
    files: list[str] = []
    for descriptor in descriptors:
        for name in (
            descriptor.file_name,
            descriptor.response.file_name,
            descriptor.request.file_name,
        ):
            if name not in seen:
                seen.add(name)
                files.append(name)
    return files


def import_module(file_name: str, project: str, package_path: str) -> str:
    """Map a source file to the package path of its generated message file.

    'api/v1/user.proto' in project 'my-app' with package path '/src/'
    becomes 'my_app/src/user.pb'.
    """
    segment = file_name.split("/")[-1].replace("proto", "pb")
    return f"{project_file_name(project)}{package_path}{segment}"


def build_import_context(
    target: TargetSyntax,
    descriptors: Sequence[EndpointDescriptor],
    project: str,
    package_path: str,
) -> dict[str, Any]:
    """Build the context for a target's import-header template."""
    files = resolve_files(descriptors)
    logger.debug("Resolved %d import(s): %s", len(files), files)
    return {
        "prelude": list(target.prelude),
        "modules": [import_module(f, project, package_path) for f in files],
    }


def build_class_context(
    target: TargetSyntax,
    descriptors: Sequence[EndpointDescriptor],
    method_naming: str = "literal",
) -> dict[str, Any]:
    """Build the context for a target's class-body template.

    The class is named after the first descriptor's service only.
    """
    service_name = descriptors[0].service_name
    methods: list[dict[str, Any]] = []
    for descriptor in descriptors:
        methods.append({
            "name": method_name(descriptor.api_name, method_naming),
            "verb": descriptor.http_method.lower(),
            "path": descriptor.path,
            "request": descriptor.request.name,
            "response": descriptor.response.name,
        })

    return {
        "class_name": f"{service_name}Client",
        "methods": methods,
        "future": target.future,
        "await_keyword": target.await_keyword,
        "string_type": target.string_type,
        "success_status": target.success_status,
    }
