"""Endpoint descriptors consumed by the generator.

Descriptors are produced upstream from the IDL (one per RPC with an HTTP
rule) and are only read here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path


@dataclass(frozen=True)
class TypeRef:
    """A generated message type and the file that declares it."""

    name: str
    file_name: str


@dataclass(frozen=True)
class EndpointDescriptor:
    """One HTTP endpoint to generate a client method for."""

    service_name: str
    http_method: str
    api_name: str
    path: str
    file_name: str
    request: TypeRef
    response: TypeRef
    body: str = ""


@dataclass(frozen=True)
class GeneratedFile:
    """A fully written, closed output file."""

    path: Path
    target: str
    service_name: str
    imports: list[str] = field(default_factory=list)
    methods: list[str] = field(default_factory=list)
