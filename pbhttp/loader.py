"""Load endpoint descriptors from a JSON file.

The file holds a JSON array of descriptor objects, either with snake_case
keys or with the PascalCase keys emitted by the IDL translation step:

  [{"ServiceName": "User", "HTTPMethod": "POST", "APIName": "GetUser",
    "Path": "/v1/user", "Body": "*", "FileName": "user.proto",
    "Request": {"Name": "GetUserRequest", "FileName": "user.proto"},
    "Response": {"Name": "GetUserResponse", "FileName": "user.proto"}}]
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

from .errors import InvalidInputError, ResourceError
from .models import EndpointDescriptor, TypeRef

# snake_case field -> upstream key
_DESCRIPTOR_KEYS: dict[str, str] = {
    "service_name": "ServiceName",
    "http_method": "HTTPMethod",
    "api_name": "APIName",
    "path": "Path",
    "file_name": "FileName",
}

_TYPE_REF_KEYS: dict[str, str] = {
    "name": "Name",
    "file_name": "FileName",
}


def _get(data: dict[str, Any], key: str, alias: str, where: str) -> Any:
    if key in data:
        return data[key]
    if alias in data:
        return data[alias]
    raise InvalidInputError(f"{where}: missing required key {key!r}")


def type_ref_from_dict(data: dict[str, Any], where: str = "type") -> TypeRef:
    if not isinstance(data, dict):
        raise InvalidInputError(f"{where}: expected an object")
    fields = {k: _get(data, k, alias, where) for k, alias in _TYPE_REF_KEYS.items()}
    return TypeRef(**fields)


def descriptor_from_dict(data: dict[str, Any], where: str = "descriptor") -> EndpointDescriptor:
    """Build an EndpointDescriptor from one decoded JSON object."""
    if not isinstance(data, dict):
        raise InvalidInputError(f"{where}: expected an object")
    fields = {k: _get(data, k, alias, where) for k, alias in _DESCRIPTOR_KEYS.items()}
    request = type_ref_from_dict(_get(data, "request", "Request", where), f"{where}.request")
    response = type_ref_from_dict(_get(data, "response", "Response", where), f"{where}.response")
    body = data.get("body", data.get("Body", ""))
    return EndpointDescriptor(request=request, response=response, body=body, **fields)


def load_descriptors(path: str | Path) -> list[EndpointDescriptor]:
    """Read and decode a descriptor file."""
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except ValueError as exc:
        raise InvalidInputError(f"{path}: invalid descriptor file: {exc}") from exc
    except OSError as exc:
        raise ResourceError(f"failed to read {path}: {exc}") from exc

    if not isinstance(data, list):
        raise InvalidInputError(f"{path}: expected a JSON array of descriptors")
    return [descriptor_from_dict(item, f"descriptor {i}") for i, item in enumerate(data)]
