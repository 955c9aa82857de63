"""Shared fixtures for generator tests."""

from __future__ import annotations

from typing import Callable

import pytest

from pbhttp.models import EndpointDescriptor, TypeRef


def _descriptor(
    api_name: str = "GetUser",
    *,
    service_name: str = "User",
    http_method: str = "POST",
    path: str = "/v1/user",
    file_name: str = "user.proto",
    request: tuple[str, str] | None = None,
    response: tuple[str, str] | None = None,
) -> EndpointDescriptor:
    """Build a descriptor; request/response default to <ApiName>Request/Response in file_name."""
    request = request or (f"{api_name}Request", file_name)
    response = response or (f"{api_name}Response", file_name)
    return EndpointDescriptor(
        service_name=service_name,
        http_method=http_method,
        api_name=api_name,
        path=path,
        file_name=file_name,
        request=TypeRef(*request),
        response=TypeRef(*response),
        body="*",
    )


@pytest.fixture
def make_descriptor() -> Callable[..., EndpointDescriptor]:
    """Factory for descriptors; defaults describe the User service."""
    return _descriptor


@pytest.fixture
def user_descriptor() -> EndpointDescriptor:
    """The single-endpoint User service used across tests."""
    return _descriptor()


@pytest.fixture
def user_client_dart() -> str:
    """Dart client for user_descriptor, project 'my-app', package path '/'."""
    return (
        "import 'dart:convert';\n"
        "import 'package:http/http.dart' as http;\n"
        "import 'package:my_app/user.pb.dart';\n"
        "class UserClient {\n"
        "\tString baseUrl;\n"
        "\tUserClient(String baseUrl) {this.baseUrl = baseUrl;}\n"
        "\tFuture<GetUserResponse> getUser(GetUserRequest body, Map<String, String> headers) async {\n"
        "\t\tfinal response = await http.post(\n"
        "\t\t\tUri.parse(this.baseUrl + \"/v1/user\"),\n"
        "\t\t\tbody: json.encode(body),\n"
        "\t\t\theaders: headers);\n"
        "\n"
        "\t\tif (response.statusCode != 200) throw response.body;\n"
        "\t\tvar raw = json.decode(Utf8Decoder().convert(response.bodyBytes));\n"
        "\t\tfinal GetUserResponse res = GetUserResponse.fromJson(raw);\n"
        "\t\treturn res;\n"
        "\t}\n"
        "\n"
        "}\n"
    )
