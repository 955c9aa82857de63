"""Generate HTTP client classes from RPC endpoint descriptors."""

from .builder import build
from .errors import GenerationError, InvalidInputError, ResourceError, WriteError
from .models import EndpointDescriptor, GeneratedFile, TypeRef

__all__ = [
    "build",
    "EndpointDescriptor",
    "GeneratedFile",
    "TypeRef",
    "GenerationError",
    "InvalidInputError",
    "ResourceError",
    "WriteError",
]
