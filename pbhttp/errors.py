"""Errors raised while generating a client source file."""

from __future__ import annotations


class GenerationError(Exception):
    """Base class for every generation failure."""


class InvalidInputError(GenerationError):
    """The descriptors or options handed to the generator are unusable."""


class ResourceError(GenerationError):
    """The destination file could not be opened or created."""


class WriteError(GenerationError):
    """Writing a section of the generated file failed."""
