"""Typed core: pipeline models and the error taxonomy."""

from wirestack.core.errors import (
    BuilderStateError,
    InvalidCallableError,
    MissingApplicationError,
    WirestackError,
)
from wirestack.core.models import AssembledPipeline, MiddlewareDeclaration

__all__ = [
    "AssembledPipeline",
    "BuilderStateError",
    "InvalidCallableError",
    "MiddlewareDeclaration",
    "MissingApplicationError",
    "WirestackError",
]
