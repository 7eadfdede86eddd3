"""wirestack - declarative pipeline loader for request-processing servers."""

__version__ = "0.1.0"
__logo__ = "🧵"

from wirestack.builder.assembler import assemble
from wirestack.builder.context import Builder
from wirestack.builder.loader import evaluate, load
from wirestack.core.errors import (
    BuilderStateError,
    InvalidCallableError,
    MissingApplicationError,
    WirestackError,
)
from wirestack.core.models import AssembledPipeline, MiddlewareDeclaration

__all__ = [
    "AssembledPipeline",
    "Builder",
    "BuilderStateError",
    "InvalidCallableError",
    "MiddlewareDeclaration",
    "MissingApplicationError",
    "WirestackError",
    "assemble",
    "evaluate",
    "load",
]
