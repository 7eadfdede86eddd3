"""Builder DSL: script evaluation, pipeline assembly and script loading."""

from wirestack.builder.assembler import assemble
from wirestack.builder.context import Builder
from wirestack.builder.loader import evaluate, load, read_script, strip_bom

__all__ = ["Builder", "assemble", "evaluate", "load", "read_script", "strip_bom"]
