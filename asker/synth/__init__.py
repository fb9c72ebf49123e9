"""Method synthesis from resolved prompt specs."""

from .codegen import GeneratedMethod, SynthesisContext, emit_method
from .runtime import index_choices, interact

__all__ = [
    "GeneratedMethod",
    "SynthesisContext",
    "emit_method",
    "index_choices",
    "interact",
]
