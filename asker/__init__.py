"""
Asker - interactive setters for annotated records

Decorate a dataclass (or pydantic model) with ``@asker`` and every field
gains an ``ask_<field>`` method that collects its value from an operator
through an InquirerPy terminal prompt.
"""

from .core import (
    AskerConfig,
    AskerError,
    ConfigurationError,
    DirectiveError,
    GenerationError,
    InteractionError,
    OptionError,
    ShapeMismatchError,
    ThemeChoice,
)
from .generator import asker, generate_methods, generated_method, generated_source
from .schemas import Directive, FieldDescriptor, directive, prompt_field

__version__ = "0.1.0"

__all__ = [
    'asker',
    'generate_methods',
    'generated_method',
    'generated_source',
    'directive',
    'prompt_field',
    'Directive',
    'FieldDescriptor',
    'AskerConfig',
    'ThemeChoice',
    'AskerError',
    'ConfigurationError',
    'DirectiveError',
    'GenerationError',
    'InteractionError',
    'OptionError',
    'ShapeMismatchError',
]
