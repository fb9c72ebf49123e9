"""
Core functionality for the asker prompt generator.
"""

from .config import AskerConfig
from .exceptions import (
    AskerError,
    ConfigurationError,
    DirectiveError,
    GenerationError,
    InteractionError,
    OptionError,
    ShapeMismatchError,
)
from .theme import ThemeChoice, select_theme

__all__ = [
    'AskerConfig',
    'AskerError',
    'ConfigurationError',
    'DirectiveError',
    'GenerationError',
    'InteractionError',
    'OptionError',
    'ShapeMismatchError',
    'ThemeChoice',
    'select_theme',
]
