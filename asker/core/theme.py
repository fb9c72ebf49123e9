"""Presentation theme selection for generated prompts.

A generation pass picks exactly one :class:`ThemeChoice` before any field is
resolved and threads it through :class:`~asker.synth.codegen.SynthesisContext`.
Each choice maps to one constructor form in the emitted code:

- ``none``: prompts are built with :data:`PLAIN_STYLE` (every library colour
  removed).
- ``colorful``: prompts are built with the bundled :data:`COLORFUL_STYLE`.
- ``external``: prompts are built with a caller-supplied InquirerPy style.
"""

from __future__ import annotations

import os
from enum import Enum
from typing import TYPE_CHECKING, Any, Optional, Union

from InquirerPy.utils import InquirerPyStyle, get_style

from .exceptions import ConfigurationError

if TYPE_CHECKING:
    from .config import AskerConfig

THEME_ENV_VAR = "ASKER_THEME"


class ThemeChoice(str, Enum):
    NONE = "none"
    DEFAULT_COLORFUL = "colorful"
    EXTERNAL_COLORFUL = "external"


DEFAULT_THEME = ThemeChoice.DEFAULT_COLORFUL

# Bold prompt, green answers, cyan cursor, yellow marks.
_COLORFUL_PALETTE = {
    "questionmark": "#e5c07b bold",
    "answermark": "#98c379 bold",
    "answer": "#98c379",
    "input": "#56b6c2",
    "question": "bold",
    "answered_question": "",
    "instruction": "#7f848e",
    "long_instruction": "#7f848e",
    "pointer": "#56b6c2 bold",
    "checkbox": "#98c379",
    "marker": "#e5c07b",
    "validator": "#e06c75",
    "skipped": "#5c6370",
}

PLAIN_STYLE: InquirerPyStyle = get_style({}, style_override=True)
COLORFUL_STYLE: InquirerPyStyle = get_style(_COLORFUL_PALETTE, style_override=False)


def coerce_theme(value: Union[ThemeChoice, str]) -> ThemeChoice:
    """Turn a theme name into a :class:`ThemeChoice`."""
    if isinstance(value, ThemeChoice):
        return value
    try:
        return ThemeChoice(str(value).strip().lower())
    except ValueError:
        valid = ", ".join(choice.value for choice in ThemeChoice)
        raise ConfigurationError(f"Unknown theme {value!r}, expected one of: {valid}") from None


def select_theme(
    explicit: Union[ThemeChoice, str, None] = None,
    config: Optional[AskerConfig] = None,
) -> ThemeChoice:
    """Resolve the theme for one generation pass.

    Precedence: the record-level ``theme`` argument, then ``config.theme``,
    then the ``ASKER_THEME`` environment variable, then ``colorful``.
    """
    if explicit is not None:
        return coerce_theme(explicit)
    if config is not None and config.theme is not None:
        return coerce_theme(config.theme)
    from_env = os.getenv(THEME_ENV_VAR)
    if from_env:
        return coerce_theme(from_env)
    return DEFAULT_THEME


def external_style(style: Any) -> InquirerPyStyle:
    """Normalise a caller-supplied style (dict or ``InquirerPyStyle``)."""
    if isinstance(style, InquirerPyStyle):
        return style
    if isinstance(style, dict):
        return get_style(style, style_override=False)
    raise ConfigurationError(
        f"External theme must be an InquirerPyStyle or a dict, got {type(style).__name__}"
    )
