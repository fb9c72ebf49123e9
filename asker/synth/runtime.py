"""Helpers referenced by generated method bodies.

Generated code calls into InquirerPy through ``inquirer`` and into this
module for everything around the call: building index-valued choices,
running the prompt, and checking options passed at call time.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from typing import Any

from InquirerPy.base.control import Choice

from ..core.convert import is_compatible
from ..core.exceptions import InteractionError, OptionError
from ..core.shape import type_name

logger = logging.getLogger(__name__)

INTERACTION_FAILURES = (KeyboardInterrupt, EOFError, OSError)


def index_choices(options: Sequence[Any], checked: Sequence[int] = ()) -> list[Choice]:
    """One ``Choice`` per option whose value is the option's index."""
    return [
        Choice(value=index, name=str(option), enabled=index in checked)
        for index, option in enumerate(options)
    ]


def check_options(options: Sequence[Any], item_type: Any, field: str) -> None:
    """Reject a call-time option that cannot become ``item_type``, before prompting."""
    for option in options:
        if not is_compatible(option, item_type):
            raise OptionError(f"option {option!r} is not compatible with `{type_name(item_type)}`", field=field)


def interact(prompter: Any, field: str, exit_on_failure: bool = False) -> Any:
    """Run ``prompter`` to completion and return the answer.

    A cancelled or failed prompt raises :class:`InteractionError`, or ends
    the process with exit status 1 when ``exit_on_failure`` is set.
    """
    try:
        return prompter.execute()
    except INTERACTION_FAILURES as exc:
        if exit_on_failure:
            logger.error("Prompt for %s was not completed: %s", field, type(exc).__name__)
            raise SystemExit(1) from exc
        raise InteractionError(f"prompt was not completed ({type(exc).__name__})", field=field) from exc
