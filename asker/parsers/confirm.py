"""Parser for the ``confirm`` directive (yes/no)."""

from ..schemas.directive import DirectiveKind
from ..schemas.prompt_spec import ConfirmSpec
from .base import SpecParser, bool_literal, string_literal


class ConfirmParser(SpecParser):
    kind = DirectiveKind.CONFIRM
    spec_model = ConfirmSpec
    grammar = {
        "prompt": string_literal,
        "default": bool_literal,
    }
