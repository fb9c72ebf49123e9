"""Parser for the ``input`` directive (free text)."""

from ..schemas.directive import DirectiveKind
from ..schemas.prompt_spec import InputSpec
from .base import SpecParser, string_literal


class InputParser(SpecParser):
    kind = DirectiveKind.INPUT
    spec_model = InputSpec
    grammar = {"prompt": string_literal}
