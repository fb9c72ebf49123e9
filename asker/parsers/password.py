"""Parser for the ``password`` directive (masked secret)."""

from ..schemas.directive import DirectiveKind
from ..schemas.prompt_spec import PasswordSpec
from .base import SpecParser, string_literal


class PasswordParser(SpecParser):
    kind = DirectiveKind.PASSWORD
    spec_model = PasswordSpec
    grammar = {"prompt": string_literal}
