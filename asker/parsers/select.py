"""Parser for the ``select`` directive (pick one of N).

``default`` is an index into ``options``. ``item_type`` is not part of the
directive; the resolver passes it in from the field's declared type.
"""

from typing import Any

from ..schemas.directive import Directive, DirectiveKind
from ..schemas.prompt_spec import SelectSpec
from .base import SpecParser, literal_array, string_literal, uint_literal


class SelectParser(SpecParser):
    kind = DirectiveKind.SELECT
    spec_model = SelectSpec
    grammar = {
        "prompt": string_literal,
        "default": uint_literal,
        "options": literal_array,
    }

    def parse(self, raw: Directive, *, item_type: Any) -> SelectSpec:
        return super().parse(raw, item_type=item_type)
