"""Parser for the ``multiselect`` directive (pick several of N).

``defaults`` lists the indices checked when the prompt opens.
"""

from typing import Any

from ..schemas.directive import Directive, DirectiveKind
from ..schemas.prompt_spec import MultiSelectSpec
from .base import SpecParser, literal_array, string_literal, uint_array


class MultiSelectParser(SpecParser):
    kind = DirectiveKind.MULTISELECT
    spec_model = MultiSelectSpec
    grammar = {
        "prompt": string_literal,
        "defaults": uint_array,
        "options": literal_array,
    }

    def parse(self, raw: Directive, *, item_type: Any) -> MultiSelectSpec:
        return super().parse(raw, item_type=item_type)
