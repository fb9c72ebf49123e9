"""Per-kind directive parsers, keyed by :class:`~asker.schemas.directive.DirectiveKind`."""

from ..schemas.directive import DirectiveKind
from .base import SpecParser
from .confirm import ConfirmParser
from .input import InputParser
from .multiselect import MultiSelectParser
from .password import PasswordParser
from .select import SelectParser

PARSERS: dict[DirectiveKind, SpecParser] = {
    parser.kind: parser
    for parser in (InputParser(), PasswordParser(), ConfirmParser(), SelectParser(), MultiSelectParser())
}

__all__ = [
    "PARSERS",
    "SpecParser",
    "InputParser",
    "PasswordParser",
    "ConfirmParser",
    "SelectParser",
    "MultiSelectParser",
]
