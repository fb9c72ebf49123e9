"""Value types of the generation pass.

- Directive / directive(): raw per-field annotation (tag + ordered options)
- prompt_field(): dataclass field carrying directives
- FieldDescriptor: one record field as seen by the pass
- InputSpec ... MultiSelectSpec: the resolved, canonical prompt specs
"""

from .directive import (
    DIRECTIVES_KEY,
    MISSING,
    Directive,
    DirectiveKind,
    FieldDescriptor,
    directive,
    prompt_field,
)
from .prompt_spec import (
    BasePromptSpec,
    ConfirmSpec,
    InputSpec,
    MultiSelectSpec,
    PasswordSpec,
    PromptSpec,
    SelectSpec,
)

__all__ = [
    "DIRECTIVES_KEY",
    "MISSING",
    "Directive",
    "DirectiveKind",
    "FieldDescriptor",
    "directive",
    "prompt_field",
    "BasePromptSpec",
    "InputSpec",
    "PasswordSpec",
    "ConfirmSpec",
    "SelectSpec",
    "MultiSelectSpec",
    "PromptSpec",
]
