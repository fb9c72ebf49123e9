"""Code synthesizer: turns a resolved PromptSpec into a method.

Each method is emitted as Python source and compiled with ``exec`` so the
result has a plain, introspectable signature. What the directive fixed is
baked into the body as a literal; what it left open becomes a parameter,
always in the order ``(prompt, options)``::

    def ask_choice(self):
        options = ['a', 'b', 'c']
        answer = interact(
            inquirer.select(
                style=COLORFUL_STYLE,
                message='Pick',
                choices=index_choices(options),
            ),
            'choice',
        )
        self.choice = coerce(options[answer], item_type)
        return self
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional

from InquirerPy import inquirer

from ..core.convert import accepts, coerce
from ..core.exceptions import ConfigurationError, DirectiveError
from ..core.shape import TypeShape, type_name
from ..core.theme import COLORFUL_STYLE, PLAIN_STYLE, ThemeChoice, external_style
from ..schemas.directive import FieldDescriptor
from ..schemas.prompt_spec import (
    BasePromptSpec,
    ConfirmSpec,
    InputSpec,
    MultiSelectSpec,
    PasswordSpec,
    SelectSpec,
)
from .runtime import check_options, index_choices, interact

logger = logging.getLogger(__name__)

_STYLE_EXPRESSIONS = {
    ThemeChoice.NONE: "PLAIN_STYLE",
    ThemeChoice.DEFAULT_COLORFUL: "COLORFUL_STYLE",
    ThemeChoice.EXTERNAL_COLORFUL: "external_style",
}

_BASE_NAMESPACE: dict[str, Any] = {
    "inquirer": inquirer,
    "interact": interact,
    "index_choices": index_choices,
    "check_options": check_options,
    "coerce": coerce,
    "accepts": accepts,
    "Sequence": Sequence,
    "PLAIN_STYLE": PLAIN_STYLE,
    "COLORFUL_STYLE": COLORFUL_STYLE,
}


@dataclass(frozen=True)
class SynthesisContext:
    """Immutable settings shared by every method of one generation pass.

    Attributes:
        record: Name of the record class being generated.
        theme: Theme chosen once for the whole pass.
        external_style: Caller style, required for the ``external`` theme.
        method_prefix: Joined to the field name to name the method.
        exit_on_failure: Emit ``exit_on_failure=True`` on every interaction.
    """

    record: str
    theme: ThemeChoice = ThemeChoice.DEFAULT_COLORFUL
    external_style: Any = None
    method_prefix: str = "ask_"
    exit_on_failure: bool = False

    def __post_init__(self):
        if self.theme is ThemeChoice.EXTERNAL_COLORFUL:
            if self.external_style is None:
                raise ConfigurationError("theme 'external' requires a style", record=self.record)
            object.__setattr__(self, "external_style", external_style(self.external_style))

    @property
    def style_expression(self) -> str:
        return _STYLE_EXPRESSIONS[self.theme]


@dataclass(frozen=True)
class GeneratedMethod:
    """Source and metadata of one synthesized method."""

    name: str
    field: str
    kind: str
    params: tuple[str, ...]
    source: str
    namespace: Mapping[str, Any] = field(default_factory=dict, repr=False, compare=False)

    def build(self) -> Callable[..., Any]:
        scope = dict(self.namespace)
        exec(compile(self.source, f"<asker {self.name}>", "exec"), scope)
        fn = scope[self.name]
        fn.__doc__ = f"Ask for ``{self.field}`` ({self.kind}) and store the answer. Returns self."
        return fn


@dataclass
class _Emitter:
    """Accumulates the pieces of one method body."""

    ctx: SynthesisContext
    field_name: str
    factory: str
    params: list[str] = field(default_factory=list)
    setup: list[str] = field(default_factory=list)
    kwargs: list[str] = field(default_factory=list)
    assignment: str = ""
    namespace: dict[str, Any] = field(default_factory=dict)

    def prompt(self, text: Optional[str]) -> None:
        if text is not None:
            self.kwargs.append(f"message={text!r}")
        else:
            self.params.append("prompt: str")
            self.kwargs.append("message=prompt")

    def options(self, literal: Optional[tuple]) -> None:
        if literal is not None:
            self.setup.append(f"options = {list(literal)!r}")
        else:
            self.params.append("options: Sequence")
            self.setup.append(f"check_options(options, item_type, {self.field_name!r})")

    def source(self, method_name: str) -> str:
        signature = ", ".join(["self", *self.params])
        call_args = [f"style={self.ctx.style_expression}", *self.kwargs]
        lines = [f"def {method_name}({signature}):"]
        lines.extend(f"    {line}" for line in self.setup)
        lines.append("    answer = interact(")
        lines.append(f"        inquirer.{self.factory}(")
        lines.extend(f"            {arg}," for arg in call_args)
        lines.append("        ),")
        lines.append(f"        {self.field_name!r},")
        if self.ctx.exit_on_failure:
            lines.append("        exit_on_failure=True,")
        lines.append("    )")
        lines.append(f"    {self.assignment}")
        lines.append("    return self")
        return "\n".join(lines) + "\n"


def _element_type(shape: TypeShape) -> Any:
    return shape.declared if shape.is_list else shape.inner


def _emit_input(em: _Emitter, spec: InputSpec, shape: TypeShape) -> None:
    em.prompt(spec.prompt)
    item_type = _element_type(shape)
    if item_type is str or item_type is Any:
        em.assignment = f"self.{em.field_name} = answer"
        return
    em.namespace["item_type"] = item_type
    em.kwargs.append("validate=accepts(item_type)")
    em.kwargs.append(f"invalid_message={'expected ' + type_name(item_type)!r}")
    em.assignment = f"self.{em.field_name} = coerce(answer, item_type)"


def _emit_password(em: _Emitter, spec: PasswordSpec, shape: TypeShape) -> None:
    em.prompt(spec.prompt)
    em.assignment = f"self.{em.field_name} = answer"


def _emit_confirm(em: _Emitter, spec: ConfirmSpec, shape: TypeShape) -> None:
    em.prompt(spec.prompt)
    if spec.default is not None:
        em.kwargs.append(f"default={spec.default!r}")
    em.assignment = f"self.{em.field_name} = answer"


def _emit_select(em: _Emitter, spec: SelectSpec, shape: TypeShape) -> None:
    em.prompt(spec.prompt)
    if spec.default is not None:
        em.kwargs.append(f"default={spec.default!r}")
    em.options(spec.options)
    em.kwargs.append("choices=index_choices(options)")
    em.namespace["item_type"] = spec.item_type
    em.assignment = f"self.{em.field_name} = coerce(options[answer], item_type)"


def _emit_multiselect(em: _Emitter, spec: MultiSelectSpec, shape: TypeShape) -> None:
    em.prompt(spec.prompt)
    em.options(spec.options)
    if spec.defaults is not None:
        em.kwargs.append(f"choices=index_choices(options, checked={spec.defaults!r})")
    else:
        em.kwargs.append("choices=index_choices(options)")
    em.namespace["item_type"] = spec.item_type
    em.assignment = f"self.{em.field_name} = [coerce(options[index], item_type) for index in answer]"


_FACTORIES = {
    "input": ("text", _emit_input),
    "password": ("secret", _emit_password),
    "confirm": ("confirm", _emit_confirm),
    "select": ("select", _emit_select),
    "multiselect": ("checkbox", _emit_multiselect),
}


def emit_method(
    descriptor: FieldDescriptor,
    spec: BasePromptSpec,
    shape: TypeShape,
    ctx: SynthesisContext,
) -> GeneratedMethod:
    """Synthesize the interactive setter for one resolved field."""
    if not descriptor.name:
        raise DirectiveError("cannot generate a method for an unnamed field", record=ctx.record)

    factory, emit = _FACTORIES[spec.kind]
    em = _Emitter(ctx=ctx, field_name=descriptor.name, factory=factory)
    emit(em, spec, shape)

    method_name = f"{ctx.method_prefix}{descriptor.name}"
    namespace = dict(_BASE_NAMESPACE)
    namespace.update(em.namespace)
    if ctx.theme is ThemeChoice.EXTERNAL_COLORFUL:
        namespace["external_style"] = ctx.external_style

    method = GeneratedMethod(
        name=method_name,
        field=descriptor.name,
        kind=spec.kind,
        params=tuple(param.split(":")[0] for param in em.params),
        source=em.source(method_name),
        namespace=namespace,
    )
    logger.debug("Emitted %s.%s%r", ctx.record, method.name, method.params)
    return method
