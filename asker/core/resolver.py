"""Prompt-kind resolver: one field in, one PromptSpec out.

Resolution order:

1. Scan the field's directives. More than one recognized directive is an
   error; exactly one is dispatched to its kind's parser after the kind's
   type-shape rule is checked.
2. Without a directive, infer the kind from the shape: ``list[T]`` asks a
   multiselect over ``T``, ``bool`` / ``Optional[bool]`` asks a confirm, and
   everything else asks for free text.

Free text only populates types that convert from a single string, so an
input on a container such as ``dict[str, int]`` or ``Optional[list[str]]``
is rejected.

Every failure is a :class:`~asker.core.exceptions.DirectiveError` carrying
the field's name and declared type.
"""

from __future__ import annotations

import logging
from typing import Callable

from ..parsers import PARSERS
from ..schemas.directive import Directive, DirectiveKind, FieldDescriptor
from ..schemas.prompt_spec import BasePromptSpec, ConfirmSpec, InputSpec, MultiSelectSpec
from .convert import from_text
from .exceptions import DirectiveError, ShapeMismatchError
from .scanner import scan_all
from .shape import TypeShape, classify, type_name

logger = logging.getLogger(__name__)


def resolve(field: FieldDescriptor) -> BasePromptSpec:
    try:
        spec = _resolve(field)
    except DirectiveError as exc:
        raise exc.for_field(None, field.name, field.annotation) from exc.__cause__
    logger.debug("Field %s resolved to %s", field.name, spec.kind)
    return spec


def _resolve(field: FieldDescriptor) -> BasePromptSpec:
    found = scan_all(field)
    shape = classify(field.annotation)

    if len(found) > 1:
        tags = ", ".join(f"`{kind.value}`" for kind, _ in found)
        raise DirectiveError(f"only one prompt directive is allowed per field, found {tags}")

    if not found:
        return infer_default(shape)

    kind, raw = found[0]
    return _DISPATCH[kind](raw, shape)


def infer_default(shape: TypeShape) -> BasePromptSpec:
    """Spec for a field with no recognized directive."""
    if shape.is_list:
        return MultiSelectSpec(item_type=shape.inner)
    if shape.holds(bool):
        return ConfirmSpec()
    _require_text(shape)
    return InputSpec()


def _require(shape: TypeShape, target: type, kind: DirectiveKind) -> None:
    if not shape.holds(target):
        name = target.__name__
        raise ShapeMismatchError(
            f"{kind.value} only supports `{name}` or `Optional[{name}]` type, got `{type_name(shape.declared)}`",
            tag=kind.value,
        )


def _require_text(shape: TypeShape) -> None:
    target = shape.declared if shape.is_list else shape.inner
    if not from_text(target):
        hint = "; use multiselect" if shape.is_list else ""
        raise ShapeMismatchError(
            f"input cannot convert text into `{type_name(target)}`{hint}",
            tag=DirectiveKind.INPUT.value,
        )


def _input(raw: Directive, shape: TypeShape) -> BasePromptSpec:
    _require_text(shape)
    return PARSERS[DirectiveKind.INPUT].parse(raw)


def _password(raw: Directive, shape: TypeShape) -> BasePromptSpec:
    _require(shape, str, DirectiveKind.PASSWORD)
    return PARSERS[DirectiveKind.PASSWORD].parse(raw)


def _confirm(raw: Directive, shape: TypeShape) -> BasePromptSpec:
    _require(shape, bool, DirectiveKind.CONFIRM)
    return PARSERS[DirectiveKind.CONFIRM].parse(raw)


def _select(raw: Directive, shape: TypeShape) -> BasePromptSpec:
    # Optional[T] selects a T; any other shape selects the declared type itself.
    item_type = shape.inner if shape.is_optional else shape.declared
    return PARSERS[DirectiveKind.SELECT].parse(raw, item_type=item_type)


def _multiselect(raw: Directive, shape: TypeShape) -> BasePromptSpec:
    if not shape.is_list:
        raise ShapeMismatchError(
            f"multiselect only supports `List` type, got `{type_name(shape.declared)}`",
            tag=DirectiveKind.MULTISELECT.value,
        )
    return PARSERS[DirectiveKind.MULTISELECT].parse(raw, item_type=shape.inner)


_DISPATCH: dict[DirectiveKind, Callable[[Directive, TypeShape], BasePromptSpec]] = {
    DirectiveKind.INPUT: _input,
    DirectiveKind.PASSWORD: _password,
    DirectiveKind.CONFIRM: _confirm,
    DirectiveKind.SELECT: _select,
    DirectiveKind.MULTISELECT: _multiselect,
}
