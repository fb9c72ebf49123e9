"""Shared machinery for the per-kind directive parsers.

A parser owns a grammar: the option keys its kind accepts, each mapped to a
literal checker. Parsing walks the directive's pairs in order and fails on
the first unknown key, missing value or wrong literal kind.
"""

from __future__ import annotations

import math
from typing import Any, Callable, ClassVar

from pydantic import ValidationError

from ..core.exceptions import DirectiveError
from ..schemas.directive import MISSING, Directive, DirectiveKind
from ..schemas.prompt_spec import LITERAL_TYPES, BasePromptSpec

LiteralCheck = Callable[[str, Any], Any]


def _literal_error(key: str, expected: str, value: Any) -> DirectiveError:
    return DirectiveError(f"expected {expected} for `{key}`, got {type(value).__name__} {value!r}")


def string_literal(key: str, value: Any) -> str:
    if not isinstance(value, str):
        raise _literal_error(key, "a string literal", value)
    return value


def bool_literal(key: str, value: Any) -> bool:
    if not isinstance(value, bool):
        raise _literal_error(key, "a boolean literal", value)
    return value


def uint_literal(key: str, value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise _literal_error(key, "an unsigned integer literal", value)
    return value


def literal_array(key: str, value: Any) -> tuple:
    if not isinstance(value, (list, tuple)):
        raise _literal_error(key, "an array literal", value)
    for item in value:
        if type(item) not in LITERAL_TYPES or (isinstance(item, float) and not math.isfinite(item)):
            raise _literal_error(key, "an array of str, int, finite float or bool literals", value)
    return tuple(value)


def uint_array(key: str, value: Any) -> tuple:
    if not isinstance(value, (list, tuple)):
        raise _literal_error(key, "an array of unsigned integer literals", value)
    for item in value:
        if isinstance(item, bool) or not isinstance(item, int) or item < 0:
            raise _literal_error(key, "an array of unsigned integer literals", value)
    return tuple(value)


def expected_keys_message(keys: list[str]) -> str:
    quoted = [f"`{key}`" for key in keys]
    if len(quoted) == 1:
        return f"expected {quoted[0]}"
    return f"expected {', '.join(quoted[:-1])} or {quoted[-1]}"


class SpecParser:
    """Base parser: subclasses set ``kind``, ``spec_model`` and ``grammar``."""

    kind: ClassVar[DirectiveKind]
    spec_model: ClassVar[type[BasePromptSpec]]
    grammar: ClassVar[dict[str, LiteralCheck]] = {}

    def parse(self, raw: Directive, **context: Any) -> BasePromptSpec:
        values: dict[str, Any] = {}
        for key, value in raw:
            check = self.grammar.get(key)
            if check is None:
                raise DirectiveError(expected_keys_message(list(self.grammar)), tag=raw.tag)
            if value is MISSING:
                raise DirectiveError(f"expected a value for `{key}`", tag=raw.tag)
            if key in values:
                raise DirectiveError(f"`{key}` is given more than once", tag=raw.tag)
            try:
                values[key] = check(key, value)
            except DirectiveError as exc:
                raise DirectiveError(exc.message, tag=raw.tag) from None
        return self.build(values, raw, **context)

    def build(self, values: dict[str, Any], raw: Directive, **context: Any) -> BasePromptSpec:
        try:
            return self.spec_model(**values, **context)
        except ValidationError as exc:
            raise DirectiveError(_first_message(exc), tag=raw.tag) from exc


def _first_message(exc: ValidationError) -> str:
    error = exc.errors()[0]
    message = str(error.get("msg", exc))
    if message.startswith("Value error, "):
        message = message[len("Value error, "):]
    location = ".".join(str(part) for part in error.get("loc", ()))
    return f"{location}: {message}" if location else message
