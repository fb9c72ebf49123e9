"""Element-type conversion shared by option checks and generated methods.

Conversion is pydantic lax validation: ``"3"`` becomes ``3`` for an ``int``
field, ``"red"`` becomes ``Color.RED`` for an Enum field, and values that are
already of the declared type pass through untouched.
"""

from __future__ import annotations

from collections.abc import Collection
from functools import lru_cache
from typing import Any, Callable, get_origin

from pydantic import ConfigDict, PydanticUserError, TypeAdapter, ValidationError

_ADAPTER_CONFIG = ConfigDict(arbitrary_types_allowed=True)


def _build_adapter(item_type: Any) -> TypeAdapter:
    try:
        return TypeAdapter(item_type, config=_ADAPTER_CONFIG)
    except PydanticUserError:
        # Models and pydantic dataclasses carry their own config.
        return TypeAdapter(item_type)


_cached_adapter = lru_cache(maxsize=256)(_build_adapter)


def adapter_for(item_type: Any) -> TypeAdapter:
    try:
        hash(item_type)
    except TypeError:
        return _build_adapter(item_type)
    return _cached_adapter(item_type)


def is_plain_class(item_type: Any) -> bool:
    return isinstance(item_type, type) and get_origin(item_type) is None


def coerce(value: Any, item_type: Any) -> Any:
    """Convert ``value`` into ``item_type``; raises pydantic ``ValidationError``."""
    if item_type is Any:
        return value
    if is_plain_class(item_type) and isinstance(value, item_type):
        return value
    return adapter_for(item_type).validate_python(value)


def is_compatible(value: Any, item_type: Any) -> bool:
    try:
        coerce(value, item_type)
    except ValidationError:
        return False
    return True


def accepts(item_type: Any) -> Callable[[Any], bool]:
    """Validator for InquirerPy ``validate=``: True when the text converts."""

    def _validate(text: Any) -> bool:
        return is_compatible(text, item_type)

    return _validate


def from_text(item_type: Any) -> bool:
    """False for container types, which one line of text can never populate."""
    origin = get_origin(item_type) or item_type
    if not isinstance(origin, type) or issubclass(origin, (str, bytes, bytearray)):
        return True
    return not issubclass(origin, Collection)
