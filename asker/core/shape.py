"""Type-shape classification of field annotations.

Only one wrapper level is looked at: ``Optional[list[str]]`` is Optional
around ``list[str]``, never a list.
"""

from __future__ import annotations

import types
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Union, get_args, get_origin

_NONE_TYPE = type(None)


class ShapeKind(str, Enum):
    BARE = "bare"
    OPTIONAL = "optional"
    LIST = "list"


@dataclass(frozen=True)
class TypeShape:
    """Classified annotation.

    Attributes:
        kind: Bare, Optional-wrapped or List-wrapped.
        inner: The ``T`` of ``Optional[T]`` / ``list[T]``; the type itself when bare.
        declared: The annotation without an outer ``Annotated``.
    """

    kind: ShapeKind
    inner: Any
    declared: Any

    @property
    def is_bare(self) -> bool:
        return self.kind is ShapeKind.BARE

    @property
    def is_optional(self) -> bool:
        return self.kind is ShapeKind.OPTIONAL

    @property
    def is_list(self) -> bool:
        return self.kind is ShapeKind.LIST

    def holds(self, target: type) -> bool:
        """True for ``target`` or ``Optional[target]``."""
        return self.kind in (ShapeKind.BARE, ShapeKind.OPTIONAL) and self.inner is target


def strip_annotated(annotation: Any) -> Any:
    if get_origin(annotation) is Annotated:
        return annotation.__origin__
    return annotation


def classify(annotation: Any) -> TypeShape:
    declared = strip_annotated(annotation)
    origin = get_origin(declared)
    args = get_args(declared)

    if origin is Union or origin is types.UnionType:
        present = [arg for arg in args if arg is not _NONE_TYPE]
        if len(args) == 2 and len(present) == 1:
            return TypeShape(ShapeKind.OPTIONAL, present[0], declared)
        return TypeShape(ShapeKind.BARE, declared, declared)

    if origin is list and len(args) == 1:
        return TypeShape(ShapeKind.LIST, args[0], declared)

    return TypeShape(ShapeKind.BARE, declared, declared)


def type_name(annotation: Any) -> str:
    """Readable name of a type for diagnostics."""
    annotation = strip_annotated(annotation)
    if isinstance(annotation, type) and not get_args(annotation):
        return annotation.__name__
    return repr(annotation).replace("typing.", "")
