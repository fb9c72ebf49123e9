"""Directives: the per-field annotations that choose and configure a prompt.

A directive is a tag plus ordered ``key = value`` option pairs::

    directive("select", prompt="Pick one", options=["a", "b"], default=0)

Attach directives to a dataclass field with :func:`prompt_field`, or to any
annotation with ``typing.Annotated``::

    @asker
    @dataclass
    class Deploy:
        region: str = prompt_field(directive("select", options=["eu", "us"]), default="eu")
        token: Annotated[Optional[str], directive("password", prompt="Token")] = None
"""

from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from enum import Enum
from typing import Annotated, Any, Iterator, Optional, get_origin

# Field metadata key under which prompt_field() stores directives.
DIRECTIVES_KEY = "asker_directives"


class _Missing:
    """Marks an option key written without a value."""

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


class DirectiveKind(str, Enum):
    INPUT = "input"
    PASSWORD = "password"
    CONFIRM = "confirm"
    SELECT = "select"
    MULTISELECT = "multiselect"


@dataclass(frozen=True)
class Directive:
    """Raw directive as attached to one field.

    Attributes:
        tag: Directive tag, e.g. ``"select"``. Unknown tags are ignored by
            the scanner so directives of other tools can share a field.
        options: Ordered ``(key, value)`` pairs; ``value`` is :data:`MISSING`
            for a key written without one.
    """

    tag: str
    options: tuple[tuple[str, Any], ...] = ()

    def __iter__(self) -> Iterator[tuple[str, Any]]:
        return iter(self.options)

    def keys(self) -> list[str]:
        return [key for key, _ in self.options]


def directive(tag: str, *bare_keys: str, **options: Any) -> Directive:
    """Build a :class:`Directive`.

    Positional ``bare_keys`` are recorded without a value and come first;
    keyword options follow in call order.
    """
    pairs = [(key, MISSING) for key in bare_keys]
    pairs.extend(options.items())
    return Directive(tag=tag, options=tuple(pairs))


def prompt_field(*directives: Directive, **field_kwargs: Any) -> Any:
    """``dataclasses.field`` carrying prompt directives in its metadata."""
    metadata = dict(field_kwargs.pop("metadata", None) or {})
    metadata[DIRECTIVES_KEY] = tuple(metadata.get(DIRECTIVES_KEY, ())) + directives
    return dataclasses.field(metadata=metadata, **field_kwargs)


@dataclass(frozen=True)
class FieldDescriptor:
    """One field of a record, as seen by the generation pass.

    Attributes:
        name: Field name; None for positional/unnamed members.
        annotation: Declared type, possibly ``Annotated``.
        directives: Attached directives in declaration order.
    """

    name: Optional[str]
    annotation: Any
    directives: tuple[Directive, ...] = ()

    @classmethod
    def from_annotation(
        cls,
        name: Optional[str],
        annotation: Any,
        attached: tuple[Directive, ...] = (),
    ) -> FieldDescriptor:
        """Collect directives from ``Annotated`` metadata, then ``attached``."""
        carried: list[Directive] = []
        if get_origin(annotation) is Annotated:
            carried = [m for m in annotation.__metadata__ if isinstance(m, Directive)]
        return cls(name=name, annotation=annotation, directives=tuple(carried) + tuple(attached))

    @classmethod
    def from_dataclass_field(cls, f: dataclasses.Field, annotation: Any) -> FieldDescriptor:
        return cls.from_annotation(f.name, annotation, tuple(f.metadata.get(DIRECTIVES_KEY, ())))
