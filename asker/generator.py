"""The generation pass and the ``@asker`` class decorator.

``@asker`` runs once, when the class statement executes. It resolves every
field to a prompt spec, synthesizes one ``ask_<field>`` method per field and
installs them all, or raises :class:`GenerationError` listing every bad
field and installs nothing::

    @asker(theme="none")
    @dataclass
    class Deploy:
        name: str = ""
        region: str = prompt_field(directive("select", prompt="Region", options=["eu", "us"]), default="eu")
        tags: list[str] = field(default_factory=list)

    deploy = Deploy().ask_name("Name").ask_region().ask_tags("Tags", ["web", "db"])
"""

from __future__ import annotations

import dataclasses
import logging
from typing import Any, Optional, Union, get_type_hints

from pydantic import BaseModel

from .core.config import AskerConfig
from .core.exceptions import ConfigurationError, DirectiveError, GenerationError
from .core.resolver import resolve
from .core.shape import classify
from .core.theme import ThemeChoice, select_theme
from .schemas.directive import Directive, FieldDescriptor
from .synth.codegen import GeneratedMethod, SynthesisContext, emit_method

logger = logging.getLogger(__name__)

GENERATED_MARKER = "__asker_generated__"


def describe_fields(cls: type) -> list[FieldDescriptor]:
    """Field descriptors of a dataclass or pydantic model, in declaration order."""
    if isinstance(cls, type) and issubclass(cls, BaseModel):
        return [
            FieldDescriptor(
                name=name,
                annotation=info.annotation,
                directives=tuple(m for m in info.metadata if isinstance(m, Directive)),
            )
            for name, info in cls.model_fields.items()
        ]

    if dataclasses.is_dataclass(cls) and isinstance(cls, type):
        try:
            hints = get_type_hints(cls, include_extras=True)
        except NameError as exc:
            raise ConfigurationError(f"cannot resolve field annotations: {exc}", record=cls.__name__) from exc
        return [
            FieldDescriptor.from_dataclass_field(f, hints.get(f.name, f.type))
            for f in dataclasses.fields(cls)
        ]

    raise ConfigurationError(
        "expected a dataclass or a pydantic model (place @asker above @dataclass)",
        record=getattr(cls, "__name__", repr(cls)),
    )


def _is_frozen(cls: type) -> bool:
    if issubclass(cls, BaseModel):
        return bool(cls.model_config.get("frozen"))
    return cls.__dataclass_params__.frozen


def _clashes(cls: type, method: GeneratedMethod, config: AskerConfig) -> bool:
    existing = getattr(cls, method.name, None)
    if existing is None or config.overwrite_methods:
        return False
    return not getattr(existing, GENERATED_MARKER, False)


def generate_methods(
    cls: type,
    config: Optional[AskerConfig] = None,
    *,
    theme: Union[ThemeChoice, str, None] = None,
    style: Any = None,
) -> list[GeneratedMethod]:
    """Resolve and synthesize every field of ``cls`` without installing anything."""
    config = config or AskerConfig()
    fields = describe_fields(cls)
    record = cls.__name__

    ctx = SynthesisContext(
        record=record,
        theme=select_theme(theme, config),
        external_style=style if style is not None else config.external_style,
        method_prefix=config.method_prefix,
        exit_on_failure=config.exit_on_failure,
    )

    methods: list[GeneratedMethod] = []
    errors: list[DirectiveError] = []
    for descriptor in fields:
        try:
            spec = resolve(descriptor)
            method = emit_method(descriptor, spec, classify(descriptor.annotation), ctx)
            if _clashes(cls, method, config):
                raise DirectiveError(f"`{method.name}` is already defined; rename it or set overwrite_methods")
        except DirectiveError as exc:
            errors.append(exc.for_field(record, descriptor.name, descriptor.annotation))
            continue
        methods.append(method)

    if errors:
        for error in errors:
            logger.debug("Field error: %s", error)
        raise GenerationError(f"{len(errors)} of {len(fields)} field(s) could not be generated", record=record, errors=errors)

    logger.debug("Resolved %d field(s) of %s with theme %s", len(methods), record, ctx.theme.value)
    return methods


def install(cls: type, methods: list[GeneratedMethod]) -> type:
    for method in methods:
        fn = method.build()
        fn.__module__ = cls.__module__
        fn.__qualname__ = f"{cls.__qualname__}.{method.name}"
        setattr(fn, GENERATED_MARKER, True)
        setattr(cls, method.name, fn)
    cls.__asker_methods__ = tuple(methods)
    return cls


def asker(
    cls: Optional[type] = None,
    /,
    *,
    theme: Union[ThemeChoice, str, None] = None,
    style: Any = None,
    config: Optional[AskerConfig] = None,
) -> Any:
    """Class decorator generating one interactive ``ask_<field>`` method per field.

    Args:
        theme: Record-level theme (``none``, ``colorful`` or ``external``);
            overrides ``config.theme`` and ``ASKER_THEME``.
        style: InquirerPy style or style dict for the ``external`` theme.
        config: Generation options; defaults to ``AskerConfig()``.
    """

    def wrap(target: type) -> type:
        methods = generate_methods(target, config, theme=theme, style=style)
        if _is_frozen(target):
            raise ConfigurationError("cannot generate setters for a frozen record", record=target.__name__)
        install(target, methods)
        logger.info("Generated %d prompt method(s) for %s", len(methods), target.__name__)
        return target

    if cls is None:
        return wrap
    return wrap(cls)


def generated_source(cls: type) -> str:
    """Source of every method generated for ``cls``."""
    methods = getattr(cls, "__asker_methods__", None)
    if methods is None:
        raise ConfigurationError("no prompt methods were generated", record=cls.__name__)
    return "\n".join(method.source for method in methods)


def generated_method(cls: type, field: str) -> GeneratedMethod:
    for method in getattr(cls, "__asker_methods__", ()):
        if method.field == field:
            return method
    raise KeyError(field)

