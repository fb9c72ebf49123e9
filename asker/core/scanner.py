"""Directive scanner: finds the prompt directive attached to a field."""

from __future__ import annotations

import logging
from typing import Optional

from ..schemas.directive import Directive, DirectiveKind, FieldDescriptor

logger = logging.getLogger(__name__)

RECOGNIZED_TAGS = tuple(kind.value for kind in DirectiveKind)


def scan_all(field: FieldDescriptor) -> list[tuple[DirectiveKind, Directive]]:
    """Every recognized directive on ``field``, in declaration order."""
    found: list[tuple[DirectiveKind, Directive]] = []
    for attached in field.directives:
        if attached.tag not in RECOGNIZED_TAGS:
            logger.debug("Skipping directive %r on field %s", attached.tag, field.name)
            continue
        found.append((DirectiveKind(attached.tag), attached))
    return found


def scan(field: FieldDescriptor) -> Optional[tuple[DirectiveKind, Directive]]:
    """First recognized directive on ``field``, or None."""
    found = scan_all(field)
    return found[0] if found else None
