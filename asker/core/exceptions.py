"""
Custom exceptions for the asker prompt generator.

Provides specific exception types for the two failure layers: resolving a
record's directives at class-creation time, and the interactive call made
by a generated method at run time.
"""

from collections import Counter
from typing import Any, Dict, List, Optional


class AskerError(Exception):
    """Base exception for all asker errors."""

    def __init__(self, message: str, record: Optional[str] = None, field: Optional[str] = None):
        self.message = message
        self.record = record
        self.field = field

        # Build descriptive error message
        error_parts = [message]
        if record is not None:
            error_parts.append(f"Record: {record}")
        if field is not None:
            error_parts.append(f"Field: {field}")

        super().__init__(" | ".join(error_parts))


class DirectiveError(AskerError):
    """Raised when a field's directive or type cannot be resolved to a prompt."""

    def __init__(
        self,
        message: str,
        record: Optional[str] = None,
        field: Optional[str] = None,
        tag: Optional[str] = None,
        annotation: Any = None,
    ):
        self.tag = tag
        self.annotation = annotation
        super().__init__(message, record=record, field=field)

    def for_field(self, record: Optional[str], field: Optional[str], annotation: Any = None) -> "DirectiveError":
        """Return a copy of this error carrying the offending field's context."""
        return type(self)(
            self.message,
            record=record if self.record is None else self.record,
            field=field if self.field is None else self.field,
            tag=self.tag,
            annotation=annotation if self.annotation is None else self.annotation,
        )


class ShapeMismatchError(DirectiveError):
    """Raised when a directive kind is attached to a field of an unsupported type."""
    pass


class InteractionError(AskerError):
    """Raised by a generated method when the interactive prompt does not complete."""
    pass


class OptionError(AskerError, TypeError):
    """Raised by a generated method when a call-time option does not fit the field type."""
    pass


class ConfigurationError(AskerError, ValueError):
    """Raised when configuration is invalid."""
    pass


class GenerationError(AskerError):
    """
    Raised when a record cannot be generated.

    Carries every field-level error found during the pass, so a single run
    reports all offending fields. No method is installed on the record.
    """

    def __init__(self, message: str, record: Optional[str] = None, errors: Optional[List[AskerError]] = None):
        self.summary = message
        self.errors = list(errors or [])
        details = "; ".join(str(error) for error in self.errors)
        full = f"{message}: {details}" if details else message
        super().__init__(full, record=record)

    def get_error_summary(self) -> Dict[str, int]:
        """Count the field errors by exception class name."""
        return dict(Counter(type(error).__name__ for error in self.errors))

    @property
    def fields(self) -> List[Optional[str]]:
        """Names of the fields that failed, in declaration order."""
        return [error.field for error in self.errors]
