"""
Configuration for the asker prompt generator.

Collects every option of a generation pass in one dataclass with
sensible defaults, validated on construction.
"""

import os
from dataclasses import dataclass
from typing import Any, Optional, Union

from dotenv import load_dotenv

from .exceptions import ConfigurationError
from .theme import THEME_ENV_VAR, ThemeChoice, coerce_theme

ON_FAILURE_CHOICES = ("raise", "exit")
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AskerConfig:
    """
    Options shared by every record generated with this configuration.

    A record-level ``theme`` passed to ``@asker`` overrides ``theme`` here.
    """

    # === Presentation ===
    theme: Optional[Union[ThemeChoice, str]] = None
    """Theme for emitted prompts (None = ASKER_THEME or ``colorful``)"""

    external_style: Any = None
    """InquirerPy style (or style dict) used when theme is ``external``"""

    # === Generated surface ===
    method_prefix: str = "ask_"
    """Prefix joined to the field name to form the generated method name"""

    overwrite_methods: bool = False
    """Replace attributes that already exist under a generated method name"""

    # === Runtime failures ===
    on_failure: str = "raise"
    """``raise`` an InteractionError, or ``exit`` the process on a failed prompt"""

    # === Logging ===
    log_level: str = "WARNING"
    """Logging level used by the command line tool"""

    def __post_init__(self):
        """Validate configuration values after initialization."""
        if self.theme is not None:
            self.theme = coerce_theme(self.theme)

        if not self.method_prefix or not f"{self.method_prefix}x".isidentifier():
            raise ConfigurationError(
                f"method_prefix must be a non-empty identifier prefix, got {self.method_prefix!r}"
            )

        if self.on_failure not in ON_FAILURE_CHOICES:
            raise ConfigurationError(
                f"on_failure must be one of {', '.join(ON_FAILURE_CHOICES)}, got {self.on_failure!r}"
            )

        self.log_level = str(self.log_level).upper()
        if self.log_level not in LOG_LEVELS:
            raise ConfigurationError(f"log_level must be one of {', '.join(LOG_LEVELS)}, got {self.log_level!r}")

        if self.theme is ThemeChoice.EXTERNAL_COLORFUL and self.external_style is None:
            raise ConfigurationError("theme 'external' requires external_style")

    @property
    def exit_on_failure(self) -> bool:
        return self.on_failure == "exit"

    @classmethod
    def from_env(cls, dotenv_path: Optional[str] = None, **overrides: Any) -> 'AskerConfig':
        """Create configuration from ``ASKER_*`` environment variables (and a .env file)."""
        load_dotenv(dotenv_path)
        values: dict = {
            "theme": os.getenv(THEME_ENV_VAR) or None,
            "method_prefix": os.getenv("ASKER_METHOD_PREFIX", "ask_"),
            "on_failure": os.getenv("ASKER_ON_FAILURE", "raise"),
            "log_level": os.getenv("ASKER_LOG_LEVEL", "WARNING"),
        }
        values.update(overrides)
        return cls(**values)

    @classmethod
    def for_scripts(cls) -> 'AskerConfig':
        """Create configuration for one-shot scripts: a cancelled prompt ends the process."""
        return cls(on_failure="exit")

    @classmethod
    def plain(cls) -> 'AskerConfig':
        """Create configuration with every prompt colour removed."""
        return cls(theme=ThemeChoice.NONE)
