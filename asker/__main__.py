"""Allows ``python -m asker``."""

from .cli import main

raise SystemExit(main())
