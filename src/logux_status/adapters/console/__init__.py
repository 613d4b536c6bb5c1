"""Console adapters."""

from __future__ import annotations

from .rich_console import RichConsoleSink, css_to_style

__all__ = ["RichConsoleSink", "css_to_style"]
