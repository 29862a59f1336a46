"""Placeholder templates for podcast notes."""

from podnote.templates.engine import (
    DEFAULT_FILENAME_TEMPLATE,
    DEFAULT_TEMPLATE,
    PLACEHOLDERS,
    render_filename,
    render_template,
    sanitize_filename,
)

__all__ = [
    "DEFAULT_TEMPLATE",
    "DEFAULT_FILENAME_TEMPLATE",
    "PLACEHOLDERS",
    "render_template",
    "render_filename",
    "sanitize_filename",
]
