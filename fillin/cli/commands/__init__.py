"""CLI command handlers."""

from .render import render_template

__all__ = ['render_template']
