"""Command line interface for fill-in templates."""
