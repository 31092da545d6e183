"""
CLI interface package for em-cli.

This package contains the Typer application and its output helpers.
"""

__all__ = ["app", "output"]
