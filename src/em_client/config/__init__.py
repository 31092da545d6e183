"""
Configuration package for em-cli.

This package contains settings management, hierarchical .env loading and
the persisted login data the CLI reuses between invocations.
"""

__all__ = ["settings", "env_loader", "login_store"]
