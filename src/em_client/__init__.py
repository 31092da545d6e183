"""
em-client - Python client for the Enclave Manager REST API.

This package provides typed request/response models, one client method per
Enclave Manager endpoint, and the ``em-cli`` command-line tool built on top
of them.
"""

__version__ = "0.1.0"
__author__ = "em-client developers"
__license__ = "MPL-2.0"

from typing import Final

# Package metadata
VERSION: Final[str] = __version__
PACKAGE_NAME: Final[str] = "em-client"
USER_AGENT: Final[str] = f"{PACKAGE_NAME}/{VERSION}"

__all__ = [
    "__version__",
    "VERSION",
    "PACKAGE_NAME",
    "USER_AGENT",
]
