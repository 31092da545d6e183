"""
Core components of em-client.

This package provides the HTTP client for the Enclave Manager API,
SIGSTRUCT parsing, and the hashing helpers used to verify runtime configs.
"""

__all__ = ["client", "hashing", "sigstruct"]
