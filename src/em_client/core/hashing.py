"""SHA-256 helpers used for enclave measurements and config verification."""

import hashlib
import hmac
import string

SHA256_DIGEST_SIZE = 32
SHA256_HEX_LENGTH = SHA256_DIGEST_SIZE * 2

_HEX_DIGITS = frozenset(string.hexdigits)


def sha256_digest(data: bytes) -> bytes:
    return hashlib.sha256(data).digest()


def sha256_hex(data: bytes) -> str:
    return hashlib.sha256(data).hexdigest()


def parse_sha256_hex(value: str) -> bytes:
    """Parse a hex-encoded SHA-256 digest into its 32 raw bytes.

    Raises:
        ValueError: if the string is not exactly 64 hex characters
    """
    if len(value) != SHA256_HEX_LENGTH:
        raise ValueError(
            f"SHA-256 string should be exactly {SHA256_HEX_LENGTH} characters long, "
            f"instead got a string of len {len(value)}"
        )
    bad = [c for c in value if c not in _HEX_DIGITS]
    if bad:
        raise ValueError(f"SHA-256 string contains non-hex character {bad[0]!r}")
    return bytes.fromhex(value)


def digest_matches(data: bytes, expected: bytes) -> bool:
    """Compare the SHA-256 of ``data`` with an expected raw digest."""
    return hmac.compare_digest(sha256_digest(data), expected)
