"""
Stack body fingerprinting.

Derives a fixed-width key from a stack body so that two large collections
of stacks can be matched by dictionary lookup instead of repeated full text
comparison. The key is computed over the body only; occurrence counts never
influence it.

The hash is 32-bit FNV-1a. It is not cryptographic and collisions between
distinct bodies are possible, which is why Snapshot verifies body equality
after a fingerprint match.
"""

from typing import Callable

FNV32_OFFSET_BASIS = 0x811C9DC5
FNV32_PRIME = 0x01000193
FNV32_MASK = 0xFFFFFFFF

# Signature shared by fingerprint() and any substitute hasher handed to Snapshot
Hasher = Callable[[str], int]


def fnv1a_32(data: bytes) -> int:
    """
    Compute the 32-bit FNV-1a hash of raw bytes.

    Args:
        data: Bytes to hash

    Returns:
        Unsigned 32-bit hash value
    """
    h = FNV32_OFFSET_BASIS
    for byte in data:
        h ^= byte
        h = (h * FNV32_PRIME) & FNV32_MASK
    return h


def fingerprint(body: str) -> int:
    """Fingerprint a stack body (UTF-8 encoded before hashing)."""
    return fnv1a_32(body.encode("utf-8"))


def format_fingerprint(value: int) -> str:
    """Render a fingerprint as 8 lowercase hex digits."""
    return f"{value & FNV32_MASK:08x}"
