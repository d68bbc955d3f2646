# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Password-based key derivation.

PBKDF2 with HMAC-SHA1 and a 20-byte key, the format existing stored
credentials were produced with.

Assumptions:
- Absent and empty passwords hash identically
- Text is UTF-8 encoded; unpaired surrogates become U+FFFD
"""
import hashlib
from typing import Optional

from secpass.config import MAX_ITERATION_COUNT

DERIVED_KEY_LENGTH = 20
PRF_DIGEST = "sha1"


def encode_password(password: Optional[str]) -> bytes:
    """Encode a password for key derivation.

    Args:
        password: Plain text password, may be None or empty

    Returns:
        bytes: UTF-8 bytes (b"" for None or "")
    """
    if not password:
        return b""
    try:
        return password.encode("utf-8")
    except UnicodeEncodeError:
        # Lone surrogates: round-trip through UTF-16 to get replacement chars
        text = password.encode("utf-16-le", "surrogatepass").decode(
            "utf-16-le", "replace"
        )
        return text.encode("utf-8")


def derive_key(
    password: Optional[str],
    salt: bytes,
    iteration_count: int,
    length: int = DERIVED_KEY_LENGTH
) -> bytes:
    """Derive a fixed-length key from a password.

    Args:
        password: Plain text password
        salt: Salt bytes
        iteration_count: Number of PBKDF2 iterations (1 to 2**31 - 1)
        length: Output length in bytes

    Returns:
        bytes: Derived key

    Raises:
        ValueError: If iteration_count is outside [1, MAX_ITERATION_COUNT]
    """
    if iteration_count < 1:
        raise ValueError("Iteration count must be positive")
    if iteration_count > MAX_ITERATION_COUNT:
        raise ValueError(f"Iteration count must not exceed {MAX_ITERATION_COUNT}")
    return hashlib.pbkdf2_hmac(
        PRF_DIGEST,
        encode_password(password),
        salt,
        iteration_count,
        dklen=length,
    )
