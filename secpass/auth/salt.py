# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Salt and work-factor generation.

Assumptions:
- All randomness comes from the OS CSPRNG via secrets
- Iteration count is drawn per hash so no single work factor is shared
"""
import secrets
from typing import Optional

from secpass.config import settings

SALT_LENGTH = 32


def generate_salt(length: int = SALT_LENGTH) -> bytes:
    """Generate a random salt.

    Args:
        length: Number of bytes (32 for stored artifacts)

    Returns:
        bytes: Cryptographically random salt
    """
    return secrets.token_bytes(length)


def choose_iteration_count(
    minimum: Optional[int] = None,
    maximum: Optional[int] = None
) -> int:
    """Pick an iteration count uniformly from an inclusive range.

    Args:
        minimum: Lower bound (defaults to settings.min_iterations)
        maximum: Upper bound (defaults to settings.max_iterations)

    Returns:
        int: Iteration count in [minimum, maximum]

    Raises:
        ValueError: If the range is empty or starts below 1
    """
    low = settings.min_iterations if minimum is None else minimum
    high = settings.max_iterations if maximum is None else maximum
    if low < 1:
        raise ValueError("Iteration count must be positive")
    if high < low:
        raise ValueError(f"Empty iteration range [{low}, {high}]")
    return low + secrets.randbelow(high - low + 1)
