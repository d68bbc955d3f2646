# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Constant-time byte comparison.
"""


def constant_time_equals(a: bytes, b: bytes) -> bool:
    """Compare two byte strings without short-circuiting.

    The length difference is folded into the accumulator and every byte of
    the common prefix is visited, so neither a length mismatch nor the
    position of the first differing byte ends the loop early.

    Args:
        a: First value (e.g. the re-derived key)
        b: Second value (e.g. the stored key)

    Returns:
        bool: True if equal
    """
    diff = len(a) ^ len(b)
    for x, y in zip(a, b):
        diff |= x ^ y
    return diff == 0
