# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
secpass - salted, iterated password hashing with a portable artifact format.
"""
from secpass.auth.artifact import (
    ArtifactError,
    CredentialArtifact,
    DecodingError,
    MalformedArtifactError,
)
from secpass.auth.password import hash_password, verify_password

__version__ = "1.0.0"

__all__ = [
    "ArtifactError",
    "CredentialArtifact",
    "DecodingError",
    "MalformedArtifactError",
    "hash_password",
    "verify_password",
]
