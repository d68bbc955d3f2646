# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Password hashing and verification using salted PBKDF2.

Assumptions:
- Each hash gets a fresh 32-byte salt and a random iteration count
- Hashes are not reversible
- Stored values are base64 artifacts (see secpass.auth.artifact)
"""
from typing import Optional, Union

from secpass.auth.artifact import ArtifactError, CredentialArtifact
from secpass.auth.compare import constant_time_equals
from secpass.auth.kdf import derive_key
from secpass.auth.salt import choose_iteration_count, generate_salt
from secpass.config import settings
from secpass.logging_utils import log_application_event, log_security_event


def hash_password(password: Optional[str]) -> str:
    """Hash a password.

    Args:
        password: Plain text password; None and "" are treated alike

    Returns:
        str: base64 artifact holding salt, derived key and iteration count

    Assumptions:
    - Each call generates a unique artifact (random salt and work factor)
    - No password policy is enforced here
    """
    salt = generate_salt()
    iteration_count = choose_iteration_count()
    derived_key = derive_key(password, salt, iteration_count)

    artifact = CredentialArtifact(
        salt=salt,
        derived_key=derived_key,
        iteration_count=iteration_count,
    )
    log_application_event("password_hashed", iteration_count=iteration_count)
    return artifact.encode(settings.iteration_width)


def verify_password(guess: Optional[str], stored: Union[str, bytes]) -> bool:
    """Verify a password against a stored artifact.

    Args:
        guess: Plain text password to verify
        stored: Artifact previously returned by hash_password

    Returns:
        bool: True if the guess re-derives the stored key

    Raises:
        DecodingError: If stored is not valid base64
        MalformedArtifactError: If stored decodes to an unusable layout

    Assumptions:
    - Uses constant-time comparison
    - Replays whatever iteration count the artifact holds
    """
    try:
        artifact = CredentialArtifact.decode(stored)
    except ArtifactError as exc:
        log_security_event(
            "credential_artifact_rejected",
            reason=type(exc).__name__,
        )
        raise

    candidate = derive_key(guess, artifact.salt, artifact.iteration_count)
    matched = constant_time_equals(candidate, artifact.derived_key)
    if not matched:
        log_security_event(
            "password_verification_failed",
            reason="key_mismatch",
            iteration_count=artifact.iteration_count,
        )
    return matched
