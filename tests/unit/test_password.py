# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Unit tests for password hashing and verification.

Assumptions:
- Hashes differ for the same password (salt, work factor)
- Stored values are base64 artifacts of 32 + 20 + 4 bytes
- Corrupt stored values raise instead of returning False
"""
import base64
import struct

import pytest


@pytest.mark.unit
def test_hash_password():
    """Test password hashing function.

    Assumptions:
    - Hashes are different for same password (salt)
    - Hash is not the password
    - Decoded length is salt + key + 4-byte count
    """
    from secpass.auth.password import hash_password

    password = "SecurePassword123!"
    hash1 = hash_password(password)
    hash2 = hash_password(password)

    assert hash1 != hash2
    assert password not in hash1
    assert len(base64.b64decode(hash1)) == 32 + 20 + 4


@pytest.mark.unit
def test_verify_password_correct():
    """Test password verification with correct password."""
    from secpass.auth.password import hash_password, verify_password

    password = "SecurePassword123!"
    password_hash = hash_password(password)

    assert verify_password(password, password_hash) is True


@pytest.mark.unit
def test_verify_password_incorrect():
    """Test password verification with incorrect password.

    Assumptions:
    - Similar passwords don't match
    """
    from secpass.auth.password import hash_password, verify_password

    password = "SecurePassword123!"
    password_hash = hash_password(password)

    assert verify_password("WrongPassword123!", password_hash) is False
    assert verify_password("SecurePassword123", password_hash) is False


@pytest.mark.unit
def test_generated_iteration_count_in_default_range():
    """Test that stored iteration counts follow the default policy."""
    from secpass.auth.artifact import CredentialArtifact
    from secpass.auth.password import hash_password

    for _ in range(5):
        artifact = CredentialArtifact.decode(hash_password("pw"))
        assert 10000 <= artifact.iteration_count <= 50000


@pytest.mark.unit
def test_empty_and_none_passwords_are_interchangeable(fast_policy):
    """Test that None and "" hash and verify identically.

    Assumptions:
    - No error for empty or absent passwords
    """
    from secpass.auth.password import hash_password, verify_password

    from_none = hash_password(None)
    from_empty = hash_password("")

    assert verify_password("", from_none) is True
    assert verify_password(None, from_empty) is True
    assert verify_password(None, from_none) is True
    assert verify_password("x", from_none) is False


@pytest.mark.unit
def test_unicode_password_round_trip(fast_policy):
    """Test non-ASCII passwords survive hashing."""
    from secpass.auth.password import hash_password, verify_password

    password = "pässwörd 世界 🔒"
    stored = hash_password(password)

    assert verify_password(password, stored) is True
    assert verify_password("passwörd 世界 🔒", stored) is False


@pytest.mark.unit
def test_lone_surrogate_password_does_not_raise(fast_policy):
    """Test that strings UTF-8 cannot encode directly still hash."""
    from secpass.auth.password import hash_password, verify_password

    stored = hash_password("abc\ud800")

    assert verify_password("abc\ud800", stored) is True
    assert verify_password("abc\ufffd", stored) is True


@pytest.mark.unit
def test_verify_replays_out_of_range_iteration_count(crafted_artifact):
    """Test that verification does not enforce the generation range.

    Assumptions:
    - Count of 1 is below the default minimum but still verifies
    """
    from secpass.auth.password import verify_password

    stored = crafted_artifact("hunter2", iteration_count=1)

    assert verify_password("hunter2", stored) is True
    assert verify_password("hunter3", stored) is False


@pytest.mark.unit
def test_verify_accepts_eight_byte_iteration_count(crafted_artifact):
    """Test artifacts from producers with a 64-bit native int."""
    from secpass.auth.password import verify_password

    stored = crafted_artifact("hunter2", iteration_count=3, width=8)

    assert verify_password("hunter2", stored) is True


@pytest.mark.unit
def test_hash_uses_configured_iteration_width(fast_policy, monkeypatch):
    """Test SECPASS_ITERATION_WIDTH=8 produces 60-byte artifacts."""
    from secpass.auth.password import hash_password, verify_password
    from secpass.config import settings

    monkeypatch.setattr(settings, "iteration_width", 8)
    stored = hash_password("pw")

    assert len(base64.b64decode(stored)) == 32 + 20 + 8
    assert verify_password("pw", stored) is True


@pytest.mark.unit
def test_verify_rejects_non_base64():
    """Test that non-base64 stored values raise DecodingError."""
    from secpass.auth.artifact import DecodingError
    from secpass.auth.password import verify_password

    with pytest.raises(DecodingError):
        verify_password("anything", "not-base64!!")


@pytest.mark.unit
def test_verify_rejects_short_artifact():
    """Test that stored values under 52 bytes raise MalformedArtifactError."""
    from secpass.auth.artifact import MalformedArtifactError
    from secpass.auth.password import verify_password

    stored = base64.b64encode(b"short").decode()

    with pytest.raises(MalformedArtifactError):
        verify_password("anything", stored)


@pytest.mark.unit
def test_artifact_errors_are_value_errors():
    """Test that callers can catch both failures as ValueError."""
    from secpass.auth.password import verify_password

    with pytest.raises(ValueError):
        verify_password("anything", "not-base64!!")


@pytest.mark.unit
def test_hash_logs_iteration_count_only(fast_policy):
    """Test that hashing logs the work factor and never the secret."""
    from structlog.testing import capture_logs

    from secpass.auth.password import hash_password

    with capture_logs() as logs:
        stored = hash_password("TopSecret!")

    events = [entry for entry in logs if entry["event"] == "password_hashed"]
    assert len(events) == 1
    assert 1 <= events[0]["iteration_count"] <= 16
    assert "TopSecret!" not in repr(logs)
    assert stored not in repr(logs)


@pytest.mark.unit
def test_failed_verification_logs_security_event(crafted_artifact):
    """Test that a mismatch is logged as a security warning."""
    from structlog.testing import capture_logs

    from secpass.auth.password import verify_password

    stored = crafted_artifact("right", iteration_count=2)

    with capture_logs() as logs:
        assert verify_password("wrong", stored) is False

    assert logs == [{
        "event": "password_verification_failed",
        "log_level": "warning",
        "reason": "key_mismatch",
        "iteration_count": 2,
    }]


@pytest.mark.unit
def test_rejected_artifact_logs_security_event():
    """Test that corrupt stored values are logged before raising."""
    from structlog.testing import capture_logs

    from secpass.auth.artifact import MalformedArtifactError
    from secpass.auth.password import verify_password

    with capture_logs() as logs:
        with pytest.raises(MalformedArtifactError):
            verify_password("x", base64.b64encode(b"short").decode())

    assert logs[0]["event"] == "credential_artifact_rejected"
    assert logs[0]["reason"] == "MalformedArtifactError"


@pytest.mark.unit
@pytest.mark.parametrize("count_bytes", [
    struct.pack("<I", 2**31),
    struct.pack("<I", 0xFFFFFFFF),
    struct.pack("<Q", 2**40),
])
def test_verify_rejects_count_above_int32(count_bytes):
    """Test that unreplayable iteration counts raise MalformedArtifactError.

    Assumptions:
    - The rejection is logged like any other corrupt stored value
    """
    from structlog.testing import capture_logs

    from secpass.auth.artifact import MalformedArtifactError
    from secpass.auth.password import verify_password

    stored = base64.b64encode(bytes(32) + bytes(20) + count_bytes).decode()

    with capture_logs() as logs:
        with pytest.raises(MalformedArtifactError):
            verify_password("x", stored)

    assert logs[0]["event"] == "credential_artifact_rejected"
