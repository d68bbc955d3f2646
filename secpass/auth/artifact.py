# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Credential artifact packing and unpacking.

Layout (no delimiters, boundaries from fixed lengths):

    salt[32] || derived_key[20] || iteration_count[4 or 8, little-endian]

The whole buffer is stored as standard base64 text.

Assumptions:
- Artifacts are immutable once created
- Any count in [1, 2**31 - 1] is accepted on read
- Decoding failures are errors, never a False verification result
"""
import base64
import binascii
from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from secpass.auth.kdf import DERIVED_KEY_LENGTH
from secpass.auth.salt import SALT_LENGTH
from secpass.config import MAX_ITERATION_COUNT, SUPPORTED_ITERATION_WIDTHS

PREFIX_LENGTH = SALT_LENGTH + DERIVED_KEY_LENGTH
DEFAULT_ITERATION_WIDTH = 4


class ArtifactError(ValueError):
    """Base class for stored artifact failures."""
    pass


class DecodingError(ArtifactError):
    """Raised when a stored value is not valid base64 text."""
    pass


class MalformedArtifactError(ArtifactError):
    """Raised when decoded bytes cannot be split into artifact fields."""
    pass


class CredentialArtifact(BaseModel):
    """Salt, derived key and iteration count of one hashed password."""

    model_config = ConfigDict(frozen=True, strict=True)

    salt: bytes = Field(repr=False)
    derived_key: bytes = Field(repr=False)
    iteration_count: int = Field(gt=0)

    @field_validator("salt")
    @classmethod
    def _check_salt(cls, value: bytes) -> bytes:
        if len(value) != SALT_LENGTH:
            raise ValueError(f"salt must be {SALT_LENGTH} bytes")
        return value

    @field_validator("derived_key")
    @classmethod
    def _check_derived_key(cls, value: bytes) -> bytes:
        if len(value) != DERIVED_KEY_LENGTH:
            raise ValueError(f"derived_key must be {DERIVED_KEY_LENGTH} bytes")
        return value

    def to_bytes(self, iteration_width: int = DEFAULT_ITERATION_WIDTH) -> bytes:
        """Pack the artifact into its binary layout.

        Args:
            iteration_width: Bytes used for the iteration count (4 or 8)

        Returns:
            bytes: salt || derived_key || iteration_count

        Raises:
            ValueError: If the width is unsupported or too narrow for the count
        """
        if iteration_width not in SUPPORTED_ITERATION_WIDTHS:
            raise ValueError(
                f"iteration_width must be one of {SUPPORTED_ITERATION_WIDTHS}"
            )
        try:
            count_bytes = self.iteration_count.to_bytes(iteration_width, "little")
        except OverflowError as exc:
            raise ValueError(
                f"Iteration count {self.iteration_count} does not fit in "
                f"{iteration_width} bytes"
            ) from exc
        return self.salt + self.derived_key + count_bytes

    def encode(self, iteration_width: int = DEFAULT_ITERATION_WIDTH) -> str:
        """Pack and base64-encode the artifact for storage."""
        return base64.b64encode(self.to_bytes(iteration_width)).decode("ascii")

    @classmethod
    def from_bytes(cls, raw: bytes) -> "CredentialArtifact":
        """Split decoded bytes into artifact fields.

        Args:
            raw: Decoded artifact bytes

        Returns:
            CredentialArtifact: Parsed artifact

        Raises:
            MalformedArtifactError: If the buffer is too short or the
                iteration count field is unusable
        """
        if len(raw) < PREFIX_LENGTH:
            raise MalformedArtifactError(
                f"Artifact is {len(raw)} bytes, expected at least {PREFIX_LENGTH}"
            )

        count_bytes = raw[PREFIX_LENGTH:]
        if len(count_bytes) not in SUPPORTED_ITERATION_WIDTHS:
            raise MalformedArtifactError(
                f"Iteration count field is {len(count_bytes)} bytes, "
                f"expected one of {SUPPORTED_ITERATION_WIDTHS}"
            )

        iteration_count = int.from_bytes(count_bytes, "little")
        if iteration_count < 1:
            raise MalformedArtifactError("Iteration count must be positive")
        if iteration_count > MAX_ITERATION_COUNT:
            raise MalformedArtifactError(
                f"Iteration count {iteration_count} exceeds {MAX_ITERATION_COUNT}"
            )

        return cls(
            salt=bytes(raw[:SALT_LENGTH]),
            derived_key=bytes(raw[SALT_LENGTH:PREFIX_LENGTH]),
            iteration_count=iteration_count,
        )

    @classmethod
    def decode(cls, stored: Union[str, bytes]) -> "CredentialArtifact":
        """Decode stored base64 text into an artifact.

        Whitespace is ignored; any other character outside the base64
        alphabet is rejected.

        Raises:
            DecodingError: If stored is not valid base64 text
            MalformedArtifactError: If the decoded bytes are malformed
        """
        if isinstance(stored, bytes):
            try:
                stored = stored.decode("ascii")
            except UnicodeDecodeError as exc:
                raise DecodingError("Stored value is not ASCII text") from exc
        if not isinstance(stored, str):
            raise DecodingError(
                f"Stored value must be base64 text, got {type(stored).__name__}"
            )

        try:
            raw = base64.b64decode("".join(stored.split()), validate=True)
        except (binascii.Error, ValueError) as exc:
            raise DecodingError(f"Stored value is not valid base64: {exc}") from exc

        return cls.from_bytes(raw)


def pack_artifact(
    salt: bytes,
    derived_key: bytes,
    iteration_count: int,
    iteration_width: Optional[int] = None
) -> str:
    """Build the stored base64 text from its three fields.

    Args:
        salt: 32-byte salt
        derived_key: 20-byte derived key
        iteration_count: Positive iteration count
        iteration_width: Count width in bytes (defaults to 4)

    Returns:
        str: base64 artifact
    """
    artifact = CredentialArtifact(
        salt=salt,
        derived_key=derived_key,
        iteration_count=iteration_count,
    )
    return artifact.encode(iteration_width or DEFAULT_ITERATION_WIDTH)


def unpack_artifact(stored: Union[str, bytes]) -> CredentialArtifact:
    """Parse stored base64 text. See CredentialArtifact.decode."""
    return CredentialArtifact.decode(stored)
