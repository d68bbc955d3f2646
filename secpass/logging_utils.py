# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Logging utilities for secpass.

Provides specialized logging functions for:
- Application logs (operational)
- Security logs (rejected artifacts, failed verifications)

Assumptions:
- All logs use structlog for structured output
- Passwords, guesses, salts, keys and stored artifacts are never logged
"""
from typing import Any, Dict, Optional

from secpass.logging_config import get_logger

# Get loggers for different categories
app_logger = get_logger("secpass.application")
security_logger = get_logger("secpass.security")

SENSITIVE_FIELDS = {
    "password", "guess", "stored", "salt", "derived_key", "secret", "token",
}


def log_application_event(
    event: str,
    **kwargs: Any
) -> None:
    """Log an application operational event.

    Args:
        event: Event name (e.g., "password_hashed")
        **kwargs: Additional context (iteration_count, etc.)
    """
    app_logger.info(event, **_sanitize_data(kwargs))


def log_security_event(
    event: str,
    reason: Optional[str] = None,
    **kwargs: Any
) -> None:
    """Log a security event for forensics.

    Args:
        event: Security event type (password_verification_failed,
            credential_artifact_rejected, etc.)
        reason: Reason for security event
        **kwargs: Additional context

    Assumptions:
    - Used for failed verification and corrupt stored records
    - Helps detect guessing and tampering
    """
    security_logger.warning(
        event,
        reason=reason,
        **_sanitize_data(kwargs)
    )


def _sanitize_data(data: Dict[str, Any]) -> Dict[str, Any]:
    """Sanitize sensitive data from log entries.

    Args:
        data: Dictionary that may contain sensitive data

    Returns:
        Dict: Sanitized dictionary with sensitive fields redacted
    """
    if not data:
        return data

    sanitized = {}
    for key, value in data.items():
        if key.lower() in SENSITIVE_FIELDS:
            sanitized[key] = "[REDACTED]"
        elif isinstance(value, dict):
            sanitized[key] = _sanitize_data(value)
        elif isinstance(value, list):
            sanitized[key] = [
                _sanitize_data(item) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            sanitized[key] = value

    return sanitized
