# Elastic License 2.0
# Copyright (c) 2025 sliptonic
# SPDX-License-Identifier: Elastic-2.0

"""
Configuration management for secpass.

This module handles hashing policy and logging configuration from
environment variables.
"""
from pydantic import field_validator, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

# Largest count a signed 32-bit field can hold
MAX_ITERATION_COUNT = 2**31 - 1

SUPPORTED_ITERATION_WIDTHS = (4, 8)


class Settings(BaseSettings):
    """Settings loaded from environment variables.

    Assumptions:
    - Environment variables (SECPASS_*) override defaults
    - Iteration range is a generation-time policy only
    - Verification never consults these bounds
    """

    # Hashing policy
    min_iterations: int = 10000
    max_iterations: int = 50000
    iteration_width: int = 4

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = SettingsConfigDict(
        env_prefix="SECPASS_",
        env_file=".env",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("iteration_width")
    @classmethod
    def _check_width(cls, value: int) -> int:
        if value not in SUPPORTED_ITERATION_WIDTHS:
            raise ValueError(
                f"iteration_width must be one of {SUPPORTED_ITERATION_WIDTHS}"
            )
        return value

    @model_validator(mode="after")
    def _check_iteration_range(self) -> "Settings":
        if self.min_iterations < 1:
            raise ValueError("min_iterations must be at least 1")
        if self.max_iterations < self.min_iterations:
            raise ValueError("max_iterations must not be below min_iterations")
        if self.max_iterations > MAX_ITERATION_COUNT:
            raise ValueError(f"max_iterations must not exceed {MAX_ITERATION_COUNT}")
        return self


settings = Settings()
