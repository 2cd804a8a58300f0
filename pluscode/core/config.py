"""Codec configuration loaded from environment variables.

The codec functions take explicit arguments; this configuration holds the
defaults used by batch callers. ``from_env()`` raises
``ConfigValidationError`` if a value is out of range, so bad settings
fail at startup rather than on the first call.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from pluscode.core.constants import (
    MAX_DIGIT_COUNT,
    MAX_SHORTEN_SAFETY_FACTOR,
    MIN_DIGIT_COUNT,
    PAIR_CODE_LENGTH,
    SHORTEN_SAFETY_FACTOR,
)
from pluscode.core.exceptions import UnsupportedParameterError


class ConfigValidationError(UnsupportedParameterError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The configuration key that failed validation.
        value: The invalid value.
        message: Human-readable description of the valid range.
    """

    default_operation = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}", rule=key)


@dataclass(frozen=True, slots=True)
class CodecConfig:
    """Immutable codec defaults.

    Attributes:
        default_code_length: Digits produced when encoding without an
            explicit length.
        shorten_safety_factor: Fraction of a removed prefix's cell size
            the reference point may lie from the code center.
    """

    default_code_length: int = PAIR_CODE_LENGTH
    shorten_safety_factor: float = SHORTEN_SAFETY_FACTOR

    @classmethod
    def from_env(cls) -> CodecConfig:
        """Load and validate configuration from environment variables.

        Raises:
            ConfigValidationError: If a value is out of range.
            ValueError: If a numeric environment variable cannot be
                parsed (e.g. ``PLUSCODE_DEFAULT_CODE_LENGTH=ten``).
        """
        config = cls(
            default_code_length=int(
                os.getenv("PLUSCODE_DEFAULT_CODE_LENGTH", str(PAIR_CODE_LENGTH))
            ),
            shorten_safety_factor=float(
                os.getenv("PLUSCODE_SHORTEN_SAFETY_FACTOR", str(SHORTEN_SAFETY_FACTOR))
            ),
        )
        validate_config(config)
        return config


def validate_config(config: CodecConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    length = config.default_code_length
    if not MIN_DIGIT_COUNT <= length <= MAX_DIGIT_COUNT or (
        length < PAIR_CODE_LENGTH and length % 2 == 1
    ):
        raise ConfigValidationError(
            "PLUSCODE_DEFAULT_CODE_LENGTH",
            length,
            f"must be an even number from {MIN_DIGIT_COUNT} to {PAIR_CODE_LENGTH} "
            f"or any number up to {MAX_DIGIT_COUNT}",
        )

    if not 0.0 < config.shorten_safety_factor <= MAX_SHORTEN_SAFETY_FACTOR:
        raise ConfigValidationError(
            "PLUSCODE_SHORTEN_SAFETY_FACTOR",
            config.shorten_safety_factor,
            f"must be greater than 0 and at most {MAX_SHORTEN_SAFETY_FACTOR}",
        )
