"""Open Location Code (Plus Codes) for Python.

Encodes latitude/longitude pairs into short alphanumeric codes naming a
rectangular cell on Earth, decodes them back to their area, validates
them, and shortens full codes relative to a nearby reference location.
"""

from pluscode.codec import (
    check,
    check_full,
    check_short,
    decode,
    describe,
    encode,
    is_full,
    is_short,
    is_valid,
    recover_nearest,
    shorten,
)
from pluscode.core.config import CodecConfig, ConfigValidationError
from pluscode.core.exceptions import (
    CodeClassError,
    InvalidCodeError,
    MalformedCodeError,
    PlusCodeError,
    RecoveryError,
    ShortCodeError,
    UnrecognizedSymbolError,
    UnsupportedLengthError,
    UnsupportedParameterError,
)
from pluscode.models import CodeArea, CodeReport

__version__ = "0.1.0"

__all__ = [
    "CodeArea",
    "CodeClassError",
    "CodeReport",
    "CodecConfig",
    "ConfigValidationError",
    "InvalidCodeError",
    "MalformedCodeError",
    "PlusCodeError",
    "RecoveryError",
    "ShortCodeError",
    "UnrecognizedSymbolError",
    "UnsupportedLengthError",
    "UnsupportedParameterError",
    "check",
    "check_full",
    "check_short",
    "decode",
    "describe",
    "encode",
    "is_full",
    "is_short",
    "is_valid",
    "recover_nearest",
    "shorten",
]
