"""Unified codec exception taxonomy.

Every error raised by the codec inherits from ``PlusCodeError`` and
carries structured context fields so callers can tell which rule was
broken without parsing messages.

Taxonomy categories
-------------------
- ``MalformedCodeError``         — the input string is not a valid code.
- ``CodeClassError``             — valid code, wrong class for the operation
  (short where full is required, padded where unpadded is required).
- ``UnsupportedParameterError``  — a numeric parameter is outside its
  supported range (encode length, configuration values).
- ``RecoveryError``              — internal invariant violation during
  short-code recovery.

None of these are transient: a malformed string stays malformed.
Every exception exposes ``to_error_dict()`` for a stable structured
payload suitable for logging and batch reports.
"""

from __future__ import annotations


class PlusCodeError(Exception):
    """Base exception for all codec errors.

    Attributes:
        message: Human-readable error description.
        operation: Codec operation that raised (e.g. ``"decode"``).
        code: Machine-readable error code (e.g. ``"CODE_INVALID"``).
        rule: The specific rule that was violated (e.g.
            ``"SEPARATOR_MISSING"``), empty when not applicable.
    """

    #: Default operation for subclasses (override via class attribute or kwarg).
    default_operation: str = ""
    #: Default code for subclasses (override via class attribute or kwarg).
    default_code: str = ""

    def __init__(
        self,
        message: str = "",
        *,
        operation: str = "",
        code: str = "",
        rule: str = "",
    ) -> None:
        self.message = message
        self.operation = operation or self.default_operation
        self.code = code or self.default_code
        self.rule = rule
        super().__init__(message)

    @property
    def category(self) -> str:
        """Return the error category based on concrete class."""
        if isinstance(self, MalformedCodeError):
            return "malformed"
        if isinstance(self, CodeClassError):
            return "semantic"
        if isinstance(self, UnsupportedParameterError):
            return "parameter"
        return "internal"

    def to_error_dict(self) -> dict[str, object]:
        """Return a structured error payload with stable keys."""
        return {
            "category": self.category,
            "code": self.code,
            "operation": self.operation,
            "rule": self.rule,
            "message": self.message,
        }


# ---------------------------------------------------------------------------
# Category base classes
# ---------------------------------------------------------------------------


class MalformedCodeError(PlusCodeError):
    """The input is not a syntactically valid code."""

    default_code = "CODE_MALFORMED"


class CodeClassError(PlusCodeError):
    """A valid code of the wrong class was passed to an operation."""

    default_code = "CODE_CLASS_MISMATCH"


class UnsupportedParameterError(PlusCodeError):
    """A parameter value is outside the supported set."""

    default_code = "PARAMETER_UNSUPPORTED"


class RecoveryError(PlusCodeError):
    """No valid full code could be rebuilt from a short code."""

    default_operation = "recover_nearest"
    default_code = "RECOVERY_FAILED"


# ---------------------------------------------------------------------------
# Concrete errors
# ---------------------------------------------------------------------------


class InvalidCodeError(MalformedCodeError):
    """Raised by ``check`` with the name of the violated rule."""

    default_operation = "check"
    default_code = "CODE_INVALID"


class UnrecognizedSymbolError(MalformedCodeError):
    """Raised when a symbol or digit index is outside the alphabet."""

    default_code = "SYMBOL_UNRECOGNIZED"


class ShortCodeError(CodeClassError):
    """Raised when a short code is passed where a full code is required."""

    default_operation = "decode"
    default_code = "CODE_IS_SHORT"

    def __init__(self, message: str = "", **kwargs: str) -> None:
        kwargs.setdefault("rule", "SHORT_CODE")
        super().__init__(message, **kwargs)


class UnsupportedLengthError(UnsupportedParameterError):
    """Raised when ``encode`` is asked for an unsupported code length.

    Attributes:
        length: The rejected code length.
    """

    default_operation = "encode"
    default_code = "LENGTH_UNSUPPORTED"

    def __init__(self, length: int, message: str = "") -> None:
        self.length = length
        super().__init__(message or f"Unsupported code length {length!r}")
