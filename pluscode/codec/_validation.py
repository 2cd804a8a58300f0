"""Code validation.

Responsibilities:
- Syntax rules: alphabet, separator placement, padding layout, digit count
- Range rules for full codes: the first pair must fall on Earth
- Classification into short and full codes

``check`` reports the first rule broken; the predicates wrap it.
"""

from __future__ import annotations

from pluscode.codec._alphabet import digit_value
from pluscode.core.constants import (
    CODE_ALPHABET,
    ENCODING_BASE,
    LATITUDE_MAX,
    LONGITUDE_MAX,
    MAX_DIGIT_COUNT,
    PADDING_CHARACTER,
    SEPARATOR,
    SEPARATOR_POSITION,
)
from pluscode.core.exceptions import (
    CodeClassError,
    InvalidCodeError,
    MalformedCodeError,
    ShortCodeError,
)

# ---------------------------------------------------------------------------
# Rule names (reported in ``InvalidCodeError.rule``)
# ---------------------------------------------------------------------------

RULE_EMPTY_CODE = "EMPTY_CODE"
RULE_SEPARATOR_MISSING = "SEPARATOR_MISSING"
RULE_SEPARATOR_DUPLICATED = "SEPARATOR_DUPLICATED"
RULE_SEPARATOR_POSITION = "SEPARATOR_POSITION"
RULE_INVALID_CHARACTER = "INVALID_CHARACTER"
RULE_PADDING_AT_START = "PADDING_AT_START"
RULE_PADDING_IN_SHORT_CODE = "PADDING_IN_SHORT_CODE"
RULE_PADDING_NOT_CONTIGUOUS = "PADDING_NOT_CONTIGUOUS"
RULE_PADDING_ODD_LENGTH = "PADDING_ODD_LENGTH"
RULE_PADDING_BEFORE_SUFFIX = "PADDING_BEFORE_SUFFIX"
RULE_SINGLE_GRID_DIGIT = "SINGLE_GRID_DIGIT"
RULE_TOO_MANY_DIGITS = "TOO_MANY_DIGITS"
RULE_LATITUDE_OUT_OF_RANGE = "LATITUDE_OUT_OF_RANGE"
RULE_LONGITUDE_OUT_OF_RANGE = "LONGITUDE_OUT_OF_RANGE"

_SPECIAL_CHARACTERS = SEPARATOR + PADDING_CHARACTER


def _invalid(code: str, reason: str, rule: str) -> InvalidCodeError:
    return InvalidCodeError(f"Invalid code {code!r}: {reason}", rule=rule)


def check(code: str) -> None:
    """Validate the syntax of a short or full code.

    Raises:
        InvalidCodeError: Naming the first rule the code breaks.
    """
    if not code:
        raise _invalid(code, "code is empty", RULE_EMPTY_CODE)

    separator = code.find(SEPARATOR)
    if separator == -1:
        raise _invalid(code, "separator missing", RULE_SEPARATOR_MISSING)
    if code.count(SEPARATOR) > 1:
        raise _invalid(code, "more than one separator", RULE_SEPARATOR_DUPLICATED)
    if separator > SEPARATOR_POSITION or separator % 2 == 1:
        raise _invalid(code, f"separator at illegal position {separator}", RULE_SEPARATOR_POSITION)

    for index, char in enumerate(code):
        if char not in _SPECIAL_CHARACTERS and char.upper() not in CODE_ALPHABET:
            raise _invalid(
                code, f"unrecognized character {char!r} at position {index}", RULE_INVALID_CHARACTER
            )

    padding = code.find(PADDING_CHARACTER)
    if padding != -1:
        if padding == 0:
            raise _invalid(code, "starts with padding", RULE_PADDING_AT_START)
        if separator < SEPARATOR_POSITION:
            raise _invalid(code, "short codes cannot be padded", RULE_PADDING_IN_SHORT_CODE)
        if padding > separator or separator != len(code) - 1:
            raise _invalid(
                code, "padded codes must end with the separator", RULE_PADDING_BEFORE_SUFFIX
            )
        run = code[padding:separator]
        if run.strip(PADDING_CHARACTER):
            raise _invalid(code, "padding not contiguous", RULE_PADDING_NOT_CONTIGUOUS)
        if len(run) % 2 == 1:
            raise _invalid(code, "odd number of padding characters", RULE_PADDING_ODD_LENGTH)

    if len(code) - separator - 1 == 1:
        raise _invalid(code, "single digit after separator", RULE_SINGLE_GRID_DIGIT)

    digits = len(code) - 1 - code.count(PADDING_CHARACTER)
    if digits == 0:
        raise _invalid(code, "code has no digits", RULE_EMPTY_CODE)
    if digits > MAX_DIGIT_COUNT:
        raise _invalid(code, f"too many digits ({digits} > {MAX_DIGIT_COUNT})", RULE_TOO_MANY_DIGITS)

    if separator == SEPARATOR_POSITION:
        if digit_value(code[0]) * ENCODING_BASE >= LATITUDE_MAX * 2:
            raise _invalid(code, "first latitude digit out of range", RULE_LATITUDE_OUT_OF_RANGE)
        if digit_value(code[1]) * ENCODING_BASE >= LONGITUDE_MAX * 2:
            raise _invalid(code, "first longitude digit out of range", RULE_LONGITUDE_OUT_OF_RANGE)


def is_valid(code: str) -> bool:
    """Whether ``code`` is a syntactically valid short or full code."""
    try:
        check(code)
    except MalformedCodeError:
        return False
    return True


def is_short(code: str) -> bool:
    """Whether ``code`` is valid and omits the leading area digits."""
    return is_valid(code) and code.find(SEPARATOR) < SEPARATOR_POSITION


def is_full(code: str) -> bool:
    """Whether ``code`` is valid and carries the complete area prefix."""
    return is_valid(code) and code.find(SEPARATOR) == SEPARATOR_POSITION


def check_short(code: str) -> None:
    """Validate that ``code`` is a short code.

    Raises:
        InvalidCodeError: If the code is malformed.
        CodeClassError: If the code is a full code.
    """
    check(code)
    if code.find(SEPARATOR) == SEPARATOR_POSITION:
        msg = f"Code {code!r} is a full code"
        raise CodeClassError(msg, operation="check_short", rule="NOT_SHORT")


def check_full(code: str) -> None:
    """Validate that ``code`` is a full code.

    Raises:
        InvalidCodeError: If the code is malformed.
        ShortCodeError: If the code is a short code.
    """
    check(code)
    if code.find(SEPARATOR) < SEPARATOR_POSITION:
        msg = f"Code {code!r} is a short code"
        raise ShortCodeError(msg, operation="check_full")
