"""Symbol lookups over the code alphabet."""

from __future__ import annotations

from pluscode.core.constants import CODE_ALPHABET, ENCODING_BASE
from pluscode.core.exceptions import UnrecognizedSymbolError

_SYMBOL_VALUES: dict[str, int] = {symbol: value for value, symbol in enumerate(CODE_ALPHABET)}


def digit_value(symbol: str) -> int:
    """Return the numeric value of an alphabet symbol (case-insensitive).

    Raises:
        UnrecognizedSymbolError: If ``symbol`` is not in the alphabet.
    """
    try:
        return _SYMBOL_VALUES[symbol.upper()]
    except KeyError:
        msg = f"Unrecognized symbol {symbol!r}"
        raise UnrecognizedSymbolError(msg, operation="digit_value") from None


def digit_symbol(value: int) -> str:
    """Return the alphabet symbol for a digit value in ``[0, 20)``.

    Raises:
        UnrecognizedSymbolError: If ``value`` is out of range.
    """
    if not 0 <= value < ENCODING_BASE:
        msg = f"Digit value {value!r} outside [0, {ENCODING_BASE})"
        raise UnrecognizedSymbolError(msg, operation="digit_symbol")
    return CODE_ALPHABET[value]
