import string
from dataclasses import dataclass

from .state import ValidationState

__all__ = ("ALPHANUMERIC", "CharacterCounts", "count_characters", "length_state")

# Extended ASCII and unicode letters (ÖÔØ etc) are never allowed.
ALPHANUMERIC = frozenset(string.ascii_letters + string.digits)

_LOWERCASE = frozenset(string.ascii_lowercase)
_UPPERCASE = frozenset(string.ascii_uppercase)
_DIGITS = frozenset(string.digits)


@dataclass(slots=True)
class CharacterCounts:
    lowercase: int = 0
    uppercase: int = 0
    digits: int = 0
    symbols: int = 0
    invalid: int = 0


def count_characters(value: str, valid_symbols: str) -> CharacterCounts:
    """
    Classifies every character of ``value`` in a single pass.

    Letters and digits are counted by their ASCII class; characters listed in
    ``valid_symbols`` count as symbols; anything else, whitespace included, counts
    as invalid.
    """
    symbols = frozenset(valid_symbols) - ALPHANUMERIC
    counts = CharacterCounts()

    for char in value:
        if char in _LOWERCASE:
            counts.lowercase += 1
        elif char in _UPPERCASE:
            counts.uppercase += 1
        elif char in _DIGITS:
            counts.digits += 1
        elif char in symbols:
            counts.symbols += 1
        else:
            counts.invalid += 1

    return counts


def length_state(value: str, min_length: int, max_length: int) -> ValidationState:
    result = ValidationState.VALID
    if len(value) < min_length:
        result |= ValidationState.TOO_SHORT
    if len(value) > max_length:
        result |= ValidationState.TOO_LONG
    return result
