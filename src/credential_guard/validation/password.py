import logging

from ..dto.requirements import PasswordRequirements
from .charset import count_characters, length_state
from .state import ValidationState

__all__ = ("DEFAULT_PASSWORD_REQUIREMENTS", "validate_password")

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD_REQUIREMENTS = PasswordRequirements()


def validate_password(
    password: str | None, requires: PasswordRequirements | None = None
) -> ValidationState:
    """
    Returns whether the password is valid and, if not, what failed to validate.

    Matching is case sensitive. ``None`` is treated like an empty password, so it is
    both too short and short of every required character class.

    Note:
        There is deliberately no sanitizer for passwords. Silently altering a
        password would leave the user unable to sign in with what they typed.
    """
    requires = requires or DEFAULT_PASSWORD_REQUIREMENTS

    if password is None:
        # below any minimum, even a zero one
        password, result = "", ValidationState.TOO_SHORT
    else:
        result = ValidationState.VALID

    result |= length_state(password, requires.min_length, requires.max_length)
    counts = count_characters(password, requires.valid_symbols)

    if counts.lowercase < requires.lowercase_count:
        result |= ValidationState.TOO_FEW_LOWERCASE
    if counts.uppercase < requires.uppercase_count:
        result |= ValidationState.TOO_FEW_UPPERCASE
    if counts.digits < requires.digit_count:
        result |= ValidationState.TOO_FEW_DIGITS
    if counts.symbols < requires.symbol_count:
        result |= ValidationState.TOO_FEW_SYMBOLS
    if counts.invalid:
        result |= ValidationState.INVALID_SYMBOL

    # never log the password itself
    logger.debug("validated password of length %d: %r", len(password), result)
    return result
