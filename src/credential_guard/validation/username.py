import logging

from ..dto.requirements import UsernameRequirements
from .charset import ALPHANUMERIC, count_characters, length_state
from .state import ValidationState

__all__ = ("DEFAULT_USERNAME_REQUIREMENTS", "validate_username", "sanitize_username")

logger = logging.getLogger(__name__)

DEFAULT_USERNAME_REQUIREMENTS = UsernameRequirements()


def validate_username(
    username: str | None, requires: UsernameRequirements | None = None
) -> ValidationState:
    """
    Returns whether the username is valid and, if not, what failed to validate.

    Args:
        username: The username string to test for validity.
        requires: Length bounds and valid symbols. Defaults to the UGS rules.

    Returns:
        ``ValidationState.VALID`` if the username is valid, otherwise the flags
        encode what's wrong.
    """
    if username is None:
        return ValidationState.TOO_SHORT

    requires = requires or DEFAULT_USERNAME_REQUIREMENTS
    result = length_state(username, requires.min_length, requires.max_length)

    if count_characters(username, requires.valid_symbols).invalid:
        result |= ValidationState.INVALID_SYMBOL

    logger.debug("validated username %r: %r", username, result)
    return result


def sanitize_username(
    username: str | None, requires: UsernameRequirements | None = None
) -> str:
    """
    Replaces every invalid character with the first of the valid symbols, then
    lower-cases the username and caps the result to the maximum length.

    Warning:
        The returned string is not necessarily a valid username. A string that is
        too short is not padded to the minimum length, so validate it again.
    """
    if username is None:
        return ""

    requires = requires or DEFAULT_USERNAME_REQUIREMENTS
    # with no symbols to substitute, invalid characters are kept as is
    if requires.valid_symbols:
        allowed = ALPHANUMERIC | frozenset(requires.valid_symbols)
        replacement = requires.valid_symbols[0]
        username = "".join(
            char if char in allowed else replacement for char in username
        )

    return username.lower()[: requires.max_length]
