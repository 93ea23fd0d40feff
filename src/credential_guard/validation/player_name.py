import logging

from ..dto.requirements import PlayerNameRequirements
from .charset import length_state
from .state import ValidationState

__all__ = (
    "DEFAULT_PLAYER_NAME_REQUIREMENTS",
    "validate_player_name",
    "sanitize_player_name",
)

logger = logging.getLogger(__name__)

DEFAULT_PLAYER_NAME_REQUIREMENTS = PlayerNameRequirements()


def validate_player_name(
    player_name: str | None, requires: PlayerNameRequirements | None = None
) -> ValidationState:
    """Player names may contain any character except whitespace."""
    if player_name is None:
        return ValidationState.TOO_SHORT

    requires = requires or DEFAULT_PLAYER_NAME_REQUIREMENTS
    result = length_state(player_name, requires.min_length, requires.max_length)

    if any(char.isspace() for char in player_name):
        result |= ValidationState.INVALID_SYMBOL

    logger.debug("validated player name %r: %r", player_name, result)
    return result


def sanitize_player_name(
    player_name: str | None, requires: PlayerNameRequirements | None = None
) -> str:
    """
    Removes all whitespace and returns at most the first ``max_length`` characters.

    Warning:
        The result can still be invalid, e.g. an empty string.
    """
    if player_name is None:
        return ""

    requires = requires or DEFAULT_PLAYER_NAME_REQUIREMENTS
    return "".join(player_name.split())[: requires.max_length]
