from .password import DEFAULT_PASSWORD_REQUIREMENTS, validate_password
from .player_name import (
    DEFAULT_PLAYER_NAME_REQUIREMENTS,
    sanitize_player_name,
    validate_player_name,
)
from .state import ValidationState
from .username import (
    DEFAULT_USERNAME_REQUIREMENTS,
    sanitize_username,
    validate_username,
)

__all__ = (
    "DEFAULT_PASSWORD_REQUIREMENTS",
    "DEFAULT_PLAYER_NAME_REQUIREMENTS",
    "DEFAULT_USERNAME_REQUIREMENTS",
    "ValidationState",
    "sanitize_player_name",
    "sanitize_username",
    "validate_password",
    "validate_player_name",
    "validate_username",
)
