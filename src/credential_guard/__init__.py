__version__ = "0.1.0"

from . import dto, exc, feedback
from .binding import InputFeedback, PasswordInput, UsernameInput
from .credential import AbstractCredential, Password, PlayerName, Username
from .dto.requirements import (
    PasswordRequirements,
    PlayerNameRequirements,
    UsernameRequirements,
)
from .validation import (
    ValidationState,
    sanitize_player_name,
    sanitize_username,
    validate_password,
    validate_player_name,
    validate_username,
)

__all__ = (
    "dto",
    "exc",
    "feedback",
    "AbstractCredential",
    "InputFeedback",
    "Password",
    "PasswordInput",
    "PasswordRequirements",
    "PlayerName",
    "PlayerNameRequirements",
    "Username",
    "UsernameInput",
    "UsernameRequirements",
    "ValidationState",
    "sanitize_player_name",
    "sanitize_username",
    "validate_password",
    "validate_player_name",
    "validate_username",
)
