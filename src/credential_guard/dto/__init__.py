from .requirements import (
    PASSWORD_VALID_SYMBOLS,
    UGS_USERNAME_VALID_SYMBOLS,
    AbstractRequirements,
    PasswordRequirements,
    PlayerNameRequirements,
    Requirements,
    UsernameRequirements,
)

__all__ = (
    "PASSWORD_VALID_SYMBOLS",
    "UGS_USERNAME_VALID_SYMBOLS",
    "AbstractRequirements",
    "PasswordRequirements",
    "PlayerNameRequirements",
    "Requirements",
    "UsernameRequirements",
)
