import abc
from dataclasses import dataclass, field
from typing import Generic, TypeVar

from typing_extensions import override

from .dto.requirements import (
    AbstractRequirements,
    PasswordRequirements,
    PlayerNameRequirements,
    UsernameRequirements,
)
from .validation import (
    DEFAULT_PASSWORD_REQUIREMENTS,
    DEFAULT_PLAYER_NAME_REQUIREMENTS,
    DEFAULT_USERNAME_REQUIREMENTS,
    ValidationState,
    sanitize_player_name,
    sanitize_username,
    validate_password,
    validate_player_name,
    validate_username,
)

__all__ = ("AbstractCredential", "Username", "Password", "PlayerName")

T = TypeVar("T", bound=AbstractRequirements)


@dataclass(slots=True)
class AbstractCredential(abc.ABC, Generic[T]):
    """
    A candidate credential string paired with the requirements it is checked against.

    The value is expected to change on every keystroke while the requirements stay
    fixed. Validation results are computed on demand and never cached.
    """

    value: str | None = ""
    requires: T = None  # type: ignore[assignment]

    def __post_init__(self) -> None:
        if self.requires is None:
            self.requires = self.default_requirements()

    @classmethod
    @abc.abstractmethod
    def default_requirements(cls) -> T: ...

    @abc.abstractmethod
    def validate(self) -> ValidationState: ...

    @property
    def is_valid(self) -> bool:
        return self.validate() == ValidationState.VALID


@dataclass(slots=True)
class Username(AbstractCredential[UsernameRequirements]):
    """Usernames are case insensitive."""

    @override
    @classmethod
    def default_requirements(cls) -> UsernameRequirements:
        return DEFAULT_USERNAME_REQUIREMENTS

    @override
    def validate(self) -> ValidationState:
        return validate_username(self.value, self.requires)

    def sanitized(self) -> str:
        """
        Warning:
            The returned string can still be an invalid username, e.g. too short.
        """
        return sanitize_username(self.value, self.requires)


@dataclass(slots=True)
class Password(AbstractCredential[PasswordRequirements]):
    value: str | None = field(default="", repr=False)

    @override
    @classmethod
    def default_requirements(cls) -> PasswordRequirements:
        return DEFAULT_PASSWORD_REQUIREMENTS

    @override
    def validate(self) -> ValidationState:
        return validate_password(self.value, self.requires)


@dataclass(slots=True)
class PlayerName(AbstractCredential[PlayerNameRequirements]):
    @override
    @classmethod
    def default_requirements(cls) -> PlayerNameRequirements:
        return DEFAULT_PLAYER_NAME_REQUIREMENTS

    @override
    def validate(self) -> ValidationState:
        return validate_player_name(self.value, self.requires)

    def sanitized(self) -> str:
        return sanitize_player_name(self.value, self.requires)
