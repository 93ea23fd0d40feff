import string
from typing import Annotated

import annotated_types
import pydantic
from pydantic.alias_generators import to_camel
from typing_extensions import Self

NonNegativeInt = Annotated[int, annotated_types.Ge(0)]

UGS_USERNAME_VALID_SYMBOLS = "_-.@"
PASSWORD_VALID_SYMBOLS = string.punctuation


class AbstractRequirements(pydantic.BaseModel):
    """Length bounds shared by every credential kind.

    Both bounds are inclusive. Instances are immutable once constructed.
    """

    model_config = pydantic.ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="forbid", frozen=True
    )

    min_length: NonNegativeInt
    max_length: NonNegativeInt

    @pydantic.model_validator(mode="after")
    def check_length_bounds(self) -> Self:
        if self.min_length > self.max_length:
            raise ValueError(
                "min_length (%d) must not exceed max_length (%d)"
                % (self.min_length, self.max_length)
            )
        return self


class UsernameRequirements(AbstractRequirements):
    """
    A UGS username is valid if it is between 3 and 20 characters long and contains
    only english letters, digits, or the symbols '_', '-', '.', '@'.

    References:
        <https://docs.unity.com/ugs/en-us/manual/authentication/manual/platform-signin-username-password>
    """

    min_length: NonNegativeInt = 3
    max_length: NonNegativeInt = 20
    valid_symbols: str = UGS_USERNAME_VALID_SYMBOLS


class PasswordRequirements(AbstractRequirements):
    """
    Attributes:
        lowercase_count: Minimum number of ASCII lowercase letters.
        uppercase_count: Minimum number of ASCII uppercase letters.
        digit_count: Minimum number of ASCII digits.
        symbol_count: Minimum number of characters taken from ``valid_symbols``.
        valid_symbols: Symbols permitted in addition to letters and digits.
    """

    min_length: NonNegativeInt = 8
    max_length: NonNegativeInt = 30
    lowercase_count: NonNegativeInt = 1
    uppercase_count: NonNegativeInt = 1
    digit_count: NonNegativeInt = 1
    symbol_count: NonNegativeInt = 1
    valid_symbols: str = PASSWORD_VALID_SYMBOLS

    @property
    def has_class_requirements(self) -> bool:
        return any(
            (
                self.lowercase_count,
                self.uppercase_count,
                self.digit_count,
                self.symbol_count,
            )
        )


class PlayerNameRequirements(AbstractRequirements):
    min_length: NonNegativeInt = 1
    max_length: NonNegativeInt = 50


Requirements = UsernameRequirements | PasswordRequirements | PlayerNameRequirements
