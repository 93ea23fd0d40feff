from credential_guard import (
    Password,
    PasswordRequirements,
    PlayerName,
    Username,
    UsernameRequirements,
    ValidationState,
)
from credential_guard.validation import (
    DEFAULT_PASSWORD_REQUIREMENTS,
    DEFAULT_USERNAME_REQUIREMENTS,
)


def test_defaults_are_substituted():
    assert Username().requires is DEFAULT_USERNAME_REQUIREMENTS
    assert Username("abc", None).requires is DEFAULT_USERNAME_REQUIREMENTS
    assert Password().requires is DEFAULT_PASSWORD_REQUIREMENTS
    assert PlayerName().requires.max_length == 50


def test_empty_credentials_are_too_short():
    assert Username().validate() == ValidationState.TOO_SHORT
    assert PlayerName().validate() == ValidationState.TOO_SHORT
    assert ValidationState.TOO_SHORT in Password().validate()


def test_value_is_mutable_and_state_is_recomputed():
    username = Username("ab")
    assert username.validate() == ValidationState.TOO_SHORT

    username.value = "abc"
    assert username.is_valid

    username.value = None
    assert username.validate() == ValidationState.TOO_SHORT
    assert username.sanitized() == ""


def test_requirements_can_be_shared():
    requires = UsernameRequirements(min_length=1)

    first, second = Username("a", requires), Username("b", requires)

    assert first.is_valid and second.is_valid
    assert first.requires is second.requires


def test_explicit_string_access():
    username = Username("Player_One")

    assert username.value == "Player_One"
    assert username.sanitized() == "player_one"


def test_password_repr_hides_value():
    password = Password("Secret_123", PasswordRequirements())

    assert "Secret_123" not in repr(password)
    assert password.is_valid
