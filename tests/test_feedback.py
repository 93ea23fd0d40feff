import pytest

from credential_guard import (
    PasswordRequirements,
    PlayerNameRequirements,
    UsernameRequirements,
    ValidationState,
    feedback,
)


def test_format_state():
    assert feedback.format_state(ValidationState.VALID) == ""
    assert (
        feedback.format_state(ValidationState.INVALID_SYMBOL | ValidationState.TOO_SHORT)
        == "TooShort, InvalidSymbol"
    )


def test_explain_username():
    state = ValidationState.TOO_LONG | ValidationState.INVALID_SYMBOL

    assert feedback.explain(state, UsernameRequirements()) == [
        "must be at most 20 characters long",
        "may only contain english letters, digits and the symbols _-.@",
    ]


def test_explain_password():
    requires = PasswordRequirements(digit_count=2)
    state = (
        ValidationState.TOO_SHORT
        | ValidationState.TOO_FEW_UPPERCASE
        | ValidationState.TOO_FEW_DIGITS
    )

    assert feedback.explain(state, requires) == [
        "must be at least 8 characters long",
        "needs at least 1 uppercase letter(s)",
        "needs at least 2 digit(s)",
    ]


def test_explain_player_name():
    assert feedback.explain(
        ValidationState.INVALID_SYMBOL, PlayerNameRequirements()
    ) == ["must not contain whitespace"]


def test_explain_valid_is_empty():
    assert feedback.explain(ValidationState.VALID, UsernameRequirements()) == []


def test_describe_username_requirements():
    text = feedback.describe_username_requirements(UsernameRequirements())

    assert text.startswith("Username is case insensitive; between 3 to 20 characters")
    assert text.endswith("the symbols _-.@")


def test_describe_password_requirements():
    text = feedback.describe_password_requirements(
        PasswordRequirements(uppercase_count=0, digit_count=2)
    )

    assert text.startswith("Password is case sensitive; between 8 to 30 characters")
    assert text.endswith(
        "Requires at least:\n1 lowercase letter(s)\n2 digit(s)\n1 symbol(s)"
    )
    assert "uppercase" not in text


def test_describe_password_without_class_requirements():
    text = feedback.describe_password_requirements(
        PasswordRequirements(
            lowercase_count=0, uppercase_count=0, digit_count=0, symbol_count=0
        )
    )

    assert "Requires at least" not in text


def test_describe_player_name_requirements():
    assert feedback.describe_player_name_requirements(
        PlayerNameRequirements(max_length=16)
    ) == (
        "Player name is between 1 to 16 characters; any character except whitespace "
        "is valid"
    )


@pytest.mark.parametrize(
    "state, requires",
    [
        (ValidationState.TOO_FEW_DIGITS, UsernameRequirements()),
        (ValidationState.TOO_FEW_SYMBOLS, PlayerNameRequirements()),
        (
            ValidationState.TOO_SHORT | ValidationState.TOO_FEW_LOWERCASE,
            UsernameRequirements(),
        ),
    ],
)
def test_explain_rejects_flags_foreign_to_requirements(state, requires):
    with pytest.raises(TypeError):
        feedback.explain(state, requires)
