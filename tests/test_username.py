import pytest

from credential_guard import (
    Username,
    UsernameRequirements,
    ValidationState,
    sanitize_username,
    validate_username,
)


@pytest.mark.parametrize(
    "name",
    [
        "123",  # min length
        "abc",  # min length
        "abcdef_-.@1234567890",  # max length
        "abcd_efgh-ijkl.mnop@",  # max length
    ],
)
def test_validate_valid_username(name):
    assert validate_username(name) == ValidationState.VALID
    assert Username(name).is_valid


@pytest.mark.parametrize(
    "name, expected",
    [
        (None, ValidationState.TOO_SHORT),
        ("", ValidationState.TOO_SHORT),
        (" ", ValidationState.TOO_SHORT | ValidationState.INVALID_SYMBOL),
        ("12", ValidationState.TOO_SHORT),
        (" 1 2 3 ", ValidationState.INVALID_SYMBOL),
        ("!()$%+#?", ValidationState.INVALID_SYMBOL),
        ("-My= Na`me.", ValidationState.INVALID_SYMBOL),
        (" " * 25, ValidationState.INVALID_SYMBOL | ValidationState.TOO_LONG),
        ("0" * 25, ValidationState.TOO_LONG),
        ("01234567890123456789.123", ValidationState.TOO_LONG),
        (
            " 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 ",
            ValidationState.INVALID_SYMBOL | ValidationState.TOO_LONG,
        ),
        ("Jürgen", ValidationState.INVALID_SYMBOL),
    ],
)
def test_validate_invalid_username(name, expected):
    assert validate_username(name) == expected
    assert not Username(name).is_valid


@pytest.mark.parametrize(
    "name, expected",
    [
        (None, ""),
        ("", ""),
        ("  ", "__"),
        (" 1 2 3 ", "_1_2_3_"),
        ("!()$%+#?", "________"),
        ("-My= Na`me.", "-my__na_me."),
        ("12", "12"),  # too short
        (" " * 25, "_" * 20),  # too long
        ("00" + " " * 22 + "0", "00" + "_" * 18),  # too long
        ("01234567890123456789.123", "01234567890123456789"),  # too long
        (" 0 1 2 3 4 5 6 7 8 9 0 1 2 3 4 5 6 7 8 9 0 ", "_0_1_2_3_4_5_6_7_8_9"),
        ("_Valid.User@Name-123", "_valid.user@name-123"),
    ],
)
def test_sanitize_replaces_invalid_symbols(name, expected):
    assert sanitize_username(name) == expected
    assert Username(name).sanitized() == expected


def test_sanitize_does_not_enforce_min_length():
    sanitized = sanitize_username("a ")

    assert sanitized == "a_"
    assert validate_username(sanitized) == ValidationState.TOO_SHORT


def test_sanitize_is_stable():
    once = sanitize_username(" Some Very Long User Name ")

    assert sanitize_username(once) == once
    assert validate_username(once) == ValidationState.VALID


def test_custom_requirements():
    requires = UsernameRequirements(min_length=5, max_length=8, valid_symbols="+")

    assert validate_username("abcd", requires) == ValidationState.TOO_SHORT
    assert validate_username("ab_cd", requires) == ValidationState.INVALID_SYMBOL
    assert validate_username("ab+cd", requires) == ValidationState.VALID
    assert sanitize_username("AB_CD efgh", requires) == "ab+cd+ef"


def test_sanitize_without_valid_symbols_keeps_invalid_characters():
    requires = UsernameRequirements(valid_symbols="")

    assert sanitize_username("Mr. Smith", requires) == "mr. smith"
    assert sanitize_username("Some Rather Long Name", requires) == "some rather long nam"
    assert validate_username("a.b", requires) == ValidationState.INVALID_SYMBOL


def test_sanitize_is_stable_with_uppercase_replacement_symbol():
    requires = UsernameRequirements(valid_symbols="X_")

    once = sanitize_username("a b", requires)

    assert once == "axb"
    assert sanitize_username(once, requires) == once
