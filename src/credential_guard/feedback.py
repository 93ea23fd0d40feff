"""
Human-readable rendering of validation results and requirements, suitable for error
labels and tooltips next to an input field.
"""

from .dto.requirements import (
    AbstractRequirements,
    PasswordRequirements,
    PlayerNameRequirements,
    UsernameRequirements,
)
from .validation import ValidationState

__all__ = (
    "format_state",
    "explain",
    "describe_username_requirements",
    "describe_password_requirements",
    "describe_player_name_requirements",
)


def format_state(state: ValidationState) -> str:
    """Returns an empty string if valid, otherwise e.g. ``TooShort, InvalidSymbol``."""
    return ", ".join(flag.label for flag in state.flags)


def explain(state: ValidationState, requires: AbstractRequirements) -> list[str]:
    """
    Returns one sentence per flag set in ``state``.

    Raises:
        TypeError: ``state`` carries a flag the kind of ``requires`` cannot produce,
            e.g. a character-class flag next to username requirements.
    """
    messages: list[str] = []

    for flag in state.flags:
        match flag, requires:
            case ValidationState.TOO_SHORT, AbstractRequirements(min_length=n):
                msg = "must be at least %d characters long" % n
            case ValidationState.TOO_LONG, AbstractRequirements(max_length=n):
                msg = "must be at most %d characters long" % n
            case ValidationState.INVALID_SYMBOL, PlayerNameRequirements():
                msg = "must not contain whitespace"
            case ValidationState.INVALID_SYMBOL, (
                UsernameRequirements(valid_symbols=symbols)
                | PasswordRequirements(valid_symbols=symbols)
            ):
                msg = "may only contain english letters, digits and the symbols %s" % (
                    symbols
                )
            case ValidationState.TOO_FEW_LOWERCASE, PasswordRequirements(
                lowercase_count=n
            ):
                msg = "needs at least %d lowercase letter(s)" % n
            case ValidationState.TOO_FEW_UPPERCASE, PasswordRequirements(
                uppercase_count=n
            ):
                msg = "needs at least %d uppercase letter(s)" % n
            case ValidationState.TOO_FEW_DIGITS, PasswordRequirements(digit_count=n):
                msg = "needs at least %d digit(s)" % n
            case ValidationState.TOO_FEW_SYMBOLS, PasswordRequirements(symbol_count=n):
                msg = "needs at least %d symbol(s)" % n
            case _:
                raise TypeError(
                    "%s does not apply to %s" % (flag.label, type(requires).__name__)
                )

        messages.append(msg)

    return messages


def describe_username_requirements(requires: UsernameRequirements) -> str:
    return (
        "Username is case insensitive; between %d to %d characters; valid characters "
        "are english alphabet letters, digits, and the symbols %s"
        % (requires.min_length, requires.max_length, requires.valid_symbols)
    )


def describe_password_requirements(requires: PasswordRequirements) -> str:
    text = (
        "Password is case sensitive; between %d to %d characters; valid characters "
        "are english alphabet letters, digits, and the symbols %s"
        % (requires.min_length, requires.max_length, requires.valid_symbols)
    )
    if not requires.has_class_requirements:
        return text

    lines = ["Requires at least:"]
    for count, noun in (
        (requires.lowercase_count, "lowercase letter(s)"),
        (requires.uppercase_count, "uppercase letter(s)"),
        (requires.digit_count, "digit(s)"),
        (requires.symbol_count, "symbol(s)"),
    ):
        if count > 0:
            lines.append("%d %s" % (count, noun))

    return text + "\n\n" + "\n".join(lines)


def describe_player_name_requirements(requires: PlayerNameRequirements) -> str:
    return (
        "Player name is between %d to %d characters; any character except whitespace "
        "is valid" % (requires.min_length, requires.max_length)
    )
