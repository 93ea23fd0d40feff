"""
Headless input-field bindings.

A binding keeps a credential synchronized with the text of an input widget and
computes what the widget should display after each keystroke. Rendering is left to
the caller.
"""

import logging
from dataclasses import dataclass, field

from typing_extensions import TypedDict

from . import feedback
from .credential import Password, Username
from .validation import ValidationState

__all__ = ("InputFeedback", "UsernameInput", "PasswordInput")

logger = logging.getLogger(__name__)


class InputFeedback(TypedDict):
    """
    Attributes:
        text: The text the input field should hold after the event.
        error_text: Flag names of the current validation state, empty if valid.
        show_error: Whether the error label should be visible.
    """

    text: str
    error_text: str
    show_error: bool


@dataclass(slots=True)
class UsernameInput:
    """
    Username field that either allows only valid input, replacing invalid characters
    on the fly, or reports what's wrong (too short/long, invalid symbol) while the
    username is invalid.
    """

    credential: Username = field(default_factory=Username)
    sanitize_input: bool = True

    def __post_init__(self) -> None:
        if self.credential is None:
            self.credential = Username()

    @property
    def max_length(self) -> int:
        return self.credential.requires.max_length

    @property
    def tooltip(self) -> str:
        return feedback.describe_username_requirements(self.credential.requires)

    def on_input(self, text: str) -> InputFeedback:
        self.credential.value = text

        if self.sanitize_input:
            self.credential.value = self.credential.sanitized()
            logger.debug(
                "sanitized username input %r to %r", text, self.credential.value
            )
            return InputFeedback(
                text=self.credential.value, error_text="", show_error=False
            )

        return self.on_focus_in()

    def on_focus_in(self) -> InputFeedback:
        value = self.credential.value or ""
        state = self.credential.validate()
        return InputFeedback(
            text=value,
            error_text=feedback.format_state(state),
            show_error=not self.sanitize_input and bool(state) and value != "",
        )


@dataclass(slots=True)
class PasswordInput:
    """
    Masked password field reporting what's wrong while the password is invalid.

    The input length is never capped, the user might otherwise unknowingly submit a
    cropped password.
    """

    credential: Password = field(default_factory=Password)
    masked: bool = True

    def __post_init__(self) -> None:
        if self.credential is None:
            self.credential = Password()

    @property
    def max_length(self) -> None:
        return None

    @property
    def tooltip(self) -> str:
        return feedback.describe_password_requirements(self.credential.requires)

    def on_input(self, text: str) -> InputFeedback:
        self.credential.value = text
        return self.on_focus_in()

    def on_focus_in(self) -> InputFeedback:
        value = self.credential.value or ""
        state = self.credential.validate()
        return InputFeedback(
            text=value,
            error_text=feedback.format_state(state),
            show_error=state != ValidationState.VALID and value != "",
        )

    def toggle_mask(self) -> bool:
        self.masked = not self.masked
        return self.masked
