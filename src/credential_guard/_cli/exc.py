from dataclasses import dataclass
from typing import TypedDict

import click
from typing_extensions import override

from ..exc import Location


@dataclass(slots=True)
class CLIError(click.ClickException):
    """
    Base class of errors reported to the user by the command line.

    Warning:
        User-defined exit codes must stay within 64 - 113, see
        https://tldp.org/LDP/abs/html/exitcodes.html.
    """

    message: str
    exit_code: int = 1

    def __post_init__(self) -> None:
        # caches click's color settings used by .show()
        click.ClickException.__init__(self, self.message)


@dataclass(slots=True)
class ConfigError(CLIError):
    pass


@dataclass(slots=True, kw_only=True)
class ConfigSyntaxError(ConfigError):
    class Context(TypedDict):
        loc: Location

    ctx: Context

    @override
    def format_message(self) -> str:
        return "Decoding failed for configuration file %r.\n\n%s" % (
            str(self.ctx["loc"]["filename"]),
            self.message,
        )


@dataclass(slots=True, kw_only=True)
class ConfigValidationError(ConfigError):
    @override
    def format_message(self) -> str:
        return "Invalid configuration input.\n\n%s" % self.message


@dataclass(slots=True, kw_only=True)
class InvalidCredentialError(CLIError):
    """Raised when the checked credential does not meet its requirements."""

    class Context(TypedDict):
        kind: str
        state: str

    ctx: Context
    exit_code: int = 65

    @override
    def format_message(self) -> str:
        return "%s is invalid (%s). %s" % (
            self.ctx["kind"].capitalize(),
            self.ctx["state"],
            self.message,
        )
