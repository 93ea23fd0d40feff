import click
from rich.console import Console
from rich.text import Text

from ... import feedback
from .check import get_settings

__all__ = ["requirements"]


@click.command()
@click.argument(
    "kind",
    type=click.Choice(["username", "password", "player-name"]),
    default="username",
)
@click.pass_context
def requirements(ctx: click.Context, kind: str) -> None:
    """
    Describe the requirements a credential of the given KIND has to meet.

    Examples:

    \b
      # Show the password rules, including overrides from the environment
      $ CREDENTIAL_GUARD_PASSWORD__MIN_LENGTH=12 credential-guard requirements password
    \b
      # Show the username rules from a configuration file
      $ credential-guard -c requirements.yaml requirements username
    """
    settings = get_settings(ctx)

    match kind:
        case "username":
            text = feedback.describe_username_requirements(settings.username)
        case "password":
            text = feedback.describe_password_requirements(settings.password)
        case "player-name":
            text = feedback.describe_player_name_requirements(settings.player_name)
        case _:
            raise NotImplementedError(kind)

    Console(soft_wrap=True).print(Text(text))
