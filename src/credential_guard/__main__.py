#!/usr/bin/env python3

import logging
import pathlib
from typing import NoReturn

import click
import lazy_object_proxy
import pydantic

from credential_guard._cli.commands.check import check
from credential_guard._cli.commands.requirements import requirements
from credential_guard._cli.commands.sanitize import sanitize
from credential_guard._cli.exc import ConfigSyntaxError, ConfigValidationError
from credential_guard._conf import Settings
from credential_guard.exc import ApplicationError, Location
from credential_guard.util.model import format_errors

ConfigOption = pathlib.Path | None

logger = logging.getLogger(__name__)


def validate_config(ctx: click.Context, fn: ConfigOption) -> Settings:
    payload = {}

    if fn is not None:
        from ruamel import yaml
        from ruamel.yaml.error import YAMLError

        _loader = yaml.YAML(typ="safe")

        try:
            payload = _loader.load(fn.read_bytes()) or {}
        except YAMLError as ex:
            raise ConfigSyntaxError(
                str(ex),
                ctx=ConfigSyntaxError.Context(loc=Location(filename=fn)),
            ) from ex

        logger.debug("loaded configuration file %r", str(fn))

    if not isinstance(payload, dict):
        raise ConfigValidationError(
            "Expected a mapping at the top level, got %s" % type(payload).__name__
        )

    try:
        res = Settings(**payload)
    except pydantic.ValidationError as ex:
        raise ConfigValidationError(format_errors(ex)) from ex

    assert isinstance(res, Settings), "Expected %r, got %r" % (
        Settings.__name__,
        res,
    )
    return res


@click.group()
@click.option("-D", "--debug/--no-debug", default=False, help="Enable debug mode.")
@click.option(
    "-c",
    "--config",
    type=click.Path(
        dir_okay=False,
        exists=True,
        readable=True,
        path_type=pathlib.Path,
    ),
    help="Path to a YAML file with username, password and player name requirements.",
)
@click.pass_context
def cli(ctx: click.Context, debug: bool, config: ConfigOption) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
    )
    ctx.obj = lazy_object_proxy.Proxy(lambda: validate_config(ctx=ctx, fn=config))


cli.add_command(check)
cli.add_command(sanitize)
cli.add_command(requirements)


def raise_unexpected_exc(ex: Exception) -> NoReturn:
    logger.critical(ex, exc_info=ex)
    raise ApplicationError("Unexpected error: %s" % ex) from ex


def main() -> None:
    try:
        cli(auto_envvar_prefix="CREDENTIAL_GUARD")
    except Exception as ex:
        raise_unexpected_exc(ex)


if __name__ == "__main__":
    main()
