"""
envrecord CLI.

Demo commands that load a sample configuration from the environment:
- envrecord show: Parse DemoConfig and print the result
- envrecord keys: List the environment variables DemoConfig reads
"""

import logging
import sys
from dataclasses import dataclass, fields
from typing import Optional

import click

from envrecord import __version__
from envrecord.env import parse
from envrecord.errors import EnvError
from envrecord.fields import U16, U64, describe
from envrecord.options import EnvOptions
from envrecord.resolver import lookup_key

logger = logging.getLogger(__name__)


@dataclass
class DemoConfig:
    """Sample record type used by the demo commands."""
    foo: U16
    bar: bool
    baz: str
    boom: Optional[U64] = None


def setup_logging(verbose: bool = False):
    """Configure logging for CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


@click.group()
@click.version_option(version=__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose output')
@click.pass_context
def cli(ctx, verbose):
    """Load typed configuration from environment variables."""
    ctx.ensure_object(dict)
    ctx.obj['verbose'] = verbose
    setup_logging(verbose)


@cli.command()
@click.option('--prefix', '-p', default='', help='Prefix prepended to every variable name')
@click.option('--env-file', '-e', type=click.Path(exists=True, dir_okay=False),
              help='Read defaults from a .env file')
def show(prefix, env_file):
    """Parse DemoConfig from the environment and print it."""
    try:
        config = parse(DemoConfig, EnvOptions(prefix=prefix), env_file=env_file)
    except EnvError as e:
        click.echo(f"error parsing config from env: {e}", err=True)
        sys.exit(1)

    for field in fields(config):
        click.echo(f"{field.name} = {getattr(config, field.name)!r}")


@cli.command()
@click.option('--prefix', '-p', default='', help='Prefix prepended to every variable name')
def keys(prefix):
    """List the environment variables DemoConfig reads."""
    options = EnvOptions(prefix=prefix)
    for descriptor in describe(DemoConfig):
        if descriptor.optional:
            status = 'optional'
        elif descriptor.has_default:
            status = 'default'
        else:
            status = 'required'
        click.echo(f"{lookup_key(descriptor.name, options)}\t{descriptor.type_name}\t{status}")


def main():
    """Console script entry point."""
    cli(obj={})


if __name__ == "__main__":
    main()
