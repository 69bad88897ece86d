"""Command-line interface for group-naming.

Lets provisioning scripts name resources and recognize the ones they created:

    $ group-naming shared mycluster
    jclouds-mycluster
    $ aws ec2 describe-key-pairs --query 'KeyPairs[].KeyName' --output text \\
        | tr '\\t' '\\n' | group-naming filter --group mycluster
"""

import logging
import sys

import click

from .convention import NamingConvention
from .exceptions import GroupNamingError
from .factory import NamingConventionFactory
from .models import NamingOptions
from .naming import DEFAULT_SUFFIX_LENGTH

logger = logging.getLogger(__name__)

NOT_FOUND = "-"


@click.group()
@click.version_option(package_name="group-naming")
@click.option(
    "--prefix",
    default=None,
    help="Prefix token (default: GROUP_NAMING_PREFIX env var or 'jclouds')",
)
@click.option(
    "--no-prefix",
    is_flag=True,
    help="Omit the prefix segment (for top-level resources)",
)
@click.option(
    "--delimiter",
    default=None,
    help="Segment delimiter (default: GROUP_NAMING_DELIMITER env var or '-')",
)
@click.option(
    "--suffix-length",
    type=click.IntRange(1, 16),
    default=DEFAULT_SUFFIX_LENGTH,
    help="Hex characters in unique-name suffixes (1-16, default: 3)",
)
@click.option(
    "--verbose",
    "-v",
    is_flag=True,
    help="Enable debug logging",
)
@click.pass_context
def cli(
    ctx: click.Context,
    prefix: str | None,
    no_prefix: bool,
    delimiter: str | None,
    suffix_length: int,
    verbose: bool,
) -> None:
    """group-naming resource name encoding CLI."""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s %(message)s",
        )

    try:
        options = NamingOptions.from_env(
            prefix=prefix,
            delimiter=delimiter,
            suffix_length=suffix_length,
        )
    except GroupNamingError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)

    factory = NamingConventionFactory(options)
    ctx.obj = factory.create_without_prefix() if no_prefix else factory.create()
    logger.debug("Using %r", ctx.obj)


@cli.command()
@click.argument("group")
@click.pass_obj
def shared(naming: NamingConvention, group: str) -> None:
    """Print the shared resource name for GROUP."""
    try:
        click.echo(naming.shared_name_for_group(group))
    except GroupNamingError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("group")
@click.option(
    "--count",
    "-n",
    type=click.IntRange(1, 1000),
    default=1,
    help="Number of names to generate (default: 1)",
)
@click.pass_obj
def unique(naming: NamingConvention, group: str, count: int) -> None:
    """Print unique resource name(s) for GROUP.

    Names are not guaranteed unique; retry creation on a name conflict.
    """
    try:
        for _ in range(count):
            click.echo(naming.unique_name_for_group(group))
    except GroupNamingError as e:
        click.echo(f"✗ {e}", err=True)
        sys.exit(1)


@cli.command()
@click.argument("names", nargs=-1, required=True)
@click.option(
    "--strict",
    is_flag=True,
    help="Exit with status 1 if any name has no group encoded in it",
)
@click.pass_obj
def extract(naming: NamingConvention, names: tuple[str, ...], strict: bool) -> None:
    """Print the group encoded in each of NAMES ('-' when none)."""
    missing = 0
    for name in names:
        group = naming.extract_group(name)
        if group is None:
            missing += 1
        click.echo(f"{name}\t{group if group is not None else NOT_FOUND}")

    if strict and missing:
        click.echo(f"✗ {missing} name(s) have no group encoded", err=True)
        sys.exit(1)


@cli.command("filter")
@click.option(
    "--group",
    "-g",
    default=None,
    help="Only keep names of this group (default: any group)",
)
@click.pass_obj
def filter_cmd(naming: NamingConvention, group: str | None) -> None:
    """Read names on stdin and print those created under this convention."""
    names = (line.strip() for line in click.get_text_stream("stdin"))
    for name in naming.filter_names((n for n in names if n), group):
        click.echo(name)


if __name__ == "__main__":
    cli()
