"""Command line interface."""
import logging

import click

from my_copy.confirm import confirm_overwrite
from my_copy.constants import BUFFER_SIZE, EXIT_FAILURE, SUCCESS_MESSAGE
from my_copy.copier import copy_file, destination_exists
from my_copy.exceptions import MyCopyError
from my_copy.version import VERSION

L = logging.getLogger(__name__)


class CopyUsageError(click.UsageError):
    """Usage error reported with the generic failure status."""

    exit_code = EXIT_FAILURE


class CopyCommand(click.Command):
    """Command whose argument and option errors exit with status 1."""

    def parse_args(self, ctx, args):
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            raise CopyUsageError(e.format_message(), ctx=e.ctx) from e


def _configure_logging(verbose: int) -> None:
    level = (logging.WARNING, logging.INFO, logging.DEBUG)[min(verbose, 2)]

    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)-8s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@click.command("my-copy", cls=CopyCommand)
@click.version_option(version=VERSION)
@click.option("-v", "--verbose", count=True, default=0, help="-v for INFO, -vv for DEBUG")
@click.option(
    "--buffer-size",
    type=click.IntRange(min=1),
    default=BUFFER_SIZE,
    show_default=True,
    help="Number of bytes moved per read/write cycle.",
)
@click.argument("source_file")
@click.argument("destination_file")
@click.pass_context
def main(ctx, verbose, buffer_size, source_file, destination_file):
    """Copy SOURCE_FILE to DESTINATION_FILE.

    If DESTINATION_FILE already exists you are asked to confirm before it is overwritten.
    """
    _configure_logging(verbose)

    try:
        if destination_exists(destination_file):
            L.debug("Destination %s exists, asking for confirmation.", destination_file)
            if not confirm_overwrite(destination_file):
                return

        copy_file(source_file, destination_file, buffer_size=buffer_size)
    except MyCopyError as e:
        L.debug("Copy aborted", exc_info=True)
        click.secho(str(e), fg="red", err=True)
        ctx.exit(EXIT_FAILURE)

    click.secho(SUCCESS_MESSAGE.format(source=source_file, destination=destination_file), fg="green")
