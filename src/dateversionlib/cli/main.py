import logging
import os

import click
from rich.traceback import install

from .. import __version__
from ..config.cli import config_cli
from ..utils.console import console
from ..utils.logging import configure_logging
from ..version.cli import version_cli
from .common import try_load_config

logger = logging.getLogger(__name__)


@click.group()
def version():
    """Print version info."""
    pass


@version.command("version")
def version_cmd():
    """Display the current version of dateversionlib."""
    console.print(__version__)


@click.command(
    cls=click.CommandCollection,
    sources=[version_cli, config_cli, version],
    context_settings={"help_option_names": ["-h", "--help"]},
    epilog="Versions look like YY.MM.DD-TYPE.N or YY.MM.DD.N",
)
@click.option(
    "-v", "--verbosity", count=True, help="One v for info, two for debug."
)
@click.option(
    "--config-file",
    type=str,
    help="Change the config file to use. If blank default config location is loaded.",
    required=False,
)
def cli(verbosity: int, config_file: str):
    """Commandline interface of dateversionlib

    dateversion generates date and commit count based version numbers
    and writes them to your project manifest.
    \f
    Args:
        verbosity (int): One v stands for loglevel info, two for debug
    """
    configure_logging(verbosity)
    config, h = try_load_config(config_file)
    logger.info(
        f"Running version {__version__} using config {config.underlying_file} @ md5 {h}"
    )


def main():
    """install rich as traceback handler for all cli commands"""
    install(show_locals=True, suppress=[click])
    # no git binary means build number 0, not an ImportError from GitPython
    os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

    cli()


if __name__ == "__main__":
    main()
