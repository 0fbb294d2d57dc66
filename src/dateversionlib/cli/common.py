import hashlib
import logging
import os
import sys
from typing import Optional, Tuple

import click

from ..config import ConfigError, get_config
from ..utils.errors import InvalidBuildNumberError, InvalidReleaseTypeError
from ..version.assembler import validate_release_type

logger = logging.getLogger(__name__)


def project_path_option(required=False):
    def inner(function):
        function = click.option(
            "--project-path",
            "-p",
            type=click.Path(file_okay=False),
            help="Project directory, defaults to the configured path or the "
            "current working directory.",
            required=required,
        )(function)
        return function

    return inner


def silent_option():
    def inner(function):
        function = click.option(
            "--silent/--no-silent",
            "-s",
            default=None,
            help="Suppress non-essential output.",
        )(function)
        return function

    return inner


def parse_commit_count(value: Optional[str]) -> Optional[int]:
    if value is None:
        return None
    raw = value.strip()
    if not raw.isdigit():
        raise InvalidBuildNumberError(value)
    return int(raw)


def parse_version_arguments(
    release_type: Optional[str], commit_count: Optional[str]
) -> Tuple[Optional[str], Optional[int]]:
    """Interprets the positional arguments of the generate command.

    A lone numeric argument is shorthand for a clean version with that
    commit count, e.g. `generate 5` == `generate "" 5`. Unknown flags reach
    us as arguments, so a leading dash is never a release type.
    """
    if release_type is not None and release_type.startswith("-"):
        if release_type[1:].isdigit():
            raise InvalidBuildNumberError(release_type)
        raise InvalidReleaseTypeError(release_type)

    if release_type is not None and commit_count is None and release_type.isdigit():
        return "", int(release_type)

    if release_type is not None:
        validate_release_type(release_type)

    return release_type, parse_commit_count(commit_count)


def try_load_config(filename: Optional[str]):
    app_config = get_config()

    if filename is not None:
        if not os.path.exists(filename):
            logger.error(f"Config file {filename} does not exist")
            sys.exit(10)
        app_config.model_config["explicit_config_file"] = filename

    f = filename or app_config.underlying_file

    try:
        success, errors = app_config.load_partial(filename=f)
    except ConfigError as e:
        logger.error(e)
        sys.exit(10)

    if not success:
        logger.warning(f"Config {f} loaded with {len(errors)} issues:")
        for error in errors:
            logger.warning(f"  - {error}")
        logger.warning("Continuing with defaults for these settings.")

    if f and os.path.exists(f):
        with open(f, "rb") as file:
            md5hash = hashlib.md5(file.read()).hexdigest()
    else:
        md5hash = "no-config-file"

    return app_config, md5hash
