import logging
from typing import Optional

import click

from ..artifact import create_version_file
from ..cli.common import parse_version_arguments, project_path_option, silent_option
from ..config import get_config
from ..manifest import update_manifest_version
from ..scm import get_git_commit_count
from ..utils.console import console
from ..utils.date import format_day, parse_day, today
from ..utils.errors import UserFacingExceptions, VersionGenerationError
from .assembler import validate_release_type
from .generate import VersionOptions, get_project_version, get_version_info

logger = logging.getLogger(__name__)


def _options(project_path, silent, override_commit_count=None) -> VersionOptions:
    return VersionOptions.from_config(
        project_path=project_path,
        silent=silent,
        override_commit_count=override_commit_count,
    )


@click.group()
def version_cli():
    pass


@version_cli.command(
    "generate",
    short_help="Generates a date based version and writes it to the manifest.",
    context_settings={"ignore_unknown_options": True},
)
@click.argument("release_type", required=False)
@click.argument("commit_count", required=False)
@project_path_option()
@silent_option()
@click.option(
    "--manifest/--no-manifest",
    default=True,
    help="Write the version to the manifest file.",
)
@click.option(
    "--manifest-file",
    type=str,
    help="Manifest file relative to the project path (default package.json).",
)
@click.option(
    "--artifact/--no-artifact",
    default=None,
    help="Write the build metadata file (default off).",
)
@click.option(
    "--artifact-path",
    type=str,
    help="Build metadata file relative to the project path (default src/version.ts).",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Only print the version, write nothing.",
)
def generate(
    release_type: Optional[str],
    commit_count: Optional[str],
    project_path,
    silent,
    manifest,
    manifest_file,
    artifact,
    artifact_path,
    dry_run,
):
    """Generates a version of the form YY.MM.DD-RELEASE_TYPE.N

    RELEASE_TYPE is a label without whitespace (e.g. dev, beta). An empty
    string produces the clean form YY.MM.DD.N. If omitted the configured
    default (dev) is used. N is the number of commits of today, unless
    COMMIT_COUNT is given. A single numeric argument is read as COMMIT_COUNT
    of a clean version.

    The version is printed as the last line of the output.
    \f
    Args:
        release_type (str): label of the release
        commit_count (str): override of the build number
    """
    cfg = get_config()
    try:
        release_type, override = parse_version_arguments(release_type, commit_count)
        if release_type is None:
            release_type = validate_release_type(cfg.default_release_type)
    except UserFacingExceptions as e:
        raise click.ClickException(str(e))

    opts = _options(project_path, silent, override)
    manifest_file = manifest_file or cfg.manifest_file
    artifact = cfg.create_artifact if artifact is None else artifact
    artifact_path = artifact_path or cfg.artifact_path

    def say(*args, **kwargs):
        if not opts.silent:
            console.print(*args, **kwargs)

    say("[bold cyan]Generating version...[/bold cyan]")
    say(f"Version type: [magenta]{release_type or '(clean)'}[/magenta]")

    info = get_version_info(release_type, opts)
    if info is None:
        raise click.ClickException(str(VersionGenerationError()))

    say(f"[green]Version generated:[/green] [bold]{info.version}[/bold]")

    if dry_run:
        say("[yellow]Dry run, nothing written.[/yellow]")
    else:
        if manifest:
            if update_manifest_version(info.version, opts.project_path, manifest_file):
                say(f"[green]{manifest_file} updated successfully[/green]")
            else:
                say(f"[yellow]{manifest_file} not found or failed to update[/yellow]")

        if artifact:
            if create_version_file(info.version, opts.project_path, artifact_path):
                say(f"[green]{artifact_path} created/updated successfully[/green]")
            else:
                say(f"[red]Failed to create version file {artifact_path}[/red]")

    click.echo(info.version)


@version_cli.command(
    "info", short_help="Shows a generated version together with its parts."
)
@click.argument("release_type", required=False)
@project_path_option()
@click.option("--json/--text", default=False)
def info(release_type, project_path, json):
    """Generates a version without writing anything and shows its parts."""
    try:
        release_type, override = parse_version_arguments(release_type, None)
    except UserFacingExceptions as e:
        raise click.ClickException(str(e))

    opts = _options(project_path, silent=None, override_commit_count=override)
    vi = get_version_info(release_type, opts)
    if vi is None:
        raise click.ClickException(str(VersionGenerationError()))

    if json:
        console.print_json(data=vi.as_dict())
    else:
        for k, v in vi.as_dict().items():
            console.print(f"{k}: {v}")


@version_cli.command("current", short_help="Prints the version of the manifest.")
@project_path_option()
@click.option("--manifest-file", type=str, help="Manifest file to read.")
def current(project_path, manifest_file):
    """Prints the version currently stored in the manifest."""
    v = get_project_version(project_path, manifest_file)
    if v is None:
        raise click.ClickException("No version found in the manifest.")
    click.echo(v)


@version_cli.command(
    "commit-count", short_help="Prints the number of commits of a day."
)
@project_path_option()
@click.option(
    "--date",
    "day",
    type=str,
    help="Day in the format YYYY-MM-DD, defaults to today.",
)
def commit_count(project_path, day):
    """Counts the commits reachable from HEAD made on a day.
    Prints 0 if no git history is available.
    """
    try:
        d = parse_day(day) if day else today()
    except ValueError as e:
        raise click.ClickException(str(e))

    project_path = project_path or get_config().get_project_path()
    count = get_git_commit_count(d, project_path)
    logger.info(f"{count} commits on {format_day(d)} in {project_path}")
    click.echo(count)
