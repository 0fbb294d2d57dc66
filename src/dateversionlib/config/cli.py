import click

from ..utils.console import console
from .config import get_config


@click.group()
def config_cli():
    pass


@config_cli.group("config")
def config():
    """Inspect the current configuration of dateversionlib."""
    pass


@config.command("show")
@click.option("--json/--text", default=False)
def show(json):
    """Prints the configuration used in the environment."""
    cfg = get_config()
    if json:
        console.print_json(cfg.model_dump_json())
    else:
        console.print(cfg.text())


@config.command("get")
@click.option(
    "--key",
    help="name of the setting, e.g. default_release_type",
    type=str,
    required=True,
)
def get(key):
    """Prints a single setting."""
    cfg = get_config()
    values = cfg.model_dump()
    if key not in values:
        raise click.ClickException(f"Unknown setting {key}")
    console.print(values[key])


@config.command("path")
def path():
    """Prints the path where the config is loaded from."""
    cfg = get_config()
    console.print(cfg.path())


@config.command("template")
def default():
    """Generates a configuration template."""
    cfg = get_config()
    console.print(cfg.generate_yaml())
