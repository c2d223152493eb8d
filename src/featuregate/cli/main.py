"""FeatureGate CLI - fgate command."""

from pathlib import Path

import click

from featuregate import __version__
from featuregate.cli.input import input_command
from featuregate.cli.load import load_command
from featuregate.config.loader import load_config
from featuregate.core.errors import ConfigError
from featuregate.core.logging import configure_logging


@click.group()
@click.version_option(version=__version__, prog_name="fgate")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML config file (default: ~/.config/featuregate/config.yaml)",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, config_path: Path | None) -> None:
    """FeatureGate - interactive Gherkin feature supply."""
    try:
        config = load_config(config_path)
    except ConfigError as e:
        raise click.ClickException(str(e)) from e
    if verbose:
        config.logging.level = "DEBUG"
    configure_logging(config=config.logging)

    ctx.ensure_object(dict)
    ctx.obj["config"] = config


cli.add_command(input_command, name="input")
cli.add_command(load_command, name="load")


if __name__ == "__main__":
    cli()
