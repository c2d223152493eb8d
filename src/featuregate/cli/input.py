"""fgate input command - supply features typed at the terminal."""

from pathlib import Path

import click

from featuregate.cli.render import pluralize, print_batch, status
from featuregate.config.models import FeatureGateConfig
from featuregate.core.errors import FeatureGateError
from featuregate.supply.gate import UserInputFeatureSupplier
from featuregate.supply.runtime import run_supplier
from featuregate.supply.terminal import TerminalInputSurface


@click.command()
@click.option(
    "--scratch-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for published submissions (default: system temp dir)",
)
@click.option("--json", "as_json", is_flag=True, help="Print each batch as a JSON line")
@click.pass_context
def input_command(ctx: click.Context, scratch_dir: Path | None, as_json: bool) -> None:
    """Read Gherkin from stdin and supply it batch by batch.

    Type steps or whole features, then a line with the submit command
    (default: go). The quit command (default: quit) or end of input ends
    the session.
    """
    config: FeatureGateConfig = ctx.obj["config"]
    supply = config.supply
    if scratch_dir is not None:
        supply = supply.model_copy(update={"scratch_dir": str(scratch_dir)})

    supplier = UserInputFeatureSupplier.from_config(supply)
    surface = TerminalInputSurface(
        click.get_text_stream("stdin"),
        supplier,
        submit_command=supply.submit_command,
        quit_command=supply.quit_command,
    )

    if not as_json:
        status(f"Enter Gherkin, then '{supply.submit_command}' to submit or '{supply.quit_command}' to finish")

    def on_error(error: FeatureGateError) -> None:
        status(error.message, style="error")

    surface.start()
    batches = run_supplier(
        supplier,
        on_batch=lambda features: print_batch(features, as_json=as_json),
        on_error=on_error,
    )

    if not as_json:
        status(f"Session ended after {pluralize(batches, 'batch', 'batches')}", style="success")
