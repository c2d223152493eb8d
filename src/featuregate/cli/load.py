"""fgate load command - supply features from files and directories."""

import click

from featuregate.cli.render import print_batch, status
from featuregate.core.errors import FeatureGateError
from featuregate.supply.files import FileFeatureSupplier
from featuregate.supply.runtime import run_supplier


@click.command()
@click.argument("locations", nargs=-1, required=True)
@click.option("--json", "as_json", is_flag=True, help="Print the batch as a JSON line")
def load_command(locations: tuple[str, ...], as_json: bool) -> None:
    """Load features from LOCATIONS (paths or file: URIs) once."""
    supplier = FileFeatureSupplier(locations)
    try:
        batches = run_supplier(supplier, on_batch=lambda features: print_batch(features, as_json=as_json))
    except FeatureGateError as e:
        raise click.ClickException(str(e)) from e

    if batches == 0:
        if as_json:
            print_batch([], as_json=True)
        else:
            status("No features found", style="warning")
