import logging
from typing import Any, Dict, List, Optional

import typer
from pydantic import ValidationError

from nr_pars_export.exporter import ExportFormat
from nr_pars_export.lib import (
    MediaDataset,
    NRParsError,
    ParameterCollection,
    read_structured_file,
    set_package_level,
    setup_logger,
)

from .assembler import export_nr_pars
from .config import ExportConfig, LogLevel
from .resolver import find_shadowed_parameters

app = typer.Typer(help="NR Parameter Export Component")

logger = setup_logger(__name__)


@app.command()
def export(
    dataset: Optional[str] = typer.Argument(
        None, help="Path to the dataset file (CSV/JSON/YAML)"
    ),
    parameter_files: Optional[List[str]] = typer.Argument(
        None, help="Paths to the parameter collection files, in resolution order"
    ),
    param: Optional[List[str]] = typer.Option(
        None, "--param", "-p", help="Parameter to export (repeatable). Default: all"
    ),
    export_format: Optional[ExportFormat] = typer.Option(
        None, "--format", "-f", help="Export format"
    ),
    output: Optional[str] = typer.Option(
        None, "--output", "-o", help="Output file name for csv/excel exports"
    ),
    config_file: Optional[str] = typer.Option(
        None, "--config", help="Run configuration file (YAML/JSON)"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output"),
):
    """
    Export NR parameters and MOS values as training and verification tables.
    """
    try:
        # Command line values override the run configuration file
        config_data: Dict[str, Any] = {}
        if config_file:
            config_data = read_structured_file(config_file) or {}

        overrides = {
            "dataset": dataset,
            "parameters": parameter_files or None,
            "param_list": param or None,
            "format": export_format,
            "fname": output,
        }
        config_data.update({k: v for k, v in overrides.items() if v is not None})
        if verbose:
            config_data["log_level"] = LogLevel.DEBUG

        # Parse and validate the configuration
        try:
            config = ExportConfig.model_validate(config_data)
        except ValidationError as e:
            logger.critical(e, exc_info=True)
            raise typer.Exit(code=1)

        set_package_level(getattr(logging, config.log_level.value))

        media_dataset = MediaDataset.load(config.dataset)
        collections = [ParameterCollection.load(path) for path in config.parameters]

        try:
            Xtrain, Xverify, ytrain, yverify = export_nr_pars(
                media_dataset,
                collections,
                param_list=config.param_list,
                format=config.format,
                fname=config.fname,
                show_progress=True,
            )
        except NRParsError as e:
            logger.critical(e, exc_info=True)
            raise typer.Exit(code=1)

        typer.echo(f"Parameters exported: {Xtrain.shape[1]}")
        typer.echo(f"  - Training set: {len(ytrain)} media")
        typer.echo(f"  - Verification set: {len(yverify)} media")
        if config.format != ExportFormat.NONE:
            typer.echo(f"Tables written as {config.format.value} to {config.fname}")

    except typer.Exit:
        raise
    except Exception as e:
        logger.critical(e, exc_info=True)
        raise typer.Exit(code=1)


@app.command("list-parameters")
def list_parameters(
    parameter_files: List[str] = typer.Argument(
        ..., help="Paths to the parameter collection files, in resolution order"
    ),
):
    """
    List the parameters of each collection and which ones are shadowed.
    """
    try:
        collections = [ParameterCollection.load(path) for path in parameter_files]
        shadowed = find_shadowed_parameters(collections)

        for collection in collections:
            typer.echo(f"{collection.name}: {len(collection.par_name)} parameters")
            for par_name in collection.par_name:
                owner = shadowed.get(par_name, [collection.name])[0]
                if owner != collection.name:
                    typer.echo(f"  - {par_name} (shadowed by {owner})")
                else:
                    typer.echo(f"  - {par_name}")

    except Exception as e:
        logger.critical(e, exc_info=True)
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
