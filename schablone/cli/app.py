"""Main CLI application."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..build import orchestrator
from ..core.errors import FatalBuildError
from ..core.settings import Settings
from .parsers import parse_file_mode, parse_log_level

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="schablone",
    help="Build a project tree from a directory of Jinja2 templates.",
)

VerboseOption = Annotated[
    bool,
    typer.Option(
        "--verbose",
        "-v",
        help="Enable verbose logging.",
    ),
]


def _configure_logging(settings: Settings, verbose: bool) -> None:
    level = logging.DEBUG if verbose else parse_log_level(settings.log_level)
    logging.basicConfig(level=level, format="[%(levelname)s] %(message)s")


@app.command()
def build(
    source: Annotated[
        Path,
        typer.Argument(help="Directory holding the template tree."),
    ],
    target: Annotated[
        Path,
        typer.Argument(help="Where to write the results. Must not exist yet."),
    ],
    parameters: Annotated[
        str,
        typer.Option(
            "--parameters",
            "-p",
            help="Parameters as KEY=VALUE pairs separated by a comma. These take precedence over the parameters file.",
            metavar="K1=V1,K2=V2",
        ),
    ] = "",
    parameters_file: Annotated[
        Optional[Path],
        typer.Option(
            "--parameters-file",
            "-f",
            help="Path to a JSON file holding parameters.",
            metavar="FILE",
        ),
    ] = None,
    dry_run: Annotated[
        bool,
        typer.Option(
            "--dry-run",
            "-d",
            help="Render everything without creating files or directories. Useful for testing templates and parameters.",
        ),
    ] = False,
    file_mode: Annotated[
        Optional[str],
        typer.Option(
            "--mode",
            help="File permissions in octal (default: 0644).",
            metavar="OCTAL",
        ),
    ] = None,
    verbose: VerboseOption = False,
) -> None:
    """Build a schablone from SOURCE into the new directory TARGET."""
    settings = Settings()
    _configure_logging(settings, verbose)

    mode = parse_file_mode(file_mode or settings.file_mode)
    params_file = parameters_file or settings.parameters_file
    logger.debug(f"Building {source} → {target} (dry_run={dry_run})")

    try:
        orchestrator.build(
            source,
            target,
            inline_params=parameters,
            params_file_path=params_file,
            dry_run=dry_run,
            file_mode=mode,
        )
    except FatalBuildError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e


@app.command()
def new(
    name: Annotated[
        Path,
        typer.Argument(help="Name of the new schablone directory."),
    ],
    verbose: VerboseOption = False,
) -> None:
    """Create an empty directory to start a new schablone."""
    _configure_logging(Settings(), verbose)

    try:
        orchestrator.new_schablone(name)
    except FatalBuildError as e:
        logger.error(str(e))
        raise typer.Exit(code=1) from e


def main() -> None:
    """Entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
