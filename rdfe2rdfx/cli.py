"""
CLI entry point for rdfe2rdfx.
"""

import logging
from dataclasses import replace
from functools import wraps

import click
import typer
from rich.console import Console
from typer.core import TyperCommand

from rdfe2rdfx.config import ConverterConfig, load_config
from rdfe2rdfx.converter import ConversionResult, check_input_path, collect_inputs, convert_path
from rdfe2rdfx.exceptions import (
    EXIT_CONVERSION_ERROR,
    EXIT_SUCCESS,
    EXIT_USAGE_ERROR,
    MissingPathError,
    Rdfe2RdfxError,
    UsageError,
    format_error_for_cli,
)
from rdfe2rdfx.util.logging import configure_logging
from rdfe2rdfx.util.progress import show_summary, track_files

app = typer.Typer(
    name="rdfe2rdfx",
    help="Convert dynamic folder exports (.rdfe JSON) to .rdfx XML",
    add_completion=False,
)
console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

PROGRAM_NAME = "rdfe2rdfx"


def print_usage_error(message: str, config: ConverterConfig) -> None:
    """Print a usage error followed by the usage synopsis to stderr."""
    inp, out = config.input_extension, config.output_extension
    err_console.print(message, markup=False, highlight=False, soft_wrap=True)
    err_console.print()
    err_console.print(
        f"Usage: {PROGRAM_NAME} <file{inp} | directory>\n"
        f"   file{inp}: write the equivalent {out} side-by-side\n"
        f"   directory: convert all {inp} files and write {out} side-by-side",
        markup=False,
        highlight=False,
        soft_wrap=True,
    )


def handle_errors(func):
    """Decorator mapping exceptions in CLI commands to exit codes."""

    @wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except typer.Exit:
            raise
        except UsageError as e:
            print_usage_error(e.message, ConverterConfig())
            raise typer.Exit(EXIT_USAGE_ERROR)
        except Rdfe2RdfxError as e:
            err_console.print(format_error_for_cli(e), soft_wrap=True)
            raise typer.Exit(e.exit_code)
        except Exception as e:
            # Anything raised while reading or writing files is a conversion error
            err_console.print(f"[red]Error:[/red] {e}", soft_wrap=True)
            logger.debug("Conversion failed", exc_info=True)
            raise typer.Exit(EXIT_CONVERSION_ERROR)

    return wrapper


class ConvertCommand(TyperCommand):
    """Command that reports command-line parsing errors as usage errors."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except click.UsageError as e:
            print_usage_error(e.format_message(), ConverterConfig())
            raise typer.Exit(EXIT_USAGE_ERROR)


def _print_message(message: str) -> None:
    console.print(message, markup=False, highlight=False, soft_wrap=True)


def _report(result: ConversionResult) -> None:
    if result.succeeded:
        console.print(
            f"[green]✓ {result.input_path} → {result.output_path.name} "
            f"({result.object_count} object(s))[/green]",
            soft_wrap=True,
        )
    else:
        console.print(f"[red]✗ {result.input_path}: {result.error}[/red]", soft_wrap=True)


def raise_usage(error: UsageError, config: ConverterConfig):
    """Report a usage error with the configured extensions and exit."""
    print_usage_error(error.message, config)
    raise typer.Exit(EXIT_USAGE_ERROR)


@app.command(cls=ConvertCommand)
@handle_errors
def convert(
    path: str = typer.Argument(
        None,
        help="Path to a .rdfe file or a directory to convert recursively",
        show_default=False,
    ),
    config_file: str = typer.Option(
        None, "--config", "-c", help="YAML configuration file", show_default=False
    ),
    continue_on_error: bool = typer.Option(
        False,
        "--continue-on-error",
        help="In directory mode, keep converting after a file fails",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show progress log messages"),
):
    """Convert a .rdfe export, or all .rdfe files below a directory, to .rdfx."""
    config = load_config(config_file)
    if continue_on_error:
        config = replace(config, continue_on_error=True)
    if verbose:
        config = replace(config, log_level="INFO")
    configure_logging(config.log_level)

    if path is None:
        raise_usage(MissingPathError(config.input_extension), config)

    try:
        input_path = check_input_path(path, config)
    except UsageError as e:
        raise_usage(e, config)

    inputs = collect_inputs(input_path, config)
    if not inputs:
        console.print(
            f"[yellow]No {config.input_extension} files found in {input_path}[/yellow]",
            soft_wrap=True,
        )
        raise typer.Exit(EXIT_SUCCESS)

    with track_files(f"Converting {len(inputs)} file(s)", total=len(inputs)) as (progress, task):

        def on_result(result: ConversionResult) -> None:
            _report(result)
            progress.advance(task)

        batch = convert_path(input_path, config, on_result, _print_message)

    if input_path.is_dir():
        show_summary(
            "Conversion summary",
            {
                "Directory": str(batch.root),
                "Converted": len(batch.converted),
                "Failed": len(batch.failed),
            },
        )

    if not batch.succeeded:
        raise typer.Exit(EXIT_CONVERSION_ERROR)
