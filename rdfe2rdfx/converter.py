"""
File conversion driver.

Each conversion is an independent unit of work: the input is loaded
completely before the output file is opened, so an invalid export never
creates or truncates its .rdfx file.
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from pathlib import Path

from rdfe2rdfx.config import ConverterConfig
from rdfe2rdfx.emitter import emit
from rdfe2rdfx.exceptions import (
    InputPathNotFoundError,
    InvalidExtensionError,
    WriteError,
)
from rdfe2rdfx.loader import load_file
from rdfe2rdfx.util.files import change_extension, has_extension, iter_input_files

logger = logging.getLogger(__name__)


@dataclass
class ConversionResult:
    """Outcome of converting one file."""

    input_path: Path
    output_path: Path
    object_count: int = 0
    error: Exception | None = None

    @property
    def succeeded(self) -> bool:
        return self.error is None


@dataclass
class BatchResult:
    """Outcome of converting a directory tree."""

    root: Path
    results: list[ConversionResult] = field(default_factory=list)

    @property
    def converted(self) -> list[ConversionResult]:
        return [r for r in self.results if r.succeeded]

    @property
    def failed(self) -> list[ConversionResult]:
        return [r for r in self.results if not r.succeeded]

    @property
    def succeeded(self) -> bool:
        return not self.failed


def _notify(on_message: Callable[[str], None] | None, message: str) -> None:
    logger.info(message)
    if on_message is not None:
        on_message(message)


def collect_inputs(path: str | Path, config: ConverterConfig | None = None) -> list[Path]:
    """
    List the files a conversion of path would process.

    Args:
        path: Input file or directory
        config: Converter settings (defaults when None)

    Returns:
        [path] for a file, otherwise every input file below the directory
    """
    config = config or ConverterConfig()
    input_path = Path(path)
    if input_path.is_file():
        return [input_path]
    return list(iter_input_files(input_path, config.input_extension))


def convert_file(
    path: str | Path,
    config: ConverterConfig | None = None,
    on_message: Callable[[str], None] | None = None,
) -> ConversionResult:
    """
    Convert a single .rdfe file to a side-by-side .rdfx file.

    Args:
        path: Input file path
        config: Converter settings (defaults when None)
        on_message: Optional callback receiving "Reading file" and "Writing data" messages

    Returns:
        ConversionResult describing the written file

    Raises:
        SchemaError: If the input is not a valid export (no output is written)
        WriteError: If the output file cannot be written
    """
    config = config or ConverterConfig()
    input_path = Path(path)
    output_path = change_extension(input_path, config.output_extension)

    _notify(on_message, f"Reading file '{input_path}'")
    export = load_file(input_path)

    _notify(on_message, f"Writing data to {output_path}")
    try:
        with open(output_path, "wb") as f:
            emit(export, f)
    except OSError as e:
        raise WriteError(str(e), str(output_path)) from e

    return ConversionResult(input_path, output_path, object_count=len(export.objects))


def convert_directory(
    root: str | Path,
    config: ConverterConfig | None = None,
    on_result: Callable[[ConversionResult], None] | None = None,
    on_message: Callable[[str], None] | None = None,
) -> BatchResult:
    """
    Convert every input file below a directory, recursively.

    By default the batch stops at the first failure and the exception
    propagates. With config.continue_on_error, failures are recorded in the
    returned BatchResult and the remaining files are still converted.

    Args:
        root: Directory to search
        config: Converter settings (defaults when None)
        on_result: Optional callback invoked after each file
        on_message: Optional callback receiving per-file progress messages

    Returns:
        BatchResult with one entry per input file attempted
    """
    config = config or ConverterConfig()
    batch = BatchResult(Path(root))

    for input_path in collect_inputs(root, config):
        try:
            result = convert_file(input_path, config, on_message)
        except Exception as e:
            if not config.continue_on_error:
                raise
            logger.error(f"Failed to convert {input_path}: {e}")
            result = ConversionResult(
                input_path,
                change_extension(input_path, config.output_extension),
                error=e,
            )

        batch.results.append(result)
        if on_result is not None:
            on_result(result)

    logger.info(
        f"Converted {len(batch.converted)} file(s) below {batch.root}, "
        f"{len(batch.failed)} failed"
    )
    return batch


def check_input_path(path: str | Path, config: ConverterConfig | None = None) -> Path:
    """
    Validate a command-line input path.

    Args:
        path: File or directory path
        config: Converter settings (defaults when None)

    Returns:
        The path as a Path

    Raises:
        InputPathNotFoundError: If the path does not exist
        InvalidExtensionError: If a file path lacks the input extension
    """
    config = config or ConverterConfig()
    input_path = Path(path)

    if not input_path.exists():
        raise InputPathNotFoundError(str(path))

    if input_path.is_file() and not has_extension(input_path, config.input_extension):
        raise InvalidExtensionError(str(path), config.input_extension)

    return input_path


def convert_path(
    path: str | Path,
    config: ConverterConfig | None = None,
    on_result: Callable[[ConversionResult], None] | None = None,
    on_message: Callable[[str], None] | None = None,
) -> BatchResult:
    """
    Convert a single file or a directory tree.

    Args:
        path: Input file or directory
        config: Converter settings (defaults when None)
        on_result: Optional callback invoked after each file
        on_message: Optional callback receiving per-file progress messages

    Returns:
        BatchResult (a single-entry batch for file input)
    """
    config = config or ConverterConfig()
    input_path = check_input_path(path, config)

    if input_path.is_file():
        result = convert_file(input_path, config, on_message)
        if on_result is not None:
            on_result(result)
        return BatchResult(input_path.parent, [result])

    return convert_directory(input_path, config, on_result, on_message)
