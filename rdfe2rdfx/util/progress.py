"""
Progress tracking and reporting utilities using rich.
"""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.progress import (
    BarColumn,
    MofNCompleteColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
)

console = Console()


def create_progress_bar() -> Progress:
    """
    Create a rich Progress bar for file batches.

    Returns:
        Configured Progress instance
    """
    return Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(),
        MofNCompleteColumn(),
        TimeElapsedColumn(),
        console=console,
        transient=True,
    )


@contextmanager
def track_files(description: str, total: int) -> Iterator[tuple[Progress, int]]:
    """
    Context manager for tracking a batch of files with a progress bar.

    Usage:
        with track_files("Converting", total=len(files)) as (progress, task):
            for path in files:
                # convert path
                progress.update(task, advance=1)

    Args:
        description: Description to show in progress bar
        total: Number of files in the batch

    Yields:
        Progress instance and the id of its task
    """
    progress = create_progress_bar()
    with progress:
        task = progress.add_task(description, total=total)
        yield progress, task


def show_summary(title: str, items: dict[str, str | int]):
    """
    Show a formatted summary box.

    Args:
        title: Summary title
        items: Dictionary of items to show (key: value pairs)
    """
    from rich.panel import Panel
    from rich.table import Table

    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Key", style="cyan")
    table.add_column("Value", style="white")

    for key, value in items.items():
        table.add_row(key, str(value))

    panel = Panel(table, title=f"[bold]{title}[/bold]", border_style="blue")
    console.print(panel)
