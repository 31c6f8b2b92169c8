"""Main CLI interface for DepCompare."""

from pathlib import Path
from typing import Optional
import typer
from rich.console import Console

from ..config import ComparisonConfig
from ..utils.logging import setup_logging, get_logger
from ..core.parsers import NodeJSPackageParser
from ..core.comparison import compare_dependencies
from ..output.formatters import MarkdownFormatter

app = typer.Typer(
    name="depcompare",
    help="Compare the declared dependencies of two sibling projects",
    add_completion=False
)

console = Console()
err_console = Console(stderr=True)
logger = get_logger("CLI")

USAGE = "Usage: depcompare <repo1name> <repo2name>"


@app.command()
def compare(
    name1: Optional[str] = typer.Argument(
        None,
        help="Name of the first project (a sibling directory)",
        show_default=False
    ),
    name2: Optional[str] = typer.Argument(
        None,
        help="Name of the second project (a sibling directory)",
        show_default=False
    )
) -> None:
    """Write a Markdown report comparing the dependencies of two projects."""

    setup_logging()

    if not name1 or not name2:
        err_console.print("Please provide two repository names as arguments.", markup=False, highlight=False)
        console.print(USAGE, markup=False, highlight=False)
        raise typer.Exit(1)

    config = ComparisonConfig()
    output_path = _compare_projects(name1, name2, config)

    console.print(f"Comparison results written to {output_path}", markup=False, highlight=False)


def _compare_projects(name1: str, name2: str, config: ComparisonConfig) -> Path:
    """Load both manifests, compare them and write the report.

    Args:
        name1: Name of the first project
        name2: Name of the second project
        config: Manifest and output locations

    Returns:
        Path the report was written to
    """
    parser = NodeJSPackageParser()

    try:
        deps1 = parser.parse(config.manifest_path(name1)).dependencies
        deps2 = parser.parse(config.manifest_path(name2)).dependencies
    except Exception as e:
        logger.error(f"Failed to load manifests: {e}")
        raise

    result = compare_dependencies(deps1, deps2, name1, name2)

    formatter = MarkdownFormatter(config.output_path())
    return formatter.save_report(formatter.format_report(result))


def main() -> None:
    """Main entry point for DepCompare CLI."""
    app()


if __name__ == "__main__":
    main()
