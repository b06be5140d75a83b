"""
Command-line interface for nullable code generation.

Reads class declarations from a Python or JSON file and prints (or writes)
their nullable companions.
"""

import argparse
import sys
from pathlib import Path

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    ConfigError,
    NullableConfig,
    PythonEmitter,
    generate_many,
    load_config,
)
from .codegen.core.config import ConfigManager
from .codegen.registry import create_default_registry
from .logging_config import get_logger, setup_logging
from .utils import DeclarationLoaderError, load_declarations

logger = get_logger(__name__)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog="nullable-struct",
        description="Generate nullable companion classes from class declarations",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  nullable-struct models.py                     # All classes in models.py
  nullable-struct models.py --class Point       # A single class
  nullable-struct types.json -o nullable.py     # Write to a file
  nullable-struct models.py --prefix Maybe      # MaybePoint instead of NullablePoint
        """,
    )

    parser.add_argument(
        "file", nargs="?", help="Declaration file (.py, .pyi or .json)"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )

    input_group = parser.add_argument_group("input")
    input_group.add_argument(
        "--class",
        dest="class_name",
        metavar="NAME",
        help="Only generate the class with this name",
    )
    input_group.add_argument(
        "--frontend",
        metavar="NAME",
        help="Front end to read the file with (default: chosen by suffix)",
    )
    input_group.add_argument(
        "--list-frontends",
        action="store_true",
        help="List available front ends and exit",
    )

    output_group = parser.add_argument_group("output")
    output_group.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Output file for generated code (default: stdout)",
    )
    output_group.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show generation metadata",
    )

    config_group = parser.add_argument_group("configuration")
    config_group.add_argument(
        "--config",
        metavar="FILE",
        help="JSON configuration file",
    )
    config_group.add_argument(
        "--prefix",
        metavar="PREFIX",
        help="Prefix for generated class names (default: Nullable)",
    )
    config_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add docstrings and comments to generated code",
    )
    config_group.add_argument(
        "--no-slots",
        action="store_true",
        help="Don't declare __slots__ on generated classes",
    )

    logging_group = parser.add_argument_group("logging")
    logging_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: WARNING)",
    )
    logging_group.add_argument(
        "--log-file",
        metavar="FILE",
        help="Also write log records to this file",
    )

    return parser


def _list_frontends() -> int:
    """List available front ends with rich table."""
    registry = create_default_registry()

    table = Table(
        title="📥 Available Front Ends",
        box=box.ROUNDED,
        show_header=True,
        header_style="bold cyan",
    )
    table.add_column("Name", style="bold green")
    table.add_column("Aliases", style="cyan")
    table.add_column("Suffixes", style="yellow")

    for name in registry.list_frontends():
        table.add_row(
            name,
            ", ".join(registry.get_aliases(name)) or "-",
            ", ".join(registry.get_suffixes(name)),
        )

    console.print()
    console.print(table)
    console.print()
    return 0


def _build_config(args: argparse.Namespace) -> NullableConfig:
    """Build configuration from CLI arguments."""
    config_dict = {}

    if args.prefix is not None:
        config_dict["wrapper_prefix"] = args.prefix
    if args.no_comments:
        config_dict["add_comments"] = False
    if args.no_slots:
        config_dict["use_slots"] = False

    try:
        config = load_config(custom_config=config_dict, config_file=args.config)
    except ConfigError as e:
        raise CLIError(str(e)) from e

    for warning in ConfigManager().validate_config(config):
        console.print(f"[yellow]⚠️  Config:[/yellow] {warning}")

    return config


def _generate_and_output(
    declarations, config: NullableConfig, args: argparse.Namespace
) -> int:
    """Generate code and handle output with rich formatting."""
    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=console,
        transient=True,
    ) as progress:
        gen_task = progress.add_task(
            f"[green]Generating {len(declarations)} nullable class(es)...", total=None
        )
        results = generate_many(declarations, config)
        progress.remove_task(gen_task)

    failures = [r for r in results if not r.success]
    for result in failures:
        type_name = result.metadata.get("type_name", "?")
        console.print(
            Panel(
                f"[red]{result.error_message}[/red]",
                title=f"✗ {type_name}",
                border_style="red",
            )
        )
    if failures:
        logger.error("%d of %d declaration(s) failed", len(failures), len(results))
        return 1

    code = PythonEmitter(config).combine([r.artifact for r in results])

    if args.output:
        output_path = Path(args.output)
        try:
            output_path.write_text(code, encoding="utf-8")
        except OSError as e:
            console.print(f"[red]✗ Failed to write to {output_path}:[/red] {e}")
            return 1
        console.print(
            f"[green]✓[/green] Generated {len(results)} class(es) saved to [cyan]{output_path}[/cyan]"
        )
    else:
        top_border = "═" * 30
        console.print(
            f"[green]{top_border} 📄 Generated Python Code {top_border}[/green]\n"
        )
        console.print(Syntax(code, "python", theme="monokai"))
        console.print(f"\n[green]{top_border}{top_border}{top_border}[/green]")

    if args.verbose:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Type", style="bold")
        metadata_table.add_column("Generated", style="green")
        metadata_table.add_column("Fields", justify="right")
        metadata_table.add_column("Methods", justify="right")

        for result in results:
            metadata_table.add_row(
                result.metadata["original_name"],
                result.metadata["wrapper_name"],
                str(result.metadata["field_count"]),
                str(result.metadata["method_count"]),
            )

        console.print()
        console.print(metadata_table)

    warnings = [w for r in results for w in r.warnings]
    if warnings:
        console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")
        console.print()

    return 0


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    try:
        setup_logging(level=args.log_level, log_file=args.log_file)
    except ValueError as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    if args.list_frontends:
        return _list_frontends()

    if not args.file:
        console.print("[red]✗[/red] A declaration file is required")
        console.print("[dim]Use --help to see usage[/dim]")
        return 1

    try:
        config = _build_config(args)
        source, declarations = load_declarations(
            args.file, name=args.class_name, frontend=args.frontend
        )
    except (CLIError, DeclarationLoaderError, FileNotFoundError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

    console.print(f"{source}", style="dim")

    if not declarations:
        console.print("[yellow]⚠️ No class declarations found[/yellow]")
        return 1

    return _generate_and_output(declarations, config, args)


if __name__ == "__main__":
    sys.exit(main())
