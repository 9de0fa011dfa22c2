"""Main CLI entry point for Profile List.

Running `profile-list` with no arguments builds public/list.json from the
files in public/assets/data.
"""

from pathlib import Path
import sys

import click
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from rich.panel import Panel
from rich.progress import Progress, SpinnerColumn, TextColumn

from profile_list import __version__
from profile_list.builder.base import BuildConfig, BuildResult
from profile_list.builder.config import ConfigLoader, load_config
from profile_list.builder.list_builder import ListBuilder

console = Console()


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="profile-list")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Profile List - Aggregate JSON profile files into a single list file.

    Without a subcommand, runs `build` with the default paths.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if ctx.invoked_subcommand is None:
        ctx.invoke(build)


@cli.command()
@click.option("--input-dir", "-i", type=click.Path(), help="Directory containing profile files")
@click.option("--output", "-o", type=click.Path(), help="Output list file")
@click.option("--config", "-c", "config_path", type=click.Path(exists=True), help="YAML config file")
@click.option("--sort/--no-sort", default=None, help="Order profiles by file name")
@click.option("--pretty/--compact", default=None, help="Indent the output JSON")
@click.option("--dry-run", is_flag=True, help="Load profiles without writing the list file")
@click.pass_context
def build(
    ctx: click.Context,
    input_dir: str | None = None,
    output: str | None = None,
    config_path: str | None = None,
    sort: bool | None = None,
    pretty: bool | None = None,
    dry_run: bool = False,
) -> None:
    """Build the profile list file."""
    verbose = ctx.obj.get("verbose", False)

    try:
        config = load_config(
            config_path,
            input_dir=input_dir,
            output_path=output,
            sort=sort,
            pretty_print=pretty,
        )
        builder = ListBuilder(config)

        with Progress(
            SpinnerColumn(),
            TextColumn("[progress.description]{task.description}"),
            console=console,
            transient=True,
        ) as progress:
            progress.add_task("Loading profiles...", total=None)

            result = builder.dry_run() if dry_run else builder.build()

        _print_result(result, config)

        if verbose:
            _print_sources(result)

    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            import traceback
            console.print(traceback.format_exc(), markup=False)
        sys.exit(1)


@cli.command()
@click.option("--output", "-o", type=click.Path(), default="profile-list.yaml", help="Output file path")
@click.option("--input-dir", "-i", type=click.Path(), help="Directory containing profile files")
@click.option("--list-file", "-l", type=click.Path(), help="Output list file")
@click.pass_context
def init_config(
    ctx: click.Context,
    output: str,
    input_dir: str | None,
    list_file: str | None,
) -> None:
    """Initialize a new config file.

    Creates a template YAML config with the default settings.
    """
    config = load_config(input_dir=input_dir, output_path=list_file)

    loader = ConfigLoader()
    loader.save_file(config, output)

    console.print(f"[green]Created config: {output}[/green]")


def _print_result(result: BuildResult, config: BuildConfig) -> None:
    """Print the summary panel of a run."""
    if result.written:
        title = "Build Complete"
        target = f"[cyan]Output:[/cyan] {escape(str(result.output_path))}"
    else:
        title = "Dry Run"
        target = f"[cyan]Output:[/cyan] {escape(str(config.output_path))} [dim](not written)[/dim]"

    console.print(Panel.fit(
        f"[green]Collected {result.count} profiles in {result.duration_seconds:.2f}s[/green]\n\n"
        f"[cyan]Source:[/cyan] {escape(str(config.input_dir))}\n"
        f"{target}",
        title=title,
    ))


def _print_sources(result: BuildResult) -> None:
    """Print the source files in aggregation order."""
    table = Table(title="Profile Sources")
    table.add_column("#", justify="right")
    table.add_column("File", style="cyan")
    table.add_column("Type")

    for index, (source, record) in enumerate(zip(result.sources, result.records)):
        table.add_row(str(index), escape(Path(source).name), type(record).__name__)

    console.print(table)


if __name__ == "__main__":
    cli()
