import json
import logging
import typer
from pathlib import Path
from typing import Optional, Set

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table
from rich.panel import Panel

from finance_sankey.config.settings import TransformSettings
from finance_sankey.domain.graph import FlowGraph
from finance_sankey.parsers.factory import ParserFactory
from finance_sankey.services.flow_graph_service import FlowGraphService
from finance_sankey.services.models import FlowReport

app = typer.Typer(
    name="finance-sankey",
    help="Turn an annual financial report into Sankey flow-graph data",
    add_completion=False,
)

console = Console()

class State:
    verbose: bool = False


state = State()

@app.callback()
def main(
    verbose: bool = typer.Option(
        False,
        "--verbose", "-v",
        help="Enable verbose output",
    )
):
    """
    Finance Sankey - Build revenue -> institution -> expense flow graphs.
    """
    if not ParserFactory.is_locked():
        ParserFactory.load_parsers_from_config()

    state.verbose = verbose

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )

@app.command(name="build")
def build(
    filepath: Path = typer.Argument(
        ...,
        help="Path to the report document",
        exists=True,
        file_okay=True,
        dir_okay=False
    ),
    report_format: Optional[str] = typer.Option(
        None,
        "--format", "-f",
        help="Document format (json, csv, excel). Defaults to the file extension",
    ),
    fiscal_year: Optional[str] = typer.Option(
        None,
        "--year", "-y",
        help="Fiscal-year column holding the amounts",
    ),
    hub_name: Optional[str] = typer.Option(
        None,
        "--hub",
        help="Name of the central node",
    ),
    expense_category: Optional[str] = typer.Option(
        None,
        "--expense-category", "-e",
        help="Category that marks expense line items",
    ),
    collection: Optional[str] = typer.Option(
        None,
        "--collection", "-c",
        help="Name of the record collection inside a JSON document",
    ),
    as_json: bool = typer.Option(
        False,
        "--json",
        help="Print the layout-engine payload as JSON instead of tables",
    ),
):
    """
    Build the flow graph for one fiscal year of a report.

    Examples:
        finance-sankey build data/jmu.json
        finance-sankey build report.csv --year 2022 --hub JMU
        finance-sankey build data/jmu.json --json > graph.json
    """
    try:
        settings = TransformSettings.from_config(
            fiscal_year=fiscal_year,
            hub_name=hub_name,
            expense_category=expense_category,
            collection=collection,
        )
        service = FlowGraphService(settings)
        report = service.build_from_file(filepath, report_format=report_format)

        if as_json:
            typer.echo(json.dumps(report.graph.to_dict(), indent=2))
            return

        _print_report(report, settings)

    except Exception as e:
        console.print(f"[bold red]Error:[/bold red] {e}")
        if state.verbose:
            console.print_exception()
        raise typer.Exit(code=1)


@app.command(name="formats")
def formats():
    """List the report formats that can be read."""
    table = Table(title="Report formats")
    table.add_column("Format", style="cyan")
    table.add_column("Parser", style="white")
    table.add_column("Extensions", style="dim")

    for report_format in ParserFactory.get_available_formats():
        parser_class = ParserFactory._registry[report_format]
        table.add_row(report_format, parser_class.__name__, ", ".join(parser_class.EXTENSIONS))

    console.print(table)


def _outflow_ids(graph: FlowGraph, expense_category: str) -> Set[str]:
    """The expense-category node and every item it pays out to"""
    ids = {link.target for link in graph.links if link.source == expense_category}
    ids.add(expense_category)
    return ids


def _print_report(report: FlowReport, settings: TransformSettings) -> None:
    graph = report.graph

    summary_text = (
        f"[bold]Source:[/bold] {report.source}\n"
        f"[bold]Fiscal year:[/bold] {settings.fiscal_year}\n\n"
        f"[green]Inflow:[/green]  {report.total_inflow:>14,.2f} ({report.inflow_count} items)\n"
        f"[red]Outflow:[/red] {report.total_outflow:>14,.2f} ({report.outflow_count} items)\n"
        f"{'─' * 30}\n"
    )
    if report.net >= 0:
        summary_text += f"[bold green]Net:[/bold green]     {report.net:>14,.2f}"
    else:
        summary_text += f"[bold red]Net:[/bold red]     {report.net:>14,.2f}"

    console.print(Panel(
        summary_text,
        title=f"[bold]{settings.hub_name}[/bold]",
        border_style="cyan",
        padding=(1, 2)
    ))

    outflow_ids = _outflow_ids(graph, settings.expense_category)

    node_table = Table(title="Nodes", show_header=True, padding=(0, 1))
    node_table.add_column("Id", style="cyan")
    node_table.add_column("Group", style="dim")
    node_table.add_column("Value", justify="right")

    for node in graph.nodes:
        color = "red" if node.id in outflow_ids else "green"
        node_table.add_row(node.id, node.group or "", f"[{color}]{node.value:,.2f}[/{color}]")

    console.print(node_table)

    link_table = Table(title="Links", show_header=True, padding=(0, 1))
    link_table.add_column("Source", style="cyan")
    link_table.add_column("Target", style="magenta")
    link_table.add_column("Weight", justify="right")

    for link in graph.links:
        link_table.add_row(link.source, link.target, f"{link.weight:,.2f}")

    console.print(link_table)

    if report.excluded:
        names = ", ".join(r.name for r in report.excluded)
        console.print(f"[yellow]Skipped zero-amount items:[/yellow] {names}")

    for orphan in report.orphans:
        console.print(f"[yellow]Warning:[/yellow] node '{orphan}' has no links")

    if state.verbose:
        console.print(f"\n[dim]→ Flow graph built successfully[/dim]")


def cli_main():
    """Entry point for the CLI"""
    app()


if __name__ == "__main__":
    cli_main()
