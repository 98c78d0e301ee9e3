import click
from rich.console import Console
from rich.table import Table

from ...constants import Patterns
from ...dates import format_date, format_date_human_full
from ...infrastructure.container import create_default_container

console = Console()


@click.command()
@click.option("-v", "--verbose", count=True, help="Verbose output")
def zone_command(verbose: int) -> None:
    """Show the host timezone and how the current time renders in it."""
    container = create_default_container(verbose)
    zone = container.create_zone_provider().default_zone()
    now = container.create_clock().now()
    config = container.config
    table = Table(title="Default Timezone")
    table.add_column("Field", style="cyan")
    table.add_column("Value")
    table.add_row("Zone", zone)
    table.add_row("Abbreviation", format_date("zzz", zone, config=config)(now))
    table.add_row("Full name", format_date("zzzz", zone, config=config)(now))
    table.add_row("UTC offset", format_date("xxx", zone, config=config)(now))
    table.add_row("Local time", format_date(Patterns.ISO_MINUTE, zone, config=config)(now))
    table.add_row("Human", format_date_human_full(zone, config=config)(now))
    console.print(table)
