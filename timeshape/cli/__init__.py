import click

from .commands.render import format_command, relative_command, smart_command
from .commands.zone import zone_command


@click.group()
def app() -> None:
    pass


app.add_command(format_command, name="format")
app.add_command(relative_command, name="relative")
app.add_command(smart_command, name="smart")
app.add_command(zone_command, name="zone")
__all__ = ["app"]
