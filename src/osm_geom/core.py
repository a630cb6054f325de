"""Console output for osm-geom."""

from rich.console import Console
from rich.table import Table

from osm_geom import __version__
from osm_geom.factory import GeometryFactory

console = Console()


def display_info(factory: GeometryFactory) -> None:
    """Display the setup of a geometry factory using rich formatting."""
    table = Table(title="osm-geom Information")

    table.add_column("Property", style="cyan", no_wrap=True)
    table.add_column("Value", style="magenta")

    table.add_row("Name", "osm-geom")
    table.add_row("Version", __version__)
    table.add_row("Backend", f"{factory.backend.name} ({type(factory.backend).__name__})")
    table.add_row("Projection", type(factory.projection).__name__)
    table.add_row("EPSG", str(factory.epsg))
    table.add_row("PROJ", factory.proj_string)

    console.print(table)
