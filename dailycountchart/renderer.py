"""
Render year grids to HTML with Jinja2.

The engine only computes grids; this module is the view layer that lays
them out as CSS-grid markup, one chart per year.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Optional

from jinja2 import Environment, FileSystemLoader, StrictUndefined, TemplateError, select_autoescape

from dailycountchart.configuration import Configuration
from dailycountchart.year_assembler import build_years

TEMPLATES_DIR = Path(__file__).parent / "templates"
CHART_TEMPLATE = "daily_count_chart.html"


class ChartRenderError(Exception):
    """Raised when a year's chart fails to render."""

    def __init__(self, year: int, cause: Exception):
        self.year = year
        self.cause = cause
        super().__init__(f"Failed to render chart for {year}: {cause}")


@dataclass(frozen=True)
class Chart:
    """Rendered HTML for one year."""

    year: int
    html: str


def make_environment() -> Environment:
    """Create the Jinja2 environment for the bundled templates."""
    return Environment(
        loader=FileSystemLoader(TEMPLATES_DIR),
        autoescape=select_autoescape(["html"]),
        undefined=StrictUndefined,
        trim_blocks=True,
        lstrip_blocks=True,
    )


def render_charts(
    elements: Iterable[Any],
    configuration: Optional[Configuration] = None,
    environment: Optional[Environment] = None,
) -> list[Chart]:
    """
    Build and render one chart per year.

    Rendering stops at the first failure; charts already rendered are
    discarded.

    Args:
        elements: Timestamped elements
        configuration: Chart options; None means all defaults
        environment: Jinja2 environment providing the chart template

    Returns:
        Charts in ascending year order

    Raises:
        ChartRenderError: If the template fails for any year
    """
    if configuration is None:
        configuration = Configuration()
    if environment is None:
        environment = make_environment()

    charts = []
    for result in build_years(elements, configuration):
        try:
            template = environment.get_template(CHART_TEMPLATE)
            html = template.render(
                year=result.year,
                total=result.total,
                days=result.days,
                configuration=configuration,
            )
        except TemplateError as e:
            raise ChartRenderError(result.year, e) from e
        charts.append(Chart(year=result.year, html=html))

    return charts
