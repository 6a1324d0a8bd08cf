"""
FastAPI demo application for dailycountchart.

Serves charts for randomly generated records, as HTML and as JSON.
"""

import datetime as dt
import random

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from pydantic import BaseModel, Field

from dailycountchart.config import chart_configuration, validate_config
from dailycountchart.renderer import TEMPLATES_DIR, ChartRenderError, render_charts
from dailycountchart.sample_records import SPREAD_DAYS, Record, make_random_records
from dailycountchart.year_assembler import build_years

app = FastAPI(
    title="dailycountchart",
    description="Calendar heatmaps of timestamped records",
    version="0.1.0",
)

templates = Jinja2Templates(directory=TEMPLATES_DIR)

DEFAULT_RECORD_COUNT = 1000
MAX_RECORD_COUNT = 10000


class DaySummary(BaseModel):
    """Response model for one day cell."""

    date: dt.date
    week_column: int = Field(..., ge=1, le=54)
    weekday_row: int = Field(..., ge=1, le=7)
    count: int = Field(..., ge=0)
    color: str


class YearSummary(BaseModel):
    """Response model for one year's grid."""

    year: int
    total: int = Field(..., ge=0)
    days: list[DaySummary]


def _sample_start() -> dt.datetime:
    """Start of the sample window, two years before now."""
    return dt.datetime.now(dt.timezone.utc) - dt.timedelta(days=SPREAD_DAYS)


def _sample_records(count: int, seed: int | None) -> list[Record]:
    """
    Generate sample records covering the last two years.

    Raises:
        HTTPException: on configuration errors
    """
    try:
        validate_config()
    except ValueError as e:
        raise HTTPException(status_code=500, detail=f"Configuration error: {e}")

    return make_random_records(_sample_start(), count, random.Random(seed))


@app.get("/health")
def health_check():
    """Health check endpoint."""
    return {"status": "ok"}


@app.get("/", response_class=HTMLResponse)
def index(
    request: Request,
    count: int = Query(DEFAULT_RECORD_COUNT, ge=0, le=MAX_RECORD_COUNT),
    seed: int | None = None,
):
    """Render one chart per year for random records."""
    records = _sample_records(count, seed)
    configuration = chart_configuration(chart_heading_title=lambda year: str(year))

    try:
        charts = render_charts(records, configuration)
    except ChartRenderError as e:
        raise HTTPException(status_code=500, detail=str(e))

    return templates.TemplateResponse(
        request,
        "index.html",
        {"charts": charts, "record_count": len(records)},
    )


@app.get("/api/years", response_model=list[YearSummary])
def get_years(
    count: int = Query(DEFAULT_RECORD_COUNT, ge=0, le=MAX_RECORD_COUNT),
    seed: int | None = None,
):
    """
    Get the computed grids for random records.

    Returns:
        JSON list with one entry per year, ascending
    """
    records = _sample_records(count, seed)

    return [
        YearSummary(
            year=result.year,
            total=result.total,
            days=[
                DaySummary(
                    date=day.date,
                    week_column=day.week_column,
                    weekday_row=day.weekday_row,
                    count=day.count,
                    color=day.color,
                )
                for day in result.days
            ],
        )
        for result in build_years(records, chart_configuration())
    ]
