# main.py

"""
FastAPI application serving SVG chart rendering.
Main entry point with REST API endpoints.
"""

from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from pydantic import BaseModel, Field
from typing import Optional, Dict, Any, List
from datetime import datetime
import uvicorn
import logging
import time

from chart_data.errors import ChartDataError, ConfigError, NoDataError, TemplateError
from chart_data.models import ChartVariant
from charts.factory import CHART_CLASSES, create
from config import APP_CONFIG, LOG_CONFIG


# Configure logging
logging.basicConfig(
    level=LOG_CONFIG["level"],
    format=LOG_CONFIG["format"],
    handlers=[logging.StreamHandler()]
)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title=APP_CONFIG["name"],
    description="Static SVG bar, horizontal bar, line and pie charts from tabular data",
    version=APP_CONFIG["version"],
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)


class SeriesPayload(BaseModel):
    """One series of a render request, values in category order."""
    title: Optional[str] = Field(None, description="Legend title")
    values: List[Any] = Field(..., description="Values paired positionally with the categories")


class RenderRequest(BaseModel):
    """Render request: chart options plus the series to draw."""
    config: Dict[str, Any] = Field(default_factory=dict, description="Chart options, e.g. {'fields': [...]}")
    series: List[SeriesPayload] = Field(default_factory=list)


# Middleware to add timing
@app.middleware("http")
async def add_process_time_header(request, call_next):
    start_time = time.time()
    response = await call_next(request)
    process_time = time.time() - start_time
    response.headers["X-Execution-Time"] = str(round(process_time * 1000, 2))
    return response


@app.get("/health")
async def health_check():
    """Service health."""
    return {
        "status": "healthy",
        "timestamp": datetime.now().isoformat(),
        "version": APP_CONFIG["version"],
        "variants": [variant.value for variant in CHART_CLASSES]
    }


@app.get("/charts")
async def list_chart_variants():
    """List chart variants with their default options."""
    variants = {}
    for variant, chart_cls in CHART_CLASSES.items():
        defaults = chart_cls.options_class().model_dump(mode="json")
        defaults["fields"] = defaults.pop("categories")
        variants[variant.value] = {
            "description": (chart_cls.__doc__ or "").strip().split("\n")[0],
            "defaults": defaults
        }
    return {"variants": variants, "total": len(variants)}


@app.post("/charts/{variant}")
def render_chart(variant: str, request: RenderRequest):
    """
    Render one chart as an SVG document.

    Example:
    {
        "config": {
            "fields": ["Jan", "Feb", "Mar"],
            "show_graph_title": true,
            "key": true
        },
        "series": [
            {"title": "Sales 2002", "values": [12, 45, 21]}
        ]
    }
    """
    try:
        chart_variant = ChartVariant(variant)
    except ValueError:
        raise HTTPException(
            status_code=404,
            detail=f"Unknown chart variant '{variant}'. Supported: {[v.value for v in ChartVariant]}"
        )

    max_series = APP_CONFIG["max_series_per_request"]
    if len(request.series) > max_series:
        raise HTTPException(
            status_code=400,
            detail=f"Too many series: {len(request.series)} (maximum {max_series})"
        )

    config = dict(request.config)
    if APP_CONFIG["default_style_sheet"] and "style_sheet" not in config:
        config["style_sheet"] = APP_CONFIG["default_style_sheet"]

    try:
        chart = create(chart_variant, config)

        max_categories = APP_CONFIG["max_categories_per_request"]
        if len(chart.categories) > max_categories:
            raise HTTPException(
                status_code=400,
                detail=f"Too many categories: {len(chart.categories)} (maximum {max_categories})"
            )

        for payload in request.series:
            chart.add_series(payload.values, title=payload.title)

        svg = chart.render()

    except (ConfigError, ChartDataError, NoDataError) as e:
        logger.info(f"Rejected {variant} chart request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except TemplateError as e:
        logger.error(f"Rendering {variant} chart failed: {e}")
        raise HTTPException(
            status_code=500,
            detail=str(e) if APP_CONFIG["debug"] else "Chart rendering failed"
        )

    return Response(content=svg, media_type="image/svg+xml")


@app.on_event("startup")
async def startup_event():
    """Log service settings on startup."""
    logger.info(f"Starting {APP_CONFIG['name']} v{APP_CONFIG['version']}")
    logger.info(f"Chart variants: {[variant.value for variant in CHART_CLASSES]}")


# Main entry point
if __name__ == "__main__":
    uvicorn.run(
        "main:app",
        host=APP_CONFIG["host"],
        port=APP_CONFIG["port"],
        reload=APP_CONFIG["debug"],
        log_level="debug" if APP_CONFIG["debug"] else "info",
        access_log=True
    )
