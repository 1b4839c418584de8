"""FastAPI application for the Loyalty Drift dashboard."""

import logging
from pathlib import Path
from typing import Annotated, Any

from fastapi import Body, Depends, FastAPI, Form, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, RedirectResponse
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from ..drift import DriftComparator, fields_by_kind, impact_summary, targeting_summary
from ..events import (
    DEFAULT_SCENARIO,
    EventParseError,
    check_events,
    get_scenario,
    list_scenarios,
)
from ..models import DriftConfig
from ..store import ConfigError, JsonConfigStore, get_root_path, validate_tracked_fields

logger = logging.getLogger(__name__)

# Path setup
WEB_DIR = Path(__file__).parent
TEMPLATES_DIR = WEB_DIR / "templates"
STATIC_DIR = WEB_DIR / "static"

# FastAPI app
app = FastAPI(title="Loyalty Drift", description="Points & Promotions drift dashboard")

# Mount static files
app.mount("/static", StaticFiles(directory=STATIC_DIR), name="static")

# Templates
templates = Jinja2Templates(directory=TEMPLATES_DIR)


def get_config() -> DriftConfig:
    """Dependency to get the drift config."""
    try:
        return JsonConfigStore(get_root_path()).load_config()
    except ConfigError as e:
        logger.error("Cannot load config: %s", e)
        raise HTTPException(status_code=500, detail=str(e)) from e


ConfigDep = Annotated[DriftConfig, Depends(get_config)]


def _lookup_scenario(name: str):
    try:
        return get_scenario(name)
    except KeyError:
        raise HTTPException(status_code=404, detail="Scenario not found") from None


# --- Main Routes ---


@app.get("/", response_class=RedirectResponse)
async def root():
    """Redirect to the drift dashboard."""
    return RedirectResponse(url="/drift", status_code=302)


@app.get("/drift", response_class=HTMLResponse)
async def drift_page(
    request: Request,
    config: ConfigDep,
    scenario: str = Query(default=DEFAULT_SCENARIO),
):
    """Main dashboard page with a scenario preloaded."""
    selected = _lookup_scenario(scenario) if scenario else None
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "scenarios": list_scenarios(),
            "selected": selected,
            "tracked_fields": config.tracked_fields,
        },
    )


# --- Partial Routes (HTMX) ---


@app.get("/partials/scenario", response_class=HTMLResponse)
async def scenario_partial(request: Request, name: str = Query(default="")):
    """HTMX partial: event editors filled from a scenario, or cleared."""
    selected = _lookup_scenario(name) if name else None
    return templates.TemplateResponse(
        request,
        "components/editors.html",
        {"selected": selected},
    )


@app.post("/drift/check", response_class=HTMLResponse)
async def check_drift(
    request: Request,
    config: ConfigDep,
    event_v1: str = Form(default=""),
    event_v2: str = Form(default=""),
):
    """HTMX partial: drift result, or the parse errors for each side."""
    if not event_v1.strip() or not event_v2.strip():
        return templates.TemplateResponse(
            request,
            "components/error.html",
            {
                "status": "Please select a scenario first; events are empty.",
                "errors": [],
            },
        )

    try:
        report = check_events(event_v1, event_v2, config.tracked_fields)
    except EventParseError as e:
        return templates.TemplateResponse(
            request,
            "components/error.html",
            {"status": "JSON parsing error.", "errors": e.errors},
        )

    return templates.TemplateResponse(
        request,
        "components/result.html",
        {
            "report": report,
            "impact": impact_summary(report),
            "fields_by_kind": fields_by_kind(report),
            "targeting": targeting_summary(report),
        },
    )


# --- JSON API ---


@app.get("/api/scenarios")
async def api_scenarios() -> list[dict[str, str]]:
    """List scenarios with their raw event text."""
    return [
        {"name": s.name, "title": s.title, "v1": s.v1, "v2": s.v2}
        for s in list_scenarios()
    ]


@app.post("/api/drift")
async def api_drift(
    config: ConfigDep,
    payload: dict[str, Any] = Body(...),
) -> dict[str, Any]:
    """Compare two already-decoded events."""
    v1 = payload.get("v1")
    v2 = payload.get("v2")
    errors = [
        f"Event {side}: expected a JSON object"
        for side, value in (("v1", v1), ("v2", v2))
        if not isinstance(value, dict)
    ]
    if errors:
        raise HTTPException(status_code=422, detail=errors)

    fields = config.tracked_fields
    if "tracked_fields" in payload:
        try:
            fields = validate_tracked_fields(payload["tracked_fields"])
        except ConfigError as e:
            raise HTTPException(status_code=422, detail=[str(e)]) from e

    report = DriftComparator(fields).check_drift(v1, v2)
    return report.to_dict()
