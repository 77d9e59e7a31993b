"""FastAPI application — create_app factory with /api endpoints."""

from __future__ import annotations

import logging
import re
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, Header, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import Response
from pydantic import BaseModel

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from balirab import __version__
from balirab.config import Settings, load_settings
from balirab.data.form_options import (
    DISCLAIMER_LINES,
    DISCLAIMER_TITLE,
    NOTE_SUGGESTIONS,
)
from balirab.data.sample import SAMPLE_PROJECT, SAMPLE_RESULT
from balirab.exceptions import (
    CredentialMissingError,
    InputValidationError,
    RabError,
)
from balirab.models.enums import BaliLocation, BuildingType, MaterialQuality
from balirab.models.project import MAX_FLOORS, ProjectDetails
from balirab.models.rab import RABResult
from balirab.normalizer import normalize_result
from balirab.presentation import (
    build_chart_segments,
    build_table_rows,
    export_pdf,
    render_pie_chart_png,
)
from balirab.request_builder import location_markup_percent

if TYPE_CHECKING:
    from balirab.models.estimate import NormalizedEstimate
    from balirab.services.pipeline import EstimatePipeline

logger = logging.getLogger(__name__)


class ExportRequest(BaseModel):
    """Body of the PDF export endpoint."""

    result: RABResult
    project: ProjectDetails | None = None


def _estimate_payload(estimate: NormalizedEstimate) -> dict[str, Any]:
    return {
        "estimate": estimate.model_dump(mode="json"),
        "summary_dict": estimate.to_summary_dict(),
        "table_rows": [row.to_dict() for row in build_table_rows(estimate)],
        "chart": [seg.to_dict() for seg in build_chart_segments(estimate)],
        "warnings": list(estimate.warnings),
    }


def _export_filename(project_name: str | None) -> str:
    slug = re.sub(r"[^A-Za-z0-9]+", "-", project_name or "").strip("-")
    return f"RAB-{slug}.pdf" if slug else "RAB.pdf"


def create_app(
    *,
    pipeline: EstimatePipeline | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    pipeline
        Optional pre-built pipeline for dependency injection (e.g. tests).
        If not provided, one is created from settings on first request to
        /api/estimate.
    settings
        Optional settings; read from the environment when omitted.
    """
    settings = settings or load_settings()
    logging.getLogger("balirab").setLevel(settings.log_level.upper())

    app = FastAPI(title="Bali RAB Estimator", version=__version__)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=list(settings.cors_origins),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject mocks
    app.state.pipeline = pipeline
    app.state.settings = settings

    def _get_pipeline() -> EstimatePipeline:
        pl: EstimatePipeline | None = app.state.pipeline
        if pl is not None:
            return pl
        from balirab.api.deps import create_pipeline

        pl = create_pipeline(app.state.settings)
        app.state.pipeline = pl
        return pl

    # ------------------------------------------------------------------
    # GET /api/health
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": __version__}

    # ------------------------------------------------------------------
    # GET /api/options
    # ------------------------------------------------------------------

    @app.get("/api/options")
    def options() -> dict[str, Any]:
        return {
            "locations": [
                {"name": loc.value, "markup_percent": location_markup_percent(loc)}
                for loc in BaliLocation
            ],
            "building_types": [bt.value for bt in BuildingType],
            "other_building_type": BuildingType.OTHER.value,
            "qualities": [q.value for q in MaterialQuality],
            "max_floors": MAX_FLOORS,
            "note_suggestions": list(NOTE_SUGGESTIONS),
            "disclaimer": {
                "title": DISCLAIMER_TITLE,
                "lines": list(DISCLAIMER_LINES),
            },
        }

    # ------------------------------------------------------------------
    # POST /api/estimate
    # ------------------------------------------------------------------

    @app.post("/api/estimate")
    def estimate(
        project: ProjectDetails,
        x_api_key: str | None = Header(default=None),
    ) -> dict[str, Any]:
        pl = _get_pipeline()
        try:
            result = pl.run(project, credential=x_api_key)
        except InputValidationError as exc:
            logger.warning("Rejected project input: %s", exc)
            raise HTTPException(status_code=422, detail=exc.user_message) from exc
        except CredentialMissingError as exc:
            logger.warning("Estimate requested without an API key")
            raise HTTPException(status_code=400, detail=exc.user_message) from exc
        except RabError as exc:
            logger.exception("Estimation failed")
            raise HTTPException(status_code=502, detail=exc.user_message) from exc

        return {
            **_estimate_payload(result.estimate),
            "project": result.project.model_dump(mode="json", by_alias=True),
            "result": result.result.model_dump(mode="json", by_alias=True),
            "processing_time_seconds": result.processing_time_seconds,
        }

    # ------------------------------------------------------------------
    # GET /api/sample-estimate
    # ------------------------------------------------------------------

    @app.get("/api/sample-estimate")
    def sample_estimate() -> dict[str, Any]:
        est = normalize_result(SAMPLE_RESULT)
        return {
            **_estimate_payload(est),
            "project": SAMPLE_PROJECT.model_dump(mode="json", by_alias=True),
            "result": SAMPLE_RESULT.model_dump(mode="json", by_alias=True),
            "processing_time_seconds": 0.0,
        }

    # ------------------------------------------------------------------
    # POST /api/export/pdf
    # ------------------------------------------------------------------

    @app.post("/api/export/pdf")
    def export(body: ExportRequest) -> Response:
        est = normalize_result(body.result)
        content = export_pdf(est, body.project)
        filename = _export_filename(body.project.project_name if body.project else None)
        return Response(
            content=content,
            media_type="application/pdf",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    # ------------------------------------------------------------------
    # POST /api/chart.png
    # ------------------------------------------------------------------

    @app.post("/api/chart.png")
    def chart(result: RABResult) -> Response:
        segments = build_chart_segments(normalize_result(result))
        return Response(content=render_pie_chart_png(segments), media_type="image/png")

    return app
