"""HTTP surface: project records, wall assessments and NCC reference data."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING, Any

from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ValidationError

# Load .env from project root (backend/../.env or backend/.env)
_backend_dir = Path(__file__).resolve().parent.parent.parent
_project_root = _backend_dir.parent
load_dotenv(_project_root / ".env")
load_dotenv(_backend_dir / ".env")

from firesep.engine import ENGINE_VERSION
from firesep.exceptions import NotAssessableError, RecordNotFoundError
from firesep.models.project import (  # noqa: TCH001 (FastAPI resolves at runtime)
    Opening,
    OpeningInput,
    Project,
    ProjectInput,
    WallAssessment,
    WallInput,
)
from firesep.store import ProjectStore

if TYPE_CHECKING:
    from firesep.engine import ComplianceEngine

logger = logging.getLogger(__name__)

_DEFAULT_CORS_ORIGINS = "http://localhost:5173"


class AssessRequest(BaseModel):
    """Body of POST /api/assess: everything needed for one wall."""

    project: Project
    wall: WallAssessment
    openings: list[Opening] = []


def _cors_origins() -> list[str]:
    raw = os.environ.get("FIRESEP_CORS_ORIGINS", _DEFAULT_CORS_ORIGINS)
    return [origin.strip() for origin in raw.split(",") if origin.strip()]


def _ensure_assessable(project: Project) -> None:
    if project.building_class.is_class10():
        msg = (
            f"Class {project.building_class.value} buildings are non-habitable; "
            "construction type and FRL requirements do not apply."
        )
        raise NotAssessableError(msg)


def create_app(
    *,
    engine: ComplianceEngine | None = None,
    store: ProjectStore | None = None,
) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    engine
        Optional pre-built compliance engine (e.g. tests). If not provided,
        one is created via create_default_engine on first request.
    store
        Optional record store. A fresh in-memory store is used otherwise.
    """
    app = FastAPI(title="firesep", version=ENGINE_VERSION)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=_cors_origins(),
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Store on app state so tests can inject their own
    app.state.engine = engine
    app.state.store = store if store is not None else ProjectStore()

    def _get_engine() -> ComplianceEngine:
        eng: ComplianceEngine | None = app.state.engine
        if eng is not None:
            return eng
        from firesep.factory import create_default_engine

        eng = create_default_engine()
        app.state.engine = eng
        return eng

    def _get_store() -> ProjectStore:
        return app.state.store

    def _assessment_payload(
        project: Project, wall: WallAssessment, openings: list[Opening],
    ) -> dict[str, Any]:
        result = _get_engine().assess_wall(project, wall, openings)
        return {
            "result": result.model_dump(mode="json"),
            "summary_dict": result.to_summary_dict(),
        }

    # ------------------------------------------------------------------
    # Error mapping
    # ------------------------------------------------------------------

    @app.exception_handler(RecordNotFoundError)
    async def _not_found(_: Request, exc: RecordNotFoundError) -> JSONResponse:
        logger.warning("%s", exc)
        return JSONResponse(status_code=404, content={"detail": str(exc)})

    @app.exception_handler(NotAssessableError)
    async def _not_assessable(_: Request, exc: NotAssessableError) -> JSONResponse:
        logger.warning("Assessment refused: %s", exc)
        return JSONResponse(status_code=422, content={"detail": str(exc)})

    @app.exception_handler(ValidationError)
    async def _invalid_update(_: Request, exc: ValidationError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={"detail": exc.errors(include_url=False, include_context=False)},
        )

    # ------------------------------------------------------------------
    # GET /api/health, GET /api/building-classes
    # ------------------------------------------------------------------

    @app.get("/api/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "version": ENGINE_VERSION}

    @app.get("/api/building-classes")
    def building_classes() -> list[dict[str, Any]]:
        return [
            info.model_dump(mode="json")
            for info in _get_engine().repository.list_building_classes()
        ]

    # ------------------------------------------------------------------
    # POST /api/assess (stateless)
    # ------------------------------------------------------------------

    @app.post("/api/assess")
    def assess(body: AssessRequest) -> dict[str, Any]:
        _ensure_assessable(body.project)
        return _assessment_payload(body.project, body.wall, body.openings)

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    @app.post("/api/projects", status_code=201)
    def create_project(data: ProjectInput) -> dict[str, Any]:
        return _get_store().create_project(data).model_dump(mode="json")

    @app.get("/api/projects")
    def list_projects() -> list[dict[str, Any]]:
        return [p.model_dump(mode="json") for p in _get_store().list_projects()]

    @app.get("/api/projects/{project_id}")
    def get_project(project_id: str) -> dict[str, Any]:
        return _get_store().get_project(project_id).model_dump(mode="json")

    @app.patch("/api/projects/{project_id}")
    def update_project(project_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        return _get_store().update_project(project_id, changes).model_dump(mode="json")

    @app.delete("/api/projects/{project_id}", status_code=204)
    def delete_project(project_id: str) -> None:
        _get_store().delete_project(project_id)

    @app.get("/api/projects/{project_id}/assessment")
    def assess_project(project_id: str) -> dict[str, Any]:
        store = _get_store()
        project = store.get_project(project_id)
        _ensure_assessable(project)
        walls = store.walls_for_project(project_id)
        summary = _get_engine().assess_project(
            project,
            walls,
            {w.id: store.openings_for_wall(w.id) for w in walls},
        )
        return {
            "project_id": project_id,
            "overall_compliant": summary.overall_compliant,
            "compliant_wall_count": summary.compliant_wall_count,
            "non_compliant_wall_count": summary.non_compliant_wall_count,
            "walls": [r.to_summary_dict() for r in summary.wall_results],
        }

    # ------------------------------------------------------------------
    # Walls
    # ------------------------------------------------------------------

    @app.post("/api/projects/{project_id}/walls", status_code=201)
    def add_wall(project_id: str, data: WallInput) -> dict[str, Any]:
        return _get_store().add_wall(project_id, data).model_dump(mode="json")

    @app.get("/api/walls/{wall_id}")
    def get_wall(wall_id: str) -> dict[str, Any]:
        return _get_store().get_wall(wall_id).model_dump(mode="json")

    @app.patch("/api/walls/{wall_id}")
    def update_wall(wall_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        return _get_store().update_wall(wall_id, changes).model_dump(mode="json")

    @app.delete("/api/walls/{wall_id}", status_code=204)
    def delete_wall(wall_id: str) -> None:
        _get_store().delete_wall(wall_id)

    @app.get("/api/walls/{wall_id}/assessment")
    def assess_wall(wall_id: str) -> dict[str, Any]:
        store = _get_store()
        wall = store.get_wall(wall_id)
        project = store.get_project(wall.project_id)
        _ensure_assessable(project)
        return _assessment_payload(project, wall, store.openings_for_wall(wall_id))

    # ------------------------------------------------------------------
    # Openings
    # ------------------------------------------------------------------

    @app.post("/api/walls/{wall_id}/openings", status_code=201)
    def add_opening(wall_id: str, data: OpeningInput) -> dict[str, Any]:
        return _get_store().add_opening(wall_id, data).model_dump(mode="json")

    @app.get("/api/openings/{opening_id}")
    def get_opening(opening_id: str) -> dict[str, Any]:
        return _get_store().get_opening(opening_id).model_dump(mode="json")

    @app.patch("/api/openings/{opening_id}")
    def update_opening(opening_id: str, changes: dict[str, Any]) -> dict[str, Any]:
        return _get_store().update_opening(opening_id, changes).model_dump(mode="json")

    @app.delete("/api/openings/{opening_id}", status_code=204)
    def delete_opening(opening_id: str) -> None:
        _get_store().delete_opening(opening_id)

    return app
