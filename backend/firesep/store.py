"""In-memory record store for projects, walls and openings.

Keeps the ownership links (``Project.wall_ids``, ``WallAssessment.opening_ids``)
in step with the records and cascades deletes down the tree.  Records are
replaced, never mutated in place, so objects handed out by the store stay
valid snapshots.  Nothing is persisted.
"""

from __future__ import annotations

import logging
import threading
from datetime import datetime
from typing import TYPE_CHECKING, Any

from firesep.exceptions import RecordNotFoundError
from firesep.models.project import Opening, Project, WallAssessment

if TYPE_CHECKING:
    from firesep.models.project import OpeningInput, ProjectInput, WallInput

logger = logging.getLogger(__name__)

# Fields callers may not change through update_*
_PROTECTED_FIELDS = frozenset({
    "id", "project_id", "wall_id", "wall_ids", "opening_ids", "created_at", "updated_at",
})


def _merge(record: Any, changes: dict[str, Any], **extra: Any) -> dict[str, Any]:
    ignored = set(changes) & _PROTECTED_FIELDS
    if ignored:
        logger.debug("Ignoring read-only fields in update: %s", sorted(ignored))
    data = record.model_dump()
    data.update({k: v for k, v in changes.items() if k not in _PROTECTED_FIELDS})
    data.update(extra)
    return data


class ProjectStore:
    """Thread-safe in-memory store keyed by record id."""

    def __init__(self) -> None:
        self._projects: dict[str, Project] = {}
        self._walls: dict[str, WallAssessment] = {}
        self._openings: dict[str, Opening] = {}
        self._lock = threading.RLock()

    # ------------------------------------------------------------------
    # Projects
    # ------------------------------------------------------------------

    def create_project(self, data: ProjectInput) -> Project:
        project = Project(**data.model_dump())
        with self._lock:
            self._projects[project.id] = project
        logger.info("Created project %s (Class %s)", project.id, project.building_class.value)
        return project

    def get_project(self, project_id: str) -> Project:
        project = self._projects.get(project_id)
        if project is None:
            raise RecordNotFoundError("project", project_id)
        return project

    def list_projects(self) -> list[Project]:
        return list(self._projects.values())

    def update_project(self, project_id: str, changes: dict[str, Any]) -> Project:
        with self._lock:
            existing = self.get_project(project_id)
            updated = Project.model_validate(
                _merge(existing, changes, updated_at=datetime.now()),
            )
            self._projects[project_id] = updated
        return updated

    def delete_project(self, project_id: str) -> None:
        with self._lock:
            project = self.get_project(project_id)
            for wall_id in project.wall_ids:
                wall = self._walls.pop(wall_id, None)
                if wall is not None:
                    for opening_id in wall.opening_ids:
                        self._openings.pop(opening_id, None)
            del self._projects[project_id]
        logger.info("Deleted project %s and %d wall(s)", project_id, len(project.wall_ids))

    # ------------------------------------------------------------------
    # Walls
    # ------------------------------------------------------------------

    def add_wall(self, project_id: str, data: WallInput) -> WallAssessment:
        with self._lock:
            project = self.get_project(project_id)
            wall = WallAssessment(project_id=project_id, **data.model_dump())
            self._walls[wall.id] = wall
            self._projects[project_id] = project.model_copy(update={
                "wall_ids": [*project.wall_ids, wall.id],
                "updated_at": datetime.now(),
            })
        logger.info("Added wall %s to project %s", wall.id, project_id)
        return wall

    def get_wall(self, wall_id: str) -> WallAssessment:
        wall = self._walls.get(wall_id)
        if wall is None:
            raise RecordNotFoundError("wall", wall_id)
        return wall

    def walls_for_project(self, project_id: str) -> list[WallAssessment]:
        """Walls of a project in the order they were added."""
        project = self.get_project(project_id)
        return [self._walls[w] for w in project.wall_ids if w in self._walls]

    def update_wall(self, wall_id: str, changes: dict[str, Any]) -> WallAssessment:
        with self._lock:
            existing = self.get_wall(wall_id)
            updated = WallAssessment.model_validate(
                _merge(existing, changes, updated_at=datetime.now()),
            )
            self._walls[wall_id] = updated
        return updated

    def delete_wall(self, wall_id: str) -> None:
        with self._lock:
            wall = self.get_wall(wall_id)
            for opening_id in wall.opening_ids:
                self._openings.pop(opening_id, None)
            del self._walls[wall_id]
            project = self._projects.get(wall.project_id)
            if project is not None:
                self._projects[project.id] = project.model_copy(update={
                    "wall_ids": [w for w in project.wall_ids if w != wall_id],
                    "updated_at": datetime.now(),
                })
        logger.info("Deleted wall %s and %d opening(s)", wall_id, len(wall.opening_ids))

    # ------------------------------------------------------------------
    # Openings
    # ------------------------------------------------------------------

    def add_opening(self, wall_id: str, data: OpeningInput) -> Opening:
        with self._lock:
            wall = self.get_wall(wall_id)
            opening = Opening(wall_id=wall_id, **data.model_dump())
            self._openings[opening.id] = opening
            self._walls[wall_id] = wall.model_copy(update={
                "opening_ids": [*wall.opening_ids, opening.id],
                "updated_at": datetime.now(),
            })
        logger.info("Added %s opening %s to wall %s", opening.type.value, opening.id, wall_id)
        return opening

    def get_opening(self, opening_id: str) -> Opening:
        opening = self._openings.get(opening_id)
        if opening is None:
            raise RecordNotFoundError("opening", opening_id)
        return opening

    def openings_for_wall(self, wall_id: str) -> list[Opening]:
        """Openings of a wall in the order they were added."""
        wall = self.get_wall(wall_id)
        return [self._openings[o] for o in wall.opening_ids if o in self._openings]

    def update_opening(self, opening_id: str, changes: dict[str, Any]) -> Opening:
        with self._lock:
            existing = self.get_opening(opening_id)
            updated = Opening.model_validate(_merge(existing, changes))
            self._openings[opening_id] = updated
        return updated

    def delete_opening(self, opening_id: str) -> None:
        with self._lock:
            opening = self.get_opening(opening_id)
            del self._openings[opening_id]
            wall = self._walls.get(opening.wall_id)
            if wall is not None:
                self._walls[wall.id] = wall.model_copy(update={
                    "opening_ids": [o for o in wall.opening_ids if o != opening_id],
                    "updated_at": datetime.now(),
                })
        logger.info("Deleted opening %s", opening_id)
