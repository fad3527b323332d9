"""Tests for the in-memory ProjectStore."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from firesep.exceptions import RecordNotFoundError
from firesep.models.enums import BoundaryType, BuildingClass, OpeningType
from firesep.models.project import (
    DoorDetails,
    OpeningInput,
    ProjectInput,
    WallInput,
    WindowDetails,
)
from firesep.store import ProjectStore


@pytest.fixture()
def store() -> ProjectStore:
    return ProjectStore()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _project_input(building_class: BuildingClass = BuildingClass.CLASS_1A) -> ProjectInput:
    return ProjectInput(name="12 Example St", building_class=building_class)


def _wall_input(name: str = "West wall") -> WallInput:
    return WallInput(
        name=name,
        height=2.7,
        width=8.0,
        distance_to_boundary=0.8,
        boundary_type=BoundaryType.SIDE_REAR,
    )


def _window_input() -> OpeningInput:
    return OpeningInput(
        type=OpeningType.WINDOW,
        name="Bedroom window",
        width=1.2,
        height=1.0,
        details=WindowDetails(),
    )


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


class TestProjects:
    def test_create_and_get(self, store: ProjectStore) -> None:
        project = store.create_project(_project_input())
        assert store.get_project(project.id) == project
        assert store.list_projects() == [project]

    def test_missing_project_raises(self, store: ProjectStore) -> None:
        with pytest.raises(RecordNotFoundError, match="Project 'nope' not found") as exc:
            store.get_project("nope")
        assert exc.value.kind == "project"
        assert exc.value.record_id == "nope"

    def test_update_changes_fields_and_timestamp(self, store: ProjectStore) -> None:
        project = store.create_project(_project_input())
        updated = store.update_project(project.id, {"has_sprinklers": True, "name": "Renamed"})
        assert updated.has_sprinklers is True
        assert updated.name == "Renamed"
        assert updated.updated_at >= project.updated_at
        assert store.get_project(project.id) == updated

    def test_update_ignores_read_only_fields(self, store: ProjectStore) -> None:
        project = store.create_project(_project_input())
        updated = store.update_project(project.id, {"id": "hijack", "wall_ids": ["x"]})
        assert updated.id == project.id
        assert updated.wall_ids == []

    def test_invalid_update_rejected_and_record_kept(self, store: ProjectStore) -> None:
        project = store.create_project(_project_input())
        with pytest.raises(ValidationError):
            store.update_project(project.id, {"rise_in_storeys": 0})
        assert store.get_project(project.id) == project

    def test_delete_cascades(self, store: ProjectStore) -> None:
        project = store.create_project(_project_input())
        wall = store.add_wall(project.id, _wall_input())
        opening = store.add_opening(wall.id, _window_input())

        store.delete_project(project.id)

        with pytest.raises(RecordNotFoundError):
            store.get_project(project.id)
        with pytest.raises(RecordNotFoundError):
            store.get_wall(wall.id)
        with pytest.raises(RecordNotFoundError):
            store.get_opening(opening.id)


# ---------------------------------------------------------------------------
# Walls
# ---------------------------------------------------------------------------


class TestWalls:
    def test_add_wall_links_project(self, store: ProjectStore) -> None:
        project = store.create_project(_project_input())
        first = store.add_wall(project.id, _wall_input("A"))
        second = store.add_wall(project.id, _wall_input("B"))
        assert store.get_project(project.id).wall_ids == [first.id, second.id]
        assert store.walls_for_project(project.id) == [first, second]
        assert first.project_id == project.id

    def test_add_wall_to_missing_project(self, store: ProjectStore) -> None:
        with pytest.raises(RecordNotFoundError):
            store.add_wall("missing", _wall_input())

    def test_update_wall(self, store: ProjectStore) -> None:
        project = store.create_project(_project_input())
        wall = store.add_wall(project.id, _wall_input())
        updated = store.update_wall(
            wall.id, {"distance_to_boundary": 1.2, "project_id": "other"}
        )
        assert updated.distance_to_boundary == 1.2
        assert updated.project_id == project.id

    def test_delete_wall_unlinks_and_cascades(self, store: ProjectStore) -> None:
        project = store.create_project(_project_input())
        wall = store.add_wall(project.id, _wall_input())
        opening = store.add_opening(wall.id, _window_input())

        store.delete_wall(wall.id)

        assert store.get_project(project.id).wall_ids == []
        with pytest.raises(RecordNotFoundError):
            store.get_opening(opening.id)


# ---------------------------------------------------------------------------
# Openings
# ---------------------------------------------------------------------------


class TestOpenings:
    def test_add_opening_links_wall(self, store: ProjectStore) -> None:
        project = store.create_project(_project_input())
        wall = store.add_wall(project.id, _wall_input())
        opening = store.add_opening(wall.id, _window_input())
        assert opening.wall_id == wall.id
        assert store.get_wall(wall.id).opening_ids == [opening.id]
        assert store.openings_for_wall(wall.id) == [opening]

    def test_update_opening_details(self, store: ProjectStore) -> None:
        project = store.create_project(_project_input())
        wall = store.add_wall(project.id, _wall_input())
        opening = store.add_opening(wall.id, _window_input())
        updated = store.update_opening(
            opening.id, {"details": {"type": "window", "is_fire_rated": True}}
        )
        assert isinstance(updated.details, WindowDetails)
        assert updated.details.is_fire_rated is True

    def test_switching_type_needs_matching_details(self, store: ProjectStore) -> None:
        project = store.create_project(_project_input())
        wall = store.add_wall(project.id, _wall_input())
        opening = store.add_opening(wall.id, _window_input())
        with pytest.raises(ValidationError):
            store.update_opening(opening.id, {"type": "door"})
        updated = store.update_opening(
            opening.id, {"type": "door", "details": {"type": "door", "is_fire_door": True}}
        )
        assert isinstance(updated.details, DoorDetails)

    def test_delete_opening_unlinks(self, store: ProjectStore) -> None:
        project = store.create_project(_project_input())
        wall = store.add_wall(project.id, _wall_input())
        opening = store.add_opening(wall.id, _window_input())
        store.delete_opening(opening.id)
        assert store.get_wall(wall.id).opening_ids == []
        with pytest.raises(RecordNotFoundError):
            store.delete_opening(opening.id)
