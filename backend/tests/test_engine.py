"""Tests for the ComplianceEngine: dispatch and end-to-end wall verdicts."""

from __future__ import annotations

import logging

import pytest

from firesep.data.construction_types import CONSTRUCTION_TYPE_RULES
from firesep.data.frl_tables import FRL_EXTERNAL_WALL_TABLE
from firesep.data.repository import NccDataRepository
from firesep.engine import ComplianceEngine
from firesep.models.enums import (
    BoundaryType,
    BuildingClass,
    ConstructionType,
    GlassType,
    OpeningType,
    RoomType,
)
from firesep.models.project import (
    DoorDetails,
    GeneralOpeningDetails,
    Opening,
    Project,
    WallAssessment,
    WindowDetails,
)


@pytest.fixture()
def repo() -> NccDataRepository:
    """Repository loaded with the bundled NCC tables."""
    return NccDataRepository(CONSTRUCTION_TYPE_RULES, FRL_EXTERNAL_WALL_TABLE)


@pytest.fixture()
def engine(repo: NccDataRepository) -> ComplianceEngine:
    """ComplianceEngine wired to the bundled tables."""
    return ComplianceEngine(repo)


# ---------------------------------------------------------------------------
# Helper builders
# ---------------------------------------------------------------------------


def _project(
    building_class: BuildingClass = BuildingClass.CLASS_1A,
    rise_in_storeys: int = 1,
    has_sprinklers: bool = False,
) -> Project:
    return Project(
        name="Test Project",
        building_class=building_class,
        rise_in_storeys=rise_in_storeys,
        has_sprinklers=has_sprinklers,
    )


def _wall(
    distance: float,
    boundary_type: BoundaryType = BoundaryType.SIDE_REAR,
    height: float = 2.7,
    width: float = 10.0,
    is_loadbearing: bool = False,
) -> WallAssessment:
    return WallAssessment(
        project_id="p1",
        name="Side wall",
        height=height,
        width=width,
        distance_to_boundary=distance,
        boundary_type=boundary_type,
        is_loadbearing=is_loadbearing,
    )


def _window(
    width: float = 1.2,
    height: float = 1.0,
    **details: object,
) -> Opening:
    return Opening(
        wall_id="w1",
        type=OpeningType.WINDOW,
        name="Window",
        width=width,
        height=height,
        details=WindowDetails(**details),
    )


def _door(**details: object) -> Opening:
    return Opening(
        wall_id="w1",
        type=OpeningType.DOOR,
        name="Door",
        width=0.82,
        height=2.04,
        details=DoorDetails(**details),
    )


def _vent(is_exempt: bool = True) -> Opening:
    return Opening(
        wall_id="w1",
        type=OpeningType.GENERAL_OPENING,
        name="Subfloor vent",
        width=0.23,
        height=0.16,
        details=GeneralOpeningDetails(description="Subfloor vent", is_exempt=is_exempt),
    )


# ---------------------------------------------------------------------------
# Class 1 scenarios
# ---------------------------------------------------------------------------


class TestClass1Scenarios:
    """Dwelling walls assessed under Housing Provisions Part 9.2."""

    def test_wall_within_900mm_requires_60_60_60(self, engine: ComplianceEngine) -> None:
        result = engine.assess_wall(_project(), _wall(0.8), [])
        assert result.wall_needs_fire_resistance is True
        assert result.required_wall_frl_string == "60/60/60"

    def test_wall_at_exactly_900mm_does_not_trigger(self, engine: ComplianceEngine) -> None:
        result = engine.assess_wall(_project(), _wall(0.9), [])
        assert result.wall_needs_fire_resistance is False
        assert result.required_wall_frl_string == "-/-/-"

    def test_wall_just_under_900mm_triggers(self, engine: ComplianceEngine) -> None:
        result = engine.assess_wall(_project(), _wall(0.899), [])
        assert result.wall_needs_fire_resistance is True

    def test_standard_window_fails_fire_rated_window_passes(
        self, engine: ComplianceEngine
    ) -> None:
        wall = _wall(0.5)
        standard = engine.assess_wall(_project(), wall, [_window()])
        rated = engine.assess_wall(
            _project(), wall, [_window(is_fire_rated=True, is_openable=False)]
        )
        assert standard.overall_compliant is False
        assert rated.overall_compliant is True

    def test_same_allotment_threshold_is_1_8m(self, engine: ComplianceEngine) -> None:
        near = engine.assess_wall(_project(), _wall(1.5, BoundaryType.SAME_ALLOTMENT), [])
        at = engine.assess_wall(_project(), _wall(1.8, BoundaryType.SAME_ALLOTMENT), [])
        assert near.wall_needs_fire_resistance is True
        assert at.wall_needs_fire_resistance is False

    def test_road_boundary_never_triggers(self, engine: ComplianceEngine) -> None:
        result = engine.assess_wall(_project(), _wall(0.1, BoundaryType.ROAD), [_window()])
        assert result.wall_needs_fire_resistance is False
        assert result.overall_compliant is True

    def test_class_1b_uses_dwelling_rules(self, engine: ComplianceEngine) -> None:
        result = engine.assess_wall(_project(BuildingClass.CLASS_1B), _wall(0.5), [])
        assert result.construction_type is None
        assert result.required_wall_frl_string == "60/60/60"
        assert result.max_allowed_unprotected_percentage is None

    def test_bathroom_window_concession(self, engine: ComplianceEngine) -> None:
        window = _window(
            width=0.6,
            height=0.8,
            glass_type=GlassType.WIRED_GLASS,
            is_in_habitable_room=False,
            room_type=RoomType.BATHROOM,
        )
        result = engine.assess_wall(_project(), _wall(0.7), [window])
        assert result.wall_needs_fire_resistance is True
        assert result.overall_compliant is True
        assert "Concession" in result.opening_results[0].required_protection

    def test_self_closing_35mm_door_complies(self, engine: ComplianceEngine) -> None:
        door = _door(is_self_closing=True, thickness=35)
        result = engine.assess_wall(_project(), _wall(0.5), [door])
        assert result.overall_compliant is True

    def test_exempt_vent_does_not_fail_wall(self, engine: ComplianceEngine) -> None:
        result = engine.assess_wall(_project(), _wall(0.5), [_vent()])
        assert result.overall_compliant is True
        assert result.exempt_opening_area == pytest.approx(0.23 * 0.16)


# ---------------------------------------------------------------------------
# Class 2-9 scenarios
# ---------------------------------------------------------------------------


class TestClass2to9Scenarios:
    """Walls assessed under NCC Volume One Parts C2-C4."""

    @pytest.mark.parametrize(
        ("building_class", "storeys", "expected"),
        [
            (BuildingClass.CLASS_5, 1, ConstructionType.TYPE_C),
            (BuildingClass.CLASS_2, 3, ConstructionType.TYPE_A),
            (BuildingClass.CLASS_5, 3, ConstructionType.TYPE_B),
        ],
    )
    def test_construction_type(
        self,
        engine: ComplianceEngine,
        building_class: BuildingClass,
        storeys: int,
        expected: ConstructionType,
    ) -> None:
        result = engine.assess_wall(_project(building_class, storeys), _wall(5.0), [])
        assert result.construction_type == expected

    def test_sprinklers_double_effective_distance(self, engine: ComplianceEngine) -> None:
        wall = _wall(2.0)
        dry = engine.assess_wall(_project(BuildingClass.CLASS_5), wall, [])
        wet = engine.assess_wall(
            _project(BuildingClass.CLASS_5, has_sprinklers=True), wall, []
        )
        assert dry.opening_protection_required is True
        assert wet.opening_protection_required is False
        assert dry.construction_type == wet.construction_type

    def test_opening_area_cap_fails_even_when_openings_protected(
        self, engine: ComplianceEngine
    ) -> None:
        wall = _wall(1.0, height=3.0, width=5.0)
        window = _window(width=3.0, height=2.0, is_fire_rated=True)
        result = engine.assess_wall(_project(BuildingClass.CLASS_5), wall, [window])
        assert result.total_wall_area == pytest.approx(15.0)
        assert result.opening_results[0].compliant is True
        assert result.opening_area_compliant is False
        assert result.overall_compliant is False

    def test_opening_area_at_exactly_one_third_passes(
        self, engine: ComplianceEngine
    ) -> None:
        wall = _wall(1.0, height=3.0, width=5.0)
        window = _window(width=2.5, height=2.0, is_fire_rated=True)
        result = engine.assess_wall(_project(BuildingClass.CLASS_5), wall, [window])
        assert result.overall_compliant is True

    def test_type_a_loadbearing_at_1m(self, engine: ComplianceEngine) -> None:
        project = _project(BuildingClass.CLASS_2, rise_in_storeys=4)
        result = engine.assess_wall(project, _wall(1.0, is_loadbearing=True), [])
        assert result.construction_type == ConstructionType.TYPE_A
        assert result.required_wall_frl_string == "90/90/90"
        assert result.wall_needs_fire_resistance is True

    def test_type_a_non_loadbearing_at_4m(self, engine: ComplianceEngine) -> None:
        project = _project(BuildingClass.CLASS_2, rise_in_storeys=4)
        result = engine.assess_wall(project, _wall(4.0), [])
        assert result.required_wall_frl_string == "-/-/-"
        assert result.wall_needs_fire_resistance is False

    def test_road_boundary_uses_6m_threshold(self, engine: ComplianceEngine) -> None:
        project = _project(BuildingClass.CLASS_5)
        at_5 = engine.assess_wall(project, _wall(5.0, BoundaryType.ROAD), [])
        at_6 = engine.assess_wall(project, _wall(6.0, BoundaryType.ROAD), [])
        assert at_5.opening_protection_required is True
        assert at_6.opening_protection_required is False

    def test_unprotected_door_fails(self, engine: ComplianceEngine) -> None:
        project = _project(BuildingClass.CLASS_5)
        door = _door(is_self_closing=True, thickness=40)
        result = engine.assess_wall(project, _wall(1.0), [door])
        assert result.overall_compliant is False


# ---------------------------------------------------------------------------
# Engine behaviour
# ---------------------------------------------------------------------------


class TestEngineBehaviour:
    def test_repeat_calls_give_identical_results(self, engine: ComplianceEngine) -> None:
        project = _project(BuildingClass.CLASS_5)
        wall = _wall(1.0)
        openings = [_window(), _door(is_fire_door=True), _vent()]
        first = engine.assess_wall(project, wall, openings)
        second = engine.assess_wall(project, wall, openings)
        assert first == second

    def test_opening_results_follow_input_order(self, engine: ComplianceEngine) -> None:
        openings = [_door(), _window(), _vent()]
        result = engine.assess_wall(_project(), _wall(0.5), openings)
        assert [r.opening_id for r in result.opening_results] == [o.id for o in openings]

    def test_areas_are_exact_products(self, engine: ComplianceEngine) -> None:
        openings = [_window(width=1.2, height=1.0), _door()]
        result = engine.assess_wall(_project(), _wall(2.0, height=2.4, width=8.5), openings)
        assert result.total_wall_area == pytest.approx(2.4 * 8.5)
        assert result.total_opening_area == pytest.approx(1.2 + 0.82 * 2.04)

    def test_class_10_falls_through_with_warning(
        self,
        engine: ComplianceEngine,
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.WARNING, logger="firesep.engine"):
            result = engine.assess_wall(_project(BuildingClass.CLASS_10A), _wall(1.0), [])
        assert result.construction_type is None
        assert result.required_wall_frl_string == "-/-/-"
        assert "Class 10" in caplog.text

    def test_assess_project_covers_every_wall(self, engine: ComplianceEngine) -> None:
        project = _project()
        near = _wall(0.5)
        far = _wall(2.0)
        window = _window()
        summary = engine.assess_project(project, [near, far], {near.id: [window]})
        assert [r.wall_id for r in summary.wall_results] == [near.id, far.id]
        assert summary.compliant_wall_count == 1
        assert summary.non_compliant_wall_count == 1
        assert summary.overall_compliant is False
        assert summary.wall_results[1].opening_results == []

    def test_assess_project_with_no_walls_is_compliant(
        self, engine: ComplianceEngine
    ) -> None:
        summary = engine.assess_project(_project(), [], {})
        assert summary.overall_compliant is True
        assert summary.wall_results == []
