"""Fire separation of external walls for Class 1 buildings.

NCC Housing Provisions Part 9.2.  A wall within 900mm of an allotment
boundary (or 1.8m of another building on the same allotment) must be
fire-resisting with an FRL of 60/60/60, and every opening in it must be
protected.  Walls facing a road never trigger.

Openings in a fire-resisting wall:

- windows must be fire-rated, unless the small window concession applies
  (non-habitable room, far enough from the boundary, small enough, with
  wired glass, hollow glass block or fire-rated glazing);
- doors must be fire doors or self-closing solid core doors of at least
  35mm;
- non-exempt general openings cannot comply.

There is no prescriptive limit on the percentage of opening area.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from firesep.calculations import (
    bucket_opening_areas,
    calculate_opening_area,
    calculate_total_opening_area,
    calculate_unprotected_percentage,
    calculate_wall_area,
    is_opening_exempt,
)
from firesep.data.opening_protection import (
    CLASS1_DOOR_PROTECTION,
    CLASS1_GENERAL_OPENING_PROTECTION,
    CLASS1_WINDOW_PROTECTION,
)
from firesep.data.thresholds import (
    CLASS1_BOUNDARY_FIRE_RESISTANCE_THRESHOLD,
    CLASS1_MIN_SOLID_CORE_DOOR_THICKNESS,
    CLASS1_REQUIRED_FRL,
    CLASS1_SAME_ALLOTMENT_FIRE_RESISTANCE_THRESHOLD,
    CLASS1_WINDOW_CONCESSION_BATHROOM_MAX_AREA,
    CLASS1_WINDOW_CONCESSION_BOUNDARY_THRESHOLD,
    CLASS1_WINDOW_CONCESSION_OTHER_MAX_AREA,
    CLASS1_WINDOW_CONCESSION_SAME_ALLOTMENT_THRESHOLD,
)
from firesep.formatting import format_distance, format_frl
from firesep.models.compliance import OpeningComplianceResult, WallComplianceResult
from firesep.models.enums import BoundaryType, GlassType, RoomType
from firesep.models.frl import NO_FRL
from firesep.models.project import DoorDetails, GeneralOpeningDetails, WindowDetails

if TYPE_CHECKING:
    from firesep.models.project import Opening, WallAssessment

_CONCESSION_GLAZING = frozenset({
    GlassType.WIRED_GLASS,
    GlassType.HOLLOW_GLASS_BLOCK,
    GlassType.FIRE_RATED,
})

_WET_ROOMS = frozenset({RoomType.BATHROOM, RoomType.LAUNDRY, RoomType.TOILET})


def assess_class1_wall(
    wall: WallAssessment,
    openings: list[Opening],
) -> WallComplianceResult:
    """Assess a Class 1 external wall and its openings."""
    total_wall_area = calculate_wall_area(wall.height, wall.width)
    compliance_notes: list[str] = []
    ncc_references: list[str] = []

    # 1. Does the wall need to be fire-resisting?
    needs_fire_resistance = class1_needs_fire_resistance(
        wall.distance_to_boundary,
        wall.boundary_type,
    )
    required_frl = CLASS1_REQUIRED_FRL if needs_fire_resistance else NO_FRL

    if needs_fire_resistance:
        if wall.boundary_type == BoundaryType.SAME_ALLOTMENT:
            within = (
                f"{format_distance(CLASS1_SAME_ALLOTMENT_FIRE_RESISTANCE_THRESHOLD)} "
                "of another building on the same allotment"
            )
        else:
            within = (
                f"{format_distance(CLASS1_BOUNDARY_FIRE_RESISTANCE_THRESHOLD)} "
                "of the allotment boundary"
            )
        compliance_notes.append(f"Wall is within {within} and must be fire-resisting.")
        compliance_notes.append(
            f"Required FRL: {format_frl(CLASS1_REQUIRED_FRL)} when tested from outside."
        )
        ncc_references.append("NCC Housing Provisions Part 9.2")
    else:
        compliance_notes.append(
            "Wall does not require fire-resistance based on distance to boundary."
        )

    # 2. Assess each opening
    opening_results = [
        _assess_opening(opening, wall, needs_fire_resistance) for opening in openings
    ]

    # 3. Area summary
    total_opening_area = calculate_total_opening_area(openings)
    unprotected_area, protected_area, exempt_area = bucket_opening_areas(openings)
    unprotected_percentage = calculate_unprotected_percentage(
        unprotected_area, total_wall_area,
    )

    # Every opening in a fire-resisting wall must be protected
    opening_area_compliant = (
        not needs_fire_resistance or all(r.compliant for r in opening_results)
    )

    return WallComplianceResult(
        wall_id=wall.id,
        total_wall_area=total_wall_area,
        total_opening_area=total_opening_area,
        unprotected_opening_area=unprotected_area,
        protected_opening_area=protected_area,
        exempt_opening_area=exempt_area,
        unprotected_area_percentage=unprotected_percentage,
        construction_type=None,
        required_wall_frl=required_frl,
        required_wall_frl_string=format_frl(required_frl),
        wall_needs_fire_resistance=needs_fire_resistance,
        opening_protection_required=needs_fire_resistance,
        max_allowed_unprotected_percentage=None,
        opening_area_compliant=opening_area_compliant,
        opening_results=opening_results,
        overall_compliant=opening_area_compliant,
        compliance_notes=compliance_notes,
        ncc_references=ncc_references,
    )


def class1_needs_fire_resistance(distance: float, boundary_type: BoundaryType) -> bool:
    match boundary_type:
        case BoundaryType.SIDE_REAR:
            return distance < CLASS1_BOUNDARY_FIRE_RESISTANCE_THRESHOLD
        case BoundaryType.SAME_ALLOTMENT:
            return distance < CLASS1_SAME_ALLOTMENT_FIRE_RESISTANCE_THRESHOLD
        case BoundaryType.ROAD:
            return False
        case _:
            assert_never(boundary_type)


def _assess_opening(
    opening: Opening,
    wall: WallAssessment,
    needs_fire_resistance: bool,
) -> OpeningComplianceResult:
    area = calculate_opening_area(opening)

    # Subfloor vents, weepholes
    if is_opening_exempt(opening):
        return OpeningComplianceResult(
            opening_id=opening.id,
            opening_name=opening.name,
            area=area,
            is_exempt=True,
            protection_required=False,
            currently_protected=True,
            required_protection="None (exempt opening)",
            compliant=True,
            notes=["This opening is exempt from fire protection requirements."],
        )

    if not needs_fire_resistance:
        return OpeningComplianceResult(
            opening_id=opening.id,
            opening_name=opening.name,
            area=area,
            is_exempt=False,
            protection_required=False,
            currently_protected=True,
            required_protection="None required",
            compliant=True,
            notes=["Wall does not require fire-resistance; opening is compliant."],
        )

    details = opening.details
    match details:
        case WindowDetails():
            return _assess_window(opening, details, wall, area)
        case DoorDetails():
            return _assess_door(opening, details, area)
        case GeneralOpeningDetails():
            return OpeningComplianceResult(
                opening_id=opening.id,
                opening_name=opening.name,
                area=area,
                is_exempt=False,
                protection_required=True,
                currently_protected=False,
                required_protection=CLASS1_GENERAL_OPENING_PROTECTION,
                compliant=False,
                notes=["Unprotected general opening in a fire-resisting wall."],
            )
        case _:
            assert_never(details)


def _assess_window(
    opening: Opening,
    details: WindowDetails,
    wall: WallAssessment,
    area: float,
) -> OpeningComplianceResult:
    notes: list[str] = []

    # Small window concession (9.2.3)
    if wall.boundary_type == BoundaryType.SAME_ALLOTMENT:
        concession_distance = CLASS1_WINDOW_CONCESSION_SAME_ALLOTMENT_THRESHOLD
    else:
        concession_distance = CLASS1_WINDOW_CONCESSION_BOUNDARY_THRESHOLD

    if (
        not details.is_in_habitable_room
        and wall.distance_to_boundary >= concession_distance
    ):
        if details.room_type in _WET_ROOMS:
            max_area = CLASS1_WINDOW_CONCESSION_BATHROOM_MAX_AREA
        else:
            max_area = CLASS1_WINDOW_CONCESSION_OTHER_MAX_AREA

        acceptable_glazing = details.glass_type in _CONCESSION_GLAZING

        if area <= max_area and acceptable_glazing:
            notes.append(
                f"Small window concession applies: {area:.2f}m² ≤ {max_area}m² "
                "with acceptable glazing."
            )
            return OpeningComplianceResult(
                opening_id=opening.id,
                opening_name=opening.name,
                area=area,
                is_exempt=False,
                protection_required=False,
                currently_protected=True,
                required_protection=(
                    "Concession applies (small non-habitable room window)"
                ),
                compliant=True,
                notes=notes,
            )

        if area <= max_area:
            notes.append(
                f"Window area ({area:.2f}m²) qualifies for concession but requires "
                "wired glass, hollow glass block, or fire-rated glazing."
            )

    is_protected = details.is_fire_rated
    if is_protected:
        notes.append("Window is fire-rated and complies.")
    else:
        notes.append(
            "Window in fire-resisting wall must be a non-openable fire window "
            "or have fire-rated glazing."
        )

    return OpeningComplianceResult(
        opening_id=opening.id,
        opening_name=opening.name,
        area=area,
        is_exempt=False,
        protection_required=True,
        currently_protected=is_protected,
        required_protection=CLASS1_WINDOW_PROTECTION,
        compliant=is_protected,
        notes=notes,
    )


def _assess_door(
    opening: Opening,
    details: DoorDetails,
    area: float,
) -> OpeningComplianceResult:
    notes: list[str] = []
    min_thickness = CLASS1_MIN_SOLID_CORE_DOOR_THICKNESS
    thick_enough = details.thickness >= min_thickness
    solid_core_ok = details.is_self_closing and thick_enough

    if details.is_fire_door:
        notes.append("Fire door is compliant.")
    elif solid_core_ok:
        notes.append(
            f"Self-closing solid core door ({details.thickness:g}mm) is compliant."
        )
    else:
        if not details.is_self_closing:
            notes.append("Door must be self-closing.")
        if not thick_enough:
            notes.append(
                f"Door thickness ({details.thickness:g}mm) is below the minimum "
                f"{min_thickness:g}mm for a solid core door."
            )

    is_protected = details.is_fire_door or solid_core_ok
    return OpeningComplianceResult(
        opening_id=opening.id,
        opening_name=opening.name,
        area=area,
        is_exempt=False,
        protection_required=True,
        currently_protected=is_protected,
        required_protection=CLASS1_DOOR_PROTECTION,
        compliant=is_protected,
        notes=notes,
    )
