"""Fire separation and protection of openings for Class 2-9 buildings.

NCC Volume One Parts C2-C4 and Specification 5:

1. **Construction type** from building class and rise in storeys (C2D2).
2. **Effective distance**: sprinklered buildings double the distance to
   the fire-source feature.
3. **Required wall FRL** from the Specification 5 table.
4. **Opening protection** when the effective distance is under 3m from a
   side/rear boundary, or under 6m from a road or another building (C4D3).
5. **Per-opening compliance** against the C4D5 protection methods.
6. **Area cap**: where protection is required, openings may not exceed
   1/3 of the wall area, whether or not each opening is protected.
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
    is_opening_protected,
)
from firesep.data.opening_protection import (
    CLASS2TO9_DOOR_PROTECTION,
    CLASS2TO9_GENERAL_OPENING_PROTECTION,
    CLASS2TO9_WINDOW_PROTECTION,
)
from firesep.data.thresholds import (
    CLASS2TO9_MAX_OPENING_PERCENTAGE,
    CLASS2TO9_ROAD_PROTECTION_THRESHOLD,
    CLASS2TO9_SAME_ALLOTMENT_PROTECTION_THRESHOLD,
    CLASS2TO9_SIDE_REAR_PROTECTION_THRESHOLD,
    SPRINKLER_DISTANCE_MULTIPLIER,
)
from firesep.formatting import format_frl, format_percentage
from firesep.models.compliance import OpeningComplianceResult, WallComplianceResult
from firesep.models.enums import BoundaryType, BuildingClass
from firesep.models.frl import NO_FRL
from firesep.models.project import DoorDetails, GeneralOpeningDetails, WindowDetails

if TYPE_CHECKING:
    from firesep.data.repository import NccDataRepository
    from firesep.models.project import Opening, WallAssessment


def assess_class2to9_wall(
    wall: WallAssessment,
    openings: list[Opening],
    building_class: BuildingClass,
    rise_in_storeys: int,
    has_sprinklers: bool,
    repository: NccDataRepository,
) -> WallComplianceResult:
    """Assess a Class 2-9 external wall and its openings."""
    total_wall_area = calculate_wall_area(wall.height, wall.width)
    compliance_notes: list[str] = []
    ncc_references: list[str] = []

    # 1. Construction type
    construction_type = repository.get_construction_type(building_class, rise_in_storeys)
    if construction_type is not None:
        plural = "s" if rise_in_storeys != 1 else ""
        compliance_notes.append(
            f"Construction Type {construction_type.value} "
            f"(based on Class {building_class.value}, "
            f"{rise_in_storeys} storey{plural})."
        )
        ncc_references.append("NCC Table C2D2")

    # 2. Sprinkler concession
    effective_distance = effective_distance_to_boundary(
        wall.distance_to_boundary, has_sprinklers,
    )
    if has_sprinklers:
        compliance_notes.append(
            f"Sprinkler concession applied: effective distance is "
            f"{effective_distance:.2f}m (actual: {wall.distance_to_boundary:.2f}m)."
        )

    # 3. Required wall FRL
    required_frl = NO_FRL
    needs_fire_resistance = False
    if construction_type is not None:
        required_frl = repository.get_required_external_wall_frl(
            construction_type,
            wall.is_loadbearing,
            effective_distance,
            building_class,
        )
        needs_fire_resistance = not required_frl.is_none

        if needs_fire_resistance:
            bearing = "loadbearing" if wall.is_loadbearing else "non-loadbearing"
            compliance_notes.append(
                f"Required wall FRL: {format_frl(required_frl)} ({bearing})."
            )
            ncc_references.append("NCC Specification 5")
        else:
            compliance_notes.append("No FRL required for external wall at this distance.")

    # 4. Do openings need protection? (C4D3)
    protection_required = class2to9_opening_protection_required(
        effective_distance, wall.boundary_type,
    )
    if protection_required:
        compliance_notes.append(
            "Openings require protection based on distance to fire-source feature."
        )
        ncc_references.append("NCC C4D3")

    # 5. Assess each opening
    opening_results = [
        _assess_opening(opening, protection_required) for opening in openings
    ]

    # 6. Area summary
    total_opening_area = calculate_total_opening_area(openings)
    unprotected_area, protected_area, exempt_area = bucket_opening_areas(openings)
    unprotected_percentage = calculate_unprotected_percentage(
        unprotected_area, total_wall_area,
    )

    # 7. 1/3 rule, strict: exactly 1/3 passes
    opening_fraction = calculate_unprotected_percentage(
        protected_area + unprotected_area - exempt_area, total_wall_area,
    )
    exceeds_limit = (
        protection_required and opening_fraction > CLASS2TO9_MAX_OPENING_PERCENTAGE
    )
    if exceeds_limit:
        compliance_notes.append(
            f"Total opening area exceeds 1/3 "
            f"({format_percentage(CLASS2TO9_MAX_OPENING_PERCENTAGE)}) of wall area. "
            "Openings must be reduced or wall area increased."
        )

    opening_area_compliant = (
        not exceeds_limit and all(r.compliant for r in opening_results)
    )

    return WallComplianceResult(
        wall_id=wall.id,
        total_wall_area=total_wall_area,
        total_opening_area=total_opening_area,
        unprotected_opening_area=unprotected_area,
        protected_opening_area=protected_area,
        exempt_opening_area=exempt_area,
        unprotected_area_percentage=unprotected_percentage,
        construction_type=construction_type,
        required_wall_frl=required_frl,
        required_wall_frl_string=format_frl(required_frl),
        wall_needs_fire_resistance=needs_fire_resistance,
        opening_protection_required=protection_required,
        max_allowed_unprotected_percentage=(
            CLASS2TO9_MAX_OPENING_PERCENTAGE if protection_required else None
        ),
        opening_area_compliant=opening_area_compliant,
        opening_results=opening_results,
        overall_compliant=opening_area_compliant,
        compliance_notes=compliance_notes,
        ncc_references=ncc_references,
    )


def effective_distance_to_boundary(distance: float, has_sprinklers: bool) -> float:
    if has_sprinklers:
        return distance * SPRINKLER_DISTANCE_MULTIPLIER
    return distance


def class2to9_opening_protection_required(
    effective_distance: float,
    boundary_type: BoundaryType,
) -> bool:
    match boundary_type:
        case BoundaryType.SIDE_REAR:
            return effective_distance < CLASS2TO9_SIDE_REAR_PROTECTION_THRESHOLD
        case BoundaryType.ROAD:
            return effective_distance < CLASS2TO9_ROAD_PROTECTION_THRESHOLD
        case BoundaryType.SAME_ALLOTMENT:
            return effective_distance < CLASS2TO9_SAME_ALLOTMENT_PROTECTION_THRESHOLD
        case _:
            assert_never(boundary_type)


def _assess_opening(
    opening: Opening,
    protection_required: bool,
) -> OpeningComplianceResult:
    area = calculate_opening_area(opening)

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

    if not protection_required:
        return OpeningComplianceResult(
            opening_id=opening.id,
            opening_name=opening.name,
            area=area,
            is_exempt=False,
            protection_required=False,
            currently_protected=True,
            required_protection="None required at this distance",
            compliant=True,
            notes=["Distance to boundary exceeds the protection threshold."],
        )

    currently_protected = is_opening_protected(opening)
    notes: list[str] = []

    details = opening.details
    match details:
        case WindowDetails():
            required_protection = CLASS2TO9_WINDOW_PROTECTION
            if currently_protected:
                notes.append("Fire-rated window complies with C4D5.")
            else:
                notes.append("Window requires fire protection per C4D5.")
        case DoorDetails():
            required_protection = CLASS2TO9_DOOR_PROTECTION
            if currently_protected:
                notes.append("Fire door complies with C4D5.")
            else:
                notes.append("Door requires fire protection per C4D5.")
        case GeneralOpeningDetails():
            required_protection = CLASS2TO9_GENERAL_OPENING_PROTECTION
            notes.append("General opening must be closed with fire-rated construction.")
        case _:
            assert_never(details)

    return OpeningComplianceResult(
        opening_id=opening.id,
        opening_name=opening.name,
        area=area,
        is_exempt=False,
        protection_required=True,
        currently_protected=currently_protected,
        required_protection=required_protection,
        compliant=currently_protected,
        notes=notes,
    )
