"""Area arithmetic and opening predicates shared by both rule sets."""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from firesep.models.project import DoorDetails, GeneralOpeningDetails, WindowDetails

if TYPE_CHECKING:
    from collections.abc import Iterable

    from firesep.models.project import Opening


def calculate_wall_area(height: float, width: float) -> float:
    return height * width


def calculate_opening_area(opening: Opening) -> float:
    return opening.width * opening.height


def calculate_total_opening_area(openings: Iterable[Opening]) -> float:
    return sum((calculate_opening_area(o) for o in openings), 0.0)


def calculate_unprotected_percentage(unprotected_area: float, wall_area: float) -> float:
    """Unprotected area as a fraction of wall area (0 when wall area <= 0)."""
    if wall_area <= 0:
        return 0.0
    return unprotected_area / wall_area


def is_opening_protected(opening: Opening) -> bool:
    """Generic protection predicate used for area bucketing.

    A self-closing solid core door that satisfies the Class 1 door rule is
    still counted as unprotected here.
    """
    details = opening.details
    match details:
        case WindowDetails():
            return details.is_fire_rated
        case DoorDetails():
            return details.is_fire_door
        case GeneralOpeningDetails():
            return details.is_exempt
        case _:
            assert_never(details)


def is_opening_exempt(opening: Opening) -> bool:
    details = opening.details
    return isinstance(details, GeneralOpeningDetails) and details.is_exempt


def bucket_opening_areas(openings: Iterable[Opening]) -> tuple[float, float, float]:
    """Split opening area into (unprotected, protected, exempt) totals."""
    unprotected = 0.0
    protected = 0.0
    exempt = 0.0
    for opening in openings:
        area = calculate_opening_area(opening)
        if is_opening_exempt(opening):
            exempt += area
        elif is_opening_protected(opening):
            protected += area
        else:
            unprotected += area
    return unprotected, protected, exempt
