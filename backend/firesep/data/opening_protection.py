"""Acceptable protection methods for openings in external walls.

Class 2-9 methods follow NCC C4D5; the Class 1 texts follow Housing
Provisions Part 9.2.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from firesep.models.enums import OpeningType


class ProtectionMethod(BaseModel):
    model_config = ConfigDict(frozen=True)

    opening_type: OpeningType
    method: str
    description: str
    ncc_reference: str


PROTECTION_METHODS: tuple[ProtectionMethod, ...] = (
    # --- Windows ---
    ProtectionMethod(
        opening_type=OpeningType.WINDOW,
        method="fire_window",
        description="Fire window complying with AS 1530.4",
        ncc_reference="C4D5(1)(b)",
    ),
    ProtectionMethod(
        opening_type=OpeningType.WINDOW,
        method="wall_wetting_sprinkler",
        description=(
            "Wall-wetting sprinkler system "
            "(automatic closing or permanently closed windows only)"
        ),
        ncc_reference="C4D5(1)(b)",
    ),
    ProtectionMethod(
        opening_type=OpeningType.WINDOW,
        method="fire_shutter",
        description="Fire shutter complying with AS 1530.4",
        ncc_reference="C4D5(1)(b)",
    ),
    # --- Doors ---
    ProtectionMethod(
        opening_type=OpeningType.DOOR,
        method="fire_door",
        description="Fire door complying with AS 1905.1",
        ncc_reference="C4D5(1)(a)",
    ),
    ProtectionMethod(
        opening_type=OpeningType.DOOR,
        method="fire_shutter",
        description="Fire shutter complying with AS 1530.4",
        ncc_reference="C4D5(1)(a)",
    ),
    ProtectionMethod(
        opening_type=OpeningType.DOOR,
        method="wall_wetting_sprinkler",
        description=(
            "Wall-wetting sprinkler system "
            "(self-closing or automatic closing doors only)"
        ),
        ncc_reference="C4D5(1)(a)",
    ),
    # --- General openings ---
    ProtectionMethod(
        opening_type=OpeningType.GENERAL_OPENING,
        method="fire_rated_construction",
        description="Opening must be closed with fire-rated construction",
        ncc_reference="C4D5(1)(c)",
    ),
)

CLASS1_WINDOW_PROTECTION = (
    "Non-openable fire window, or wired glass/hollow glass block in steel frame"
)
CLASS1_DOOR_PROTECTION = "Self-closing solid core door (min 35mm thick)"
CLASS1_GENERAL_OPENING_PROTECTION = "Must be closed with fire-rated construction"

CLASS2TO9_WINDOW_PROTECTION = (
    "Fire window, fire shutter, or wall-wetting sprinkler system (C4D5)"
)
CLASS2TO9_DOOR_PROTECTION = (
    "Fire door (AS 1905.1), fire shutter, or wall-wetting sprinkler system (C4D5)"
)
CLASS2TO9_GENERAL_OPENING_PROTECTION = (
    "Must be closed with fire-rated construction (C4D5)"
)
