"""NCC distance, area and percentage thresholds.

Distances are in metres, areas in m², percentages as fractions.
"""

from __future__ import annotations

from firesep.models.frl import FRL

# ---------------------------------------------------------------------------
# Class 1 buildings (NCC Housing Provisions Part 9.2)
# ---------------------------------------------------------------------------

# 900mm from the allotment boundary
CLASS1_BOUNDARY_FIRE_RESISTANCE_THRESHOLD: float = 0.9
# 1.8m from another building on the same allotment
CLASS1_SAME_ALLOTMENT_FIRE_RESISTANCE_THRESHOLD: float = 1.8

# Small window concession (9.2.3) only applies beyond these distances
CLASS1_WINDOW_CONCESSION_BOUNDARY_THRESHOLD: float = 0.6
CLASS1_WINDOW_CONCESSION_SAME_ALLOTMENT_THRESHOLD: float = 1.2

# Concession area limits
CLASS1_WINDOW_CONCESSION_BATHROOM_MAX_AREA: float = 1.2  # bathroom / laundry / toilet
CLASS1_WINDOW_CONCESSION_OTHER_MAX_AREA: float = 0.54  # other non-habitable rooms

# Tested from outside
CLASS1_REQUIRED_FRL = FRL(structural_adequacy=60, integrity=60, insulation=60)

CLASS1_MIN_SOLID_CORE_DOOR_THICKNESS: float = 35.0  # mm

# ---------------------------------------------------------------------------
# Class 2-9 buildings (NCC Volume One Part C4)
# ---------------------------------------------------------------------------

CLASS2TO9_SIDE_REAR_PROTECTION_THRESHOLD: float = 3.0
CLASS2TO9_ROAD_PROTECTION_THRESHOLD: float = 6.0
CLASS2TO9_SAME_ALLOTMENT_PROTECTION_THRESHOLD: float = 6.0

# Openings cannot exceed 1/3 of the wall area
CLASS2TO9_MAX_OPENING_PERCENTAGE: float = 1 / 3

# Sprinklered buildings measure openings and walls at double the distance
SPRINKLER_DISTANCE_MULTIPLIER: float = 2.0
