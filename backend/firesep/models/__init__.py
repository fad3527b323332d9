"""Domain models for the firesep compliance engine."""

from firesep.models.compliance import (
    OpeningComplianceResult,
    ProjectComplianceSummary,
    WallComplianceResult,
)
from firesep.models.enums import (
    BoundaryType,
    BuildingClass,
    BuildingClassGroup,
    ConstructionType,
    DoorType,
    FRLClassGroup,
    GlassType,
    OpeningType,
    RoomType,
    WallMaterial,
)
from firesep.models.frl import FRL, NO_FRL
from firesep.models.project import (
    DoorDetails,
    GeneralOpeningDetails,
    Opening,
    OpeningDetails,
    OpeningInput,
    Project,
    ProjectInput,
    WallAssessment,
    WallInput,
    WindowDetails,
)

__all__ = [
    "FRL",
    "NO_FRL",
    "BoundaryType",
    "BuildingClass",
    "BuildingClassGroup",
    "ConstructionType",
    "DoorDetails",
    "DoorType",
    "FRLClassGroup",
    "GeneralOpeningDetails",
    "GlassType",
    "Opening",
    "OpeningComplianceResult",
    "OpeningDetails",
    "OpeningInput",
    "OpeningType",
    "Project",
    "ProjectComplianceSummary",
    "ProjectInput",
    "RoomType",
    "WallAssessment",
    "WallComplianceResult",
    "WallInput",
    "WallMaterial",
    "WindowDetails",
]
