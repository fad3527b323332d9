"""Fire separation compliance engine for NCC external walls.

Usage::

    from firesep import create_default_engine, Project, WallAssessment

    engine = create_default_engine()
    result = engine.assess_wall(project, wall, openings)
    print(result.to_summary_dict()["status"])
"""

from firesep.engine import ComplianceEngine
from firesep.factory import create_default_engine
from firesep.models.compliance import (
    OpeningComplianceResult,
    ProjectComplianceSummary,
    WallComplianceResult,
)
from firesep.models.enums import (
    BoundaryType,
    BuildingClass,
    ConstructionType,
    DoorType,
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
    Project,
    WallAssessment,
    WindowDetails,
)

__all__ = [
    "FRL",
    "NO_FRL",
    "BoundaryType",
    "BuildingClass",
    "ComplianceEngine",
    "ConstructionType",
    "DoorDetails",
    "DoorType",
    "GeneralOpeningDetails",
    "GlassType",
    "Opening",
    "OpeningComplianceResult",
    "OpeningType",
    "Project",
    "ProjectComplianceSummary",
    "RoomType",
    "WallAssessment",
    "WallComplianceResult",
    "WallMaterial",
    "WindowDetails",
    "create_default_engine",
]
