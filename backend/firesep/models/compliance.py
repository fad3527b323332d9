"""Compliance result models produced by the firesep engine."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field

from firesep.models.enums import ConstructionType
from firesep.models.frl import FRL


class OpeningComplianceResult(BaseModel):
    """Assessment of a single opening."""

    opening_id: str
    opening_name: str
    area: float
    is_exempt: bool
    protection_required: bool
    currently_protected: bool
    required_protection: str
    compliant: bool
    notes: list[str] = Field(default_factory=list)


class WallComplianceResult(BaseModel):
    """Complete assessment of one external wall and its openings.

    Derived on every evaluation and never persisted.  Areas are in m²,
    percentages are fractions (1/3, not 33.3).
    """

    wall_id: str

    total_wall_area: float
    total_opening_area: float
    unprotected_opening_area: float
    protected_opening_area: float
    exempt_opening_area: float
    unprotected_area_percentage: float

    construction_type: ConstructionType | None = None

    required_wall_frl: FRL
    required_wall_frl_string: str
    wall_needs_fire_resistance: bool

    opening_protection_required: bool
    max_allowed_unprotected_percentage: float | None = None
    opening_area_compliant: bool

    opening_results: list[OpeningComplianceResult] = Field(default_factory=list)

    overall_compliant: bool
    compliance_notes: list[str] = Field(default_factory=list)
    ncc_references: list[str] = Field(default_factory=list)

    def to_summary_dict(self) -> dict[str, Any]:
        """Produce a flat summary dict with display strings for a UI."""
        from firesep.formatting import format_area, format_frl, format_percentage

        max_pct = self.max_allowed_unprotected_percentage
        return {
            "wall_id": self.wall_id,
            "status": "COMPLIANT" if self.overall_compliant else "NON-COMPLIANT",
            "total_wall_area_formatted": format_area(self.total_wall_area),
            "total_opening_area_formatted": format_area(self.total_opening_area),
            "unprotected_area_formatted": format_area(self.unprotected_opening_area),
            "protected_area_formatted": format_area(self.protected_opening_area),
            "exempt_area_formatted": format_area(self.exempt_opening_area),
            "unprotected_percentage_formatted": format_percentage(
                self.unprotected_area_percentage,
            ),
            "max_allowed_percentage_formatted": (
                format_percentage(max_pct) if max_pct is not None else None
            ),
            "construction_type": (
                self.construction_type.value if self.construction_type else None
            ),
            "required_frl_formatted": format_frl(self.required_wall_frl),
            "num_openings": len(self.opening_results),
            "num_non_compliant_openings": sum(
                1 for r in self.opening_results if not r.compliant
            ),
            "notes": list(self.compliance_notes),
            "ncc_references": list(self.ncc_references),
        }


class ProjectComplianceSummary(BaseModel):
    """Per-wall results for every wall of a project."""

    project_id: str
    wall_results: list[WallComplianceResult] = Field(default_factory=list)

    @property
    def compliant_wall_count(self) -> int:
        return sum(1 for r in self.wall_results if r.overall_compliant)

    @property
    def non_compliant_wall_count(self) -> int:
        return len(self.wall_results) - self.compliant_wall_count

    @property
    def overall_compliant(self) -> bool:
        return all(r.overall_compliant for r in self.wall_results)
