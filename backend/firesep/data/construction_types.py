"""Type of construction required, by building class and rise in storeys.

Based on NCC Table C2D2.  Rules are scanned in order and the first rule
whose classes and rise range match wins.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from firesep.models.enums import BuildingClass, ConstructionType


class ConstructionTypeRule(BaseModel):
    """A single row of the construction type table."""

    model_config = ConfigDict(frozen=True)

    classes: frozenset[BuildingClass]
    min_rise: int
    max_rise: int | None  # None = no upper limit
    construction_type: ConstructionType

    def matches(self, building_class: BuildingClass, rise_in_storeys: int) -> bool:
        return (
            building_class in self.classes
            and rise_in_storeys >= self.min_rise
            and (self.max_rise is None or rise_in_storeys <= self.max_rise)
        )


# Higher occupant risk: residential, healthcare, assembly, aged care
_RESIDENTIAL_AND_SPECIAL = frozenset({
    BuildingClass.CLASS_2,
    BuildingClass.CLASS_3,
    BuildingClass.CLASS_9A,
    BuildingClass.CLASS_9B,
    BuildingClass.CLASS_9C,
})

_COMMERCIAL_AND_INDUSTRIAL = frozenset({
    BuildingClass.CLASS_5,
    BuildingClass.CLASS_6,
    BuildingClass.CLASS_7A,
    BuildingClass.CLASS_7B,
    BuildingClass.CLASS_8,
})

# Class 4 is treated as Class 2/3
_CLASS4 = frozenset({BuildingClass.CLASS_4})

CONSTRUCTION_TYPE_RULES: tuple[ConstructionTypeRule, ...] = (
    # --- Class 2, 3, 9a, 9b, 9c ---
    ConstructionTypeRule(
        classes=_RESIDENTIAL_AND_SPECIAL,
        min_rise=4, max_rise=None,
        construction_type=ConstructionType.TYPE_A,
    ),
    ConstructionTypeRule(
        classes=_RESIDENTIAL_AND_SPECIAL,
        min_rise=3, max_rise=3,
        construction_type=ConstructionType.TYPE_A,
    ),
    ConstructionTypeRule(
        classes=_RESIDENTIAL_AND_SPECIAL,
        min_rise=2, max_rise=2,
        construction_type=ConstructionType.TYPE_B,
    ),
    ConstructionTypeRule(
        classes=_RESIDENTIAL_AND_SPECIAL,
        min_rise=1, max_rise=1,
        construction_type=ConstructionType.TYPE_C,
    ),
    # --- Class 5, 6, 7a, 7b, 8 ---
    ConstructionTypeRule(
        classes=_COMMERCIAL_AND_INDUSTRIAL,
        min_rise=4, max_rise=None,
        construction_type=ConstructionType.TYPE_A,
    ),
    ConstructionTypeRule(
        classes=_COMMERCIAL_AND_INDUSTRIAL,
        min_rise=3, max_rise=3,
        construction_type=ConstructionType.TYPE_B,
    ),
    ConstructionTypeRule(
        classes=_COMMERCIAL_AND_INDUSTRIAL,
        min_rise=2, max_rise=2,
        construction_type=ConstructionType.TYPE_C,
    ),
    ConstructionTypeRule(
        classes=_COMMERCIAL_AND_INDUSTRIAL,
        min_rise=1, max_rise=1,
        construction_type=ConstructionType.TYPE_C,
    ),
    # --- Class 4 ---
    ConstructionTypeRule(
        classes=_CLASS4,
        min_rise=4, max_rise=None,
        construction_type=ConstructionType.TYPE_A,
    ),
    ConstructionTypeRule(
        classes=_CLASS4,
        min_rise=3, max_rise=3,
        construction_type=ConstructionType.TYPE_A,
    ),
    ConstructionTypeRule(
        classes=_CLASS4,
        min_rise=2, max_rise=2,
        construction_type=ConstructionType.TYPE_B,
    ),
    ConstructionTypeRule(
        classes=_CLASS4,
        min_rise=1, max_rise=1,
        construction_type=ConstructionType.TYPE_C,
    ),
)
