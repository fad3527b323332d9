"""NCC table repository for construction type and FRL lookups."""

from __future__ import annotations

from typing import TYPE_CHECKING

from firesep.data.building_classes import BUILDING_CLASS_INFO
from firesep.data.frl_tables import CLASS_GROUPS
from firesep.data.opening_protection import PROTECTION_METHODS
from firesep.models.frl import NO_FRL

if TYPE_CHECKING:
    from collections.abc import Iterable

    from firesep.data.building_classes import BuildingClassInfo
    from firesep.data.construction_types import ConstructionTypeRule
    from firesep.data.frl_tables import FRLTableEntry
    from firesep.data.opening_protection import ProtectionMethod
    from firesep.models.enums import (
        BuildingClass,
        ConstructionType,
        FRLClassGroup,
        OpeningType,
    )
    from firesep.models.frl import FRL


class NccDataRepository:
    """Repository for looking up NCC table data.

    Wraps the ordered construction type rules and FRL table rows.  Both
    lookups scan in order and return the first match; an unmatched lookup
    degrades to "no requirement" rather than raising.
    """

    def __init__(
        self,
        construction_rules: Iterable[ConstructionTypeRule],
        frl_entries: Iterable[FRLTableEntry],
    ) -> None:
        self._construction_rules = tuple(construction_rules)
        self._frl_entries = tuple(frl_entries)

    def get_construction_type(
        self,
        building_class: BuildingClass,
        rise_in_storeys: int,
    ) -> ConstructionType | None:
        """Look up the type of construction required.

        Returns None for Class 1 and Class 10 buildings, which never require
        a construction type, and when no rule matches.
        """
        if building_class.is_class1() or building_class.is_class10():
            return None

        for rule in self._construction_rules:
            if rule.matches(building_class, rise_in_storeys):
                return rule.construction_type
        return None

    def get_class_group(self, building_class: BuildingClass) -> FRLClassGroup | None:
        """Get the FRL table class group, or None for Class 1 / Class 10."""
        return CLASS_GROUPS.get(building_class)

    def get_required_external_wall_frl(
        self,
        construction_type: ConstructionType,
        is_loadbearing: bool,
        distance: float,
        building_class: BuildingClass,
    ) -> FRL:
        """Look up the FRL required for an external wall.

        ``distance`` is the distance to the fire-source feature, already
        adjusted for any sprinkler concession.  Returns the all-None FRL if
        the class has no group or no row matches.
        """
        class_group = self.get_class_group(building_class)
        if class_group is None:
            return NO_FRL

        for entry in self._frl_entries:
            if entry.matches(construction_type, is_loadbearing, distance, class_group):
                return entry.frl
        return NO_FRL

    def get_building_class_info(
        self, building_class: BuildingClass
    ) -> BuildingClassInfo | None:
        for info in BUILDING_CLASS_INFO:
            if info.value == building_class:
                return info
        return None

    def list_building_classes(self) -> list[BuildingClassInfo]:
        return list(BUILDING_CLASS_INFO)

    def get_protection_methods(
        self, opening_type: OpeningType
    ) -> list[ProtectionMethod]:
        """Get the acceptable C4D5 protection methods for an opening type."""
        return [m for m in PROTECTION_METHODS if m.opening_type == opening_type]
