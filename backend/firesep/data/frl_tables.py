"""FRL requirements for external walls (NCC Specification 5).

Type A: Tables S5C11a (loadbearing) and S5C11b (non-loadbearing)
Type B: Tables S5C21a/b
Type C: Tables S5C31a/b

Rows are scanned in order; the first row matching construction type,
loadbearing flag, class group and distance bracket wins.  Distance
brackets are ``[distance_min, distance_max)`` with ``None`` meaning no
upper limit.

The Type B and Type C rows have not been confirmed against NCC Volume One
and are marked ``verified=False``.  Treat them as replaceable configuration.
"""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict

from firesep.models.enums import BuildingClass, ConstructionType, FRLClassGroup
from firesep.models.frl import FRL


class FRLTableEntry(BaseModel):
    """A single row of the external wall FRL table."""

    model_config = ConfigDict(frozen=True)

    construction_type: ConstructionType
    is_loadbearing: bool
    distance_min: float  # metres, inclusive
    distance_max: float | None  # metres, exclusive; None = infinity
    class_group: FRLClassGroup
    frl: FRL
    verified: bool = True

    def matches(
        self,
        construction_type: ConstructionType,
        is_loadbearing: bool,
        distance: float,
        class_group: FRLClassGroup,
    ) -> bool:
        return (
            self.construction_type == construction_type
            and self.is_loadbearing == is_loadbearing
            and self.class_group == class_group
            and distance >= self.distance_min
            and (self.distance_max is None or distance < self.distance_max)
        )


CLASS_GROUPS: Mapping[BuildingClass, FRLClassGroup] = MappingProxyType({
    BuildingClass.CLASS_2: FRLClassGroup.CLASS_2_3_4,
    BuildingClass.CLASS_3: FRLClassGroup.CLASS_2_3_4,
    BuildingClass.CLASS_4: FRLClassGroup.CLASS_2_3_4,
    BuildingClass.CLASS_5: FRLClassGroup.CLASS_5_7A_9,
    BuildingClass.CLASS_7A: FRLClassGroup.CLASS_5_7A_9,
    BuildingClass.CLASS_9A: FRLClassGroup.CLASS_5_7A_9,
    BuildingClass.CLASS_9B: FRLClassGroup.CLASS_5_7A_9,
    BuildingClass.CLASS_9C: FRLClassGroup.CLASS_5_7A_9,
    BuildingClass.CLASS_6: FRLClassGroup.CLASS_6,
    BuildingClass.CLASS_7B: FRLClassGroup.CLASS_7B_8,
    BuildingClass.CLASS_8: FRLClassGroup.CLASS_7B_8,
})

_A = ConstructionType.TYPE_A
_B = ConstructionType.TYPE_B
_C = ConstructionType.TYPE_C

_G234 = FRLClassGroup.CLASS_2_3_4
_G57A9 = FRLClassGroup.CLASS_5_7A_9
_G6 = FRLClassGroup.CLASS_6
_G7B8 = FRLClassGroup.CLASS_7B_8


def _row(
    construction_type: ConstructionType,
    is_loadbearing: bool,
    distance_min: float,
    distance_max: float | None,
    class_group: FRLClassGroup,
    sa: int | None,
    i: int | None,
    ins: int | None,
    *,
    verified: bool = True,
) -> FRLTableEntry:
    return FRLTableEntry(
        construction_type=construction_type,
        is_loadbearing=is_loadbearing,
        distance_min=distance_min,
        distance_max=distance_max,
        class_group=class_group,
        frl=FRL(structural_adequacy=sa, integrity=i, insulation=ins),
        verified=verified,
    )


FRL_EXTERNAL_WALL_TABLE: tuple[FRLTableEntry, ...] = (
    # ------------------------------------------------------------------
    # Type A, loadbearing (S5C11a)
    # ------------------------------------------------------------------
    _row(_A, True, 0.0, 1.5, _G234, 90, 90, 90),
    _row(_A, True, 1.5, 3.0, _G234, 90, 60, 60),
    _row(_A, True, 3.0, None, _G234, 90, None, None),
    _row(_A, True, 0.0, 1.5, _G57A9, 120, 120, 120),
    _row(_A, True, 1.5, 3.0, _G57A9, 120, 60, 60),
    _row(_A, True, 3.0, None, _G57A9, 120, None, None),
    _row(_A, True, 0.0, 1.5, _G6, 90, 90, 90),
    _row(_A, True, 1.5, 3.0, _G6, 90, 60, 60),
    _row(_A, True, 3.0, None, _G6, 90, None, None),
    _row(_A, True, 0.0, 1.5, _G7B8, 120, 120, 120),
    _row(_A, True, 1.5, 3.0, _G7B8, 120, 60, 60),
    _row(_A, True, 3.0, None, _G7B8, 120, None, None),
    # ------------------------------------------------------------------
    # Type A, non-loadbearing (S5C11b)
    # ------------------------------------------------------------------
    _row(_A, False, 0.0, 1.5, _G234, None, 90, 90),
    _row(_A, False, 1.5, 3.0, _G234, None, 60, 60),
    _row(_A, False, 3.0, None, _G234, None, None, None),
    _row(_A, False, 0.0, 1.5, _G57A9, None, 120, 120),
    _row(_A, False, 1.5, 3.0, _G57A9, None, 60, 60),
    _row(_A, False, 3.0, None, _G57A9, None, None, None),
    _row(_A, False, 0.0, 1.5, _G6, None, 90, 90),
    _row(_A, False, 1.5, 3.0, _G6, None, 60, 60),
    _row(_A, False, 3.0, None, _G6, None, None, None),
    _row(_A, False, 0.0, 1.5, _G7B8, None, 120, 120),
    _row(_A, False, 1.5, 3.0, _G7B8, None, 60, 60),
    _row(_A, False, 3.0, None, _G7B8, None, None, None),
    # ------------------------------------------------------------------
    # Type B, loadbearing (S5C21a), unverified
    # ------------------------------------------------------------------
    _row(_B, True, 0.0, 1.5, _G234, 90, 90, 90, verified=False),
    _row(_B, True, 1.5, 3.0, _G234, 90, 60, 30, verified=False),
    _row(_B, True, 3.0, None, _G234, 90, None, None, verified=False),
    _row(_B, True, 0.0, 1.5, _G57A9, 90, 90, 90, verified=False),
    _row(_B, True, 1.5, 3.0, _G57A9, 90, 60, 30, verified=False),
    _row(_B, True, 3.0, None, _G57A9, 90, None, None, verified=False),
    _row(_B, True, 0.0, 1.5, _G6, 90, 90, 90, verified=False),
    _row(_B, True, 1.5, 3.0, _G6, 90, 60, 30, verified=False),
    _row(_B, True, 3.0, None, _G6, 90, None, None, verified=False),
    _row(_B, True, 0.0, 1.5, _G7B8, 90, 90, 90, verified=False),
    _row(_B, True, 1.5, 3.0, _G7B8, 90, 60, 30, verified=False),
    _row(_B, True, 3.0, None, _G7B8, 90, None, None, verified=False),
    # ------------------------------------------------------------------
    # Type B, non-loadbearing (S5C21b), unverified
    # ------------------------------------------------------------------
    _row(_B, False, 0.0, 1.5, _G234, None, 90, 90, verified=False),
    _row(_B, False, 1.5, 3.0, _G234, None, 60, 30, verified=False),
    _row(_B, False, 3.0, None, _G234, None, None, None, verified=False),
    _row(_B, False, 0.0, 1.5, _G57A9, None, 90, 90, verified=False),
    _row(_B, False, 1.5, 3.0, _G57A9, None, 60, 30, verified=False),
    _row(_B, False, 3.0, None, _G57A9, None, None, None, verified=False),
    _row(_B, False, 0.0, 1.5, _G6, None, 90, 90, verified=False),
    _row(_B, False, 1.5, 3.0, _G6, None, 60, 30, verified=False),
    _row(_B, False, 3.0, None, _G6, None, None, None, verified=False),
    _row(_B, False, 0.0, 1.5, _G7B8, None, 90, 90, verified=False),
    _row(_B, False, 1.5, 3.0, _G7B8, None, 60, 30, verified=False),
    _row(_B, False, 3.0, None, _G7B8, None, None, None, verified=False),
    # ------------------------------------------------------------------
    # Type C, loadbearing (S5C31a), unverified
    # ------------------------------------------------------------------
    _row(_C, True, 0.0, 1.5, _G234, 60, 60, 60, verified=False),
    _row(_C, True, 1.5, 3.0, _G234, 60, 60, 30, verified=False),
    _row(_C, True, 3.0, None, _G234, 60, None, None, verified=False),
    _row(_C, True, 0.0, 1.5, _G57A9, 60, 60, 60, verified=False),
    _row(_C, True, 1.5, 3.0, _G57A9, 60, 60, 30, verified=False),
    _row(_C, True, 3.0, None, _G57A9, 60, None, None, verified=False),
    _row(_C, True, 0.0, 1.5, _G6, 60, 60, 60, verified=False),
    _row(_C, True, 1.5, 3.0, _G6, 60, 60, 30, verified=False),
    _row(_C, True, 3.0, None, _G6, 60, None, None, verified=False),
    _row(_C, True, 0.0, 1.5, _G7B8, 60, 60, 60, verified=False),
    _row(_C, True, 1.5, 3.0, _G7B8, 60, 60, 30, verified=False),
    _row(_C, True, 3.0, None, _G7B8, 60, None, None, verified=False),
    # ------------------------------------------------------------------
    # Type C, non-loadbearing (S5C31b), unverified
    # ------------------------------------------------------------------
    _row(_C, False, 0.0, 1.5, _G234, None, 60, 60, verified=False),
    _row(_C, False, 1.5, 3.0, _G234, None, 60, 30, verified=False),
    _row(_C, False, 3.0, None, _G234, None, None, None, verified=False),
    _row(_C, False, 0.0, 1.5, _G57A9, None, 60, 60, verified=False),
    _row(_C, False, 1.5, 3.0, _G57A9, None, 60, 30, verified=False),
    _row(_C, False, 3.0, None, _G57A9, None, None, None, verified=False),
    _row(_C, False, 0.0, 1.5, _G6, None, 60, 60, verified=False),
    _row(_C, False, 1.5, 3.0, _G6, None, 60, 30, verified=False),
    _row(_C, False, 3.0, None, _G6, None, None, None, verified=False),
    _row(_C, False, 0.0, 1.5, _G7B8, None, 60, 60, verified=False),
    _row(_C, False, 1.5, 3.0, _G7B8, None, 60, 30, verified=False),
    _row(_C, False, 3.0, None, _G7B8, None, None, None, verified=False),
)
