"""NCC table data layer for the firesep compliance engine."""

from firesep.data.building_classes import BUILDING_CLASS_INFO, BuildingClassInfo
from firesep.data.construction_types import CONSTRUCTION_TYPE_RULES, ConstructionTypeRule
from firesep.data.frl_tables import FRL_EXTERNAL_WALL_TABLE, FRLTableEntry
from firesep.data.opening_protection import PROTECTION_METHODS, ProtectionMethod
from firesep.data.repository import NccDataRepository

__all__ = [
    "BUILDING_CLASS_INFO",
    "CONSTRUCTION_TYPE_RULES",
    "FRL_EXTERNAL_WALL_TABLE",
    "PROTECTION_METHODS",
    "BuildingClassInfo",
    "ConstructionTypeRule",
    "FRLTableEntry",
    "NccDataRepository",
    "ProtectionMethod",
]
