"""Enums for the firesep domain models.

These enums mirror the National Construction Code (NCC) vocabulary used
when assessing fire separation of external walls.
"""

from enum import StrEnum


class BuildingClass(StrEnum):
    """NCC building classifications (Part A6)."""

    CLASS_1A = "1a"
    CLASS_1B = "1b"
    CLASS_2 = "2"
    CLASS_3 = "3"
    CLASS_4 = "4"
    CLASS_5 = "5"
    CLASS_6 = "6"
    CLASS_7A = "7a"
    CLASS_7B = "7b"
    CLASS_8 = "8"
    CLASS_9A = "9a"
    CLASS_9B = "9b"
    CLASS_9C = "9c"
    CLASS_10A = "10a"
    CLASS_10B = "10b"
    CLASS_10C = "10c"

    def is_class1(self) -> bool:
        """True for the low-rise dwelling family (Class 1a / 1b)."""
        return self in (BuildingClass.CLASS_1A, BuildingClass.CLASS_1B)

    def is_class10(self) -> bool:
        """True for non-habitable buildings and structures (Class 10a/b/c)."""
        return self in (
            BuildingClass.CLASS_10A,
            BuildingClass.CLASS_10B,
            BuildingClass.CLASS_10C,
        )


class BuildingClassGroup(StrEnum):
    """Broad grouping used when presenting building classes."""

    RESIDENTIAL = "residential"
    COMMERCIAL = "commercial"
    INDUSTRIAL = "industrial"
    SPECIAL = "special"
    NON_HABITABLE = "non-habitable"


class BoundaryType(StrEnum):
    """What the wall faces: the fire-source feature it is measured to."""

    SIDE_REAR = "side_rear"
    ROAD = "road"
    SAME_ALLOTMENT = "same_allotment"


class ConstructionType(StrEnum):
    """Type of construction required (NCC Table C2D2)."""

    TYPE_A = "A"
    TYPE_B = "B"
    TYPE_C = "C"


class FRLClassGroup(StrEnum):
    """Building class groupings used in the Specification 5 FRL tables."""

    CLASS_2_3_4 = "class_2_3_4"
    CLASS_5_7A_9 = "class_5_7a_9"
    CLASS_6 = "class_6"
    CLASS_7B_8 = "class_7b_8"


class WallMaterial(StrEnum):
    BRICK = "brick"
    CONCRETE_BLOCK = "concrete_block"
    TIMBER = "timber"
    STEEL_FRAME = "steel_frame"
    METAL_CLADDING = "metal_cladding"
    COMPOSITE = "composite"
    OTHER = "other"


class OpeningType(StrEnum):
    WINDOW = "window"
    DOOR = "door"
    GENERAL_OPENING = "general_opening"


class GlassType(StrEnum):
    STANDARD = "standard"
    TEMPERED = "tempered"
    LAMINATED = "laminated"
    WIRED_GLASS = "wired_glass"
    FIRE_RATED = "fire_rated"
    HOLLOW_GLASS_BLOCK = "hollow_glass_block"


class DoorType(StrEnum):
    STANDARD = "standard"
    SOLID_CORE = "solid_core"
    FIRE_DOOR = "fire_door"
    HOLLOW = "hollow"


class RoomType(StrEnum):
    """Non-habitable room subtypes relevant to the small-window concession."""

    BATHROOM = "bathroom"
    LAUNDRY = "laundry"
    TOILET = "toilet"
    OTHER = "other"
