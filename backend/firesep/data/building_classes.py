"""Descriptive catalogue of NCC building classes."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from firesep.models.enums import BuildingClass, BuildingClassGroup


class BuildingClassInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: BuildingClass
    label: str
    description: str
    group: BuildingClassGroup


_RES = BuildingClassGroup.RESIDENTIAL
_COM = BuildingClassGroup.COMMERCIAL
_IND = BuildingClassGroup.INDUSTRIAL
_SPE = BuildingClassGroup.SPECIAL
_NON = BuildingClassGroup.NON_HABITABLE

BUILDING_CLASS_INFO: tuple[BuildingClassInfo, ...] = (
    BuildingClassInfo(
        value=BuildingClass.CLASS_1A, label="Class 1a", group=_RES,
        description="Single dwelling (detached house, terrace, townhouse, villa)",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_1B, label="Class 1b", group=_RES,
        description=(
            "Boarding house, guest house, hostel "
            "(max 12 residents, max 300m²)"
        ),
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_2, label="Class 2", group=_RES,
        description="Apartment building (building with 2+ sole-occupancy units)",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_3, label="Class 3", group=_RES,
        description="Residential building (hotel, motel, hostel, backpackers)",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_4, label="Class 4", group=_RES,
        description="Dwelling in a Class 5, 6, 7, 8 or 9 building (e.g. caretaker flat)",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_5, label="Class 5", group=_COM,
        description="Office building",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_6, label="Class 6", group=_COM,
        description="Shop, restaurant, cafe, retail",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_7A, label="Class 7a", group=_COM,
        description="Carpark",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_7B, label="Class 7b", group=_IND,
        description="Warehouse, storage, wholesale",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_8, label="Class 8", group=_IND,
        description="Factory, laboratory, production facility",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_9A, label="Class 9a", group=_SPE,
        description="Healthcare building (hospital, clinic)",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_9B, label="Class 9b", group=_SPE,
        description="Assembly building (school, university, theatre, church)",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_9C, label="Class 9c", group=_SPE,
        description="Aged care building (nursing home, residential care)",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_10A, label="Class 10a", group=_NON,
        description="Non-habitable building (garage, shed, carport)",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_10B, label="Class 10b", group=_NON,
        description="Structure (fence, mast, antenna, retaining wall)",
    ),
    BuildingClassInfo(
        value=BuildingClass.CLASS_10C, label="Class 10c", group=_NON,
        description="Private bushfire shelter",
    ),
)
