"""Project, wall and opening records supplied to the compliance engine."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated, Literal
from uuid import uuid4

from pydantic import BaseModel, Field, model_validator

from firesep.models.enums import (
    BoundaryType,
    BuildingClass,
    DoorType,
    GlassType,
    OpeningType,
    RoomType,
    WallMaterial,
)
from firesep.models.frl import FRL


def _new_id() -> str:
    return str(uuid4())


# ---------------------------------------------------------------------------
# Projects
# ---------------------------------------------------------------------------


class ProjectInput(BaseModel):
    """Editable project fields."""

    name: str = Field(min_length=1)
    address: str = ""
    building_class: BuildingClass
    rise_in_storeys: int = Field(default=1, ge=1)
    has_sprinklers: bool = False
    notes: str = ""


class Project(ProjectInput):
    """A building being assessed.  Owns walls by id."""

    id: str = Field(default_factory=_new_id)
    wall_ids: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


# ---------------------------------------------------------------------------
# Walls
# ---------------------------------------------------------------------------


class WallInput(BaseModel):
    """Editable wall fields.  Dimensions and distances are in metres."""

    name: str = Field(min_length=1)
    height: float = Field(gt=0)
    width: float = Field(gt=0)
    distance_to_boundary: float = Field(ge=0)
    boundary_type: BoundaryType
    wall_material: WallMaterial = WallMaterial.OTHER
    is_loadbearing: bool = False


class WallAssessment(WallInput):
    """An external wall of a project.  Owns openings by id."""

    id: str = Field(default_factory=_new_id)
    project_id: str
    opening_ids: list[str] = Field(default_factory=list)
    created_at: datetime = Field(default_factory=datetime.now)
    updated_at: datetime = Field(default_factory=datetime.now)


# ---------------------------------------------------------------------------
# Openings
# ---------------------------------------------------------------------------


class WindowDetails(BaseModel):
    type: Literal["window"] = "window"
    glass_type: GlassType = GlassType.STANDARD
    glass_thickness: float = Field(default=6, gt=0)
    is_fire_rated: bool = False
    frl: FRL | None = None
    is_openable: bool = True
    is_in_habitable_room: bool = True
    room_type: RoomType | None = None


class DoorDetails(BaseModel):
    type: Literal["door"] = "door"
    door_type: DoorType = DoorType.STANDARD
    is_fire_door: bool = False
    frl: FRL | None = None
    is_self_closing: bool = False
    thickness: float = Field(default=40, gt=0)  # mm


class GeneralOpeningDetails(BaseModel):
    """Vents, penetrations, weepholes and similar openings."""

    type: Literal["general_opening"] = "general_opening"
    description: str = ""
    is_exempt: bool = False


OpeningDetails = Annotated[
    WindowDetails | DoorDetails | GeneralOpeningDetails,
    Field(discriminator="type"),
]


class OpeningInput(BaseModel):
    """Editable opening fields.  Dimensions are in metres."""

    type: OpeningType
    name: str = Field(min_length=1)
    width: float = Field(gt=0)
    height: float = Field(gt=0)
    color: str | None = None
    details: OpeningDetails

    @model_validator(mode="after")
    def details_match_type(self) -> OpeningInput:
        if self.details.type != self.type.value:
            msg = (
                f"Opening type '{self.type}' does not match "
                f"details type '{self.details.type}'"
            )
            raise ValueError(msg)
        return self


class Opening(OpeningInput):
    """A window, door or general opening in a wall."""

    id: str = Field(default_factory=_new_id)
    wall_id: str
