"""Project input model for the RAB estimator."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from balirab.models.enums import BaliLocation, BuildingType, MaterialQuality

MAX_FLOORS = 10


class ProjectDetails(BaseModel):
    """Parameters of one form submission.

    Defaults mirror the initial state of the estimator form. Field names
    accept both snake_case and the camelCase keys used by the web client.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )

    project_name: str = Field(min_length=1)
    location: BaliLocation = BaliLocation.DENPASAR
    land_area: float = Field(default=100.0, ge=0)
    building_area: float = Field(default=60.0, ge=0)
    floors: int = Field(default=1, ge=1, le=MAX_FLOORS)
    building_type: BuildingType = BuildingType.RESIDENTIAL
    custom_building_type: str | None = None
    quality: MaterialQuality = MaterialQuality.STANDARD
    notes: str = ""

    @field_validator("project_name")
    @classmethod
    def project_name_must_not_be_blank(cls, v: str) -> str:
        v = v.strip()
        if not v:
            msg = "project_name must not be blank"
            raise ValueError(msg)
        return v

    @model_validator(mode="after")
    def custom_type_required_for_other(self) -> ProjectDetails:
        if self.building_type == BuildingType.OTHER and not (
            self.custom_building_type and self.custom_building_type.strip()
        ):
            msg = "custom_building_type is required when building_type is Other"
            raise ValueError(msg)
        return self

    @property
    def effective_building_type(self) -> str:
        """Label sent to the generation service for the building type."""
        if self.building_type == BuildingType.OTHER and self.custom_building_type:
            return self.custom_building_type.strip()
        return self.building_type.value
