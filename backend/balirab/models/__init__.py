"""Domain models for the RAB estimator."""

from balirab.models.enums import BaliLocation, BuildingType, MaterialQuality
from balirab.models.estimate import TAX_RATE_PERCENT, NormalizedEstimate
from balirab.models.project import MAX_FLOORS, ProjectDetails
from balirab.models.rab import RABCategory, RABItem, RABResult

__all__ = [
    "MAX_FLOORS",
    "TAX_RATE_PERCENT",
    "BaliLocation",
    "BuildingType",
    "MaterialQuality",
    "NormalizedEstimate",
    "ProjectDetails",
    "RABCategory",
    "RABItem",
    "RABResult",
]
