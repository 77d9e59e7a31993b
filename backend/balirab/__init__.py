"""Bali RAB construction-cost estimator.

Usage::

    from balirab import ProjectDetails, create_default_pipeline

    pipeline = create_default_pipeline()
    result = pipeline.run(ProjectDetails(project_name="Villa Ubud"))
    result.estimate.grand_total
"""

__version__ = "0.1.0"

from balirab.exceptions import (
    CredentialMissingError,
    EmptyResponseError,
    EstimateInProgressError,
    InputValidationError,
    MalformedResponseError,
    RabError,
    ServiceFaultError,
)
from balirab.factory import create_default_pipeline
from balirab.models.enums import BaliLocation, BuildingType, MaterialQuality
from balirab.models.estimate import NormalizedEstimate
from balirab.models.project import ProjectDetails
from balirab.models.rab import RABCategory, RABItem, RABResult
from balirab.normalizer import normalize_result, sort_categories
from balirab.request_builder import EstimateRequest, build_estimate_request
from balirab.services.estimation_client import EstimationClient
from balirab.services.pipeline import EstimatePipeline, PipelineResult
from balirab.session import EstimateSession

__all__ = [
    "BaliLocation",
    "BuildingType",
    "CredentialMissingError",
    "EmptyResponseError",
    "EstimateInProgressError",
    "EstimatePipeline",
    "EstimateRequest",
    "EstimateSession",
    "EstimationClient",
    "InputValidationError",
    "MalformedResponseError",
    "MaterialQuality",
    "NormalizedEstimate",
    "PipelineResult",
    "ProjectDetails",
    "RABCategory",
    "RABItem",
    "RABResult",
    "RabError",
    "ServiceFaultError",
    "build_estimate_request",
    "create_default_pipeline",
    "normalize_result",
    "sort_categories",
]
