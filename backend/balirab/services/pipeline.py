"""Estimation pipeline — request builder, estimation client, normalizer."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import TYPE_CHECKING

from balirab.normalizer import normalize_result
from balirab.request_builder import build_estimate_request

if TYPE_CHECKING:
    from balirab.models.estimate import NormalizedEstimate
    from balirab.models.project import ProjectDetails
    from balirab.models.rab import RABResult
    from balirab.services.estimation_client import EstimationClient

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PipelineResult:
    """Result of one estimate: the raw result and its display view."""

    project: ProjectDetails
    result: RABResult
    estimate: NormalizedEstimate
    processing_time_seconds: float


class EstimatePipeline:
    """Runs ProjectDetails -> prompt -> generation service -> normalized estimate.

    Each call is a single linear invocation; errors from any stage propagate
    unchanged as :class:`~balirab.exceptions.RabError` subclasses.
    """

    def __init__(self, client: EstimationClient) -> None:
        self._client = client

    def run(
        self,
        details: ProjectDetails,
        credential: str | None = None,
    ) -> PipelineResult:
        """Produce a normalized estimate for *details*.

        Raises
        ------
        InputValidationError
            If the details are invalid; no external call is made.
        CredentialMissingError, ServiceFaultError, EmptyResponseError,
        MalformedResponseError
            From the estimation client.
        """
        start = time.monotonic()

        request = build_estimate_request(details)
        result = self._client.estimate(request.prompt, request.schema, credential)
        estimate = normalize_result(result)

        elapsed = round(time.monotonic() - start, 2)
        logger.info(
            "Estimated '%s' (%s): %d categories in %.2fs",
            details.project_name,
            details.location,
            len(estimate.categories),
            elapsed,
        )
        return PipelineResult(
            project=details,
            result=result,
            estimate=estimate,
            processing_time_seconds=elapsed,
        )
