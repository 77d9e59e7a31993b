"""Dependency construction for FastAPI endpoints."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from balirab.factory import create_default_pipeline

if TYPE_CHECKING:
    from balirab.config import Settings
    from balirab.services.pipeline import EstimatePipeline

logger = logging.getLogger(__name__)


def create_pipeline(settings: Settings) -> EstimatePipeline:
    """Create the production pipeline from settings.

    A missing ``ANTHROPIC_API_KEY`` is not an error here: callers may
    supply their own key per request through the ``X-Api-Key`` header.
    """
    if not settings.api_key:
        logger.info(
            "ANTHROPIC_API_KEY is not set; requests must supply X-Api-Key",
        )
    return create_default_pipeline(settings)
