"""Factory functions for creating pre-configured EstimatePipeline instances."""

from __future__ import annotations

from balirab.config import Settings, load_settings
from balirab.services.estimation_client import EstimationClient
from balirab.services.generator import AnthropicTextGenerator
from balirab.services.pipeline import EstimatePipeline


def create_default_pipeline(settings: Settings | None = None) -> EstimatePipeline:
    """Create an EstimatePipeline backed by the Anthropic generator.

    The configured API key (``ANTHROPIC_API_KEY``) becomes the fallback
    credential; a key passed to :meth:`EstimatePipeline.run` wins over it.

    Example::

        from balirab import ProjectDetails, create_default_pipeline

        pipeline = create_default_pipeline()
        result = pipeline.run(ProjectDetails(project_name="Villa Ubud"))
    """
    settings = settings or load_settings()
    generator = AnthropicTextGenerator(
        model=settings.model,
        temperature=settings.temperature,
        max_tokens=settings.max_tokens,
    )
    client = EstimationClient(generator, default_credential=settings.api_key)
    return EstimatePipeline(client)
