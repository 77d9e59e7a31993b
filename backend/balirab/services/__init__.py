"""Services: the generation boundary, estimation client and pipeline."""

from balirab.services.estimation_client import EstimationClient
from balirab.services.generator import AnthropicTextGenerator, TextGenerator
from balirab.services.pipeline import EstimatePipeline, PipelineResult

__all__ = [
    "AnthropicTextGenerator",
    "EstimatePipeline",
    "EstimationClient",
    "PipelineResult",
    "TextGenerator",
]
