"""Text generation boundary — the only I/O in the estimation pipeline.

A :class:`TextGenerator` takes a prompt, the JSON Schema the answer must
follow and a credential, and returns the raw response text. The Anthropic
implementation below is the production transport; tests substitute a stub.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Protocol

import anthropic

from balirab.config import DEFAULT_MODEL

logger = logging.getLogger(__name__)


class TextGenerator(Protocol):
    """Opaque generation capability: structured prompt in, raw text out."""

    def generate(self, prompt: str, schema: dict[str, Any], credential: str) -> str:
        ...


# ---------------------------------------------------------------------------
# System prompt
# ---------------------------------------------------------------------------

_SYSTEM_PROMPT_TEMPLATE = (
    "You are a construction cost estimator producing a RAB (Rencana "
    "Anggaran Biaya) for a building project in Bali, Indonesia.\n\n"
    "Output ONLY a JSON object matching EXACTLY this JSON Schema. "
    "Do not add or remove fields.\n\n"
    "```json\n"
    "{schema}\n"
    "```\n\n"
    "IMPORTANT:\n"
    "- Every field is required.\n"
    "- All monetary values are whole Rupiah numbers without separators "
    "or currency symbols.\n"
    "- Do not include any text before or after the JSON object.\n"
)


def build_system_prompt(schema: dict[str, Any]) -> str:
    """Embed the output schema into the system prompt."""
    return _SYSTEM_PROMPT_TEMPLATE.format(
        schema=json.dumps(schema, indent=2, ensure_ascii=False),
    )


# ---------------------------------------------------------------------------
# Anthropic transport
# ---------------------------------------------------------------------------


class AnthropicTextGenerator:
    """Generates RAB text through the Anthropic Messages API.

    A new client is created for every call so the credential is only held
    for the duration of the request. No timeout is set beyond the SDK's own
    default unless one is configured.
    """

    def __init__(
        self,
        model: str = DEFAULT_MODEL,
        temperature: float = 0.2,
        max_tokens: int = 16000,
        timeout: float | None = None,
    ) -> None:
        self._model = model
        self._temperature = temperature
        self._max_tokens = max_tokens
        self._timeout = timeout

    def generate(self, prompt: str, schema: dict[str, Any], credential: str) -> str:
        """Send one request and return the concatenated text blocks.

        Raises whatever the Anthropic SDK raises (``anthropic.APIError`` and
        subclasses); callers translate those into domain errors.
        """
        client_kwargs: dict[str, Any] = {"api_key": credential, "max_retries": 0}
        if self._timeout is not None:
            client_kwargs["timeout"] = self._timeout
        client = anthropic.Anthropic(**client_kwargs)

        logger.debug("Requesting RAB estimate from %s", self._model)
        response = client.messages.create(
            model=self._model,
            max_tokens=self._max_tokens,
            temperature=self._temperature,
            system=build_system_prompt(schema),
            messages=[{"role": "user", "content": prompt}],
        )
        text_blocks = [block.text for block in response.content if block.type == "text"]
        return "\n".join(text_blocks)
