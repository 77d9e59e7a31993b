"""Estimation client — one call to the generation service, parsed into a RABResult."""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from balirab.exceptions import (
    CredentialMissingError,
    EmptyResponseError,
    MalformedResponseError,
    RabError,
    ServiceFaultError,
)
from balirab.models.rab import RABResult

if TYPE_CHECKING:
    from balirab.services.generator import TextGenerator

logger = logging.getLogger(__name__)


class EstimationClient:
    """Invokes a :class:`TextGenerator` and turns its text into a RABResult.

    Args:
        generator: The generation capability to call.
        default_credential: Process-wide fallback credential, used when the
            caller does not supply one.

    Every failure is terminal for the invocation; nothing is retried here.
    """

    def __init__(
        self,
        generator: TextGenerator,
        default_credential: str | None = None,
    ) -> None:
        self._generator = generator
        self._default_credential = default_credential

    def estimate(
        self,
        prompt: str,
        schema: dict[str, Any],
        credential: str | None = None,
    ) -> RABResult:
        """Request an estimate and parse the response.

        Raises
        ------
        CredentialMissingError
            If neither *credential* nor the default credential is set. No
            request is made in that case.
        ServiceFaultError
            If the generation call fails (network, auth rejection, quota).
        EmptyResponseError
            If the service returns no text.
        MalformedResponseError
            If the text is not JSON or does not match the RABResult shape.
        """
        key = self._resolve_credential(credential)

        try:
            raw_text = self._generator.generate(prompt, schema, key)
        except RabError:
            raise
        except Exception as exc:
            msg = f"Generation service call failed: {exc}"
            raise ServiceFaultError(msg) from exc

        return self.parse_response(raw_text)

    @staticmethod
    def parse_response(raw_text: str | None) -> RABResult:
        """Parse the raw response text into a RABResult.

        Raises
        ------
        EmptyResponseError
            If *raw_text* is empty or whitespace.
        MalformedResponseError
            If the JSON is invalid or does not match the expected shape.
        """
        if raw_text is None or not raw_text.strip():
            msg = "No data returned from the generation service"
            raise EmptyResponseError(msg)

        json_str = _extract_json(raw_text)
        try:
            data = json.loads(json_str, parse_constant=_reject_constant)
        except ValueError as exc:
            logger.warning("Invalid JSON in generation response")
            msg = f"Response is not valid JSON: {exc}"
            raise MalformedResponseError(msg) from exc

        try:
            return RABResult.model_validate(data)
        except ValidationError as exc:
            logger.warning("Generation response does not match the RAB shape")
            msg = f"Response does not match the RAB shape: {exc}"
            raise MalformedResponseError(msg) from exc

    def _resolve_credential(self, credential: str | None) -> str:
        key = (credential or "").strip() or (self._default_credential or "").strip()
        if not key:
            msg = "No API key supplied and none configured"
            raise CredentialMissingError(msg)
        return key


def _extract_json(text: str) -> str:
    """Return the body of a ```json fence if present, else the stripped text."""
    start = text.find("```json")
    if start == -1:
        start = text.find("```")
        if start == -1:
            return text.strip()
        start += 3
    else:
        start += 7

    end = text.find("```", start)
    if end == -1:
        return text[start:].strip()
    return text[start:end].strip()


def _reject_constant(name: str) -> float:
    """Refuse ``NaN`` and ``Infinity``, which :mod:`json` accepts but JSON does not."""
    msg = f"Non-standard JSON constant {name!r}"
    raise ValueError(msg)
