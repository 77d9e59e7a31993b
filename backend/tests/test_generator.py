"""Tests for the Anthropic text generator — the SDK client is mocked."""

from __future__ import annotations

from typing import TYPE_CHECKING
from unittest.mock import MagicMock, patch

import pytest

from balirab.request_builder import RAB_RESPONSE_SCHEMA
from balirab.services.generator import AnthropicTextGenerator, build_system_prompt

if TYPE_CHECKING:
    from collections.abc import Iterator

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _block(block_type: str, text: str = "") -> MagicMock:
    block = MagicMock()
    block.type = block_type
    block.text = text
    return block


def _mock_api_response(*blocks: MagicMock) -> MagicMock:
    response = MagicMock()
    response.content = list(blocks)
    return response


@pytest.fixture()
def mock_anthropic() -> Iterator[MagicMock]:
    with patch("balirab.services.generator.anthropic.Anthropic") as cls:
        yield cls


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestSystemPrompt:
    def test_embeds_schema(self) -> None:
        prompt = build_system_prompt(RAB_RESPONSE_SCHEMA)
        assert '"projectSummary"' in prompt
        assert '"unitPrice"' in prompt
        assert "Output ONLY a JSON object" in prompt


class TestAnthropicTextGenerator:
    def test_request_parameters(self, mock_anthropic: MagicMock) -> None:
        client = mock_anthropic.return_value
        client.messages.create.return_value = _mock_api_response(_block("text", "{}"))

        generator = AnthropicTextGenerator(model="test-model", max_tokens=1234)
        generator.generate("PROMPT", RAB_RESPONSE_SCHEMA, "secret-key")

        mock_anthropic.assert_called_once_with(api_key="secret-key", max_retries=0)
        kwargs = client.messages.create.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["max_tokens"] == 1234
        assert kwargs["temperature"] == 0.2
        assert kwargs["messages"] == [{"role": "user", "content": "PROMPT"}]
        assert '"grandTotal"' in kwargs["system"]

    def test_timeout_forwarded_when_configured(self, mock_anthropic: MagicMock) -> None:
        client = mock_anthropic.return_value
        client.messages.create.return_value = _mock_api_response(_block("text", "{}"))

        AnthropicTextGenerator(timeout=45.0).generate("P", RAB_RESPONSE_SCHEMA, "k")

        assert mock_anthropic.call_args.kwargs["timeout"] == 45.0

    def test_joins_text_blocks_and_skips_others(self, mock_anthropic: MagicMock) -> None:
        client = mock_anthropic.return_value
        client.messages.create.return_value = _mock_api_response(
            _block("text", '{"a":'),
            _block("thinking", "ignored"),
            _block("text", "1}"),
        )

        text = AnthropicTextGenerator().generate("P", RAB_RESPONSE_SCHEMA, "k")

        assert text == '{"a":\n1}'

    def test_no_text_blocks_returns_empty(self, mock_anthropic: MagicMock) -> None:
        client = mock_anthropic.return_value
        client.messages.create.return_value = _mock_api_response()

        assert AnthropicTextGenerator().generate("P", RAB_RESPONSE_SCHEMA, "k") == ""

    def test_new_client_per_call(self, mock_anthropic: MagicMock) -> None:
        client = mock_anthropic.return_value
        client.messages.create.return_value = _mock_api_response(_block("text", "{}"))
        generator = AnthropicTextGenerator()

        generator.generate("P", RAB_RESPONSE_SCHEMA, "key-one")
        generator.generate("P", RAB_RESPONSE_SCHEMA, "key-two")

        keys = [c.kwargs["api_key"] for c in mock_anthropic.call_args_list]
        assert keys == ["key-one", "key-two"]

    def test_sdk_errors_propagate(self, mock_anthropic: MagicMock) -> None:
        client = mock_anthropic.return_value
        client.messages.create.side_effect = RuntimeError("rejected")

        with pytest.raises(RuntimeError, match="rejected"):
            AnthropicTextGenerator().generate("P", RAB_RESPONSE_SCHEMA, "k")
