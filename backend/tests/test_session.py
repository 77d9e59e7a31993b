"""Tests for per-user estimator session state."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from balirab.data.sample import SAMPLE_PROJECT, SAMPLE_RESULT
from balirab.exceptions import (
    CredentialMissingError,
    EstimateInProgressError,
    MalformedResponseError,
)
from balirab.normalizer import normalize_result
from balirab.services.pipeline import EstimatePipeline, PipelineResult
from balirab.session import EstimateSession

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------


def _make_pipeline_result() -> PipelineResult:
    return PipelineResult(
        project=SAMPLE_PROJECT,
        result=SAMPLE_RESULT,
        estimate=normalize_result(SAMPLE_RESULT),
        processing_time_seconds=1.5,
    )


def _make_mock_pipeline() -> MagicMock:
    mock = MagicMock(spec=EstimatePipeline)
    mock.run.return_value = _make_pipeline_result()
    return mock


# ---------------------------------------------------------------------------
# Tests
# ---------------------------------------------------------------------------


class TestSubmit:
    def test_success_sets_current(self) -> None:
        pipeline = _make_mock_pipeline()
        session = EstimateSession(pipeline, credential="user-key")

        result = session.submit(SAMPLE_PROJECT)

        assert session.current is result
        assert session.error is None
        assert session.is_loading is False
        pipeline.run.assert_called_once_with(SAMPLE_PROJECT, credential="user-key")

    def test_failure_keeps_previous_result(self) -> None:
        pipeline = _make_mock_pipeline()
        session = EstimateSession(pipeline, credential="user-key")
        first = session.submit(SAMPLE_PROJECT)

        pipeline.run.side_effect = MalformedResponseError("bad json")
        with pytest.raises(MalformedResponseError):
            session.submit(SAMPLE_PROJECT)

        assert session.current is first
        assert session.error == MalformedResponseError.user_message
        assert session.is_loading is False

    def test_missing_credential_message(self) -> None:
        pipeline = _make_mock_pipeline()
        pipeline.run.side_effect = CredentialMissingError("no key")
        session = EstimateSession(pipeline)

        with pytest.raises(CredentialMissingError):
            session.submit(SAMPLE_PROJECT)

        assert session.error == CredentialMissingError.user_message
        assert session.current is None

    def test_new_submission_clears_error(self) -> None:
        pipeline = _make_mock_pipeline()
        pipeline.run.side_effect = [MalformedResponseError("bad"), _make_pipeline_result()]
        session = EstimateSession(pipeline, credential="k")

        with pytest.raises(MalformedResponseError):
            session.submit(SAMPLE_PROJECT)
        session.submit(SAMPLE_PROJECT)

        assert session.error is None
        assert session.current is not None

    def test_rejects_concurrent_submission(self) -> None:
        pipeline = _make_mock_pipeline()
        session = EstimateSession(pipeline, credential="k")
        session.is_loading = True

        with pytest.raises(EstimateInProgressError):
            session.submit(SAMPLE_PROJECT)
        pipeline.run.assert_not_called()


class TestCredentialAndReset:
    def test_reset_clears_result_and_error(self) -> None:
        session = EstimateSession(_make_mock_pipeline(), credential="k")
        session.submit(SAMPLE_PROJECT)
        session.error = "old"

        session.reset()

        assert session.current is None
        assert session.error is None
        assert session.has_credential

    def test_set_blank_credential_clears(self) -> None:
        session = EstimateSession(_make_mock_pipeline(), credential="k")
        session.set_credential("   ")
        assert not session.has_credential

    def test_set_credential_used_for_next_call(self) -> None:
        pipeline = _make_mock_pipeline()
        session = EstimateSession(pipeline)
        session.set_credential(" new-key ")
        session.submit(SAMPLE_PROJECT)
        assert pipeline.run.call_args.kwargs["credential"] == "new-key"

    def test_context_manager_clears_credential(self) -> None:
        pipeline = _make_mock_pipeline()
        with EstimateSession(pipeline, credential="k") as session:
            session.submit(SAMPLE_PROJECT)
            assert session.has_credential
        assert not session.has_credential
        assert session.current is None
