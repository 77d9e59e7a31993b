"""Per-user estimator session state.

Holds what a single user sees between form submissions: the credential
they typed in, the current estimate, a loading flag and the last error
message. Nothing here is persisted or shared between sessions.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from balirab.exceptions import EstimateInProgressError, RabError

if TYPE_CHECKING:
    from types import TracebackType

    from balirab.models.project import ProjectDetails
    from balirab.services.pipeline import EstimatePipeline, PipelineResult

logger = logging.getLogger(__name__)


class EstimateSession:
    """Transient state for one user of the estimator.

    Use as a context manager to guarantee the credential is cleared::

        with EstimateSession(pipeline, credential=key) as session:
            session.submit(details)
    """

    def __init__(
        self,
        pipeline: EstimatePipeline,
        credential: str | None = None,
    ) -> None:
        self._pipeline = pipeline
        self._credential = credential or None
        self.current: PipelineResult | None = None
        self.error: str | None = None
        self.is_loading = False

    def __enter__(self) -> EstimateSession:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.clear_credential()
        self.reset()

    @property
    def has_credential(self) -> bool:
        return self._credential is not None

    def set_credential(self, credential: str | None) -> None:
        """Replace the session credential; blank values clear it."""
        self._credential = (credential or "").strip() or None

    def clear_credential(self) -> None:
        self._credential = None

    def submit(self, details: ProjectDetails) -> PipelineResult:
        """Run one estimate and make it the current result.

        On failure the previous result stays in place, ``error`` holds the
        user-facing message and the exception is re-raised.

        Raises
        ------
        EstimateInProgressError
            If another estimate is still running in this session.
        RabError
            Any pipeline failure.
        """
        if self.is_loading:
            msg = "An estimate is already in progress for this session"
            raise EstimateInProgressError(msg)

        self.is_loading = True
        self.error = None
        try:
            result = self._pipeline.run(details, credential=self._credential)
        except RabError as exc:
            logger.warning("Estimate failed: %s", exc)
            self.error = exc.user_message
            raise
        finally:
            self.is_loading = False

        self.current = result
        return result

    def reset(self) -> None:
        """Discard the current result and error."""
        self.current = None
        self.error = None
