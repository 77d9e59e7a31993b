"""Custom exception hierarchy for the RAB estimation pipeline.

Every error is terminal for the current attempt. ``user_message`` is the
single human-readable line shown to the user; ``str(exc)`` carries the
technical detail for the logs.
"""

from __future__ import annotations


class RabError(Exception):
    """Base exception for all RAB estimation errors."""

    user_message = (
        "Gagal menghasilkan estimasi RAB. Pastikan API Key valid "
        "atau coba lagi nanti."
    )


class InputValidationError(RabError):
    """Raised when project parameters are missing or out of range."""

    user_message = "Data proyek belum lengkap atau tidak valid."


class CredentialMissingError(RabError):
    """Raised when no API key is available for the generation service."""

    user_message = "API Key belum diisi. Silakan masukkan API Key Anda."


class ServiceFaultError(RabError):
    """Raised when the call to the generation service itself fails."""


class EmptyResponseError(RabError):
    """Raised when the generation service returns no text."""

    user_message = "Layanan AI tidak mengembalikan data. Silakan coba lagi."


class MalformedResponseError(RabError):
    """Raised when the returned text is not a valid RAB result."""

    user_message = (
        "Format jawaban layanan AI tidak dapat dibaca. Silakan coba lagi."
    )


class EstimateInProgressError(RabError):
    """Raised when an estimate is requested while another is running."""

    user_message = "Estimasi sedang dihitung. Mohon tunggu."
