"""Frontend cache revalidation adapters."""

from .client import RecordingPathRevalidator, WebhookPathRevalidator

__all__ = ["RecordingPathRevalidator", "WebhookPathRevalidator"]
