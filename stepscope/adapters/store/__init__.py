"""Attachment store adapters."""

from .allure_file import AllureFileAttachmentStore

__all__ = ["AllureFileAttachmentStore"]
