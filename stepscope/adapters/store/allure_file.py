"""Attachment store backed by allure-python-commons' file logger.

Implements AttachmentStorePort with AllureFileLogger, which writes each
attachment next to the result files in the results directory under the
`<uuid>-attachment.<ext>` naming report generators expect.
"""

import logging
import mimetypes
from pathlib import Path

from allure_commons.logger import AllureFileLogger
from allure_commons.types import AttachmentType
from allure_commons.utils import uuid4

from stepscope.core.models import content_type_value
from stepscope.core.ports import AttachmentStorePort

logger = logging.getLogger(__name__)

_BY_MIME: dict[str, AttachmentType] = {
    attachment_type.mime_type: attachment_type for attachment_type in AttachmentType
}


class AllureFileAttachmentStore(AttachmentStorePort):
    """Writes attachments as individual files through AllureFileLogger."""

    def __init__(self, results_dir: str):
        """Initialize the store.

        Args:
            results_dir: Directory that receives attachment files. Created
                if it does not exist.

        Raises:
            ValueError: If results_dir exists but is not a directory.
            OSError: If the directory cannot be created.
        """
        self.results_dir = Path(results_dir).resolve()

        if self.results_dir.exists() and not self.results_dir.is_dir():
            raise ValueError(f"results_dir is not a directory: {results_dir}")

        self.file_logger = AllureFileLogger(str(self.results_dir))

    @staticmethod
    def extension_for(content_type: AttachmentType | str) -> str:
        """Pick a file extension for an attachment type ("" if unknown)."""
        if isinstance(content_type, AttachmentType):
            return f".{content_type.extension}"
        if content_type in _BY_MIME:
            return f".{_BY_MIME[content_type].extension}"
        return mimetypes.guess_extension(content_type) or ""

    def write(self, content: bytes | str, content_type: AttachmentType | str) -> str:
        """Write content to a new file and return its file name."""
        file_name = f"{uuid4()}-attachment{self.extension_for(content_type)}"
        self.file_logger.report_attached_data(body=content, file_name=file_name)
        logger.debug(
            f"Wrote attachment {file_name} ({content_type_value(content_type)})"
        )
        return file_name
