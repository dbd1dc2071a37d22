"""Fake AttachmentStorePort implementation for testing."""

from allure_commons.types import AttachmentType

from stepscope.core.ports import AttachmentStorePort


class FakeAttachmentStore(AttachmentStorePort):
    """In-memory attachment store for testing.

    Returns sequential references and keeps every write for assertions.
    """

    def __init__(self):
        """Initialize with no writes."""
        self.writes: list[tuple[str, bytes | str, AttachmentType | str]] = []
        self.should_fail: bool = False
        self.fail_message: str = "Attachment write failed"

    def write(self, content: bytes | str, content_type: AttachmentType | str) -> str:
        if self.should_fail:
            raise OSError(self.fail_message)

        source = f"attachment-{len(self.writes) + 1}"
        self.writes.append((source, content, content_type))
        return source

    def set_should_fail(self, should_fail: bool, message: str = "Attachment write failed") -> None:
        """Configure the store to fail on the next write."""
        self.should_fail = should_fail
        self.fail_message = message

    def reset(self) -> None:
        """Reset all captured writes and state."""
        self.writes.clear()
        self.should_fail = False
        self.fail_message = "Attachment write failed"
