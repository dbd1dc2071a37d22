"""Port interfaces for the stepscope reporting core.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Report model ports** (core mutates entities owned by the model)
   - ExecutablePort: anything that can own labels, links, attachments
     and nested steps (the fallback root executable)
   - StepPort: a nested step that must be ended
   - TestPort: a top-level test with descriptions

2. **Storage ports** (core calls out to adapters)
   - AttachmentStorePort: durably writes attachment bytes

Statuses, link types and MIME types cross these ports as the plain
strings defined by allure_commons (model2.Status, types.LinkType,
types.AttachmentType.mime_type).
"""

from abc import ABC, abstractmethod

from allure_commons.types import AttachmentType


# ============================================================================
# REPORT MODEL PORTS
# ============================================================================


class ExecutablePort(ABC):
    """Port for an entity of the report model that can own evidence.

    The same capability set is shared by tests, steps and the bare root
    executable used for suite-level hooks.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Display name of the executable."""

    @abstractmethod
    def start_step(self, name: str) -> "StepPort":
        """Create a nested step owned by this executable.

        Args:
            name: Display name of the new step.

        Returns:
            The new step, already started.
        """

    @abstractmethod
    def add_label(self, name: str, value: str) -> None:
        """Attach a name/value label."""

    @abstractmethod
    def add_attachment(self, name: str, content_type: str, source: str) -> None:
        """Attach a reference previously returned by an attachment store.

        Args:
            name: Display name of the attachment.
            content_type: MIME type of the stored content.
            source: Reference returned by AttachmentStorePort.write().
        """

    @abstractmethod
    def add_link(self, url: str, name: str, link_type: str) -> None:
        """Attach a link."""

    @abstractmethod
    def set_status(self, status: str) -> None:
        """Record the outcome of this executable."""


class StepPort(ExecutablePort):
    """Port for a nested step."""

    @abstractmethod
    def end_step(self) -> None:
        """Mark the step as finished.

        Called exactly once per step by the step executor.
        """


class TestPort(ExecutablePort):
    """Port for a top-level test case."""

    __test__ = False  # not a pytest test class

    @abstractmethod
    def set_description(self, markdown: str) -> None:
        """Replace the plain (markdown) description."""

    @abstractmethod
    def set_description_html(self, html: str) -> None:
        """Replace the rich-text (HTML) description."""


# ============================================================================
# STORAGE PORTS
# ============================================================================


class AttachmentStorePort(ABC):
    """Port for durably writing attachment content.

    Implementations must return a reference that is unique per call so
    that attachments are never aliased. Failures (disk full, permission
    denied, ...) are raised to the caller unchanged.
    """

    @abstractmethod
    def write(self, content: bytes | str, content_type: AttachmentType | str) -> str:
        """Persist attachment content.

        Args:
            content: Raw bytes, or text which is encoded as UTF-8.
            content_type: Attachment type, or a MIME string.

        Returns:
            Opaque reference to pass to ExecutablePort.add_attachment().

        Raises:
            Exception: If the content cannot be written.
        """
