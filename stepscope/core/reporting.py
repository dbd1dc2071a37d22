"""Public reporting operations.

ReportingFacade composes the execution context, the label buffer, the
step executor and the attachment store into the operations test code
calls: labels, links, descriptions, attachments and steps.
"""

import logging
from collections.abc import Callable, Iterable
from typing import TypeVar

from allure_commons.types import AttachmentType, LabelType, LinkType, Severity

from .context import ExecutionContext, LabelBuffer
from .errors import NoActiveTestError
from .models import LEAD, OWNER, Attachment, Label, Link, content_type_value
from .ports import AttachmentStorePort, ExecutablePort, TestPort
from .step_executor import StepExecutor, StepHandle

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ReportingFacade:
    """Reporting operations for one test-execution unit.

    The test-runner integration calls start_test()/end_test() around
    each test and may swap current_executable for each suite-level hook;
    everything else is called from test and hook code.
    """

    def __init__(
        self,
        store: AttachmentStorePort,
        root: ExecutablePort | None = None,
        issue_tracker_url: str = "",
        tms_url: str = "",
    ):
        self.store = store
        self.context = ExecutionContext(root)
        self.label_buffer = LabelBuffer()
        self.executor = StepExecutor(self.context, store)
        self.issue_tracker_url = issue_tracker_url
        self.tms_url = tms_url

    # ------------------------------------------------------------------
    # Lifecycle (driven by the test-runner integration)
    # ------------------------------------------------------------------

    @property
    def current_executable(self) -> ExecutablePort:
        return self.context.current()

    @current_executable.setter
    def current_executable(self, executable: ExecutablePort) -> None:
        """Install the fallback executable, e.g. the hook being run."""
        self.context.root = executable

    @property
    def current_test(self) -> TestPort | None:
        return self.context.current_test

    def start_test(self, test: TestPort) -> None:
        """Make test current and move any buffered labels onto it."""
        self.context.set_current_test(test)
        logger.debug(f"Test '{test.name}' started")
        self.flush_labels()

    def end_test(self) -> None:
        """Clear the current test.

        Steps the test left open are ended through their handles, so a
        handle that settles later is a no-op and the next test starts
        from a clean stack.
        """
        test = self.context.current_test
        abandoned = self.context.reset()
        for handle in reversed(abandoned):
            logger.warning(f"Step '{handle.name}' was still open at end of test; ending it")
            handle.end_step()
        if test is not None:
            logger.debug(f"Test '{test.name}' ended")

    def flush_labels(self) -> int:
        """Apply buffered labels to the current test, if there is one."""
        test = self.context.current_test
        if test is None:
            return 0
        return self.label_buffer.flush_into(test)

    # ------------------------------------------------------------------
    # Labels
    # ------------------------------------------------------------------

    def label(self, name: str, value: str, index: int | None = None) -> None:
        """Attach a label to the current test, or buffer it until one starts.

        Raises:
            ValueError: If name is empty, whether or not a test is running.
        """
        label = Label(name=name, value=value, index=index)
        test = self.context.current_test
        if test is not None:
            test.add_label(label.name, label.value)
        else:
            self.label_buffer.record(label)

    def severity(self, severity: Severity | str, index: int | None = None) -> None:
        value = severity.value if isinstance(severity, Severity) else severity
        self.label(LabelType.SEVERITY, value, index)

    def tag(self, tag: str, index: int | None = None) -> None:
        """Attach a tag label. Unlike label(), tags are never buffered.

        Raises:
            NoActiveTestError: If no test is running.
        """
        self._require_test("tag").add_label(LabelType.TAG, tag)

    def owner(self, owner: str, index: int | None = None) -> None:
        self.label(OWNER, owner, index)

    def lead(self, lead: str, index: int | None = None) -> None:
        self.label(LEAD, lead, index)

    def epic(self, epic: str, index: int | None = None) -> None:
        self.label(LabelType.EPIC, epic, index)

    def feature(self, feature: str, index: int | None = None) -> None:
        self.label(LabelType.FEATURE, feature, index)

    def story(self, story: str, index: int | None = None) -> None:
        self.label(LabelType.STORY, story, index)

    def allure_id(self, allure_id: str, index: int | None = None) -> None:
        self.label(LabelType.ID, allure_id, index)

    # ------------------------------------------------------------------
    # Links
    # ------------------------------------------------------------------

    def link(self, url: str, name: str | None = None, link_type: str = LinkType.LINK) -> None:
        """Attach a link to the current executable."""
        self.current_executable.add_link(url, name if name is not None else url, link_type)

    def issue(self, name: str) -> None:
        """Link an issue id, resolved against the issue tracker URL."""
        self._add_link(Link.from_base(self.issue_tracker_url, name, LinkType.ISSUE))

    def tms(self, name: str) -> None:
        """Link a test-management case id, resolved against the TMS URL."""
        self._add_link(Link.from_base(self.tms_url, name, LinkType.TEST_CASE))

    def _add_link(self, link: Link) -> None:
        self.current_executable.add_link(link.url, link.name, link.type)

    # ------------------------------------------------------------------
    # Descriptions
    # ------------------------------------------------------------------

    def description(self, markdown: str) -> None:
        self._require_test("description").set_description(markdown)

    def description_html(self, html: str) -> None:
        self._require_test("description_html").set_description_html(html)

    # ------------------------------------------------------------------
    # Attachments
    # ------------------------------------------------------------------

    def attachment(
        self, name: str, content: bytes | str, content_type: AttachmentType | str
    ) -> None:
        """Write content and attach it to the innermost open step or test."""
        executable = self.current_executable
        source = self.store.write(content, content_type)
        executable.add_attachment(name, content_type_value(content_type), source)

    def test_attachment(
        self, name: str, content: bytes | str, content_type: AttachmentType | str
    ) -> None:
        """Write content and attach it to the test, bypassing open steps.

        Raises:
            NoActiveTestError: If no test is running.
        """
        test = self._require_test("test_attachment")
        source = self.store.write(content, content_type)
        test.add_attachment(name, content_type_value(content_type), source)

    # ------------------------------------------------------------------
    # Steps
    # ------------------------------------------------------------------

    def start_step(self, name: str) -> StepHandle:
        """Open a step that the caller ends explicitly (or via `with`)."""
        return self.executor.start(name)

    def step(self, name: str, body: Callable[[StepHandle], T]) -> T:
        """Run body as a step. See StepExecutor.run() for async bodies."""
        return self.executor.run(name, body)

    def log_step(
        self,
        name: str,
        status: str,
        attachments: Iterable[Attachment] | None = None,
    ) -> None:
        """Record a zero-duration step with a status and optional evidence."""
        with self.start_step(name) as step:
            step.status = status
            for item in attachments or ():
                self.attachment(item.name, item.content, item.type)

    def _require_test(self, operation: str) -> TestPort:
        test = self.context.current_test
        if test is None:
            raise NoActiveTestError(operation)
        return test
