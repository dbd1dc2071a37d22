"""Report model adapter over allure-python-commons.

Wraps allure_commons.model2 results so they satisfy ExecutablePort,
StepPort and TestPort:

- AllureTest wraps a TestResult
- AllureStep wraps a TestStepResult nested in its parent's steps
- AllureHook wraps a TestBeforeResult and serves as the fallback root

In the Allure model only TestResult carries labels and links. Steps
pass theirs up to the executable that owns them; a hook keeps its own
lists because TestBeforeResult has no such fields.
"""

import logging

from allure_commons import model2
from allure_commons.utils import now, uuid4

from stepscope.core.ports import ExecutablePort, StepPort, TestPort

logger = logging.getLogger(__name__)

RUNNING = "running"
FINISHED = "finished"


class _AllureExecutable(ExecutablePort):
    """Behaviour shared by every wrapper: steps, attachments, status."""

    def __init__(self, item: model2.ExecutableItem):
        self.item = item

    @property
    def name(self) -> str:
        return self.item.name

    def _evidence_owner(self):
        """Object whose `labels` and `links` lists receive this executable's."""
        raise NotImplementedError

    def start_step(self, name: str) -> "AllureStep":
        step = AllureStep(
            model2.TestStepResult(name=name, start=now(), stage=RUNNING),
            parent=self,
        )
        self.item.steps.append(step.item)
        return step

    def add_label(self, name: str, value: str) -> None:
        self._evidence_owner().labels.append(model2.Label(name=name, value=value))

    def add_attachment(self, name: str, content_type: str, source: str) -> None:
        self.item.attachments.append(
            model2.Attachment(name=name, source=source, type=content_type)
        )

    def add_link(self, url: str, name: str, link_type: str) -> None:
        self._evidence_owner().links.append(
            model2.Link(type=link_type, url=url, name=name)
        )

    def set_status(self, status: str) -> None:
        self.item.status = status


class AllureHook(_AllureExecutable):
    """Bare executable for suite-level hooks (before/after fixtures)."""

    def __init__(self, name: str):
        super().__init__(model2.TestBeforeResult(name=name, start=now(), stage=RUNNING))
        self.labels: list[model2.Label] = []
        self.links: list[model2.Link] = []

    def _evidence_owner(self):
        return self

    def stop(self) -> None:
        self.item.stop = now()
        self.item.stage = FINISHED


class AllureStep(_AllureExecutable, StepPort):
    """A nested step."""

    def __init__(self, item: model2.TestStepResult, parent: _AllureExecutable):
        super().__init__(item)
        self.parent = parent

    def _evidence_owner(self):
        return self.parent._evidence_owner()

    def end_step(self) -> None:
        if self.item.stop is not None:
            logger.warning(f"Step '{self.name}' ended more than once")
        self.item.stop = now()
        self.item.stage = FINISHED


class AllureTest(_AllureExecutable, TestPort):
    """A top-level test case backed by a TestResult."""

    item: model2.TestResult

    def __init__(self, name: str, full_name: str | None = None):
        super().__init__(
            model2.TestResult(
                uuid=uuid4(),
                name=name,
                fullName=full_name or name,
                start=now(),
                stage=RUNNING,
            )
        )

    def _evidence_owner(self) -> model2.TestResult:
        return self.item

    def set_description(self, markdown: str) -> None:
        self.item.description = markdown

    def set_description_html(self, html: str) -> None:
        self.item.descriptionHtml = html

    def end_test(self) -> None:
        """Stamp the stop time. Called by the test-runner integration."""
        self.item.stop = now()
        self.item.stage = FINISHED
