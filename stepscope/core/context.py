"""Execution context tracking for the reporting core.

This module holds the mutable state of one test-execution unit:
- ExecutionContext: which test is running and which steps are open
- LabelBuffer: labels recorded before any test was running

Both are owned by a ReportingFacade instance rather than being global,
so a fresh pair can be built per execution unit (and per unit test).
"""

import logging
from typing import TYPE_CHECKING

from .errors import NoActiveExecutableError
from .models import Label
from .ports import ExecutablePort, StepPort, TestPort

if TYPE_CHECKING:
    from .step_executor import StepHandle

logger = logging.getLogger(__name__)


class ExecutionContext:
    """Tracks the currently active executable.

    Resolution order for current(): innermost open step, then the
    current test, then the fallback root executable.

    The stack holds StepHandles rather than bare steps so that whoever
    clears it can end each step through its handle.

    Not safe for concurrent mutation: steps may nest but must not
    interleave on the same context.
    """

    def __init__(self, root: ExecutablePort | None = None):
        self.root = root
        self._handles: list["StepHandle"] = []
        self._test: TestPort | None = None

    @property
    def current_test(self) -> TestPort | None:
        return self._test

    @property
    def current_handle(self) -> "StepHandle | None":
        return self._handles[-1] if self._handles else None

    @property
    def current_step(self) -> StepPort | None:
        handle = self.current_handle
        return handle.step if handle is not None else None

    @property
    def depth(self) -> int:
        """Number of steps currently open."""
        return len(self._handles)

    def current(self) -> ExecutablePort:
        """Return the executable that new evidence should attach to.

        Raises:
            NoActiveExecutableError: If no step, test or root is installed.
        """
        step = self.current_step
        if step is not None:
            return step
        if self._test is not None:
            return self._test
        if self.root is not None:
            return self.root
        raise NoActiveExecutableError()

    def push(self, handle: "StepHandle") -> None:
        self._handles.append(handle)

    def pop(self) -> "StepHandle | None":
        """Remove and return the innermost open step's handle."""
        if not self._handles:
            logger.warning("pop() called with no open steps")
            return None
        return self._handles.pop()

    def contains(self, handle: "StepHandle") -> bool:
        return any(open_handle is handle for open_handle in self._handles)

    def remove(self, handle: "StepHandle") -> None:
        """Take a handle off the stack wherever it sits."""
        self._handles = [h for h in self._handles if h is not handle]

    def set_current_test(self, test: TestPort) -> None:
        if self._test is not None and self._test is not test:
            logger.warning(
                f"Test '{test.name}' started while '{self._test.name}' "
                f"is still current"
            )
        self._test = test

    def clear_current_test(self) -> None:
        self._test = None

    def reset(self) -> list["StepHandle"]:
        """Forget the current test and every open step.

        The root executable is kept. Returns the handles that were still
        open, outermost first.
        """
        abandoned = self._handles
        self._handles = []
        self._test = None
        return abandoned


class LabelBuffer:
    """Holds labels recorded before any test is active.

    Setup code may legitimately set labels before the first test of a
    suite starts; those labels are kept here in insertion order until
    they are flushed onto a test.
    """

    def __init__(self):
        self._labels: list[Label] = []

    def __len__(self) -> int:
        return len(self._labels)

    @property
    def labels(self) -> tuple[Label, ...]:
        """Snapshot of the buffered labels in recorded order."""
        return tuple(self._labels)

    def record(self, label: Label) -> None:
        """Append a label. Duplicate names are kept."""
        self._labels.append(label)
        logger.debug(f"Buffered label {label.name}={label.value!r} (no active test)")

    def flush_into(self, test: ExecutablePort) -> int:
        """Apply every buffered label to test in order, then clear.

        Returns:
            Number of labels applied. Zero for an empty buffer.
        """
        if not self._labels:
            return 0

        pending, self._labels = self._labels, []
        for label in pending:
            test.add_label(label.name, label.value)

        logger.debug(f"Flushed {len(pending)} buffered label(s) into '{test.name}'")
        return len(pending)
