"""Step execution for the reporting core.

Wraps a unit of work as exactly one reported step. The work may be a
plain callable or one that returns an awaitable; in both cases the step
is started before the work runs and ended exactly once after it settles,
whether it returned a value or raised.
"""

import inspect
import logging
from collections.abc import Awaitable, Callable
from contextlib import ExitStack
from types import TracebackType
from typing import TypeVar

from allure_commons.types import AttachmentType

from .context import ExecutionContext
from .models import content_type_value
from .ports import AttachmentStorePort, StepPort

logger = logging.getLogger(__name__)

T = TypeVar("T")


class StepHandle:
    """Caller-facing handle on an open step.

    The handle is also a context manager (sync and async): leaving the
    block ends the step, so `with reporter.start_step("x") as step:` is
    the scoped form of start_step()/end_step().
    """

    def __init__(
        self,
        context: ExecutionContext,
        step: StepPort,
        store: AttachmentStorePort,
    ):
        self.context = context
        self.step = step
        self.store = store
        self._status: str | None = None
        self._ended = False

    @property
    def name(self) -> str:
        return self.step.name

    @property
    def ended(self) -> bool:
        return self._ended

    @property
    def status(self) -> str | None:
        return self._status

    @status.setter
    def status(self, value: str) -> None:
        self._status = value
        self.step.set_status(value)

    def attach(
        self, name: str, content: bytes | str, content_type: AttachmentType | str
    ) -> None:
        """Write content to the attachment store and attach it to this step."""
        source = self.store.write(content, content_type)
        self.step.add_attachment(name, content_type_value(content_type), source)

    def end_step(self) -> None:
        """Take the step off the context and mark it ended.

        Only the first call has any effect. A handle that is no longer on
        the stack (the context was reset by end_test()) leaves the stack
        alone.
        """
        if self._ended:
            return
        self._ended = True

        innermost = self.context.current_handle
        if innermost is self:
            self.context.pop()
        elif self.context.contains(self):
            # Two step bodies interleaved on the same context.
            logger.warning(
                f"Ending step '{self.step.name}' but innermost open step was "
                f"'{innermost.name if innermost is not None else None}'"
            )
            self.context.remove(self)
        self.step.end_step()
        logger.debug(f"Ended step '{self.step.name}' (depth {self.context.depth})")

    def __enter__(self) -> "StepHandle":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.end_step()

    async def __aenter__(self) -> "StepHandle":
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.end_step()


class StepExecutor:
    """Runs callables as reported steps with start/end symmetry.

    Errors raised by the wrapped body are never caught for good: the
    step is ended and the same exception object is re-raised.
    """

    def __init__(self, context: ExecutionContext, store: AttachmentStorePort):
        self.context = context
        self.store = store

    def start(self, name: str) -> StepHandle:
        """Open a step under the current executable and push it."""
        parent = self.context.current()
        handle = StepHandle(self.context, parent.start_step(name), self.store)
        self.context.push(handle)
        logger.debug(
            f"Started step '{name}' under '{parent.name}' (depth {self.context.depth})"
        )
        return handle

    def run(self, name: str, body: Callable[[StepHandle], T]) -> T:
        """Run body as a step named name.

        If body returns an awaitable, a coroutine is returned instead of
        the awaitable itself; awaiting it yields the awaitable's result
        and ends the step once it has settled. The caller must await it,
        otherwise the step stays open.

        Raises:
            Any exception raised by body, unchanged, after the step ended.
        """
        handle = self.start(name)
        with ExitStack() as scope:
            scope.enter_context(handle)
            result = body(handle)
            if inspect.isawaitable(result):
                # Hand the end-of-step callback over to the awaiting coroutine.
                return self._settle(scope.pop_all(), result)  # type: ignore[return-value]
            return result

    @staticmethod
    async def _settle(scope: ExitStack, pending: Awaitable[T]) -> T:
        with scope:
            return await pending
