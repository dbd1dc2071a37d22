"""Core domain logic for the stepscope reporting adapter.

The execution context, label buffer, step executor and reporting
facade only talk to the report model and attachment store through the
ports in ports.py. The sole external import is the allure-python-commons
vocabulary (statuses, label/link/attachment types).
"""

from .context import ExecutionContext, LabelBuffer
from .errors import NoActiveExecutableError, NoActiveTestError, ReportingError
from .models import Attachment, Label, Link
from .reporting import ReportingFacade
from .step_executor import StepExecutor, StepHandle

__all__ = [
    "Attachment",
    "ExecutionContext",
    "Label",
    "LabelBuffer",
    "Link",
    "NoActiveExecutableError",
    "NoActiveTestError",
    "ReportingError",
    "ReportingFacade",
    "StepExecutor",
    "StepHandle",
]
