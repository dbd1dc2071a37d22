"""stepscope: hierarchical test/step reporting for test runners.

Tracks the running test and its nested steps, wraps sync and async work
as reported steps, and buffers labels recorded before a test starts.
"""

from allure_commons.model2 import Status
from allure_commons.types import AttachmentType, LabelType, LinkType, Severity

from stepscope.core import (
    Attachment,
    NoActiveExecutableError,
    NoActiveTestError,
    ReportingError,
    ReportingFacade,
    StepHandle,
)

__all__ = [
    "Attachment",
    "AttachmentType",
    "LabelType",
    "LinkType",
    "NoActiveExecutableError",
    "NoActiveTestError",
    "ReportingError",
    "ReportingFacade",
    "Severity",
    "Status",
    "StepHandle",
]
