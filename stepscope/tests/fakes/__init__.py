"""Fake implementations of core ports for testing.

These in-memory implementations allow core logic to be tested without
the reference adapters:

- FakeExecutable / FakeStep / FakeTest: report model entities that
  append every call to a shared EventLog
- FakeAttachmentStore: captured writes with sequential references
"""

from .report_model import EventLog, FakeExecutable, FakeStep, FakeTest
from .store import FakeAttachmentStore

__all__ = [
    "EventLog",
    "FakeAttachmentStore",
    "FakeExecutable",
    "FakeStep",
    "FakeTest",
]
