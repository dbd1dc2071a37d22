"""Composition root for the stepscope reporting adapter.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. A test-runner integration calls
build_reporter() once per execution unit and then drives
start_test()/end_test() on the facade it gets back.
"""

import logging
import sys

from stepscope.adapters.report_model.allure_model import AllureHook
from stepscope.adapters.store.allure_file import AllureFileAttachmentStore
from stepscope.config import Settings, load_settings
from stepscope.core.ports import ExecutablePort
from stepscope.core.reporting import ReportingFacade


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure adapter logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_reporter(
    settings: Settings | None = None,
    root: ExecutablePort | None = None,
) -> ReportingFacade:
    """Wire a ReportingFacade for one test-execution unit.

    Args:
        settings: Loaded settings; read from the environment when omitted.
        root: Fallback executable for suite-level hooks. Defaults to an
            Allure hook executable named "root".

    Returns:
        A facade with a fresh execution context and label buffer.

    Raises:
        ValidationError: If settings are loaded here and fail validation.
        OSError: If the results directory cannot be created.
    """
    if settings is None:
        settings = load_settings()

    logger = logging.getLogger(__name__)
    logger.info(f"Writing attachments to {settings.results_dir}")

    store = AllureFileAttachmentStore(settings.results_dir)
    return ReportingFacade(
        store=store,
        root=root if root is not None else AllureHook("root"),
        issue_tracker_url=settings.issue_tracker_url,
        tms_url=settings.tms_url,
    )


__all__ = ["build_reporter", "configure_logging"]
