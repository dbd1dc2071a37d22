"""Integration tests for the composition root.

These tests verify that configuration loads and validates, and that
build_reporter() wires the reference adapters into a working facade.
"""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest
from allure_commons.types import AttachmentType, LinkType

from stepscope.adapters.report_model.allure_model import AllureHook, AllureTest
from stepscope.adapters.store.allure_file import AllureFileAttachmentStore
from stepscope.config import Settings, load_settings
from stepscope.main import build_reporter, configure_logging


class TestConfigurationLoading:
    """Test configuration loading and validation."""

    def test_load_settings_with_defaults(self) -> None:
        settings = load_settings()
        assert settings.results_dir == "./allure-results"
        assert settings.issue_tracker_url == ""
        assert settings.tms_url == ""
        assert settings.log_level == "INFO"
        assert settings.log_format == "text"

    def test_load_settings_from_env(self) -> None:
        with patch.dict(
            os.environ,
            {
                "ISSUE_TRACKER_URL": "https://jira.example.com/browse/",
                "TMS_URL": "https://tms.example.com/",
                "RESULTS_DIR": "/tmp/results",
                "LOG_LEVEL": "DEBUG",
            },
        ):
            settings = load_settings()
            assert settings.issue_tracker_url == "https://jira.example.com/browse/"
            assert settings.tms_url == "https://tms.example.com/"
            assert settings.results_dir == "/tmp/results"
            assert settings.log_level == "DEBUG"

    def test_load_settings_from_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / "custom.env"
        env_file.write_text("TMS_URL=https://tms.internal/\n")
        settings = load_settings(str(env_file))
        assert settings.tms_url == "https://tms.internal/"

    def test_load_settings_validates_results_dir(self) -> None:
        with patch.dict(os.environ, {"RESULTS_DIR": "  "}):
            with pytest.raises(Exception):  # ValidationError
                load_settings()

    def test_load_settings_validates_log_level(self) -> None:
        with patch.dict(os.environ, {"LOG_LEVEL": "CHATTY"}):
            with pytest.raises(Exception):  # ValidationError
                load_settings()


class TestBuildReporter:
    """Test wiring of the reference adapters."""

    def test_build_reporter_wires_store_and_urls(self, tmp_path: Path) -> None:
        settings = Settings(
            results_dir=str(tmp_path / "results"),
            issue_tracker_url="https://jira.example.com/browse/",
        )

        reporter = build_reporter(settings)

        assert isinstance(reporter.store, AllureFileAttachmentStore)
        assert isinstance(reporter.current_executable, AllureHook)
        assert reporter.issue_tracker_url == "https://jira.example.com/browse/"
        assert (tmp_path / "results").is_dir()

    def test_build_reporter_uses_given_root(self, tmp_path: Path) -> None:
        root = AllureHook("suite hooks")
        reporter = build_reporter(Settings(results_dir=str(tmp_path)), root=root)
        assert reporter.current_executable is root

    def test_end_to_end_attachment_and_links(self, tmp_path: Path) -> None:
        reporter = build_reporter(
            Settings(results_dir=str(tmp_path), tms_url="https://tms.example.com/")
        )
        test = AllureTest("checkout")
        reporter.start_test(test)

        reporter.tms("C7")
        reporter.step("pay", lambda step: step.attach("receipt", "ok", AttachmentType.TEXT))
        reporter.end_test()

        link = test.item.links[0]
        assert (link.url, link.name, link.type) == (
            "https://tms.example.com/C7",
            "C7",
            LinkType.TEST_CASE,
        )
        attachment = test.item.steps[0].attachments[0]
        assert attachment.type == "text/plain"
        assert attachment.source.endswith("-attachment.txt")
        assert (tmp_path / attachment.source).read_text() == "ok"

    def test_each_build_gets_fresh_context(self, tmp_path: Path) -> None:
        settings = Settings(results_dir=str(tmp_path))
        first = build_reporter(settings)
        first.owner("alice")

        second = build_reporter(settings)

        assert len(first.label_buffer) == 1
        assert len(second.label_buffer) == 0


def test_configure_logging_sets_level() -> None:
    root_logger = logging.getLogger()
    saved_handlers, saved_level = root_logger.handlers[:], root_logger.level
    root_logger.handlers = []
    try:
        configure_logging("DEBUG", "json")
        assert root_logger.level == logging.DEBUG
        assert '"level"' in root_logger.handlers[0].formatter._fmt
    finally:
        root_logger.handlers = saved_handlers
        root_logger.setLevel(saved_level)
