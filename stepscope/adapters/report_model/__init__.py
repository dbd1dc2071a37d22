"""Report model adapters."""

from .allure_model import AllureHook, AllureStep, AllureTest

__all__ = ["AllureHook", "AllureStep", "AllureTest"]
