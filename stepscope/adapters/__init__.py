"""External adapters for the stepscope reporting adapter.

This package provides reference implementations of the core port
interfaces on top of allure-python-commons.

Adapter Organization:

- report_model/: Allure tests, steps and hook executables (model2)
- store/: Attachment persistence (AllureFileLogger)
"""
