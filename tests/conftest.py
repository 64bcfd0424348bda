"""Shared pytest configuration for Qt tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qt_app():
    """Provide a single QApplication for the whole test session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    return app
