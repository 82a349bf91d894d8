"""Shared fixtures: a Qt application instance and an inline thread pool."""

import os
from unittest.mock import MagicMock

import pytest
from PySide6.QtWidgets import QApplication

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """QTimer and widgets need an application object."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def inline_thread_pool():
    """Thread pool double whose start() runs the worker synchronously."""
    pool = MagicMock()
    pool.start = MagicMock(side_effect=lambda worker: worker.run())
    return pool


@pytest.fixture
def make_response():
    """Factory for requests.Response stand-ins."""

    def _make(status_code=200, payload=None, json_error=None):
        response = MagicMock()
        response.status_code = status_code
        if json_error is not None:
            response.json = MagicMock(side_effect=json_error)
        else:
            response.json = MagicMock(return_value=payload)
        return response

    return _make


@pytest.fixture
def session():
    """Mocked requests.Session; tests set session.request.return_value."""
    return MagicMock()
