"""Shared fixtures for requests-curl tests."""

import io
import logging
from unittest.mock import Mock

import pytest
import requests

from requests_curl.config import reset_configuration


@pytest.fixture(autouse=True)
def reset_curl_configuration():
    """Reset the process-wide configuration before and after each test."""
    reset_configuration()
    yield
    reset_configuration()


@pytest.fixture
def log_stream():
    """In-memory stream receiving the output of captured_logger."""
    return io.StringIO()


@pytest.fixture
def captured_logger(log_stream, request):
    """A stdlib logger writing bare messages to log_stream."""
    logger = logging.getLogger(f"tests.curl.{request.node.name}")
    logger.setLevel(logging.INFO)
    logger.propagate = False

    handler = logging.StreamHandler(log_stream)
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)

    yield logger

    logger.removeHandler(handler)


@pytest.fixture
def mock_transport():
    """Replace requests.Session.request so no request leaves the process."""
    response = Mock(spec=requests.Response)
    response.status_code = 200

    with pytest.MonkeyPatch.context() as monkeypatch:
        transport = Mock(return_value=response)
        monkeypatch.setattr(requests.Session, "request", transport)
        yield transport
