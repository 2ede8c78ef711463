"""
Integration tests for requests-curl.

These tests drive CurlLoggingSession end-to-end through the public requests
API (get, post, put, patch, delete). The transport is replaced by a mock, so
no request leaves the process, and the logged cURL commands are captured
from a stdlib logger.

To run these tests:
    pytest tests/integration/ -v
"""
