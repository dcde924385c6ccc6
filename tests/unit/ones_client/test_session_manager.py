"""Unit tests for ones_client.session module."""

import threading
import time
from unittest.mock import Mock

import pytest
import requests

from src.ones_client.auth import Credentials
from src.ones_client.session import Session, SessionManager


def login_response(token="tok-1", uuid="user-1"):
    response = Mock()
    response.raise_for_status.return_value = None
    response.json.return_value = {"user": {"token": token, "uuid": uuid}}
    return response


@pytest.fixture
def credentials():
    return Credentials(host="ones.example.com", email="dev@example.com", password="s3cret")


@pytest.fixture
def http():
    http = Mock(spec=requests.Session)
    http.post.return_value = login_response()
    return http


class TestSessionManagerLogin:
    """Test cases for the login call."""

    def test_no_login_at_construction(self, http, credentials):
        SessionManager(http, credentials)

        http.post.assert_not_called()

    def test_login_request(self, http, credentials):
        """Login posts email and password as JSON to the project auth endpoint."""
        manager = SessionManager(http, credentials, timeout=12.0)

        assert manager.login() is True

        http.post.assert_called_once_with(
            "https://ones.example.com/project/api/project/auth/login",
            json={"email": "dev@example.com", "password": "s3cret"},
            timeout=12.0,
        )
        assert manager.session == Session(token="tok-1", user_id="user-1")

    def test_login_http_error(self, http, credentials):
        response = Mock()
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("401 Client Error")
        http.post.return_value = response

        manager = SessionManager(http, credentials)

        assert manager.login() is False
        assert manager.session is None

    def test_login_connection_error(self, http, credentials):
        http.post.side_effect = requests.exceptions.ConnectionError("refused")

        assert SessionManager(http, credentials).login() is False

    def test_login_non_json_body(self, http, credentials):
        response = Mock()
        response.raise_for_status.return_value = None
        response.json.side_effect = ValueError("Expecting value")
        http.post.return_value = response

        assert SessionManager(http, credentials).login() is False

    def test_login_requests_json_decode_error(self, http, credentials):
        response = Mock()
        response.raise_for_status.return_value = None
        response.json.side_effect = requests.exceptions.JSONDecodeError("Expecting value", "<html>", 0)
        http.post.return_value = response
        manager = SessionManager(http, credentials)

        assert manager.login() is False
        assert manager.session is None

    @pytest.mark.parametrize("body", [
        {},
        {"user": None},
        {"user": {"uuid": "user-1"}},
        {"user": {"token": "tok-1"}},
        {"user": {"token": "", "uuid": "user-1"}},
        ["not", "an", "object"],
    ])
    def test_login_incomplete_body(self, http, credentials, body):
        """A body without both token and uuid is a failed login."""
        http.post.return_value.json.return_value = body

        assert SessionManager(http, credentials).login() is False

    def test_failed_login_does_not_log_password(self, http, credentials, caplog):
        http.post.side_effect = requests.exceptions.ConnectionError(
            "failed for password=s3cret"
        )

        SessionManager(http, credentials).login()

        assert "s3cret" not in caplog.text


class TestEnsureSession:
    """Test cases for lazy, cached session access."""

    def test_first_call_logs_in(self, http, credentials):
        manager = SessionManager(http, credentials)

        session = manager.ensure_session()

        assert session == Session(token="tok-1", user_id="user-1")
        assert http.post.call_count == 1

    def test_session_is_reused(self, http, credentials):
        """Two calls share a single login."""
        manager = SessionManager(http, credentials)

        first = manager.ensure_session()
        second = manager.ensure_session()

        assert first is second
        assert http.post.call_count == 1

    def test_failed_login_returns_none_and_retries_later(self, http, credentials):
        http.post.side_effect = [
            requests.exceptions.ConnectionError("down"),
            login_response(token="tok-2"),
        ]
        manager = SessionManager(http, credentials)

        assert manager.ensure_session() is None
        assert manager.ensure_session() == Session(token="tok-2", user_id="user-1")
        assert http.post.call_count == 2

    def test_invalidate_forces_new_login(self, http, credentials):
        manager = SessionManager(http, credentials)
        manager.ensure_session()

        manager.invalidate()

        assert manager.session is None
        manager.ensure_session()
        assert http.post.call_count == 2

    def test_concurrent_first_use_logs_in_once(self, http, credentials):
        """Threads racing on first use trigger exactly one login."""
        def slow_login(*args, **kwargs):
            time.sleep(0.05)
            return login_response()

        http.post.side_effect = slow_login
        manager = SessionManager(http, credentials)
        results = []

        threads = [
            threading.Thread(target=lambda: results.append(manager.ensure_session()))
            for _ in range(8)
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert http.post.call_count == 1
        assert len(results) == 8
        assert all(result == Session(token="tok-1", user_id="user-1") for result in results)
