"""
Tests for the logging middleware.
Covers PII masking in request data, header redaction and the JSON formatter.
"""

import json
import logging
import sys
from unittest.mock import Mock, patch

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient

from core.middleware.logging import (
    StructuredFormatter,
    StructuredLoggingMiddleware,
    get_client_ip,
    is_sensitive_field,
    mask_headers,
    mask_pii,
    mask_sensitive_data,
    setup_logging,
    should_log_request,
)


class TestSensitiveFieldDetection:
    """Test sensitive field name detection."""

    @pytest.mark.parametrize("field_name,expected", [
        ("password", True),
        ("Password", True),
        ("newPassword", True),
        ("passwd", True),
        ("pwd", True),
        ("token", True),
        ("session_token", True),
        ("api_key", True),
        ("apiKey", True),
        ("client_secret", True),
        ("Authorization", True),
        ("cookie", True),
        ("x-csrf-token", True),
        ("ssn", True),
        ("social_security", True),

        ("email", False),
        ("firstName", False),
        ("id", False),
        ("user_id", False),
        ("status", False),
        ("skills", False),
    ])
    def test_sensitive_field_patterns(self, field_name, expected):
        assert is_sensitive_field(field_name) == expected


class TestPIIMasking:
    """Free-text values are scrubbed of contact details."""

    @pytest.mark.parametrize("text", [
        "Contact john@example.com for help",
        "Email: user.name+tag@domain.co.uk",
    ])
    def test_email_masking(self, text):
        assert "[EMAIL]" in mask_pii(text)

    @pytest.mark.parametrize("text", [
        "Call 555-123-4567",
        "Phone: 555.123.4567",
        "Contact: 5551234567",
        "+44 20 7123 4567",
    ])
    def test_phone_number_masking(self, text):
        assert "[PHONE]" in mask_pii(text)

    def test_ssn_masking(self):
        masked = mask_pii("SSN: 123-45-6789")
        assert "[SSN]" in masked
        assert "123-45-6789" not in masked

    def test_plain_text_untouched(self):
        assert mask_pii("Senior Backend Engineer") == "Senior Backend Engineer"


class TestDataStructureMasking:
    def test_dict_masking(self):
        data = {
            "email": "ada@example.com",
            "password": "Sup3rSecret!",
            "firstName": "Ada",
        }

        masked = mask_sensitive_data(data)

        assert masked["password"] == "[REDACTED]"
        assert masked["email"] == "[EMAIL]"
        assert masked["firstName"] == "Ada"

    def test_input_not_modified(self):
        data = {"password": "Sup3rSecret!"}
        mask_sensitive_data(data)
        assert data["password"] == "Sup3rSecret!"

    def test_nested_structures(self):
        data = {
            "candidate": {
                "phone": "555-123-4567",
                "education": [{"institution": "MIT", "contact": "dean@mit.edu"}],
            },
            "auth": {"token": "abc"},
        }

        masked = mask_sensitive_data(data)

        assert masked["candidate"]["phone"] == "[PHONE]"
        assert masked["candidate"]["education"][0]["institution"] == "MIT"
        assert masked["candidate"]["education"][0]["contact"] == "[EMAIL]"
        assert masked["auth"]["token"] == "[REDACTED]"

    def test_sensitive_key_redacted_even_when_none(self):
        assert mask_sensitive_data({"password": None}) == {"password": "[REDACTED]"}

    def test_max_depth_protection(self):
        data = current = {}
        for _ in range(20):
            current["child"] = {}
            current = current["child"]

        masked = mask_sensitive_data(data, max_depth=5)
        assert "[MAX_DEPTH_EXCEEDED]" in json.dumps(masked)

    def test_scalars_pass_through(self):
        assert mask_sensitive_data(None) is None
        assert mask_sensitive_data(42) == 42
        assert mask_sensitive_data({}) == {}


class TestHeaderMasking:
    def test_sensitive_headers_redacted(self):
        headers = {
            "cookie": "hr_session=abc",
            "authorization": "Bearer abc",
            "x-csrf-token": "xyz",
            "content-type": "application/json",
            "user-agent": "TestClient",
        }

        masked = mask_headers(headers)

        assert masked["cookie"] == "[REDACTED]"
        assert masked["authorization"] == "[REDACTED]"
        assert masked["x-csrf-token"] == "[REDACTED]"
        assert masked["content-type"] == "application/json"
        assert masked["user-agent"] == "TestClient"


class TestClientIPExtraction:
    """Test client IP extraction with privacy."""

    def test_direct_client_ip(self):
        request = Mock()
        request.client = Mock(host="192.168.1.100")
        request.headers = {}

        assert get_client_ip(request) == "192.168.1.xxx"

    def test_forwarded_for_header(self):
        request = Mock()
        request.client = Mock(host="10.0.0.1")
        request.headers = {"x-forwarded-for": "203.0.113.195, 70.41.3.18"}

        assert get_client_ip(request) == "203.0.113.xxx"

    def test_no_client_info(self):
        request = Mock()
        request.client = None
        request.headers = {}

        assert get_client_ip(request) == "unknown"


class TestShouldLogRequest:
    @pytest.mark.parametrize("path,expected", [
        ("/health", False),
        ("/ready", False),
        ("/api/jobs", True),
        ("/api/auth/login", True),
    ])
    def test_probe_paths_skipped(self, path, expected):
        assert should_log_request(path) is expected


class ExpiredUser:
    """Stands in for an ORM user whose session was rolled back and closed."""

    @property
    def id(self):
        raise RuntimeError("Instance is not bound to a Session")


class TestStructuredLoggingMiddleware:
    """Test structured logging middleware."""

    @pytest.fixture
    def client(self):
        app = FastAPI()
        app.add_middleware(StructuredLoggingMiddleware, log_request_body=True)

        @app.post("/echo")
        async def echo(payload: dict):
            return {"ok": True}

        @app.get("/me")
        async def me(request: Request):
            request.state.user = ExpiredUser()
            request.state.user_id = 42
            return {"ok": True}

        @app.get("/health")
        async def health():
            return {"status": "healthy"}

        return TestClient(app)

    def test_request_id_header_added(self, client):
        response = client.post("/echo", json={"a": 1})
        assert response.headers["x-request-id"]

    def test_request_id_propagated(self, client):
        response = client.post("/echo", json={}, headers={"x-request-id": "req-123"})
        assert response.headers["x-request-id"] == "req-123"

    def test_body_logged_masked(self, client):
        with patch("core.middleware.logging.logger") as mock_logger:
            client.post("/echo", json={"email": "ada@example.com", "password": "Sup3rSecret!"})

        logged = " ".join(str(call.args[0]) for call in mock_logger.info.call_args_list)
        assert "request_started" in logged
        assert "request_completed" in logged
        assert "Sup3rSecret!" not in logged
        assert "ada@example.com" not in logged

    def test_user_id_read_from_request_state(self, client):
        with patch("core.middleware.logging.logger") as mock_logger:
            response = client.get("/me")

        assert response.status_code == 200
        completed = json.loads(mock_logger.info.call_args_list[-1].args[0])
        assert completed["event"] == "request_completed"
        assert completed["user_id"] == 42

    def test_health_not_logged(self, client):
        with patch("core.middleware.logging.logger") as mock_logger:
            response = client.get("/health")

        assert response.status_code == 200
        assert response.headers["x-request-id"]
        mock_logger.info.assert_not_called()


class TestStructuredFormatter:
    def _record(self, **extra):
        record = logging.LogRecord(
            name="hr", level=logging.INFO, pathname=__file__, lineno=1,
            msg="hello %s", args=("world",), exc_info=None,
        )
        for key, value in extra.items():
            setattr(record, key, value)
        return record

    def test_formats_json(self):
        data = json.loads(StructuredFormatter().format(self._record()))
        assert data["message"] == "hello world"
        assert data["level"] == "INFO"
        assert data["logger"] == "hr"

    def test_includes_known_extras_only(self):
        data = json.loads(
            StructuredFormatter().format(self._record(user_id=7, unrelated="x"))
        )
        assert data["user_id"] == 7
        assert "unrelated" not in data

    def test_exception_details(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            record = self._record()
            record.exc_info = sys.exc_info()

        data = json.loads(StructuredFormatter().format(record))
        assert data["exception"]["type"] == "RuntimeError"


class TestLoggingSetup:
    def test_setup_logging_json_format(self):
        setup_logging(log_level="INFO", json_logs=True)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0].formatter, StructuredFormatter)

    def test_setup_logging_text_format(self):
        setup_logging(log_level="INFO", json_logs=False)
        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert not isinstance(handlers[0].formatter, StructuredFormatter)
