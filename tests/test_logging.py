"""
Tests for credential masking in client logs.
"""

import logging

from hypothesis import given, settings
from hypothesis import strategies as st

from ginclient.logging import (
    configure_logging,
    get_logger,
    log_auth_operation,
    log_http_request,
    mask_sensitive_data,
    safe_log_dict,
    truncate_token,
)

token_strategy = st.text(
    alphabet="abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789-_",
    min_size=16,
    max_size=64,
)


@given(token=token_strategy)
@settings(max_examples=100)
def test_bearer_values_never_survive_masking(token: str) -> None:
    masked = mask_sensitive_data(f"Authorization: Bearer {token}")

    assert token not in masked
    assert "Bearer [REDACTED]" in masked


@given(token=token_strategy)
@settings(max_examples=50)
def test_token_ids_in_urls_are_masked(token: str) -> None:
    for url in (
        f"https://auth.gin.test/oauth/validate/{token}",
        f"https://auth.gin.test/oauth/logout/{token}?redirect_uri=x",
        f"https://doi.gin.test/register?repo=m%3Aa%2Fb&user=alice&token=Bearer%20{token}",
    ):
        assert token not in mask_sensitive_data(url)


def test_secret_assignments_are_masked() -> None:
    masked = mask_sensitive_data('{"password": "hunter2", "client_secret": "s3cr3t"}')

    assert "hunter2" not in masked
    assert "s3cr3t" not in masked


def test_safe_log_dict() -> None:
    data = {
        "Authorization": "Bearer abc",
        "password_old": "old",
        "email": {"email": "a@example.org", "password": "pw"},
        "items": [{"jti": "x"}, "plain"],
    }

    safe = safe_log_dict(data)

    assert safe["Authorization"] == "[REDACTED]"
    assert safe["password_old"] == "[REDACTED]"
    assert safe["email"] == {"email": "a@example.org", "password": "[REDACTED]"}
    assert safe["items"] == [{"jti": "[REDACTED]"}, "plain"]
    assert data["Authorization"] == "Bearer abc"


def test_truncate_token() -> None:
    assert truncate_token("0123456789abcdef") == "012345..."
    assert truncate_token("short") == "[TOKEN_REDACTED]"


def test_get_logger_names() -> None:
    assert get_logger().name == "ginclient"
    assert get_logger("http").name == "ginclient.http"


def test_http_request_log_is_masked(caplog) -> None:
    with caplog.at_level(logging.DEBUG, logger="ginclient.http"):
        log_http_request(
            "PUT",
            "https://auth.gin.test/api/accounts/alice/password",
            headers={"Authorization": "Bearer secret-jti-value"},
            body={"password_old": "old-pw", "password_new": "new-pw"},
        )

    assert "PUT https://auth.gin.test/api/accounts/alice/password" in caplog.text
    assert "secret-jti-value" not in caplog.text
    assert "old-pw" not in caplog.text
    assert "new-pw" not in caplog.text


def test_auth_operation_log_truncates_token(caplog) -> None:
    with caplog.at_level(logging.INFO, logger="ginclient.auth"):
        log_auth_operation("login", "alice", "0123456789abcdef0123")

    assert "login | login=alice | token=012345..." in caplog.text
    assert "0123456789abcdef0123" not in caplog.text


def test_login_logs_without_credentials(gin_client, mock_server, caplog) -> None:
    from ginclient.testing import AUTH_URL, create_mock_account_data, create_mock_token_data

    jti = "f" * 32
    mock_server.configure(
        "GET", f"{AUTH_URL}/oauth/validate/{jti}", data=create_mock_token_data(jti=jti)
    )
    mock_server.configure("GET", f"{AUTH_URL}/api/accounts/alice", data=create_mock_account_data())

    with caplog.at_level(logging.DEBUG, logger="ginclient"):
        gin_client.auth.login(jti)

    assert "login=alice" in caplog.text
    assert jti not in caplog.text


def test_configure_logging_sets_levels() -> None:
    handler = logging.NullHandler()
    sdk_logger = logging.getLogger("ginclient")
    try:
        configure_logging(level=logging.WARNING, http_level=logging.DEBUG, handler=handler)

        assert sdk_logger.level == logging.WARNING
        assert logging.getLogger("ginclient.http").level == logging.DEBUG
        assert logging.getLogger("ginclient.auth").level == logging.WARNING
        assert handler in sdk_logger.handlers
    finally:
        sdk_logger.removeHandler(handler)
        for name in ("ginclient", "ginclient.http", "ginclient.auth"):
            logging.getLogger(name).setLevel(logging.NOTSET)
