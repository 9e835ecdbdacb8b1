"""
GIN client logging utilities.

Provides configurable logging for HTTP requests/responses and session
operations. Ensures no credentials (bearer tokens, passwords, client
secrets) are logged.
"""

import logging
import re
from typing import Any

# Create client-specific loggers
_sdk_logger = logging.getLogger("ginclient")
_http_logger = logging.getLogger("ginclient.http")
_auth_logger = logging.getLogger("ginclient.auth")

# Patterns for sensitive data that should be masked
_SENSITIVE_PATTERNS = [
    # Authorization header values
    (re.compile(r"Bearer\s+[A-Za-z0-9\-._~+/=]+"), "Bearer [REDACTED]"),
    # Token ids in auth service paths
    (re.compile(r"(/oauth/(?:validate|logout)/)[^/?\s\"']+"), r"\1[REDACTED]"),
    # Token query parameters (DOI request URLs)
    (re.compile(r"([?&]token=)[^&\s]+"), r"\1[REDACTED]"),
    # Secret/token/password assignments
    (re.compile(r"(secret|token|password|jti)['\"]?\s*[:=]\s*['\"][^'\"]+['\"]", re.IGNORECASE), r"\1: [REDACTED]"),
]

_DEFAULT_SENSITIVE_KEYS = {
    "authorization",
    "jti",
    "token",
    "password",
    "secret",
}

# Number of characters of a token id kept for correlation
_TOKEN_PREVIEW_LENGTH = 6


def configure_logging(
    level: int = logging.INFO,
    http_level: int | None = None,
    auth_level: int | None = None,
    handler: logging.Handler | None = None,
    format_string: str | None = None,
) -> None:
    """
    Configure GIN client logging.

    Args:
        level: Default log level for all client loggers (default: INFO)
        http_level: Log level for HTTP request/response logging (default: same as level)
        auth_level: Log level for session operations (default: same as level)
        handler: Custom handler to use (default: StreamHandler to stderr)
        format_string: Custom format string (default: includes timestamp, level, logger name)

    Example:
        ```python
        import logging
        from ginclient.logging import configure_logging

        # Enable debug logging for HTTP requests
        configure_logging(level=logging.INFO, http_level=logging.DEBUG)
        ```
    """
    if format_string is None:
        format_string = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    formatter = logging.Formatter(format_string)

    if handler is None:
        handler = logging.StreamHandler()

    handler.setFormatter(formatter)

    _sdk_logger.setLevel(level)
    _sdk_logger.addHandler(handler)

    _http_logger.setLevel(http_level if http_level is not None else level)

    _auth_logger.setLevel(auth_level if auth_level is not None else level)


def get_logger(name: str | None = None) -> logging.Logger:
    """
    Get a GIN client logger.

    Args:
        name: Logger name suffix (e.g., "http", "auth"). If None, returns main logger.

    Returns:
        Logger instance
    """
    if name is None:
        return _sdk_logger
    return logging.getLogger(f"ginclient.{name}")


def mask_sensitive_data(text: str) -> str:
    """
    Mask sensitive data in a string.

    Replaces bearer tokens, token ids in URLs, and secret assignments
    with redacted placeholders.
    """
    result = text
    for pattern, replacement in _SENSITIVE_PATTERNS:
        result = pattern.sub(replacement, result)
    return result


def truncate_token(jti: str) -> str:
    """
    Shorten a token id for safe logging.

    Returns:
        Truncated id like "a1b2c3...", or a placeholder for short ids
    """
    if len(jti) <= _TOKEN_PREVIEW_LENGTH * 2:
        return "[TOKEN_REDACTED]"
    return f"{jti[:_TOKEN_PREVIEW_LENGTH]}..."


def safe_log_dict(data: dict[str, Any], sensitive_keys: set[str] | None = None) -> dict[str, Any]:
    """
    Create a copy of a dictionary with sensitive values masked.

    Args:
        data: Dictionary that may contain sensitive values
        sensitive_keys: Key fragments to mask (default: authorization, jti, token,
            password, secret)

    Returns:
        Dictionary with sensitive values replaced with "[REDACTED]"
    """
    if sensitive_keys is None:
        sensitive_keys = _DEFAULT_SENSITIVE_KEYS

    result: dict[str, Any] = {}
    for key, value in data.items():
        key_lower = str(key).lower()
        if any(sk in key_lower for sk in sensitive_keys):
            result[key] = "[REDACTED]"
        elif isinstance(value, dict):
            result[key] = safe_log_dict(value, sensitive_keys)
        elif isinstance(value, list):
            result[key] = [
                safe_log_dict(item, sensitive_keys) if isinstance(item, dict) else item
                for item in value
            ]
        else:
            result[key] = value

    return result


def log_http_request(
    method: str,
    url: str,
    headers: dict[str, str] | None = None,
    body: Any = None,
) -> None:
    """Log an HTTP request at DEBUG level with sensitive data masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"{method} {mask_sensitive_data(url)}"]

    if headers:
        log_parts.append(f"headers={safe_log_dict(headers)}")

    if isinstance(body, dict):
        log_parts.append(f"body={safe_log_dict(body)}")
    elif body is not None:
        log_parts.append("body=[REDACTED]")

    _http_logger.debug(" | ".join(log_parts))


def log_http_response(
    status_code: int,
    url: str,
    body: Any = None,
    elapsed_ms: float | None = None,
) -> None:
    """Log an HTTP response at DEBUG level with sensitive data masked."""
    if not _http_logger.isEnabledFor(logging.DEBUG):
        return

    log_parts = [f"Response {status_code} from {mask_sensitive_data(url)}"]

    if elapsed_ms is not None:
        log_parts.append(f"elapsed={elapsed_ms:.2f}ms")

    if isinstance(body, dict):
        log_parts.append(f"body={safe_log_dict(body)}")
    elif isinstance(body, list):
        log_parts.append(f"items={len(body)}")

    _http_logger.debug(" | ".join(log_parts))


def log_auth_operation(
    operation: str,
    login: str | None = None,
    jti: str | None = None,
) -> None:
    """
    Log a session operation (login, logout, restore, redirect) at INFO level.

    Args:
        operation: Operation name (e.g., "login", "logout", "authorize")
        login: Account login involved (optional)
        jti: Token id involved (optional, truncated)
    """
    if not _auth_logger.isEnabledFor(logging.INFO):
        return

    log_parts = [operation]

    if login:
        log_parts.append(f"login={login}")

    if jti:
        log_parts.append(f"token={truncate_token(jti)}")

    _auth_logger.info(" | ".join(log_parts))


__all__ = [
    "configure_logging",
    "get_logger",
    "mask_sensitive_data",
    "truncate_token",
    "safe_log_dict",
    "log_http_request",
    "log_http_response",
    "log_auth_operation",
]
