"""Redaction of sensitive request parameters in debug output."""

from typing import Any

REDACT_KEYS: frozenset[str] = frozenset({
    "password",
    "authtoken",
    "auth_token",
    "token",
    "secret",
    "apikeysecret",
    "api_key_secret",
    "authorization",
    "credentials",
})

REDACTED_VALUE = "[REDACTED]"


def redact_params(params: dict[str, Any]) -> dict[str, Any]:
    """Recursively redact sensitive keys from request parameters.

    Keys are compared case-insensitively, so Twilio's PascalCase names
    ("Password", "AuthToken") match. The input is never mutated.

    Args:
        params: Query or form parameters about to be logged.

    Returns:
        A new dictionary with sensitive values replaced by "[REDACTED]".
    """
    return _redact_recursive(params)


def _redact_recursive(obj: Any) -> Any:
    """Recursively redact sensitive keys."""
    if isinstance(obj, dict):
        result = {}
        for key, value in obj.items():
            key_lower = key.lower() if isinstance(key, str) else key
            if key_lower in REDACT_KEYS:
                result[key] = REDACTED_VALUE
            else:
                result[key] = _redact_recursive(value)
        return result
    elif isinstance(obj, list):
        return [_redact_recursive(item) for item in obj]
    else:
        return obj
