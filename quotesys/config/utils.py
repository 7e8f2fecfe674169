"""Helper utilities for configuration handling."""

from __future__ import annotations

import os

_ENV_PREFIX = "env:"

# Values shipped in sample .env files; treated the same as a missing credential.
PLACEHOLDER_CREDENTIALS = frozenset(
    {
        "your_unsplash_access_key_here",
        "your_pexels_api_key_here",
    }
)


def resolve_env_reference(value: str | None, *, required: bool = True) -> str | None:
    """Resolve values that reference environment variables.

    Accepts strings in the form ``"env:VAR_NAME"`` and returns the value from
    ``os.environ``. When ``required`` is ``True`` (default) and the variable is
    missing or empty, an :class:`EnvironmentError` is raised. Plain strings are
    returned unchanged, and ``None`` values are passed through.
    """

    if value is None:
        return None
    if not value.startswith(_ENV_PREFIX):
        return value

    var_name = value.split(":", 1)[1]
    resolved = os.getenv(var_name)
    if resolved:
        return resolved
    if required:
        raise EnvironmentError(f"Environment variable '{var_name}' is not set or empty")
    return None


def is_usable_credential(value: str | None) -> bool:
    """Return ``True`` when ``value`` is a real credential rather than blank or a placeholder."""

    if value is None:
        return False
    stripped = value.strip()
    return bool(stripped) and stripped not in PLACEHOLDER_CREDENTIALS


__all__ = ["PLACEHOLDER_CREDENTIALS", "is_usable_credential", "resolve_env_reference"]
