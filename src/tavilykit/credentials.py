"""API key resolution shared by the Tavily clients."""

from __future__ import annotations

from pydantic import SecretStr

from tavilykit.config import Settings, load_settings
from tavilykit.errors import MissingAPIKeyError


def _non_empty(value: str | SecretStr | None) -> SecretStr | None:
    if value is None:
        return None
    secret = value if isinstance(value, SecretStr) else SecretStr(value)
    if not secret.get_secret_value():
        return None
    return secret


def resolve_api_key(
    api_key: str | SecretStr | None = None,
    *,
    settings: Settings | None = None,
) -> SecretStr:
    """Resolve the API key once, at client construction.

    Sources are tried in order: the explicit ``api_key`` argument, then ``TAVILY_API_KEY``
    as loaded into :class:`Settings`. Empty values count as missing.

    Args:
        api_key: Key passed by the caller.
        settings: Settings to read the fallback from; loaded from the environment if omitted.

    Returns:
        The key wrapped in a ``SecretStr`` so it stays out of reprs and logs.

    Raises:
        MissingAPIKeyError: If no source yields a key.
    """

    explicit = _non_empty(api_key)
    if explicit is not None:
        return explicit

    settings = settings or load_settings()
    from_env = _non_empty(settings.api_key)
    if from_env is not None:
        return from_env

    raise MissingAPIKeyError()
