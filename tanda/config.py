"""
Configuration management for the Tanda payment utility.

``TandaConfig`` is the validated configuration a client runs with.
``TandaSettings`` resolves the defaults it is built from: Django settings
when Django is configured, the process environment otherwise.
"""

import os
from typing import Any, Dict, Literal, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .constants import (
    DEFAULT_MODE,
    MIN_CREDENTIAL_LENGTH,
    EnvironmentKeys,
    Mode,
    SettingsKeys,
)
from .exceptions import ConfigurationError

_TRUTHY = {"1", "true", "yes", "on"}

# Wire-style names accepted in caller configuration
_KEY_ALIASES = {
    "clientId": "client_id",
    "clientSecret": "client_secret",
}


def _as_bool(value: Any) -> bool:
    """Interpret a setting that may be a bool or a string like "false"."""
    if isinstance(value, str):
        return value.strip().lower() in _TRUTHY
    return bool(value)


def normalize_keys(data: Optional[Mapping[str, Any]]) -> Dict[str, Any]:
    """Map camelCase configuration keys to their snake_case names."""
    return {_KEY_ALIASES.get(key, key): value for key, value in (data or {}).items()}


class TandaConfig(BaseModel):
    """Validated client configuration."""

    model_config = ConfigDict(frozen=True)

    mode: Literal["uat", "live"]
    client_id: str = Field(..., min_length=MIN_CREDENTIAL_LENGTH)
    client_secret: str = Field(..., min_length=MIN_CREDENTIAL_LENGTH)
    debug: bool = False

    @classmethod
    def parse(cls, data: Mapping[str, Any]) -> "TandaConfig":
        """
        Validate a configuration mapping.

        Args:
            data: Merged configuration (snake_case or camelCase keys)

        Returns:
            Validated TandaConfig

        Raises:
            ConfigurationError: If any field is missing or invalid
        """
        try:
            return cls.model_validate(normalize_keys(data))
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
                for err in e.errors()
            )
            raise ConfigurationError(
                f"Invalid Tanda configuration: {problems}",
                response_data=e.errors(),
            ) from e


class TandaSettings:
    """
    Resolves default configuration for Tanda clients.
    Loads values from Django settings, falling back to the environment.

    Pass explicit values to bypass both sources entirely, which keeps
    clients testable without touching settings or ``os.environ``.
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        mode: Optional[str] = None,
        debug: Optional[bool] = None,
        base_urls: Optional[Mapping[str, str]] = None,
    ):
        self._client_id = client_id
        self._client_secret = client_secret
        self._mode = mode
        self._debug = debug
        self._base_urls = dict(base_urls) if base_urls is not None else None

    @staticmethod
    def _django_settings():
        """Return Django settings if they are configured, else None."""
        try:
            from django.conf import settings
        except ImportError:
            return None
        return settings if settings.configured else None

    def _lookup(self, setting_name: str, env_name: str, default: Any = "") -> Any:
        settings = self._django_settings()
        if settings is not None and hasattr(settings, setting_name):
            return getattr(settings, setting_name)
        return os.environ.get(env_name, default)

    @property
    def client_id(self) -> str:
        """Get Tanda client ID."""
        if self._client_id is not None:
            return self._client_id
        return str(self._lookup(SettingsKeys.CLIENT_ID, EnvironmentKeys.CLIENT_ID))

    @property
    def client_secret(self) -> str:
        """Get Tanda client secret."""
        if self._client_secret is not None:
            return self._client_secret
        return str(self._lookup(SettingsKeys.CLIENT_SECRET, EnvironmentKeys.CLIENT_SECRET))

    @property
    def mode(self) -> str:
        """Get deployment mode."""
        if self._mode is not None:
            return self._mode
        return str(self._lookup(SettingsKeys.MODE, EnvironmentKeys.MODE, DEFAULT_MODE.value))

    @property
    def debug(self) -> bool:
        """Check if debug logging of payloads is enabled."""
        if self._debug is not None:
            return self._debug

        settings = self._django_settings()
        if settings is not None:
            return _as_bool(getattr(settings, SettingsKeys.DEBUG, getattr(settings, "DEBUG", False)))
        return _as_bool(os.environ.get(EnvironmentKeys.DEBUG, ""))

    @property
    def base_urls(self) -> Dict[str, str]:
        """Get base URLs keyed by mode."""
        if self._base_urls is not None:
            return self._base_urls
        return {
            Mode.UAT.value: str(self._lookup(SettingsKeys.UAT_URL, EnvironmentKeys.UAT_URL)),
            Mode.LIVE.value: str(self._lookup(SettingsKeys.LIVE_URL, EnvironmentKeys.LIVE_URL)),
        }

    def defaults(self) -> Dict[str, Any]:
        """
        Get default client configuration.

        Returns:
            Dictionary with mode, client_id, client_secret and debug
        """
        return {
            "mode": self.mode,
            "client_id": self.client_id,
            "client_secret": self.client_secret,
            "debug": self.debug,
        }

    def get_base_url(self, mode: str) -> str:
        """
        Get base URL for a deployment mode.

        Args:
            mode: "uat" or "live"

        Returns:
            Base URL for the mode

        Raises:
            ConfigurationError: If no base URL is configured for the mode
        """
        base_url = self.base_urls.get(mode, "")
        if not base_url:
            raise ConfigurationError(
                f"No Tanda base URL is configured for mode '{mode}'. "
                f"Set {SettingsKeys.UAT_URL}/{SettingsKeys.LIVE_URL} in Django settings "
                f"or {EnvironmentKeys.UAT_URL}/{EnvironmentKeys.LIVE_URL} in the environment."
            )
        return base_url
