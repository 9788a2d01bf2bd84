"""Settings loader with environment variable and Docker secrets integration."""
from __future__ import annotations
import logging
import os
from dataclasses import dataclass
from pathlib import Path

from baton_pingfederate.core.pingfederate.client import REQUEST_TIMEOUT
from baton_pingfederate.core.pingfederate.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _load_secret_from_file(secret_name: str, env_var: str | None = None) -> str | None:
    """
    Load secret from /run/secrets (Docker secrets pattern).

    Priority:
    1. /run/secrets/{secret_name} (Docker secrets mount)
    2. Environment variable (fallback)

    Args:
        secret_name: Name of the secret file in /run/secrets
        env_var: Optional environment variable name to check as fallback

    Returns:
        Secret value or None if not found
    """
    secret_file = Path("/run/secrets") / secret_name

    if secret_file.exists() and secret_file.is_file():
        try:
            secret_value = secret_file.read_text().strip()
            if secret_value:
                logger.debug("Loaded %s from /run/secrets", secret_name)
                return secret_value
        except OSError as e:
            logger.warning("Failed to read /run/secrets/%s: %s", secret_name, e)

    if env_var:
        secret_value = os.getenv(env_var)
        if secret_value:
            logger.debug("Loaded %s from environment (fallback)", env_var)
            return secret_value

    return None


@dataclass
class ConnectorConfig:
    """Connector configuration container."""
    # PingFederate
    instance_url: str
    username: str
    password: str
    request_timeout: float = REQUEST_TIMEOUT

    # Ambient
    log_level: str = "INFO"
    audit_enabled: bool = True

    def validate(self) -> None:
        """Check required fields are present (presence only, no network call).

        Raises:
            ConfigurationError: Naming the first missing field
        """
        for name in ("instance_url", "username", "password"):
            if not (getattr(self, name) or "").strip():
                raise ConfigurationError(f"{name.replace('_', '-')} is required")


def _require(var_name: str, value: str | None) -> str:
    if value:
        return value
    raise ConfigurationError(f"Environment variable {var_name} is required.")


def parse_timeout(value: str | float | None) -> float:
    """Request timeout in seconds; empty means the client default.

    Raises:
        ConfigurationError: If the value is not a positive number
    """
    if value is None or value == "":
        return float(REQUEST_TIMEOUT)
    try:
        timeout = float(value)
    except ValueError:
        raise ConfigurationError(
            f"PINGFEDERATE_REQUEST_TIMEOUT must be a number, got {value!r}"
        ) from None
    if timeout <= 0:
        raise ConfigurationError(f"PINGFEDERATE_REQUEST_TIMEOUT must be positive, got {value!r}")
    return timeout


def parse_log_level(value: str | None) -> str:
    """Normalize a logging level name; empty means INFO.

    Raises:
        ConfigurationError: If the name is not a standard logging level
    """
    level = (value or "").strip().upper() or "INFO"
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(f"LOG_LEVEL must be a logging level name, got {value!r}")
    return level


def load_settings(
    *,
    instance_url: str | None = None,
    username: str | None = None,
    password: str | None = None,
    request_timeout: float | None = None,
    log_level: str | None = None,
    audit_enabled: bool | None = None,
) -> ConnectorConfig:
    """Load connector settings from environment and /run/secrets.

    Keyword arguments that are not None take precedence over the
    environment (used by the CLI for its flags).
    """
    instance_url = _require(
        "PINGFEDERATE_INSTANCE_URL", instance_url or os.environ.get("PINGFEDERATE_INSTANCE_URL")
    )
    username = _require("PINGFEDERATE_USERNAME", username or os.environ.get("PINGFEDERATE_USERNAME"))
    password = _require(
        "PINGFEDERATE_PASSWORD",
        password or _load_secret_from_file("pingfederate_password", "PINGFEDERATE_PASSWORD"),
    )

    if request_timeout is None:
        request_timeout = parse_timeout(os.environ.get("PINGFEDERATE_REQUEST_TIMEOUT", ""))
    else:
        request_timeout = parse_timeout(request_timeout)

    log_level = parse_log_level(log_level if log_level is not None else os.environ.get("LOG_LEVEL"))
    if audit_enabled is None:
        audit_enabled = os.environ.get("AUDIT_ENABLED", "true").lower() == "true"

    logger.info(
        "instance_url=%s; username=%s; password_set=%s",
        instance_url,
        username,
        bool(password),
    )

    return ConnectorConfig(
        instance_url=instance_url,
        username=username,
        password=password,
        request_timeout=request_timeout,
        log_level=log_level,
        audit_enabled=audit_enabled,
    )
