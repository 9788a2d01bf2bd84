"""PingFederate connector: wires the client into the user and role syncers."""
from __future__ import annotations
import logging
from typing import IO, List, Optional, Tuple
from urllib.parse import urlsplit

from baton_pingfederate.config.settings import ConnectorConfig
from baton_pingfederate.core.pingfederate import ConfigurationError, PingFederateClient

from baton_pingfederate.core.types import ConnectorMetadata, ResourceSyncer

from .roles import RoleSyncer
from .users import UserSyncer

logger = logging.getLogger(__name__)


def fall_back_to_https(domain: str) -> str:
    """Return ``domain`` as a URL, assuming HTTPS when no scheme is given.

    Raises:
        ConfigurationError: If the domain is empty or has no host
    """
    domain = (domain or "").strip()
    if not domain:
        raise ConfigurationError("instance-url is required")

    if "://" not in domain:
        domain = f"https://{domain}"

    parsed = urlsplit(domain)
    if not parsed.scheme or not parsed.hostname:
        raise ConfigurationError(f"invalid instance-url: {domain!r}")
    return domain.rstrip("/")


class PingFederateConnector:
    """Connector facade handed to the sync host."""

    def __init__(self, config: ConnectorConfig):
        config.validate()
        self.config = config
        self.instance_url = fall_back_to_https(config.instance_url)

        logger.debug(
            "New PingFederate connector instance_url=%s username=%s password_set=%s",
            self.instance_url,
            config.username,
            bool(config.password),
        )

        self.client = PingFederateClient(
            self.instance_url,
            config.username,
            config.password,
            timeout=config.request_timeout,
        )

    def close(self) -> None:
        """Release the shared client's transport."""
        self.client.close()

    def resource_syncers(self) -> List[ResourceSyncer]:
        """Return a syncer for each resource type synced from PingFederate."""
        return [
            UserSyncer(self.client),
            RoleSyncer(self.client),
        ]

    def asset(self, asset_ref: str) -> Tuple[str, Optional[IO[bytes]]]:
        """Assets are not supported; always returns an empty content type and no stream."""
        return "", None

    def metadata(self) -> ConnectorMetadata:
        return ConnectorMetadata(
            display_name="Ping Federate",
            description="Connector syncing PingFederate users and administrative roles",
        )

    def validate(self) -> None:
        """Configuration check hook. Credentials are not exercised here."""
        return None


def new_connector(instance_url: str, username: str, password: str) -> PingFederateConnector:
    """Build a connector from bare credentials."""
    return PingFederateConnector(
        ConnectorConfig(instance_url=instance_url, username=username, password=password)
    )
