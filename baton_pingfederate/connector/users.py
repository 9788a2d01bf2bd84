"""User syncer: PingFederate administrative accounts."""
from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from baton_pingfederate.core.pingfederate import AccountService, PingFederateClient
from baton_pingfederate.core.resource_transformer import ResourceTransformer
from baton_pingfederate.core.resource_types import RESOURCE_TYPE_USER
from baton_pingfederate.core.types import Entitlement, Grant, Resource, ResourceId, ResourceSyncer, ResourceType

logger = logging.getLogger(__name__)


class UserSyncer(ResourceSyncer):
    """Lists accounts as users.

    Users expose no entitlements or grants: role membership is reported from
    the role side only, so each assignment appears as a single grant.
    """

    def __init__(self, client: PingFederateClient):
        self.client = client
        self.accounts = AccountService(client)

    def resource_type(self) -> ResourceType:
        return RESOURCE_TYPE_USER

    def list(
        self, parent_resource_id: Optional[ResourceId] = None, page_token: str = ""
    ) -> Tuple[List[Resource], str]:
        """Return every account as a user resource on a single page."""
        users = self.accounts.get_users()
        logger.debug("Users.List count=%d", len(users))
        return [ResourceTransformer.account_to_user_resource(user) for user in users], ""

    def entitlements(self, resource: Resource, page_token: str = "") -> Tuple[List[Entitlement], str]:
        return [], ""

    def grants(self, resource: Resource, page_token: str = "") -> Tuple[List[Grant], str]:
        return [], ""
