"""Role syncer: PingFederate administrative roles and their holders."""
from __future__ import annotations
import logging
from typing import List, Optional, Tuple

from baton_pingfederate.core.pingfederate import (
    InvalidPrincipalError,
    PingFederateClient,
    RoleService,
)
from baton_pingfederate.core.resource_transformer import ResourceTransformer
from baton_pingfederate.core.resource_types import RESOURCE_TYPE_ROLE, RESOURCE_TYPE_USER
from baton_pingfederate.core.types import (
    Entitlement,
    Grant,
    Resource,
    ResourceId,
    ResourceSyncer,
    ResourceType,
    new_assignment_entitlement,
    new_grant,
)

logger = logging.getLogger(__name__)

ROLE_ASSIGNMENT_ENTITLEMENT = "assigned"


class RoleSyncer(ResourceSyncer):
    """Lists roles, their ``assigned`` entitlement and the users holding it.

    Also provisions: users can be granted or revoked a role.
    """

    def __init__(self, client: PingFederateClient):
        self.client = client
        self.roles = RoleService(client)

    def resource_type(self) -> ResourceType:
        return RESOURCE_TYPE_ROLE

    def list(
        self, parent_resource_id: Optional[ResourceId] = None, page_token: str = ""
    ) -> Tuple[List[Resource], str]:
        roles = self.roles.get_roles()
        return [ResourceTransformer.role_to_resource(role) for role in roles], ""

    def entitlements(self, resource: Resource, page_token: str = "") -> Tuple[List[Entitlement], str]:
        logger.debug(
            "Roles.Entitlements display_name=%s resource=%s",
            resource.display_name,
            resource.id.resource,
        )
        entitlement = new_assignment_entitlement(
            resource,
            ROLE_ASSIGNMENT_ENTITLEMENT,
            grantable_to=[RESOURCE_TYPE_USER],
            display_name=f"{resource.display_name} User Role",
            description=f"Has the {resource.display_name} role in PingFederate",
        )
        return [entitlement], ""

    def grants(self, resource: Resource, page_token: str = "") -> Tuple[List[Grant], str]:
        assignments = self.roles.get_role_assignments(resource.id.resource)
        grants = [
            new_grant(
                resource,
                ROLE_ASSIGNMENT_ENTITLEMENT,
                ResourceId(resource_type=RESOURCE_TYPE_USER.id, resource=account.username),
            )
            for account in assignments
        ]
        return grants, ""

    def grant(self, principal: Resource, entitlement: Entitlement) -> None:
        """Give ``principal`` the role that owns ``entitlement``.

        Raises:
            InvalidPrincipalError: If the principal is not a user
        """
        if principal.id.resource_type != RESOURCE_TYPE_USER.id:
            logger.warning(
                "pingfederate-connector: only users can be granted roles principal_type=%s principal_id=%s",
                principal.id.resource_type,
                principal.id.resource,
            )
            raise InvalidPrincipalError("pingfederate-connector: only users can be granted roles")

        self.roles.add_user_to_role(principal.id.resource, entitlement.resource.id.resource)

    def revoke(self, grant: Grant) -> None:
        self.roles.remove_user_from_role(
            grant.principal.id.resource,
            grant.entitlement.resource.id.resource,
        )
