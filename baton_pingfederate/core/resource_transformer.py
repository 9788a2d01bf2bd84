"""PingFederate → sync host resource transformations.

Usage:
    user = ResourceTransformer.account_to_user_resource(account)
    role = ResourceTransformer.role_to_resource(PingFederateRole.named("ADMINISTRATOR"))
"""
from __future__ import annotations

from baton_pingfederate.core.resource_types import RESOURCE_TYPE_ROLE, RESOURCE_TYPE_USER
from baton_pingfederate.core.types import (
    STATUS_DISABLED,
    STATUS_ENABLED,
    Resource,
    RoleTrait,
    UserEmail,
    UserTrait,
    new_role_resource,
    new_user_resource,
)
from baton_pingfederate.core.pingfederate.models import PingFederateAccount, PingFederateRole


class ResourceTransformer:
    """Converts PingFederate records into host resources."""

    @staticmethod
    def account_to_user_resource(account: PingFederateAccount) -> Resource:
        """Convert an administrative account to a user resource.

        Example:
            >>> account = PingFederateAccount(username="sam-ng", active=True)
            >>> user = ResourceTransformer.account_to_user_resource(account)
            >>> user.id.resource, user.user_trait.status
            ('sam-ng', 'STATUS_ENABLED')
        """
        status = STATUS_ENABLED if account.active else STATUS_DISABLED

        profile = {
            "username": account.username,
            "phoneNumber": account.phone_number,
            "email": account.email,
            "isAuditor": account.auditor,
            "department": account.department,
            "description": account.description,
        }

        trait = UserTrait(status=status, login=account.username, profile=profile)
        if account.email:
            trait.emails.append(UserEmail(address=account.email, is_primary=True))

        return new_user_resource(account.username, RESOURCE_TYPE_USER, account.username, trait)

    @staticmethod
    def role_to_resource(role: PingFederateRole) -> Resource:
        """Convert a role to a role resource."""
        return new_role_resource(role.name, RESOURCE_TYPE_ROLE, role.id, RoleTrait())
