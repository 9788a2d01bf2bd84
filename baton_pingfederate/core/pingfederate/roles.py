"""PingFederate administrative role operations.

PingFederate has no roles endpoint. Roles are read from, and written to, the
``roles`` list of each administrative account, except AUDITOR which lives in
the account's ``auditor`` flag.
"""
from __future__ import annotations
import logging
from typing import List

from .client import PingFederateClient
from .models import AUDITOR_ROLE, PingFederateAccount, PingFederateRole, resolve_role
from .users import AccountService

logger = logging.getLogger(__name__)


class RoleService:
    """Service for listing and assigning PingFederate administrative roles."""

    def __init__(self, client: PingFederateClient):
        """Initialize role service.

        Args:
            client: PingFederate client
        """
        self.client = client
        self.accounts = AccountService(client)

    def get_roles(self) -> List[PingFederateRole]:
        """Return every role held by at least one account, plus AUDITOR.

        Order follows first appearance across accounts. AUDITOR is appended
        last whether or not any account carries the flag.
        """
        roles: List[PingFederateRole] = []
        seen = set()
        for account in self.accounts.get_users():
            for role in account.roles:
                if role not in seen:
                    seen.add(role)
                    roles.append(PingFederateRole.named(role))

        roles.append(PingFederateRole.named(AUDITOR_ROLE))
        return roles

    def get_role_assignments(self, role_id: str) -> List[PingFederateAccount]:
        """Return the accounts holding ``role_id``.

        Membership is an exact string match against the role list, or the
        auditor flag for AUDITOR. The active flag is ignored.
        """
        role = resolve_role(role_id)
        return [account for account in self.accounts.get_users() if role.is_held_by(account)]

    def add_user_to_role(self, user_id: str, role_id: str) -> None:
        """Grant ``role_id`` to an account (read-modify-write).

        Args:
            user_id: Account username
            role_id: Role name, or AUDITOR
        """
        self._update_membership(user_id, role_id, grant=True)

    def remove_user_from_role(self, user_id: str, role_id: str) -> None:
        """Revoke ``role_id`` from an account (read-modify-write).

        Args:
            user_id: Account username
            role_id: Role name, or AUDITOR
        """
        self._update_membership(user_id, role_id, grant=False)

    def _update_membership(self, user_id: str, role_id: str, *, grant: bool) -> None:
        # No version check on the PUT: a concurrent writer's change is lost.
        role = resolve_role(role_id)
        account = self.accounts.get_user(user_id)

        changed = role.assign(account) if grant else role.revoke(account)
        if not changed:
            logger.debug(
                "role membership already up to date user=%s role=%s grant=%s",
                user_id,
                role_id,
                grant,
            )
            return

        self.accounts.update_user(user_id, account)
        logger.info(
            "%s role '%s' %s '%s'",
            "Granted" if grant else "Revoked",
            role_id,
            "to" if grant else "from",
            user_id,
        )


# ─────────────────────────────────────────────────────────────────────────────
# Standalone functions
# ─────────────────────────────────────────────────────────────────────────────
def get_roles(client: PingFederateClient) -> List[PingFederateRole]:
    """Return every role held by at least one account, plus AUDITOR."""
    return RoleService(client).get_roles()


def get_role_assignments(client: PingFederateClient, role_id: str) -> List[PingFederateAccount]:
    """Return the accounts holding ``role_id``."""
    return RoleService(client).get_role_assignments(role_id)


def add_user_to_role(client: PingFederateClient, user_id: str, role_id: str) -> None:
    """Grant ``role_id`` to an account."""
    RoleService(client).add_user_to_role(user_id, role_id)


def remove_user_from_role(client: PingFederateClient, user_id: str, role_id: str) -> None:
    """Revoke ``role_id`` from an account."""
    RoleService(client).remove_user_from_role(user_id, role_id)
